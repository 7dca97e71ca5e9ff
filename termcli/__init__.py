"""Building blocks for interactive command line interfaces: typed argument
conversion, history storage, colours, scheduling, line editing, key decoding
and telnet negotiation."""

__version__ = "0.1.0"

__all__ = [
    "color",
    "commonprefix",
    "filehistory",
    "fromstring",
    "inputdevice",
    "keyboard",
    "loopscheduler",
    "telnet",
    "terminal",
]