# termcli

Pieces for building interactive command line interfaces in Python. The
package has no dependencies outside the standard library.

## Modules

- `termcli.fromstring`: strict conversion of command words into typed
  values. `from_string(text, target)` accepts `str`, `bool`, `int`,
  `float`, `type(None)`, an `IntType` member, or any callable taking a
  string. `parse_integer(text, int_type)` checks the value against the
  range of an `IntType` (`SIGNED_CHAR`, `SHORT`, `INT`, `LONG`,
  `LONG_LONG` and their `UNSIGNED_` forms); `parse_bool` accepts
  `true`/`false`/`1`/`0`; `parse_char` accepts exactly one character;
  `parse_float` rejects whitespace and trailing text. Bad input raises
  `BadConversion`, a subclass of `ValueError`.
- `termcli.commonprefix`: `common_prefix(strings)` returns the longest
  prefix shared by all strings, for tab completion. An empty sequence
  raises `ValueError`.
- `termcli.filehistory`: `FileHistoryStorage(file_name, max_size=1000)`
  keeps a command history in a text file, one command per line, with
  `store(commands)`, `commands()` and `clear()`. Only the newest
  `max_size` commands are kept.
- `termcli.color`: ANSI codes (`Style`, `Fg`, `Bg`, `FgBright`,
  `BgBright`, `sgr(value)`), `supports_color(term)` for a `$TERM` value,
  and a global colour profile: `set_color()`, `set_no_color()`,
  `color_enabled()`, and the sequences `before_prompt()`, `after_prompt()`,
  `before_input()`, `after_input()` (empty strings while colours are off).
- `termcli.loopscheduler`: `LoopScheduler`, a thread-safe FIFO task queue.
  `post(task)` from any thread; `run()` executes tasks until `stop()`;
  `exec_one()` waits for and runs one task; `poll_one()` runs one task
  without waiting. It is also a context manager that stops on exit.
- `termcli.inputdevice`: `KeyType` and `InputDevice`, which posts each key
  event to a scheduler; the scheduler then calls the handler set with
  `register(handler)` as `handler(key_type, char)`.
- `termcli.terminal`: `Terminal(out)`, a line editor. `keypressed(key_type,
  char)` edits the current line, echoes the change to `out` and returns a
  `(Symbol, text)` pair: `Symbol.COMMAND` with the finished line on return,
  `Symbol.UP`/`Symbol.DOWN` for history moves, `Symbol.TAB`, `Symbol.EOF`,
  or `Symbol.NOTHING`. `set_line(line)` redraws the line; `line` and
  `position` show its state.
- `termcli.keyboard`: `decode_keys(data)` yields `(KeyType, char)` events
  for raw terminal bytes. `TerminalKeyboard(scheduler, fd=None)` reads
  keys from a POSIX terminal (standard input by default) on a background
  thread, with canonical mode and echo turned off while it runs; use
  `start()`/`close()` or a `with` block.
- `termcli.telnet`: `TelnetNegotiator` separates user data from telnet
  commands and answers option negotiation without doing any I/O:
  `handshake()` gives the bytes to send on connect, `feed(data)` returns
  `(user_data, reply)`, `encode(text)` turns newlines into CR LF.
  `TelnetKeyDecoder.feed(byte)` turns a client's user data into key
  events. `TelnetCommand` and `TelnetOption` name the protocol bytes.

## Install

    pip install .

## Example

    import io
    from termcli.fromstring import IntType, from_string
    from termcli.inputdevice import KeyType
    from termcli.loopscheduler import LoopScheduler
    from termcli.terminal import Symbol, Terminal

    assert from_string("42", IntType.UNSIGNED_CHAR) == 42

    out = io.StringIO()
    term = Terminal(out)
    for ch in "hello":
        term.keypressed(KeyType.ASCII, ch)
    symbol, line = term.keypressed(KeyType.RET, " ")
    assert symbol is Symbol.COMMAND and line == "hello"

    scheduler = LoopScheduler()
    scheduler.post(lambda: print("ran"))
    scheduler.poll_one()

## What it does not do

The package provides building blocks only. It has no menus, command
registration or dispatch, no built-in `help` or `exit` commands, and no
session object that ties a `Terminal` to a keyboard, history and commands.
It opens no network sockets: there is no telnet server, only the protocol
handling in `termcli.telnet` for use with a connection you manage. It
installs no command-line program.

## Tests

    pip install ".[test]"
    pytest