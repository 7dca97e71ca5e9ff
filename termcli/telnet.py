"""Telnet option negotiation and key decoding for remote line sessions."""

from __future__ import annotations

import enum
import logging
from typing import Iterable, Optional

from termcli.inputdevice import KeyType

_log = logging.getLogger(__name__)

Key = tuple[KeyType, str]


class TelnetCommand(enum.IntEnum):
    """Telnet command bytes that may follow IAC."""

    SE = 0xF0
    NOP = 0xF1
    DATA_MARK = 0xF2
    BREAK = 0xF3
    INTERRUPT_PROCESS = 0xF4
    ABORT_OUTPUT = 0xF5
    ARE_YOU_THERE = 0xF6
    ERASE_CHARACTER = 0xF7
    ERASE_LINE = 0xF8
    GO_AHEAD = 0xF9
    SB = 0xFA
    WILL = 0xFB
    WONT = 0xFC
    DO = 0xFD
    DONT = 0xFE
    IAC = 0xFF


class TelnetOption(enum.IntEnum):
    """Telnet options this server knows about."""

    ECHO = 0x01
    SUPPRESS_GO_AHEAD = 0x03
    TERMINAL_TYPE = 0x18
    NEGOTIATE_ABOUT_WIN_SIZE = 0x1F
    TERMINAL_SPEED = 0x20
    LINEMODE = 0x22
    NEW_ENV_OPTION = 0x27


class _State(enum.Enum):
    DATA = enum.auto()
    SUB = enum.auto()
    WAIT_WILL = enum.auto()
    WAIT_WONT = enum.auto()
    WAIT_DO = enum.auto()
    WAIT_DONT = enum.auto()


_RESETTING_COMMANDS = frozenset(
    {
        TelnetCommand.DATA_MARK,
        TelnetCommand.BREAK,
        TelnetCommand.INTERRUPT_PROCESS,
        TelnetCommand.ABORT_OUTPUT,
        TelnetCommand.ARE_YOU_THERE,
        TelnetCommand.ERASE_CHARACTER,
        TelnetCommand.ERASE_LINE,
        TelnetCommand.GO_AHEAD,
        TelnetCommand.NOP,
    }
)

_WAIT_STATES = {
    TelnetCommand.WILL: _State.WAIT_WILL,
    TelnetCommand.WONT: _State.WAIT_WONT,
    TelnetCommand.DO: _State.WAIT_DO,
    TelnetCommand.DONT: _State.WAIT_DONT,
}


def _iac(action: int, option: int) -> bytes:
    return bytes((TelnetCommand.IAC, action, option))


class TelnetNegotiator:
    """Separates user data from telnet commands and answers negotiations.

    The negotiator does no I/O: :meth:`feed` returns the user data found in
    the received bytes together with the bytes to send back to the peer.
    """

    def __init__(self) -> None:
        self._state = _State.DATA
        self._escape = False

    def handshake(self) -> bytes:
        """Bytes to send as soon as a client connects."""
        return (
            _iac(TelnetCommand.DO, TelnetOption.LINEMODE)
            + bytes(
                (
                    TelnetCommand.IAC,
                    TelnetCommand.SB,
                    TelnetOption.LINEMODE,
                    0x01,
                    0x00,
                    TelnetCommand.IAC,
                    TelnetCommand.SE,
                )
            )
            + _iac(TelnetCommand.WILL, TelnetOption.ECHO)
        )

    def encode(self, text: str) -> str:
        """Prepare outgoing text: every newline becomes CR LF."""
        return text.replace("\n", "\r\n")

    def feed(self, data: Iterable[int]) -> tuple[bytes, bytes]:
        """Consume received bytes; return ``(user_data, reply)``."""
        payload = bytearray()
        reply = bytearray()
        for byte in data:
            if self._escape:
                self._escape = False
                if byte == TelnetCommand.IAC:
                    self._data(byte, payload, reply)
                else:
                    self._command(byte)
            elif byte == TelnetCommand.IAC:
                self._escape = True
            else:
                self._data(byte, payload, reply)
        return bytes(payload), bytes(reply)

    def _data(self, byte: int, payload: bytearray, reply: bytearray) -> None:
        state = self._state
        if state is _State.DATA:
            payload.append(byte)
            return
        if state is _State.SUB:
            return
        if state is _State.WAIT_WILL:
            reply += self._rx_will(byte)
        elif state is _State.WAIT_DO:
            reply += self._rx_do(byte)
        self._state = _State.DATA

    def _command(self, byte: int) -> None:
        if byte == TelnetCommand.SE:
            if self._state is _State.SUB:
                self._state = _State.DATA
            else:
                _log.warning("received SE when not in sub state")
        elif byte in _RESETTING_COMMANDS:
            self._state = _State.DATA
        elif byte == TelnetCommand.SB:
            if self._state is not _State.SUB:
                self._state = _State.SUB
            else:
                _log.warning("received SB when already in sub state")
        elif byte in _WAIT_STATES:
            self._state = _WAIT_STATES[TelnetCommand(byte)]

    @staticmethod
    def _rx_will(option: int) -> bytes:
        if option == TelnetOption.SUPPRESS_GO_AHEAD:
            return _iac(TelnetCommand.WILL, TelnetOption.SUPPRESS_GO_AHEAD)
        if option == TelnetOption.NEGOTIATE_ABOUT_WIN_SIZE:
            return _iac(TelnetCommand.DO, TelnetOption.NEGOTIATE_ABOUT_WIN_SIZE)
        return _iac(TelnetCommand.DONT, option)

    @staticmethod
    def _rx_do(option: int) -> bytes:
        if option == TelnetOption.ECHO:
            return _iac(TelnetCommand.DO, TelnetOption.ECHO)
        if option == TelnetOption.SUPPRESS_GO_AHEAD:
            return _iac(TelnetCommand.WILL, TelnetOption.SUPPRESS_GO_AHEAD)
        return _iac(TelnetCommand.WONT, option)


class _Step(enum.Enum):
    START = enum.auto()
    ESCAPE = enum.auto()
    CSI = enum.auto()
    TILDE = enum.auto()
    WAIT_NUL = enum.auto()


_CSI_KEYS = {
    65: KeyType.UP,
    66: KeyType.DOWN,
    68: KeyType.LEFT,
    67: KeyType.RIGHT,
    70: KeyType.END,
    72: KeyType.HOME,
}


class TelnetKeyDecoder:
    """Turns the user data of a telnet client into key events, byte by byte."""

    def __init__(self) -> None:
        self._step = _Step.START

    def feed(self, byte: int) -> Optional[Key]:
        """Consume one byte; return a ``(key_type, char)`` event or None."""
        step = self._step
        if step is _Step.START:
            # 0xFF is EOF when read as a signed char.
            if byte in (0xFF, 4):
                return KeyType.EOF, " "
            if byte in (8, 127):
                return KeyType.BACKSPACE, " "
            if byte == 27:
                self._step = _Step.ESCAPE
                return None
            if byte == 13:
                self._step = _Step.WAIT_NUL
                return None
            return KeyType.ASCII, chr(byte)
        if step is _Step.ESCAPE:
            if byte == 91:
                self._step = _Step.CSI
                return None
            self._step = _Step.START
            return KeyType.IGNORED, " "
        if step is _Step.CSI:
            key = _CSI_KEYS.get(byte)
            if key is None:
                self._step = _Step.TILDE
                return None
            self._step = _Step.START
            return key, " "
        self._step = _Step.START
        if step is _Step.TILDE:
            return (KeyType.CANC if byte == 126 else KeyType.IGNORED), " "
        return (KeyType.RET if byte in (0, 10) else KeyType.IGNORED), " "