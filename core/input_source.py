# core/input_source.py
from __future__ import annotations
import curses
from typing import Optional, Protocol, Union

from core.events import KeyCode, KeyEvent, Modifiers

Raw = Union[int, str]

_ESC = 27
_BACKSPACE_CODES = (127, curses.KEY_BACKSPACE)
_ENTER_CODES = (10, 13, curses.KEY_ENTER)


class InputSource(Protocol):
    def poll(self, timeout_ms: int) -> Optional[KeyEvent]:
        ...


def _code(ch: Raw) -> Optional[int]:
    if isinstance(ch, int):
        return ch
    if len(ch) == 1:
        return ord(ch)
    return None


def decode_key(ch: Raw, follow: Optional[Raw] = None) -> KeyEvent:
    """
    Map a value from curses get_wch() to a KeyEvent.
    `follow` is the key read straight after an ESC, if any; ESC+key is how
    terminals send Alt+key.
    """
    code = _code(ch)
    if code == _ESC:
        if follow is None:
            return KeyEvent.key(KeyCode.ESC)
        inner = decode_key(follow)
        return KeyEvent(inner.code, inner.char, inner.modifiers | Modifiers.ALT)
    if code in _BACKSPACE_CODES:
        return KeyEvent.key(KeyCode.BACKSPACE)
    if code == 8:
        return KeyEvent.ctrl("h")
    if code == 9:
        return KeyEvent.key(KeyCode.TAB)
    if code in _ENTER_CODES:
        return KeyEvent.key(KeyCode.ENTER)
    if code is not None and 1 <= code <= 26:
        return KeyEvent.ctrl(chr(ord("a") + code - 1))
    if isinstance(ch, str) and ch.isprintable():
        mods = Modifiers.SHIFT if ch.isupper() else Modifiers.NONE
        return KeyEvent.character(ch, mods)
    return KeyEvent.key(KeyCode.OTHER)


class CursesInputSource:
    """Polls a curses window for one key per frame."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.stdscr.keypad(True)

    def _read(self, timeout_ms: int) -> Optional[Raw]:
        self.stdscr.timeout(timeout_ms)
        try:
            return self.stdscr.get_wch()
        except curses.error:
            # no input within the timeout
            return None

    def poll(self, timeout_ms: int) -> Optional[KeyEvent]:
        ch = self._read(timeout_ms)
        if ch is None:
            return None
        follow = self._read(0) if _code(ch) == _ESC else None
        return decode_key(ch, follow)
