"""Tests for turning curses input into key events."""

import curses

import pytest

from core.events import KeyCode, KeyEvent, Modifiers
from core.input_source import CursesInputSource, decode_key


@pytest.mark.parametrize("raw, expected", [
    ("\x1b", KeyEvent.key(KeyCode.ESC)),
    ("\x7f", KeyEvent.key(KeyCode.BACKSPACE)),
    (curses.KEY_BACKSPACE, KeyEvent.key(KeyCode.BACKSPACE)),
    ("\x08", KeyEvent.ctrl("h")),
    ("\t", KeyEvent.key(KeyCode.TAB)),
    ("\n", KeyEvent.key(KeyCode.ENTER)),
    (curses.KEY_ENTER, KeyEvent.key(KeyCode.ENTER)),
    ("\x03", KeyEvent.ctrl("c")),
    ("a", KeyEvent.character("a")),
    ("A", KeyEvent.character("A", Modifiers.SHIFT)),
    (" ", KeyEvent.character(" ")),
    (curses.KEY_LEFT, KeyEvent.key(KeyCode.OTHER)),
])
def test_decode_key(raw, expected):
    assert decode_key(raw) == expected


def test_escape_prefix_means_alt():
    ev = decode_key("\x1b", "\x7f")
    assert ev.code is KeyCode.BACKSPACE
    assert ev.modifiers == Modifiers.ALT


class FakeWindow:
    def __init__(self, keys):
        self.keys = list(keys)
        self.timeouts = []

    def keypad(self, flag):
        pass

    def timeout(self, ms):
        self.timeouts.append(ms)

    def get_wch(self):
        if not self.keys:
            raise curses.error("no input")
        return self.keys.pop(0)


class TestCursesInputSource:

    def test_timeout_gives_none(self):
        src = CursesInputSource(FakeWindow([]))
        assert src.poll(16) is None

    def test_reads_one_key(self):
        win = FakeWindow(["x", "y"])
        src = CursesInputSource(win)
        assert src.poll(16) == KeyEvent.character("x")
        assert win.timeouts == [16]

    def test_escape_followed_by_key(self):
        win = FakeWindow(["\x1b", "\x7f"])
        src = CursesInputSource(win)
        ev = src.poll(16)
        assert ev == KeyEvent.key(KeyCode.BACKSPACE, Modifiers.ALT)
        assert win.timeouts == [16, 0]

    def test_lone_escape(self):
        src = CursesInputSource(FakeWindow(["\x1b"]))
        assert src.poll(16) == KeyEvent.key(KeyCode.ESC)
