# core/events.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, Flag, auto
from typing import Optional


class KeyCode(Enum):
    CHAR = auto()
    ESC = auto()
    BACKSPACE = auto()
    TAB = auto()
    ENTER = auto()
    OTHER = auto()


class KeyKind(Enum):
    PRESS = auto()
    REPEAT = auto()
    RELEASE = auto()


class Modifiers(Flag):
    NONE = 0
    SHIFT = auto()
    CONTROL = auto()
    ALT = auto()


@dataclass(frozen=True)
class KeyEvent:
    code: KeyCode
    char: Optional[str] = None
    modifiers: Modifiers = Modifiers.NONE
    kind: KeyKind = KeyKind.PRESS

    @classmethod
    def key(cls, code: KeyCode, modifiers: Modifiers = Modifiers.NONE) -> "KeyEvent":
        return cls(code, None, modifiers)

    @classmethod
    def character(cls, ch: str, modifiers: Modifiers = Modifiers.NONE) -> "KeyEvent":
        return cls(KeyCode.CHAR, ch, modifiers)

    @classmethod
    def ctrl(cls, ch: str) -> "KeyEvent":
        return cls(KeyCode.CHAR, ch, Modifiers.CONTROL)

    def is_char(self, ch: str, modifiers: Modifiers) -> bool:
        return self.code is KeyCode.CHAR and self.char == ch and self.modifiers == modifiers
