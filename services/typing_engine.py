from typing import Callable, List, Optional, Protocol, Tuple

from app.state import SessionState
from core.events import KeyCode, KeyEvent, KeyKind, Modifiers


class Clock(Protocol):
    def now(self) -> float:
        ...


class Translator(Protocol):
    def translate(self, ch: str) -> Optional[str]:
        ...


def _is_quit(ev: KeyEvent) -> bool:
    return ev.code is KeyCode.ESC or ev.is_char("c", Modifiers.CONTROL)


def _is_delete_word(ev: KeyEvent) -> bool:
    return (ev.code is KeyCode.BACKSPACE and ev.modifiers == Modifiers.ALT) or ev.is_char("h", Modifiers.CONTROL)


def delete_last_word(typed: str) -> str:
    """
    Cut back to just after the nearest space before the last character.
    The last character itself is skipped, so "cat dog " becomes "cat ".
    """
    if not typed:
        return typed
    cut = typed.rfind(" ", 0, len(typed) - 1)
    return typed[:cut + 1]


class TypingEngine:
    """Applies one key event per frame to the session's typed string."""

    def __init__(self, state: SessionState, clock: Clock, translator: Optional[Translator] = None):
        self.state = state
        self.clock = clock
        self.translator = translator
        # first match wins
        self.rules: List[Tuple[Callable[[KeyEvent], bool], Callable[[KeyEvent], bool]]] = [
            (lambda ev: ev.kind is not KeyKind.PRESS, self._ignore),
            (_is_quit, self._quit),
            (_is_delete_word, self._delete_word),
            (lambda ev: ev.code is KeyCode.TAB, self._clear),
            (lambda ev: ev.code is KeyCode.BACKSPACE, self._backspace),
            (lambda ev: ev.code is KeyCode.ENTER, self._enter),
            (lambda ev: ev.code is KeyCode.CHAR and bool(ev.char), self._insert),
        ]

    def handle(self, ev: KeyEvent) -> bool:
        """Returns True when the session should end."""
        for matches, action in self.rules:
            if matches(ev):
                return action(ev)
        return False

    def _ignore(self, ev: KeyEvent) -> bool:
        return False

    def _quit(self, ev: KeyEvent) -> bool:
        return True

    def _delete_word(self, ev: KeyEvent) -> bool:
        self.state.current_typed_string = delete_last_word(self.state.current_typed_string)
        return False

    def _clear(self, ev: KeyEvent) -> bool:
        self.state.current_typed_string = ""
        return False

    def _backspace(self, ev: KeyEvent) -> bool:
        self.state.current_typed_string = self.state.current_typed_string[:-1]
        return False

    def _enter(self, ev: KeyEvent) -> bool:
        # not length-capped, unlike ordinary characters
        self.state.current_typed_string += " "
        return False

    def _insert(self, ev: KeyEvent) -> bool:
        s = self.state
        ch = ev.char
        if s.use_emulation and self.translator is not None:
            ch = self.translator.translate(ch) or ch
        if not (ch.isalpha() or ch == " "):
            return False
        if len(s.current_typed_string) >= len(s.current_lesson_string):
            return False

        if not s.current_typed_string:
            s.wpm_start_time = self.clock.now()
        s.current_typed_string += ch
        s.acc_key_hits += 1
        pos = len(s.current_typed_string) - 1
        if s.current_lesson_string[pos] != ch:
            s.acc_key_misses += 1
        return False
