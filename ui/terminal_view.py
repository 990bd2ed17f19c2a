# ui/terminal_view.py
import curses
from typing import List

from app.state import SessionState

OK, ERR, TODO, EXTRA = "ok", "err", "todo", "extra"

HELP = "Esc/Ctrl+C quit | Tab restart lesson | Alt+Backspace/Ctrl+H delete word | Enter = space"


def char_states(lesson: str, typed: str) -> List[str]:
    """Per-position status for colouring; typed text past the lesson end is EXTRA."""
    out = []
    for i in range(max(len(lesson), len(typed))):
        if i >= len(lesson):
            out.append(EXTRA)
        elif i >= len(typed):
            out.append(TODO)
        else:
            out.append(OK if typed[i] == lesson[i] else ERR)
    return out


class TerminalView:
    COLOR_OK = 1
    COLOR_ERR = 2
    COLOR_DIM = 3
    COLOR_INFO = 4

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self._colors = False
        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            curses.init_pair(self.COLOR_OK, curses.COLOR_GREEN, -1)
            curses.init_pair(self.COLOR_ERR, curses.COLOR_RED, -1)
            curses.init_pair(self.COLOR_DIM, curses.COLOR_CYAN, -1)
            curses.init_pair(self.COLOR_INFO, curses.COLOR_YELLOW, -1)
            self._colors = True

    def _attr(self, pair: int, extra: int = 0) -> int:
        return (curses.color_pair(pair) if self._colors else 0) | extra

    def _put(self, y: int, x: int, text: str, attr: int = 0):
        maxy, maxx = self.stdscr.getmaxyx()
        if y >= maxy or x >= maxx - 1:
            return
        try:
            self.stdscr.addstr(y, x, text[: maxx - 1 - x], attr)
        except curses.error:
            pass

    def draw(self, state: SessionState):
        self.stdscr.erase()
        maxy, maxx = self.stdscr.getmaxyx()
        info = (
            f"Lesson {state.current_lesson_number}  |  avg {state.average_wpm} wpm  "
            f"{state.average_accuracy}% acc  |  passed {state.succeeded_lessons}  "
            f"failed {state.failed_lessons}  |  target {state.need_wpm} wpm {state.need_acc}%"
        )
        self._put(0, 0, info, self._attr(self.COLOR_INFO))
        if state.wpm_history:
            last = f"last: {state.wpm_history[-1]} wpm, {state.acc_history[-1]}%"
            self._put(1, 0, last, self._attr(self.COLOR_DIM))

        width = max(1, maxx - 4)
        lesson = state.current_lesson_string
        typed = state.current_typed_string
        styles = {
            OK: self._attr(self.COLOR_OK),
            ERR: self._attr(self.COLOR_ERR, curses.A_UNDERLINE),
            TODO: self._attr(self.COLOR_DIM),
            EXTRA: self._attr(self.COLOR_ERR, curses.A_REVERSE),
        }
        for i, status in enumerate(char_states(lesson, typed)):
            ch = lesson[i] if i < len(lesson) else typed[i]
            attr = styles[status]
            if i == len(typed):
                attr |= curses.A_REVERSE
            self._put(3 + i // width, 2 + i % width, ch, attr)

        self._put(maxy - 1, 0, HELP, self._attr(self.COLOR_DIM))
        self.stdscr.refresh()
