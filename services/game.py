import curses
import logging
import random
from typing import Optional

from app.state import SessionState
from app.timer import HighResTimer
from core.input_source import CursesInputSource, InputSource
from services.evaluator import evaluate
from services.keyboard_layout import KbEmulator
from services.typing_engine import Clock, Translator, TypingEngine
from ui.terminal_view import TerminalView

log = logging.getLogger(__name__)


def run_frame(config, state: SessionState, source: InputSource, translator: Optional[Translator],
              clock: Clock, rng=random) -> bool:
    """One frame of the game loop. Returns True when the session should end."""
    if state.has_lesson:
        ev = source.poll(config.poll_ms)
        if ev is not None:
            engine = TypingEngine(state, clock, translator)
            if engine.handle(ev):
                return True
    evaluate(config, state, clock, rng)
    return False


def run_session(stdscr, config, ngrams, rng: Optional[random.Random] = None) -> SessionState:
    """Drive the curses loop until the user quits; returns the final state."""
    curses.raw()
    try:
        curses.curs_set(0)
    except curses.error:
        pass

    rng = rng or random.Random(config.seed)
    state = SessionState.from_config(config, ngrams)
    clock = HighResTimer()
    clock.start()
    translator = KbEmulator(config.layout) if config.use_emulation else None
    source = CursesInputSource(stdscr)
    view = TerminalView(stdscr)

    log.info("session started: top=%d combi=%d rep=%d layout=%s",
             config.top, config.combi, config.rep, config.layout or "none")
    while True:
        view.draw(state)
        if run_frame(config, state, source, translator, clock, rng):
            break
    log.info("session ended after %d scored lessons", state.scored_lessons)
    return state
