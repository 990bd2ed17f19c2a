import logging
import random

from app.calculation import accuracy_percent, integer_mean, words_per_minute
from app.state import SessionState
from services.lesson_generator import generate_lesson

log = logging.getLogger(__name__)


def score_lesson(state: SessionState, now: float) -> None:
    """Record WPM and accuracy for the lesson that was just typed."""
    elapsed = now - state.wpm_start_time
    wpm = int(words_per_minute(state.current_typed_string, elapsed))
    acc = int(accuracy_percent(state.acc_key_hits, state.acc_key_misses))
    state.reset_counters()
    state.record_result(wpm, acc)
    state.average_wpm = integer_mean(state.wpm_history)
    state.average_accuracy = integer_mean(state.acc_history)
    log.info(
        "lesson %d: %d wpm, %d%% accuracy (avg %d wpm, %d%%)",
        state.current_lesson_number, wpm, acc, state.average_wpm, state.average_accuracy,
    )


def evaluate(config, state: SessionState, clock, rng=random) -> bool:
    """
    Score and replace the lesson once it has been typed exactly.
    Lesson 0 is the empty priming lesson and is never scored.
    Returns True when a new lesson was generated.
    """
    if not state.is_complete:
        return False
    if state.current_lesson_number > 0:
        score_lesson(state, clock.now())
    state.current_lesson_number += 1
    state.current_typed_string = ""
    state.current_lesson_string = generate_lesson(config.top, config.combi, config.rep, state.ngrams, rng)
    return True
