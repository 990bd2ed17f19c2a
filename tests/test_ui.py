from app.state import SessionState
from ui.session_summary import format_summary
from ui.terminal_view import ERR, EXTRA, OK, TODO, char_states


def test_char_states():
    assert char_states("cat", "cx") == [OK, ERR, TODO]
    assert char_states("ab", "ab ") == [OK, OK, EXTRA]
    assert char_states("", "") == []


def test_summary_empty():
    assert "No lessons completed." in format_summary(SessionState())


def test_summary():
    s = SessionState(need_wpm=30, need_acc=90, wpm_history=[20, 40], acc_history=[90, 100],
                     average_wpm=30, average_accuracy=95, succeeded_lessons=1, failed_lessons=1)
    text = format_summary(s)
    assert "Lessons completed : 2" in text
    assert "Passed / failed   : 1 / 1" in text
    assert "Best WPM          : 40" in text
