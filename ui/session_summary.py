# ui/session_summary.py
from app.state import SessionState


def format_summary(state: SessionState) -> str:
    scored = state.scored_lessons
    lines = ["=== Session Summary ==="]
    if scored == 0:
        lines.append("No lessons completed.")
        return "\n".join(lines)
    lines += [
        f"Lessons completed : {scored}",
        f"Passed / failed   : {state.succeeded_lessons} / {state.failed_lessons}",
        f"Average WPM       : {state.average_wpm}  (target {state.need_wpm})",
        f"Average accuracy  : {state.average_accuracy}%  (target {state.need_acc}%)",
        f"Best WPM          : {max(state.wpm_history)}",
        "WPM per lesson    : " + " ".join(str(w) for w in state.wpm_history),
    ]
    return "\n".join(lines)
