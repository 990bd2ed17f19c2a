from PySide6.QtCore import QElapsedTimer


class HighResTimer:
    """Monotonic session clock; now() is seconds since start(), used for wpm_start_time."""

    def __init__(self):
        self.t = QElapsedTimer()

    def start(self):
        self.t.start()

    def elapsed_sec(self) -> float:
        return max(0.0, self.t.elapsed() / 1000.0)

    # clock interface used by the game loop
    def now(self) -> float:
        if not self.t.isValid():
            self.t.start()
        return self.elapsed_sec()
