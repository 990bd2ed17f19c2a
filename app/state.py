from dataclasses import dataclass, field
from typing import List


@dataclass
class SessionState:
    ngrams: List[str] = field(default_factory=list)
    current_lesson_string: str = ""
    current_typed_string: str = ""
    current_lesson_number: int = 0
    wpm_start_time: float = 0.0
    acc_key_hits: int = 0
    acc_key_misses: int = 0
    wpm_history: List[int] = field(default_factory=list)
    acc_history: List[int] = field(default_factory=list)
    average_wpm: int = 0
    average_accuracy: int = 0
    succeeded_lessons: int = 0
    failed_lessons: int = 0
    need_wpm: int = 0
    need_acc: int = 0
    use_emulation: bool = False

    @classmethod
    def from_config(cls, config, ngrams: List[str]) -> "SessionState":
        return cls(
            ngrams=list(ngrams),
            need_wpm=config.need_wpm,
            need_acc=config.need_acc,
            use_emulation=config.use_emulation,
        )

    @property
    def has_lesson(self) -> bool:
        return self.current_lesson_string != ""

    @property
    def is_complete(self) -> bool:
        return self.current_typed_string == self.current_lesson_string

    @property
    def scored_lessons(self) -> int:
        return self.succeeded_lessons + self.failed_lessons

    def reset_counters(self):
        self.acc_key_hits = 0
        self.acc_key_misses = 0

    def record_result(self, wpm: int, acc: int):
        self.wpm_history.append(wpm)
        self.acc_history.append(acc)
        if wpm >= self.need_wpm and acc >= self.need_acc:
            self.succeeded_lessons += 1
        else:
            self.failed_lessons += 1
