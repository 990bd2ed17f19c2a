from typing import List


def words_per_minute(text: str, elapsed_seconds: float) -> float:
    """
    WPM = (non-space chars / 5) / minutes.
    Spaces are left out so short n-grams don't inflate the score.
    """
    s = max(1e-6, elapsed_seconds)
    chars = len(text.replace(" ", ""))
    return (chars / 5.0) / (s / 60.0)


def accuracy_percent(hits: int, misses: int) -> float:
    total = hits + misses
    if total == 0:
        return 100.0
    return 100.0 * hits / total


def integer_mean(values: List[int]) -> int:
    if not values:
        return 0
    return sum(values) // len(values)
