import logging
import random
from typing import Protocol, Sequence

log = logging.getLogger(__name__)


class RandomSource(Protocol):
    def choice(self, seq: Sequence[str]) -> str:
        ...


def generate_lesson(top: int, combi: int, rep: int, ngrams: Sequence[str], rng: RandomSource = random) -> str:
    """
    Build one lesson from the `top` most frequent n-grams:
      - pick `combi` of them at random (repeats allowed), each followed by a space
      - repeat that chain `rep` times and strip the trailing space
    combi == 0 gives an empty string.
    """
    pool = list(ngrams[:top])
    chain = ""
    for _ in range(combi):
        chain += rng.choice(pool) + " "
    lesson = (chain * rep).rstrip()
    log.debug("generated lesson %r from a pool of %d", lesson, len(pool))
    return lesson
