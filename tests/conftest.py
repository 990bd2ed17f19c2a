"""Shared fakes for the game-loop tests."""

import pytest

from app.config import Config
from app.state import SessionState


class FakeClock:
    def __init__(self, t: float = 0.0):
        self.t = t

    def now(self) -> float:
        return self.t

    def advance(self, seconds: float):
        self.t += seconds


class ScriptedRandom:
    """choice() returns pool items by the scripted indices, in order."""

    def __init__(self, indices):
        self.indices = list(indices)
        self.calls = 0

    def choice(self, seq):
        i = self.indices[self.calls % len(self.indices)]
        self.calls += 1
        return seq[i]


class ScriptedSource:
    """Input source that hands out queued events, then None."""

    def __init__(self, events=()):
        self.events = list(events)
        self.polls = 0

    def push(self, *events):
        self.events.extend(events)

    def poll(self, timeout_ms):
        self.polls += 1
        return self.events.pop(0) if self.events else None


@pytest.fixture
def clock():
    return FakeClock(100.0)


@pytest.fixture
def config():
    return Config(top=10, combi=2, rep=1, need_wpm=30, need_acc=90)


@pytest.fixture
def state(config):
    return SessionState.from_config(config, ["the", "and", "ing"])
