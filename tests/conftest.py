import itertools
from datetime import datetime, timezone

import pytest


class ScriptedRng:
    """Uniform source that walks a fixed list of fractions of [low, high]."""

    def __init__(self, fractions):
        self._fractions = itertools.cycle(fractions)
        self.calls = 0

    def uniform(self, low, high):
        self.calls += 1
        return low + next(self._fractions) * (high - low)


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def fixed_now():
    # 2025-10-07 12:34:00 UTC
    return int(datetime(2025, 10, 7, 12, 34, tzinfo=timezone.utc).timestamp() * 1000)
