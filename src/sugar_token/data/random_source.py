from __future__ import annotations
from typing import Protocol

import numpy as np


class UniformSource(Protocol):
    """Anything exposing ``uniform(low, high)``.

    Both ``numpy.random.Generator`` and ``random.Random`` qualify, so tests
    can pass a seeded generator or a scripted stand-in.
    """

    def uniform(self, low: float, high: float) -> float: ...


def make_rng(seed: int | None = None) -> np.random.Generator:
    return np.random.default_rng(seed)
