from __future__ import annotations

import random
from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

RandomSource = Callable[[], float]

default_random_source: RandomSource = random.random


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def choose(items: Sequence[T], random_source: RandomSource = default_random_source) -> T:
    if not items:
        raise IndexError("Cannot choose from an empty sequence")
    index = int(random_source() * len(items))
    # guards against sources that return exactly 1.0
    return items[clamp(index, 0, len(items) - 1)]
