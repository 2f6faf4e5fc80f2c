"""Scripted random sources for deterministic challenge generation."""

from typing import Callable, Iterable, List


def pick(index: int, size: int) -> float:
    """Random value that makes ``choose`` land on ``index`` of ``size`` items."""
    return (index + 0.5) / size


def scripted_source(values: Iterable[float]) -> Callable[[], float]:
    """Random source replaying ``values`` in order, cycling when exhausted."""
    script: List[float] = list(values)
    state = {"i": 0}

    def source() -> float:
        value = script[state["i"] % len(script)]
        state["i"] += 1
        return value

    return source
