from __future__ import annotations

try:
    from .models import Score
except ImportError:
    from models import Score


class ScoreTracker:
    def __init__(self) -> None:
        self._score = Score()

    @property
    def score(self) -> Score:
        return self._score

    def record(self, is_correct: bool) -> Score:
        self._score = Score(
            correct=self._score.correct + (1 if is_correct else 0),
            total=self._score.total + 1,
        )
        return self._score

    def reset(self) -> Score:
        self._score = Score()
        return self._score
