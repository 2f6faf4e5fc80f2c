from __future__ import annotations

import threading
from typing import List, Optional, Union

try:
    from .answer_evaluator import answer_choices, choice_names, evaluate, feedback_message
    from .challenge_generator import Challenge, ChallengeGenerator, parse_mode
    from .constants import AUTO_ADVANCE, AUTO_ADVANCE_MS, DEFAULT_MODE
    from .errors import InvalidState
    from .logger_config import logger
    from .models import AnswerResult, Mode, PlaybackStep, Score, SessionState
    from .playback import plan
    from .score_tracker import ScoreTracker
except ImportError:
    from answer_evaluator import answer_choices, choice_names, evaluate, feedback_message
    from challenge_generator import Challenge, ChallengeGenerator, parse_mode
    from constants import AUTO_ADVANCE, AUTO_ADVANCE_MS, DEFAULT_MODE
    from errors import InvalidState
    from logger_config import logger
    from models import AnswerResult, Mode, PlaybackStep, Score, SessionState
    from playback import plan
    from score_tracker import ScoreTracker


class DrillSession:
    """Owns the mode, the current challenge and the score for one user.

    The engine modules stay pure; this is the only place their results are
    stored between requests. Every state change holds the session lock, so
    concurrent requests cannot score one challenge twice.
    """

    def __init__(
        self,
        generator: Optional[ChallengeGenerator] = None,
        mode: Union[Mode, str] = DEFAULT_MODE,
        auto_advance: bool = AUTO_ADVANCE,
    ) -> None:
        self.generator = generator or ChallengeGenerator()
        self.mode = parse_mode(mode)
        self.auto_advance = auto_advance
        self.tracker = ScoreTracker()
        self.challenge: Optional[Challenge] = None
        self.message = ""
        self._lock = threading.RLock()

    @property
    def score(self) -> Score:
        return self.tracker.score

    def set_mode(self, mode: Union[Mode, str]) -> Challenge:
        with self._lock:
            self.mode = parse_mode(mode)
            logger.info("Mode set to %s", self.mode.value)
            return self.next_challenge()

    def next_challenge(self) -> Challenge:
        with self._lock:
            self.message = ""
            self.challenge = self.generator.generate(self.mode)
            logger.info("New %s challenge, root %s", self.challenge.type, self.challenge.root.name)
            return self.challenge

    def play(self) -> List[PlaybackStep]:
        with self._lock:
            return plan(self.next_challenge())

    def replay_plan(self) -> List[PlaybackStep]:
        challenge = self.challenge
        if challenge is None:
            raise InvalidState("No active challenge to replay")
        return plan(challenge)

    def answer(self, text: str) -> AnswerResult:
        with self._lock:
            verdict = evaluate(self.challenge, text)
            score = self.tracker.record(verdict.is_correct)
            self.message = feedback_message(verdict)
            logger.info(
                "Answer %r -> %s (score %d/%d)",
                text,
                "correct" if verdict.is_correct else "wrong",
                score.correct,
                score.total,
            )
            next_in_ms = None
            if self.auto_advance:
                message = self.message
                self.next_challenge()
                self.message = message
                next_in_ms = AUTO_ADVANCE_MS
            return AnswerResult(verdict=verdict, score=score, message=self.message, next_in_ms=next_in_ms)

    def reset_score(self) -> Score:
        with self._lock:
            self.message = ""
            logger.info("Score reset")
            return self.tracker.reset()

    def snapshot(self) -> SessionState:
        with self._lock:
            challenge = self.challenge
            return SessionState(
                mode=self.mode,
                challenge_type=challenge.type if challenge else None,
                hint=challenge.root.name if challenge else None,
                choices=answer_choices(challenge),
                choice_names=choice_names(challenge),
                score=self.score,
                message=self.message,
            )
