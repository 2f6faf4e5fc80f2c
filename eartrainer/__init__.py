from __future__ import annotations

from .answer_evaluator import answer_choices, choice_names, correct_label, evaluate, feedback_message
from .challenge_generator import ChallengeGenerator, generate, parse_mode
from .errors import EarTrainerError, InvalidRange, InvalidState, UnknownLabel, UnknownMode
from .models import (
    ChordChallenge,
    IntervalChallenge,
    Mode,
    Pitch,
    PlaybackStep,
    ScaleChallenge,
    Score,
    Verdict,
)
from .pitch_alphabet import DEFAULT_ALPHABET, PitchAlphabet
from .playback import PlaybackRunner, execute_plan, plan
from .score_tracker import ScoreTracker
from .session import DrillSession

__all__ = [
    "ChallengeGenerator",
    "ChordChallenge",
    "DEFAULT_ALPHABET",
    "DrillSession",
    "EarTrainerError",
    "IntervalChallenge",
    "InvalidRange",
    "InvalidState",
    "Mode",
    "Pitch",
    "PitchAlphabet",
    "PlaybackRunner",
    "PlaybackStep",
    "ScaleChallenge",
    "Score",
    "ScoreTracker",
    "UnknownLabel",
    "UnknownMode",
    "Verdict",
    "answer_choices",
    "choice_names",
    "correct_label",
    "evaluate",
    "execute_plan",
    "feedback_message",
    "generate",
    "parse_mode",
    "plan",
]
