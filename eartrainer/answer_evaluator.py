from __future__ import annotations

from typing import Dict, List, Optional

try:
    from .constants import FEEDBACK_CORRECT, FEEDBACK_WRONG
    from .errors import InvalidState, UnknownLabel
    from .models import Challenge, ChordChallenge, IntervalChallenge, ScaleChallenge, Verdict
    from .music_theory import CHORD_NAMES, INTERVAL_NAMES, SCALE_NAMES, chord_types, interval_labels, scale_types
except ImportError:
    from constants import FEEDBACK_CORRECT, FEEDBACK_WRONG
    from errors import InvalidState, UnknownLabel
    from models import Challenge, ChordChallenge, IntervalChallenge, ScaleChallenge, Verdict
    from music_theory import CHORD_NAMES, INTERVAL_NAMES, SCALE_NAMES, chord_types, interval_labels, scale_types


def chord_answer(root_name: str, chord_type: str) -> str:
    return f"{root_name} {chord_type}"


def correct_label(challenge: Challenge) -> str:
    if isinstance(challenge, IntervalChallenge):
        return challenge.interval_label
    if isinstance(challenge, ChordChallenge):
        return chord_answer(challenge.root.name, challenge.chord_type)
    if isinstance(challenge, ScaleChallenge):
        return challenge.scale_type
    raise UnknownLabel(f"Unsupported challenge: {type(challenge).__name__}")


def evaluate(challenge: Optional[Challenge], answer: str) -> Verdict:
    """Score one answer. Chord answers must read "<root> <type>", e.g. "C4 maj".

    Answers outside the choices offered for the challenge are rejected, not
    scored as wrong.
    """
    if challenge is None:
        raise InvalidState("No active challenge to answer")
    if answer not in answer_choices(challenge):
        raise UnknownLabel(f"Not an answer for a {challenge.type} challenge: {answer!r}")
    expected = correct_label(challenge)
    return Verdict(is_correct=answer == expected, correct_label=expected)


def answer_choices(challenge: Optional[Challenge]) -> List[str]:
    if challenge is None:
        return []
    if isinstance(challenge, IntervalChallenge):
        return interval_labels()
    if isinstance(challenge, ChordChallenge):
        return [chord_answer(challenge.root.name, chord_type) for chord_type in chord_types()]
    if isinstance(challenge, ScaleChallenge):
        return scale_types()
    raise UnknownLabel(f"Unsupported challenge: {type(challenge).__name__}")


def feedback_message(verdict: Verdict) -> str:
    if verdict.is_correct:
        return FEEDBACK_CORRECT
    return FEEDBACK_WRONG.format(label=verdict.correct_label)


def choice_names(challenge: Optional[Challenge]) -> Dict[str, str]:
    if challenge is None:
        return {}
    if isinstance(challenge, IntervalChallenge):
        return {label: INTERVAL_NAMES[label] for label in interval_labels()}
    if isinstance(challenge, ChordChallenge):
        return {
            chord_answer(challenge.root.name, chord_type): f"{challenge.root.name} {CHORD_NAMES[chord_type]}"
            for chord_type in chord_types()
        }
    return {scale_type: SCALE_NAMES[scale_type] for scale_type in scale_types()}
