from __future__ import annotations

from enum import Enum
from typing import Annotated, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

try:
    from .constants import MODE_CHORD, MODE_INTERVAL, MODE_SCALE
    from .music_theory import CHORD_FORMULAS, INTERVAL_SEMITONES, SCALE_STEPS
except ImportError:
    from constants import MODE_CHORD, MODE_INTERVAL, MODE_SCALE
    from music_theory import CHORD_FORMULAS, INTERVAL_SEMITONES, SCALE_STEPS


class Mode(str, Enum):
    INTERVAL = MODE_INTERVAL
    CHORD = MODE_CHORD
    SCALE = MODE_SCALE


class FrozenModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class Pitch(FrozenModel):
    index: int = Field(ge=0)
    name: str


class IntervalChallenge(FrozenModel):
    type: Literal["interval"] = "interval"
    root: Pitch
    interval_label: str
    second: Pitch

    @field_validator("interval_label")
    @classmethod
    def check_interval_label(cls, value: str) -> str:
        if value not in INTERVAL_SEMITONES:
            raise ValueError(f"Unknown interval label: {value!r}")
        return value


class ChordChallenge(FrozenModel):
    type: Literal["chord"] = "chord"
    root: Pitch
    chord_type: str
    notes: Tuple[Pitch, ...]

    @field_validator("chord_type")
    @classmethod
    def check_chord_type(cls, value: str) -> str:
        if value not in CHORD_FORMULAS:
            raise ValueError(f"Unknown chord type: {value!r}")
        return value


class ScaleChallenge(FrozenModel):
    type: Literal["scale"] = "scale"
    root: Pitch
    scale_type: str
    notes: Tuple[Pitch, ...]

    @field_validator("scale_type")
    @classmethod
    def check_scale_type(cls, value: str) -> str:
        if value not in SCALE_STEPS:
            raise ValueError(f"Unknown scale type: {value!r}")
        return value


Challenge = Annotated[
    Union[IntervalChallenge, ChordChallenge, ScaleChallenge],
    Field(discriminator="type"),
]


class Verdict(FrozenModel):
    is_correct: bool
    correct_label: str


class Score(FrozenModel):
    correct: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def check_correct_not_above_total(self) -> "Score":
        if self.correct > self.total:
            raise ValueError("correct cannot exceed total")
        return self

    @property
    def accuracy(self) -> float:
        if self.total == 0:
            return 0.0
        return self.correct / self.total


class PlaybackStep(FrozenModel):
    pitch: str
    inter_note_delay_ms: int = Field(ge=0)
    duration: str


class AnswerResult(FrozenModel):
    verdict: Verdict
    score: Score
    message: str
    next_in_ms: Optional[int] = None


class SessionState(FrozenModel):
    mode: Mode
    challenge_type: Optional[str] = None
    hint: Optional[str] = None
    choices: List[str] = Field(default_factory=list)
    choice_names: Dict[str, str] = Field(default_factory=dict)
    score: Score = Field(default_factory=Score)
    message: str = ""


class ModeRequest(BaseModel):
    mode: str


class AnswerRequest(BaseModel):
    answer: str


class PlayResponse(BaseModel):
    state: SessionState
    plan: List[PlaybackStep] = Field(default_factory=list)
