from __future__ import annotations

import asyncio
import inspect
from typing import Any, Awaitable, Callable, List, Optional, Sequence

try:
    from .challenge_generator import Challenge
    from .constants import (
        CHORD_NOTE_DURATION,
        CHORD_STAGGER_MS,
        INTERVAL_GAP_MS,
        INTERVAL_NOTE_DURATION,
        MS_PER_SECOND,
        SCALE_NOTE_DURATION,
        SCALE_STAGGER_MS,
    )
    from .errors import UnknownLabel
    from .logger_config import logger
    from .models import ChordChallenge, IntervalChallenge, Pitch, PlaybackStep, ScaleChallenge
except ImportError:
    from challenge_generator import Challenge
    from constants import (
        CHORD_NOTE_DURATION,
        CHORD_STAGGER_MS,
        INTERVAL_GAP_MS,
        INTERVAL_NOTE_DURATION,
        MS_PER_SECOND,
        SCALE_NOTE_DURATION,
        SCALE_STAGGER_MS,
    )
    from errors import UnknownLabel
    from logger_config import logger
    from models import ChordChallenge, IntervalChallenge, Pitch, PlaybackStep, ScaleChallenge

PlayPitch = Callable[[str, str], Any]
Sleep = Callable[[float], Awaitable[Any]]


def _staggered(pitches: Sequence[Pitch], stagger_ms: int, duration: str) -> List[PlaybackStep]:
    last = len(pitches) - 1
    return [
        PlaybackStep(
            pitch=pitch.name,
            inter_note_delay_ms=0 if i == last else stagger_ms,
            duration=duration,
        )
        for i, pitch in enumerate(pitches)
    ]


def plan(challenge: Challenge) -> List[PlaybackStep]:
    """Describe what to play for a challenge and how far apart.

    Each step's delay is the wait after that note starts before the next one
    is triggered. Chords are arpeggiated rather than struck together.
    """
    if isinstance(challenge, IntervalChallenge):
        return _staggered([challenge.root, challenge.second], INTERVAL_GAP_MS, INTERVAL_NOTE_DURATION)
    if isinstance(challenge, ChordChallenge):
        return _staggered(challenge.notes, CHORD_STAGGER_MS, CHORD_NOTE_DURATION)
    if isinstance(challenge, ScaleChallenge):
        return _staggered(challenge.notes, SCALE_STAGGER_MS, SCALE_NOTE_DURATION)
    raise UnknownLabel(f"Unsupported challenge: {type(challenge).__name__}")


def plan_duration_ms(steps: Sequence[PlaybackStep]) -> int:
    return sum(step.inter_note_delay_ms for step in steps)


async def execute_plan(
    steps: Sequence[PlaybackStep],
    play_pitch: PlayPitch,
    sleep: Sleep = asyncio.sleep,
) -> None:
    for step in steps:
        logger.debug("Play %s (%s)", step.pitch, step.duration)
        result = play_pitch(step.pitch, step.duration)
        if inspect.isawaitable(result):
            await result
        if step.inter_note_delay_ms > 0:
            await sleep(step.inter_note_delay_ms / MS_PER_SECOND)


class PlaybackRunner:
    """Runs one plan at a time; starting another abandons the one in flight.

    An abandoned plan never reaches its ``on_finished`` callback.
    """

    def __init__(self, play_pitch: PlayPitch, sleep: Sleep = asyncio.sleep) -> None:
        self.play_pitch = play_pitch
        self.sleep = sleep
        self._task: Optional[asyncio.Task] = None

    @property
    def is_playing(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(
        self,
        steps: Sequence[PlaybackStep],
        on_finished: Optional[Callable[[], Any]] = None,
    ) -> asyncio.Task:
        self.cancel()
        run = self._run(list(steps), on_finished)
        try:
            self._task = asyncio.create_task(run)
        except RuntimeError:
            run.close()
            raise
        return self._task

    def cancel(self) -> bool:
        if not self.is_playing:
            return False
        logger.warning("Abandoning playback in progress")
        self._task.cancel()
        return True

    async def _run(self, steps: List[PlaybackStep], on_finished: Optional[Callable[[], Any]]) -> None:
        await execute_plan(steps, self.play_pitch, self.sleep)
        if on_finished is not None:
            on_finished()
