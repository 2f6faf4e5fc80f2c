from __future__ import annotations

from typing import Iterable, List, Optional, Tuple, Union

try:
    from .constants import CHORD_ROOT_MARGINS, INTERVAL_ROOT_MARGINS, SCALE_ROOT_MARGINS
    from .errors import InvalidRange, UnknownLabel, UnknownMode
    from .logger_config import logger
    from .models import Challenge, ChordChallenge, IntervalChallenge, Mode, Pitch, ScaleChallenge
    from .music_theory import (
        CHORD_FORMULAS,
        INTERVAL_NAMES,
        SCALE_STEPS,
        chord_offsets,
        interval_for_semitones,
        interval_labels,
        interval_semitones,
        scale_offsets,
    )
    from .pitch_alphabet import DEFAULT_ALPHABET, PitchAlphabet, PitchRef
    from .utils import RandomSource, choose, default_random_source
except ImportError:
    from constants import CHORD_ROOT_MARGINS, INTERVAL_ROOT_MARGINS, SCALE_ROOT_MARGINS
    from errors import InvalidRange, UnknownLabel, UnknownMode
    from logger_config import logger
    from models import Challenge, ChordChallenge, IntervalChallenge, Mode, Pitch, ScaleChallenge
    from music_theory import (
        CHORD_FORMULAS,
        INTERVAL_NAMES,
        SCALE_STEPS,
        chord_offsets,
        interval_for_semitones,
        interval_labels,
        interval_semitones,
        scale_offsets,
    )
    from pitch_alphabet import DEFAULT_ALPHABET, PitchAlphabet, PitchRef
    from utils import RandomSource, choose, default_random_source

def parse_mode(mode: Union[Mode, str]) -> Mode:
    if isinstance(mode, Mode):
        return mode
    try:
        return Mode(str(mode))
    except ValueError as exc:
        raise UnknownMode(f"Unknown mode: {mode!r}") from exc


def _build_pool(requested: Optional[Iterable[str]], allowed: List[str], kind: str) -> List[str]:
    if requested is None:
        return list(allowed)
    pool = list(requested)
    for label in pool:
        if label not in allowed:
            raise UnknownLabel(f"Unknown {kind}: {label!r}")
    if not pool:
        raise InvalidRange(f"Empty {kind} pool")
    return pool


class ChallengeGenerator:
    def __init__(
        self,
        alphabet: PitchAlphabet = DEFAULT_ALPHABET,
        random_source: RandomSource = default_random_source,
        intervals: Optional[Iterable[str]] = None,
        chord_types: Optional[Iterable[str]] = None,
        scale_types: Optional[Iterable[str]] = None,
    ) -> None:
        self.alphabet = alphabet
        self.random_source = random_source
        self.intervals = _build_pool(intervals, interval_labels(), "interval label")
        self.chord_types = _build_pool(chord_types, list(CHORD_FORMULAS), "chord type")
        self.scale_types = _build_pool(scale_types, list(SCALE_STEPS), "scale type")

    def generate(self, mode: Union[Mode, str]) -> Challenge:
        mode = parse_mode(mode)
        if mode is Mode.INTERVAL:
            return self.generate_interval()
        if mode is Mode.CHORD:
            return self.generate_chord()
        return self.generate_scale()

    def _root(self, root: Optional[PitchRef], margins: Tuple[int, int]) -> Pitch:
        if root is not None:
            return self.alphabet.resolve(root)
        return self.alphabet.random_root_in_range(margins[0], margins[1], self.random_source)

    def generate_interval(
        self,
        root: Optional[PitchRef] = None,
        label: Optional[str] = None,
    ) -> IntervalChallenge:
        root_pitch = self._root(root, INTERVAL_ROOT_MARGINS)
        label = label if label is not None else choose(self.intervals, self.random_source)
        semitones = interval_semitones(label)
        second = self.alphabet.transpose(root_pitch, semitones)
        actual = second.index - root_pitch.index
        if actual != semitones:
            logger.debug(
                "Interval %s (%s) above %s clamped to %s (%s)",
                label,
                INTERVAL_NAMES[label],
                root_pitch.name,
                second.name,
                interval_for_semitones(actual),
            )
        return IntervalChallenge(root=root_pitch, interval_label=label, second=second)

    def generate_chord(
        self,
        root: Optional[PitchRef] = None,
        chord_type: Optional[str] = None,
    ) -> ChordChallenge:
        root_pitch = self._root(root, CHORD_ROOT_MARGINS)
        chord_type = chord_type if chord_type is not None else choose(self.chord_types, self.random_source)
        offsets = chord_offsets(chord_type)
        notes = tuple(self.alphabet.transpose(root_pitch, offset) for offset in offsets)
        if notes[-1].index - root_pitch.index != offsets[-1]:
            logger.debug("Chord %s %s clamped at %s", root_pitch.name, chord_type, notes[-1].name)
        return ChordChallenge(root=root_pitch, chord_type=chord_type, notes=notes)

    def generate_scale(
        self,
        root: Optional[PitchRef] = None,
        scale_type: Optional[str] = None,
    ) -> ScaleChallenge:
        root_pitch = self._root(root, SCALE_ROOT_MARGINS)
        scale_type = scale_type if scale_type is not None else choose(self.scale_types, self.random_source)
        offsets = scale_offsets(scale_type)
        notes = tuple(self.alphabet.transpose(root_pitch, offset) for offset in offsets)
        if notes[-1].index - root_pitch.index != offsets[-1]:
            logger.debug("Scale %s %s clamped at %s", root_pitch.name, scale_type, notes[-1].name)
        return ScaleChallenge(root=root_pitch, scale_type=scale_type, notes=notes)


def generate(
    mode: Union[Mode, str],
    random_source: RandomSource = default_random_source,
    alphabet: PitchAlphabet = DEFAULT_ALPHABET,
) -> Challenge:
    return ChallengeGenerator(alphabet=alphabet, random_source=random_source).generate(mode)
