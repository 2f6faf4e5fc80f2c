from __future__ import annotations

from typing import Dict, List, Sequence, Union

try:
    from .constants import ALPHABET_HIGH, ALPHABET_LOW
    from .errors import InvalidRange, UnknownLabel
    from .models import Pitch
    from .music_theory import midi_to_note_name, note_to_midi
    from .utils import RandomSource, choose, clamp, default_random_source
except ImportError:
    from constants import ALPHABET_HIGH, ALPHABET_LOW
    from errors import InvalidRange, UnknownLabel
    from models import Pitch
    from music_theory import midi_to_note_name, note_to_midi
    from utils import RandomSource, choose, clamp, default_random_source

PitchRef = Union[Pitch, int, str]


class PitchAlphabet:
    """Ordered, chromatic run of pitch names the drills are drawn from.

    Transposition never leaves the alphabet: results past either end are
    clamped to the boundary pitch. Near the edges this can shrink an interval
    (an m7 above the top note comes back as the top note itself).
    """

    def __init__(self, names: Sequence[str]) -> None:
        names = [str(name) for name in names]
        if not names:
            raise InvalidRange("Pitch alphabet is empty")
        midis = [note_to_midi(name) for name in names]
        for prev, cur, name in zip(midis, midis[1:], names[1:]):
            if cur - prev != 1:
                raise InvalidRange(f"Pitch alphabet is not chromatic ascending at {name}")
        self._names: List[str] = names
        self._index: Dict[str, int] = {name: i for i, name in enumerate(names)}

    @classmethod
    def chromatic(cls, low: str, high: str) -> "PitchAlphabet":
        low_midi = note_to_midi(low)
        high_midi = note_to_midi(high)
        if high_midi < low_midi:
            raise InvalidRange(f"Alphabet bounds out of order: {low} > {high}")
        return cls([midi_to_note_name(m) for m in range(low_midi, high_midi + 1)])

    def __len__(self) -> int:
        return len(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    @property
    def names(self) -> List[str]:
        return list(self._names)

    @property
    def last_index(self) -> int:
        return len(self._names) - 1

    def pitch(self, index: int) -> Pitch:
        if not 0 <= index <= self.last_index:
            raise InvalidRange(f"Pitch index {index} outside 0..{self.last_index}")
        return Pitch(index=index, name=self._names[index])

    def index_of(self, name: str) -> int:
        try:
            return self._index[name]
        except KeyError as exc:
            raise UnknownLabel(f"Pitch {name!r} is not in the alphabet") from exc

    def resolve(self, ref: PitchRef) -> Pitch:
        if isinstance(ref, Pitch):
            return self.pitch(ref.index)
        if isinstance(ref, str):
            return self.pitch(self.index_of(ref))
        return self.pitch(int(ref))

    def clamp_index(self, index: int) -> int:
        return clamp(index, 0, self.last_index)

    def transpose(self, base: PitchRef, semitones: int) -> Pitch:
        start = self.resolve(base).index
        return self.pitch(self.clamp_index(start + semitones))

    def random_root_in_range(
        self,
        margin_low: int,
        margin_high: int,
        random_source: RandomSource = default_random_source,
    ) -> Pitch:
        if margin_low < 0 or margin_high < 0:
            raise InvalidRange(f"Negative root margin: ({margin_low}, {margin_high})")
        candidates = list(range(margin_low, len(self._names) - margin_high))
        if not candidates:
            raise InvalidRange(
                f"Margins ({margin_low}, {margin_high}) leave no roots in a {len(self)}-note alphabet"
            )
        return self.pitch(choose(candidates, random_source))


DEFAULT_ALPHABET = PitchAlphabet.chromatic(ALPHABET_LOW, ALPHABET_HIGH)
