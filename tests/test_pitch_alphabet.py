"""Tests for the pitch alphabet: lookup, clamped transposition, root draws."""

import pytest

from eartrainer.errors import InvalidRange, UnknownLabel
from eartrainer.models import Pitch
from eartrainer.pitch_alphabet import DEFAULT_ALPHABET, PitchAlphabet

from .helpers import pick


class TestAlphabetConstruction:
    def test_default_alphabet_spans_c3_to_e5(self) -> None:
        names = DEFAULT_ALPHABET.names
        assert names[0] == "C3"
        assert names[-1] == "E5"
        assert len(DEFAULT_ALPHABET) == 29
        assert DEFAULT_ALPHABET.last_index == 28

    def test_default_alphabet_has_no_duplicates(self) -> None:
        names = DEFAULT_ALPHABET.names
        assert len(set(names)) == len(names)

    def test_sharps_only_spelling(self) -> None:
        assert DEFAULT_ALPHABET.names[:7] == ["C3", "C#3", "D3", "D#3", "E3", "F3", "F#3"]
        assert DEFAULT_ALPHABET.pitch(12).name == "C4"

    def test_rejects_empty_alphabet(self) -> None:
        with pytest.raises(InvalidRange):
            PitchAlphabet([])

    def test_rejects_duplicates_and_gaps(self) -> None:
        with pytest.raises(InvalidRange):
            PitchAlphabet(["C4", "C4"])
        with pytest.raises(InvalidRange):
            PitchAlphabet(["C4", "D4"])

    def test_rejects_descending_order(self) -> None:
        with pytest.raises(InvalidRange):
            PitchAlphabet(["C#4", "C4"])

    def test_rejects_bounds_out_of_order(self) -> None:
        with pytest.raises(InvalidRange):
            PitchAlphabet.chromatic("C5", "C4")

    def test_index_of_unknown_pitch(self) -> None:
        with pytest.raises(UnknownLabel):
            DEFAULT_ALPHABET.index_of("C7")


class TestTranspose:
    def test_in_range_transposition(self) -> None:
        result = DEFAULT_ALPHABET.transpose(12, 4)
        assert result == Pitch(index=16, name="E4")

    def test_accepts_names_and_pitches(self) -> None:
        c4 = DEFAULT_ALPHABET.pitch(12)
        assert DEFAULT_ALPHABET.transpose("C4", 7).name == "G4"
        assert DEFAULT_ALPHABET.transpose(c4, 7).name == "G4"

    def test_clamps_at_top(self) -> None:
        last = DEFAULT_ALPHABET.last_index
        for offset in (1, 5, 12):
            result = DEFAULT_ALPHABET.transpose(last, offset)
            assert result.index == last
            assert result.name == "E5"

    def test_clamps_at_bottom(self) -> None:
        assert DEFAULT_ALPHABET.transpose(2, -5).index == 0

    def test_bottom_root_seventh_does_not_clamp(self) -> None:
        assert DEFAULT_ALPHABET.transpose(0, 11).index == 11

    def test_result_always_in_bounds(self) -> None:
        for root in range(len(DEFAULT_ALPHABET)):
            for offset in range(-13, 14):
                index = DEFAULT_ALPHABET.transpose(root, offset).index
                assert 0 <= index <= DEFAULT_ALPHABET.last_index
                if 0 <= root + offset <= DEFAULT_ALPHABET.last_index:
                    assert index == root + offset


class TestRandomRoot:
    def test_respects_margins(self) -> None:
        low = DEFAULT_ALPHABET.random_root_in_range(6, 6, lambda: 0.0)
        high = DEFAULT_ALPHABET.random_root_in_range(6, 6, lambda: 0.999999)
        assert low.index == 6
        assert high.index == 22

    def test_picks_uniform_slot(self) -> None:
        # 15 candidates (indices 6..20) with margins (6, 8)
        root = DEFAULT_ALPHABET.random_root_in_range(6, 8, lambda: pick(4, 15))
        assert root.index == 10

    def test_source_returning_one_stays_in_range(self) -> None:
        root = DEFAULT_ALPHABET.random_root_in_range(6, 8, lambda: 1.0)
        assert root.index == 20

    def test_empty_candidate_range(self) -> None:
        with pytest.raises(InvalidRange):
            DEFAULT_ALPHABET.random_root_in_range(14, 15)

    def test_negative_margin(self) -> None:
        with pytest.raises(InvalidRange):
            DEFAULT_ALPHABET.random_root_in_range(-1, 0)
