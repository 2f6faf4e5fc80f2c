from __future__ import annotations

import re
from typing import Dict, List, Optional

try:
    from .constants import NOTES_PER_OCTAVE, SCALE_NOTE_COUNT
    from .errors import UnknownLabel
except ImportError:
    from constants import NOTES_PER_OCTAVE, SCALE_NOTE_COUNT
    from errors import UnknownLabel

NOTE_NAMES = ["C", "C#", "D", "D#", "E", "F", "F#", "G", "G#", "A", "A#", "B"]

NOTE_TO_PC = {
    "C": 0, "C#": 1, "Db": 1, "D": 2, "D#": 3, "Eb": 3,
    "E": 4, "Fb": 4, "E#": 5, "F": 5, "F#": 6, "Gb": 6,
    "G": 7, "G#": 8, "Ab": 8, "A": 9, "A#": 10, "Bb": 10,
    "B": 11, "Cb": 11, "B#": 0,
}

NOTE_RE = re.compile(r"^([A-Ga-g])([#b]?)(-?\d+)$")

INTERVAL_SEMITONES: Dict[str, int] = {
    "P1": 0,
    "m2": 1,
    "M2": 2,
    "m3": 3,
    "M3": 4,
    "P4": 5,
    "TT": 6,
    "P5": 7,
    "m6": 8,
    "M6": 9,
    "m7": 10,
    "M7": 11,
    "P8": 12,
}

INTERVAL_NAMES: Dict[str, str] = {
    "P1": "perfect unison",
    "m2": "minor second",
    "M2": "major second",
    "m3": "minor third",
    "M3": "major third",
    "P4": "perfect fourth",
    "TT": "tritone",
    "P5": "perfect fifth",
    "m6": "minor sixth",
    "M6": "major sixth",
    "m7": "minor seventh",
    "M7": "major seventh",
    "P8": "octave",
}

# offsets in semitones above the root
CHORD_FORMULAS: Dict[str, List[int]] = {
    "maj": [0, 4, 7],
    "min": [0, 3, 7],
    "dim": [0, 3, 6],
    "aug": [0, 4, 8],
    "7": [0, 4, 7, 10],
    "maj7": [0, 4, 7, 11],
    "m7": [0, 3, 7, 10],
}

CHORD_NAMES: Dict[str, str] = {
    "maj": "major triad",
    "min": "minor triad",
    "dim": "diminished triad",
    "aug": "augmented triad",
    "7": "dominant seventh",
    "maj7": "major seventh",
    "m7": "minor seventh",
}

# step sizes between consecutive degrees, one octave
SCALE_STEPS: Dict[str, List[int]] = {
    "major": [2, 2, 1, 2, 2, 2, 1],  # W-W-H-W-W-W-H
    "minor": [2, 1, 2, 2, 1, 2, 2],  # W-H-W-W-H-W-W
    "dorian": [2, 1, 2, 2, 2, 1, 2],  # W-H-W-W-W-H-W
}

SCALE_NAMES: Dict[str, str] = {
    "major": "major (ionian)",
    "minor": "natural minor (aeolian)",
    "dorian": "dorian",
}


def interval_labels() -> List[str]:
    return list(INTERVAL_SEMITONES.keys())


def chord_types() -> List[str]:
    return list(CHORD_FORMULAS.keys())


def scale_types() -> List[str]:
    return list(SCALE_STEPS.keys())


def interval_semitones(label: str) -> int:
    try:
        return INTERVAL_SEMITONES[label]
    except KeyError as exc:
        raise UnknownLabel(f"Unknown interval label: {label!r}") from exc


def interval_for_semitones(semitones: int) -> Optional[str]:
    for label, value in INTERVAL_SEMITONES.items():
        if value == semitones:
            return label
    return None


def chord_offsets(chord_type: str) -> List[int]:
    try:
        return list(CHORD_FORMULAS[chord_type])
    except KeyError as exc:
        raise UnknownLabel(f"Unknown chord type: {chord_type!r}") from exc


def scale_steps(scale_type: str) -> List[int]:
    try:
        return list(SCALE_STEPS[scale_type])
    except KeyError as exc:
        raise UnknownLabel(f"Unknown scale type: {scale_type!r}") from exc


def scale_offsets(scale_type: str) -> List[int]:
    """Cumulative semitone offsets from the root, root included.

    Major gives [0, 2, 4, 5, 7, 9, 11, 12].
    """
    offsets = [0]
    for step in scale_steps(scale_type):
        offsets.append(offsets[-1] + step)
    return offsets[:SCALE_NOTE_COUNT]


def note_to_midi(note: str) -> int:
    match = NOTE_RE.match(str(note).strip())
    if not match:
        raise UnknownLabel(f"Invalid note format: {note}")
    letter, accidental, octave_str = match.groups()
    pc = NOTE_TO_PC[letter.upper() + accidental]
    octave = int(octave_str)
    # B#/Cb belong to the neighbouring octave
    if letter.upper() == "B" and accidental == "#":
        octave += 1
    elif letter.upper() == "C" and accidental == "b":
        octave -= 1
    return (octave + 1) * NOTES_PER_OCTAVE + pc


def midi_to_note_name(midi: int) -> str:
    octave = midi // NOTES_PER_OCTAVE - 1
    return f"{NOTE_NAMES[midi % NOTES_PER_OCTAVE]}{octave}"
