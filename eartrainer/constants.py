from __future__ import annotations

APP_NAME = "EarTrainer"
LOGGER_NAME = "eartrainer"
LOG_LEVEL = "INFO"

BRIDGE_HOST = "127.0.0.1"
BRIDGE_PORT = 9010

NOTES_PER_OCTAVE = 12

ALPHABET_LOW = "C3"
ALPHABET_HIGH = "E5"

MODE_INTERVAL = "Interval"
MODE_CHORD = "Chord"
MODE_SCALE = "Scale"
DEFAULT_MODE = MODE_INTERVAL

# (low, high) number of alphabet entries excluded when drawing a root
INTERVAL_ROOT_MARGINS = (6, 6)
CHORD_ROOT_MARGINS = (6, 8)
SCALE_ROOT_MARGINS = (6, 8)

SCALE_NOTE_COUNT = 8

INTERVAL_GAP_MS = 250
CHORD_STAGGER_MS = 120
SCALE_STAGGER_MS = 80
INTERVAL_NOTE_DURATION = "8n"
CHORD_NOTE_DURATION = "8n"
SCALE_NOTE_DURATION = "16n"
MS_PER_SECOND = 1000.0

AUTO_ADVANCE = True
AUTO_ADVANCE_MS = 900

FEEDBACK_CORRECT = "Correct!"
FEEDBACK_WRONG = "Wrong - correct: {label}"
