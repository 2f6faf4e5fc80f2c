from __future__ import annotations


class EarTrainerError(ValueError):
    """Base class for every error raised by the drill engine."""


class InvalidRange(EarTrainerError):
    """An alphabet or margin pairing leaves nothing to choose from."""


class InvalidState(EarTrainerError):
    """An operation needs an active challenge and there is none."""


class UnknownMode(EarTrainerError):
    pass


class UnknownLabel(EarTrainerError):
    pass
