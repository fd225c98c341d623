"""Data model and errors shared by every subpackage."""

from .errors import InvalidArgumentError, InvalidStateError, MontyHallError
from .game import (
    DOORS,
    Arrangement,
    DoorContent,
    Outcome,
    Strategy,
    TrialResult,
    as_arrangement,
    validate_door,
)

__all__ = [
    "DOORS",
    "Arrangement",
    "DoorContent",
    "InvalidArgumentError",
    "InvalidStateError",
    "MontyHallError",
    "Outcome",
    "Strategy",
    "TrialResult",
    "as_arrangement",
    "validate_door",
]
