"""Data model for one Monty Hall game.

Doors are addressed by 1-based indices. An :class:`Arrangement` is created
fresh for every trial and never mutated afterwards.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

import numpy as np

from .errors import InvalidArgumentError, InvalidStateError

DOORS: tuple[int, ...] = (1, 2, 3)


class DoorContent(str, Enum):
    """What stands behind a door.

    Attributes
    ----------
    DECOY
        Non-winning content (a goat on the show).
    PRIZE
        Winning content (the car).
    """

    DECOY = "goat"
    PRIZE = "car"


class Strategy(str, Enum):
    """Contestant policy after the host opens a door."""

    STAY = "stay"
    SWITCH = "switch"


class Outcome(str, Enum):
    """Win/lose verdict for one strategy in one trial."""

    WIN = "WIN"
    LOSE = "LOSE"


def validate_door(door: Any, *, field_name: str = "door") -> int:
    """Return ``door`` as a plain ``int`` after checking its domain.

    Parameters
    ----------
    door : Any
        Candidate door index. Python and NumPy integers are accepted.
    field_name : str, optional
        Name used in error messages.

    Returns
    -------
    int
        Validated door index in ``1..3``.

    Raises
    ------
    InvalidArgumentError
        If ``door`` is not an integer in :data:`DOORS`.
    """

    if isinstance(door, bool) or not isinstance(door, (int, np.integer)):
        raise InvalidArgumentError(f"{field_name} must be an integer in {DOORS}, got {door!r}")
    value = int(door)
    if value not in DOORS:
        raise InvalidArgumentError(f"{field_name} must be one of {DOORS}, got {value}")
    return value


@dataclass(frozen=True, slots=True)
class Arrangement:
    """Contents of the three doors for one game.

    Parameters
    ----------
    doors : tuple[DoorContent, DoorContent, DoorContent]
        Content behind doors 1, 2 and 3, in that order. String values such
        as ``"goat"`` are converted to :class:`DoorContent` members.

    Raises
    ------
    InvalidStateError
        If an item is not a door content or the arrangement does not hold
        exactly one prize and two decoys.
    """

    doors: tuple[DoorContent, ...]

    def __post_init__(self) -> None:
        parsed: list[DoorContent] = []
        for item in self.doors:
            try:
                parsed.append(DoorContent(item))
            except ValueError as exc:
                raise InvalidStateError(f"unknown door content {item!r}") from exc
        object.__setattr__(self, "doors", tuple(parsed))

        if len(self.doors) != len(DOORS):
            raise InvalidStateError(f"arrangement must have {len(DOORS)} doors, got {len(self.doors)}")
        n_prizes = self.doors.count(DoorContent.PRIZE)
        if n_prizes != 1:
            raise InvalidStateError(
                f"arrangement must hold exactly one prize and two decoys, got {list(self.labels())}"
            )

    @classmethod
    def from_labels(cls, labels: Iterable[DoorContent | str]) -> Arrangement:
        """Build an arrangement from enum members or their string values.

        Parameters
        ----------
        labels : Iterable[DoorContent | str]
            Door contents in door order, e.g. ``["goat", "goat", "car"]``.

        Returns
        -------
        Arrangement
            Validated arrangement.

        Raises
        ------
        InvalidStateError
            If a label is unknown or the invariant does not hold.
        """

        return cls(doors=tuple(labels))

    def content(self, door: int) -> DoorContent:
        """Return the content behind ``door``."""

        return self.doors[validate_door(door) - 1]

    @property
    def prize_door(self) -> int:
        """Door index hiding the prize."""

        return next(door for door in DOORS if self.doors[door - 1] is DoorContent.PRIZE)

    @property
    def decoy_doors(self) -> tuple[int, ...]:
        """Door indices hiding decoys, in ascending order."""

        return tuple(door for door in DOORS if self.doors[door - 1] is DoorContent.DECOY)

    def labels(self) -> tuple[str, ...]:
        """Return string labels in door order."""

        return tuple(item.value for item in self.doors)


def as_arrangement(game: Arrangement | Iterable[DoorContent | str]) -> Arrangement:
    """Coerce ``game`` into a validated :class:`Arrangement`."""

    if isinstance(game, Arrangement):
        return game
    return Arrangement.from_labels(game)


@dataclass(frozen=True, slots=True)
class TrialResult:
    """Outcome of one strategy in one trial.

    Parameters
    ----------
    trial_index : int
        Zero-based trial index within a batch.
    strategy : Strategy
        Strategy evaluated.
    outcome : Outcome
        Verdict for ``strategy``.
    initial_pick : int
        Contestant's first pick.
    opened_door : int
        Door opened by the host.
    final_pick : int
        Door held after applying ``strategy``.
    prize_door : int
        Door hiding the prize.

    Notes
    -----
    Both strategy records of one trial share the same pick, opened door and
    prize door because they are evaluated against the same game.
    """

    trial_index: int
    strategy: Strategy
    outcome: Outcome
    initial_pick: int
    opened_door: int
    final_pick: int
    prize_door: int

    def as_row(self) -> dict[str, Any]:
        """Return a flat mapping with string-valued enums."""

        return {
            "trial_index": self.trial_index,
            "strategy": self.strategy.value,
            "outcome": self.outcome.value,
            "initial_pick": self.initial_pick,
            "opened_door": self.opened_door,
            "final_pick": self.final_pick,
            "prize_door": self.prize_door,
        }


__all__ = [
    "DOORS",
    "Arrangement",
    "DoorContent",
    "Outcome",
    "Strategy",
    "TrialResult",
    "as_arrangement",
    "validate_door",
]
