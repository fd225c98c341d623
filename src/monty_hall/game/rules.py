"""The five steps of one Monty Hall game.

Every function is pure apart from the random draws it takes from ``rng``.
Passing a seeded :class:`numpy.random.Generator` makes a game reproducible.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from monty_hall.core.errors import InvalidStateError
from monty_hall.core.game import (
    DOORS,
    Arrangement,
    DoorContent,
    Outcome,
    as_arrangement,
    validate_door,
)

_INITIAL_CONTENTS: tuple[DoorContent, ...] = (DoorContent.DECOY, DoorContent.DECOY, DoorContent.PRIZE)


def _resolve_rng(rng: np.random.Generator | None) -> np.random.Generator:
    return np.random.default_rng() if rng is None else rng


def create_game(rng: np.random.Generator | None = None) -> Arrangement:
    """Shuffle two decoys and one prize behind the three doors.

    Parameters
    ----------
    rng : numpy.random.Generator | None, optional
        Random source. ``None`` uses a fresh unseeded generator.

    Returns
    -------
    Arrangement
        Uniformly random permutation of ``(DECOY, DECOY, PRIZE)``. Each door
        hides the prize with probability 1/3.
    """

    order = _resolve_rng(rng).permutation(len(_INITIAL_CONTENTS))
    return Arrangement(doors=tuple(_INITIAL_CONTENTS[int(index)] for index in order))


def select_door(rng: np.random.Generator | None = None) -> int:
    """Pick the contestant's first door uniformly from ``1..3``."""

    return int(_resolve_rng(rng).choice(DOORS))


def open_goat_door(
    game: Arrangement | Iterable[DoorContent | str],
    pick: int,
    rng: np.random.Generator | None = None,
) -> int:
    """Return the door the host opens.

    Parameters
    ----------
    game : Arrangement | Iterable[DoorContent | str]
        Door contents.
    pick : int
        Contestant's initial pick.
    rng : numpy.random.Generator | None, optional
        Random source for the tie-break when ``pick`` hides the prize.

    Returns
    -------
    int
        A decoy door different from ``pick``.

    Raises
    ------
    InvalidArgumentError
        If ``pick`` is not a valid door.
    InvalidStateError
        If ``game`` is not a valid arrangement.

    Notes
    -----
    When the pick hides the prize both other doors hide decoys and the host
    chooses between them with equal probability. Otherwise exactly one
    unpicked decoy remains and it is opened without drawing from ``rng``.
    """

    arrangement = as_arrangement(game)
    a_pick = validate_door(pick, field_name="pick")
    candidates = tuple(door for door in arrangement.decoy_doors if door != a_pick)

    if arrangement.content(a_pick) is DoorContent.PRIZE:
        return int(_resolve_rng(rng).choice(candidates))
    return candidates[0]


def change_door(stay: bool, opened_door: int, pick: int) -> int:
    """Apply the stay or switch policy and return the final door.

    Parameters
    ----------
    stay : bool
        ``True`` keeps the initial pick, ``False`` switches.
    opened_door : int
        Door opened by the host. Ignored when staying.
    pick : int
        Initial pick.

    Returns
    -------
    int
        Final door.

    Raises
    ------
    InvalidArgumentError
        If a door index is out of range.
    InvalidStateError
        If switching while ``opened_door`` equals ``pick``.
    """

    a_pick = validate_door(pick, field_name="pick")
    opened = validate_door(opened_door, field_name="opened_door")
    if stay:
        return a_pick
    if opened == a_pick:
        raise InvalidStateError(f"host cannot open the picked door {a_pick}")
    return next(door for door in DOORS if door not in (opened, a_pick))


def determine_winner(
    final_pick: int,
    game: Arrangement | Iterable[DoorContent | str],
) -> Outcome:
    """Return ``WIN`` if ``final_pick`` hides the prize and ``LOSE`` otherwise."""

    content = as_arrangement(game).content(validate_door(final_pick, field_name="final_pick"))
    if content is DoorContent.PRIZE:
        return Outcome.WIN
    return Outcome.LOSE


__all__ = [
    "change_door",
    "create_game",
    "determine_winner",
    "open_goat_door",
    "select_door",
]
