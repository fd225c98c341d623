"""Tests for the five game steps."""

from __future__ import annotations

from collections import Counter
from itertools import permutations

import numpy as np
import pytest

from monty_hall.core import Arrangement, DoorContent, InvalidArgumentError, InvalidStateError, Outcome
from monty_hall.game import change_door, create_game, determine_winner, open_goat_door, select_door

ALL_ARRANGEMENTS = tuple(
    Arrangement.from_labels(labels) for labels in sorted(set(permutations(["goat", "goat", "car"])))
)


def test_create_game_always_holds_one_prize_and_two_decoys() -> None:
    """Every generated arrangement should satisfy the door invariant."""

    rng = np.random.default_rng(0)
    for _ in range(200):
        game = create_game(rng)
        assert len(game.doors) == 3
        assert game.doors.count(DoorContent.PRIZE) == 1
        assert game.doors.count(DoorContent.DECOY) == 2


def test_create_game_places_prize_uniformly() -> None:
    """Each door should hide the prize about one third of the time."""

    rng = np.random.default_rng(11)
    counts = Counter(create_game(rng).prize_door for _ in range(6000))

    assert set(counts) == {1, 2, 3}
    for door in (1, 2, 3):
        assert counts[door] / 6000 == pytest.approx(1 / 3, abs=0.03)


def test_create_game_is_reproducible_with_seed() -> None:
    """Equal seeds should produce equal arrangements."""

    first = [create_game(np.random.default_rng(5)) for _ in range(3)]
    second = [create_game(np.random.default_rng(5)) for _ in range(3)]

    assert first == second


def test_select_door_is_uniform_over_three_doors() -> None:
    """Initial picks should be roughly uniform and always valid."""

    rng = np.random.default_rng(3)
    picks = [select_door(rng) for _ in range(6000)]
    counts = Counter(picks)

    assert set(counts) == {1, 2, 3}
    assert all(type(pick) is int for pick in picks[:10])
    for door in (1, 2, 3):
        assert counts[door] / 6000 == pytest.approx(1 / 3, abs=0.03)


def test_select_door_works_without_explicit_rng() -> None:
    """Omitting ``rng`` should fall back to a fresh generator."""

    assert select_door() in (1, 2, 3)


@pytest.mark.parametrize("game", ALL_ARRANGEMENTS)
@pytest.mark.parametrize("pick", [1, 2, 3])
def test_open_goat_door_never_opens_pick_or_prize(game: Arrangement, pick: int) -> None:
    """The host must open an unpicked decoy for every game and pick."""

    rng = np.random.default_rng(pick)
    for _ in range(20):
        opened = open_goat_door(game, pick, rng)
        assert opened != pick
        assert game.content(opened) is DoorContent.DECOY


def test_open_goat_door_is_deterministic_when_pick_is_decoy() -> None:
    """With a decoy picked, only one door can be opened."""

    game = Arrangement.from_labels(["goat", "goat", "car"])

    assert {open_goat_door(game, 1, np.random.default_rng(seed)) for seed in range(25)} == {2}
    assert {open_goat_door(game, 2, np.random.default_rng(seed)) for seed in range(25)} == {1}


def test_open_goat_door_splits_evenly_when_pick_is_prize() -> None:
    """With the prize picked, both decoys are opened about half the time."""

    game = Arrangement.from_labels(["car", "goat", "goat"])
    rng = np.random.default_rng(21)
    counts = Counter(open_goat_door(game, 1, rng) for _ in range(4000))

    assert set(counts) == {2, 3}
    assert counts[2] / 4000 == pytest.approx(0.5, abs=0.05)


def test_open_goat_door_accepts_label_sequences() -> None:
    """Plain label sequences should be validated and accepted."""

    assert open_goat_door(["goat", "car", "goat"], 3) == 1


def test_open_goat_door_rejects_invalid_inputs() -> None:
    """Bad picks and malformed games should fail fast."""

    with pytest.raises(InvalidArgumentError):
        open_goat_door(["goat", "goat", "car"], 4)
    with pytest.raises(InvalidStateError):
        open_goat_door(["car", "car", "goat"], 1)


@pytest.mark.parametrize("opened", [1, 2, 3])
@pytest.mark.parametrize("pick", [1, 2, 3])
def test_change_door_stay_keeps_pick(opened: int, pick: int) -> None:
    """Staying returns the initial pick regardless of the opened door."""

    assert change_door(True, opened, pick) == pick


@pytest.mark.parametrize(
    ("opened", "pick", "expected"),
    [(1, 2, 3), (1, 3, 2), (2, 1, 3), (2, 3, 1), (3, 1, 2), (3, 2, 1)],
)
def test_change_door_switch_takes_remaining_door(opened: int, pick: int, expected: int) -> None:
    """Switching returns the only door that is neither picked nor opened."""

    assert change_door(False, opened, pick) == expected


def test_change_door_switch_rejects_opened_pick() -> None:
    """Switching away from an opened pick breaks the game invariant."""

    with pytest.raises(InvalidStateError):
        change_door(False, 2, 2)


def test_change_door_rejects_out_of_range_doors() -> None:
    """Door indices outside 1..3 should be rejected for both policies."""

    with pytest.raises(InvalidArgumentError):
        change_door(True, 1, 0)
    with pytest.raises(InvalidArgumentError):
        change_door(False, 5, 1)


@pytest.mark.parametrize("game", ALL_ARRANGEMENTS)
def test_determine_winner_matches_prize_door(game: Arrangement) -> None:
    """Only the prize door wins."""

    for door in (1, 2, 3):
        expected = Outcome.WIN if door == game.prize_door else Outcome.LOSE
        assert determine_winner(door, game) is expected


def test_decoy_pick_scenario() -> None:
    """Picking a decoy: staying loses, switching wins."""

    game = Arrangement.from_labels(["goat", "goat", "car"])
    opened = open_goat_door(game, 1)

    assert opened == 2
    assert change_door(True, opened, 1) == 1
    assert determine_winner(change_door(True, opened, 1), game) is Outcome.LOSE
    assert change_door(False, opened, 1) == 3
    assert determine_winner(change_door(False, opened, 1), game) is Outcome.WIN


def test_prize_pick_scenario() -> None:
    """Picking the prize: staying wins, switching loses."""

    game = Arrangement.from_labels(["car", "goat", "goat"])
    rng = np.random.default_rng(8)

    for _ in range(10):
        opened = open_goat_door(game, 1, rng)
        assert opened in (2, 3)
        assert determine_winner(change_door(True, opened, 1), game) is Outcome.WIN
        assert determine_winner(change_door(False, opened, 1), game) is Outcome.LOSE
