"""Tests for single-game and batch runners."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from monty_hall.core import InvalidArgumentError, Outcome, Strategy
from monty_hall.runtime import BatchResult, SimulationConfig, play_game, play_n_games, run_batch


def test_play_game_scores_one_game_under_both_strategies() -> None:
    """Both records should share the same game and differ only by policy."""

    stay, switch = play_game(np.random.default_rng(4), trial_index=7)

    assert stay.strategy is Strategy.STAY
    assert switch.strategy is Strategy.SWITCH
    assert stay.trial_index == switch.trial_index == 7
    assert stay.initial_pick == switch.initial_pick
    assert stay.opened_door == switch.opened_door
    assert stay.prize_door == switch.prize_door
    assert stay.final_pick == stay.initial_pick
    assert switch.final_pick not in (switch.initial_pick, switch.opened_door)


def test_play_game_outcomes_are_complementary() -> None:
    """Exactly one of stay and switch wins every game."""

    rng = np.random.default_rng(12)
    for _ in range(100):
        stay, switch = play_game(rng)
        assert {stay.outcome, switch.outcome} == {Outcome.WIN, Outcome.LOSE}
        assert (stay.outcome is Outcome.WIN) == (stay.initial_pick == stay.prize_door)


def test_play_n_games_returns_two_records_per_game(capsys) -> None:
    """One hundred games yield two hundred records and a printed table."""

    result = play_n_games(100, seed=1)
    captured = capsys.readouterr()

    assert isinstance(result, BatchResult)
    assert len(result.records) == 200
    assert result.n_games == 100
    assert [record.strategy for record in result.records[:4]] == [
        Strategy.STAY,
        Strategy.SWITCH,
        Strategy.STAY,
        Strategy.SWITCH,
    ]
    assert "strategy" in captured.out
    assert "switch" in captured.out
    for strategy in (Strategy.STAY, Strategy.SWITCH):
        row_total = result.summary.proportion(strategy, "WIN") + result.summary.proportion(strategy, "LOSE")
        assert row_total == pytest.approx(1.0, abs=0.011)


def test_play_n_games_echo_can_be_disabled(capsys) -> None:
    """Disabling echo should keep the batch silent."""

    play_n_games(5, seed=2, echo=False)

    assert capsys.readouterr().out == ""


def test_batch_is_reproducible_with_seed() -> None:
    """Equal seeds should reproduce identical batches."""

    first = run_batch(SimulationConfig(n_games=50, seed=99))
    second = run_batch(SimulationConfig(n_games=50, seed=99))

    assert first.records == second.records
    assert first.summary.proportions == second.summary.proportions


def test_explicit_rng_takes_precedence_over_seed() -> None:
    """An explicit generator should override the configured seed."""

    from_rng = run_batch(SimulationConfig(n_games=20, seed=1), rng=np.random.default_rng(77))
    from_seed = run_batch(SimulationConfig(n_games=20, seed=77))

    assert from_rng.records == from_seed.records


def test_switching_wins_about_two_thirds_of_games() -> None:
    """Large seeded batches should converge to 1/3 vs 2/3 win rates."""

    result = play_n_games(10_000, seed=2024, echo=False)

    assert result.summary.win_rate(Strategy.STAY) == pytest.approx(1 / 3, abs=0.02)
    assert result.summary.win_rate(Strategy.SWITCH) == pytest.approx(2 / 3, abs=0.02)


def test_zero_games_yield_empty_batch(capsys) -> None:
    """Zero games produce no records and an empty table."""

    result = play_n_games(0)
    captured = capsys.readouterr()

    assert result.records == ()
    assert result.summary.is_empty
    assert "no trials" in captured.out


@pytest.mark.parametrize("n_games", [-1, 2.5, "10", True])
def test_simulation_config_rejects_invalid_game_counts(n_games: object) -> None:
    """Negative or non-integer game counts are rejected."""

    with pytest.raises(InvalidArgumentError):
        SimulationConfig(n_games=n_games)


def test_simulation_config_rejects_negative_precision() -> None:
    """Precision must be a non-negative integer."""

    with pytest.raises(InvalidArgumentError, match="precision"):
        SimulationConfig(n_games=1, precision=-1)


def test_run_batch_logs_win_rates(caplog) -> None:
    """Batch runs should log per-strategy win rates at INFO level."""

    with caplog.at_level(logging.INFO, logger="monty_hall.runtime.engine"):
        run_batch(SimulationConfig(n_games=10, seed=0))

    assert "stay win rate" in caplog.text
    assert "switch win rate" in caplog.text
