"""Trial and batch runners.

This module provides the two simulation entry points:

- :func:`play_game`: one game evaluated under both strategies.
- :func:`play_n_games` / :func:`run_batch`: repeated independent games with a
  row-normalized summary table.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import numpy as np

from monty_hall.analysis.summary import ProportionTable, summarize
from monty_hall.core.errors import InvalidArgumentError
from monty_hall.core.game import Strategy, TrialResult
from monty_hall.game.rules import (
    change_door,
    create_game,
    determine_winner,
    open_goat_door,
    select_door,
)

logger = logging.getLogger(__name__)

DEFAULT_N_GAMES = 100
DEFAULT_PRECISION = 2


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    """Runtime configuration for one batch.

    Parameters
    ----------
    n_games : int, optional
        Number of games to simulate. ``0`` yields an empty batch.
    seed : int | None, optional
        Seed for the batch random generator. ``None`` uses NumPy's entropy
        source.
    precision : int, optional
        Decimal places kept in summary proportions.

    Raises
    ------
    InvalidArgumentError
        If ``n_games`` or ``precision`` is negative or not an integer.
    """

    n_games: int = DEFAULT_N_GAMES
    seed: int | None = None
    precision: int = DEFAULT_PRECISION

    def __post_init__(self) -> None:
        if isinstance(self.n_games, bool) or not isinstance(self.n_games, (int, np.integer)):
            raise InvalidArgumentError(f"n_games must be an integer, got {self.n_games!r}")
        if self.n_games < 0:
            raise InvalidArgumentError("n_games must be >= 0")
        if isinstance(self.precision, bool) or not isinstance(self.precision, int) or self.precision < 0:
            raise InvalidArgumentError(f"precision must be a non-negative integer, got {self.precision!r}")


@dataclass(frozen=True, slots=True)
class BatchResult:
    """Records and summary of one batch.

    Parameters
    ----------
    records : tuple[TrialResult, ...]
        Two records per game, ordered by trial with ``stay`` before
        ``switch``.
    summary : ProportionTable
        Row-normalized strategy-by-outcome table over ``records``.
    """

    records: tuple[TrialResult, ...]
    summary: ProportionTable

    @property
    def n_games(self) -> int:
        return len(self.records) // len(Strategy)

    def rows(self) -> list[dict[str, Any]]:
        """Return records as flat mappings."""

        return [record.as_row() for record in self.records]


def play_game(
    rng: np.random.Generator | None = None,
    *,
    trial_index: int = 0,
) -> tuple[TrialResult, TrialResult]:
    """Play one game and score it under both strategies.

    Parameters
    ----------
    rng : numpy.random.Generator | None, optional
        Random source shared by door setup, pick and reveal.
    trial_index : int, optional
        Index stored on the returned records.

    Returns
    -------
    tuple[TrialResult, TrialResult]
        ``(stay_result, switch_result)``, both scored against the same
        arrangement, pick and opened door.
    """

    if rng is None:
        rng = np.random.default_rng()

    game = create_game(rng)
    first_pick = select_door(rng)
    opened_door = open_goat_door(game, first_pick, rng)

    results = []
    for strategy in (Strategy.STAY, Strategy.SWITCH):
        final_pick = change_door(strategy is Strategy.STAY, opened_door, first_pick)
        results.append(
            TrialResult(
                trial_index=trial_index,
                strategy=strategy,
                outcome=determine_winner(final_pick, game),
                initial_pick=first_pick,
                opened_door=opened_door,
                final_pick=final_pick,
                prize_door=game.prize_door,
            )
        )
    return results[0], results[1]


def run_batch(config: SimulationConfig, *, rng: np.random.Generator | None = None) -> BatchResult:
    """Run ``config.n_games`` independent games and summarize them.

    Parameters
    ----------
    config : SimulationConfig
        Batch options.
    rng : numpy.random.Generator | None, optional
        Explicit random source. When given, ``config.seed`` is ignored.

    Returns
    -------
    BatchResult
        Per-trial records and the proportion table.
    """

    if rng is None:
        rng = np.random.default_rng(config.seed)

    logger.debug("running %d games (seed=%r)", config.n_games, config.seed)
    records: list[TrialResult] = []
    for trial_index in range(int(config.n_games)):
        records.extend(play_game(rng, trial_index=trial_index))

    summary = summarize(records, precision=config.precision)
    for strategy in summary.strategies:
        logger.info("%s win rate: %.*f", strategy.value, config.precision, summary.win_rate(strategy))
    return BatchResult(records=tuple(records), summary=summary)


def play_n_games(
    n: int = DEFAULT_N_GAMES,
    *,
    seed: int | None = None,
    rng: np.random.Generator | None = None,
    precision: int = DEFAULT_PRECISION,
    echo: bool = True,
) -> BatchResult:
    """Play ``n`` games, print the proportion table and return the batch.

    Parameters
    ----------
    n : int, optional
        Number of games. Defaults to ``100``.
    seed : int | None, optional
        Seed for a fresh generator. Ignored when ``rng`` is given.
    rng : numpy.random.Generator | None, optional
        Explicit random source.
    precision : int, optional
        Decimal places kept in the table.
    echo : bool, optional
        Print the formatted table to stdout.

    Returns
    -------
    BatchResult
        ``2 * n`` records and the summary table.

    Raises
    ------
    InvalidArgumentError
        If ``n`` is negative or not an integer.
    """

    result = run_batch(SimulationConfig(n_games=n, seed=seed, precision=precision), rng=rng)
    if echo:
        print(result.summary.format())
    return result


__all__ = [
    "DEFAULT_N_GAMES",
    "DEFAULT_PRECISION",
    "BatchResult",
    "SimulationConfig",
    "play_game",
    "play_n_games",
    "run_batch",
]
