"""Proportion tables over per-trial strategy records.

The table is a strategy-by-outcome cross-tab whose rows are normalized to
proportions within each strategy.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from monty_hall.core.errors import InvalidArgumentError
from monty_hall.core.game import Outcome, Strategy, TrialResult

STRATEGY_ORDER: tuple[Strategy, ...] = (Strategy.STAY, Strategy.SWITCH)
OUTCOME_ORDER: tuple[Outcome, ...] = (Outcome.LOSE, Outcome.WIN)


@dataclass(frozen=True, slots=True)
class ProportionTable:
    """Row-normalized strategy-by-outcome table.

    Parameters
    ----------
    counts : Mapping[tuple[Strategy, Outcome], int]
        Number of records per ``(strategy, outcome)`` cell.
    totals : Mapping[Strategy, int]
        Number of records per strategy. Only strategies with at least one
        record appear.
    proportions : Mapping[tuple[Strategy, Outcome], float]
        ``counts / totals`` rounded to ``precision`` decimal places.
    precision : int
        Number of decimal places kept in ``proportions``.
    """

    counts: Mapping[tuple[Strategy, Outcome], int]
    totals: Mapping[Strategy, int]
    proportions: Mapping[tuple[Strategy, Outcome], float]
    precision: int = 2

    @property
    def strategies(self) -> tuple[Strategy, ...]:
        """Strategies present in the table, in display order."""

        return tuple(strategy for strategy in STRATEGY_ORDER if strategy in self.totals)

    @property
    def is_empty(self) -> bool:
        return not self.totals

    def proportion(self, strategy: Strategy | str, outcome: Outcome | str) -> float:
        """Return the rounded proportion of ``outcome`` within ``strategy``.

        Raises
        ------
        KeyError
            If ``strategy`` has no records.
        """

        strategy = Strategy(strategy)
        if strategy not in self.totals:
            raise KeyError(f"no records for strategy {strategy.value!r}")
        return self.proportions.get((strategy, Outcome(outcome)), 0.0)

    def win_rate(self, strategy: Strategy | str) -> float:
        """Shortcut for ``proportion(strategy, Outcome.WIN)``."""

        return self.proportion(strategy, Outcome.WIN)

    def format(self) -> str:
        """Render the table as fixed-width text.

        Returns
        -------
        str
            Cross-tab with one row per strategy and one column per outcome.
        """

        if self.is_empty:
            return "strategy x outcome: no trials"

        row_label_width = max(len("strategy"), *(len(item.value) for item in self.strategies))
        cell_width = max(self.precision + 2, *(len(item.value) for item in OUTCOME_ORDER))
        header = "strategy".ljust(row_label_width) + "".join(
            " " + outcome.value.rjust(cell_width) for outcome in OUTCOME_ORDER
        )
        lines = [header]
        for strategy in self.strategies:
            cells = "".join(
                " " + f"{self.proportions[(strategy, outcome)]:.{self.precision}f}".rjust(cell_width)
                for outcome in OUTCOME_ORDER
            )
            lines.append(strategy.value.ljust(row_label_width) + cells)
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.format()


def count_outcomes(records: Iterable[TrialResult]) -> dict[tuple[Strategy, Outcome], int]:
    """Count records per ``(strategy, outcome)`` pair.

    Parameters
    ----------
    records : Iterable[TrialResult]
        Per-trial strategy records.

    Returns
    -------
    dict[tuple[Strategy, Outcome], int]
        Counts for every observed pair. Unobserved pairs are absent.
    """

    counts: dict[tuple[Strategy, Outcome], int] = {}
    for record in records:
        key = (record.strategy, record.outcome)
        counts[key] = counts.get(key, 0) + 1
    return counts


def summarize(records: Iterable[TrialResult], *, precision: int = 2) -> ProportionTable:
    """Build a row-normalized :class:`ProportionTable`.

    Parameters
    ----------
    records : Iterable[TrialResult]
        Per-trial strategy records.
    precision : int, optional
        Decimal places kept after rounding. Defaults to ``2``.

    Returns
    -------
    ProportionTable
        Table with one row per strategy present in ``records``. Proportions in
        each row sum to ``1`` up to rounding. An empty input yields an empty
        table.

    Raises
    ------
    InvalidArgumentError
        If ``precision`` is negative or not an integer.
    """

    if isinstance(precision, bool) or not isinstance(precision, int) or precision < 0:
        raise InvalidArgumentError(f"precision must be a non-negative integer, got {precision!r}")

    counts = count_outcomes(records)

    totals: dict[Strategy, int] = {}
    for (strategy, _outcome), count in counts.items():
        totals[strategy] = totals.get(strategy, 0) + count

    proportions: dict[tuple[Strategy, Outcome], float] = {}
    for strategy, total in totals.items():
        for outcome in OUTCOME_ORDER:
            count = counts.get((strategy, outcome), 0)
            proportions[(strategy, outcome)] = round(count / total, precision)

    return ProportionTable(
        counts=counts,
        totals=totals,
        proportions=proportions,
        precision=precision,
    )


def summary_rows(table: ProportionTable) -> list[dict[str, Any]]:
    """Flatten ``table`` into one mapping per cell, in display order."""

    return [
        {
            "strategy": strategy.value,
            "outcome": outcome.value,
            "count": table.counts.get((strategy, outcome), 0),
            "proportion": table.proportions[(strategy, outcome)],
        }
        for strategy in table.strategies
        for outcome in OUTCOME_ORDER
    ]


__all__ = [
    "OUTCOME_ORDER",
    "STRATEGY_ORDER",
    "ProportionTable",
    "count_outcomes",
    "summarize",
    "summary_rows",
]
