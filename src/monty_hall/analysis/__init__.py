"""Aggregation of trial records into proportion tables."""

from .summary import (
    OUTCOME_ORDER,
    STRATEGY_ORDER,
    ProportionTable,
    count_outcomes,
    summarize,
    summary_rows,
)

__all__ = [
    "OUTCOME_ORDER",
    "STRATEGY_ORDER",
    "ProportionTable",
    "count_outcomes",
    "summarize",
    "summary_rows",
]
