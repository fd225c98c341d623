"""CSV export and import of trial records and summary tables."""

from __future__ import annotations

import csv
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from monty_hall.analysis.summary import ProportionTable, summary_rows
from monty_hall.core.game import Outcome, Strategy, TrialResult, validate_door

_TRIAL_COLUMNS = (
    "trial_index",
    "strategy",
    "outcome",
    "initial_pick",
    "opened_door",
    "final_pick",
    "prize_door",
)

_SUMMARY_COLUMNS = ("strategy", "outcome", "count", "proportion")


def write_trial_results_csv(records: Iterable[TrialResult], path: str | Path) -> Path:
    """Write per-trial strategy records to CSV.

    Parameters
    ----------
    records : Iterable[TrialResult]
        Records to write.
    path : str | pathlib.Path
        Destination CSV path. Parent directories are created.

    Returns
    -------
    pathlib.Path
        Output CSV path.

    Raises
    ------
    ValueError
        If no records are provided.
    """

    rows = [record.as_row() for record in records]
    if not rows:
        raise ValueError("records must not be empty")

    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=list(_TRIAL_COLUMNS))
        writer.writeheader()
        writer.writerows(rows)
    return output_path


def read_trial_results_csv(path: str | Path) -> tuple[TrialResult, ...]:
    """Read records written by :func:`write_trial_results_csv`.

    Parameters
    ----------
    path : str | pathlib.Path
        Input CSV path.

    Returns
    -------
    tuple[TrialResult, ...]
        Parsed records in file order.

    Raises
    ------
    ValueError
        If the header lacks a required column or a row holds invalid values.
    """

    input_path = Path(path)
    with input_path.open("r", encoding="utf-8", newline="") as handle:
        reader = csv.DictReader(handle)
        _require_columns(reader.fieldnames, required=_TRIAL_COLUMNS)
        return tuple(_record_from_csv_mapping(raw, row_index=index) for index, raw in enumerate(reader))


def write_summary_csv(table: ProportionTable, path: str | Path) -> Path:
    """Write one CSV row per ``(strategy, outcome)`` cell of ``table``.

    Raises
    ------
    ValueError
        If ``table`` is empty.
    """

    rows = summary_rows(table)
    if not rows:
        raise ValueError("summary table must include at least one strategy")

    output_path = Path(path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8", newline="") as handle:
        writer = csv.DictWriter(handle, fieldnames=list(_SUMMARY_COLUMNS))
        writer.writeheader()
        writer.writerows(rows)
    return output_path


def _record_from_csv_mapping(raw: Mapping[str, str], *, row_index: int) -> TrialResult:
    """Parse one CSV row into a :class:`TrialResult`."""

    try:
        return TrialResult(
            trial_index=int(raw["trial_index"]),
            strategy=Strategy(raw["strategy"]),
            outcome=Outcome(raw["outcome"]),
            initial_pick=validate_door(int(raw["initial_pick"]), field_name="initial_pick"),
            opened_door=validate_door(int(raw["opened_door"]), field_name="opened_door"),
            final_pick=validate_door(int(raw["final_pick"]), field_name="final_pick"),
            prize_door=validate_door(int(raw["prize_door"]), field_name="prize_door"),
        )
    except ValueError as exc:
        raise ValueError(f"invalid trial record at CSV row {row_index}: {exc}") from exc


def _require_columns(fieldnames: Sequence[str] | None, *, required: tuple[str, ...]) -> None:
    """Require all expected columns to exist in CSV header."""

    if fieldnames is None:
        raise ValueError("CSV file must include a header row")
    missing = [name for name in required if name not in set(fieldnames)]
    if missing:
        raise ValueError(f"CSV file missing required columns: {missing}")


__all__ = [
    "read_trial_results_csv",
    "write_summary_csv",
    "write_trial_results_csv",
]
