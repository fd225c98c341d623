"""Command-line entry point for batch simulations."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Sequence

from monty_hall.config import load_config, simulation_config_from_mapping
from monty_hall.io.tabular import write_summary_csv, write_trial_results_csv
from monty_hall.runtime.engine import BatchResult, run_batch

logger = logging.getLogger(__name__)


def run_simulation_cli(argv: Sequence[str] | None = None) -> int:
    """Run a batch from CLI flags and an optional JSON/YAML config.

    Parameters
    ----------
    argv : Sequence[str] | None, optional
        CLI argument list. When ``None``, process arguments are used.

    Returns
    -------
    int
        Exit code (`0` on success).
    """

    parser = argparse.ArgumentParser(description="Simulate the Monty Hall game under stay and switch strategies.")
    parser.add_argument("--config", default=None, help="Path to a JSON or YAML batch config.")
    parser.add_argument("--n-games", type=int, default=None, help="Number of games (default 100).")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible batch.")
    parser.add_argument("--precision", type=int, default=None, help="Decimal places in the table (default 2).")
    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory for CSV/JSON outputs. Nothing is written when omitted.",
    )
    parser.add_argument("--prefix", default="monty_hall", help="Output filename prefix.")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    mapping: dict[str, Any] = load_config(args.config) if args.config is not None else {}
    # Explicit flags take precedence over config values.
    for key in ("n_games", "seed", "precision"):
        value = getattr(args, key)
        if value is not None:
            mapping[key] = value

    config = simulation_config_from_mapping(mapping)
    result = run_batch(config)

    print(f"Simulation complete: n_games={config.n_games}, seed={config.seed}")
    print(result.summary.format())

    if args.output_dir is not None:
        if not result.records:
            logger.warning("no games were played; skipping output files")
            return 0
        _write_outputs(result, output_dir=Path(args.output_dir), prefix=str(args.prefix), seed=config.seed)
    return 0


def _write_outputs(result: BatchResult, *, output_dir: Path, prefix: str, seed: int | None) -> None:
    """Write trial CSV, summary CSV and summary JSON."""

    output_dir.mkdir(parents=True, exist_ok=True)
    trials_path = write_trial_results_csv(result.records, output_dir / f"{prefix}_trials.csv")
    summary_path = write_summary_csv(result.summary, output_dir / f"{prefix}_summary.csv")
    json_path = _write_json_summary(
        output_dir / f"{prefix}_summary.json",
        {
            "n_games": result.n_games,
            "seed": seed,
            "win_rates": {
                strategy.value: result.summary.win_rate(strategy) for strategy in result.summary.strategies
            },
        },
    )
    print(f"Trials CSV: {trials_path}")
    print(f"Summary CSV: {summary_path}")
    print(f"Summary JSON: {json_path}")


def _write_json_summary(path: Path, payload: dict[str, Any]) -> Path:
    """Write summary JSON payload to disk."""

    path.write_text(json.dumps(payload, indent=2, sort_keys=True), encoding="utf-8")
    return path


def main() -> None:
    """Execute the simulation CLI and exit with returned code."""

    raise SystemExit(run_simulation_cli())


if __name__ == "__main__":
    main()


__all__ = ["main", "run_simulation_cli"]
