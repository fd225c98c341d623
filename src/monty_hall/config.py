"""Config-driven batch runs.

A batch config is a mapping, or a JSON/YAML file whose root is one, with the
optional keys ``n_games``, ``seed`` and ``precision``. Unknown keys are
rejected so typos do not silently fall back to defaults.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from monty_hall.core.errors import InvalidArgumentError
from monty_hall.runtime.engine import (
    DEFAULT_N_GAMES,
    DEFAULT_PRECISION,
    BatchResult,
    SimulationConfig,
    run_batch,
)

CONFIG_KEYS: tuple[str, ...] = ("n_games", "seed", "precision")
CONFIG_SUFFIXES: tuple[str, ...] = (".json", ".yaml", ".yml")


def load_config(path: str | Path) -> dict[str, Any]:
    """Read a batch config file.

    Parameters
    ----------
    path : str | pathlib.Path
        Config file path (``.json``, ``.yaml`` or ``.yml``).

    Returns
    -------
    dict[str, Any]
        Parsed mapping restricted to :data:`CONFIG_KEYS`.

    Raises
    ------
    InvalidArgumentError
        If the suffix is unsupported, the root is not a mapping, or the
        mapping holds unknown keys.
    ImportError
        If a YAML file is given and PyYAML is missing.
    """

    config_path = Path(path)
    suffix = config_path.suffix.lower()

    if suffix == ".json":
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    elif suffix in {".yaml", ".yml"}:
        try:
            import yaml
        except ImportError as exc:  # pragma: no cover - only without pyyaml
            raise ImportError("reading YAML batch configs requires PyYAML (`pip install pyyaml`)") from exc
        raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    else:
        raise InvalidArgumentError(
            f"batch config {config_path.name!r} must end in one of {CONFIG_SUFFIXES}, got {suffix!r}"
        )

    if not isinstance(raw, dict):
        raise InvalidArgumentError(f"batch config root must be a mapping, got {type(raw).__name__}")
    _check_keys(raw)
    return raw


def simulation_config_from_mapping(config: Mapping[str, Any]) -> SimulationConfig:
    """Build a :class:`SimulationConfig` from a declarative mapping.

    Parameters
    ----------
    config : Mapping[str, Any]
        Mapping with optional ``n_games``, ``seed`` and ``precision`` keys.

    Returns
    -------
    SimulationConfig
        Validated batch configuration.

    Raises
    ------
    InvalidArgumentError
        If unknown keys are present or a value has the wrong type.
    """

    _check_keys(config)
    seed = config.get("seed")
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int)):
        raise InvalidArgumentError(f"config.seed must be an integer or null, got {seed!r}")
    return SimulationConfig(
        n_games=config.get("n_games", DEFAULT_N_GAMES),
        seed=seed,
        precision=config.get("precision", DEFAULT_PRECISION),
    )


def run_batch_from_config(config: Mapping[str, Any]) -> BatchResult:
    """Run one batch described by ``config``."""

    return run_batch(simulation_config_from_mapping(config))


def _check_keys(config: Mapping[str, Any]) -> None:
    unknown = sorted(str(key) for key in config if key not in CONFIG_KEYS)
    if unknown:
        raise InvalidArgumentError(f"batch config has unknown keys {unknown}; expected a subset of {CONFIG_KEYS}")


__all__ = [
    "CONFIG_KEYS",
    "CONFIG_SUFFIXES",
    "load_config",
    "run_batch_from_config",
    "simulation_config_from_mapping",
]
