"""Simulation runtime for single games and batches."""

from .engine import (
    DEFAULT_N_GAMES,
    DEFAULT_PRECISION,
    BatchResult,
    SimulationConfig,
    play_game,
    play_n_games,
    run_batch,
)

__all__ = [
    "DEFAULT_N_GAMES",
    "DEFAULT_PRECISION",
    "BatchResult",
    "SimulationConfig",
    "play_game",
    "play_n_games",
    "run_batch",
]
