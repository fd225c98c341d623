"""Top-level package for ``monty_hall``.

One game runs through five steps:

1. :func:`~monty_hall.game.rules.create_game` hides a prize and two decoys,
2. :func:`~monty_hall.game.rules.select_door` makes the contestant's pick,
3. :func:`~monty_hall.game.rules.open_goat_door` opens an unpicked decoy,
4. :func:`~monty_hall.game.rules.change_door` applies stay or switch,
5. :func:`~monty_hall.game.rules.determine_winner` scores the final door.

:func:`~monty_hall.runtime.engine.play_game` runs the steps once for both
strategies and :func:`~monty_hall.runtime.engine.play_n_games` repeats them
and summarizes win proportions.
"""

from .analysis.summary import ProportionTable, count_outcomes, summarize
from .core.errors import InvalidArgumentError, InvalidStateError, MontyHallError
from .core.game import DOORS, Arrangement, DoorContent, Outcome, Strategy, TrialResult
from .game.rules import change_door, create_game, determine_winner, open_goat_door, select_door
from .runtime.engine import BatchResult, SimulationConfig, play_game, play_n_games, run_batch

__all__ = [
    "DOORS",
    "Arrangement",
    "BatchResult",
    "DoorContent",
    "InvalidArgumentError",
    "InvalidStateError",
    "MontyHallError",
    "Outcome",
    "ProportionTable",
    "SimulationConfig",
    "Strategy",
    "TrialResult",
    "change_door",
    "count_outcomes",
    "create_game",
    "determine_winner",
    "open_goat_door",
    "play_game",
    "play_n_games",
    "run_batch",
    "select_door",
    "summarize",
]
