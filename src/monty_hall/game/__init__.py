"""Game steps: set up doors, pick, reveal, decide, score."""

from .rules import change_door, create_game, determine_winner, open_goat_door, select_door

__all__ = ["change_door", "create_game", "determine_winner", "open_goat_door", "select_door"]
