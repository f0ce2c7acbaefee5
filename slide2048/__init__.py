from .board import Board, SIZE
from .game import Command, Direction, Game

__all__ = ["Board", "SIZE", "Command", "Direction", "Game"]
