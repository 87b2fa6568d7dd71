"""Core game logic for Quixo."""

from .state import Direction, InvalidMoveError, Move, MoveErrorKind, Position, Symbol
from .board import (
    BOARD_SIZE,
    EDGE_POSITIONS,
    Board,
    edge_directions,
    in_bounds,
    is_edge,
    is_inward,
)
from .players import ComputerPlayer, Player
from .game import GameLogic, GameSummary, MoveRecord

__all__ = [
    "Symbol",
    "Direction",
    "Position",
    "Move",
    "MoveErrorKind",
    "InvalidMoveError",
    "BOARD_SIZE",
    "EDGE_POSITIONS",
    "Board",
    "edge_directions",
    "in_bounds",
    "is_edge",
    "is_inward",
    "Player",
    "ComputerPlayer",
    "GameLogic",
    "GameSummary",
    "MoveRecord",
]
