from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict, Optional, Tuple


class Symbol(IntEnum):
    EMPTY = 0
    X = 1
    O = 2

    @property
    def char(self) -> str:
        return "." if self == Symbol.EMPTY else self.name

    def opponent(self) -> "Symbol":
        if self == Symbol.EMPTY:
            raise ValueError("An empty cell has no opponent.")
        return Symbol.O if self == Symbol.X else Symbol.X

    @staticmethod
    def parse(token: str) -> "Symbol":
        token = token.strip().upper() or "."
        if token in (".", "_"):
            return Symbol.EMPTY
        if token in ("X", "O"):
            return Symbol[token]
        raise ValueError(f"Unknown symbol: {token!r}")


class Direction(Enum):
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @staticmethod
    def parse(token: str) -> "Direction":
        try:
            return Direction(token.strip().upper())
        except ValueError:
            raise ValueError(f"Unknown direction: {token!r}") from None


class MoveErrorKind(Enum):
    NOT_ON_EDGE = "not_on_edge"
    OPPONENT_CUBE = "opponent_cube"
    INVALID_DIRECTION = "invalid_direction"
    OUT_OF_BOUNDS = "out_of_bounds"
    GAME_OVER = "game_over"


_ERROR_MESSAGES: Dict[MoveErrorKind, str] = {
    MoveErrorKind.NOT_ON_EDGE: "You must pick a cube from the edge!",
    MoveErrorKind.OPPONENT_CUBE: "You can't move your opponent's cube!",
    MoveErrorKind.INVALID_DIRECTION: "You can't push in that direction!",
    MoveErrorKind.OUT_OF_BOUNDS: "That position is not on the board!",
    MoveErrorKind.GAME_OVER: "The game is already over!",
}


class InvalidMoveError(ValueError):
    """Raised when a move breaks the rules; the session is left untouched."""

    def __init__(self, kind: MoveErrorKind, message: Optional[str] = None) -> None:
        super().__init__(message or _ERROR_MESSAGES[kind])
        self.kind = kind


@dataclass(frozen=True)
class Move:
    row: int
    col: int
    direction: Direction

    @property
    def position(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def as_tuple(self) -> Tuple[int, int, str]:
        return (self.row, self.col, self.direction.value)

    def to_dict(self) -> Dict[str, object]:
        return {"row": self.row, "col": self.col, "direction": self.direction.value}

    @staticmethod
    def from_dict(data: Dict[str, object]) -> "Move":
        return Move(int(data["row"]), int(data["col"]), Direction.parse(str(data["direction"])))

    def __str__(self) -> str:
        return f"({self.row},{self.col}) {self.direction.value}"


# Convenient tuple alias used across modules
Position = Tuple[int, int]
