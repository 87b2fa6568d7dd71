from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from quixo.config import GameConfig

from .board import EDGE_POSITIONS, Board, edge_directions, in_bounds, is_edge
from .players import ComputerPlayer, Player
from .state import Direction, InvalidMoveError, Move, MoveErrorKind, Symbol


@dataclass(frozen=True)
class MoveRecord:
    move_number: int
    player_id: str
    symbol: Symbol
    move: Move
    duration: float = 0.0

    def to_dict(self) -> dict:
        return {
            "move_number": self.move_number,
            "player_id": self.player_id,
            "symbol": self.symbol.char,
            **self.move.to_dict(),
            "duration": self.duration,
        }


@dataclass(frozen=True)
class GameSummary:
    """What a persistence collaborator needs to record a finished game."""

    game_id: Optional[Any]
    winner_id: Optional[str]
    human_won: bool
    move_count: int
    durations: Tuple[float, ...] = field(default_factory=tuple)


class GameLogic:
    """One game session: the board, both players and whose turn it is.

    ``make_move`` is the only operation that changes the board. Rules and
    the inference engine work on :meth:`clone` copies.
    """

    def __init__(
        self,
        player1: Player,
        player2: Player,
        *,
        game_id: Optional[Any] = None,
        config: Optional[GameConfig] = None,
    ) -> None:
        if player1.symbol == player2.symbol:
            raise ValueError("Players must use different symbols.")
        self.board = Board()
        self.player1 = player1
        self.player2 = player2
        self.current_player: Player = player1
        self.game_id = game_id
        self.config = config or GameConfig()
        self.move_number = 0
        self.completed = False
        self.winner: Optional[Player] = None
        self.history: List[MoveRecord] = []
        self._last_timestamp: Optional[float] = None
        self._summary: Optional[GameSummary] = None

    @classmethod
    def versus_computer(
        cls,
        human: Player,
        *,
        ai_id: str = "2",
        game_id: Optional[Any] = None,
        config: Optional[GameConfig] = None,
    ) -> "GameLogic":
        computer = ComputerPlayer(ai_id, human.symbol.opponent())
        return cls(human, computer, game_id=game_id, config=config)

    # ------------------------------------------------------------------ queries

    def is_edge(self, row: int, col: int) -> bool:
        return is_edge(row, col)

    def valid_directions(self, row: int, col: int) -> Tuple[Direction, ...]:
        """Directions the current player may push the cube at ``(row, col)`` in."""
        if not self.is_edge(row, col):
            return ()
        cell = self.board[row, col]
        if cell != Symbol.EMPTY and cell != self.current_player.symbol:
            return ()
        return edge_directions(row, col)

    def legal_moves(self) -> List[Move]:
        return [
            Move(row, col, direction)
            for row, col in EDGE_POSITIONS
            for direction in self.valid_directions(row, col)
        ]

    def check_win(self) -> bool:
        return self.board.has_line(self.current_player.symbol, diagonals=self.config.diagonal_wins)

    def has_line(self, symbol: Symbol) -> bool:
        return self.board.has_line(symbol, diagonals=self.config.diagonal_wins)

    def winner_after_move(self) -> Optional[Player]:
        """The player to credit once the current player has moved.

        A line for the mover wins even if the push also completed one for
        the opponent.
        """
        if self.check_win():
            return self.current_player
        opponent = self.opponent_of(self.current_player)
        if self.has_line(opponent.symbol):
            return opponent
        return None

    def count_potential_wins(self, symbol: Symbol, *, min_count: int = 3) -> int:
        return self.board.count_potential_lines(symbol, min_count=min_count)

    def opponent_of(self, player: Player) -> Player:
        return self.player2 if player == self.player1 else self.player1

    def player_for(self, symbol: Symbol) -> Player:
        if self.player1.symbol == symbol:
            return self.player1
        if self.player2.symbol == symbol:
            return self.player2
        raise ValueError(f"No player uses symbol {symbol.char}.")

    # ---------------------------------------------------------------- mutation

    def make_move(
        self,
        row: int,
        col: int,
        direction: Direction,
        *,
        timestamp: Optional[float] = None,
    ) -> MoveRecord:
        if self.completed:
            raise InvalidMoveError(MoveErrorKind.GAME_OVER)
        if not in_bounds(row, col):
            raise InvalidMoveError(MoveErrorKind.OUT_OF_BOUNDS)
        if not self.is_edge(row, col):
            raise InvalidMoveError(MoveErrorKind.NOT_ON_EDGE)
        symbol = self.current_player.symbol
        cell = self.board[row, col]
        if cell != Symbol.EMPTY and cell != symbol:
            raise InvalidMoveError(MoveErrorKind.OPPONENT_CUBE)
        if isinstance(direction, str):
            direction = Direction.parse(direction)
        if direction not in edge_directions(row, col):
            raise InvalidMoveError(MoveErrorKind.INVALID_DIRECTION)

        self.board.push(row, col, direction, symbol)
        self.move_number += 1

        duration = 0.0
        if timestamp is not None:
            if self._last_timestamp is not None:
                duration = max(0.0, timestamp - self._last_timestamp)
            self._last_timestamp = timestamp
        record = MoveRecord(
            move_number=self.move_number,
            player_id=self.current_player.player_id,
            symbol=symbol,
            move=Move(row, col, direction),
            duration=duration,
        )
        self.history.append(record)
        return record

    def apply(self, move: Move, *, timestamp: Optional[float] = None) -> MoveRecord:
        return self.make_move(move.row, move.col, move.direction, timestamp=timestamp)

    def switch_player(self) -> None:
        self.current_player = self.player2 if self.current_player == self.player1 else self.player1

    def complete(self, winner: Optional[Player]) -> GameSummary:
        """Mark the game finished. Calling it again returns the first summary."""
        if self._summary is not None:
            return self._summary
        self.completed = True
        self.winner = winner
        self._summary = GameSummary(
            game_id=self.game_id,
            winner_id=winner.player_id if winner is not None else None,
            human_won=winner is not None and not winner.is_computer,
            move_count=self.move_number,
            durations=tuple(record.duration for record in self.history),
        )
        return self._summary

    # --------------------------------------------------------------- simulation

    def clone(self) -> "GameLogic":
        copy = GameLogic(self.player1, self.player2, config=self.config)
        copy.board = self.board.copy()
        copy.current_player = self.current_player
        copy.move_number = self.move_number
        return copy

    def __repr__(self) -> str:
        board_str = "\n".join(self.board.to_rows())
        return (
            f"GameLogic(current={self.current_player}, moves={self.move_number}, "
            f"completed={self.completed})\n{board_str}"
        )
