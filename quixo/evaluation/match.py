from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple, Union

import numpy as np

from quixo.config import GameConfig
from quixo.core import GameLogic, Move, Player, Symbol
from quixo.inference import InferenceEngine


@dataclass
class EvaluationResult:
    games_played: int
    wins_a: int
    wins_b: int
    draws: int
    average_length: float

    def winrate_a(self) -> float:
        return self.wins_a / max(1, self.games_played)

    def winrate_b(self) -> float:
        return self.wins_b / max(1, self.games_played)


class RandomMover:
    """Baseline opponent picking uniformly among the legal moves."""

    def __init__(self, rng: Optional[np.random.Generator] = None) -> None:
        self.rng = rng or np.random.default_rng()

    def decide_move(self, session: GameLogic, symbol: Symbol) -> Optional[Move]:
        moves = session.legal_moves()
        if not moves:
            return None
        return moves[int(self.rng.integers(len(moves)))]


Mover = Union[InferenceEngine, RandomMover]


def play_game(
    first: Mover,
    second: Mover,
    *,
    max_moves: int = 200,
    config: Optional[GameConfig] = None,
) -> Tuple[Optional[int], int]:
    """Play one game. Returns the index (0 or 1) of the winner, or None for a draw, and the length."""
    players = (Player("A", Symbol.X), Player("B", Symbol.O))
    movers = (first, second)
    session = GameLogic(players[0], players[1], config=config)

    while session.move_number < max_moves:
        index = 0 if session.current_player == players[0] else 1
        move = movers[index].decide_move(session, session.current_player.symbol)
        if move is None:
            break
        session.apply(move)
        winner = session.winner_after_move()
        if winner is not None:
            session.complete(winner)
            return players.index(winner), session.move_number
        session.switch_player()

    session.complete(None)
    return None, session.move_number


def evaluate_engines(
    mover_a: Mover,
    mover_b: Mover,
    *,
    games: int,
    max_moves: int = 200,
    config: Optional[GameConfig] = None,
) -> EvaluationResult:
    """Play ``games`` games, alternating which side moves first."""
    wins_a = 0
    wins_b = 0
    draws = 0
    total_moves = 0

    for game_index in range(games):
        a_first = game_index % 2 == 0
        first, second = (mover_a, mover_b) if a_first else (mover_b, mover_a)
        winner, length = play_game(first, second, max_moves=max_moves, config=config)
        total_moves += length
        if winner is None:
            draws += 1
        elif (winner == 0) == a_first:
            wins_a += 1
        else:
            wins_b += 1

    return EvaluationResult(
        games_played=games,
        wins_a=wins_a,
        wins_b=wins_b,
        draws=draws,
        average_length=total_moves / max(1, games),
    )
