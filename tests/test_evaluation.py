import numpy as np

from quixo import InferenceEngine
from quixo.config import EngineConfig
from quixo.evaluation import RandomMover, evaluate_engines, play_game


def test_evaluate_engine_vs_random_small() -> None:
    engine = InferenceEngine(EngineConfig(seed=0))
    baseline = RandomMover(np.random.default_rng(1))
    result = evaluate_engines(engine, baseline, games=2, max_moves=60)

    assert result.games_played == 2
    assert result.wins_a + result.wins_b + result.draws == 2
    assert result.average_length > 0
    assert 0.0 <= result.winrate_a() <= 1.0


def test_play_game_respects_move_limit() -> None:
    first = RandomMover(np.random.default_rng(2))
    second = RandomMover(np.random.default_rng(3))
    winner, length = play_game(first, second, max_moves=10)

    assert winner in (None, 0, 1)
    assert 0 < length <= 10


def test_random_mover_plays_legal_moves() -> None:
    from quixo.core import GameLogic, Player, Symbol

    session = GameLogic(Player("a", Symbol.X), Player("b", Symbol.O))
    mover = RandomMover(np.random.default_rng(4))
    for _ in range(12):
        move = mover.decide_move(session, session.current_player.symbol)
        session.apply(move)
        if session.winner_after_move() is not None:
            break
        session.switch_player()
    assert session.move_number > 0
