import numpy as np
import pytest

from quixo.config import EngineConfig, RuleScores
from quixo.core import Board, Direction, GameLogic, Move, Player, Symbol, edge_directions, is_edge
from quixo.inference import FALLBACK_SCORE, InferenceEngine, Rule, ScoredMove


def ai_to_move(rows) -> GameLogic:
    session = GameLogic(Player("human", Symbol.X), Player("ai", Symbol.O))
    session.board = Board.from_rows(rows)
    session.switch_player()
    return session


class FixedRule(Rule):
    def __init__(self, score, move, name="fixed"):
        super().__init__(score)
        self.move = move
        self.name = name

    def evaluate(self, session, ai_symbol):
        return ScoredMove(self.move, self.score, self.name)


class BrokenRule(Rule):
    name = "broken"

    def evaluate(self, session, ai_symbol):
        raise RuntimeError("simulation blew up")


MOVE_A = Move(0, 0, Direction.DOWN)
MOVE_B = Move(4, 4, Direction.UP)


def test_winning_move_beats_center_control() -> None:
    session = ai_to_move([".....", ".....", ".OOOO", ".....", "....."])
    engine = InferenceEngine()

    scored = engine.decide_scored(session, Symbol.O)

    assert scored.move == Move(2, 0, Direction.RIGHT)
    assert scored.score == 1000
    assert engine.decide_move(session, Symbol.O) == Move(2, 0, Direction.RIGHT)


def test_block_beats_center_control() -> None:
    session = ai_to_move([".....", "XXXX.", ".....", ".....", "....."])
    scored = InferenceEngine().decide_scored(session, Symbol.O)
    assert scored.score == 900
    assert scored.move == Move(0, 0, Direction.DOWN)


def test_dual_threat_beats_center_control() -> None:
    session = ai_to_move([".....", ".....", "OOO.O", "....O", "....."])
    scored = InferenceEngine().decide_scored(session, Symbol.O)
    assert scored.score == 700
    assert scored.move == Move(0, 0, Direction.RIGHT)


def test_center_control_on_empty_board() -> None:
    session = ai_to_move([".....", ".....", ".....", ".....", "....."])
    scored = InferenceEngine().decide_scored(session, Symbol.O)
    assert scored.score == 300
    assert scored.move == Move(0, 0, Direction.DOWN)


def test_decide_move_leaves_session_untouched() -> None:
    rows = [".....", "XXXX.", "..O..", ".....", "....."]
    session = ai_to_move(rows)
    InferenceEngine().decide_move(session, Symbol.O)
    assert session.board.to_rows() == rows
    assert session.move_number == 0
    assert session.current_player.symbol == Symbol.O


def test_higher_score_replaces_and_ties_keep_first() -> None:
    session = ai_to_move([".....", ".....", ".....", ".....", "....."])

    engine = InferenceEngine(rules=[FixedRule(300, MOVE_A), FixedRule(800, MOVE_B)])
    assert engine.decide_move(session, Symbol.O) == MOVE_B

    engine = InferenceEngine(rules=[FixedRule(500, MOVE_A, "first"), FixedRule(500, MOVE_B, "second")])
    scored = engine.decide_scored(session, Symbol.O)
    assert scored.move == MOVE_A
    assert scored.rule == "first"


def test_failing_rule_is_skipped() -> None:
    session = ai_to_move([".....", ".....", ".....", ".....", "....."])
    engine = InferenceEngine(rules=[BrokenRule(1000), FixedRule(100, MOVE_B)])
    assert engine.decide_move(session, Symbol.O) == MOVE_B


@pytest.mark.parametrize("seed", range(10))
def test_random_fallback_picks_a_legal_move(seed) -> None:
    rows = ["XOX.X", "X...O", "O...X", "X...X", "XX.OX"]
    session = ai_to_move(rows)
    engine = InferenceEngine(rules=(), rng=np.random.default_rng(seed))

    scored = engine.decide_scored(session, Symbol.O)

    assert scored.score == FALLBACK_SCORE
    move = scored.move
    assert is_edge(move.row, move.col)
    assert move.direction in edge_directions(move.row, move.col)
    assert session.board[move.position] != Symbol.X
    session.apply(move)


def test_random_fallback_covers_several_positions() -> None:
    session = ai_to_move([".....", ".....", ".....", ".....", "....."])
    engine = InferenceEngine(rules=(), rng=np.random.default_rng(0))
    seen = {engine.decide_move(session, Symbol.O).position for _ in range(40)}
    assert len(seen) > 1


def test_no_move_when_every_edge_cube_is_opponents() -> None:
    session = ai_to_move(["XXXXX", "X...X", "X...X", "X...X", "XXXXX"])
    assert InferenceEngine().decide_move(session, Symbol.O) is None


def test_unknown_symbol_raises_before_any_rule_runs() -> None:
    session = ai_to_move([".....", ".....", ".....", ".....", "....."])
    engine = InferenceEngine(rules=[BrokenRule(1000)])
    with pytest.raises(ValueError, match="No player uses symbol"):
        engine.decide_move(session, Symbol.EMPTY)


def test_fallback_can_be_disabled() -> None:
    session = ai_to_move([".....", ".....", ".....", ".....", "....."])
    engine = InferenceEngine(EngineConfig(fallback=False), rules=())
    assert engine.decide_move(session, Symbol.O) is None


def test_scores_come_from_config() -> None:
    config = EngineConfig(scores=RuleScores(center_control=42))
    session = ai_to_move([".....", ".....", ".....", ".....", "....."])
    assert InferenceEngine(config).decide_scored(session, Symbol.O).score == 42


def test_seeded_engines_agree() -> None:
    rows = ["XOX.X", "X...O", "O...X", "X...X", "XX.OX"]
    first = InferenceEngine(EngineConfig(seed=3), rules=())
    second = InferenceEngine(EngineConfig(seed=3), rules=())
    for _ in range(5):
        assert first.decide_move(ai_to_move(rows), Symbol.O) == second.decide_move(ai_to_move(rows), Symbol.O)
