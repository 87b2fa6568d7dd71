"""The four move-selection rules of the computer player.

Every rule walks :data:`EDGE_POSITIONS` in order, tries each direction the
AI may push an eligible cube in, and returns the first move that passes its
test. Trials run on clones of the session; the live game is never touched.
"""

from __future__ import annotations

from typing import Optional, Tuple

from quixo.config import EngineConfig
from quixo.core.board import EDGE_POSITIONS, is_inward
from quixo.core.game import GameLogic
from quixo.core.state import Direction, Move, Symbol

from .scoring import ScoredMove


def acting_as(session: GameLogic, symbol: Symbol) -> GameLogic:
    """Return ``session`` if ``symbol`` is to move, else a clone with that player to move."""
    if session.current_player.symbol == symbol:
        return session
    view = session.clone()
    view.current_player = view.player_for(symbol)
    return view


def simulate(session: GameLogic, row: int, col: int, direction: Direction) -> Optional[GameLogic]:
    trial = session.clone()
    try:
        trial.make_move(row, col, direction)
    except ValueError:
        return None
    return trial


def has_winning_move(session: GameLogic, symbol: Symbol) -> bool:
    """True if ``symbol`` could complete a line with one push on the current board."""
    base = acting_as(session, symbol)
    for move in base.legal_moves():
        trial = simulate(base, move.row, move.col, move.direction)
        if trial is not None and trial.check_win():
            return True
    return False


class Rule:
    """A single heuristic. Subclasses implement :meth:`accepts`."""

    name = "rule"

    def __init__(self, score: int) -> None:
        self.score = score

    def eligible(self, cell: Symbol, ai_symbol: Symbol) -> bool:
        return cell == Symbol.EMPTY or cell == ai_symbol

    def accepts(self, session: GameLogic, move: Move, ai_symbol: Symbol) -> bool:
        raise NotImplementedError

    def prepare(self, session: GameLogic, ai_symbol: Symbol) -> bool:
        """Hook run once per evaluation; returning False skips the scan."""
        return True

    def evaluate(self, session: GameLogic, ai_symbol: Symbol) -> Optional[ScoredMove]:
        base = acting_as(session, ai_symbol)
        if not self.prepare(base, ai_symbol):
            return None
        for row, col in EDGE_POSITIONS:
            if not self.eligible(base.board[row, col], ai_symbol):
                continue
            for direction in base.valid_directions(row, col):
                move = Move(row, col, direction)
                if self.accepts(base, move, ai_symbol):
                    return ScoredMove(move, self.score, self.name)
        return None

    def __repr__(self) -> str:
        return f"{type(self).__name__}(score={self.score})"


class WinningPositionRule(Rule):
    name = "winning_position"

    def accepts(self, session: GameLogic, move: Move, ai_symbol: Symbol) -> bool:
        trial = simulate(session, move.row, move.col, move.direction)
        return trial is not None and trial.check_win()


class BlockOpponentRule(Rule):
    """Stop the opponent from completing a line on their next turn.

    Eligible cubes are empty ones or the opponent's, but the trial push is
    made with the AI's own symbol, so opponent cubes are always rejected by
    move validation and only empty cubes can produce a block.
    """

    name = "block_opponent"

    def eligible(self, cell: Symbol, ai_symbol: Symbol) -> bool:
        return cell == Symbol.EMPTY or cell == ai_symbol.opponent()

    def prepare(self, session: GameLogic, ai_symbol: Symbol) -> bool:
        return has_winning_move(session, ai_symbol.opponent())

    def accepts(self, session: GameLogic, move: Move, ai_symbol: Symbol) -> bool:
        trial = simulate(session, move.row, move.col, move.direction)
        if trial is None:
            return False
        trial.switch_player()
        if trial.check_win():
            return False
        return not has_winning_move(trial, ai_symbol.opponent())


class DualThreatRule(Rule):
    name = "dual_threat"

    def __init__(self, score: int, *, min_lines: int = 2, line_min_count: int = 3) -> None:
        super().__init__(score)
        self.min_lines = min_lines
        self.line_min_count = line_min_count

    def accepts(self, session: GameLogic, move: Move, ai_symbol: Symbol) -> bool:
        trial = simulate(session, move.row, move.col, move.direction)
        if trial is None:
            return False
        threats = trial.count_potential_wins(ai_symbol, min_count=self.line_min_count)
        return threats >= self.min_lines


class CenterControlRule(Rule):
    name = "center_control"

    def accepts(self, session: GameLogic, move: Move, ai_symbol: Symbol) -> bool:
        return is_inward(move.row, move.col, move.direction)


def build_rules(config: Optional[EngineConfig] = None) -> Tuple[Rule, ...]:
    """The rule set in priority order."""
    config = config or EngineConfig()
    scores = config.scores
    return (
        WinningPositionRule(scores.winning_position),
        BlockOpponentRule(scores.block_opponent),
        DualThreatRule(
            scores.dual_threat,
            min_lines=config.dual_threat_lines,
            line_min_count=config.potential_line_min,
        ),
        CenterControlRule(scores.center_control),
    )

