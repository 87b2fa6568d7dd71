from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from quixo.config import EngineConfig
from quixo.core.board import EDGE_POSITIONS
from quixo.core.game import GameLogic
from quixo.core.state import Move, Symbol

from .rules import Rule, acting_as, build_rules
from .scoring import ScoredMove

logger = logging.getLogger(__name__)

FALLBACK_SCORE = 0


class InferenceEngine:
    """Chooses the computer player's move.

    Rules are evaluated in priority order and the highest score wins; on a
    tie the earlier rule is kept. When no rule fires, a random legal move is
    returned. The engine keeps no game state between calls.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        *,
        rules: Optional[Sequence[Rule]] = None,
        rng: Optional[np.random.Generator] = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.rules = tuple(rules) if rules is not None else build_rules(self.config)
        self.rng = rng or np.random.default_rng(self.config.seed)

    def decide_move(self, session: GameLogic, ai_symbol: Symbol) -> Optional[Move]:
        scored = self.decide_scored(session, ai_symbol)
        return scored.move if scored is not None else None

    def decide_scored(self, session: GameLogic, ai_symbol: Symbol) -> Optional[ScoredMove]:
        """Best rule move, else the random fallback.

        Raises ValueError when ``ai_symbol`` belongs to neither player.
        """
        session.player_for(ai_symbol)
        best = self.best_rule_move(session, ai_symbol)
        if best is not None:
            logger.debug("Rule %s chose %s", best.rule, best)
            return best
        if not self.config.fallback:
            return None
        move = self.random_move(session, ai_symbol)
        if move is None:
            logger.warning("No legal move available for %s", ai_symbol.char)
            return None
        logger.debug("No rule fired, falling back to random move %s", move)
        return ScoredMove(move, FALLBACK_SCORE, "random")

    def best_rule_move(self, session: GameLogic, ai_symbol: Symbol) -> Optional[ScoredMove]:
        best: Optional[ScoredMove] = None
        for rule in self.rules:
            try:
                result = rule.evaluate(session, ai_symbol)
            except Exception:
                logger.debug("Rule %s failed during simulation", rule.name, exc_info=True)
                continue
            if result is None:
                continue
            if best is None or result.score > best.score:
                best = result
        return best

    def random_move(self, session: GameLogic, ai_symbol: Symbol) -> Optional[Move]:
        """A uniformly random legal move for ``ai_symbol``, or None if it has none."""
        base = acting_as(session, ai_symbol)
        order = self.rng.permutation(len(EDGE_POSITIONS))
        for index in order:
            row, col = EDGE_POSITIONS[int(index)]
            directions = base.valid_directions(row, col)
            if directions:
                choice = directions[int(self.rng.integers(len(directions)))]
                return Move(row, col, choice)
        return None
