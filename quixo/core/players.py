from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional, Union

from .state import Move, Symbol

if TYPE_CHECKING:  # pragma: no cover
    from quixo.inference.engine import InferenceEngine
    from .game import GameLogic

logger = logging.getLogger(__name__)

_PLAYER_ID = re.compile(r"[A-Za-z0-9]+")


@dataclass(frozen=True)
class Player:
    player_id: str
    symbol: Symbol

    def __post_init__(self) -> None:
        if not isinstance(self.player_id, str) or not _PLAYER_ID.fullmatch(self.player_id):
            raise ValueError("Invalid player ID format")
        symbol = _coerce_symbol(self.symbol)
        object.__setattr__(self, "symbol", symbol)

    @property
    def is_computer(self) -> bool:
        return False

    def __str__(self) -> str:
        return f"{self.player_id} ({self.symbol.char})"


@dataclass(frozen=True)
class ComputerPlayer(Player):
    """A player whose moves come from an :class:`InferenceEngine`."""

    engine: Optional["InferenceEngine"] = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.engine is None:
            from quixo.inference.engine import InferenceEngine

            object.__setattr__(self, "engine", InferenceEngine())

    @property
    def is_computer(self) -> bool:
        return True

    def next_move(self, session: "GameLogic") -> Optional[Move]:
        try:
            move = self.engine.decide_move(session, self.symbol)
        except Exception:
            logger.exception("Inference engine failed for player %s", self.player_id)
            return None
        if move is None:
            logger.warning("No valid move could be determined for player %s", self.player_id)
        return move


def _coerce_symbol(value: Union[Symbol, str, int]) -> Symbol:
    try:
        symbol = Symbol.parse(value) if isinstance(value, str) else Symbol(value)
    except ValueError:
        symbol = Symbol.EMPTY
    if symbol == Symbol.EMPTY:
        raise ValueError("Symbol must be either 'X' or 'O'")
    return symbol
