"""Rule-based move selection for the computer player."""

from .engine import FALLBACK_SCORE, InferenceEngine
from .rules import (
    BlockOpponentRule,
    CenterControlRule,
    DualThreatRule,
    Rule,
    WinningPositionRule,
    build_rules,
)
from .scoring import ScoredMove

__all__ = [
    "InferenceEngine",
    "FALLBACK_SCORE",
    "ScoredMove",
    "Rule",
    "WinningPositionRule",
    "BlockOpponentRule",
    "DualThreatRule",
    "CenterControlRule",
    "build_rules",
]
