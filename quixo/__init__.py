"""Quixo rule engine and rule-based computer player."""

from . import core, inference, evaluation
from .config import EngineConfig, GameConfig, QuixoConfig, RuleScores, config_from_dict, load_config
from .core import (
    BOARD_SIZE,
    EDGE_POSITIONS,
    Board,
    ComputerPlayer,
    Direction,
    GameLogic,
    GameSummary,
    InvalidMoveError,
    Move,
    MoveErrorKind,
    MoveRecord,
    Player,
    Symbol,
)
from .inference import InferenceEngine, ScoredMove
from .evaluation import EvaluationResult, RandomMover, evaluate_engines

__all__ = [
    "core",
    "inference",
    "evaluation",
    "EngineConfig",
    "GameConfig",
    "QuixoConfig",
    "RuleScores",
    "config_from_dict",
    "load_config",
    "BOARD_SIZE",
    "EDGE_POSITIONS",
    "Board",
    "ComputerPlayer",
    "Direction",
    "GameLogic",
    "GameSummary",
    "InvalidMoveError",
    "Move",
    "MoveErrorKind",
    "MoveRecord",
    "Player",
    "Symbol",
    "InferenceEngine",
    "ScoredMove",
    "EvaluationResult",
    "RandomMover",
    "evaluate_engines",
]
