"""Engine evaluation utilities."""

from .match import EvaluationResult, RandomMover, evaluate_engines, play_game

__all__ = ["EvaluationResult", "RandomMover", "evaluate_engines", "play_game"]
