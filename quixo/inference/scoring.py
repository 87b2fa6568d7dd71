from __future__ import annotations

from dataclasses import dataclass, field

from quixo.core.state import Move


@dataclass(frozen=True, order=True)
class ScoredMove:
    """A candidate move tagged with the score of the rule that produced it."""

    move: Move = field(compare=False)
    score: int
    rule: str = field(default="", compare=False)

    def __str__(self) -> str:
        source = f" via {self.rule}" if self.rule else ""
        return f"{self.move} [{self.score}{source}]"
