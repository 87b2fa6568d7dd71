"""Configuration dataclasses and the YAML loader used by the scripts."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

import yaml

T = TypeVar("T")


@dataclass
class RuleScores:
    winning_position: int = 1000
    block_opponent: int = 900
    dual_threat: int = 700
    center_control: int = 300


@dataclass
class EngineConfig:
    scores: RuleScores = field(default_factory=RuleScores)
    dual_threat_lines: int = 2
    potential_line_min: int = 3
    fallback: bool = True
    seed: Optional[int] = None


@dataclass
class GameConfig:
    diagonal_wins: bool = False


@dataclass
class QuixoConfig:
    game: GameConfig = field(default_factory=GameConfig)
    engine: EngineConfig = field(default_factory=EngineConfig)


def _build(cls: Type[T], data: Optional[Mapping[str, Any]], section: str) -> T:
    data = dict(data or {})
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ValueError(f"Unknown keys in '{section}' config: {', '.join(unknown)}")
    return cls(**data)


def config_from_dict(raw: Optional[Mapping[str, Any]]) -> QuixoConfig:
    raw = dict(raw or {})
    unknown = sorted(set(raw) - {"game", "engine"})
    if unknown:
        raise ValueError(f"Unknown config sections: {', '.join(unknown)}")
    engine_raw: Dict[str, Any] = dict(raw.get("engine") or {})
    scores = _build(RuleScores, engine_raw.pop("scores", None), "engine.scores")
    engine = _build(EngineConfig, engine_raw, "engine")
    engine.scores = scores
    return QuixoConfig(
        game=_build(GameConfig, raw.get("game"), "game"),
        engine=engine,
    )


def load_config(path: Union[str, Path]) -> QuixoConfig:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    return config_from_dict(yaml.safe_load(path.read_text(encoding="utf-8")) or {})
