#!/usr/bin/env python3
"""Evaluate the rule-based engine against a baseline opponent."""

import argparse
import json
import logging

import numpy as np

from quixo import InferenceEngine, QuixoConfig, load_config
from quixo.evaluation import RandomMover, evaluate_engines


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument("--games", type=int, default=20)
    parser.add_argument("--max-moves", type=int, default=200)
    parser.add_argument("--baseline", choices=["random", "engine"], default="random")
    parser.add_argument("--seed", type=int, default=0)
    args = parser.parse_args()

    logging.basicConfig(level=logging.WARNING)

    config = load_config(args.config) if args.config else QuixoConfig()
    rng = np.random.default_rng(args.seed)
    engine = InferenceEngine(config.engine, rng=rng)
    if args.baseline == "random":
        baseline = RandomMover(np.random.default_rng(args.seed + 1))
    else:
        baseline = InferenceEngine(config.engine, rng=np.random.default_rng(args.seed + 1))

    result = evaluate_engines(
        engine,
        baseline,
        games=args.games,
        max_moves=args.max_moves,
        config=config.game,
    )

    output = {
        "games": result.games_played,
        "engine_wins": result.wins_a,
        "baseline_wins": result.wins_b,
        "draws": result.draws,
        "average_length": result.average_length,
        "engine_winrate": result.winrate_a(),
        "baseline_winrate": result.winrate_b(),
    }
    print(json.dumps(output, indent=2))


if __name__ == "__main__":
    main()
