#!/usr/bin/env python3
"""Play Quixo against the computer via the console, with optional logging & replay."""

import argparse
import json
import logging
import sys
import time
from pathlib import Path
from typing import Dict, List, Optional

from quixo import (
    GameLogic,
    InferenceEngine,
    InvalidMoveError,
    Move,
    Player,
    GameConfig,
    QuixoConfig,
    Symbol,
    load_config,
)
from quixo.core import ComputerPlayer, Direction

logger = logging.getLogger("quixo.play")


def format_board(session: GameLogic) -> str:
    header = "  " + " ".join(str(col) for col in range(5))
    rows = [f"{r} " + " ".join(row) for r, row in enumerate(session.board.to_rows())]
    return "\n".join([header, *rows])


def parse_move(raw: str) -> Move:
    """Parse ``"row col direction"``, e.g. ``"0 2 down"``."""
    parts = raw.replace(",", " ").split()
    if len(parts) != 3:
        raise ValueError("Enter a move as: row col direction (e.g. 0 2 down)")
    return Move(int(parts[0]), int(parts[1]), Direction.parse(parts[2]))


def prompt_human_move(session: GameLogic) -> Move:
    while True:
        raw = input("Your move (row col direction, q to quit): ").strip()
        if raw.lower() in {"q", "quit", "exit"}:
            print("Leaving the game.")
            sys.exit(0)
        try:
            move = parse_move(raw)
        except ValueError as exc:
            print(exc)
            continue
        if not session.is_edge(move.row, move.col):
            print("You must pick a cube from the edge!")
            continue
        options = session.valid_directions(move.row, move.col)
        if move.direction not in options:
            allowed = ", ".join(d.value for d in options) or "none"
            print(f"You can't push that cube {move.direction.value}. Allowed: {allowed}")
            continue
        return move


def save_log(log: Dict, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(log, ensure_ascii=False, indent=2))
    print(f"Game log saved to {path}.")


def replay_logged_game(log_path: Path, *, verbose: bool = True) -> Dict[str, object]:
    data = json.loads(log_path.read_text())
    metadata = data.get("metadata", {})
    moves = data.get("moves", [])
    human_symbol = Symbol.parse(metadata.get("human_symbol", "X"))
    first = metadata.get("first", "human")

    human = Player("human", human_symbol)
    computer = Player("computer", human_symbol.opponent())
    players = (human, computer) if first == "human" else (computer, human)
    config = GameConfig(diagonal_wins=bool(metadata.get("diagonal_wins", False)))
    session = GameLogic(*players, config=config)
    if verbose:
        print("Replaying logged game.")
        print(format_board(session))

    winner: Optional[Player] = None
    for entry in moves:
        move = Move.from_dict(entry)
        session.apply(move)
        if verbose:
            print(f"{session.current_player} plays {move}")
            print(format_board(session))
        winner = session.winner_after_move()
        if winner is not None:
            break
        session.switch_player()

    summary = {
        "winner": winner.symbol.char if winner is not None else None,
        "moves": session.move_number,
        "board": session.board.to_rows(),
    }
    if verbose:
        print("Replay finished.")
        print(f"Winner: {summary['winner'] or 'none'}")
    return summary


def play_interactive(args: argparse.Namespace, config: QuixoConfig) -> None:
    log_records: List[Dict] = []
    human_symbol = Symbol.parse(args.symbol)
    human = Player(args.player_id, human_symbol)
    engine = InferenceEngine(config.engine)
    computer = ComputerPlayer("2", human_symbol.opponent(), engine)

    players = (human, computer) if args.first == "human" else (computer, human)
    session = GameLogic(*players, config=config.game)

    winner: Optional[Player] = None
    while True:
        print("\nBoard:")
        print(format_board(session))
        mover = session.current_player
        print(f"To move: {mover}")

        if mover.is_computer:
            move = computer.next_move(session)
            if move is None:
                print("The computer has no move available. Stalemate.")
                break
            print(f"Computer plays {move}")
        else:
            move = prompt_human_move(session)

        try:
            record = session.apply(move, timestamp=time.monotonic())
        except InvalidMoveError as exc:
            print(exc)
            continue
        log_records.append({"actor": "ai" if mover.is_computer else "human", **record.to_dict()})

        winner = session.winner_after_move()
        if winner is not None:
            break
        session.switch_player()

    summary = session.complete(winner)
    print("\nFinal board:")
    print(format_board(session))
    if winner is None:
        print("No winner.")
    elif summary.human_won:
        print("You win!")
    else:
        print("The computer wins.")

    if args.log_file:
        metadata = {
            "player_id": args.player_id,
            "human_symbol": human_symbol.char,
            "first": args.first,
            "diagonal_wins": config.game.diagonal_wins,
            "winner": summary.winner_id,
            "move_count": summary.move_count,
        }
        save_log({"metadata": metadata, "moves": log_records}, Path(args.log_file))


def main() -> None:
    parser = argparse.ArgumentParser(description="Play Quixo in the console against the computer.")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument("--player-id", type=str, default="player1")
    parser.add_argument("--symbol", choices=["X", "O"], default="X")
    parser.add_argument("--first", choices=["human", "computer"], default="human")
    parser.add_argument("--log-file", type=str)
    parser.add_argument("--replay-log", type=str, help="Replay a logged game and exit")
    parser.add_argument("--replay-quiet", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.replay_log:
        replay_logged_game(Path(args.replay_log), verbose=not args.replay_quiet)
        return

    config = load_config(args.config) if args.config else QuixoConfig()
    logger.debug("Loaded config: %s", config)
    play_interactive(args, config)


if __name__ == "__main__":
    main()
