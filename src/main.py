"""
Main entry point for playing WordPlay in the terminal.

Usage:
    python -m src.main
    python -m src.main config.yaml --difficulty Hard --verbose
    python -m src.main --show-history
"""

import argparse
import logging
import re
import sys
from pathlib import Path
from typing import Callable, Optional, Tuple

import yaml

from .environment import ClaimEvent, ClaimResult, GameConfig, ScoreHistory, Session, SessionSummary
from .puzzle import Cell
from .utils.grid_visualizer import render_board, render_word_list, format_duration


DEFAULT_HISTORY_PATH = "results/scores.json"


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def parse_move(text: str) -> Optional[Tuple[Cell, Cell]]:
    """Parse 'r1 c1 r2 c2' (spaces or commas) into a start and end cell."""
    numbers = re.findall(r'-?\d+', text)
    if len(numbers) != 4 or re.search(r'[^\d\s,()-]', text):
        return None
    r1, c1, r2, c2 = (int(n) for n in numbers)
    return (r1, c1), (r2, c2)


def apply_move(session: Session, start: Cell, end: Cell) -> Optional[ClaimResult]:
    """Replay a drag from start to end as pointer events."""
    if not session.pointer_down(start):
        return None
    session.pointer_enter(end)
    return session.pointer_up()


def print_board(session: Session) -> None:
    print(render_board(
        session.grid,
        owners=session.ledger.cell_owners(),
        selected=session.selection.cells,
        highlight=session.rival_highlight,
    ))
    print()
    print("Words:")
    print(render_word_list(session.placements))
    scores = session.scores
    print(f"You: {scores['human']}  Rival: {scores['rival']}  Time: {format_duration(session.elapsed_seconds)}")


def print_history(history: ScoreHistory) -> None:
    entries = history.load()
    if not entries:
        print("No games played yet.")
        return
    print("=== Scoreboard ===")
    for entry in entries:
        print(
            f"{entry.timestamp[:19]}  {entry.difficulty:<8} "
            f"you {entry.player_score} - {entry.rival_score} rival  "
            f"({format_duration(entry.duration_seconds)})  {entry.outcome}"
        )


def play(
    session: Session,
    difficulty: str,
    input_fn: Callable[[str], str] = input,
    verbose: bool = False,
) -> Optional[SessionSummary]:
    """
    Run an interactive game until it completes or the player quits.

    Before each move is applied the scheduler catches up with the clock, so
    rival ticks that fell due while the player was typing happen first.

    Returns:
        The session summary, or None if the player quit
    """
    session.start_session(difficulty)
    if verbose:
        print(f"Difficulty: {difficulty}")
        print(f"Words placed: {len(session.placements)}")
        if session.puzzle.dropped:
            print(f"Words dropped: {', '.join(session.puzzle.dropped)}")
        print("-" * 40)

    while not session.is_complete:
        print()
        print_board(session)
        try:
            line = input_fn("move (r1 c1 r2 c2, q to quit)> ")
        except EOFError:
            line = "q"

        session.scheduler.run_due()
        if session.is_complete:
            break

        if line.strip().lower() in ("q", "quit", "exit"):
            session.close()
            print("Game abandoned.")
            return None

        move = parse_move(line)
        if move is None:
            print("Enter a move as four numbers: start row, start col, end row, end col.")
            continue

        if session.state != "playing":
            print("Hold on, a word was just claimed...")
            continue

        start, end = move
        result = apply_move(session, start, end)
        if result is None:
            print("No word there.")

    return session.summary


def main():
    parser = argparse.ArgumentParser(
        description="Race a simulated rival to find the hidden words",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  human_hold_seconds: 0.4
  rival_hold_seconds: 0.7
  history_path: results/scores.json
  difficulties:
    Easy:
      grid_size: 8
      words: [CAT, DOG, TREE, BOOK]
      rival_interval: 1.8
      rival_skill: 0.3
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file (defaults to the built-in difficulties)"
    )
    parser.add_argument(
        "--difficulty", "-d",
        default="Easy",
        help="Difficulty label to play (default: Easy)"
    )
    parser.add_argument(
        "--history",
        help=f"Path to the score history JSON (default: config history_path or {DEFAULT_HISTORY_PATH})"
    )
    parser.add_argument(
        "--show-history",
        action="store_true",
        help="Print the scoreboard and exit"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stdout"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )

    args = parser.parse_args()
    logging.basicConfig(level=getattr(logging, args.log_level))

    if args.config:
        try:
            config = load_config(args.config)
        except Exception as e:
            print(f"Error loading config: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        config = GameConfig()

    history_path = args.history or config.history_path or DEFAULT_HISTORY_PATH
    history = ScoreHistory(path=Path(history_path), limit=config.history_limit)

    if args.show_history:
        print_history(history)
        return 0

    if args.difficulty not in config.difficulties:
        known = ", ".join(config.difficulties)
        print(f"Error: unknown difficulty '{args.difficulty}' (expected one of: {known})", file=sys.stderr)
        sys.exit(1)

    def on_claim(event: ClaimEvent) -> None:
        who = "You" if event.claimant == "human" else "Rival"
        print(f"{who} found {event.word}!")

    session = Session(config=config, on_claim=on_claim, on_summary=history.record)

    try:
        summary = play(session, args.difficulty, verbose=args.verbose)
    except KeyboardInterrupt:
        session.close()
        print("\nGame interrupted by user")
        return 1

    if summary is None:
        return 0

    print()
    print_board(session)
    print()
    print("=== Game Summary ===")
    print(f"Difficulty: {summary.difficulty}")
    print(f"You: {summary.player_score}  Rival: {summary.rival_score}")
    print(f"Duration: {format_duration(summary.duration_seconds)}")
    print(f"Result: {summary.outcome}")
    if args.verbose:
        print(f"Saved to: {history_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
