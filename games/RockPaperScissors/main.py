#!/usr/bin/env python3
"""
Rock Paper Scissors - Console entry point.

Usage:
    python main.py
    python main.py --name Ada --seed 7
    python main.py --scores-file /tmp/rps.json
"""

import argparse
import os
import random
import sys
from pathlib import Path
from typing import Callable, List, Optional

# Support running from any directory - add project root to path
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from arcade.persistence import JsonDocument
from games.RockPaperScissors.match import CHOICES, Match

SHORTCUTS = {choice[0]: choice for choice in CHOICES}


def format_scores(match: Match) -> str:
    return (f"{match.player_label}: {match.player_score}  "
            f"Computer: {match.computer_score}  Draws: {match.draw_score}  "
            f"Round {match.rounds_played}/{match.MAX_ROUNDS}")


def play_console(match: Match,
                 read: Callable[[str], str] = input,
                 write: Callable[[str], None] = print) -> None:
    """
    Run the match on text input.

    Commands: rock/paper/scissors (or r/p/s), new to reset, q to quit.
    """
    write(format_scores(match))
    while True:
        try:
            command = read("> ").strip().lower()
        except EOFError:
            return

        if command in ('q', 'quit'):
            return
        if command == 'new':
            match.reset()
            write(format_scores(match))
            continue

        choice = SHORTCUTS.get(command, command)
        if choice not in CHOICES:
            write("Enter rock, paper or scissors (r/p/s), new or q.")
            continue

        result = match.play(choice)
        if result is None:
            write("The match is over. Type new to play again.")
            continue

        write(f"You chose {result.player_choice}, computer chose {result.computer_choice}. {result.text}")
        write(format_scores(match))
        if match.is_finished:
            write(match.match_winner)


def main(argv: Optional[List[str]] = None) -> int:
    """Play Rock Paper Scissors in the terminal."""
    from games.RockPaperScissors import config

    parser = argparse.ArgumentParser(description="Best-of-three rock paper scissors")
    parser.add_argument('--name', type=str, default='', help='Player name')
    parser.add_argument('--seed', type=int, default=None, help='Seed for the computer')
    parser.add_argument('--scores-file', type=Path, default=None,
                        help=f'Tally file (default: {config.SCORES_FILE})')
    args = parser.parse_args(argv)

    document = JsonDocument(args.scores_file or config.SCORES_FILE)
    match = Match(document, rng=random.Random(args.seed), player_name=args.name)

    print("=" * 50)
    print("ROCK PAPER SCISSORS")
    print("=" * 50)
    print("Best of three. Enter r, p or s; new to reset; q to quit.")
    print("=" * 50)

    play_console(match)
    return 0


if __name__ == "__main__":
    sys.exit(main())
