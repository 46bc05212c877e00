#!/usr/bin/env python3
"""
Tic-Tac-Toe - Console entry point.

Usage:
    python main.py
    python main.py --seed 3
"""

import argparse
import os
import random
import sys
from typing import Callable, List, Optional

# Support running from any directory - add project root to path
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from games.TicTacToe.game import TicTacToeGame


def format_board(game: TicTacToeGame) -> str:
    """Board as three text rows; empty cells show their 1-9 number."""
    cells = [mark or str(i + 1) for i, mark in enumerate(game.board)]
    rows = [" | ".join(cells[r * 3:r * 3 + 3]) for r in range(3)]
    return "\n---------\n".join(f" {row}" for row in rows)


def play_console(game: TicTacToeGame,
                 read: Callable[[str], str] = input,
                 write: Callable[[str], None] = print) -> None:
    """
    Run the game loop on text input.

    Commands: 1-9 to mark a cell, r to reset, q to quit.
    """
    write(format_board(game))
    write(game.status)
    while True:
        try:
            command = read("> ").strip().lower()
        except EOFError:
            return

        if command == 'q':
            return
        if command == 'r':
            game.reset()
        elif command.isdigit() and 1 <= int(command) <= 9:
            if not game.play(int(command) - 1):
                write("That cell is not available.")
                continue
            game.computer_move()
        else:
            write("Enter 1-9, r to reset or q to quit.")
            continue

        write(format_board(game))
        write(game.status)


def main(argv: Optional[List[str]] = None) -> int:
    """Run Tic-Tac-Toe in the terminal."""
    parser = argparse.ArgumentParser(description="Tic-Tac-Toe against the computer")
    parser.add_argument('--seed', type=int, default=None, help='Seed for the fallback move')
    args = parser.parse_args(argv)

    print("=" * 50)
    print("TIC-TAC-TOE")
    print("=" * 50)
    print("You are X. Enter 1-9 to mark a cell, r to reset, q to quit.")
    print("=" * 50)

    play_console(TicTacToeGame(rng=random.Random(args.seed)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
