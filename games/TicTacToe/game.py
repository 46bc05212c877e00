"""
Tic-tac-toe against an unbeatable computer.

The human always opens with X. After every human move the host calls
computer_move() to let O answer; the two steps are separate so a front end
can pause between them.
"""

import random
from enum import Enum
from typing import List, Optional

from arcade.logging import get_logger
from games.TicTacToe.board import (
    COMPUTER,
    DRAW,
    HUMAN,
    Board,
    best_move,
    empty_board,
    empty_cells,
    evaluate_winner,
)

log = get_logger('tictactoe')


class GameState(str, Enum):
    PLAYER_TURN = "player_turn"
    COMPUTER_TURN = "computer_turn"
    PLAYER_WON = "player_won"
    COMPUTER_WON = "computer_won"
    DRAW = "draw"


STATUS_TEXT = {
    GameState.PLAYER_TURN: "Your Turn (X)",
    GameState.COMPUTER_TURN: "Computer Thinking...",
    GameState.PLAYER_WON: "You Won!",
    GameState.COMPUTER_WON: "Computer Won!",
    GameState.DRAW: "It's a Draw!",
}


class TicTacToeGame:
    """One board of tic-tac-toe.

    Args:
        rng: Random generator for the fallback move (default: unseeded)

    Examples:
        >>> game = TicTacToeGame()
        >>> game.play(4)
        True
        >>> game.state is GameState.COMPUTER_TURN
        True
        >>> game.computer_move()
        0
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self._rng = rng or random.Random()
        self.board: Board = empty_board()
        self.state = GameState.PLAYER_TURN

    @property
    def is_over(self) -> bool:
        return self.state in (GameState.PLAYER_WON, GameState.COMPUTER_WON, GameState.DRAW)

    @property
    def status(self) -> str:
        return STATUS_TEXT[self.state]

    def available_moves(self) -> List[int]:
        return empty_cells(self.board)

    def play(self, index: int) -> bool:
        """
        Place the human's X.

        Args:
            index: Cell 0-8, row by row

        Returns:
            True if the mark was placed; False if the cell is taken or it is
            not the human's turn

        Raises:
            ValueError: If index is not a board cell
        """
        if not 0 <= index < 9:
            raise ValueError(f"cell index must be 0-8, got {index}")
        if self.state is not GameState.PLAYER_TURN or self.board[index] is not None:
            return False

        self.board[index] = HUMAN
        log.debug("X -> %d", index)
        self._update_state(next_turn=GameState.COMPUTER_TURN)
        return True

    def computer_move(self) -> Optional[int]:
        """
        Let O answer with the best move.

        Returns:
            The cell played, or None if it was not the computer's turn
        """
        if self.state is not GameState.COMPUTER_TURN:
            return None

        index = best_move(self.board)
        if index is None:
            # Fallback: any empty cell
            cells = self.available_moves()
            if not cells:
                return None
            index = self._rng.choice(cells)

        self.board[index] = COMPUTER
        log.debug("O -> %d", index)
        self._update_state(next_turn=GameState.PLAYER_TURN)
        return index

    def reset(self) -> None:
        self.board = empty_board()
        self.state = GameState.PLAYER_TURN

    def _update_state(self, next_turn: GameState) -> None:
        winner = evaluate_winner(self.board)
        if winner == HUMAN:
            self.state = GameState.PLAYER_WON
        elif winner == COMPUTER:
            self.state = GameState.COMPUTER_WON
        elif winner == DRAW:
            self.state = GameState.DRAW
        else:
            self.state = next_turn
            return
        log.info("Game over: %s", self.status)
