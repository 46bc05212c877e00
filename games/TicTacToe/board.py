"""
Tic-tac-toe board evaluation and the minimax opponent.

A board is a list of nine cells, indexed row by row, each holding 'X',
'O' or None. The human plays X and the computer plays O.
"""

from typing import List, Optional, Sequence, Tuple

HUMAN = 'X'
COMPUTER = 'O'
DRAW = 'draw'

Board = List[Optional[str]]

WIN_PATTERNS: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


def empty_board() -> Board:
    return [None] * 9


def empty_cells(board: Sequence[Optional[str]]) -> List[int]:
    return [i for i, cell in enumerate(board) if cell is None]


def other_mark(mark: str) -> str:
    return HUMAN if mark == COMPUTER else COMPUTER


def evaluate_winner(board: Sequence[Optional[str]]) -> Optional[str]:
    """
    Decide the outcome of a board without changing it.

    Args:
        board: Nine cells

    Returns:
        'X' or 'O' for a completed line, 'draw' for a full board without
        one, or None while the game is open

    Examples:
        >>> evaluate_winner(['X', 'X', 'X', None, 'O', 'O', None, None, None])
        'X'
        >>> evaluate_winner(empty_board()) is None
        True
    """
    for a, b, c in WIN_PATTERNS:
        if board[a] and board[a] == board[b] == board[c]:
            return board[a]
    if None not in board:
        return DRAW
    return None


def minimax(board: Sequence[Optional[str]], player: str, depth: int = 0) -> Tuple[Optional[int], int]:
    """
    Score a position by exhaustive search.

    The computer maximizes and the human minimizes. Faster wins and slower
    losses score better: a computer win is worth 10 - depth, a human win
    depth - 10 and a draw 0. On ties the first best cell in index order
    is kept.

    Args:
        board: Nine cells (not modified)
        player: Mark to move
        depth: Moves already searched

    Returns:
        (best cell or None at a finished position, score)
    """
    winner = evaluate_winner(board)
    if winner == COMPUTER:
        return None, 10 - depth
    if winner == HUMAN:
        return None, depth - 10
    if winner == DRAW:
        return None, 0

    best_index: Optional[int] = None
    best_score = 0
    for index in empty_cells(board):
        child = list(board)
        child[index] = player
        _, score = minimax(child, other_mark(player), depth + 1)

        if best_index is None:
            better = True
        elif player == COMPUTER:
            better = score > best_score
        else:
            better = score < best_score

        if better:
            best_index, best_score = index, score

    return best_index, best_score


def best_move(board: Sequence[Optional[str]]) -> Optional[int]:
    """Best cell for the computer, or None if the game is over."""
    index, _ = minimax(list(board), COMPUTER, 0)
    return index
