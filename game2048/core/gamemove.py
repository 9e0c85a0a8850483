"""
End of game utilities: adjacency check and terminal condition.
"""

from numpy import any as np_any
from numpy import ndarray


def can_move(board: ndarray) -> bool:
    """
    Check if two horizontally or vertically adjacent cells hold the same value.

    Parameters
    ----------
    board : ndarray
        The game board to check.

    Returns
    -------
    bool
        True if such a pair exists, False otherwise.

    Notes
    -----
    On a full board, an equal pair is the only way a move can still change the board.
    """
    return bool(np_any(board[:, :-1] == board[:, 1:]) or np_any(board[:-1] == board[1:]))


def is_over(board: ndarray, count: int, score: int, winning: int) -> bool:
    """
    Check if the game has ended.

    Parameters
    ----------
    board : ndarray
        The game board.
    count : int
        Number of tiles on the board.
    score : int
        Score of the current game.
    winning : int
        Score ending the game with a win.

    Returns
    -------
    bool
        True when the board is full with no equal neighbours, or when the score is exactly ``winning``.
    """
    return (count == board.size and not can_move(board)) or score == winning
