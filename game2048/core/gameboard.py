"""
Board transformation for the 2048 game: tilting a board toward one side, merging equal tiles.

A single NORTH-only algorithm handles every direction. The board is first copied into a virtual board
turned so that row 0 faces the requested side, shifted up, then copied back through the same mapping.
"""

from typing import NamedTuple

from numpy import array_equal, empty_like, ndarray

from game2048.core.events import Event, MergeEvent, MoveEvent
from game2048.core.sides import Side, untilt


class TiltResult(NamedTuple):
    """
    Outcome of tilting a board.

    Attributes
    ----------
    board : ndarray
        The new board, a fresh array.
    changed : bool
        True iff at least one cell differs from the board before the tilt.
    score : int
        Sum of the values created by merges.
    merges : int
        Number of merges, i.e. how many tiles disappeared.
    events : tuple[Event, ...]
        Moves and merges in the order they happened, in real board coordinates.
    """

    board: ndarray
    changed: bool
    score: int
    merges: int
    events: tuple[Event, ...]


def board_size(board: ndarray) -> int:
    """
    Get the dimension N of an N x N board.

    Raises
    ------
    ValueError
        If the board is not a non-empty square matrix.
    """
    if board.ndim != 2 or board.shape[0] != board.shape[1] or board.shape[0] == 0:
        raise ValueError(f'Board must be a non-empty square matrix, got shape {board.shape}.')
    return board.shape[0]


def next_number(board: ndarray, start: int, column: int) -> tuple[int, int]:
    """
    Find the first non-zero value strictly below ``start`` in ``column``.

    Parameters
    ----------
    board : ndarray
        NORTH oriented board.
    start : int
        Row to search from, excluded.
    column : int
        Column to search in.

    Returns
    -------
    tuple[int, int]
        The value and its row, or ``(0, start)`` when there is none.
    """
    for row in range(start + 1, board.shape[0]):
        if board[row, column] != 0:
            return int(board[row, column]), row
    return 0, start


def shift_up(board: ndarray, side: Side) -> tuple[int, int, list[Event]]:
    """
    Move and merge tiles toward row 0. **Modifies ``board`` in place.**

    Parameters
    ----------
    board : ndarray
        Virtual board, turned so that row 0 faces ``side``.
    side : Side
        Orientation of the virtual board, used to report events in real coordinates.

    Returns
    -------
    score : int
        Sum of the merged values.
    merges : int
        Number of merges.
    events : list[Event]
        Moves and merges, in real board coordinates.

    Notes
    -----
    - Cells are visited row by row from the top. A cell is settled once visited.
    - A tile used as a merge source is zeroed at once, so it never takes part in a second merge.
    - An empty cell followed by two equal tiles receives both of them in a single step.
    """
    size = board.shape[0]
    score, merges = 0, 0
    events: list[Event] = []

    for x in range(size):
        for y in range(size):
            value, row = next_number(board, x, y)
            after, after_row = next_number(board, row, y)
            current = int(board[x, y])
            target = untilt(side, x, y, size)

            if current == 0 and value != 0 and value == after:
                # ##: Slide the nearer tile in, then merge the next one onto it.
                board[row, y] = 0
                board[after_row, y] = 0
                board[x, y] = 2 * value
                source, other = untilt(side, row, y, size), untilt(side, after_row, y, size)
                events.append(MoveEvent(value, source, target))
                events.append(MergeEvent(value, 2 * value, (source, other), target))
                score += 2 * value
                merges += 1
            elif current != 0 and current == value:
                # ##: Merge the next tile into this one.
                board[row, y] = 0
                board[x, y] = 2 * value
                events.append(MergeEvent(value, 2 * value, (target, untilt(side, row, y, size)), target))
                score += 2 * value
                merges += 1
            elif current == 0 and value != 0:
                # ##: Slide the next tile into the empty cell.
                board[row, y] = 0
                board[x, y] = value
                events.append(MoveEvent(value, untilt(side, row, y, size), target))

    return score, merges, events


def tilt(board: ndarray, side: Side) -> TiltResult:
    """
    Tilt the board toward ``side``.

    Parameters
    ----------
    board : ndarray
        The current board. It is not modified.
    side : Side
        Side the tiles move toward.

    Returns
    -------
    TiltResult
        The new board, whether it changed, the score and merge counts, and the events.

    Raises
    ------
    ValueError
        If ``side`` is not a Side or the board is not square.
    """
    size = board_size(board)

    # ##: Turn the board so that ``side`` faces north.
    virtual = empty_like(board)
    for r in range(size):
        for c in range(size):
            virtual[r, c] = board[untilt(side, r, c, size)]

    score, merges, events = shift_up(virtual, side)

    # ##: Turn it back.
    result = empty_like(board)
    for r in range(size):
        for c in range(size):
            result[untilt(side, r, c, size)] = virtual[r, c]

    return TiltResult(result, not array_equal(board, result), score, merges, tuple(events))
