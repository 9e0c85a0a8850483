"""
Sides of the board, user keys and the coordinate remapping shared by every tilt direction.
"""

from enum import Enum


class Side(Enum):
    """Symbolic names for the four sides of a board."""

    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


class Key(Enum):
    """Commands understood by a game session."""

    UP = 'Up'
    DOWN = 'Down'
    LEFT = 'Left'
    RIGHT = 'Right'
    NEW_GAME = 'New Game'
    QUIT = 'Quit'


# ##>: Arrow glyphs sent by some input surfaces.
ARROWS = {'↑': Key.UP, '↓': Key.DOWN, '←': Key.LEFT, '→': Key.RIGHT}

DIRECTIONS = {Key.UP: Side.NORTH, Key.DOWN: Side.SOUTH, Key.LEFT: Side.WEST, Key.RIGHT: Side.EAST}


def parse_key(text: str) -> Key | None:
    """
    Convert a raw key string into a command.

    Parameters
    ----------
    text : str
        Key name ("Up", "New Game", ...) or arrow glyph.

    Returns
    -------
    Key | None
        The recognized command, or None when the string is not a command.
    """
    text = text.strip()
    if text in ARROWS:
        return ARROWS[text]
    try:
        return Key(text)
    except ValueError:
        return None


def key_to_side(key: Key) -> Side:
    """
    Return the side a direction key tilts toward.

    Raises
    ------
    ValueError
        If the key is not one of the four direction keys.
    """
    if key not in DIRECTIONS:
        raise ValueError(f'Unknown key designation: {key!r}')
    return DIRECTIONS[key]


def untilt(side: Side, row: int, col: int, size: int) -> tuple[int, int]:
    """
    Map a coordinate of a board turned so that row 0 faces ``side`` back to the real board.

    Parameters
    ----------
    side : Side
        Side the virtual board's row 0 faces.
    row, col : int
        Coordinate in the virtual board.
    size : int
        Dimension of the board.

    Returns
    -------
    tuple[int, int]
        The matching (row, col) in the NORTH oriented board.

    Raises
    ------
    ValueError
        If ``side`` is not a Side.

    Notes
    -----
    The mapping is a bijection for every side, so copying through it and back
    restores the board exactly.
    """
    if side is Side.NORTH:
        return row, col
    if side is Side.EAST:
        return col, size - 1 - row
    if side is Side.SOUTH:
        return size - 1 - row, col
    if side is Side.WEST:
        return size - 1 - col, row
    raise ValueError(f'Unknown direction: {side!r}')
