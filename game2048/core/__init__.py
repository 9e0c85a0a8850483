"""
Rules engine of the 2048 game.

It provides the sides and keys of the game, the coordinate remapping between a turned board and the real
one, the tilt algorithm with its move and merge events, and the end of game checks.
"""

from .events import Coordinate, Event, MergeEvent, MoveEvent
from .gameboard import TiltResult, board_size, next_number, shift_up, tilt
from .gamemove import can_move, is_over
from .sides import Key, Side, key_to_side, parse_key, untilt

__all__ = [
    "Coordinate",
    "Event",
    "MoveEvent",
    "MergeEvent",
    "TiltResult",
    "board_size",
    "next_number",
    "shift_up",
    "tilt",
    "can_move",
    "is_over",
    "Key",
    "Side",
    "key_to_side",
    "parse_key",
    "untilt",
]
