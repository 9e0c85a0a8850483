# -*- coding: utf-8 -*-
"""
Game configuration.
"""
from dataclasses import dataclass

# ##: Size of the board: number of rows and of columns.
SIZE = 4

# ##: The necessary score for victory.
WINNING = 2048


@dataclass
class GameConfig:
    """
    Options of a game session.

    Attributes
    ----------
    size : int
        Number of rows and of columns of the board.
    winning : int
        Score ending the game with a win.
    seed : int | None
        Seed of the random tile generator. None draws a fresh one.
    log : bool
        Record keys and random tiles.
    display : bool
        Show the board.
    testing : bool
        Take keys and random tiles from standard input.
    """

    size: int = SIZE
    winning: int = WINNING
    seed: int | None = None
    log: bool = False
    display: bool = True
    testing: bool = False

    def __post_init__(self):
        if self.size < 2:
            raise ValueError(f'Board size must be at least 2, got {self.size}.')
        if self.winning <= 0:
            raise ValueError(f'Winning score must be positive, got {self.winning}.')

    @property
    def squares(self) -> int:
        """Number of squares on the board."""
        return self.size * self.size
