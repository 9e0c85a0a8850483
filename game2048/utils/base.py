# -*- coding: utf-8 -*-
"""
Boundary contracts between a game session and its input and display surfaces.
"""
from abc import ABC, abstractmethod


class Display(ABC):
    """
    Base class of the surfaces showing the board.
    """

    @abstractmethod
    def clear(self) -> None:
        """
        Remove every tile.
        """

    @abstractmethod
    def set_score(self, current: int, maximum: int) -> None:
        """
        Show the score of the current game and the best score of the run.

        Parameters
        ----------
        current: int
            Score of the current game
        maximum: int
            Best final score over the games of this run
        """

    @abstractmethod
    def add_tile(self, value: int, row: int, col: int) -> None:
        """
        Add a new tile.

        Parameters
        ----------
        value: int
            Value of the tile
        row, col: int
            Empty cell receiving it
        """

    @abstractmethod
    def move_tile(self, value: int, from_row: int, from_col: int, to_row: int, to_col: int) -> None:
        """
        Slide a tile of ``value`` from one cell to an empty one.
        """

    @abstractmethod
    def merge_tile(self, value: int, merged: int, from_row: int, from_col: int, to_row: int, to_col: int) -> None:
        """
        Slide a tile of ``value`` onto an equal tile, leaving a tile of ``merged``.
        """

    @abstractmethod
    def end_game(self) -> None:
        """
        Announce the end of the game.
        """

    @abstractmethod
    def display_moves(self) -> None:
        """
        Show every change requested since the last call.
        """


class InputSource(ABC):
    """
    Base class of the providers of keys and random tiles.
    """

    @abstractmethod
    def read_key(self) -> str:
        """
        Wait for the next key.

        Returns
        -------
        str
            "Up", "Down", "Left", "Right", "New Game", "Quit", or anything else for a key without effect.
        """

    @abstractmethod
    def get_random_tile(self) -> tuple[int, int, int]:
        """
        Propose a new tile.

        Returns
        -------
        tuple[int, int, int]
            Value (2 or 4), row and column. The cell may be occupied.
        """
