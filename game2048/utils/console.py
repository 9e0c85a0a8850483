# -*- coding: utf-8 -*-
"""
Terminal surfaces: a silent display, a text display and keyboard input read line by line.
"""
from typing import Callable

from numpy import int64, ndarray, zeros

from game2048.utils.base import Display, InputSource

# ##: Short keys accepted on the terminal.
SHORTCUTS = {"w": "Up", "s": "Down", "a": "Left", "d": "Right", "n": "New Game", "q": "Quit"}


class NullDisplay(Display):
    """
    Display ignoring every request.
    """

    def clear(self) -> None:
        pass

    def set_score(self, current: int, maximum: int) -> None:
        pass

    def add_tile(self, value: int, row: int, col: int) -> None:
        pass

    def move_tile(self, value: int, from_row: int, from_col: int, to_row: int, to_col: int) -> None:
        pass

    def merge_tile(self, value: int, merged: int, from_row: int, from_col: int, to_row: int, to_col: int) -> None:
        pass

    def end_game(self) -> None:
        pass

    def display_moves(self) -> None:
        pass


class ConsoleDisplay(Display):
    """
    Display printing the board on the terminal.

    The board is rebuilt from the requests of the session, so what is printed is what a graphical
    surface would show.
    """

    def __init__(self, size: int):
        self.size = size
        self.board: ndarray = zeros((size, size), dtype=int64)
        self.score = 0
        self.max_score = 0

    def clear(self) -> None:
        self.board[:] = 0

    def set_score(self, current: int, maximum: int) -> None:
        self.score, self.max_score = current, maximum

    def add_tile(self, value: int, row: int, col: int) -> None:
        self.board[row, col] = value

    def move_tile(self, value: int, from_row: int, from_col: int, to_row: int, to_col: int) -> None:
        self.board[from_row, from_col] = 0
        self.board[to_row, to_col] = value

    def merge_tile(self, value: int, merged: int, from_row: int, from_col: int, to_row: int, to_col: int) -> None:
        self.board[from_row, from_col] = 0
        self.board[to_row, to_col] = merged

    def end_game(self) -> None:
        print(f"Game over! Score: {self.score} - Best: {self.max_score}")

    def display_moves(self) -> None:
        print(f"\nScore: {self.score} - Best: {self.max_score}")
        for row in self.board.tolist():
            print(" \t".join(map(str, row)))


class ConsoleInput(InputSource):
    """
    Keys typed on the terminal, random tiles from a generator.

    Parameters
    ----------
    tiles: Callable[[], tuple[int, int, int]]
        Random tile proposals, usually a ``TileGenerator``
    prompt: str
        Text shown before each key
    """

    def __init__(self, tiles: Callable[[], tuple[int, int, int]], prompt: str = "Move (w/a/s/d, n: new game, q: quit): "):
        self._tiles = tiles
        self._prompt = prompt

    def read_key(self) -> str:
        try:
            text = input(self._prompt).strip()
        except EOFError:
            return "Quit"
        return SHORTCUTS.get(text.lower(), text)

    def get_random_tile(self) -> tuple[int, int, int]:
        return self._tiles()
