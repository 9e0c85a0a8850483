# -*- coding: utf-8 -*-
"""
Display the game in a window and read its keys.
"""
from collections import deque
from typing import Callable

import numpy as np
from matplotlib import pyplot as plt

from game2048.utils.base import Display, InputSource


class WindowBoard(Display, InputSource):
    """
    Window to draw the 2048 board using Matplotlib.
    Inspired by @Farama-Foundation (Minigrid).

    Parameters
    ----------
    title: str
        Title of the window
    size: int
        Dimension of the board
    tiles: Callable[[], tuple[int, int, int]]
        Random tile proposals, usually a ``TileGenerator``
    """

    # ##: Colors
    COLORS = {
        0: "#CDC1B4",
        2: "#EEE4DA",
        4: "#ECE0C8",
        8: "#ECB280",
        16: "#EC8D53",
        32: "#F57C5F",
        64: "#E95937",
        128: "#F3D96B",
        256: "#F2D04A",
        512: "#E5BF2E",
        1024: "#E2B814",
        2048: "#EBC502",
    }
    HIGHER = "#3C3A32"

    # ##: Matplotlib key names to game keys.
    KEYS = {
        "up": "Up",
        "down": "Down",
        "left": "Left",
        "right": "Right",
        "n": "New Game",
        "backspace": "New Game",
        "q": "Quit",
        "escape": "Quit",
    }

    def __init__(self, title: str, size: int, tiles: Callable[[], tuple[int, int, int]]):
        self.title = title
        self.size = size
        self._tiles = tiles
        self._keys: deque = deque()
        self.board = np.zeros((size, size), dtype=np.int64)
        self.score, self.max_score = 0, 0

        # ## ----> Create support.
        self.fig, self.axe = plt.subplots()
        self.fig.subplots_adjust(left=0, bottom=0, right=1, top=1, wspace=0.1, hspace=0.1)
        self.axe.set_facecolor("#BBADA0")
        self.fig.canvas.manager.set_window_title(title)

        self.axe.xaxis.set_ticks_position("none")
        self.axe.yaxis.set_ticks_position("none")
        _ = self.axe.set_xticklabels([])
        _ = self.axe.set_yticklabels([])

        # ## ----> Add cell for board.
        self.textes = []
        self.axes = [
            self.fig.add_subplot(size, size, r * size + c) for r in range(0, size) for c in range(1, size + 1)
        ]
        for _ax in self.axes:
            text = _ax.text(
                0.5,
                0.5,
                "",
                horizontalalignment="center",
                verticalalignment="center",
                fontsize="x-large",
                fontweight="demibold",
            )
            self.textes.append(text)
            _ = _ax.set_xticks([])
            _ = _ax.set_yticks([])

        # ## ----> Flag indicating that the window was closed.
        self.closed = False

        def close_handler(evt):
            self.closed = True

        def key_handler(evt):
            if evt.key in self.KEYS:
                self._keys.append(self.KEYS[evt.key])

        self.fig.canvas.mpl_connect("close_event", close_handler)
        self.fig.canvas.mpl_connect("key_press_event", key_handler)

    def clear(self) -> None:
        self.board[:] = 0

    def set_score(self, current: int, maximum: int) -> None:
        self.score, self.max_score = current, maximum
        self.fig.canvas.manager.set_window_title(f"{self.title} - Score: {current} - Best: {maximum}")

    def add_tile(self, value: int, row: int, col: int) -> None:
        self.board[row, col] = value

    def move_tile(self, value: int, from_row: int, from_col: int, to_row: int, to_col: int) -> None:
        self.board[from_row, from_col] = 0
        self.board[to_row, to_col] = value

    def merge_tile(self, value: int, merged: int, from_row: int, from_col: int, to_row: int, to_col: int) -> None:
        self.board[from_row, from_col] = 0
        self.board[to_row, to_col] = merged

    def end_game(self) -> None:
        self.fig.canvas.manager.set_window_title(f"{self.title} - Game over! Score: {self.score}")

    def display_moves(self) -> None:
        """
        Update the cells and let Matplotlib redraw the window.
        """
        if self.closed:
            return

        # ## ----> Update the image data.
        values = np.reshape(self.board, -1)
        for _ax, text, value in zip(self.axes, self.textes, values):
            text.set_text(str(int(value)) if value else "")
            _ax.set_facecolor(self.COLORS.get(int(value), self.HIGHER))

        # ## ---> Request the window to be redrawn
        self.fig.canvas.draw_idle()
        self.fig.canvas.flush_events()

        # ## ----> Let Matplotlib process UI events
        plt.pause(0.001)

    def read_key(self) -> str:
        """
        Wait for a key press. A closed window reads as "Quit".
        """
        while not self._keys:
            if self.closed:
                return "Quit"
            plt.pause(0.05)
        return self._keys.popleft()

    def get_random_tile(self) -> tuple[int, int, int]:
        return self._tiles()

    def show(self):
        """
        Show the window without blocking.
        """
        plt.ion()
        plt.show()

    def close(self):
        """
        Close the window.
        """
        plt.close(self.fig)
        self.closed = True
