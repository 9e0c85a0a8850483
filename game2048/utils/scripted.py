"""
Scripted input: keys and random tiles read from a text stream.

Each line holds either a key ("Up", "New Game", ...) or a tile as three integers "value row col". Lines are
consumed in the order the session asks for them, which is also the order a logged game records them.
"""

from typing import Iterable, Iterator

from game2048.utils.base import InputSource


class ScriptedInput(InputSource):
    """
    Input source replaying a recorded feed.

    Parameters
    ----------
    lines : Iterable[str]
        Feed lines, e.g. an open text file. Blank lines and lines starting with "#" are skipped.
    """

    def __init__(self, lines: Iterable[str]):
        self._lines: Iterator[str] = iter(lines)

    def _next_line(self) -> str | None:
        for line in self._lines:
            line = line.strip()
            if line and not line.startswith('#'):
                return line
        return None

    def read_key(self) -> str:
        """
        Consume the next line as a key. An exhausted feed reads as "Quit".
        """
        line = self._next_line()
        return 'Quit' if line is None else line

    def get_random_tile(self) -> tuple[int, int, int]:
        """
        Consume the next line as a tile.

        Raises
        ------
        ValueError
            If the feed is exhausted or the line is not three integers.
        """
        line = self._next_line()
        if line is None:
            raise ValueError('Scripted input exhausted while a random tile was expected.')
        fields = line.split()
        if len(fields) != 3:
            raise ValueError(f'Expected "value row col", got {line!r}.')
        value, row, col = (int(field) for field in fields)
        return value, row, col
