"""Random tile proposals for a game session."""

from numpy.random import PCG64DXSM, Generator, default_rng

# ##>: Tile spawn probabilities for 2048 game (90% for 2, 10% for 4).
TILE_SPAWN_PROBS: dict[int, float] = {2: 0.9, 4: 0.1}

_TILE_VALUES = list(TILE_SPAWN_PROBS)
_TILE_PROBS = list(TILE_SPAWN_PROBS.values())


class TileGenerator:
    """
    Draw random tiles anywhere on the board.

    Occupied cells are proposed as well. The session asks again until it gets an empty one.

    Parameters
    ----------
    size : int
        Dimension of the board.
    seed : int, optional
        Random number generator seed for reproducibility.
    """

    def __init__(self, size: int, seed: int | None = None):
        self.size = size
        self._rng: Generator = default_rng(seed) if seed is not None else default_rng(PCG64DXSM())

    def __call__(self) -> tuple[int, int, int]:
        """
        Draw a tile.

        Returns
        -------
        tuple[int, int, int]
            Value, row and column.
        """
        value = int(self._rng.choice(_TILE_VALUES, p=_TILE_PROBS))
        row, col = self._rng.integers(0, self.size, size=2)
        return value, int(row), int(col)
