"""Per-tile records produced by a tilt, consumed by displays to animate the board."""

from dataclasses import dataclass

# ##>: (row, col) in the real, NORTH oriented board.
Coordinate = tuple[int, int]


@dataclass(frozen=True)
class MoveEvent:
    """A tile of ``value`` sliding from ``source`` to ``destination``."""

    value: int
    source: Coordinate
    destination: Coordinate


@dataclass(frozen=True)
class MergeEvent:
    """
    Two tiles of ``value`` combining into one tile of ``merged`` at ``destination``.

    Attributes
    ----------
    value : int
        Value of each tile before the merge.
    merged : int
        Value of the resulting tile, twice ``value``.
    sources : tuple[Coordinate, Coordinate]
        Where the two tiles came from. The second one is the tile sliding into the first.
    destination : Coordinate
        Cell holding the merged tile.
    """

    value: int
    merged: int
    sources: tuple[Coordinate, Coordinate]
    destination: Coordinate

    @property
    def source(self) -> Coordinate:
        """Origin of the tile that travels into the merge."""
        return self.sources[1]


Event = MoveEvent | MergeEvent
