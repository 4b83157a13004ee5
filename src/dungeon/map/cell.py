from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from dungeon.errors import InvalidArgument
from dungeon.map.cell_type import CellType
from dungeon.map.distances import Distances

if TYPE_CHECKING:
    from dungeon.map.grid import Grid

NORTH, SOUTH, EAST, WEST = range(4)


class Cell:
    """One node of the grid graph, fixed at ``(row, column)``.

    Neighbors and links are kept as indices into the owning grid's row-major
    cell list and resolved on access. Neighbors describe topology and are set
    once while the grid is built; links describe passability and are what
    generation algorithms mutate.
    """

    __slots__ = ("grid", "row", "column", "index", "cell_type", "_neighbors", "_links")

    def __init__(self, grid: Grid, row: int, column: int, cell_type: CellType) -> None:
        self.grid = grid
        self.row = row
        self.column = column
        self.index = row * grid.columns + column
        self.cell_type = cell_type
        self._neighbors: Tuple[Optional[int], ...] = (None, None, None, None)
        # Ordered set: insertion order keeps traversals reproducible.
        self._links: Dict[int, None] = {}

    def _wire(self, north: Optional[int], south: Optional[int], east: Optional[int], west: Optional[int]) -> None:
        self._neighbors = (north, south, east, west)

    def _resolve(self, direction: int) -> Optional[Cell]:
        index = self._neighbors[direction]
        return None if index is None else self.grid._cell_at(index)

    @property
    def north(self) -> Optional[Cell]:
        return self._resolve(NORTH)

    @property
    def south(self) -> Optional[Cell]:
        return self._resolve(SOUTH)

    @property
    def east(self) -> Optional[Cell]:
        return self._resolve(EAST)

    @property
    def west(self) -> Optional[Cell]:
        return self._resolve(WEST)

    @property
    def position(self) -> Tuple[int, int]:
        return self.row, self.column

    def neighbors(self) -> List[Cell]:
        """Adjacent cells (north, south, east, west order), linked or not."""
        return [self.grid._cell_at(index) for index in self._neighbors if index is not None]

    def is_neighbor(self, other: Optional[Cell]) -> bool:
        return other is not None and other.grid is self.grid and other.index in self._neighbors

    def link(self, other: Optional[Cell], bidirectional: bool = True) -> Cell:
        if other is None:
            return self
        if not self.is_neighbor(other):
            raise InvalidArgument(f"Cannot link {self.position} to non-adjacent cell {other.position}")
        self._links[other.index] = None
        if bidirectional:
            other._links[self.index] = None
        return self

    def unlink(self, other: Optional[Cell], bidirectional: bool = True) -> Cell:
        if other is None or other.grid is not self.grid:
            return self
        self._links.pop(other.index, None)
        if bidirectional:
            other._links.pop(self.index, None)
        return self

    def is_linked(self, other: Optional[Cell]) -> bool:
        return other is not None and other.grid is self.grid and other.index in self._links

    @property
    def links(self) -> Tuple[Cell, ...]:
        return tuple(self.grid._cell_at(index) for index in self._links)

    @property
    def link_count(self) -> int:
        return len(self._links)

    @property
    def is_dead_end(self) -> bool:
        return len(self._links) == 1

    def distances(self) -> Distances:
        """Fresh breadth-first distances rooted here; never cached."""
        return Distances.compute_from(self)

    @property
    def tile(self) -> str:
        return self.cell_type.glyph

    @tile.setter
    def tile(self, glyph: str) -> None:
        self.cell_type = self.grid.type_factory.get_by_glyph(glyph)

    def set_type(self, key: str) -> None:
        self.cell_type = self.grid.type_factory.get(key)

    @property
    def is_walkable(self) -> bool:
        return self.cell_type.walkable

    @property
    def is_player(self) -> bool:
        return self.cell_type.player

    @property
    def is_stairs(self) -> bool:
        return self.cell_type.stairs

    def __repr__(self) -> str:
        return f"Cell({self.row}, {self.column})"
