from __future__ import annotations

import logging
import random
from typing import Iterator, List, Optional, Tuple

from dungeon.errors import InvalidDimensions
from dungeon.map.cell import Cell
from dungeon.map.cell_type_factory import CellTypeFactory

logger = logging.getLogger(__name__)

Coord = Tuple[int, int]


def _is_index(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class Grid:
    """Fixed ``rows x columns`` board of cells in row-major order.

    The grid wires 4-connected adjacency once (no wraparound) and never
    touches link state afterwards; generation algorithms own that. A grid
    either builds its own CellTypeFactory or borrows one that callers share
    across levels.
    """

    def __init__(self, rows: int, columns: int, type_factory: CellTypeFactory | None = None) -> None:
        if not (_is_index(rows) and _is_index(columns)) or rows < 1 or columns < 1:
            raise InvalidDimensions(f"Grid needs at least one row and one column, got {rows!r}x{columns!r}")
        self.rows = rows
        self.columns = columns
        self.owns_type_factory = type_factory is None
        self.type_factory = type_factory if type_factory is not None else CellTypeFactory()
        empty = self.type_factory.get("empty")
        self._cells: List[Cell] = [Cell(self, i // columns, i % columns, empty) for i in range(rows * columns)]
        self._configure_cells()
        logger.debug("Built %dx%d grid (owns type factory: %s)", rows, columns, self.owns_type_factory)

    def _configure_cells(self) -> None:
        columns = self.columns
        for cell in self._cells:
            row, col, index = cell.row, cell.column, cell.index
            cell._wire(
                index - columns if row > 0 else None,
                index + columns if row < self.rows - 1 else None,
                index + 1 if col < columns - 1 else None,
                index - 1 if col > 0 else None,
            )

    def _cell_at(self, index: int) -> Cell:
        return self._cells[index]

    def in_bounds(self, row: object, col: object) -> bool:
        return _is_index(row) and _is_index(col) and 0 <= row < self.rows and 0 <= col < self.columns  # type: ignore[operator]

    def get(self, row: object, col: object) -> Optional[Cell]:
        """Cell at ``(row, col)`` or None; never raises for bad coordinates."""
        if not self.in_bounds(row, col):
            return None
        return self._cells[row * self.columns + col]  # type: ignore[operator]

    def __getitem__(self, position: Coord) -> Optional[Cell]:
        row, col = position
        return self.get(row, col)

    def each_cell(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return self.each_cell()

    @property
    def size(self) -> int:
        return self.rows * self.columns

    def __len__(self) -> int:
        return self.size

    def random_cell(self, rng: random.Random) -> Cell:
        return rng.choice(self._cells)

    def blocks_vision(self, row: object, col: object) -> bool:
        """Out-of-bounds coordinates and cells with no links are opaque.

        After a spanning-tree generation every cell has a link, so only the
        bounds check fires; the link test covers ungenerated or partial grids.
        """
        cell = self.get(row, col)
        return cell is None or cell.link_count == 0

    def dead_ends(self) -> List[Cell]:
        return [cell for cell in self._cells if cell.is_dead_end]

    def link_pairs(self) -> List[Tuple[Coord, Coord]]:
        """Every linked pair once, as sorted coordinate tuples."""
        pairs = set()
        for cell in self._cells:
            for other in cell.links:
                first, second = sorted((cell.position, other.position))
                pairs.add((first, second))
        return sorted(pairs)

    def __repr__(self) -> str:
        return f"Grid({self.rows}, {self.columns})"
