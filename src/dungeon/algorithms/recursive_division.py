from __future__ import annotations

import random

from dungeon.constants import MINIMUM_ROOM_SIZE, ROOM_CHANCE
from dungeon.map.grid import Grid


class RecursiveDivision:
    """Opens the whole grid, then splits regions with single-passage walls.

    Small regions occasionally stop splitting and stay open as rooms, so the
    result is connected but may contain cycles.
    """

    name = "recursive_division"

    def generate(self, grid: Grid, rng: random.Random) -> Grid:
        for cell in grid.each_cell():
            for neighbor in cell.neighbors():
                cell.link(neighbor, bidirectional=False)
        self._divide(grid, rng, 0, 0, grid.rows, grid.columns)
        return grid

    def _divide(self, grid: Grid, rng: random.Random, row: int, column: int, height: int, width: int) -> None:
        if height <= 1 or width <= 1:
            return
        if height < MINIMUM_ROOM_SIZE and width < MINIMUM_ROOM_SIZE and rng.randrange(ROOM_CHANCE) == 0:
            return
        if height > width:
            self._divide_horizontally(grid, rng, row, column, height, width)
        else:
            self._divide_vertically(grid, rng, row, column, height, width)

    def _divide_horizontally(self, grid: Grid, rng: random.Random, row: int, column: int, height: int, width: int) -> None:
        divide_south_of = rng.randrange(height - 1)
        passage_at = rng.randrange(width)
        for x in range(width):
            if x == passage_at:
                continue
            cell = grid.get(row + divide_south_of, column + x)
            cell.unlink(cell.south)
        self._divide(grid, rng, row, column, divide_south_of + 1, width)
        self._divide(grid, rng, row + divide_south_of + 1, column, height - divide_south_of - 1, width)

    def _divide_vertically(self, grid: Grid, rng: random.Random, row: int, column: int, height: int, width: int) -> None:
        divide_east_of = rng.randrange(width - 1)
        passage_at = rng.randrange(height)
        for y in range(height):
            if y == passage_at:
                continue
            cell = grid.get(row + y, column + divide_east_of)
            cell.unlink(cell.east)
        self._divide(grid, rng, row, column, height, divide_east_of + 1)
        self._divide(grid, rng, row, column + divide_east_of + 1, height, width - divide_east_of - 1)
