from __future__ import annotations

import random

from dungeon.map.grid import Grid


class BinaryTree:
    """Links every cell to its north or east neighbor.

    Visits cells in row-major order and draws one coin flip only where both
    neighbors exist. Cells on the top row can only go east, cells on the last
    column only north, and the top-right corner links nothing, which leaves
    exactly ``rows * columns - 1`` links: a spanning tree.
    """

    name = "binary_tree"

    def generate(self, grid: Grid, rng: random.Random) -> Grid:
        for cell in grid.each_cell():
            north, east = cell.north, cell.east
            if north is not None and east is not None:
                target = north if rng.randrange(2) == 0 else east
            elif north is not None:
                target = north
            else:
                target = east
            if target is not None:
                cell.link(target)
        return grid
