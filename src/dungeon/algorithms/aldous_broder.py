from __future__ import annotations

import random

from dungeon.map.grid import Grid


class AldousBroder:
    """Random walk that links each cell the first time it is entered.

    Produces a uniform spanning tree; the walk can take a while on large
    grids because it revisits cells freely.
    """

    name = "aldous_broder"

    def generate(self, grid: Grid, rng: random.Random) -> Grid:
        cell = grid.random_cell(rng)
        unvisited = grid.size - 1
        while unvisited > 0:
            neighbor = rng.choice(cell.neighbors())
            if neighbor.link_count == 0:
                cell.link(neighbor)
                unvisited -= 1
            cell = neighbor
        return grid
