from __future__ import annotations

import random
from typing import List

from dungeon.map.cell import Cell
from dungeon.map.grid import Grid


class RecursiveBacktracker:
    """Depth-first carving with an explicit stack; long, winding corridors."""

    name = "recursive_backtracker"

    def generate(self, grid: Grid, rng: random.Random) -> Grid:
        start = grid.random_cell(rng)
        stack: List[Cell] = [start]
        visited = {start.index}
        while stack:
            current = stack[-1]
            fresh = [cell for cell in current.neighbors() if cell.index not in visited]
            if not fresh:
                stack.pop()
                continue
            neighbor = rng.choice(fresh)
            current.link(neighbor)
            visited.add(neighbor.index)
            stack.append(neighbor)
        return grid
