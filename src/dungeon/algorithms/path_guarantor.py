from __future__ import annotations

import logging
from typing import List

from dungeon.errors import InvalidArgument
from dungeon.map.cell import Cell
from dungeon.map.grid import Grid

logger = logging.getLogger(__name__)


def _manhattan(a: Cell, b: Cell) -> int:
    return abs(a.row - b.row) + abs(a.column - b.column)


def ensure_path(grid: Grid, start: Cell, goal: Cell) -> List[Cell]:
    """Carve a greedy Manhattan route from ``start`` to ``goal``.

    Each step links to the neighbor closest to the goal, so the route always
    terminates. Existing links are kept, which can introduce cycles; callers
    use this only to repair a level whose goal is unreachable.
    """
    if start.grid is not grid or goal.grid is not grid:
        raise InvalidArgument("ensure_path cells must belong to the given grid")
    walked = [start]
    current = start
    while current is not goal:
        step = min(current.neighbors(), key=lambda cell: (_manhattan(cell, goal), cell.index))
        if not current.is_linked(step):
            logger.debug("Linking %s -> %s to reach %s", current.position, step.position, goal.position)
            current.link(step)
        walked.append(step)
        current = step
    return walked
