from __future__ import annotations

from typing import List

from dungeon.map.cell import Cell


def shortest_path(start: Cell, goal: Cell) -> List[Cell]:
    """Cells from ``start`` to ``goal``; raises UnreachableGoal when cut off."""
    return start.distances().path_to(goal)


def path_exists(start: Cell, goal: Cell) -> bool:
    return start.distances().at(goal) is not None
