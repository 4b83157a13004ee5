from __future__ import annotations

from collections import deque
from typing import Set

from dungeon.map.grid import Grid


def reachable_from_origin(grid: Grid) -> Set[int]:
    start = grid.get(0, 0)
    seen = {start.index}
    queue = deque([start])
    while queue:
        cell = queue.popleft()
        for linked in cell.links:
            if linked.index not in seen:
                seen.add(linked.index)
                queue.append(linked)
    return seen


def is_spanning_tree(grid: Grid) -> bool:
    return len(grid.link_pairs()) == grid.size - 1 and len(reachable_from_origin(grid)) == grid.size


def links_are_symmetric(grid: Grid) -> bool:
    return all(other.is_linked(cell) for cell in grid.each_cell() for other in cell.links)
