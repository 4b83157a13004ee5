from __future__ import annotations

from typing import List, NamedTuple

from dungeon.errors import InvalidArgument
from dungeon.map.cell import Cell
from dungeon.map.distances import Distances
from dungeon.map.grid import Grid


class LongestPathResult(NamedTuple):
    start: Cell
    goal: Cell
    distances: Distances

    @property
    def length(self) -> int:
        return self.distances.at(self.goal)

    def path(self) -> List[Cell]:
        return self.distances.path_to(self.goal)


class LongestPath:
    """Double-sweep diameter estimate.

    Runs breadth-first distances from ``start``, then again from the farthest
    cell found. On a tree (every perfect maze) the two farthest cells are an
    exact diameter pair. With cycles the result is only a lower bound on the
    diameter.
    """

    name = "longest_path"

    @staticmethod
    def estimate(grid: Grid, start: Cell) -> LongestPathResult:
        if start is None or start.grid is not grid:
            raise InvalidArgument("Start cell does not belong to the given grid")
        first_sweep = start.distances()
        farthest, _ = first_sweep.max()
        second_sweep = farthest.distances()
        goal, _ = second_sweep.max()
        return LongestPathResult(farthest, goal, second_sweep)
