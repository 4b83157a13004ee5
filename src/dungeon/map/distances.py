from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Tuple

from dungeon.errors import InvalidArgument, UnreachableGoal

if TYPE_CHECKING:
    from dungeon.map.cell import Cell


class Distances:
    """Breadth-first distances from one root cell over the linked subgraph.

    A result is a snapshot: it is never updated when links change, callers
    recompute from scratch. Cells the root cannot reach are absent.
    """

    def __init__(self, root: Cell) -> None:
        self.root = root
        self._cells: Dict[Cell, int] = {root: 0}

    @classmethod
    def compute_from(cls, root: Cell) -> "Distances":
        distances = cls(root)
        reached = distances._cells
        frontier: List[Cell] = [root]
        while frontier:
            new_frontier: List[Cell] = []
            for cell in frontier:
                step = reached[cell] + 1
                for linked in cell.links:
                    if linked in reached:
                        continue
                    reached[linked] = step
                    new_frontier.append(linked)
            frontier = new_frontier
        return distances

    def at(self, cell: Cell) -> Optional[int]:
        return self._cells.get(cell)

    def __contains__(self, cell: object) -> bool:
        return cell in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    @property
    def cells(self) -> Tuple[Cell, ...]:
        """Reached cells in discovery order."""
        return tuple(self._cells)

    def items(self) -> Iterator[Tuple[Cell, int]]:
        return iter(self._cells.items())

    def path_to(self, goal: Cell) -> List[Cell]:
        """Cells from the root to ``goal`` inclusive.

        Walks backwards from the goal, each step moving to a neighbor one step
        closer to the root that links to the current cell. On a tree that
        neighbor is unique; where cycles offer several, the one with the
        lowest row-major index is taken.
        """
        if goal is None or goal.grid is not self.root.grid:
            raise InvalidArgument("Goal cell does not belong to the grid these distances were computed on")
        distance = self._cells.get(goal)
        if distance is None:
            raise UnreachableGoal(f"Cell {goal.position} is not reachable from {self.root.position}")
        path = [goal]
        current = goal
        while distance > 0:
            previous = self._predecessor(current, distance)
            if previous is None:
                raise UnreachableGoal(
                    f"No link back from {current.position}; links changed after distances were computed"
                )
            path.append(previous)
            current = previous
            distance -= 1
        path.reverse()
        return path

    def _predecessor(self, cell: Cell, distance: int) -> Optional[Cell]:
        best: Optional[Cell] = None
        for neighbor in cell.neighbors():
            if self._cells.get(neighbor) != distance - 1 or not neighbor.is_linked(cell):
                continue
            if best is None or neighbor.index < best.index:
                best = neighbor
        return best

    def max(self) -> Tuple[Cell, int]:
        """Farthest reached cell and its distance.

        Ties go to the first such cell in the grid's row-major order.
        """
        best_cell, best_distance = self.root, 0
        for cell in self.root.grid.each_cell():
            distance = self._cells.get(cell)
            if distance is not None and distance > best_distance:
                best_cell, best_distance = cell, distance
        return best_cell, best_distance
