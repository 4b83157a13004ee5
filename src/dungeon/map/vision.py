"""Line-of-sight queries built on ``Grid.blocks_vision``."""
from __future__ import annotations

from typing import List, Set, Tuple

from dungeon.constants import DEFAULT_VISION_RADIUS
from dungeon.map.grid import Grid

Coord = Tuple[int, int]


def bresenham_line(start: Coord, end: Coord) -> List[Coord]:
    row, col = start
    end_row, end_col = end
    d_col = abs(end_col - col)
    d_row = abs(end_row - row)
    step_col = 1 if col < end_col else -1
    step_row = 1 if row < end_row else -1
    err = d_col - d_row
    points: List[Coord] = []
    while True:
        points.append((row, col))
        if row == end_row and col == end_col:
            return points
        doubled = 2 * err
        if doubled > -d_row:
            err -= d_row
            col += step_col
        if doubled < d_col:
            err += d_col
            row += step_row


def line_of_sight(grid: Grid, origin: Coord, target: Coord) -> bool:
    """True when no cell before ``target`` on the line blocks vision."""
    for row, col in bresenham_line(origin, target)[:-1]:
        if grid.blocks_vision(row, col):
            return False
    return True


def visible_cells(grid: Grid, row: int, col: int, radius: int = DEFAULT_VISION_RADIUS) -> Set[Coord]:
    visible: Set[Coord] = {(row, col)}
    for d_row in range(-radius, radius + 1):
        for d_col in range(-radius, radius + 1):
            if d_row * d_row + d_col * d_col > radius * radius:
                continue
            target = (row + d_row, col + d_col)
            if not grid.in_bounds(*target):
                continue
            if line_of_sight(grid, (row, col), target):
                visible.add(target)
    return visible
