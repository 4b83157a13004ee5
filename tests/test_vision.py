from dungeon.map.grid import Grid
from dungeon.map.vision import bresenham_line, line_of_sight, visible_cells


def test_bresenham_line_endpoints():
    assert bresenham_line((0, 0), (0, 3)) == [(0, 0), (0, 1), (0, 2), (0, 3)]
    line = bresenham_line((0, 0), (3, 2))
    assert line[0] == (0, 0) and line[-1] == (3, 2)


def test_line_of_sight_blocked_by_isolated_cell():
    grid = Grid(1, 4)
    grid.get(0, 0).link(grid.get(0, 1))
    grid.get(0, 2).link(grid.get(0, 3))
    assert line_of_sight(grid, (0, 0), (0, 2))
    assert line_of_sight(grid, (0, 3), (0, 2))
    grid.get(0, 0).unlink(grid.get(0, 1))
    assert not line_of_sight(grid, (0, 2), (0, 0))


def test_line_of_sight_to_self():
    grid = Grid(2, 2)
    assert line_of_sight(grid, (1, 1), (1, 1))


def test_visible_cells_on_generated_maze(make_maze):
    grid = make_maze(5, 5, seed=1)
    visible = visible_cells(grid, 2, 2, radius=2)
    assert (2, 2) in visible
    assert (0, 2) in visible
    assert (0, 0) not in visible  # outside the radius circle
    assert all(grid.in_bounds(*coord) for coord in visible)


def test_visible_cells_clip_to_bounds(make_maze):
    grid = make_maze(3, 3)
    visible = visible_cells(grid, 0, 0, radius=8)
    assert visible == {cell.position for cell in grid.each_cell()}
