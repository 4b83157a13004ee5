import random

import pytest

from dungeon.algorithms import registry
from dungeon.algorithms.binary_tree import BinaryTree
from dungeon.algorithms.registry import (
    available_algorithm_names,
    create_algorithm_registry,
    get_algorithm,
    register_algorithm,
)
from dungeon.map.grid import Grid


class SnakeCorridor:
    """Links every row end to end; only used to exercise registration."""

    name = "snake_corridor"

    def generate(self, grid, rng):
        for cell in grid.each_cell():
            if cell.east is not None:
                cell.link(cell.east)
        return grid


@pytest.fixture(autouse=True)
def clean_registry():
    saved = dict(registry._registry)
    yield
    registry._registry.clear()
    registry._registry.update(saved)


def test_builtin_algorithms_available():
    assert available_algorithm_names() == [
        "aldous_broder",
        "binary_tree",
        "recursive_backtracker",
        "recursive_division",
    ]
    assert isinstance(get_algorithm("binary_tree"), BinaryTree)


def test_unknown_algorithm_raises():
    with pytest.raises(ValueError, match="Unknown generation algorithm"):
        get_algorithm("wilsons")


def test_registered_algorithm_is_selectable():
    register_algorithm(SnakeCorridor())
    algorithm = get_algorithm("snake_corridor")
    grid = algorithm.generate(Grid(2, 3), random.Random(0))
    assert len(grid.link_pairs()) == 4


def test_overrides_win():
    custom = SnakeCorridor()
    combined = create_algorithm_registry({"binary_tree": custom})
    assert combined["binary_tree"] is custom
