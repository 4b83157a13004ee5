import random
import sys, os

import pytest

# Ensure src is on path for test imports
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
if SRC not in sys.path:
    sys.path.insert(0, SRC)

if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from dungeon.algorithms.binary_tree import BinaryTree
from dungeon.events.bus import EventBus
from dungeon.map.grid import Grid
from dungeon.world import create_world


@pytest.fixture
def make_maze():
    def _make_maze(rows: int = 5, columns: int = 5, seed: int = 7, algorithm=None) -> Grid:
        grid = Grid(rows, columns)
        (algorithm or BinaryTree()).generate(grid, random.Random(seed))
        return grid

    return _make_maze


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def world(bus):
    return create_world(bus, rng=random.Random(1234))
