from __future__ import annotations

import random
from typing import Protocol

from dungeon.map.grid import Grid


class GenerationAlgorithm(Protocol):
    """Strategy that carves passages into a grid.

    ``generate`` only adds or removes links. It never changes tiles,
    dimensions or neighbor wiring, and draws randomness exclusively from
    ``rng`` so a seed reproduces the same maze.
    """

    name: str

    def generate(self, grid: Grid, rng: random.Random) -> Grid:
        ...


def make_rng(seed: int | random.Random | None = None) -> random.Random:
    """Build the single random source for one generation run."""

    if isinstance(seed, random.Random):
        return seed
    return random.Random(seed)
