from __future__ import annotations

from dataclasses import dataclass

from dungeon.map.grid import Grid


@dataclass(slots=True)
class Level:
    """The current dungeon level. A new level is a new entity with a new Grid."""
    grid: Grid
    difficulty: int
    seed: int
    algorithm: str
    path_length: int = 0


@dataclass(slots=True)
class LevelMember:
    """Marks entities that belong to one level and are discarded with it."""
    level_entity: int
