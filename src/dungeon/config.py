"""Level configuration used by the maze system."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from dungeon.constants import DEFAULT_COLUMNS, DEFAULT_DIFFICULTY, DEFAULT_PLAYER_START, DEFAULT_ROWS
from dungeon.errors import InvalidDimensions


@dataclass(frozen=True)
class LevelConfig:
    """Tunable parameters for building a level."""

    rows: int = DEFAULT_ROWS
    columns: int = DEFAULT_COLUMNS
    difficulty: int = DEFAULT_DIFFICULTY
    # None draws a seed per level from the world's random source.
    seed: Optional[int] = None
    # None picks a registered algorithm per level from the level's seed.
    algorithm: Optional[str] = None
    player_start: Tuple[int, int] = DEFAULT_PLAYER_START

    def __post_init__(self) -> None:
        if not isinstance(self.rows, int) or not isinstance(self.columns, int):
            raise InvalidDimensions("Level rows and columns must be integers")
        if self.rows < 1 or self.columns < 1:
            raise InvalidDimensions(f"Level needs at least one row and column, got {self.rows}x{self.columns}")
        if self.rows * self.columns < 2:
            raise InvalidDimensions("Level needs at least two cells to separate player and stairs")
        if self.difficulty < 1:
            raise ValueError("Level difficulty must be >= 1")
        row, column = self.player_start
        if not (0 <= row < self.rows and 0 <= column < self.columns):
            raise ValueError(f"Player start {self.player_start} lies outside a {self.rows}x{self.columns} level")
        object.__setattr__(self, "player_start", (int(row), int(column)))
