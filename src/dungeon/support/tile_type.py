"""Canonical single-glyph tile symbols and pure classification helpers."""
from __future__ import annotations

from typing import FrozenSet, Tuple


class TileType:
    """Closed set of glyphs a cell can display.

    All predicates are total: anything that is not one of ``VALUES`` is simply
    neither walkable nor a wall.
    """

    EMPTY = " "
    WALL = "#"
    DOOR = "/"
    FLOOR = "."
    PLAYER = "@"
    MONSTER = "M"
    STAIRS = "%"
    VERTICAL_WALL = "|"
    GOLD = "$"

    VALUES: Tuple[str, ...] = (EMPTY, WALL, DOOR, FLOOR, PLAYER, MONSTER, STAIRS, VERTICAL_WALL, GOLD)

    _VALID: FrozenSet[str] = frozenset(VALUES)
    _WALKABLE: FrozenSet[str] = frozenset((EMPTY, FLOOR, DOOR, STAIRS, GOLD))
    _WALLS: FrozenSet[str] = frozenset((WALL, VERTICAL_WALL))

    @staticmethod
    def values() -> Tuple[str, ...]:
        return TileType.VALUES

    @staticmethod
    def is_valid(glyph: object) -> bool:
        try:
            return glyph in TileType._VALID
        except TypeError:
            # Unhashable input can never be a glyph.
            return False

    @staticmethod
    def is_walkable(glyph: object) -> bool:
        return TileType.is_valid(glyph) and glyph in TileType._WALKABLE

    @staticmethod
    def is_wall(glyph: object) -> bool:
        return TileType.is_valid(glyph) and glyph in TileType._WALLS
