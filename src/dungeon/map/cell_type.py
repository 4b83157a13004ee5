from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True, slots=True, eq=False)
class CellType:
    """Shared, immutable description of what occupies a cell.

    Instances are flyweights handed out by a CellTypeFactory: every cell showing
    a wall points at the same CellType object, so per-cell memory stays at one
    reference. Equality is identity; two factories never share instances.
    """

    key: str
    glyph: str
    walkable: bool = True
    stairs: bool = False
    player: bool = False

    @property
    def properties(self) -> Mapping[str, bool]:
        return MappingProxyType({"walkable": self.walkable, "stairs": self.stairs, "player": self.player})

    def is_walkable(self) -> bool:
        return self.walkable

    def is_stairs(self) -> bool:
        return self.stairs

    def is_player(self) -> bool:
        return self.player

    def __str__(self) -> str:
        return self.glyph
