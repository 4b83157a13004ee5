from __future__ import annotations

import logging
from typing import Dict, Iterable, Mapping

from dungeon.errors import UnknownCellType
from dungeon.map.cell_type import CellType
from dungeon.support.tile_type import TileType

logger = logging.getLogger(__name__)


class CellTypeFactory:
    """Deduplicating registry of CellType flyweights.

    ``get`` is strict and raises UnknownCellType for unregistered keys.
    ``get_by_glyph`` is permissive and falls back to the ``empty`` type so a
    renderer or tile write never fails on an odd glyph.

    Re-registering a key replaces the instance: cells already holding the old
    object keep it. Only register while setting the factory up.
    """

    def __init__(self) -> None:
        self._types: Dict[str, CellType] = {}
        self._register_standard_types()

    def register(self, key: str, glyph: str, properties: Mapping[str, bool] | None = None) -> CellType:
        props = dict(properties or {})
        unknown = set(props) - {"walkable", "stairs", "player"}
        if unknown:
            raise ValueError(f"Unknown cell type properties: {sorted(unknown)}")
        if key in self._types:
            logger.debug("Re-registering cell type %r; existing holders keep the old instance", key)
        cell_type = CellType(
            key=key,
            glyph=glyph,
            walkable=bool(props.get("walkable", True)),
            stairs=bool(props.get("stairs", False)),
            player=bool(props.get("player", False)),
        )
        self._types[key] = cell_type
        return cell_type

    def get(self, key: str) -> CellType:
        try:
            return self._types[key]
        except KeyError as exc:
            raise UnknownCellType(f"Unknown cell type: {key!r}") from exc

    def get_by_glyph(self, glyph: str) -> CellType:
        for cell_type in self._types.values():
            if cell_type.glyph == glyph:
                return cell_type
        return self._types["empty"]

    def has(self, key: str) -> bool:
        return key in self._types

    def keys(self) -> Iterable[str]:
        return tuple(self._types.keys())

    def all(self) -> Iterable[CellType]:
        return tuple(self._types.values())

    def __len__(self) -> int:
        return len(self._types)

    def _register_standard_types(self) -> None:
        self.register("empty", TileType.EMPTY, {"walkable": True})
        self.register("wall", TileType.WALL, {"walkable": False})
        self.register("player", TileType.PLAYER, {"walkable": True, "player": True})
        self.register("stairs", TileType.STAIRS, {"walkable": True, "stairs": True})
        self.register("door", TileType.DOOR, {"walkable": True})
        self.register("floor", TileType.FLOOR, {"walkable": True})
        self.register("monster", TileType.MONSTER, {"walkable": False})
        self.register("vertical_wall", TileType.VERTICAL_WALL, {"walkable": False})
        self.register("gold", TileType.GOLD, {"walkable": True})
