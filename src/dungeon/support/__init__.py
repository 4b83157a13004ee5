from dungeon.support.tile_type import TileType

__all__ = ["TileType"]
