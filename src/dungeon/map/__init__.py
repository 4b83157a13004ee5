from dungeon.map.cell import Cell
from dungeon.map.cell_type import CellType
from dungeon.map.cell_type_factory import CellTypeFactory
from dungeon.map.distances import Distances
from dungeon.map.grid import Grid

__all__ = [
    "Cell",
    "CellType",
    "CellTypeFactory",
    "Distances",
    "Grid",
]
