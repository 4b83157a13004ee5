from dataclasses import dataclass, field

from dungeon.map.cell_type_factory import CellTypeFactory


@dataclass(slots=True)
class CellTypes:
    """World-wide CellTypeFactory shared by every generated grid."""
    factory: CellTypeFactory = field(default_factory=CellTypeFactory)
