from dataclasses import dataclass
from typing import Tuple

@dataclass(slots=True)
class Position:
    row: int
    column: int

    @property
    def coordinates(self) -> Tuple[int, int]:
        return self.row, self.column
