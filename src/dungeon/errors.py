"""Exception types raised by the dungeon core.

Each error subclasses the closest builtin so callers that only know about
``ValueError``/``KeyError``/``LookupError`` keep working.
"""


class DungeonError(Exception):
    """Base class for all dungeon core errors."""


class InvalidDimensions(DungeonError, ValueError):
    """Grid constructed with non-positive or non-integral rows/columns."""


class UnknownCellType(DungeonError, KeyError):
    """Strict cell-type lookup on a key that was never registered."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable.
        return str(self.args[0]) if self.args else ""


class UnreachableGoal(DungeonError, LookupError):
    """Path requested to a cell that has no distance from the root."""


class InvalidArgument(DungeonError, ValueError):
    """A cell was used with a grid or neighbor it does not belong to."""
