from dataclasses import dataclass

@dataclass(slots=True)
class CellTypeRegistry:
    """Empty tag component marking the single entity that owns the shared cell types.

    The same entity also carries a CellTypes component wrapping the factory every level borrows.
    """
    pass
