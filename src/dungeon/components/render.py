from dataclasses import dataclass

@dataclass(slots=True)
class Render:
    """Glyph an entity paints onto its cell's tile."""
    glyph: str
