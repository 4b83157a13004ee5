from dataclasses import dataclass

@dataclass(slots=True)
class Player:
    """Tag component for the entity the human controls."""
    pass
