from dataclasses import dataclass

@dataclass(slots=True)
class Stairs:
    found_stairs: bool = False
