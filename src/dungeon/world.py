import random

from esper import World

from dungeon.components.cell_type_registry import CellTypeRegistry
from dungeon.components.cell_types import CellTypes
from dungeon.events.bus import EventBus
from dungeon.map.cell_type_factory import CellTypeFactory


def create_world(
    event_bus: EventBus,
    *,
    rng: random.Random | None = None,
    type_factory: CellTypeFactory | None = None,
) -> World:
    world = World()
    setattr(world, "random", rng or random.Random())
    setattr(world, "event_bus", event_bus)

    # Single registry entity owning the cell types every level borrows.
    world.create_entity(
        CellTypeRegistry(),
        CellTypes(factory=type_factory or CellTypeFactory()),
    )
    return world


def get_cell_type_factory(world: World) -> CellTypeFactory:
    for entity, _ in world.get_component(CellTypeRegistry):
        return world.component_for_entity(entity, CellTypes).factory
    raise RuntimeError("CellTypes registry not found")
