import pytest

from dungeon.errors import UnknownCellType
from dungeon.map.cell_type_factory import CellTypeFactory
from dungeon.map.grid import Grid
from dungeon.support.tile_type import TileType


def test_standard_types_properties():
    factory = CellTypeFactory()
    assert factory.get("wall").is_walkable() is False
    assert factory.get("floor").is_walkable() is True
    assert factory.get("stairs").is_stairs() is True
    assert factory.get("player").is_player() is True
    assert factory.get("monster").walkable is False
    assert set(factory.keys()) == {
        "empty", "wall", "player", "stairs", "door", "floor", "monster", "vertical_wall", "gold",
    }


def test_get_returns_same_instance():
    factory = CellTypeFactory()
    assert factory.get("wall") is factory.get("wall")


def test_distinct_factories_do_not_share_instances():
    assert CellTypeFactory().get("wall") is not CellTypeFactory().get("wall")


def test_get_unknown_key_raises():
    factory = CellTypeFactory()
    with pytest.raises(UnknownCellType, match="lava"):
        factory.get("lava")
    # Still a KeyError for callers that only know the builtin.
    with pytest.raises(KeyError):
        factory.get("lava")


def test_get_by_glyph_matches_and_falls_back_to_empty():
    factory = CellTypeFactory()
    assert factory.get_by_glyph(TileType.WALL) is factory.get("wall")
    assert factory.get_by_glyph("?") is factory.get("empty")


def test_register_custom_type():
    factory = CellTypeFactory()
    lava = factory.register("lava", "~", {"walkable": False})
    assert factory.get("lava") is lava
    assert lava.properties == {"walkable": False, "stairs": False, "player": False}
    assert str(lava) == "~"


def test_register_rejects_unknown_properties():
    with pytest.raises(ValueError):
        CellTypeFactory().register("lava", "~", {"hot": True})


def test_reregistering_replaces_instance_for_new_lookups_only():
    factory = CellTypeFactory()
    grid = Grid(1, 2, type_factory=factory)
    cell = grid.get(0, 0)
    cell.set_type("door")
    old_door = factory.get("door")
    factory.register("door", TileType.DOOR, {"walkable": False})
    assert cell.cell_type is old_door
    assert factory.get("door") is not old_door


def test_cell_types_are_immutable():
    cell_type = CellTypeFactory().get("floor")
    with pytest.raises(AttributeError):
        cell_type.walkable = False


def test_large_grid_shares_flyweights():
    grid = Grid(100, 100)
    for cell in grid.each_cell():
        cell.tile = TileType.WALL if (cell.row + cell.column) % 2 else TileType.FLOOR
    distinct = {id(cell.cell_type) for cell in grid.each_cell()}
    assert len(distinct) == 2
