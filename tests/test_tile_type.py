from dungeon.support.tile_type import TileType


def test_every_value_is_a_single_glyph():
    assert len(TileType.values()) == 9
    assert all(len(glyph) == 1 for glyph in TileType.values())
    assert len(set(TileType.values())) == len(TileType.values())


def test_valid_only_accepts_known_glyphs():
    assert TileType.is_valid(TileType.GOLD)
    assert not TileType.is_valid("?")
    assert not TileType.is_valid(None)
    assert not TileType.is_valid(["#"])


def test_walkable_tiles():
    for glyph in (TileType.EMPTY, TileType.FLOOR, TileType.DOOR, TileType.STAIRS, TileType.GOLD):
        assert TileType.is_walkable(glyph), glyph
    for glyph in (TileType.WALL, TileType.VERTICAL_WALL, TileType.MONSTER):
        assert not TileType.is_walkable(glyph), glyph


def test_wall_tiles():
    assert TileType.is_wall(TileType.WALL)
    assert TileType.is_wall(TileType.VERTICAL_WALL)
    assert not TileType.is_wall(TileType.DOOR)


def test_invalid_glyph_is_neither_walkable_nor_wall():
    assert TileType.is_walkable("x") is False
    assert TileType.is_wall("x") is False
