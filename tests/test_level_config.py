import pytest

from dungeon.config import LevelConfig
from dungeon.constants import DEFAULT_COLUMNS, DEFAULT_ROWS
from dungeon.errors import InvalidDimensions


def test_defaults():
    config = LevelConfig()
    assert (config.rows, config.columns) == (DEFAULT_ROWS, DEFAULT_COLUMNS)
    assert config.player_start == (0, 0)
    assert config.seed is None and config.algorithm is None


@pytest.mark.parametrize("rows, columns", [(0, 5), (5, -1), (1, 1)])
def test_rejects_bad_dimensions(rows, columns):
    with pytest.raises(InvalidDimensions):
        LevelConfig(rows=rows, columns=columns)


def test_rejects_bad_difficulty_and_start():
    with pytest.raises(ValueError):
        LevelConfig(difficulty=0)
    with pytest.raises(ValueError):
        LevelConfig(rows=3, columns=3, player_start=(3, 0))
