# Level dimensions used when no LevelConfig overrides them.
DEFAULT_ROWS = 10
DEFAULT_COLUMNS = 10

# The player always enters a fresh level at the top-left cell.
DEFAULT_PLAYER_START = (0, 0)
DEFAULT_DIFFICULTY = 1

# Seeds drawn for levels without an explicit one stay below this bound.
MAX_SEED = 999_999_999_999_999

DEFAULT_VISION_RADIUS = 8

# RecursiveDivision tuning: regions below MINIMUM_ROOM_SIZE on both axes stop
# splitting with probability 1/ROOM_CHANCE, leaving an open room.
MINIMUM_ROOM_SIZE = 5
ROOM_CHANCE = 4
