from __future__ import annotations

import logging
import random
from typing import Optional

from esper import World

from dungeon.algorithms.base import GenerationAlgorithm, make_rng
from dungeon.algorithms.longest_path import LongestPath
from dungeon.algorithms.path_guarantor import ensure_path
from dungeon.algorithms.registry import available_algorithm_names, get_algorithm
from dungeon.algorithms.shortest_path import path_exists
from dungeon.components.level import Level, LevelMember
from dungeon.components.player import Player
from dungeon.components.position import Position
from dungeon.components.render import Render
from dungeon.components.stairs import Stairs
from dungeon.config import LevelConfig
from dungeon.constants import MAX_SEED
from dungeon.events.bus import EVENT_LEVEL_DISCARDED, EVENT_LEVEL_GENERATED, EVENT_LEVEL_REQUEST, EventBus
from dungeon.map.cell import Cell
from dungeon.map.grid import Grid
from dungeon.support.tile_type import TileType
from dungeon.world import get_cell_type_factory

logger = logging.getLogger(__name__)


class MazeSystem:
    """Builds dungeon levels and wires them into the ECS world.

    Flow for one level:
      - pick the seed and algorithm, build a brand-new Grid on the shared factory,
      - generate links, paint walls on isolated cells,
      - put the stairs on the cell farthest from the player start,
      - swap the old level entity for the new one and emit EVENT_LEVEL_GENERATED.
    """

    def __init__(self, world: World, event_bus: EventBus, config: LevelConfig | None = None):
        self.world = world
        self.event_bus = event_bus
        self.config = config or LevelConfig()
        self._rng: random.Random = getattr(world, "random", None) or random.Random()
        self.level_entity: Optional[int] = None
        self.event_bus.subscribe(EVENT_LEVEL_REQUEST, self.on_level_request)

    def on_level_request(self, sender, **payload):
        self.generate_level(
            seed=payload.get("seed"),
            algorithm=payload.get("algorithm"),
            difficulty=payload.get("difficulty"),
        )

    def generate_level(
        self,
        *,
        seed: int | None = None,
        algorithm: str | GenerationAlgorithm | None = None,
        difficulty: int | None = None,
    ) -> int:
        seed = self._choose_seed(seed)
        strategy = self._choose_algorithm(algorithm, seed)
        difficulty = difficulty if difficulty is not None else self.config.difficulty
        logger.debug("Generating level: difficulty=%s seed=%s algorithm=%s", difficulty, seed, strategy.name)

        grid = Grid(self.config.rows, self.config.columns, type_factory=get_cell_type_factory(self.world))
        strategy.generate(grid, make_rng(seed))
        logger.debug("Maze generated with %d dead ends", len(grid.dead_ends()))
        self._paint_terrain(grid)

        player_cell = grid.get(*self.config.player_start)
        stairs_cell = self._choose_stairs(grid, player_cell, seed)
        if not path_exists(player_cell, stairs_cell):
            logger.warning("Stairs at %s unreachable from %s; carving a path", stairs_cell.position, player_cell.position)
            for cell in ensure_path(grid, player_cell, stairs_cell):
                cell.tile = TileType.EMPTY
        path_length = player_cell.distances().at(stairs_cell)
        player_cell.tile = TileType.PLAYER
        stairs_cell.tile = TileType.STAIRS
        logger.debug("Player at %s, stairs at %s (distance %s)", player_cell.position, stairs_cell.position, path_length)

        level_entity = self._replace_level(
            Level(grid=grid, difficulty=difficulty, seed=seed, algorithm=strategy.name, path_length=path_length),
        )
        self._place_stairs(level_entity, stairs_cell)
        self._place_player(player_cell)
        self.event_bus.emit(
            EVENT_LEVEL_GENERATED,
            level_entity=level_entity,
            seed=seed,
            algorithm=strategy.name,
            player=player_cell.position,
            stairs=stairs_cell.position,
            path_length=path_length,
        )
        return level_entity

    def current_level(self) -> Optional[Level]:
        if self.level_entity is None:
            return None
        return self.world.component_for_entity(self.level_entity, Level)

    def _choose_seed(self, seed: int | None) -> int:
        if seed is not None:
            return seed
        if self.config.seed is not None:
            return self.config.seed
        return self._rng.randrange(MAX_SEED)

    def _choose_algorithm(self, algorithm: str | GenerationAlgorithm | None, seed: int) -> GenerationAlgorithm:
        if algorithm is None:
            algorithm = self.config.algorithm
        if algorithm is None:
            # Separate stream so the choice never shifts the maze's own draws.
            algorithm = random.Random(seed).choice(available_algorithm_names())
        if isinstance(algorithm, str):
            return get_algorithm(algorithm)
        return algorithm

    @staticmethod
    def _paint_terrain(grid: Grid) -> None:
        for cell in grid.each_cell():
            cell.tile = TileType.WALL if cell.link_count == 0 else TileType.EMPTY

    @staticmethod
    def _choose_stairs(grid: Grid, player_cell: Cell, seed: int) -> Cell:
        longest = LongestPath.estimate(grid, player_cell)
        # longest.start is the first sweep's maximum: farthest from the player.
        for candidate in (longest.start, longest.goal):
            if candidate is not player_cell:
                return candidate
        # Player cell has no links at all: any other cell, then carve to it.
        others = [cell for cell in grid.each_cell() if cell is not player_cell]
        return random.Random(seed).choice(others)

    def _replace_level(self, level: Level) -> int:
        previous = self.level_entity
        if previous is not None:
            for entity, member in list(self.world.get_component(LevelMember)):
                if member.level_entity == previous:
                    self.world.delete_entity(entity, immediate=True)
            self.world.delete_entity(previous, immediate=True)
            self.event_bus.emit(EVENT_LEVEL_DISCARDED, level_entity=previous)
        self.level_entity = self.world.create_entity(level)
        return self.level_entity

    def _place_stairs(self, level_entity: int, cell: Cell) -> int:
        return self.world.create_entity(
            Stairs(),
            Position(row=cell.row, column=cell.column),
            Render(glyph=TileType.STAIRS),
            LevelMember(level_entity=level_entity),
        )

    def _place_player(self, cell: Cell) -> int:
        players = list(self.world.get_component(Player))
        if players:
            entity = players[0][0]
            position = self.world.component_for_entity(entity, Position)
            position.row, position.column = cell.row, cell.column
            return entity
        return self.world.create_entity(
            Player(),
            Position(row=cell.row, column=cell.column),
            Render(glyph=TileType.PLAYER),
        )
