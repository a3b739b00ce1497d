"""Map validation: allowed tiles, surrounding walls and reachability."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass, field

from so_long.mapfile import read_grid

WALL = "1"
FLOOR = "0"
PLAYER = "P"
EXIT = "E"
COLLECTIBLE = "C"
ENEMY = "X"

_BASE_TILES = frozenset({PLAYER, EXIT, COLLECTIBLE, FLOOR, WALL})
_BONUS_TILES = _BASE_TILES | {ENEMY}
_FILLED = "F"


class MapError(Exception):
    """Raised when a map's contents break the game's rules."""


@dataclass
class GameMap:
    """A validated map grid together with the counts the game needs."""

    grid: list[list[str]]
    player_x: int
    player_y: int
    collectibles: int
    exit: int = 1
    collected: int = 0
    width: int = field(init=False)
    height: int = field(init=False)

    def __post_init__(self) -> None:
        self.height = len(self.grid)
        self.width = len(self.grid[0]) if self.grid else 0

    def tile(self, x: int, y: int) -> str:
        """Return the tile at column ``x`` of row ``y``."""
        return self.grid[y][x]

    def set_tile(self, x: int, y: int, value: str) -> None:
        """Replace the tile at column ``x`` of row ``y``."""
        self.grid[y][x] = value


def flood_fill(grid: Sequence[Sequence[str]], x: int, y: int) -> int:
    """Count the collectibles and exits reachable from ``(x, y)``.

    Walls stop the fill; every other tile, padding included, is passable.
    The given grid is left untouched.
    """
    cells = [list(row) for row in grid]
    count = 0
    stack = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        if cx < 0 or cy < 0 or cy >= len(cells) or cx >= len(cells[cy]):
            continue
        tile = cells[cy][cx]
        if tile in (WALL, _FILLED):
            continue
        if tile in (COLLECTIBLE, EXIT):
            count += 1
        cells[cy][cx] = _FILLED
        stack.extend(
            ((cx, cy - 1), (cx, cy + 1), (cx - 1, cy), (cx + 1, cy))
        )
    return count


def check_characters(
    grid: Sequence[Sequence[str]], allow_enemies: bool = False
) -> GameMap:
    """Check every tile and the element counts, returning a ``GameMap``.

    The map needs exactly one player, exactly one exit and at least one
    collectible; enemies are allowed only when ``allow_enemies`` is set.
    """
    allowed = _BONUS_TILES if allow_enemies else _BASE_TILES
    players = exits = collectibles = 0
    player_x = player_y = 0
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if tile == PLAYER:
                players += 1
                player_x, player_y = x, y
            elif tile == EXIT:
                exits += 1
            elif tile == COLLECTIBLE:
                collectibles += 1
            if tile not in allowed:
                raise MapError("Invalid map characters or missing elements")
    if players != 1 or exits != 1 or collectibles < 1:
        raise MapError("Invalid map characters or missing elements")
    return GameMap(
        grid=[list(row) for row in grid],
        player_x=player_x,
        player_y=player_y,
        collectibles=collectibles,
        exit=exits,
    )


def check_walls(grid: Sequence[Sequence[str]]) -> bool:
    """Return whether every tile on the map's border is a wall."""
    height = len(grid)
    width = max((len(row) for row in grid), default=0)
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            on_border = y in (0, height - 1) or x in (0, width - 1)
            if on_border and tile != WALL:
                return False
    return True


def check_path(game_map: GameMap) -> bool:
    """Return whether the player can reach every collectible and the exit."""
    expected = game_map.collectibles + game_map.exit
    reached = flood_fill(game_map.grid, game_map.player_x, game_map.player_y)
    return reached == expected


def validate_map(
    grid: Sequence[Sequence[str]], allow_enemies: bool = False
) -> GameMap:
    """Run every check on ``grid`` and return the resulting ``GameMap``."""
    game_map = check_characters(grid, allow_enemies)
    if not check_walls(game_map.grid):
        raise MapError("Map must be surrounded by walls")
    if not check_path(game_map):
        raise MapError("Invalid path in map")
    return game_map


def parse_map(
    path: str | os.PathLike[str], allow_enemies: bool = False
) -> GameMap:
    """Read and validate the map file at ``path``."""
    return validate_map(read_grid(path), allow_enemies)