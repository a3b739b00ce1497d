"""Window, sprites and the command that starts a game."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from so_long.game import Direction, Game, MoveThrottle  # noqa: E402
from so_long.mapfile import MapFileError  # noqa: E402
from so_long.validation import (  # noqa: E402
    COLLECTIBLE,
    ENEMY,
    EXIT,
    FLOOR,
    PLAYER,
    WALL,
    GameMap,
    MapError,
    parse_map,
)

TILE_SIZE = 64
TEXT_POSITION = (10, 10)
_TEXT_COLOR = (255, 255, 255)
_FRAME_RATE = 60

_ELEMENT_ORDER = (WALL, COLLECTIBLE, EXIT, PLAYER, ENEMY)

_HELD_KEYS = (
    (pygame.K_w, Direction.UP),
    (pygame.K_s, Direction.DOWN),
    (pygame.K_a, Direction.LEFT),
    (pygame.K_d, Direction.RIGHT),
)


def texture_paths(bonus: bool = False) -> dict[str, str]:
    """Return the sprite file for each tile; enemies only in bonus mode."""
    paths = {
        PLAYER: "textures/player/player.png",
        WALL: "textures/1/wall.png",
        COLLECTIBLE: "textures/collectibles/collectible.png",
        EXIT: "textures/exit/exit.png",
        FLOOR: "textures/0/floor.png",
    }
    if bonus:
        paths[ENEMY] = "textures/enemy/frame1.png"
    return paths


def tile_positions(game_map: GameMap, tile: str) -> list[tuple[int, int]]:
    """Return the pixel positions of every ``tile`` on the map, row by row."""
    return [
        (x * TILE_SIZE, y * TILE_SIZE)
        for y, row in enumerate(game_map.grid)
        for x, cell in enumerate(row)
        if cell == tile
    ]


class Renderer:
    """Draws a game's map with one sprite per tile kind."""

    def __init__(
        self,
        textures: Mapping[str, pygame.Surface],
        font: pygame.font.Font | None = None,
    ) -> None:
        if FLOOR not in textures:
            raise ValueError("a floor texture is required")
        self.textures = dict(textures)
        self.font = font

    @classmethod
    def load(cls, bonus: bool = False) -> Renderer:
        """Load and scale every sprite the mode needs from the working directory."""
        textures: dict[str, pygame.Surface] = {}
        for tile, path in texture_paths(bonus).items():
            try:
                image = pygame.image.load(path)
            except (pygame.error, OSError) as exc:
                raise RuntimeError("ERROR: Failed to load sprite.") from exc
            if pygame.display.get_surface() is not None:
                image = image.convert_alpha()
            textures[tile] = pygame.transform.scale(image, (TILE_SIZE, TILE_SIZE))
        return cls(textures)

    def draw(self, screen: pygame.Surface, game: Game) -> None:
        """Draw the floor, then every map element, then the bonus move counter."""
        game_map = game.game_map
        floor = self.textures[FLOOR]
        for y in range(game_map.height):
            for x in range(game_map.width):
                screen.blit(floor, (x * TILE_SIZE, y * TILE_SIZE))
        for tile in _ELEMENT_ORDER:
            texture = self.textures.get(tile)
            if texture is None:
                continue
            for position in tile_positions(game_map, tile):
                screen.blit(texture, position)
        if game.bonus and self.font is not None:
            text = self.font.render(game.move_text(), True, _TEXT_COLOR)
            screen.blit(text, TEXT_POSITION)


def _tick(
    game: Game, throttle: MoveThrottle, pressed: Sequence[bool], now_ms: int
) -> bool:
    """Handle held keys for one frame; return False when the window should close."""
    if not throttle.ready(now_ms):
        return True
    if pressed[pygame.K_ESCAPE]:
        return False
    for key, direction in _HELD_KEYS:
        if pressed[key]:
            game.step(direction)
            throttle.last_move_ms = now_ms
            break
    return not game.finished


def run(game_map: GameMap, bonus: bool = False) -> Game:
    """Open a window and play ``game_map`` until it is closed or the game ends."""
    game = Game(game_map, bonus=bonus)
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (game_map.width * TILE_SIZE, game_map.height * TILE_SIZE)
        )
        pygame.display.set_caption("so_long")
        renderer = Renderer.load(bonus)
        if bonus:
            renderer.font = pygame.font.Font(None, 24)
        throttle = MoveThrottle()
        clock = pygame.time.Clock()
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            if running:
                running = _tick(
                    game, throttle, pygame.key.get_pressed(), pygame.time.get_ticks()
                )
            renderer.draw(screen, game)
            pygame.display.flip()
            clock.tick(_FRAME_RATE)
    finally:
        pygame.quit()
    return game


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map file named on the command line.

    ``--bonus`` enables enemies and the on-screen move counter.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = "--bonus" in args
    paths = [arg for arg in args if arg != "--bonus"]
    if len(paths) != 1:
        sys.stdout.write("Usage: av[0] map_file.ber\n")
        return 1
    try:
        game_map = parse_map(paths[0], allow_enemies=bonus)
    except MapFileError as exc:
        if isinstance(exc.__cause__, OSError):
            sys.stderr.write(f"{exc}\n")
            return 1
        sys.stderr.write(f"Error\n{exc}\n")
        sys.stdout.write("Map parsing failed\n")
        return 1
    except MapError as exc:
        sys.stderr.write(f"Error\n{exc}\n")
        sys.stdout.write("Map parsing failed\n")
        return 1
    try:
        run(game_map, bonus)
    except RuntimeError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    return 0