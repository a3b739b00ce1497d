# so_long

A small top-down tile game. You walk a player around a map that is read from a
text file. You pick up every collectible and then step onto the exit.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
so_long path/to/map.ber
so_long --bonus path/to/map.ber
```

Hold `W`, `A`, `S` or `D` to move up, left, down or right. While a key is held,
the player takes at most one step every 100 ms. Press `Escape` or close the
window to quit. The window also closes on its own when you win or lose.

Each step counts as a move:

- In normal mode, each move prints `Moves: N` to standard output.
- With `--bonus`, the counter `MOVES : N` is drawn in the top-left corner of
  the window. Enemy tiles (`X`) are allowed on the map, and stepping onto one
  prints `You lost! You touched an enemy!` and ends the game.

If you step onto the exit after collecting everything, the game prints
`You win! Moves: N`. If you step onto it before that, the game prints
`Collect all collectibles before exiting!` and the player stays where it is.

The command returns 1 in these cases:

- It is not given exactly one map file. It prints
  `Usage: av[0] map_file.ber` to standard output.
- The map file cannot be opened. It writes `ERROR OPENING MAP FILE` to
  standard error.
- The map is rejected. It writes `Error` and the reason to standard error,
  then prints `Map parsing failed` to standard output.
- A sprite cannot be loaded. It writes `ERROR: Failed to load sprite.` to
  standard error.

## Sprites

The package ships no images. The game loads its sprites from `textures/`
relative to the current directory and scales each one to 64×64 pixels.
`so_long.app.texture_paths(bonus)` returns the file it needs for each tile:

| Tile | File                                   |
|------|----------------------------------------|
| `P`  | `textures/player/player.png`           |
| `1`  | `textures/1/wall.png`                  |
| `C`  | `textures/collectibles/collectible.png`|
| `E`  | `textures/exit/exit.png`               |
| `0`  | `textures/0/floor.png`                 |
| `X`  | `textures/enemy/frame1.png` (bonus)    |

## Map files

A map is a plain text file with one row per line. Only `\n` ends a line. The
map is as wide as its longest row, and shorter rows are padded with spaces.
Because a space is not a valid tile, ragged rows, blank lines in the middle and
`\r` characters all cause the map to be rejected.

| Char | Meaning                     |
|------|-----------------------------|
| `1`  | wall                        |
| `0`  | empty floor                 |
| `P`  | player start (exactly one)  |
| `E`  | exit (exactly one)          |
| `C`  | collectible (at least one)  |
| `X`  | enemy (bonus mode only)     |

A map is accepted only if all of the following hold:

- it uses only the characters above;
- it has exactly one player, exactly one exit and at least one collectible;
- every tile on its border is a wall;
- the player can reach every collectible and the exit without crossing a wall.

Example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

```python
from so_long.validation import parse_map
from so_long.game import Game, Direction

game_map = parse_map("maps/small.ber", allow_enemies=False)
game = Game(game_map)
outcome = game.step(Direction.RIGHT)
print(outcome, game.move_text())
```

Modules:

- `so_long.mapfile`
  - `read_lines`, `map_dimensions` and `read_grid` read a map file into rows
    padded to the same width.
  - They raise `MapFileError` if the file cannot be opened or is empty.
- `so_long.validation`
  - `check_characters`, `check_walls`, `check_path` and `flood_fill` are the
    individual checks.
  - `validate_map` runs them all on a grid and returns a `GameMap`.
  - `parse_map` reads a file and validates it.
  - A rule violation raises `MapError`.
  - `GameMap` holds the grid, the player position and the collectible
    counters.
- `so_long.game`
  - `Game.move(dx, dy)` and `Game.step(direction)` apply the movement rules and
    return a `MoveOutcome`: `BLOCKED`, `MOVED`, `COLLECTED`, `EXIT_LOCKED`,
    `WON` or `LOST`.
  - `MoveThrottle` limits held-key movement to one step per interval.
- `so_long.app`
  - `run(game_map, bonus)` opens a pygame window and plays the map.
  - `Renderer` draws the floor, the tiles and, in bonus mode, the move counter.
  - `tile_positions` lists the pixel positions of a tile kind.
  - `main` is the `so_long` command.
- `so_long.printf`
  - `format_printf` and `printf` are a small printf-style formatter supporting
    `%c %s %d %i %u %p %x %X %%`.

## What it does not do

- There are no sprites or sample maps in the package; you supply them.
- Enemies do not move or animate.
- The arrow keys are not bound to movement.