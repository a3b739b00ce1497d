import pytest

from so_long.mapfile import MapFileError
from so_long.validation import (
    GameMap,
    MapError,
    check_characters,
    check_path,
    check_walls,
    flood_fill,
    parse_map,
    validate_map,
)

VALID = ["1111111", "1P0C0E1", "1111111"]


def _write(tmp_path, text):
    path = tmp_path / "map.ber"
    path.write_text(text)
    return path


def test_parse_valid_map(tmp_path):
    path = _write(tmp_path, "\n".join(VALID) + "\n")
    game_map = parse_map(path)
    assert (game_map.player_x, game_map.player_y) == (1, 1)
    assert game_map.collectibles == 1
    assert game_map.exit == 1
    assert game_map.collected == 0
    assert (game_map.width, game_map.height) == (7, 3)
    assert ["".join(row) for row in game_map.grid] == VALID


def test_parse_missing_file(tmp_path):
    with pytest.raises(MapFileError):
        parse_map(tmp_path / "absent.ber")


def test_invalid_character_rejected():
    with pytest.raises(MapError, match="Invalid map characters"):
        validate_map(["1111111", "1P0Z0E1", "1C11111"])


def test_enemy_only_allowed_in_bonus():
    grid = ["1111111", "1PXC0E1", "1111111"]
    with pytest.raises(MapError, match="Invalid map characters"):
        validate_map(grid)
    game_map = validate_map(grid, allow_enemies=True)
    assert game_map.tile(2, 1) == "X"


def test_two_players_rejected():
    with pytest.raises(MapError, match="missing elements"):
        check_characters(["1111111", "1PPC0E1", "1111111"])


def test_missing_collectible_rejected():
    with pytest.raises(MapError, match="missing elements"):
        check_characters(["1111111", "1P000E1", "1111111"])


def test_missing_exit_rejected():
    with pytest.raises(MapError, match="missing elements"):
        check_characters(["1111111", "1P0C001", "1111111"])


def test_ragged_map_fails_on_padding(tmp_path):
    path = _write(tmp_path, "1111111\n1P0C0E1\n11111\n")
    with pytest.raises(MapError, match="Invalid map characters"):
        parse_map(path)


def test_open_border_rejected():
    with pytest.raises(MapError, match="surrounded by walls"):
        validate_map(["1111111", "0P0C0E1", "1111111"])


def test_check_walls_results():
    assert check_walls(VALID) is True
    assert check_walls(["1111101", "1P0C0E1", "1111111"]) is False


def test_blocked_collectible_rejected():
    with pytest.raises(MapError, match="Invalid path"):
        validate_map(["1111111", "1P1C0E1", "1111111"])


def test_check_path_results():
    assert check_path(check_characters(VALID)) is True
    assert check_path(check_characters(["1111111", "1P01CE1", "1111111"])) is False


def test_enemy_does_not_block_path():
    game_map = validate_map(["1111111", "1PXXXE1", "1C11111", "1111111"][:2] + ["1C00001", "1111111"], allow_enemies=True)
    assert check_path(game_map) is True


def test_flood_fill_counts_reachable_and_keeps_grid():
    grid = [list(row) for row in ["1111111", "1P0C1E1", "1111111"]]
    before = [row[:] for row in grid]
    assert flood_fill(grid, 1, 1) == 1
    assert grid == before


def test_flood_fill_full_reach_matches_counts():
    game_map = check_characters(["111111", "1PC0C1", "1C0E01", "111111"])
    reached = flood_fill(game_map.grid, game_map.player_x, game_map.player_y)
    assert reached == game_map.collectibles + game_map.exit


def test_flood_fill_outside_grid():
    assert flood_fill(VALID, -1, 0) == 0
    assert flood_fill(VALID, 0, 10) == 0
    assert flood_fill(VALID, 7, 1) == 0


def test_flood_fill_from_wall():
    assert flood_fill(VALID, 0, 0) == 0


def test_tile_round_trip():
    game_map = GameMap(
        grid=[list(row) for row in VALID],
        player_x=1,
        player_y=1,
        collectibles=1,
    )
    game_map.set_tile(3, 1, "0")
    assert game_map.tile(3, 1) == "0"
    assert "".join(game_map.grid[1]) == "1P000E1"
    assert (game_map.width, game_map.height) == (7, 3)