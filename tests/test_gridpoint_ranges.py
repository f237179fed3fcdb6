import logging

import pytest

from gridpoint import (
    MAX_SEARCH_RANGE,
    ORIGIN,
    TILES_IN_HEX_CHUNK_OF_RADIUS,
    GridPoint,
    count_hex_tiles_in_radius,
    hexes_in_range,
    iter_hexes_in_range,
)


@pytest.mark.parametrize(("radius", "expected"), [(0, 1), (1, 7), (2, 19), (3, 37)])
def test_range_size_and_shape(radius: int, expected: int) -> None:
    tiles = ORIGIN.hexes_in_range(radius)
    assert len(tiles) == expected == count_hex_tiles_in_radius(radius)
    assert len(set(tiles)) == expected
    assert all(ORIGIN.hex_distance_to(tile) <= radius for tile in tiles)

    ring = [tile for tile in tiles if ORIGIN.hex_distance_to(tile) == radius]
    assert len(ring) == (6 * radius if radius else 1)


def test_range_includes_every_tile_within_radius() -> None:
    radius = 3
    window = {GridPoint(x, y) for x in range(-6, 7) for y in range(-6, 7)}
    inside = {tile for tile in window if ORIGIN.hex_distance_to(tile) <= radius}
    assert set(ORIGIN.hexes_in_range(radius)) == inside


@pytest.mark.parametrize("center", [GridPoint(7, -5), GridPoint(-3, 9), GridPoint(-8, -11)])
def test_range_is_translation_invariant(center: GridPoint) -> None:
    tiles = center.hexes_in_range(4)
    assert len(tiles) == count_hex_tiles_in_radius(4)
    assert len(set(tiles)) == len(tiles)
    assert max(center.hex_distance_to(tile) for tile in tiles) == 4
    assert center in tiles


def test_output_list_is_reused() -> None:
    buf: list[GridPoint] = []
    result = ORIGIN.hexes_in_range(1, buf)
    assert result is buf
    ORIGIN.right_hex.hexes_in_range(2, buf)
    assert len(buf) == 7 + 19


@pytest.mark.parametrize("radius", [-1, MAX_SEARCH_RANGE + 1])
def test_out_of_bounds_radius_leaves_buffer_unchanged(radius: int) -> None:
    buf = [GridPoint(9, 9)]
    assert ORIGIN.hexes_in_range(radius, buf) is buf
    assert buf == [GridPoint(9, 9)]
    assert hexes_in_range(ORIGIN, radius) == []
    assert list(iter_hexes_in_range(ORIGIN, radius)) == []


def test_out_of_bounds_radius_is_logged(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.DEBUG, logger="gridpoint.ranges"):
        ORIGIN.hexes_in_range(51)
    assert "radius 51" in caplog.text


def test_max_range_override() -> None:
    assert hexes_in_range(ORIGIN, 3, max_range=2) == []
    assert len(hexes_in_range(ORIGIN, 2, max_range=2)) == 19


def test_maximum_radius_is_accepted() -> None:
    tiles = ORIGIN.hexes_in_range(MAX_SEARCH_RANGE)
    assert len(tiles) == TILES_IN_HEX_CHUNK_OF_RADIUS[MAX_SEARCH_RANGE] == 7651


@pytest.mark.parametrize("center", [ORIGIN, GridPoint(-2, 3)])
def test_iter_matches_list_and_restarts(center: GridPoint) -> None:
    assert list(iter_hexes_in_range(center, 3)) == center.hexes_in_range(3)
    assert list(iter_hexes_in_range(center, 3)) == list(iter_hexes_in_range(center, 3))


def test_tile_count_table() -> None:
    assert len(TILES_IN_HEX_CHUNK_OF_RADIUS) == MAX_SEARCH_RANGE + 1
    assert TILES_IN_HEX_CHUNK_OF_RADIUS[:4] == (1, 7, 19, 37)
    assert TILES_IN_HEX_CHUNK_OF_RADIUS[10] == 331
    assert TILES_IN_HEX_CHUNK_OF_RADIUS[49] == 7351
    assert count_hex_tiles_in_radius(100) == 30301


def test_tile_count_rejects_negative_radius() -> None:
    with pytest.raises(ValueError):
        count_hex_tiles_in_radius(-1)
