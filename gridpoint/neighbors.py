from __future__ import annotations

from typing import Iterable

from .coords import GridPoint

# Cube steps in the order: up-right, up-left, down-left, down-right, right, left.
HEX_DIRECTIONS: tuple[tuple[int, int, int], ...] = (
    (+1, -1, 0),
    (0, -1, +1),
    (-1, +1, 0),
    (0, +1, -1),
    (+1, 0, -1),
    (-1, 0, +1),
)

# Offset steps in the order: up, down, right, left.
CARTESIAN_DIRECTIONS: tuple[tuple[int, int], ...] = (
    (0, +1),
    (0, -1),
    (+1, 0),
    (-1, 0),
)


def hex_neighbor(point: GridPoint, index: int) -> GridPoint:
    dq, dr, ds = HEX_DIRECTIONS[index % 6]
    q, r, s = point.cube
    return GridPoint.from_cube(q + dq, r + dr, s + ds)


def hex_neighbors(point: GridPoint) -> Iterable[GridPoint]:
    q, r, s = point.cube
    for dq, dr, ds in HEX_DIRECTIONS:
        yield GridPoint.from_cube(q + dq, r + dr, s + ds)


def cartesian_neighbors(point: GridPoint) -> Iterable[GridPoint]:
    for dx, dy in CARTESIAN_DIRECTIONS:
        yield GridPoint(point.x + dx, point.y + dy)


__all__ = [
    "CARTESIAN_DIRECTIONS",
    "HEX_DIRECTIONS",
    "cartesian_neighbors",
    "hex_neighbor",
    "hex_neighbors",
]
