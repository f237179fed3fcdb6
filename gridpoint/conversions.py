"""Integer formulas converting between odd-r offset and cube coordinates."""

from __future__ import annotations


class InvalidCoordinateError(ValueError):
    """Raised when cube components do not sum to zero."""


def floor_div(numerator: int, denominator: int) -> int:
    """Floored integer division (rounds toward negative infinity)."""

    return numerator // denominator


def offset_to_cube(x: int, y: int) -> tuple[int, int, int]:
    # odd rows are shoved half a tile; y - (y & 1) is always even
    q = x - floor_div(y - (y & 1), 2)
    r = y
    return q, r, -q - r


def cube_to_offset(q: int, r: int, s: int) -> tuple[int, int]:
    if q + r + s != 0:
        raise InvalidCoordinateError(
            f"For cube coords, q + r + s must be 0 (q:{q}, r:{r}, s:{s})"
        )
    return q + floor_div(r - (r & 1), 2), r


__all__ = ["InvalidCoordinateError", "cube_to_offset", "floor_div", "offset_to_cube"]
