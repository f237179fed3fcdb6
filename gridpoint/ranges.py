"""Bounded hex neighbourhoods around a grid point."""

from __future__ import annotations

import logging
from typing import Iterator

from .conversions import cube_to_offset
from .coords import GridPoint

logger = logging.getLogger(__name__)

# Radius or path searches beyond this return default values.
MAX_SEARCH_RANGE = 50


def count_hex_tiles_in_radius(radius: int) -> int:
    """Number of tiles in a hexagon of ``radius`` (0 -> 1, 1 -> 7, 2 -> 19)."""

    if radius < 0:
        raise ValueError("radius must be non-negative")
    return (radius * radius * 3) + (3 * radius) + 1


# Index is the radius; use count_hex_tiles_in_radius() past MAX_SEARCH_RANGE.
TILES_IN_HEX_CHUNK_OF_RADIUS: tuple[int, ...] = tuple(
    count_hex_tiles_in_radius(radius) for radius in range(MAX_SEARCH_RANGE + 1)
)


def _in_bounds(radius: int, max_range: int) -> bool:
    if 0 <= radius <= max_range:
        return True
    logger.debug("ignoring hex range request of radius %d (limit %d)", radius, max_range)
    return False


def hexes_in_range(
    center: GridPoint,
    radius: int,
    out: list[GridPoint] | None = None,
    *,
    max_range: int = MAX_SEARCH_RANGE,
) -> list[GridPoint]:
    """Append every tile within ``radius`` hex steps of ``center`` to ``out``.

    ``out`` is returned so callers can reuse one list across calls; size it
    with :data:`TILES_IN_HEX_CHUNK_OF_RADIUS` if needed. A radius outside
    ``0..max_range`` leaves ``out`` untouched.
    """

    if out is None:
        out = []
    out.extend(iter_hexes_in_range(center, radius, max_range=max_range))
    return out


def iter_hexes_in_range(
    center: GridPoint, radius: int, *, max_range: int = MAX_SEARCH_RANGE
) -> Iterator[GridPoint]:
    """Lazy form of :func:`hexes_in_range`, yielding tiles in the same order."""

    if not _in_bounds(radius, max_range):
        return
    cq, cr, _ = center.cube
    for dq in range(-radius, radius + 1):
        q = cq + dq
        for dr in range(max(-radius, -dq - radius), min(radius, -dq + radius) + 1):
            r = cr + dr
            yield GridPoint(*cube_to_offset(q, r, -q - r))


__all__ = [
    "MAX_SEARCH_RANGE",
    "TILES_IN_HEX_CHUNK_OF_RADIUS",
    "count_hex_tiles_in_radius",
    "hexes_in_range",
    "iter_hexes_in_range",
]
