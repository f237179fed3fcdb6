"""Partition of the hex plane into hexagonal chunks.

Each tile belongs to one and only one chunk, and every chunk holds exactly
``count_hex_tiles_in_radius(radius)`` tiles. The math comes from
https://observablehq.com/@sanderevers/hexagon-tiling-of-an-hexagonal-grid

Chunk coordinates form their own system ("strips"), so finding the centre
of a chunk from its chunk coordinate is nontrivial; derive centres from the
known centre of an adjacent chunk instead.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .conversions import floor_div
from .coords import GridPoint
from .ranges import count_hex_tiles_in_radius, iter_hexes_in_range

HEX_CHUNK_RADIUS = 10


def chunk_constants(radius: int) -> tuple[int, int]:
    """Return the ``(area, shift)`` pair of the chunk formula for ``radius``."""

    area = count_hex_tiles_in_radius(radius)
    shift = (3 * radius) + 2
    return area, shift


def get_hex_chunk(src: GridPoint, radius: int = HEX_CHUNK_RADIUS) -> GridPoint:
    """Return the chunk coordinate of ``src``, not a tile coordinate."""

    area, shift = chunk_constants(radius)
    q, r, s = src.cube
    tmp_q = floor_div(r + (shift * q), area)
    tmp_r = floor_div(s + (shift * r), area)
    tmp_s = floor_div(q + (shift * s), area)
    return GridPoint.from_cube(
        floor_div(1 + tmp_q - tmp_r, 3),
        floor_div(1 + tmp_r - tmp_s, 3),
        floor_div(1 + tmp_s - tmp_q, 3),
    )


def hex_chunks_limit(radius: int = HEX_CHUNK_RADIUS) -> int:
    """Largest ``|q|`` or ``|r|`` that :func:`hex_chunks` handles exactly."""

    _, shift = chunk_constants(radius)
    # |q + shift * s| <= (2 * shift + 1) * limit, with |s| <= 2 * limit
    return int(np.iinfo(np.int64).max) // (2 * shift + 1)


def hex_chunks(
    q: ArrayLike, r: ArrayLike, radius: int = HEX_CHUNK_RADIUS
) -> tuple[NDArray[np.int64], NDArray[np.int64]]:
    """Vectorised :func:`get_hex_chunk` over arrays of cube ``q`` and ``r``.

    Returns the cube ``(q, r)`` components of each tile's chunk. Work is done
    in ``int64``, so every ``q`` and ``r`` must lie within
    ``hex_chunks_limit(radius)`` in magnitude (about 1.4e17 for the default
    radius); larger inputs raise :class:`OverflowError` instead of wrapping.
    """

    area, shift = chunk_constants(radius)
    q_arr = np.asarray(q, dtype=np.int64)
    r_arr = np.asarray(r, dtype=np.int64)
    limit = hex_chunks_limit(radius)
    for name, arr in (("q", q_arr), ("r", r_arr)):
        if ((arr > limit) | (arr < -limit)).any():
            raise OverflowError(f"{name} exceeds the int64 chunk limit of {limit}")
    s_arr = -q_arr - r_arr
    tmp_q = np.floor_divide(r_arr + shift * q_arr, area)
    tmp_r = np.floor_divide(s_arr + shift * r_arr, area)
    tmp_s = np.floor_divide(q_arr + shift * s_arr, area)
    chunk_q = np.floor_divide(1 + tmp_q - tmp_r, 3)
    chunk_r = np.floor_divide(1 + tmp_r - tmp_s, 3)
    return chunk_q, chunk_r


def tiles_in_chunk(
    chunk: GridPoint, around: GridPoint, radius: int = HEX_CHUNK_RADIUS
) -> list[GridPoint]:
    """All tiles of ``chunk``, found by scanning around a known member.

    ``around`` must belong to ``chunk``. Two tiles of one chunk are never
    more than ``2 * radius`` apart, so the scan window covers the chunk.
    """

    if get_hex_chunk(around, radius) != chunk:
        raise ValueError(f"{around} does not belong to chunk {chunk}")
    return [
        tile
        for tile in iter_hexes_in_range(around, 2 * radius, max_range=2 * radius)
        if get_hex_chunk(tile, radius) == chunk
    ]


__all__ = [
    "HEX_CHUNK_RADIUS",
    "chunk_constants",
    "get_hex_chunk",
    "hex_chunks",
    "hex_chunks_limit",
    "tiles_in_chunk",
]
