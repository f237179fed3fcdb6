"""Odd-r hex grid coordinates, neighbourhoods and chunk partitioning."""

import logging

from .chunks import (
    HEX_CHUNK_RADIUS,
    chunk_constants,
    get_hex_chunk,
    hex_chunks,
    hex_chunks_limit,
    tiles_in_chunk,
)
from .config import DEFAULT_SETTINGS, GridSettings
from .conversions import InvalidCoordinateError, cube_to_offset, floor_div, offset_to_cube
from .coords import ORIGIN, GridPoint
from .heuristics import hex_distance
from .neighbors import (
    CARTESIAN_DIRECTIONS,
    HEX_DIRECTIONS,
    cartesian_neighbors,
    hex_neighbor,
    hex_neighbors,
)
from .ranges import (
    MAX_SEARCH_RANGE,
    TILES_IN_HEX_CHUNK_OF_RADIUS,
    count_hex_tiles_in_radius,
    hexes_in_range,
    iter_hexes_in_range,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CARTESIAN_DIRECTIONS",
    "DEFAULT_SETTINGS",
    "GridPoint",
    "GridSettings",
    "HEX_CHUNK_RADIUS",
    "HEX_DIRECTIONS",
    "InvalidCoordinateError",
    "MAX_SEARCH_RANGE",
    "ORIGIN",
    "TILES_IN_HEX_CHUNK_OF_RADIUS",
    "cartesian_neighbors",
    "chunk_constants",
    "count_hex_tiles_in_radius",
    "cube_to_offset",
    "floor_div",
    "get_hex_chunk",
    "hex_chunks",
    "hex_chunks_limit",
    "hex_distance",
    "hex_neighbor",
    "hex_neighbors",
    "hexes_in_range",
    "iter_hexes_in_range",
    "offset_to_cube",
    "tiles_in_chunk",
]
