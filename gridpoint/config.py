"""Validated grid configuration."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .chunks import HEX_CHUNK_RADIUS, chunk_constants, get_hex_chunk
from .coords import GridPoint
from .ranges import MAX_SEARCH_RANGE, hexes_in_range


class GridSettings(BaseModel):
    """Search and chunking parameters shared by grid consumers."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_search_range: int = Field(default=MAX_SEARCH_RANGE, ge=0)
    hex_chunk_radius: int = Field(default=HEX_CHUNK_RADIUS, ge=0)

    @property
    def chunk_area(self) -> int:
        """Tiles per chunk; also the divisor of the chunk formula."""

        return chunk_constants(self.hex_chunk_radius)[0]

    @property
    def chunk_shift(self) -> int:
        return chunk_constants(self.hex_chunk_radius)[1]

    @property
    def tiles_per_chunk(self) -> int:
        return self.chunk_area

    def chunk_of(self, point: GridPoint) -> GridPoint:
        return get_hex_chunk(point, self.hex_chunk_radius)

    def hexes_in_range(
        self, point: GridPoint, radius: int, out: list[GridPoint] | None = None
    ) -> list[GridPoint]:
        return hexes_in_range(point, radius, out, max_range=self.max_search_range)


DEFAULT_SETTINGS = GridSettings()


__all__ = ["DEFAULT_SETTINGS", "GridSettings"]
