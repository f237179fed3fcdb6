"""Odd-r hex grid point with cube/axial translations.

Conversions follow https://www.redblobgames.com/grids/hexagons/. Only the
offset pair ``(x, y)`` is stored; ``q``, ``r`` and ``s`` are derived on
demand.
"""

from __future__ import annotations

from dataclasses import dataclass
import operator

from .conversions import InvalidCoordinateError, cube_to_offset, offset_to_cube
from .heuristics import hex_distance


def _as_int(name: str, value: object) -> int:
    """Normalise any integral value (numpy integers included) to ``int``."""

    if isinstance(value, bool):
        raise TypeError(f"{name} must be an integer, got bool")
    try:
        return operator.index(value)  # type: ignore[arg-type]
    except TypeError:
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}") from None


@dataclass(frozen=True, slots=True)
class GridPoint:
    """A single tile of an odd-r hex grid."""

    x: int
    y: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _as_int("x", self.x))
        object.__setattr__(self, "y", _as_int("y", self.y))

    # --------- Construction ---------

    @classmethod
    def from_offset(cls, x: int, y: int) -> "GridPoint":
        return cls(x, y)

    @classmethod
    def from_cube(cls, q: int, r: int, s: int) -> "GridPoint":
        """Build a point from cube coordinates.

        Raises :class:`InvalidCoordinateError` unless ``q + r + s == 0``.
        """

        return cls(*cube_to_offset(_as_int("q", q), _as_int("r", r), _as_int("s", s)))

    @classmethod
    def from_axial(cls, q: int, r: int) -> "GridPoint":
        return cls.from_cube(q, r, -q - r)

    @classmethod
    def from_point(cls, point: "GridPoint") -> "GridPoint":
        return cls(point.x, point.y)

    @classmethod
    def origin(cls) -> "GridPoint":
        return cls(0, 0)

    # --------- Cube/axial coordinates ---------

    @property
    def q(self) -> int:
        """Positive to the right or up-right."""
        return offset_to_cube(self.x, self.y)[0]

    @property
    def r(self) -> int:
        """Positive to the down-right or down-left."""
        return self.y

    @property
    def s(self) -> int:
        """Positive to the left or up-left."""
        return -self.q - self.y

    @property
    def cube(self) -> tuple[int, int, int]:
        return offset_to_cube(self.x, self.y)

    @property
    def offset(self) -> tuple[int, int]:
        return self.x, self.y

    # --------- Hex adjacency ---------

    def _step(self, dq: int, dr: int, ds: int) -> "GridPoint":
        q, r, s = self.cube
        return GridPoint.from_cube(q + dq, r + dr, s + ds)

    @property
    def up_right_hex(self) -> "GridPoint":
        return self._step(+1, -1, 0)

    @property
    def up_left_hex(self) -> "GridPoint":
        return self._step(0, -1, +1)

    @property
    def down_left_hex(self) -> "GridPoint":
        return self._step(-1, +1, 0)

    @property
    def down_right_hex(self) -> "GridPoint":
        return self._step(0, +1, -1)

    @property
    def right_hex(self) -> "GridPoint":
        return self._step(+1, 0, -1)

    @property
    def left_hex(self) -> "GridPoint":
        return self._step(-1, 0, +1)

    # --------- Cartesian adjacency ---------

    @property
    def up(self) -> "GridPoint":
        return GridPoint(self.x, self.y + 1)

    @property
    def down(self) -> "GridPoint":
        return GridPoint(self.x, self.y - 1)

    @property
    def right(self) -> "GridPoint":
        return GridPoint(self.x + 1, self.y)

    @property
    def left(self) -> "GridPoint":
        return GridPoint(self.x - 1, self.y)

    # --------- Queries ---------

    def hex_distance_to(self, other: "GridPoint") -> int:
        """Number of single-hex steps needed to walk to ``other``."""
        return hex_distance(self, other)

    def hexes_in_range(
        self, radius: int, out: list["GridPoint"] | None = None
    ) -> list["GridPoint"]:
        """Append every tile within ``radius`` of this one to ``out``.

        See :func:`gridpoint.ranges.hexes_in_range`.
        """

        from .ranges import hexes_in_range

        return hexes_in_range(self, radius, out)

    @property
    def hex_chunk(self) -> "GridPoint":
        """The HEX CHUNK COORDINATE of this tile, not a tile coordinate.

        Suitable for biome generation and chunk caching, not for pathing or
        drawing individual tiles. All tiles within ``HEX_CHUNK_RADIUS`` of
        the origin share one chunk.
        """

        from .chunks import get_hex_chunk

        return get_hex_chunk(self)

    # --------- Formatting ---------

    def to_string(self, is_cartesian: bool = True) -> str:
        """``(x,y)`` for cartesian coordinates, ``(q,r,s)`` for hex ones."""

        if is_cartesian:
            return f"({self.x},{self.y})"
        q, r, s = self.cube
        return f"({q},{r},{s})"

    def __str__(self) -> str:
        return self.to_string(True)


ORIGIN = GridPoint(0, 0)


__all__ = ["GridPoint", "InvalidCoordinateError", "ORIGIN"]
