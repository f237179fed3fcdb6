from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - typing only
    from .coords import GridPoint


def hex_distance(a: "GridPoint", b: "GridPoint") -> int:
    """Integer distance by hex-walking from ``a`` to ``b``."""

    aq, ar, a_s = a.cube
    bq, br, b_s = b.cube
    # the sum is always even for zero-sum cube coordinates
    return (abs(aq - bq) + abs(ar - br) + abs(a_s - b_s)) // 2


__all__ = ["hex_distance"]
