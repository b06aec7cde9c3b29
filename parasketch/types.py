from __future__ import annotations

from typing import Tuple

VertexHandle = int
EdgeHandle = int
ConstraintHandle = int
Vec2 = Tuple[float, float]


def as_vec2(value: object) -> Vec2:
    """Coerce a 2-sequence (tuple, list, ndarray) into a ``(float, float)`` tuple."""

    x, y = value  # type: ignore[misc]
    return float(x), float(y)


__all__ = [
    "VertexHandle",
    "EdgeHandle",
    "ConstraintHandle",
    "Vec2",
    "as_vec2",
]
