"""Analytic 2D primitives used as drag loci.

Every primitive is an immutable value with a ``closest_point`` projection.
Lines and rays are infinite in their free directions; segments are not
modelled. Intersection helpers return ``None`` (or an empty list) when the
primitives do not meet.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

import numpy as np

from .errors import DegenerateDirectionError
from .types import Vec2

DEFAULT_DIRECTION_EPS = 1e-2
DEFAULT_PARALLEL_TOL = 1e-3
DEFAULT_COINCIDENCE_TOL = 1e-3
# below this distance from a circle's center every point on the circle is equally close
_CIRCLE_CENTER_EPS = 1e-3
_CIRCLE_CENTER_FALLBACK: Vec2 = (0.0, 1.0)


def _vec2(a: Vec2, b: Vec2) -> Vec2:
    return b[0] - a[0], b[1] - a[1]


def _add2(a: Vec2, b: Vec2) -> Vec2:
    return a[0] + b[0], a[1] + b[1]


def _scale2(v: Vec2, s: float) -> Vec2:
    return v[0] * s, v[1] * s


def _dot2(a: Vec2, b: Vec2) -> float:
    return a[0] * b[0] + a[1] * b[1]


def _cross2(a: Vec2, b: Vec2) -> float:
    return a[0] * b[1] - a[1] * b[0]


def _norm2(v: Vec2) -> float:
    return math.hypot(v[0], v[1])


def distance(a: Vec2, b: Vec2) -> float:
    return _norm2(_vec2(a, b))


def normalized(v: Vec2, epsilon: float = DEFAULT_DIRECTION_EPS) -> Vec2:
    length = _norm2(v)
    if length < epsilon:
        raise DegenerateDirectionError(length, epsilon)
    return v[0] / length, v[1] / length


def unit_direction(start: Vec2, end: Vec2, epsilon: float = DEFAULT_DIRECTION_EPS) -> Vec2:
    """Return the unit vector pointing from ``start`` to ``end``.

    Raises :class:`DegenerateDirectionError` when the two points are closer
    than ``epsilon``.
    """

    return normalized(_vec2(start, end), epsilon)


def signed_angle(d1: Vec2, d2: Vec2) -> float:
    """Signed angle in ``[-pi, pi]`` rotating ``d1`` onto ``d2``."""

    return float(np.arctan2(_cross2(d1, d2), _dot2(d1, d2)))


def _project(origin: Vec2, direction: Vec2, point: Vec2) -> float:
    dd = _dot2(direction, direction)
    if dd <= 0.0:
        raise DegenerateDirectionError(0.0, 0.0, what="projection")
    return _dot2(_vec2(origin, point), direction) / dd


@dataclass(frozen=True)
class Point:
    """Degenerate locus: a single admissible position."""

    origin: Vec2
    kind: str = "point"

    def closest_point(self, point: Vec2) -> Vec2:
        return self.origin


@dataclass(frozen=True)
class Line:
    origin: Vec2
    direction: Vec2
    kind: str = "line"

    def at(self, t: float) -> Vec2:
        return _add2(self.origin, _scale2(self.direction, t))

    def closest_point(self, point: Vec2) -> Vec2:
        return self.at(_project(self.origin, self.direction, point))

    def distance_to(self, point: Vec2) -> float:
        return distance(self.closest_point(point), point)


@dataclass(frozen=True)
class Ray:
    origin: Vec2
    direction: Vec2
    kind: str = "ray"

    def at(self, t: float) -> Vec2:
        return _add2(self.origin, _scale2(self.direction, t))

    def closest_point(self, point: Vec2) -> Vec2:
        # same projection as a line, clamped at the origin
        return self.at(max(_project(self.origin, self.direction, point), 0.0))

    def as_line(self) -> Line:
        return Line(self.origin, self.direction)


@dataclass(frozen=True)
class Circle:
    center: Vec2
    radius: float
    kind: str = "circle"

    def closest_point(self, point: Vec2) -> Vec2:
        offset = _vec2(self.center, point)
        length = _norm2(offset)
        if length < _CIRCLE_CENTER_EPS:
            direction = _CIRCLE_CENTER_FALLBACK
        else:
            direction = (offset[0] / length, offset[1] / length)
        return _add2(self.center, _scale2(direction, self.radius))


Locus = Union[Line, Ray, Circle, Point]


def _solve_parameters(
    o1: Vec2, d1: Vec2, o2: Vec2, d2: Vec2, parallel_tol: float
) -> Optional[Tuple[float, float]]:
    """Solve ``o1 + t*d1 == o2 + u*d2`` for ``(t, u)``.

    Returns ``None`` when the directions are parallel within ``parallel_tol``
    (measured on the cross product of the unit directions).
    """

    n1 = _norm2(d1)
    n2 = _norm2(d2)
    if n1 <= 0.0 or n2 <= 0.0:
        return None
    if abs(_cross2(d1, d2)) / (n1 * n2) < parallel_tol:
        return None
    matrix = np.array([[d1[0], -d2[0]], [d1[1], -d2[1]]], dtype=float)
    rhs = np.array([o2[0] - o1[0], o2[1] - o1[1]], dtype=float)
    t, u = np.linalg.solve(matrix, rhs)
    return float(t), float(u)


def line_line_intersection(
    l1: Line, l2: Line, parallel_tol: float = DEFAULT_PARALLEL_TOL
) -> Optional[Vec2]:
    params = _solve_parameters(l1.origin, l1.direction, l2.origin, l2.direction, parallel_tol)
    if params is None:
        return None
    return l1.at(params[0])


def ray_ray_intersection(
    r1: Ray, r2: Ray, parallel_tol: float = DEFAULT_PARALLEL_TOL
) -> Optional[Vec2]:
    params = _solve_parameters(r1.origin, r1.direction, r2.origin, r2.direction, parallel_tol)
    if params is None:
        return None
    t, u = params
    if t < 0.0 or u < 0.0:
        return None
    return r1.at(t)


def line_ray_intersection(
    line: Line, ray: Ray, parallel_tol: float = DEFAULT_PARALLEL_TOL
) -> Optional[Vec2]:
    params = _solve_parameters(line.origin, line.direction, ray.origin, ray.direction, parallel_tol)
    if params is None:
        return None
    _, u = params
    if u < 0.0:
        return None
    return ray.at(u)


def _circle_parameters(origin: Vec2, direction: Vec2, circle: Circle) -> List[float]:
    offset = _vec2(circle.center, origin)
    a = _dot2(direction, direction)
    if a <= 0.0:
        return []
    b = 2.0 * _dot2(direction, offset)
    c = _dot2(offset, offset) - circle.radius * circle.radius
    disc = b * b - 4.0 * a * c
    if disc < 0.0:
        return []
    if disc == 0.0:
        return [-b / (2.0 * a)]
    root = math.sqrt(disc)
    return [(-b + root) / (2.0 * a), (-b - root) / (2.0 * a)]


def line_circle_intersection(line: Line, circle: Circle) -> List[Vec2]:
    return [line.at(t) for t in _circle_parameters(line.origin, line.direction, circle)]


def ray_circle_intersection(ray: Ray, circle: Circle) -> List[Vec2]:
    return [ray.at(t) for t in _circle_parameters(ray.origin, ray.direction, circle) if t >= 0.0]


def lines_coincident(l1: Line, l2: Line, tol: float = DEFAULT_COINCIDENCE_TOL) -> bool:
    """``True`` when the origin of ``l1`` lies on ``l2``.

    Only meaningful for lines already known to be parallel.
    """

    return l2.distance_to(l1.origin) < tol


__all__ = [
    "DEFAULT_DIRECTION_EPS",
    "DEFAULT_PARALLEL_TOL",
    "DEFAULT_COINCIDENCE_TOL",
    "Point",
    "Line",
    "Ray",
    "Circle",
    "Locus",
    "distance",
    "normalized",
    "unit_direction",
    "signed_angle",
    "line_line_intersection",
    "ray_ray_intersection",
    "line_ray_intersection",
    "line_circle_intersection",
    "ray_circle_intersection",
    "lines_coincident",
]
