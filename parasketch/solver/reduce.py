"""Pairwise, left-to-right reduction of drag loci.

The fold is order dependent: ``reduce_loci([a, b, c])`` reduces ``a`` with
``b`` and the survivor with ``c``. Any pair that meets in discrete points
ends the fold with no surviving locus; only coincident line-like loci (and
the circle/circle and point pairs, which are left untouched) carry a locus
forward.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from ..geometry import (
    Circle,
    Line,
    Locus,
    Point,
    Ray,
    line_circle_intersection,
    line_line_intersection,
    line_ray_intersection,
    lines_coincident,
    ray_circle_intersection,
    ray_ray_intersection,
)
from ..logging_utils import apply_debug_logging
from ..types import Vec2
from .model import LocusReduction, SolverConfig

logger = logging.getLogger(__name__)

PairResult = Tuple[Optional[Locus], List[Vec2]]


def _reduce_lines(current: Line, nxt: Line, config: SolverConfig) -> PairResult:
    point = line_line_intersection(current, nxt, config.parallel_tolerance)
    if point is not None:
        return None, [point]
    if lines_coincident(current, nxt, config.coincidence_tolerance):
        return current, []
    return None, []


def _reduce_rays(current: Ray, nxt: Ray, config: SolverConfig) -> PairResult:
    point = ray_ray_intersection(current, nxt, config.parallel_tolerance)
    if point is not None:
        return None, [point]
    if lines_coincident(current.as_line(), nxt.as_line(), config.coincidence_tolerance):
        return current, []
    return None, []


def _reduce_line_ray(line: Line, ray: Ray, config: SolverConfig) -> PairResult:
    point = line_ray_intersection(line, ray, config.parallel_tolerance)
    if point is not None:
        return None, [point]
    if line.distance_to(ray.origin) < config.coincidence_tolerance:
        return ray, []
    return None, []


def _reduce_with_circle(circle: Circle, other: Locus) -> PairResult:
    if isinstance(other, Line):
        points = line_circle_intersection(other, circle)
    else:
        points = ray_circle_intersection(other, circle)  # type: ignore[arg-type]
    return None, points


def reduce_pair(current: Locus, nxt: Locus, config: SolverConfig) -> PairResult:
    """Reduce two loci to ``(surviving_locus, discrete_points)``."""

    if isinstance(current, Point) or isinstance(nxt, Point):
        return current, []
    if isinstance(current, Circle) and isinstance(nxt, Circle):
        # circle/circle intersection is not supported; keep the running locus
        return current, []
    if isinstance(current, Circle):
        return _reduce_with_circle(current, nxt)
    if isinstance(nxt, Circle):
        return _reduce_with_circle(nxt, current)
    if isinstance(current, Line) and isinstance(nxt, Line):
        return _reduce_lines(current, nxt, config)
    if isinstance(current, Ray) and isinstance(nxt, Ray):
        return _reduce_rays(current, nxt, config)
    if isinstance(current, Line) and isinstance(nxt, Ray):
        return _reduce_line_ray(current, nxt, config)
    if isinstance(current, Ray) and isinstance(nxt, Line):
        return _reduce_line_ray(nxt, current, config)
    raise TypeError(f"Unsupported locus pair {type(current).__name__}/{type(nxt).__name__}")


def reduce_loci(loci: Sequence[Locus], config: SolverConfig) -> LocusReduction:
    """Left fold over ``loci``; stops as soon as no locus survives."""

    if not loci:
        return LocusReduction(locus=None)

    running: Optional[Locus] = loci[0]
    points: List[Vec2] = []
    steps = 0
    for nxt in loci[1:]:
        if running is None:
            break
        previous = running
        running, found = reduce_pair(previous, nxt, config)
        steps += 1
        if found:
            points = found
        logger.debug(
            "Reduced %s with %s -> %s (%d point(s))",
            previous.kind,
            nxt.kind,
            running.kind if running is not None else "none",
            len(found),
        )
    return LocusReduction(locus=running, points=points, steps=steps)


apply_debug_logging(globals(), logger=logger)
