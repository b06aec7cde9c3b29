"""Resolve a whole-edge drag from its two endpoint solves."""

from __future__ import annotations

import logging
from typing import Optional

from ..constraints import ConstraintCatalogue
from ..entities import EntityStore
from ..geometry import (
    Circle,
    Line,
    Locus,
    Ray,
    distance,
    line_circle_intersection,
    line_line_intersection,
    line_ray_intersection,
)
from ..logging_utils import apply_debug_logging
from ..types import EdgeHandle, Vec2, as_vec2
from .config import resolve_config
from .model import EdgeSolverResponse, SolverConfig, SolverState
from .vertex_solver import solve_for_vertex

logger = logging.getLogger(__name__)


def intersect_edge_line(
    edge_line: Line, locus: Locus, near: Vec2, config: SolverConfig
) -> Optional[Vec2]:
    """Where the dragged edge's line meets an endpoint locus.

    For circles the intersection closest to ``near`` is chosen; point loci
    never yield an intersection.
    """

    if isinstance(locus, Line):
        return line_line_intersection(edge_line, locus, config.parallel_tolerance)
    if isinstance(locus, Ray):
        return line_ray_intersection(edge_line, locus, config.parallel_tolerance)
    if isinstance(locus, Circle):
        points = line_circle_intersection(edge_line, locus)
        if not points:
            return None
        return min(points, key=lambda p: distance(p, near))
    return None


def solve_for_edge(
    store: EntityStore,
    catalogue: ConstraintCatalogue,
    edge: EdgeHandle,
    fixed_position: Vec2,
    tentative_position: Vec2,
    v1_fixed: Vec2,
    v1_tentative: Vec2,
    v2_fixed: Vec2,
    v2_tentative: Vec2,
    *,
    config: Optional[SolverConfig] = None,
) -> EdgeSolverResponse:
    """Resolve a rigid drag of ``edge``.

    ``fixed_position``/``tentative_position`` are the grabbed point on the
    edge before and during the drag; ``v1_*``/``v2_*`` are the start and end
    vertex positions before the drag and translated by the pointer delta.
    Each endpoint is solved on its own, ignoring the constraints owned by
    ``edge`` itself, and the results are recombined along the edge's line.
    """

    cfg = resolve_config(config)
    record = store.get_edge(edge)
    tentative_position = as_vec2(tentative_position)
    v1_fixed, v1_tentative = as_vec2(v1_fixed), as_vec2(v1_tentative)
    v2_fixed, v2_tentative = as_vec2(v2_fixed), as_vec2(v2_tentative)
    ignore = frozenset(record.owned_constraints)

    first = solve_for_vertex(store, catalogue, record.start, v1_fixed, v1_tentative, ignore, config=cfg)
    if first.is_locked:
        logger.info("Edge %d locked by start vertex %d", edge, record.start)
        return EdgeSolverResponse.locked()
    second = solve_for_vertex(store, catalogue, record.end, v2_fixed, v2_tentative, ignore, config=cfg)
    if second.is_locked:
        logger.info("Edge %d locked by end vertex %d", edge, record.end)
        return EdgeSolverResponse.locked()

    if first.state is SolverState.FREE and second.state is SolverState.FREE:
        return EdgeSolverResponse(SolverState.FREE, (None, None), (v1_tentative, v2_tentative))

    edge_line = Line(origin=tentative_position, direction=store.edge_direction(edge, cfg.direction_epsilon))

    if first.state is SolverState.FREE or second.state is SolverState.FREE:
        if first.state is SolverState.FREE:
            locus, near, resolved_fixed, free_fixed = second.locus, v2_tentative, v2_fixed, v1_fixed
        else:
            locus, near, resolved_fixed, free_fixed = first.locus, v1_tentative, v1_fixed, v2_fixed
        assert locus is not None
        hit = intersect_edge_line(edge_line, locus, near, cfg)
        if hit is None:
            logger.info("Edge %d locked: edge line misses the %s locus", edge, locus.kind)
            return EdgeSolverResponse.locked()
        delta = (hit[0] - resolved_fixed[0], hit[1] - resolved_fixed[1])
        moved_free = (free_fixed[0] + delta[0], free_fixed[1] + delta[1])
        if first.state is SolverState.FREE:
            return EdgeSolverResponse(SolverState.PARTIAL, (None, locus), (moved_free, hit))
        return EdgeSolverResponse(SolverState.PARTIAL, (locus, None), (hit, moved_free))

    assert first.locus is not None and second.locus is not None
    hit1 = intersect_edge_line(edge_line, first.locus, v1_tentative, cfg)
    if hit1 is None:
        logger.info("Edge %d locked: edge line misses the start %s locus", edge, first.locus.kind)
        return EdgeSolverResponse.locked()
    hit2 = intersect_edge_line(edge_line, second.locus, v2_tentative, cfg)
    if hit2 is None:
        logger.info("Edge %d locked: edge line misses the end %s locus", edge, second.locus.kind)
        return EdgeSolverResponse.locked()
    return EdgeSolverResponse(SolverState.PARTIAL, (first.locus, second.locus), (hit1, hit2))


apply_debug_logging(globals(), logger=logger)
