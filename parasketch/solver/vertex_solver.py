"""Resolve a single vertex drag against the constraints touching it."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..constraints import ConstraintCatalogue
from ..entities import EntityStore
from ..logging_utils import apply_debug_logging
from ..types import ConstraintHandle, Vec2, VertexHandle, as_vec2
from .config import resolve_config
from .loci import build_loci, classify_constraints, find_locking_angle
from .model import SolverConfig, SolverResponse, SolverState
from .reduce import reduce_loci

logger = logging.getLogger(__name__)


def solve_for_vertex(
    store: EntityStore,
    catalogue: ConstraintCatalogue,
    vertex: VertexHandle,
    fixed_position: Vec2,
    tentative_position: Vec2,
    ignore: Iterable[ConstraintHandle] = (),
    *,
    config: Optional[SolverConfig] = None,
) -> SolverResponse:
    """Resolve where ``vertex`` may go when dragged towards ``tentative_position``.

    ``fixed_position`` is where the vertex sat when the drag started; length
    loci use it as their radius reference. Constraints listed in ``ignore``
    are skipped. The graph is only read, never written.

    Raises :class:`~parasketch.errors.VertexNotFoundError` for an unknown
    vertex and :class:`~parasketch.errors.DegenerateDirectionError` when a
    bearing has to be taken along a collapsed edge.
    """

    cfg = resolve_config(config)
    store.get_vertex(vertex)
    fixed_position = as_vec2(fixed_position)
    tentative_position = as_vec2(tentative_position)

    buckets = classify_constraints(store, catalogue, vertex, frozenset(ignore))
    if buckets.is_empty():
        return SolverResponse.free(tentative_position)

    locking = find_locking_angle(store, buckets.angle_center, cfg)
    if locking is not None:
        handle, angle = locking
        logger.info("Vertex %d locked by angle constraint %d (arms at %.6g rad)", vertex, handle, angle)
        return SolverResponse.locked()

    loci = build_loci(store, vertex, buckets, fixed_position, cfg)
    reduction = reduce_loci(loci, cfg)
    if reduction.locus is None:
        logger.info(
            "Vertex %d locked: %d loci left no common path (%d discrete point(s))",
            vertex,
            len(loci),
            len(reduction.points),
        )
        return SolverResponse.locked()

    new_pos = reduction.locus.closest_point(tentative_position)
    logger.info("Vertex %d constrained to %s, resolved at %s", vertex, reduction.locus.kind, new_pos)
    return SolverResponse(SolverState.PARTIAL, reduction.locus, new_pos)


apply_debug_logging(globals(), logger=logger)
