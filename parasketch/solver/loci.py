"""Turn the constraints touching a vertex into drag loci."""

from __future__ import annotations

import logging
import math
from typing import AbstractSet, List, Optional, Sequence, Tuple

from ..constraints import AngleConstraint, ConstraintCatalogue, LengthConstraint, ParallelConstraint
from ..entities import EntityStore
from ..geometry import Circle, Line, Locus, Ray, distance, signed_angle, unit_direction
from ..logging_utils import apply_debug_logging
from ..types import ConstraintHandle, Vec2, VertexHandle
from .model import ConstraintBuckets, SolverConfig

logger = logging.getLogger(__name__)


def classify_constraints(
    store: EntityStore,
    catalogue: ConstraintCatalogue,
    vertex: VertexHandle,
    ignore: AbstractSet[ConstraintHandle] = frozenset(),
) -> ConstraintBuckets:
    """Group the constraints touching ``vertex`` by the role ``vertex`` plays in them."""

    buckets = ConstraintBuckets()
    for handle, constraint in catalogue.items():
        if handle in ignore:
            continue
        if isinstance(constraint, LengthConstraint):
            if store.get_edge(constraint.edge).has_vertex(vertex):
                buckets.length_end.append((handle, constraint))
        elif isinstance(constraint, AngleConstraint):
            if constraint.pivot == vertex:
                buckets.angle_center.append((handle, constraint))
            elif vertex in constraint.outer_vertices:
                buckets.angle_end.append((handle, constraint))
        elif isinstance(constraint, ParallelConstraint):
            if any(store.get_edge(edge).has_vertex(vertex) for edge in constraint.edges):
                buckets.parallel_end.append((handle, constraint))
    logger.debug(
        "Vertex %d: length_end=%d angle_center=%d angle_end=%d parallel_end=%d",
        vertex,
        len(buckets.length_end),
        len(buckets.angle_center),
        len(buckets.angle_end),
        len(buckets.parallel_end),
    )
    return buckets


def is_straight_angle(angle: float, tolerance: float) -> bool:
    """``True`` for angles within ``tolerance`` of 0 or +/-pi."""

    magnitude = abs(angle)
    return magnitude < tolerance or abs(math.pi - magnitude) < tolerance


def find_locking_angle(
    store: EntityStore,
    angle_center: Sequence[Tuple[ConstraintHandle, AngleConstraint]],
    config: SolverConfig,
) -> Optional[Tuple[ConstraintHandle, float]]:
    """Return the first pivot constraint whose arms are not colinear.

    A pivot can only slide when both arms lie on one line; any other
    configuration pins it in place.
    """

    for handle, constraint in angle_center:
        d1 = store.edge_direction(constraint.edge1, config.direction_epsilon)
        d2 = store.edge_direction(constraint.edge2, config.direction_epsilon)
        angle = signed_angle(d1, d2)
        if not is_straight_angle(angle, config.angle_tolerance):
            return handle, angle
    return None


def _length_locus(
    store: EntityStore, vertex: VertexHandle, constraint: LengthConstraint, fixed_position: Vec2
) -> Circle:
    other = store.vertex_position(store.other_endpoint(constraint.edge, vertex))
    return Circle(center=other, radius=distance(fixed_position, other))


def _angle_end_locus(
    store: EntityStore, vertex: VertexHandle, constraint: AngleConstraint, config: SolverConfig
) -> Ray:
    pivot = store.vertex_position(constraint.pivot)
    direction = unit_direction(pivot, store.vertex_position(vertex), config.direction_epsilon)
    return Ray(origin=pivot, direction=direction)


def _angle_center_locus(store: EntityStore, constraint: AngleConstraint, config: SolverConfig) -> Line:
    # arms are colinear here, so either outer vertex gives the bearing
    pivot = store.vertex_position(constraint.pivot)
    outer = store.vertex_position(constraint.edge1_outer)
    return Line(origin=pivot, direction=unit_direction(pivot, outer, config.direction_epsilon))


def _parallel_locus(
    store: EntityStore, vertex: VertexHandle, constraint: ParallelConstraint, config: SolverConfig
) -> Line:
    own_edge = constraint.edge1 if store.get_edge(constraint.edge1).has_vertex(vertex) else constraint.edge2
    anchor = store.vertex_position(store.other_endpoint(own_edge, vertex))
    return Line(origin=anchor, direction=store.edge_direction(own_edge, config.direction_epsilon))


def build_loci(
    store: EntityStore,
    vertex: VertexHandle,
    buckets: ConstraintBuckets,
    fixed_position: Vec2,
    config: SolverConfig,
) -> List[Locus]:
    """Build one locus per bucketed constraint.

    Order is length-end, angle-end, angle-center, parallel-end; the reduction
    fold is order dependent so this order is part of the contract.
    """

    loci: List[Locus] = []
    for _, length in buckets.length_end:
        loci.append(_length_locus(store, vertex, length, fixed_position))
    for _, angle in buckets.angle_end:
        loci.append(_angle_end_locus(store, vertex, angle, config))
    for _, angle in buckets.angle_center:
        loci.append(_angle_center_locus(store, angle, config))
    for _, parallel in buckets.parallel_end:
        loci.append(_parallel_locus(store, vertex, parallel, config))
    return loci


apply_debug_logging(globals(), logger=logger)
