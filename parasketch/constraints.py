"""Constraint records and the catalogue that validates and stores them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Literal, Optional, Tuple, Union

from .entities import EntityStore
from .errors import (
    ConstraintNotFoundError,
    DegenerateEdgeError,
    EdgeNotFoundError,
    FullOverlapError,
    NoSharedVertexError,
)
from .types import ConstraintHandle, EdgeHandle, Vec2, VertexHandle

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from .solver.model import EdgeSolverResponse, SolverConfig, SolverResponse

logger = logging.getLogger(__name__)

ConstraintKind = Literal["length", "angle", "parallel"]


@dataclass(frozen=True)
class LengthConstraint:
    """Keeps the two endpoints of ``edge`` at their current distance."""

    edge: EdgeHandle
    kind: ConstraintKind = field(default="length", init=False)

    @property
    def edges(self) -> Tuple[EdgeHandle, ...]:
        return (self.edge,)


@dataclass(frozen=True)
class AngleConstraint:
    """Preserves the angle between two edges meeting at ``pivot``."""

    pivot: VertexHandle
    edge1: EdgeHandle
    edge1_outer: VertexHandle
    edge2: EdgeHandle
    edge2_outer: VertexHandle
    kind: ConstraintKind = field(default="angle", init=False)

    @property
    def edges(self) -> Tuple[EdgeHandle, ...]:
        return (self.edge1, self.edge2)

    @property
    def outer_vertices(self) -> Tuple[VertexHandle, VertexHandle]:
        return (self.edge1_outer, self.edge2_outer)


@dataclass(frozen=True)
class ParallelConstraint:
    """Keeps two edges parallel; order of the edges does not matter."""

    edge1: EdgeHandle
    edge2: EdgeHandle
    kind: ConstraintKind = field(default="parallel", init=False)

    @property
    def edges(self) -> Tuple[EdgeHandle, ...]:
        return (self.edge1, self.edge2)


Constraint = Union[LengthConstraint, AngleConstraint, ParallelConstraint]


def resolve_shared_vertex(
    edge1: EdgeHandle,
    edge1_vertices: Tuple[VertexHandle, VertexHandle],
    edge2: EdgeHandle,
    edge2_vertices: Tuple[VertexHandle, VertexHandle],
) -> Tuple[VertexHandle, VertexHandle, VertexHandle]:
    """Return ``(pivot, edge1_outer, edge2_outer)`` for two edges meeting at one vertex."""

    a1, a2 = edge1_vertices
    b1, b2 = edge2_vertices
    if a1 == a2:
        raise DegenerateEdgeError(edge1)
    if b1 == b2:
        raise DegenerateEdgeError(edge2)

    shared = [(a, b) for a in (a1, a2) for b in (b1, b2) if a == b]
    if not shared:
        raise NoSharedVertexError(edge1, edge2)
    if len(shared) > 1:
        raise FullOverlapError(edge1, edge2)

    pivot = shared[0][0]
    outer1 = a2 if pivot == a1 else a1
    outer2 = b2 if pivot == b1 else b1
    return pivot, outer1, outer2


class ConstraintCatalogue:
    """Validates constraints against an :class:`EntityStore` and stores them.

    Creation either fully succeeds or raises without touching the catalogue
    or the store. Length and parallel constraints are registered on the
    edges they belong to so whole-edge drags can skip them.
    """

    def __init__(self, store: EntityStore) -> None:
        self.store = store
        self._constraints: Dict[ConstraintHandle, Constraint] = {}
        self._next_constraint: ConstraintHandle = 0

    def _require_edges(self, *edges: EdgeHandle) -> None:
        for edge in edges:
            if not self.store.has_edge(edge):
                raise EdgeNotFoundError(edge)

    def _insert(self, constraint: Constraint, owners: Iterable[EdgeHandle] = ()) -> ConstraintHandle:
        handle = self._next_constraint
        self._next_constraint += 1
        self._constraints[handle] = constraint
        for edge in owners:
            self.store.get_edge(edge).owned_constraints.add(handle)
        logger.info("Added %s constraint %d on edges %s", constraint.kind, handle, constraint.edges)
        return handle

    def add_length_constraint(self, edge: EdgeHandle) -> ConstraintHandle:
        self._require_edges(edge)
        return self._insert(LengthConstraint(edge), owners=(edge,))

    def add_angle_constraint(self, edge1: EdgeHandle, edge2: EdgeHandle) -> ConstraintHandle:
        self._require_edges(edge1, edge2)
        pivot, outer1, outer2 = resolve_shared_vertex(
            edge1,
            self.store.get_edge(edge1).vertices,
            edge2,
            self.store.get_edge(edge2).vertices,
        )
        return self._insert(AngleConstraint(pivot, edge1, outer1, edge2, outer2))

    def add_parallel_constraint(self, edge1: EdgeHandle, edge2: EdgeHandle) -> ConstraintHandle:
        self._require_edges(edge1, edge2)
        return self._insert(ParallelConstraint(edge1, edge2), owners=(edge1, edge2))

    def has_constraint(self, handle: ConstraintHandle) -> bool:
        return handle in self._constraints

    def get_constraint(self, handle: ConstraintHandle) -> Constraint:
        try:
            return self._constraints[handle]
        except KeyError:
            raise ConstraintNotFoundError(handle) from None

    def items(self) -> Iterator[Tuple[ConstraintHandle, Constraint]]:
        return iter(self._constraints.items())

    def constraints_for_edge(self, edge: EdgeHandle) -> List[ConstraintHandle]:
        self._require_edges(edge)
        return [handle for handle, constraint in self._constraints.items() if edge in constraint.edges]

    @property
    def count(self) -> int:
        return len(self._constraints)

    def solve_for_vertex(
        self,
        vertex: VertexHandle,
        fixed_position: Vec2,
        tentative_position: Vec2,
        ignore: Iterable[ConstraintHandle] = (),
        *,
        config: Optional["SolverConfig"] = None,
    ) -> "SolverResponse":
        from .solver import solve_for_vertex

        return solve_for_vertex(
            self.store, self, vertex, fixed_position, tentative_position, ignore, config=config
        )

    def solve_for_edge(
        self,
        edge: EdgeHandle,
        fixed_position: Vec2,
        tentative_position: Vec2,
        v1_fixed: Vec2,
        v1_tentative: Vec2,
        v2_fixed: Vec2,
        v2_tentative: Vec2,
        *,
        config: Optional["SolverConfig"] = None,
    ) -> "EdgeSolverResponse":
        from .solver import solve_for_edge

        return solve_for_edge(
            self.store,
            self,
            edge,
            fixed_position,
            tentative_position,
            v1_fixed,
            v1_tentative,
            v2_fixed,
            v2_tentative,
            config=config,
        )


__all__ = [
    "ConstraintKind",
    "LengthConstraint",
    "AngleConstraint",
    "ParallelConstraint",
    "Constraint",
    "resolve_shared_vertex",
    "ConstraintCatalogue",
]
