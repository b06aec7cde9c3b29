"""Single entry point bundling the entity store and constraint catalogue."""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .constraints import Constraint, ConstraintCatalogue
from .entities import Edge, EntityStore, Vertex
from .solver import EdgeSolverResponse, SolverConfig, SolverResponse
from .types import ConstraintHandle, EdgeHandle, Vec2, VertexHandle, as_vec2

logger = logging.getLogger(__name__)


class Sketch:
    """The in-process call surface used by an interactive front end.

    Solves never touch the graph; :meth:`drag_vertex` and :meth:`drag_edge`
    are the write-back helpers applying a non-locked result.
    """

    def __init__(self, config: Optional[SolverConfig] = None) -> None:
        self.store = EntityStore()
        self.catalogue = ConstraintCatalogue(self.store)
        self.config = config

    def add_vertex(self, position: Vec2) -> VertexHandle:
        return self.store.add_vertex(position)

    def add_edge(self, v1: VertexHandle, v2: VertexHandle) -> EdgeHandle:
        return self.store.add_edge(v1, v2)

    def add_length_constraint(self, edge: EdgeHandle) -> ConstraintHandle:
        return self.catalogue.add_length_constraint(edge)

    def add_angle_constraint(self, edge1: EdgeHandle, edge2: EdgeHandle) -> ConstraintHandle:
        return self.catalogue.add_angle_constraint(edge1, edge2)

    def add_parallel_constraint(self, edge1: EdgeHandle, edge2: EdgeHandle) -> ConstraintHandle:
        return self.catalogue.add_parallel_constraint(edge1, edge2)

    def get_vertex(self, handle: VertexHandle) -> Vertex:
        return self.store.get_vertex(handle)

    def get_edge(self, handle: EdgeHandle) -> Edge:
        return self.store.get_edge(handle)

    def get_constraint(self, handle: ConstraintHandle) -> Constraint:
        return self.catalogue.get_constraint(handle)

    def set_vertex_position(self, handle: VertexHandle, position: Vec2) -> None:
        self.store.set_vertex_position(handle, position)

    def solve_for_vertex(
        self,
        vertex: VertexHandle,
        fixed_position: Vec2,
        tentative_position: Vec2,
        ignore: Iterable[ConstraintHandle] = (),
    ) -> SolverResponse:
        return self.catalogue.solve_for_vertex(
            vertex, fixed_position, tentative_position, ignore, config=self.config
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
    ) -> EdgeSolverResponse:
        return self.catalogue.solve_for_edge(
            edge,
            fixed_position,
            tentative_position,
            v1_fixed,
            v1_tentative,
            v2_fixed,
            v2_tentative,
            config=self.config,
        )

    def drag_vertex(
        self, vertex: VertexHandle, fixed_position: Vec2, tentative_position: Vec2
    ) -> SolverResponse:
        """Solve a vertex drag and apply the result unless it is locked."""

        response = self.solve_for_vertex(vertex, fixed_position, tentative_position)
        if response.new_pos is not None:
            self.store.set_vertex_position(vertex, response.new_pos)
        else:
            logger.info("Vertex %d stays at %s", vertex, self.store.vertex_position(vertex))
        return response

    def drag_edge(
        self, edge: EdgeHandle, fixed_position: Vec2, tentative_position: Vec2
    ) -> EdgeSolverResponse:
        """Solve a rigid edge drag from the pointer motion and apply the result.

        Endpoint positions are taken from the store and shifted by the
        pointer delta ``tentative_position - fixed_position``.
        """

        fixed_position = as_vec2(fixed_position)
        tentative_position = as_vec2(tentative_position)
        dx = tentative_position[0] - fixed_position[0]
        dy = tentative_position[1] - fixed_position[1]
        record = self.store.get_edge(edge)
        v1 = self.store.vertex_position(record.start)
        v2 = self.store.vertex_position(record.end)
        response = self.solve_for_edge(
            edge,
            fixed_position,
            tentative_position,
            v1,
            (v1[0] + dx, v1[1] + dy),
            v2,
            (v2[0] + dx, v2[1] + dy),
        )
        if response.new_pos is not None:
            new_start, new_end = response.new_pos
            self.store.set_vertex_position(record.start, new_start)
            self.store.set_vertex_position(record.end, new_end)
        else:
            logger.info("Edge %d stays in place", edge)
        return response


__all__ = ["Sketch"]
