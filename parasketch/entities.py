"""Vertex/edge arena keyed by monotonically increasing integer handles."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Set, Tuple

from .errors import EdgeNotFoundError, VertexNotFoundError
from .geometry import DEFAULT_DIRECTION_EPS, distance, unit_direction
from .types import ConstraintHandle, EdgeHandle, Vec2, VertexHandle, as_vec2

logger = logging.getLogger(__name__)


@dataclass
class Vertex:
    position: Vec2
    incident_edges: List[EdgeHandle] = field(default_factory=list)


@dataclass
class Edge:
    start: VertexHandle
    end: VertexHandle
    owned_constraints: Set[ConstraintHandle] = field(default_factory=set)

    @property
    def vertices(self) -> Tuple[VertexHandle, VertexHandle]:
        return self.start, self.end

    def has_vertex(self, vertex: VertexHandle) -> bool:
        return vertex == self.start or vertex == self.end

    def other(self, vertex: VertexHandle) -> VertexHandle:
        """Return the endpoint opposite ``vertex``."""

        if vertex == self.start:
            return self.end
        if vertex == self.end:
            return self.start
        raise VertexNotFoundError(vertex)


class EntityStore:
    """Owns vertices and edges and keeps the incident-edge bookkeeping.

    Handles start at 0 and are never reused; an edge can only be created
    between two existing vertices.
    """

    def __init__(self) -> None:
        self._vertices: Dict[VertexHandle, Vertex] = {}
        self._edges: Dict[EdgeHandle, Edge] = {}
        self._next_vertex: VertexHandle = 0
        self._next_edge: EdgeHandle = 0

    # vertices

    def add_vertex(self, position: Vec2) -> VertexHandle:
        handle = self._next_vertex
        self._next_vertex += 1
        self._vertices[handle] = Vertex(as_vec2(position))
        logger.info("Added vertex %d at %s", handle, self._vertices[handle].position)
        return handle

    def has_vertex(self, handle: VertexHandle) -> bool:
        return handle in self._vertices

    def get_vertex(self, handle: VertexHandle) -> Vertex:
        try:
            return self._vertices[handle]
        except KeyError:
            raise VertexNotFoundError(handle) from None

    def vertex_position(self, handle: VertexHandle) -> Vec2:
        return self.get_vertex(handle).position

    def set_vertex_position(self, handle: VertexHandle, position: Vec2) -> None:
        vertex = self.get_vertex(handle)
        vertex.position = as_vec2(position)
        logger.debug("Moved vertex %d to %s", handle, vertex.position)

    def vertices(self) -> Iterator[Tuple[VertexHandle, Vertex]]:
        return iter(self._vertices.items())

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    # edges

    def add_edge(self, v1: VertexHandle, v2: VertexHandle) -> EdgeHandle:
        for handle in (v1, v2):
            if handle not in self._vertices:
                raise VertexNotFoundError(handle)

        handle = self._next_edge
        self._next_edge += 1
        self._edges[handle] = Edge(v1, v2)
        self._vertices[v1].incident_edges.append(handle)
        self._vertices[v2].incident_edges.append(handle)
        logger.info("Added edge %d between vertices %d and %d", handle, v1, v2)
        return handle

    def has_edge(self, handle: EdgeHandle) -> bool:
        return handle in self._edges

    def get_edge(self, handle: EdgeHandle) -> Edge:
        try:
            return self._edges[handle]
        except KeyError:
            raise EdgeNotFoundError(handle) from None

    def edges(self) -> Iterator[Tuple[EdgeHandle, Edge]]:
        return iter(self._edges.items())

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def edge_endpoints(self, handle: EdgeHandle) -> Tuple[Vec2, Vec2]:
        edge = self.get_edge(handle)
        return self.vertex_position(edge.start), self.vertex_position(edge.end)

    def edge_length(self, handle: EdgeHandle) -> float:
        start, end = self.edge_endpoints(handle)
        return distance(start, end)

    def edge_direction(self, handle: EdgeHandle, epsilon: float = DEFAULT_DIRECTION_EPS) -> Vec2:
        """Unit direction from the edge's start vertex to its end vertex."""

        start, end = self.edge_endpoints(handle)
        return unit_direction(start, end, epsilon)

    def other_endpoint(self, edge: EdgeHandle, vertex: VertexHandle) -> VertexHandle:
        return self.get_edge(edge).other(vertex)


__all__ = ["Vertex", "Edge", "EntityStore"]
