"""Exception hierarchy shared by the entity store, catalogue and solver."""

from __future__ import annotations


class SketchError(Exception):
    """Base class for every error raised by ``parasketch``."""


class HandleNotFoundError(SketchError, LookupError):
    """Raised when a handle does not refer to a live entity."""

    entity = "Entity"

    def __init__(self, handle: int):
        super().__init__(f"{self.entity} {handle} not found")
        self.handle = handle


class VertexNotFoundError(HandleNotFoundError):
    entity = "Vertex"


class EdgeNotFoundError(HandleNotFoundError):
    entity = "Edge"


class ConstraintNotFoundError(HandleNotFoundError):
    entity = "Constraint"


class ConstraintError(SketchError, ValueError):
    """Raised when a constraint cannot be attached to the current graph."""


class DegenerateEdgeError(ConstraintError):
    def __init__(self, edge: int):
        super().__init__(f"Degenerate edge detected: edge {edge} starts and ends at the same vertex")
        self.edge = edge


class NoSharedVertexError(ConstraintError):
    def __init__(self, edge1: int, edge2: int):
        super().__init__(f"No shared vertex found between edges {edge1} and {edge2}")
        self.edges = (edge1, edge2)


class FullOverlapError(ConstraintError):
    def __init__(self, edge1: int, edge2: int):
        super().__init__(f"Full overlap detected: edges {edge1} and {edge2} share both vertices")
        self.edges = (edge1, edge2)


class DegenerateDirectionError(SketchError, ValueError):
    """Raised when a bearing is requested between two (nearly) coincident points."""

    def __init__(self, length: float, epsilon: float, what: str = "direction"):
        super().__init__(f"Cannot compute {what}: length {length:.6g} is below {epsilon:.6g}")
        self.length = length
        self.epsilon = epsilon


__all__ = [
    "SketchError",
    "HandleNotFoundError",
    "VertexNotFoundError",
    "EdgeNotFoundError",
    "ConstraintNotFoundError",
    "ConstraintError",
    "DegenerateEdgeError",
    "NoSharedVertexError",
    "FullOverlapError",
    "DegenerateDirectionError",
]
