from .types import ConstraintHandle, EdgeHandle, Vec2, VertexHandle
from .errors import (
    SketchError,
    HandleNotFoundError,
    VertexNotFoundError,
    EdgeNotFoundError,
    ConstraintNotFoundError,
    ConstraintError,
    DegenerateEdgeError,
    NoSharedVertexError,
    FullOverlapError,
    DegenerateDirectionError,
)
from .geometry import Circle, Line, Locus, Point, Ray
from .entities import Edge, EntityStore, Vertex
from .constraints import (
    AngleConstraint,
    Constraint,
    ConstraintCatalogue,
    LengthConstraint,
    ParallelConstraint,
    resolve_shared_vertex,
)
from .solver import (
    EdgeSolverResponse,
    SolverConfig,
    SolverResponse,
    SolverState,
    get_solver_config,
    set_solver_config,
    solve_for_edge,
    solve_for_vertex,
)
from .sketch import Sketch

__all__ = [
    'ConstraintHandle',
    'EdgeHandle',
    'Vec2',
    'VertexHandle',
    'SketchError',
    'HandleNotFoundError',
    'VertexNotFoundError',
    'EdgeNotFoundError',
    'ConstraintNotFoundError',
    'ConstraintError',
    'DegenerateEdgeError',
    'NoSharedVertexError',
    'FullOverlapError',
    'DegenerateDirectionError',
    'Circle',
    'Line',
    'Locus',
    'Point',
    'Ray',
    'Edge',
    'EntityStore',
    'Vertex',
    'AngleConstraint',
    'Constraint',
    'ConstraintCatalogue',
    'LengthConstraint',
    'ParallelConstraint',
    'resolve_shared_vertex',
    'EdgeSolverResponse',
    'SolverConfig',
    'SolverResponse',
    'SolverState',
    'get_solver_config',
    'set_solver_config',
    'solve_for_edge',
    'solve_for_vertex',
    'Sketch',
]
