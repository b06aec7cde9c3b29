"""Closed-form drag solver: constraints to loci, loci to a resolved position."""

from __future__ import annotations

from .config import get_solver_config, set_solver_config
from .edge_solver import intersect_edge_line, solve_for_edge
from .loci import build_loci, classify_constraints, find_locking_angle
from .model import (
    ConstraintBuckets,
    EdgeSolverResponse,
    LocusReduction,
    SolverConfig,
    SolverResponse,
    SolverState,
)
from .reduce import reduce_loci, reduce_pair
from .vertex_solver import solve_for_vertex

__all__ = [
    "ConstraintBuckets",
    "EdgeSolverResponse",
    "LocusReduction",
    "SolverConfig",
    "SolverResponse",
    "SolverState",
    "build_loci",
    "classify_constraints",
    "find_locking_angle",
    "get_solver_config",
    "intersect_edge_line",
    "reduce_loci",
    "reduce_pair",
    "set_solver_config",
    "solve_for_edge",
    "solve_for_vertex",
]
