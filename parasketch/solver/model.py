"""Data structures returned by the drag solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from ..constraints import AngleConstraint, LengthConstraint, ParallelConstraint
from ..geometry import (
    DEFAULT_COINCIDENCE_TOL,
    DEFAULT_DIRECTION_EPS,
    DEFAULT_PARALLEL_TOL,
    Locus,
)
from ..types import ConstraintHandle, Vec2


class SolverState(str, Enum):
    FREE = "free"
    PARTIAL = "partial"
    LOCKED = "locked"


@dataclass
class SolverConfig:
    """Tolerances used by locus construction and reduction."""

    direction_epsilon: float = DEFAULT_DIRECTION_EPS
    angle_tolerance: float = 1e-3
    coincidence_tolerance: float = DEFAULT_COINCIDENCE_TOL
    parallel_tolerance: float = DEFAULT_PARALLEL_TOL


@dataclass
class SolverResponse:
    state: SolverState = SolverState.FREE
    locus: Optional[Locus] = None
    new_pos: Optional[Vec2] = None

    @classmethod
    def free(cls, position: Vec2) -> "SolverResponse":
        return cls(SolverState.FREE, None, position)

    @classmethod
    def locked(cls) -> "SolverResponse":
        return cls(SolverState.LOCKED, None, None)

    @property
    def is_locked(self) -> bool:
        return self.state is SolverState.LOCKED


@dataclass
class EdgeSolverResponse:
    state: SolverState = SolverState.FREE
    loci: Optional[Tuple[Optional[Locus], Optional[Locus]]] = None
    new_pos: Optional[Tuple[Vec2, Vec2]] = None

    @classmethod
    def locked(cls) -> "EdgeSolverResponse":
        return cls(SolverState.LOCKED, None, None)

    @property
    def is_locked(self) -> bool:
        return self.state is SolverState.LOCKED


@dataclass
class ConstraintBuckets:
    """Constraints touching one vertex, grouped by the role the vertex plays."""

    length_end: List[Tuple[ConstraintHandle, LengthConstraint]] = field(default_factory=list)
    angle_center: List[Tuple[ConstraintHandle, AngleConstraint]] = field(default_factory=list)
    angle_end: List[Tuple[ConstraintHandle, AngleConstraint]] = field(default_factory=list)
    parallel_end: List[Tuple[ConstraintHandle, ParallelConstraint]] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (self.length_end or self.angle_center or self.angle_end or self.parallel_end)

    def __len__(self) -> int:
        return len(self.length_end) + len(self.angle_center) + len(self.angle_end) + len(self.parallel_end)


@dataclass
class LocusReduction:
    """Outcome of folding a locus list down to one survivor.

    ``points`` holds the discrete intersections met along the way; they are
    reported for diagnostics but never used as a resolved position.
    """

    locus: Optional[Locus]
    points: List[Vec2] = field(default_factory=list)
    steps: int = 0


__all__ = [
    "SolverState",
    "SolverConfig",
    "SolverResponse",
    "EdgeSolverResponse",
    "ConstraintBuckets",
    "LocusReduction",
]
