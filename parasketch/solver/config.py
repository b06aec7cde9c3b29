"""Process-wide default tolerances for the drag solver."""

from __future__ import annotations

import copy
from typing import Optional

from .model import SolverConfig

_SOLVER_CONFIG = SolverConfig()


def get_solver_config() -> SolverConfig:
    return copy.deepcopy(_SOLVER_CONFIG)


def set_solver_config(config: SolverConfig) -> None:
    global _SOLVER_CONFIG
    _SOLVER_CONFIG = copy.deepcopy(config)


def resolve_config(config: Optional[SolverConfig]) -> SolverConfig:
    return config if config is not None else get_solver_config()
