import math

import numpy as np
import pytest

from parasketch import (
    NoSharedVertexError,
    Ray,
    Sketch,
    SolverState,
    VertexNotFoundError,
    get_solver_config,
    set_solver_config,
)
from parasketch.solver import SolverConfig, reduce_loci


def _scenario_a():
    sketch = Sketch()
    v = [sketch.add_vertex(p) for p in [(0.0, 0.0), (0.0, 4.0), (4.0, 4.0), (4.0, 0.0)]]
    e = [sketch.add_edge(v[0], v[1]), sketch.add_edge(v[1], v[2]), sketch.add_edge(v[2], v[3])]
    return sketch, v, e


def test_scenario_a_length_drag():
    sketch, v, e = _scenario_a()
    sketch.add_length_constraint(e[2])
    response = sketch.solve_for_vertex(v[3], (4.0, 0.0), (8.0, 0.0))
    assert response.state is SolverState.PARTIAL
    x, y = response.new_pos
    assert math.hypot(x - 4.0, y - 4.0) == pytest.approx(4.0, abs=1e-3)
    assert (x, y) == pytest.approx((4.0 + 2.0 * math.sqrt(2.0), 4.0 - 2.0 * math.sqrt(2.0)))


def test_scenario_b_angle_without_shared_vertex():
    sketch, _, e = _scenario_a()
    with pytest.raises(NoSharedVertexError):
        sketch.add_angle_constraint(e[0], e[2])


def test_scenario_c_edge_to_missing_vertex():
    sketch, _, _ = _scenario_a()
    with pytest.raises(VertexNotFoundError) as excinfo:
        sketch.add_edge(99, 0)
    assert excinfo.value.handle == 99


def test_scenario_d_coincident_rays():
    ray = Ray((0.0, 4.0), (0.0, -1.0))
    result = reduce_loci([ray, Ray((0.0, 4.0), (0.0, -1.0))], SolverConfig())
    assert result.locus == ray


def test_drag_vertex_applies_resolved_position():
    sketch, v, e = _scenario_a()
    sketch.add_length_constraint(e[2])
    response = sketch.drag_vertex(v[3], (4.0, 0.0), (8.0, 0.0))
    assert sketch.get_vertex(v[3]).position == response.new_pos


def test_drag_vertex_keeps_position_when_locked():
    sketch, v, e = _scenario_a()
    sketch.add_angle_constraint(e[0], e[1])
    response = sketch.drag_vertex(v[1], (0.0, 4.0), (3.0, 3.0))
    assert response.state is SolverState.LOCKED
    assert sketch.get_vertex(v[1]).position == (0.0, 4.0)


def test_drag_edge_applies_both_endpoints():
    sketch, v, e = _scenario_a()
    sketch.add_angle_constraint(e[0], e[1])
    response = sketch.drag_edge(e[2], (4.0, 2.0), (5.0, 2.5))
    assert response.state is SolverState.PARTIAL
    assert sketch.get_vertex(v[2]).position == pytest.approx((5.0, 4.0))
    assert sketch.get_vertex(v[3]).position == pytest.approx((5.0, 0.0))


def test_drag_edge_keeps_positions_when_locked():
    sketch, v, e = _scenario_a()
    sketch.add_angle_constraint(e[0], e[1])
    sketch.drag_edge(e[1], (2.0, 4.0), (2.0, 6.0))
    assert sketch.get_vertex(v[1]).position == (0.0, 4.0)
    assert sketch.get_vertex(v[2]).position == (4.0, 4.0)


def test_successive_drags_follow_the_circle():
    sketch, v, e = _scenario_a()
    sketch.add_length_constraint(e[2])
    fixed = sketch.get_vertex(v[3]).position
    for target in [(6.0, 0.0), (8.0, 2.0), (9.0, 4.0), (8.0, 8.0)]:
        sketch.drag_vertex(v[3], fixed, target)
        x, y = sketch.get_vertex(v[3]).position
        assert math.hypot(x - 4.0, y - 4.0) == pytest.approx(4.0, abs=1e-3)


def test_global_config_round_trip():
    original = get_solver_config()
    try:
        set_solver_config(SolverConfig(angle_tolerance=2.0))
        assert get_solver_config().angle_tolerance == 2.0
        sketch, v, e = _scenario_a()
        sketch.add_angle_constraint(e[0], e[1])
        assert sketch.solve_for_vertex(v[1], (0.0, 4.0), (0.0, 6.0)).state is SolverState.PARTIAL
    finally:
        set_solver_config(original)
    assert get_solver_config() == original


def test_get_solver_config_returns_copy():
    cfg = get_solver_config()
    cfg.direction_epsilon = 123.0
    assert get_solver_config().direction_epsilon != 123.0


@pytest.mark.parametrize("seed", range(5))
def test_length_invariance(seed):
    rng = np.random.default_rng(seed)
    sketch, v, e = _scenario_a()
    sketch.add_length_constraint(e[2])
    for target in rng.uniform(-20.0, 20.0, size=(25, 2)):
        response = sketch.solve_for_vertex(v[3], (4.0, 0.0), tuple(target))
        assert response.state is SolverState.PARTIAL
        x, y = response.new_pos
        assert math.hypot(x - 4.0, y - 4.0) == pytest.approx(4.0, abs=1e-3)


@pytest.mark.parametrize("seed", range(5))
def test_parallel_preservation(seed):
    rng = np.random.default_rng(seed)
    sketch = Sketch()
    a0 = sketch.add_vertex((0.0, 0.0))
    a1 = sketch.add_vertex((3.0, 1.0))
    b0 = sketch.add_vertex((0.0, 5.0))
    b1 = sketch.add_vertex((6.0, 7.0))
    first = sketch.add_edge(a0, a1)
    second = sketch.add_edge(b0, b1)
    sketch.add_parallel_constraint(first, second)
    partner = sketch.store.edge_direction(second)
    for target in rng.uniform(-10.0, 10.0, size=(25, 2)):
        response = sketch.solve_for_vertex(a1, (3.0, 1.0), tuple(target))
        assert response.state is SolverState.PARTIAL
        x, y = response.new_pos
        # a0 sits at the origin, so the resolved point must be colinear with the partner direction
        assert abs(x * partner[1] - y * partner[0]) < 1e-6


@pytest.mark.parametrize("seed", range(5))
def test_free_invariance(seed):
    rng = np.random.default_rng(seed)
    sketch, v, e = _scenario_a()
    for target in rng.uniform(-50.0, 50.0, size=(10, 2)):
        target = (float(target[0]), float(target[1]))
        assert sketch.solve_for_vertex(v[0], (0.0, 0.0), target).new_pos == target
        edge_response = sketch.solve_for_edge(
            e[1], (2.0, 4.0), target, (0.0, 4.0), target, (4.0, 4.0), target
        )
        assert edge_response.state is SolverState.FREE
        assert edge_response.new_pos == (target, target)


@pytest.mark.parametrize("seed", range(5))
def test_angle_lock_for_bent_pivots(seed):
    rng = np.random.default_rng(seed)
    for _ in range(10):
        angle = rng.uniform(0.05, math.pi - 0.05) * rng.choice([-1.0, 1.0])
        sketch = Sketch()
        pivot = sketch.add_vertex((1.0, 1.0))
        a = sketch.add_vertex((4.0, 1.0))
        b = sketch.add_vertex((1.0 + 2.0 * math.cos(angle), 1.0 + 2.0 * math.sin(angle)))
        sketch.add_angle_constraint(sketch.add_edge(pivot, a), sketch.add_edge(pivot, b))
        target = tuple(rng.uniform(-5.0, 5.0, size=2))
        assert sketch.solve_for_vertex(pivot, (1.0, 1.0), target).state is SolverState.LOCKED


def test_handles_are_unique_and_monotonic():
    rng = np.random.default_rng(7)
    sketch = Sketch()
    vertices, edges, constraints = [], [], []
    for _ in range(4):
        vertices.append(sketch.add_vertex(tuple(rng.uniform(0.0, 10.0, size=2))))
    for _ in range(40):
        op = rng.integers(0, 3)
        if op == 0:
            vertices.append(sketch.add_vertex(tuple(rng.uniform(0.0, 10.0, size=2))))
        elif op == 1:
            a, b = rng.choice(vertices, size=2, replace=False)
            edges.append(sketch.add_edge(int(a), int(b)))
        elif edges:
            constraints.append(sketch.add_length_constraint(int(rng.choice(edges))))
    for handles in (vertices, edges, constraints):
        assert handles == sorted(set(handles))
        assert handles == list(range(len(handles)))
