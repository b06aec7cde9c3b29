import pytest

from parasketch import (
    AngleConstraint,
    ConstraintCatalogue,
    ConstraintError,
    ConstraintNotFoundError,
    DegenerateEdgeError,
    EdgeNotFoundError,
    EntityStore,
    FullOverlapError,
    LengthConstraint,
    NoSharedVertexError,
    ParallelConstraint,
    resolve_shared_vertex,
)


def _catalogue():
    store = EntityStore()
    verts = [store.add_vertex(p) for p in [(0, 0), (0, 4), (4, 4), (4, 0)]]
    edges = [store.add_edge(a, b) for a, b in zip(verts, verts[1:])]
    return store, ConstraintCatalogue(store), edges


def test_length_constraint_is_stored_and_owned_by_edge():
    store, catalogue, edges = _catalogue()
    handle = catalogue.add_length_constraint(edges[2])
    assert handle == 0
    assert catalogue.get_constraint(handle) == LengthConstraint(edges[2])
    assert catalogue.get_constraint(handle).kind == "length"
    assert store.get_edge(edges[2]).owned_constraints == {handle}


def test_length_constraint_on_missing_edge():
    _, catalogue, _ = _catalogue()
    with pytest.raises(EdgeNotFoundError) as excinfo:
        catalogue.add_length_constraint(7)
    assert excinfo.value.handle == 7
    assert catalogue.count == 0


def test_angle_constraint_resolves_pivot_and_outer_vertices():
    store, catalogue, edges = _catalogue()
    handle = catalogue.add_angle_constraint(edges[0], edges[1])
    constraint = catalogue.get_constraint(handle)
    assert constraint == AngleConstraint(pivot=1, edge1=0, edge1_outer=0, edge2=1, edge2_outer=2)
    # angle constraints are not owned by either edge
    assert store.get_edge(edges[0]).owned_constraints == set()


def test_angle_constraint_without_shared_vertex():
    _, catalogue, edges = _catalogue()
    with pytest.raises(NoSharedVertexError):
        catalogue.add_angle_constraint(edges[0], edges[2])
    assert catalogue.count == 0


def test_angle_constraint_on_missing_edge():
    _, catalogue, edges = _catalogue()
    with pytest.raises(EdgeNotFoundError):
        catalogue.add_angle_constraint(edges[0], 11)


def test_angle_constraint_full_overlap():
    store, catalogue, _ = _catalogue()
    duplicate = store.add_edge(1, 0)
    with pytest.raises(FullOverlapError):
        catalogue.add_angle_constraint(0, duplicate)


def test_angle_constraint_degenerate_edge():
    store, catalogue, edges = _catalogue()
    loop = store.add_edge(2, 2)
    with pytest.raises(DegenerateEdgeError) as excinfo:
        catalogue.add_angle_constraint(edges[1], loop)
    assert excinfo.value.edge == loop
    assert isinstance(excinfo.value, ConstraintError)


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ((1, 2), (1, 3), (1, 2, 3)),
        ((1, 2), (3, 1), (1, 2, 3)),
        ((2, 1), (1, 3), (1, 2, 3)),
        ((2, 1), (3, 1), (1, 2, 3)),
    ],
)
def test_resolve_shared_vertex_patterns(first, second, expected):
    assert resolve_shared_vertex(0, first, 1, second) == expected


def test_parallel_constraint_registers_on_both_edges():
    store, catalogue, edges = _catalogue()
    length = catalogue.add_length_constraint(edges[1])
    handle = catalogue.add_parallel_constraint(edges[0], edges[2])
    assert catalogue.get_constraint(handle) == ParallelConstraint(edges[0], edges[2])
    assert store.get_edge(edges[0]).owned_constraints == {handle}
    assert store.get_edge(edges[2]).owned_constraints == {handle}
    assert store.get_edge(edges[1]).owned_constraints == {length}


def test_parallel_constraint_on_missing_edge_leaves_edges_untouched():
    store, catalogue, edges = _catalogue()
    with pytest.raises(EdgeNotFoundError):
        catalogue.add_parallel_constraint(edges[0], 5)
    assert store.get_edge(edges[0]).owned_constraints == set()


def test_get_missing_constraint():
    _, catalogue, _ = _catalogue()
    with pytest.raises(ConstraintNotFoundError):
        catalogue.get_constraint(0)


def test_constraint_handles_are_unique_and_increasing():
    _, catalogue, edges = _catalogue()
    handles = [
        catalogue.add_length_constraint(edges[0]),
        catalogue.add_angle_constraint(edges[0], edges[1]),
        catalogue.add_parallel_constraint(edges[0], edges[2]),
        catalogue.add_length_constraint(edges[2]),
    ]
    assert handles == [0, 1, 2, 3]


def test_failed_creation_does_not_consume_a_handle():
    _, catalogue, edges = _catalogue()
    with pytest.raises(NoSharedVertexError):
        catalogue.add_angle_constraint(edges[0], edges[2])
    assert catalogue.add_length_constraint(edges[0]) == 0


def test_constraints_for_edge():
    _, catalogue, edges = _catalogue()
    a = catalogue.add_angle_constraint(edges[0], edges[1])
    b = catalogue.add_length_constraint(edges[1])
    catalogue.add_length_constraint(edges[2])
    assert catalogue.constraints_for_edge(edges[1]) == [a, b]
