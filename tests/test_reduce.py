import pytest

from parasketch.geometry import Circle, Line, Point, Ray
from parasketch.solver import SolverConfig, reduce_loci, reduce_pair

CFG = SolverConfig()


def test_empty_and_single_locus():
    assert reduce_loci([], CFG).locus is None
    ray = Ray((0.0, 0.0), (1.0, 0.0))
    result = reduce_loci([ray], CFG)
    assert result.locus == ray
    assert result.steps == 0


def test_coincident_rays_survive():
    ray = Ray((1.0, 1.0), (0.6, 0.8))
    result = reduce_loci([ray, Ray((1.0, 1.0), (0.6, 0.8))], CFG)
    assert result.locus == ray
    assert result.points == []


def test_crossing_rays_leave_no_locus():
    result = reduce_loci([Ray((0.0, 0.0), (1.0, 0.0)), Ray((2.0, -1.0), (0.0, 1.0))], CFG)
    assert result.locus is None
    assert result.points == [pytest.approx((2.0, 0.0))]


def test_parallel_offset_rays_leave_no_locus():
    locus, points = reduce_pair(Ray((0.0, 0.0), (1.0, 0.0)), Ray((0.0, 1.0), (1.0, 0.0)), CFG)
    assert locus is None
    assert points == []


def test_coincident_lines_keep_current():
    current = Line((0.0, 0.0), (1.0, 0.0))
    locus, _ = reduce_pair(current, Line((5.0, 0.0), (-1.0, 0.0)), CFG)
    assert locus is current


def test_parallel_distinct_lines():
    locus, _ = reduce_pair(Line((0.0, 0.0), (1.0, 0.0)), Line((0.0, 0.5), (1.0, 0.0)), CFG)
    assert locus is None


def test_crossing_lines_reduce_to_a_point_only():
    locus, points = reduce_pair(Line((0.0, 0.0), (1.0, 0.0)), Line((3.0, 3.0), (0.0, 1.0)), CFG)
    assert locus is None
    assert points == [pytest.approx((3.0, 0.0))]


@pytest.mark.parametrize("line_first", [True, False])
def test_ray_on_parallel_line_is_kept(line_first):
    line = Line((0.0, 2.0), (1.0, 0.0))
    ray = Ray((4.0, 2.0), (-1.0, 0.0))
    pair = (line, ray) if line_first else (ray, line)
    locus, _ = reduce_pair(*pair, CFG)
    assert locus == ray


def test_ray_off_parallel_line_is_dropped():
    locus, _ = reduce_pair(Line((0.0, 2.0), (1.0, 0.0)), Ray((4.0, 3.0), (1.0, 0.0)), CFG)
    assert locus is None


@pytest.mark.parametrize(
    "other",
    [Line((-10.0, 0.0), (1.0, 0.0)), Ray((0.0, 0.0), (1.0, 0.0))],
)
def test_circle_with_line_like_never_survives(other):
    circle = Circle((0.0, 0.0), 2.0)
    for pair in [(circle, other), (other, circle)]:
        locus, points = reduce_pair(*pair, CFG)
        assert locus is None
        assert points


def test_circle_pair_is_left_alone():
    first = Circle((0.0, 0.0), 2.0)
    locus, points = reduce_pair(first, Circle((1.0, 0.0), 2.0), CFG)
    assert locus is first
    assert points == []


def test_point_pairs_are_left_alone():
    ray = Ray((0.0, 0.0), (1.0, 0.0))
    locus, _ = reduce_pair(ray, Point((3.0, 3.0)), CFG)
    assert locus is ray


def test_fold_stops_after_first_dead_end():
    loci = [
        Line((0.0, 0.0), (1.0, 0.0)),
        Line((0.0, 1.0), (1.0, 0.0)),
        Line((0.0, 0.0), (1.0, 0.0)),
    ]
    result = reduce_loci(loci, CFG)
    assert result.locus is None
    assert result.steps == 1


def test_fold_is_order_dependent():
    circle_a = Circle((0.0, 0.0), 2.0)
    circle_b = Circle((5.0, 0.0), 1.0)
    line = Line((-10.0, 0.0), (1.0, 0.0))
    # circles first: the pair is skipped, then circle/line ends the fold
    assert reduce_loci([circle_a, circle_b, line], CFG).locus is None
    # two coincident lines followed by a circle end the same way
    assert reduce_loci([line, line, circle_a], CFG).locus is None
    # circle pair only: first circle survives
    assert reduce_loci([circle_a, circle_b], CFG).locus is circle_a
