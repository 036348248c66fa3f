"""Tests for distance, elevation and slope computations."""
import math

import pytest

from gpx_parser.core.geometry import (
    EARTH_RADIUS_M,
    calc_elevation_stats,
    calc_route_distance,
    calc_slope,
    haversine,
)
from gpx_parser.models import Point

# One thousandth of a degree along a meridian
MILLIDEGREE_M = EARTH_RADIUS_M * math.radians(0.001)


def _line(n: int, elevations=None) -> list[Point]:
    elevations = elevations or [None] * n
    return [Point(lat=45.0 + i * 0.001, lon=5.0, ele=elevations[i]) for i in range(n)]


class TestHaversine:
    def test_same_point_is_zero(self):
        p = Point(lat=47.2, lon=-1.5)
        assert haversine(p, p) == 0.0

    def test_symmetric(self):
        p1 = Point(lat=47.253146555709, lon=-1.5153741828293)
        p2 = Point(lat=47.235331031612, lon=-1.5482325613225)
        assert haversine(p1, p2) == haversine(p2, p1)

    def test_one_degree_of_latitude(self):
        d = haversine(Point(lat=0.0, lon=0.0), Point(lat=1.0, lon=0.0))
        assert d == pytest.approx(111_194.9266, rel=1e-7)

    def test_antipodes(self):
        d = haversine(Point(lat=0.0, lon=0.0), Point(lat=0.0, lon=180.0))
        assert d == pytest.approx(math.pi * EARTH_RADIUS_M)


class TestCalcRouteDistance:
    def test_empty(self):
        dist = calc_route_distance([])
        assert dist.total == 0.0
        assert dist.cumul == ()

    def test_single_point(self):
        dist = calc_route_distance(_line(1))
        assert dist.total == 0.0
        assert dist.cumul == (0.0,)

    def test_cumulative_entries(self):
        dist = calc_route_distance(_line(4))
        assert len(dist.cumul) == 4
        assert dist.cumul[0] == pytest.approx(MILLIDEGREE_M, rel=1e-6)
        assert dist.cumul[1] == pytest.approx(2 * MILLIDEGREE_M, rel=1e-6)
        assert dist.total == pytest.approx(3 * MILLIDEGREE_M, rel=1e-6)

    def test_last_entry_repeats_total(self):
        dist = calc_route_distance(_line(5))
        assert dist.cumul[-1] == dist.total
        assert dist.cumul[-2] == dist.total

    def test_non_decreasing(self):
        dist = calc_route_distance(_line(20))
        assert all(a <= b for a, b in zip(dist.cumul, dist.cumul[1:]))


class TestCalcElevationStats:
    def test_gain_loss_and_extremes(self):
        stats = calc_elevation_stats(_line(3, [100.0, 110.0, 104.5]))
        assert stats.max == 110.0
        assert stats.min == 100.0
        assert stats.pos == pytest.approx(10.0)
        assert stats.neg == pytest.approx(5.5)
        assert stats.avg == pytest.approx(314.5 / 3)

    def test_no_elevation_data(self):
        stats = calc_elevation_stats(_line(3))
        assert stats.max is None
        assert stats.min is None
        assert stats.avg is None
        assert stats.pos is None
        assert stats.neg is None

    def test_empty_sequence(self):
        stats = calc_elevation_stats([])
        assert stats.model_dump() == {"max": None, "min": None, "pos": None, "neg": None, "avg": None}

    def test_flat_profile_reports_none_for_gain_and_loss(self):
        stats = calc_elevation_stats(_line(3, [50.0, 50.0, 50.0]))
        assert stats.pos is None
        assert stats.neg is None
        assert stats.avg == 50.0

    def test_zero_elevations_become_none(self):
        stats = calc_elevation_stats(_line(2, [0.0, 0.0]))
        assert stats.max is None
        assert stats.min is None
        assert stats.avg is None

    def test_missing_elevation_counts_as_zero_for_deltas(self):
        stats = calc_elevation_stats(_line(3, [10.0, None, 10.0]))
        assert stats.pos == 10.0
        assert stats.neg == 10.0
        # extremes and mean only consider known elevations
        assert stats.max == 10.0
        assert stats.min == 10.0
        assert stats.avg == 10.0

    def test_sequential_mean(self):
        eles = [4.09, 31.6, 12.3, 8.75]
        stats = calc_elevation_stats(_line(4, eles))
        total = 0.0
        for e in eles:
            total += e
        assert stats.avg == total / 4


class TestCalcSlope:
    def test_length(self):
        for n in range(0, 6):
            pts = _line(n, [float(i) for i in range(n)])
            assert len(calc_slope(pts, calc_route_distance(pts).cumul)) == max(n - 1, 0)

    def test_percent_grade(self):
        pts = _line(3, [100.0, 110.0, 104.5])
        cumul = [100.0, 200.0, 400.0]
        assert calc_slope(pts, cumul) == pytest.approx([10.0, -2.75])

    def test_uses_cumulative_differences(self):
        pts = _line(3, [0.0, 10.0, 30.0])
        slopes = calc_slope(pts, [0.0, 100.0, 200.0])
        assert slopes == pytest.approx([10.0, 20.0])

    def test_missing_elevation_counts_as_zero(self):
        pts = _line(2, [None, 5.0])
        assert calc_slope(pts, [0.0, 50.0]) == pytest.approx([10.0])

    def test_zero_length_segment_is_not_guarded(self):
        pts = _line(3, [100.0, 110.0, 104.5])
        slopes = calc_slope(pts, calc_route_distance(pts).cumul)
        # the trailing cumulative entry repeats the total
        assert math.isinf(slopes[-1]) and slopes[-1] < 0

    def test_zero_over_zero_is_nan(self):
        pts = _line(2, [5.0, 5.0])
        assert math.isnan(calc_slope(pts, [0.0, 0.0])[0])
