"""
Unit tests for route synthesis.

Run with: pytest tests/test_synthesizer.py
"""

import itertools
import math

import pytest

from route_navigator.catalog import TRIESTE_POIS
from route_navigator.models import (
    ALL_PROFILES, AccessibilityProfile, Coordinate, FeatureKind, ObstacleKind, ObstacleSeverity
)
from route_navigator.synthesizer import path_distance, synthesize

W = AccessibilityProfile.WHEELCHAIR
S = AccessibilityProfile.STROLLER
V = AccessibilityProfile.VISUAL_IMPAIRMENT
H = AccessibilityProfile.HEARING_IMPAIRMENT

POI_PAIRS = list(itertools.permutations(TRIESTE_POIS, 2))


class TestPathDistance:
    """Tests for the planar waypoint distance."""

    def test_same_point(self):
        """Distance for [P, P] is 0."""
        p = Coordinate(latitude=45.6467, longitude=13.7628)
        assert path_distance([p, p]) == 0.0

    def test_fewer_than_two_points(self):
        assert path_distance([]) == 0.0
        assert path_distance([Coordinate(latitude=45.0, longitude=13.0)]) == 0.0

    def test_known_distance(self):
        """0.001 degrees of latitude is 111 m."""
        a = Coordinate(latitude=45.0, longitude=13.0)
        b = Coordinate(latitude=45.001, longitude=13.0)
        assert path_distance([a, b]) == pytest.approx(111.0, rel=1e-9)

    def test_is_planar_not_great_circle(self):
        """Longitude degrees count the same as latitude degrees."""
        a = Coordinate(latitude=45.0, longitude=13.0)
        b = Coordinate(latitude=45.0, longitude=13.001)
        assert path_distance([a, b]) == pytest.approx(111.0, rel=1e-9)

    def test_sums_segments(self):
        a = Coordinate(latitude=45.0, longitude=13.0)
        b = Coordinate(latitude=45.003, longitude=13.004)
        c = Coordinate(latitude=45.003, longitude=13.0)
        assert path_distance([a, b, c]) == pytest.approx((0.005 + 0.004) * 111000, rel=1e-9)


class TestSynthesize:
    """Tests for the three route archetypes."""

    @pytest.mark.parametrize("origin,destination", POI_PAIRS)
    def test_three_routes_with_fixed_endpoints(self, origin, destination):
        """Every pair yields 3 routes starting at origin and ending at destination."""
        for profile in AccessibilityProfile:
            routes = synthesize(origin, destination, profile)
            assert len(routes) == 3
            for route in routes:
                assert route.waypoints
                assert route.waypoints[0] == origin.coordinate
                assert route.waypoints[-1] == destination.coordinate
                assert route.distance_m >= 0
                assert 0.0 <= route.accessibility_score <= 1.0

    def test_deterministic(self, piazza, castello, wheelchair):
        """Identical inputs give identical route sets, ids included."""
        first = synthesize(piazza, castello, wheelchair)
        second = synthesize(piazza, castello, wheelchair)
        assert first == second
        assert [r.model_dump_json() for r in first] == [r.model_dump_json() for r in second]

    def test_profile_does_not_change_content(self, piazza, castello):
        assert synthesize(piazza, castello, W) == synthesize(piazza, castello, H)

    def test_ids_differ_between_pairs(self, piazza, castello):
        forward = synthesize(piazza, castello, W)
        backward = synthesize(castello, piazza, W)
        assert {r.id for r in forward}.isdisjoint({r.id for r in backward})

    def test_archetype_order(self, piazza, castello, wheelchair):
        names = [route.name for route in synthesize(piazza, castello, wheelchair)]
        assert names == ["Most Accessible Route", "Scenic Route", "Direct Historic Route"]

    def test_accessible_route(self, piazza, castello, wheelchair):
        route = synthesize(piazza, castello, wheelchair)[0]

        assert len(route.waypoints) == 3
        mid = route.waypoints[1]
        assert mid.latitude == pytest.approx((45.6467 + 45.6478) / 2)
        assert mid.longitude == pytest.approx((13.7628 + 13.7700) / 2 + 0.002)

        assert route.accessibility_score == 0.92
        assert route.duration_min == 18
        assert route.distance_m == pytest.approx(path_distance(route.waypoints))

        assert [o.kind for o in route.obstacles] == [ObstacleKind.CROWDED_AREA]
        assert route.obstacles[0].severity == ObstacleSeverity.LOW
        assert [f.kind for f in route.features] == [
            FeatureKind.RAMP, FeatureKind.TACTILE_PAVING, FeatureKind.REST_AREA, FeatureKind.SMOOTH_SURFACE
        ]
        assert route.recommended_for == ALL_PROFILES
        assert route.not_recommended_for == frozenset()

    def test_scenic_route(self, piazza, castello, wheelchair):
        route = synthesize(piazza, castello, wheelchair)[1]

        assert len(route.waypoints) == 4
        mid_lat = (45.6467 + 45.6478) / 2
        assert route.waypoints[1].latitude == pytest.approx(mid_lat - 0.001)
        assert route.waypoints[2].latitude == pytest.approx(mid_lat + 0.001)

        assert route.accessibility_score == 0.68
        assert route.duration_min == 15
        assert route.distance_m == pytest.approx(path_distance(route.waypoints) * 1.15)

        assert [o.kind for o in route.obstacles] == [ObstacleKind.UNEVEN_SURFACE, ObstacleKind.NARROW_PATH]
        assert all(o.severity == ObstacleSeverity.MEDIUM for o in route.obstacles)
        assert all(o.alternative for o in route.obstacles)
        assert [f.kind for f in route.features] == [FeatureKind.VISUAL_SIGNAGE, FeatureKind.WIDE_PATH]
        assert route.recommended_for == frozenset({H, V})
        assert route.not_recommended_for == frozenset()

    def test_direct_route(self, piazza, castello, wheelchair):
        route = synthesize(piazza, castello, wheelchair)[2]

        assert route.waypoints == (piazza.coordinate, castello.coordinate)
        assert route.distance_m == pytest.approx(math.hypot(0.0011, 0.0072) * 111000, rel=1e-6)
        assert route.accessibility_score == 0.35
        assert route.duration_min == 12

        assert [(o.kind, o.severity) for o in route.obstacles] == [
            (ObstacleKind.STAIRS, ObstacleSeverity.BLOCKING),
            (ObstacleKind.STEEP_SLOPE, ObstacleSeverity.HIGH),
            (ObstacleKind.UNEVEN_SURFACE, ObstacleSeverity.HIGH),
        ]
        assert all(o.alternative for o in route.obstacles)
        assert [f.kind for f in route.features] == [FeatureKind.AUDIO_GUIDE]
        assert route.recommended_for == frozenset()
        assert route.not_recommended_for == frozenset({W, S})

    def test_same_origin_and_destination(self, piazza, wheelchair):
        """A degenerate trip still yields three routes; the direct one has zero length."""
        routes = synthesize(piazza, piazza, wheelchair)
        assert len(routes) == 3
        assert routes[2].distance_m == 0.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
