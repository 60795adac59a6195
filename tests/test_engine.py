"""
Unit tests for ranking, suitability and colour bands.

Run with: pytest tests/test_engine.py
"""

import pytest

from route_navigator.engine import (
    ColorBand, color_band, features_benefiting, obstacles_affecting, rank, suitability, worst_severity
)
from route_navigator.models import AccessibilityProfile, FeatureKind, ObstacleKind, ObstacleSeverity
from route_navigator.synthesizer import synthesize

W = AccessibilityProfile.WHEELCHAIR
S = AccessibilityProfile.STROLLER
V = AccessibilityProfile.VISUAL_IMPAIRMENT
H = AccessibilityProfile.HEARING_IMPAIRMENT


@pytest.fixture
def routes(piazza, castello):
    return synthesize(piazza, castello, W)


class TestRank:
    """Tests for route ranking."""

    def test_descending_scores(self, routes):
        ranked = rank(list(reversed(routes)))
        assert [r.accessibility_score for r in ranked] == [0.92, 0.68, 0.35]

    def test_stable_for_equal_scores(self, routes):
        """Equal scores keep their input order."""
        a = routes[2].model_copy(update={"name": "A", "accessibility_score": 0.5})
        b = routes[1].model_copy(update={"name": "B", "accessibility_score": 0.5})
        c = routes[0].model_copy(update={"name": "C", "accessibility_score": 0.9})
        d = routes[0].model_copy(update={"name": "D", "accessibility_score": 0.5})
        assert [r.name for r in rank([a, b, c, d])] == ["C", "A", "B", "D"]

    def test_empty(self):
        assert rank([]) == []

    def test_does_not_mutate_input(self, routes):
        original = list(routes)
        rank(routes)
        assert routes == original


class TestSuitability:
    """Tests for per-profile suitability."""

    def test_accessible_route_suits_everyone(self, routes):
        assert all(suitability(routes[0], profile) for profile in AccessibilityProfile)

    def test_scenic_route(self, routes):
        assert suitability(routes[1], H)
        assert suitability(routes[1], V)
        assert not suitability(routes[1], W)
        assert not suitability(routes[1], S)

    def test_direct_route_suits_nobody(self, routes):
        assert not any(suitability(routes[2], profile) for profile in AccessibilityProfile)

    def test_not_recommended_wins(self, routes):
        """Membership in not_recommended_for overrides recommended_for."""
        contradictory = routes[0].model_copy(update={"not_recommended_for": frozenset({W})})
        assert not suitability(contradictory, W)
        assert suitability(contradictory, S)


class TestColorBand:
    """Tests for score colour bands."""

    def test_accessible(self):
        assert color_band(1.0) == ColorBand.ACCESSIBLE
        assert color_band(0.92) == ColorBand.ACCESSIBLE
        assert color_band(0.8) == ColorBand.ACCESSIBLE

    def test_caution(self):
        assert color_band(0.79) == ColorBand.CAUTION
        assert color_band(0.68) == ColorBand.CAUTION
        assert color_band(0.5) == ColorBand.CAUTION

    def test_poor(self):
        assert color_band(0.49) == ColorBand.POOR
        assert color_band(0.35) == ColorBand.POOR
        assert color_band(0.0) == ColorBand.POOR


class TestProfileFilters:
    """Tests for obstacle and feature filtering by profile."""

    def test_obstacles_worst_first(self, routes):
        affecting = obstacles_affecting(routes[2], W)
        assert [(o.kind, o.severity) for o in affecting] == [
            (ObstacleKind.STAIRS, ObstacleSeverity.BLOCKING),
            (ObstacleKind.STEEP_SLOPE, ObstacleSeverity.HIGH),
            (ObstacleKind.UNEVEN_SURFACE, ObstacleSeverity.HIGH),
        ]

    def test_obstacles_filtered(self, routes):
        assert [o.kind for o in obstacles_affecting(routes[2], V)] == [ObstacleKind.UNEVEN_SURFACE]
        assert obstacles_affecting(routes[2], H) == []

    def test_features_benefiting(self, routes):
        kinds = [f.kind for f in features_benefiting(routes[0], V)]
        assert kinds == [FeatureKind.TACTILE_PAVING, FeatureKind.REST_AREA, FeatureKind.SMOOTH_SURFACE]
        assert [f.kind for f in features_benefiting(routes[0], H)] == [FeatureKind.REST_AREA]

    def test_worst_severity(self, routes):
        assert worst_severity(routes[0], W) == ObstacleSeverity.LOW
        assert worst_severity(routes[0], S) is None
        assert worst_severity(routes[2], S) == ObstacleSeverity.BLOCKING
        assert worst_severity(routes[1], V) == ObstacleSeverity.MEDIUM


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
