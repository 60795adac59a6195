"""
Scoring & Ranking Engine.

Scores are fixed per route archetype at synthesis time; this module orders
routes and answers per-profile questions about them.
"""

from enum import Enum
from typing import List, Optional, Sequence

from .config import ACCESSIBLE_THRESHOLD, CAUTION_THRESHOLD
from .models import AccessibilityFeature, AccessibilityProfile, Obstacle, ObstacleSeverity, Route


class ColorBand(str, Enum):
    ACCESSIBLE = "accessible"
    CAUTION = "caution"
    POOR = "poor"


def rank(routes: Sequence[Route]) -> List[Route]:
    """Routes by descending accessibility score; equal scores keep input order."""
    return sorted(routes, key=lambda route: route.accessibility_score, reverse=True)


def suitability(route: Route, profile: AccessibilityProfile) -> bool:
    return profile in route.recommended_for and profile not in route.not_recommended_for


def color_band(score: float) -> ColorBand:
    if score >= ACCESSIBLE_THRESHOLD:
        return ColorBand.ACCESSIBLE
    elif score >= CAUTION_THRESHOLD:
        return ColorBand.CAUTION
    else:
        return ColorBand.POOR


def obstacles_affecting(route: Route, profile: AccessibilityProfile) -> List[Obstacle]:
    """Obstacles that affect a profile, worst first (route order among equals)."""
    affecting = [obstacle for obstacle in route.obstacles if profile in obstacle.affects]
    return sorted(affecting, key=lambda obstacle: obstacle.severity.rank, reverse=True)


def features_benefiting(route: Route, profile: AccessibilityProfile) -> List[AccessibilityFeature]:
    return [feature for feature in route.features if profile in feature.benefits]


def worst_severity(route: Route, profile: AccessibilityProfile) -> Optional[ObstacleSeverity]:
    severities = [obstacle.severity for obstacle in route.obstacles if profile in obstacle.affects]
    if not severities:
        return None
    return max(severities)
