"""
Route Synthesizer
=================

Builds the three candidate routes between two points of interest:

- Most Accessible Route: bows east of the straight line via one midpoint,
  ramps and rest areas along the way.
- Scenic Route: zig-zags through two midpoints, a few medium obstacles.
- Direct Historic Route: straight line, stairs and steep slopes.

Output depends only on origin and destination. The profile is accepted so
callers have one signature for every synthesizer, but it never changes the
geometry or the obstacle/feature fixtures; ranking is where the profile
matters.
"""

import logging
import uuid
from typing import List, Sequence

import numpy as np

from .config import (
    ACCESSIBLE_LON_BIAS, ACCESSIBLE_ROUTE, DIRECT_ROUTE, METERS_PER_DEGREE,
    SCENIC_DISTANCE_FACTOR, SCENIC_OFFSET, SCENIC_ROUTE
)
from .models import (
    ALL_PROFILES, AccessibilityFeature, AccessibilityProfile, Coordinate, FeatureKind,
    Obstacle, ObstacleKind, ObstacleSeverity, PointOfInterest, Route
)

logger = logging.getLogger(__name__)

ROUTE_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_URL, "route-navigator/route")

W = AccessibilityProfile.WHEELCHAIR
S = AccessibilityProfile.STROLLER
V = AccessibilityProfile.VISUAL_IMPAIRMENT
H = AccessibilityProfile.HEARING_IMPAIRMENT


def path_distance(waypoints: Sequence[Coordinate]) -> float:
    """
    Length of a waypoint path in meters.

    Sums the planar distance between consecutive points after scaling degree
    deltas by METERS_PER_DEGREE. This is not a great-circle distance: it
    ignores the shrinking of longitude degrees away from the equator, which
    is acceptable only for short walks within a single city.

    Args:
        waypoints: Ordered coordinates

    Returns:
        Distance in meters (0 for fewer than two points)
    """
    if len(waypoints) < 2:
        return 0.0

    coords = np.array([(w.latitude, w.longitude) for w in waypoints], dtype=float)
    deltas = np.diff(coords, axis=0)
    segments = np.sqrt(deltas[:, 0] * deltas[:, 0] + deltas[:, 1] * deltas[:, 1]) * METERS_PER_DEGREE

    return float(segments.sum())


def _midpoint(origin: PointOfInterest, destination: PointOfInterest):
    mid_lat = (origin.coordinate.latitude + destination.coordinate.latitude) / 2
    mid_lon = (origin.coordinate.longitude + destination.coordinate.longitude) / 2
    return mid_lat, mid_lon


def _coord(lat, lon) -> Coordinate:
    return Coordinate(latitude=lat, longitude=lon)


class _IdFactory:
    """Deterministic ids for one archetype of one origin/destination pair."""

    def __init__(self, origin: PointOfInterest, destination: PointOfInterest, archetype: str):
        self.prefix = f"{origin.id}/{destination.id}/{archetype}"

    def route(self) -> uuid.UUID:
        return uuid.uuid5(ROUTE_NAMESPACE, self.prefix)

    def item(self, kind: str, index: int) -> uuid.UUID:
        return uuid.uuid5(ROUTE_NAMESPACE, f"{self.prefix}/{kind}/{index}")


def accessible_route(origin: PointOfInterest, destination: PointOfInterest) -> Route:
    """Main roads, ramps and rest areas. Suitable for every profile."""
    ids = _IdFactory(origin, destination, "accessible")
    mid_lat, mid_lon = _midpoint(origin, destination)
    mid_lon = mid_lon + ACCESSIBLE_LON_BIAS

    waypoints = (origin.coordinate, _coord(mid_lat, mid_lon), destination.coordinate)

    obstacles = (
        Obstacle(
            id=ids.item("obstacle", 0),
            kind=ObstacleKind.CROWDED_AREA,
            location=_coord(mid_lat, mid_lon - 0.001),
            description="Busy pedestrian area near shops. May be crowded during peak hours.",
            severity=ObstacleSeverity.LOW,
            affects=frozenset({W, V}),
            alternative="Wait for less busy times or use parallel street",
        ),
    )

    features = (
        AccessibilityFeature(
            id=ids.item("feature", 0),
            kind=FeatureKind.RAMP,
            location=_coord(mid_lat + 0.0005, mid_lon),
            description="Modern ramp with handrails, compliant with accessibility standards.",
            benefits=frozenset({W, S}),
        ),
        AccessibilityFeature(
            id=ids.item("feature", 1),
            kind=FeatureKind.TACTILE_PAVING,
            location=_coord(mid_lat - 0.0005, mid_lon + 0.0003),
            description="Tactile paving at crosswalk with audio signal.",
            benefits=frozenset({V}),
        ),
        AccessibilityFeature(
            id=ids.item("feature", 2),
            kind=FeatureKind.REST_AREA,
            location=_coord(mid_lat, mid_lon + 0.0005),
            description="Benches and rest area with shade.",
            benefits=ALL_PROFILES,
        ),
        AccessibilityFeature(
            id=ids.item("feature", 3),
            kind=FeatureKind.SMOOTH_SURFACE,
            location=_coord(mid_lat + 0.0003, mid_lon - 0.0002),
            description="Well-maintained sidewalk with smooth surface.",
            benefits=frozenset({W, S, V}),
        ),
    )

    return Route(
        id=ids.route(),
        name=ACCESSIBLE_ROUTE['name'],
        origin=origin,
        destination=destination,
        waypoints=waypoints,
        distance_m=path_distance(waypoints),
        duration_min=ACCESSIBLE_ROUTE['duration_min'],
        accessibility_score=ACCESSIBLE_ROUTE['score'],
        obstacles=obstacles,
        features=features,
        recommended_for=ALL_PROFILES,
        not_recommended_for=frozenset(),
    )


def scenic_route(origin: PointOfInterest, destination: PointOfInterest) -> Route:
    """Partially accessible: cobblestones and a narrow sidewalk, both avoidable."""
    ids = _IdFactory(origin, destination, "scenic")
    mid_lat, mid_lon = _midpoint(origin, destination)
    lat1, lon1 = mid_lat - SCENIC_OFFSET, mid_lon
    lat2, lon2 = mid_lat + SCENIC_OFFSET, mid_lon + SCENIC_OFFSET

    waypoints = (origin.coordinate, _coord(lat1, lon1), _coord(lat2, lon2), destination.coordinate)

    obstacles = (
        Obstacle(
            id=ids.item("obstacle", 0),
            kind=ObstacleKind.UNEVEN_SURFACE,
            location=_coord(lat1, lon1),
            description="Cobblestone street section approximately 50 meters long.",
            severity=ObstacleSeverity.MEDIUM,
            affects=frozenset({W, S, V}),
            alternative="Alternative paved route available via Via Roma (adds 3 minutes)",
        ),
        Obstacle(
            id=ids.item("obstacle", 1),
            kind=ObstacleKind.NARROW_PATH,
            location=_coord(lat2, lon2),
            description="Narrow sidewalk (1.2m width) between buildings.",
            severity=ObstacleSeverity.MEDIUM,
            affects=frozenset({W, S}),
            alternative="Proceed slowly during off-peak hours",
        ),
    )

    features = (
        AccessibilityFeature(
            id=ids.item("feature", 0),
            kind=FeatureKind.VISUAL_SIGNAGE,
            location=_coord(lat1 + 0.0002, lon1),
            description="Clear directional signage with icons and multiple languages.",
            benefits=frozenset({V, H}),
        ),
        AccessibilityFeature(
            id=ids.item("feature", 1),
            kind=FeatureKind.WIDE_PATH,
            location=_coord(lat2 - 0.0003, lon2),
            description="Wide pedestrian area for most of the route.",
            benefits=frozenset({W, S}),
        ),
    )

    return Route(
        id=ids.route(),
        name=SCENIC_ROUTE['name'],
        origin=origin,
        destination=destination,
        waypoints=waypoints,
        distance_m=path_distance(waypoints) * SCENIC_DISTANCE_FACTOR,
        duration_min=SCENIC_ROUTE['duration_min'],
        accessibility_score=SCENIC_ROUTE['score'],
        obstacles=obstacles,
        features=features,
        recommended_for=frozenset({H, V}),
        not_recommended_for=frozenset(),
    )


def direct_route(origin: PointOfInterest, destination: PointOfInterest) -> Route:
    """Shortest path through the historic center, with stairs and steep slopes."""
    ids = _IdFactory(origin, destination, "direct")
    mid_lat, mid_lon = _midpoint(origin, destination)

    waypoints = (origin.coordinate, destination.coordinate)

    obstacles = (
        Obstacle(
            id=ids.item("obstacle", 0),
            kind=ObstacleKind.STAIRS,
            location=_coord(mid_lat, mid_lon),
            description="Stone staircase with 45 steps, no handrail. Historic section.",
            severity=ObstacleSeverity.BLOCKING,
            affects=frozenset({W, S}),
            alternative="Use elevator at nearby building (Palazzo Comunale) or take accessible route",
        ),
        Obstacle(
            id=ids.item("obstacle", 1),
            kind=ObstacleKind.STEEP_SLOPE,
            location=_coord(mid_lat + 0.0003, mid_lon + 0.0002),
            description="Steep uphill section (15% grade) for 80 meters.",
            severity=ObstacleSeverity.HIGH,
            affects=frozenset({W, S}),
            alternative="Take longer route via Via San Nicolò with gentle slope",
        ),
        Obstacle(
            id=ids.item("obstacle", 2),
            kind=ObstacleKind.UNEVEN_SURFACE,
            location=_coord(mid_lat - 0.0002, mid_lon - 0.0001),
            description="Historic cobblestone section, uneven and potentially slippery.",
            severity=ObstacleSeverity.HIGH,
            affects=frozenset({W, S, V}),
            alternative="Modern paved alternate route available",
        ),
    )

    features = (
        AccessibilityFeature(
            id=ids.item("feature", 0),
            kind=FeatureKind.AUDIO_GUIDE,
            location=_coord(mid_lat, mid_lon + 0.0005),
            description="Audio guide available describing historic route.",
            benefits=frozenset({V}),
        ),
    )

    return Route(
        id=ids.route(),
        name=DIRECT_ROUTE['name'],
        origin=origin,
        destination=destination,
        waypoints=waypoints,
        distance_m=path_distance(waypoints),
        duration_min=DIRECT_ROUTE['duration_min'],
        accessibility_score=DIRECT_ROUTE['score'],
        obstacles=obstacles,
        features=features,
        recommended_for=frozenset(),
        not_recommended_for=frozenset({W, S}),
    )


ARCHETYPES = (accessible_route, scenic_route, direct_route)


def synthesize(origin: PointOfInterest, destination: PointOfInterest,
               profile: AccessibilityProfile) -> List[Route]:
    """
    Build the candidate routes between two points of interest.

    Args:
        origin: Starting point
        destination: End point
        profile: Traveler profile (does not affect the candidates)

    Returns:
        Exactly three routes, in archetype order (not ranked)
    """
    logger.debug(f"Synthesizing routes {origin.name} -> {destination.name} for {profile.value}")

    return [build(origin, destination) for build in ARCHETYPES]
