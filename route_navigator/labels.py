"""
Presentation metadata for the domain variants.

The domain models carry no display concerns; clients look up names, icons,
colours and spoken labels here.
"""

from typing import Tuple

from .engine import ColorBand, color_band, suitability
from .models import (
    AccessibilityProfile, FeatureKind, ObstacleKind, ObstacleSeverity, PoiCategory,
    PointOfInterest, Route
)

PROFILE_LABELS = {
    AccessibilityProfile.WHEELCHAIR: "Wheelchair User",
    AccessibilityProfile.STROLLER: "Stroller",
    AccessibilityProfile.VISUAL_IMPAIRMENT: "Visual Impairment",
    AccessibilityProfile.HEARING_IMPAIRMENT: "Hearing Impairment",
}

PROFILE_ICONS = {
    AccessibilityProfile.WHEELCHAIR: "figure.roll",
    AccessibilityProfile.STROLLER: "figure.and.child.holdinghands",
    AccessibilityProfile.VISUAL_IMPAIRMENT: "eye.slash",
    AccessibilityProfile.HEARING_IMPAIRMENT: "ear.badge.waveform",
}

PROFILE_DESCRIPTIONS = {
    AccessibilityProfile.WHEELCHAIR:
        "Routes without stairs, with ramps and elevators. Wide paths suitable for wheelchair access.",
    AccessibilityProfile.STROLLER:
        "Step-free routes with smooth surfaces. Accessible paths for parents with strollers.",
    AccessibilityProfile.VISUAL_IMPAIRMENT:
        "Routes with tactile paving, audio guides, and clear signage. Safe pedestrian crossings.",
    AccessibilityProfile.HEARING_IMPAIRMENT:
        "Visual information displays, clear signage, and accessible communication points.",
}

PROFILE_COLORS = {
    AccessibilityProfile.WHEELCHAIR: "blue",
    AccessibilityProfile.STROLLER: "green",
    AccessibilityProfile.VISUAL_IMPAIRMENT: "purple",
    AccessibilityProfile.HEARING_IMPAIRMENT: "orange",
}

CATEGORY_LABELS = {
    PoiCategory.HISTORICAL_SITE: ("Historical Site", "building.columns"),
    PoiCategory.MUSEUM: ("Museum", "building.2"),
    PoiCategory.MONUMENT: ("Monument", "landmark"),
    PoiCategory.VIEWPOINT: ("Viewpoint", "eye"),
    PoiCategory.SQUARE: ("Square", "square.grid.3x3"),
    PoiCategory.WATERFRONT: ("Waterfront", "water.waves"),
}

OBSTACLE_LABELS = {
    ObstacleKind.STAIRS: ("Stairs", "figure.stairs"),
    ObstacleKind.NARROW_PATH: ("Narrow Path", "arrow.left.arrow.right.square"),
    ObstacleKind.UNEVEN_SURFACE: ("Uneven Surface", "water.waves"),
    ObstacleKind.STEEP_SLOPE: ("Steep Slope", "mountain.2"),
    ObstacleKind.CONSTRUCTION: ("Construction", "cone"),
    ObstacleKind.NO_CROSSWALK: ("No Crosswalk", "figure.walk.diamond"),
    ObstacleKind.CROWDED_AREA: ("Crowded Area", "person.3"),
}

# (label, icon, colour)
SEVERITY_LABELS = {
    ObstacleSeverity.LOW: ("Low", "exclamationmark.circle", "yellow"),
    ObstacleSeverity.MEDIUM: ("Medium", "exclamationmark.triangle", "orange"),
    ObstacleSeverity.HIGH: ("High", "exclamationmark.triangle.fill", "red"),
    ObstacleSeverity.BLOCKING: ("Blocking", "xmark.octagon.fill", "red"),
}

FEATURE_LABELS = {
    FeatureKind.RAMP: ("Ramp", "arrow.up.right"),
    FeatureKind.ELEVATOR: ("Elevator", "arrow.up.arrow.down"),
    FeatureKind.TACTILE_PAVING: ("Tactile Paving", "grid"),
    FeatureKind.AUDIO_GUIDE: ("Audio Guide", "speaker.wave.2"),
    FeatureKind.WIDE_PATH: ("Wide Path", "arrow.left.and.right"),
    FeatureKind.REST_AREA: ("Rest Area", "chair"),
    FeatureKind.ACCESSIBLE_TOILET: ("Accessible Toilet", "toilet"),
    FeatureKind.VISUAL_SIGNAGE: ("Visual Signage", "signpost.right"),
    FeatureKind.SMOOTH_SURFACE: ("Smooth Surface", "road.lanes"),
}

BAND_COLORS = {
    ColorBand.ACCESSIBLE: "green",
    ColorBand.CAUTION: "yellow",
    ColorBand.POOR: "red",
}


def format_distance(distance_m: float) -> str:
    """
    Format distance for display.

    Args:
        distance_m: Distance in meters

    Returns:
        Formatted string, kilometers from 1000 m upwards
    """
    if distance_m >= 1000:
        return f"{distance_m / 1000:.1f} km"
    else:
        return f"{distance_m:.0f} m"


def route_color(route: Route) -> str:
    return BAND_COLORS[color_band(route.accessibility_score)]


def route_summary(route: Route) -> str:
    """Spoken summary of a route for screen readers."""
    return (
        f"Route: {route.name}. From {route.origin.name} to {route.destination.name}. "
        f"Accessibility score: {int(route.accessibility_score * 100)}%. "
        f"Distance: {format_distance(route.distance_m)}. "
        f"Estimated time: {route.duration_min} minutes. "
        f"{len(route.obstacles)} obstacles"
    )


def suitability_message(route: Route, profile: AccessibilityProfile) -> Tuple[str, str]:
    """Title and body of the suitability card for a route and profile."""
    name = PROFILE_LABELS[profile]
    if suitability(route, profile):
        return (
            f"Recommended for {name}",
            "This route has good accessibility features for your profile.",
        )
    return (
        f"Not Recommended for {name}",
        "This route may have significant obstacles for your profile. Consider an alternative route.",
    )


def poi_label(poi: PointOfInterest, profile: AccessibilityProfile) -> str:
    return f"{poi.name}. Accessibility rating: {int(poi.rating(profile) * 100)}%"
