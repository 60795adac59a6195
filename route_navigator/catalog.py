"""
Static catalog of points of interest in Trieste.

The catalog is loaded once at import time and never mutated. IDs are derived
from the point's name so they are stable across processes.
"""

import logging
import uuid
from typing import List, Optional, Sequence

from .errors import UnknownPointOfInterest
from .models import AccessibilityProfile, Coordinate, FeatureKind, PoiCategory, PointOfInterest

logger = logging.getLogger(__name__)

POI_NAMESPACE = uuid.uuid5(uuid.NAMESPACE_URL, "route-navigator/poi")

W = AccessibilityProfile.WHEELCHAIR
S = AccessibilityProfile.STROLLER
V = AccessibilityProfile.VISUAL_IMPAIRMENT
H = AccessibilityProfile.HEARING_IMPAIRMENT


def make_poi(name, description, latitude, longitude, category, ratings, features) -> PointOfInterest:
    return PointOfInterest(
        id=uuid.uuid5(POI_NAMESPACE, name),
        name=name,
        description=description,
        coordinate=Coordinate(latitude=latitude, longitude=longitude),
        category=category,
        ratings=ratings,
        features=frozenset(features),
    )


TRIESTE_POIS = (
    make_poi(
        "Piazza Unità d'Italia",
        "The largest sea-facing square in Europe, surrounded by elegant buildings.",
        45.6467, 13.7628,
        PoiCategory.SQUARE,
        {W: 0.95, S: 0.95, V: 0.85, H: 0.90},
        [FeatureKind.SMOOTH_SURFACE, FeatureKind.WIDE_PATH, FeatureKind.REST_AREA,
         FeatureKind.ACCESSIBLE_TOILET, FeatureKind.VISUAL_SIGNAGE],
    ),
    make_poi(
        "Castello di San Giusto",
        "Historic castle and fortress with panoramic views of Trieste.",
        45.6478, 13.7700,
        PoiCategory.HISTORICAL_SITE,
        {W: 0.40, S: 0.45, V: 0.60, H: 0.80},
        [FeatureKind.AUDIO_GUIDE, FeatureKind.REST_AREA, FeatureKind.VISUAL_SIGNAGE],
    ),
    make_poi(
        "Teatro Romano",
        "Ancient Roman theater dating back to the 1st century AD.",
        45.6485, 13.7656,
        PoiCategory.HISTORICAL_SITE,
        {W: 0.50, S: 0.55, V: 0.70, H: 0.85},
        [FeatureKind.VISUAL_SIGNAGE, FeatureKind.AUDIO_GUIDE],
    ),
    make_poi(
        "Molo Audace",
        "Historic pier extending into the Adriatic Sea, perfect for walks.",
        45.6478, 13.7640,
        PoiCategory.WATERFRONT,
        {W: 0.90, S: 0.90, V: 0.75, H: 0.95},
        [FeatureKind.SMOOTH_SURFACE, FeatureKind.WIDE_PATH, FeatureKind.REST_AREA,
         FeatureKind.TACTILE_PAVING],
    ),
    make_poi(
        "Canal Grande",
        "Picturesque canal in the heart of Trieste's historic center.",
        45.6495, 13.7655,
        PoiCategory.WATERFRONT,
        {W: 0.85, S: 0.85, V: 0.80, H: 0.90},
        [FeatureKind.SMOOTH_SURFACE, FeatureKind.WIDE_PATH, FeatureKind.VISUAL_SIGNAGE,
         FeatureKind.TACTILE_PAVING],
    ),
    make_poi(
        "Museo Revoltella",
        "Modern art gallery housed in a 19th-century palace.",
        45.6482, 13.7625,
        PoiCategory.MUSEUM,
        {W: 0.75, S: 0.70, V: 0.80, H: 0.85},
        [FeatureKind.ELEVATOR, FeatureKind.ACCESSIBLE_TOILET, FeatureKind.AUDIO_GUIDE,
         FeatureKind.VISUAL_SIGNAGE, FeatureKind.REST_AREA],
    ),
)


class Catalog:
    """Read-only provider of the known points of interest."""

    def __init__(self, pois: Optional[Sequence[PointOfInterest]] = None):
        self._pois = tuple(TRIESTE_POIS if pois is None else pois)
        self._by_id = {str(poi.id): poi for poi in self._pois}
        logger.debug(f"Catalog loaded with {len(self._pois)} points of interest")

    def list_points_of_interest(self) -> List[PointOfInterest]:
        return list(self._pois)

    def rated_points_of_interest(self, profile: AccessibilityProfile) -> List[PointOfInterest]:
        """
        Points of interest by descending rating for a profile.

        sorted() is stable, so equally rated points keep catalog order.
        """
        return sorted(self._pois, key=lambda poi: poi.rating(profile), reverse=True)

    def find_point_of_interest(self, poi_id) -> PointOfInterest:
        try:
            return self._by_id[str(poi_id)]
        except KeyError:
            raise UnknownPointOfInterest(poi_id) from None


DEFAULT_CATALOG = Catalog()


def list_points_of_interest() -> List[PointOfInterest]:
    return DEFAULT_CATALOG.list_points_of_interest()


def rated_points_of_interest(profile: AccessibilityProfile) -> List[PointOfInterest]:
    return DEFAULT_CATALOG.rated_points_of_interest(profile)
