"""
Domain model for the Accessible Route Navigator.

Points of interest come from the static catalog. Obstacles, features and
routes are built fresh by the synthesizer and never mutated afterwards, so
every model here is frozen.
"""

from enum import Enum
from typing import FrozenSet, Mapping, Optional, Tuple
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator

from .config import DEFAULT_RATING


class AccessibilityProfile(str, Enum):
    WHEELCHAIR = "wheelchair"
    STROLLER = "stroller"
    VISUAL_IMPAIRMENT = "visual-impairment"
    HEARING_IMPAIRMENT = "hearing-impairment"


ALL_PROFILES = frozenset(AccessibilityProfile)


def ordered_profiles(profiles):
    """Profiles in declaration order, for stable serialization of sets."""
    return [p for p in AccessibilityProfile if p in profiles]


class PoiCategory(str, Enum):
    HISTORICAL_SITE = "historical-site"
    MUSEUM = "museum"
    MONUMENT = "monument"
    VIEWPOINT = "viewpoint"
    SQUARE = "square"
    WATERFRONT = "waterfront"


class ObstacleKind(str, Enum):
    STAIRS = "stairs"
    NARROW_PATH = "narrow-path"
    UNEVEN_SURFACE = "uneven-surface"
    STEEP_SLOPE = "steep-slope"
    CONSTRUCTION = "construction"
    NO_CROSSWALK = "no-crosswalk"
    CROWDED_AREA = "crowded-area"


class ObstacleSeverity(str, Enum):
    """Obstacle severity, ordered low < medium < high < blocking."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    BLOCKING = "blocking"

    @property
    def rank(self) -> int:
        return _SEVERITY_ORDER.index(self)

    def __lt__(self, other):
        if not isinstance(other, ObstacleSeverity):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, ObstacleSeverity):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, ObstacleSeverity):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, ObstacleSeverity):
            return NotImplemented
        return self.rank >= other.rank


_SEVERITY_ORDER = (
    ObstacleSeverity.LOW,
    ObstacleSeverity.MEDIUM,
    ObstacleSeverity.HIGH,
    ObstacleSeverity.BLOCKING,
)


class FeatureKind(str, Enum):
    RAMP = "ramp"
    ELEVATOR = "elevator"
    TACTILE_PAVING = "tactile-paving"
    AUDIO_GUIDE = "audio-guide"
    WIDE_PATH = "wide-path"
    REST_AREA = "rest-area"
    ACCESSIBLE_TOILET = "accessible-toilet"
    VISUAL_SIGNAGE = "visual-signage"
    SMOOTH_SURFACE = "smooth-surface"


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)


class PointOfInterest(BaseModel):
    """
    A catalog entry. Ratings are stored as (profile, rating) pairs in profile
    declaration order so the model stays immutable and hashable; a mapping is
    accepted on input and emitted on output.
    """

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    description: str
    coordinate: Coordinate
    category: PoiCategory
    ratings: Tuple[Tuple[AccessibilityProfile, float], ...] = ()
    features: FrozenSet[FeatureKind] = Field(default_factory=frozenset)

    @field_validator('ratings', mode='before')
    @classmethod
    def pair_ratings(cls, ratings):
        pairs = ratings.items() if isinstance(ratings, Mapping) else ratings
        by_profile = {AccessibilityProfile(profile): value for profile, value in pairs}
        return tuple((p, by_profile[p]) for p in AccessibilityProfile if p in by_profile)

    @field_validator('ratings')
    @classmethod
    def check_ratings_range(cls, ratings):
        for profile, value in ratings:
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"rating for {profile.value} must be within [0, 1], got {value}")
        return ratings

    @field_serializer('ratings')
    def serialize_ratings(self, ratings):
        return {profile.value: value for profile, value in ratings}

    @field_serializer('features')
    def serialize_features(self, features):
        return [kind for kind in FeatureKind if kind in features]

    def rating(self, profile: AccessibilityProfile) -> float:
        """Accessibility rating for a profile; unrated profiles get the neutral default."""
        for rated, value in self.ratings:
            if rated == profile:
                return value
        return DEFAULT_RATING


class Obstacle(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    kind: ObstacleKind
    location: Coordinate
    description: str
    severity: ObstacleSeverity
    affects: FrozenSet[AccessibilityProfile]
    alternative: Optional[str] = None

    @field_serializer('affects')
    def serialize_affects(self, affects):
        return ordered_profiles(affects)


class AccessibilityFeature(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: UUID
    kind: FeatureKind
    location: Coordinate
    description: str
    benefits: FrozenSet[AccessibilityProfile]

    @field_serializer('benefits')
    def serialize_benefits(self, benefits):
        return ordered_profiles(benefits)


class Route(BaseModel):
    """A candidate walking route between two points of interest."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    origin: PointOfInterest
    destination: PointOfInterest
    waypoints: Tuple[Coordinate, ...] = Field(min_length=2)
    distance_m: float = Field(ge=0.0)
    duration_min: int = Field(ge=0)
    accessibility_score: float = Field(ge=0.0, le=1.0)
    obstacles: Tuple[Obstacle, ...] = ()
    features: Tuple[AccessibilityFeature, ...] = ()
    recommended_for: FrozenSet[AccessibilityProfile] = frozenset()
    not_recommended_for: FrozenSet[AccessibilityProfile] = frozenset()

    @model_validator(mode='after')
    def check_consistency(self):
        if self.waypoints[0] != self.origin.coordinate:
            raise ValueError("first waypoint must be the origin's coordinate")
        if self.waypoints[-1] != self.destination.coordinate:
            raise ValueError("last waypoint must be the destination's coordinate")
        both = self.recommended_for & self.not_recommended_for
        if both:
            names = ', '.join(p.value for p in ordered_profiles(both))
            raise ValueError(f"profiles both recommended and not recommended: {names}")
        return self

    @field_serializer('recommended_for', 'not_recommended_for')
    def serialize_profiles(self, profiles):
        return ordered_profiles(profiles)
