"""Navigation session: the selections of one user and the routes computed for them."""

import logging
from typing import Optional, Tuple

from .engine import rank, suitability
from .errors import InvalidSelection
from .models import AccessibilityProfile, PointOfInterest, Route
from .synthesizer import synthesize

logger = logging.getLogger(__name__)


class NavigationSession:
    """
    Holds the selected profile, origin and destination and the last ranked
    route set.

    Not thread-safe; one session belongs to one caller.
    """

    def __init__(self, synthesizer=synthesize, ranker=rank):
        self.synthesizer = synthesizer
        self.ranker = ranker

        self.profile: Optional[AccessibilityProfile] = None
        self.origin: Optional[PointOfInterest] = None
        self.destination: Optional[PointOfInterest] = None
        self.routes: Tuple[Route, ...] = ()

    def select_profile(self, profile: AccessibilityProfile):
        self.profile = profile

    def select_origin(self, poi: PointOfInterest):
        self.origin = poi

    def select_destination(self, poi: PointOfInterest):
        self.destination = poi

    def select_point(self, poi: PointOfInterest):
        """
        Apply a map tap: the first tap picks the origin, the next tap on a
        different point picks the destination, and any further tap starts
        over from that point as the new origin.
        """
        if self.origin is None:
            self.origin = poi
        elif self.destination is None and poi.id != self.origin.id:
            self.destination = poi
        else:
            self.origin = poi
            self.destination = None
            self.routes = ()

    def compute_routes(self, origin: Optional[PointOfInterest], destination: Optional[PointOfInterest],
                       profile: Optional[AccessibilityProfile]) -> Tuple[Route, ...]:
        """
        Synthesize and rank routes, then store the new selections and routes.

        Raises:
            InvalidSelection: if origin, destination or profile is missing.
                Session state is left untouched.
        """
        missing = [
            name for name, value in (("origin", origin), ("destination", destination), ("profile", profile))
            if value is None
        ]
        if missing:
            logger.warning(f"Route request rejected, missing: {', '.join(missing)}")
            raise InvalidSelection(missing)

        routes = tuple(self.ranker(self.synthesizer(origin, destination, profile)))

        self.origin = origin
        self.destination = destination
        self.profile = profile
        self.routes = routes

        logger.info(f"Computed {len(routes)} routes {origin.name} -> {destination.name} for {profile.value}")
        return routes

    def request_routes(self) -> Tuple[Route, ...]:
        return self.compute_routes(self.origin, self.destination, self.profile)

    def route_suitability(self, route: Route) -> bool:
        if self.profile is None:
            raise InvalidSelection(["profile"])
        return suitability(route, self.profile)

    def reset(self):
        self.profile = None
        self.origin = None
        self.destination = None
        self.routes = ()
        logger.info("Navigation session reset")
