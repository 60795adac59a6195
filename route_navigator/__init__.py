"""
Accessible Route Navigator

"""

__version__ = "1.0.0"
__license__ = "MIT"

from .catalog import Catalog, list_points_of_interest, rated_points_of_interest
from .engine import ColorBand, color_band, rank, suitability
from .errors import InvalidSelection, NavigatorError
from .models import AccessibilityProfile, PointOfInterest, Route
from .session import NavigationSession
from .synthesizer import path_distance, synthesize

__all__ = [
    "Catalog",
    "list_points_of_interest",
    "rated_points_of_interest",
    "ColorBand",
    "color_band",
    "rank",
    "suitability",
    "InvalidSelection",
    "NavigatorError",
    "AccessibilityProfile",
    "PointOfInterest",
    "Route",
    "NavigationSession",
    "path_distance",
    "synthesize"
]
