from pydantic import BaseModel, Field
from typing import List, Optional

from .engine import ColorBand
from .models import AccessibilityProfile, PointOfInterest, Route


class ProfileSelection(BaseModel):
    profile: AccessibilityProfile


class PoiSelection(BaseModel):
    poi_id: str


class PoiView(BaseModel):
    poi: PointOfInterest
    rating: Optional[float] = Field(default=None)


class SessionCreated(BaseModel):
    session_id: str


class SessionState(BaseModel):
    session_id: str
    profile: Optional[AccessibilityProfile] = None
    origin: Optional[PointOfInterest] = None
    destination: Optional[PointOfInterest] = None
    route_count: int = Field(default=0)


class RouteView(BaseModel):
    route: Route
    color_band: ColorBand
    color_code: str
    suitable: bool
    distance_text: str
    summary: str


class RoutesResponse(BaseModel):
    profile: AccessibilityProfile
    routes: List[RouteView]
    recommended: Optional[str] = None
