import logging
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from .catalog import DEFAULT_CATALOG, Catalog
from .config import API_TITLE, API_VERSION, configure_logging
from .engine import color_band, suitability
from .errors import InvalidSelection, UnknownPointOfInterest, UnknownSession
from .labels import BAND_COLORS, format_distance, route_summary
from .models import AccessibilityProfile
from .schemas import (
    PoiSelection, PoiView, ProfileSelection, RoutesResponse, RouteView, SessionCreated, SessionState
)
from .session import NavigationSession

logger = logging.getLogger(__name__)


def _get_session(request: Request, session_id: str) -> NavigationSession:
    try:
        return request.app.state.sessions[session_id]
    except KeyError:
        raise UnknownSession(session_id) from None


def _session_state(session_id: str, session: NavigationSession) -> SessionState:
    return SessionState(
        session_id=session_id,
        profile=session.profile,
        origin=session.origin,
        destination=session.destination,
        route_count=len(session.routes),
    )


def _routes_response(session: NavigationSession) -> RoutesResponse:
    profile = session.profile
    views = []
    for route in session.routes:
        band = color_band(route.accessibility_score)
        views.append(RouteView(
            route=route,
            color_band=band,
            color_code=BAND_COLORS[band],
            suitable=suitability(route, profile),
            distance_text=format_distance(route.distance_m),
            summary=route_summary(route),
        ))

    recommended = next((view.route.name for view in views if view.suitable), None)
    return RoutesResponse(profile=profile, routes=views, recommended=recommended)


def create_app(catalog: Optional[Catalog] = None) -> FastAPI:
    """
    Build the HTTP bridge used by presentation clients.

    Each client creates its own navigation session; sessions live in
    app.state and are never shared between clients. Logging is configured
    when the server starts, not when the module is imported.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging()
        logger.info("Navigator API starting")
        yield
        # Drop every open session on shutdown
        app.state.sessions.clear()
        logger.info("Navigator API shut down")

    app = FastAPI(title=API_TITLE, version=API_VERSION, lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"]
    )

    app.state.catalog = catalog if catalog is not None else DEFAULT_CATALOG
    app.state.sessions = {}

    @app.get("/health")
    def health():
        return {"status": "ok", "version": API_VERSION}

    @app.get("/pois")
    def list_pois(request: Request, profile: Optional[AccessibilityProfile] = None):
        catalog = request.app.state.catalog
        if profile is None:
            return [PoiView(poi=poi) for poi in catalog.list_points_of_interest()]
        return [
            PoiView(poi=poi, rating=poi.rating(profile))
            for poi in catalog.rated_points_of_interest(profile)
        ]

    @app.post("/sessions", response_model=SessionCreated)
    def create_session(request: Request):
        session_id = str(uuid.uuid4())
        request.app.state.sessions[session_id] = NavigationSession()
        logger.info(f"Created navigation session {session_id}")
        return SessionCreated(session_id=session_id)

    @app.get("/sessions/{session_id}", response_model=SessionState)
    def get_session(session_id: str, request: Request):
        try:
            session = _get_session(request, session_id)
        except UnknownSession as e:
            raise HTTPException(status_code=404, detail=str(e))
        return _session_state(session_id, session)

    @app.put("/sessions/{session_id}/profile", response_model=SessionState)
    def select_profile(session_id: str, selection: ProfileSelection, request: Request):
        try:
            session = _get_session(request, session_id)
        except UnknownSession as e:
            raise HTTPException(status_code=404, detail=str(e))
        session.select_profile(selection.profile)
        return _session_state(session_id, session)

    @app.put("/sessions/{session_id}/origin", response_model=SessionState)
    def select_origin(session_id: str, selection: PoiSelection, request: Request):
        try:
            session = _get_session(request, session_id)
            poi = request.app.state.catalog.find_point_of_interest(selection.poi_id)
        except (UnknownSession, UnknownPointOfInterest) as e:
            raise HTTPException(status_code=404, detail=str(e))
        session.select_origin(poi)
        return _session_state(session_id, session)

    @app.put("/sessions/{session_id}/destination", response_model=SessionState)
    def select_destination(session_id: str, selection: PoiSelection, request: Request):
        try:
            session = _get_session(request, session_id)
            poi = request.app.state.catalog.find_point_of_interest(selection.poi_id)
        except (UnknownSession, UnknownPointOfInterest) as e:
            raise HTTPException(status_code=404, detail=str(e))
        session.select_destination(poi)
        return _session_state(session_id, session)

    @app.post("/sessions/{session_id}/taps", response_model=SessionState)
    def tap_point(session_id: str, selection: PoiSelection, request: Request):
        try:
            session = _get_session(request, session_id)
            poi = request.app.state.catalog.find_point_of_interest(selection.poi_id)
        except (UnknownSession, UnknownPointOfInterest) as e:
            raise HTTPException(status_code=404, detail=str(e))
        session.select_point(poi)
        return _session_state(session_id, session)

    @app.post("/sessions/{session_id}/routes", response_model=RoutesResponse)
    def request_routes(session_id: str, request: Request):
        try:
            session = _get_session(request, session_id)
        except UnknownSession as e:
            raise HTTPException(status_code=404, detail=str(e))
        try:
            session.request_routes()
        except InvalidSelection as e:
            raise HTTPException(status_code=409, detail=str(e))
        return _routes_response(session)

    @app.post("/sessions/{session_id}/reset", response_model=SessionState)
    def reset_session(session_id: str, request: Request):
        try:
            session = _get_session(request, session_id)
        except UnknownSession as e:
            raise HTTPException(status_code=404, detail=str(e))
        session.reset()
        return _session_state(session_id, session)

    @app.delete("/sessions/{session_id}", status_code=204)
    def delete_session(session_id: str, request: Request):
        session = request.app.state.sessions.pop(session_id, None)
        if session is None:
            raise HTTPException(status_code=404, detail=str(UnknownSession(session_id)))
        session.reset()
        logger.info(f"Closed navigation session {session_id}")
        return Response(status_code=204)

    return app


app = create_app()
