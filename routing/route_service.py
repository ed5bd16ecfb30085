"""
Purpose: Route orchestrator (the "glue" between a selection and the map).
What it does:
Given origin/destination ids, resolves their cells, computes centroids,
calls OSRM once, stores the route and asks the camera to fit its extent.

Failure policy:
- unknown id            -> SelectionNotFound, nothing mutated
- network / bad payload -> RoutingNetworkFailure, drawn route kept
- zero routes           -> RoutingEmptyResult, drawn route cleared

Every call bumps state.route_generation; an OSRM answer is applied only if
its request still carries the current generation, so a slow answer can never
overwrite a newer route or bring back a removed one.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional

from .errors import RoutingEmptyResult, RoutingNetworkFailure, SelectionNotFound
from .geometry import bounding_box, centroid_of
from .models import RouteRequest, RouteResult, RouteStats
from .osrm_client import OSRMClient, OSRMError

if TYPE_CHECKING:
    from dashboard.state import AppState

logger = logging.getLogger(__name__)

DEFAULT_FIT_PADDING = 40  # pixels around the route when framing it


def _is_position(value: Any) -> bool:
    """A [lng, lat, ...] pair of plain numbers."""
    if not isinstance(value, (list, tuple)) or len(value) < 2:
        return False
    return all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in value[:2])


def _first_route_geometry(payload: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """
    Returns the first route's LineString geometry, None for an empty answer.
    Raises RoutingNetworkFailure when the payload is not shaped like OSRM's.
    """
    routes = payload.get("routes") if isinstance(payload, dict) else None
    if not isinstance(routes, list):
        raise RoutingNetworkFailure("Routing request failed")
    if not routes:
        return None

    geometry = routes[0].get("geometry") if isinstance(routes[0], dict) else None
    coordinates = geometry.get("coordinates") if isinstance(geometry, dict) else None
    if not isinstance(coordinates, list) or not coordinates:
        raise RoutingNetworkFailure("Routing request failed")
    if not all(_is_position(c) for c in coordinates):
        raise RoutingNetworkFailure("Routing request failed")
    return geometry


class RouteService:
    """
    Coordinates selection -> centroids -> OSRM -> route + camera fit.
    The OSRM client is injected so tests can pass a mock.
    """
    def __init__(self, osrm_client: OSRMClient, fit_padding: int = DEFAULT_FIT_PADDING):
        self.osrm_client = osrm_client
        self.fit_padding = fit_padding

    def begin_route(self, state: AppState, origin_id: str, destination_id: str) -> RouteRequest:
        """
        Resolve both ids, store centroids and destination stats, and open a
        new generation. Raises SelectionNotFound without touching state.
        """
        if not state.index.loaded or not origin_id or not destination_id:
            raise SelectionNotFound("Origin or destination ID not found.")

        origin_feature = state.index.find_origin(origin_id)
        destination_feature = state.index.find_destination(destination_id)
        if origin_feature is None or destination_feature is None:
            raise SelectionNotFound("Origin or destination ID not found.")

        origin = centroid_of(origin_feature.geometry)
        destination = centroid_of(destination_feature.geometry)

        state.origin_centroid = origin
        state.destination_centroid = destination
        state.stats = RouteStats(
            co2=destination_feature.co2_per_trip,
            visits=destination_feature.visit_count,
        )
        state.route_generation += 1

        return RouteRequest(
            generation=state.route_generation,
            origin_id=origin_id,
            destination_id=destination_id,
            origin=origin,
            destination=destination,
        )

    def is_current(self, state: AppState, request: RouteRequest) -> bool:
        return request.generation == state.route_generation

    def complete_route(self, state: AppState, request: RouteRequest, payload: Dict[str, Any]) -> bool:
        """
        Apply an OSRM payload. Returns False when the request is stale and the
        payload was discarded, True when a route was drawn.
        """
        if not self.is_current(state, request):
            logger.warning(
                f"Discarding stale route {request.origin_id} -> {request.destination_id} "
                f"(generation {request.generation}, current {state.route_generation})"
            )
            return False

        geometry = _first_route_geometry(payload)
        if geometry is None:
            state.route = None
            raise RoutingEmptyResult("No route returned by OSRM")

        route = RouteResult.from_geometry(geometry)
        box = bounding_box(route.coordinates)
        state.route = route
        state.camera.fit_bounds(box, self.fit_padding)

        logger.info(
            f"Drew route {request.origin_id} -> {request.destination_id} "
            f"with {len(state.route.coordinates)} points"
        )
        return True

    def draw_route(self, state: AppState, origin_id: str, destination_id: str) -> Optional[RouteResult]:
        """
        One-call entry point: resolve, fetch and apply.
        Returns the drawn RouteResult, or None when the answer went stale.
        """
        request = self.begin_route(state, origin_id, destination_id)

        try:
            payload = self.osrm_client.route_geometry(request.origin, request.destination)
        except OSRMError as e:
            if not self.is_current(state, request):
                logger.warning(f"Ignoring failure of stale route request: {e}")
                return None
            logger.error(f"Routing request failed: {e}")
            raise RoutingNetworkFailure("Routing request failed") from e

        if not self.complete_route(state, request, payload):
            return None
        return state.route

    def remove_route(self, state: AppState) -> None:
        """
        Clear route, centroids and stats. Idempotent; also invalidates any
        request still in flight.
        """
        state.route = None
        state.origin_centroid = None
        state.destination_centroid = None
        state.stats = RouteStats()
        state.route_generation += 1
