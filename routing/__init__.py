#Marks routing as a package.
#Re-exports clean public APIs (e.g., OSRMClient, RouteService, centroid_of)
#so other modules import from routing without knowing internal file names.
#No business logic.

from .osrm_client import OSRMClient, OSRMError
from .geometry import BoundingBox, bounding_box, centroid_of
from .models import RouteRequest, RouteResult, RouteStats
from .route_service import RouteService
from .errors import (
    RoutingEmptyResult,
    RoutingError,
    RoutingNetworkFailure,
    SelectionNotFound,
)

__all__ = [
           "OSRMClient",
           "OSRMError",
             "BoundingBox",
             "bounding_box",
             "centroid_of",
             "RouteRequest",
             "RouteResult",
             "RouteStats",
             "RouteService",
             "RoutingEmptyResult",
             "RoutingError",
             "RoutingNetworkFailure",
             "SelectionNotFound",
             ]
