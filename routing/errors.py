"""
Purpose: User-facing failures of the route orchestrator.
Every exception message is shown to the user as-is.
"""


class SelectionNotFound(Exception):
    """Origin or destination id does not resolve to a loaded cell."""
    pass


class RoutingError(Exception):
    """Base class for failures talking to the routing service."""
    pass


class RoutingNetworkFailure(RoutingError):
    """Network failure or malformed routing response. The drawn route is kept."""
    pass


class RoutingEmptyResult(RoutingError):
    """The routing service answered with zero routes. The drawn route is cleared."""
    pass
