import logging

from cells.loader import load_dataset
from dashboard.settings import load_settings
from dashboard.state import AppState
from dashboard.surface import DeckSurface
from camera.controller import CameraController
from routing.errors import RoutingError, SelectionNotFound
from routing.osrm_client import OSRMClient
from routing.route_service import RouteService


def main():
    settings = load_settings()
    logging.basicConfig(level=settings.log_level)

    state = AppState(camera=CameraController(surface=DeckSurface()))
    state.load_dataset(load_dataset(settings.dataset_source))

    origins = state.index.origin_options
    destinations = state.index.destination_options
    print(f"\nLoaded {len(state.index.features)} cells "
          f"({len(origins)} origins, {len(destinations)} destinations)\n")

    if not origins or not destinations:
        print("Nothing to route.")
        return

    osrm = OSRMClient(base_url=settings.osrm_base_url, profile=settings.osrm_profile, timeout=10)
    service = RouteService(osrm, fit_padding=settings.fit_padding)

    state.select_origin(origins[0])
    state.select_destination(destinations[-1])

    try:
        service.draw_route(state, state.selection.origin_id, state.selection.destination_id)
    except (SelectionNotFound, RoutingError) as e:
        print(f"Failed: {e}")
        return

    for label, value in state.route_info():
        print(f"{label}: {value}")

    camera = state.camera.state
    print(
        f"\nRoute points: {len(state.route.coordinates)} | "
        f"camera {camera.latitude:.5f}, {camera.longitude:.5f} @ zoom {camera.zoom:.2f}"
    )
    print(f"Layers: {', '.join(layer.id for layer in state.layers())}")

if __name__ == "__main__":
    main()
