"""
app.py

Streamlit entry point for the hex-cell route dashboard.

    streamlit run dashboard/app.py

Sidebar: cell toggle, route builder (origin / destination selectors, draw and
remove buttons), route info, camera controls. Main area: the pydeck map.

Known limitation: st.pydeck_chart does not report pan/zoom/rotate back to
Python, so CameraController.apply_gesture is never called from here. The map
is redrawn from state.camera on every rerun (any widget change), which snaps
the view back to the last camera button or route fit and drops manual pans.
"""

import logging

import streamlit as st

from cells.loader import load_dataset_or_none
from camera.controller import CameraController
from routing.errors import RoutingError, SelectionNotFound
from routing.osrm_client import OSRMClient
from routing.route_service import RouteService

from dashboard.settings import Settings, load_settings
from dashboard.state import AppState
from dashboard.surface import DeckSurface

logger = logging.getLogger(__name__)

MAP_HEIGHT = 700


@st.cache_resource(show_spinner=False)
def get_settings() -> Settings:
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return settings


@st.cache_resource(show_spinner=False)
def get_dataset(source: str):
    """Loaded once per process; the same Dataset object is returned on every rerun."""
    return load_dataset_or_none(source)


def get_state(surface: DeckSurface) -> AppState:
    if "app_state" not in st.session_state:
        st.session_state.app_state = AppState(camera=CameraController(surface=surface))
    return st.session_state.app_state


def render_route_builder(state: AppState, service: RouteService) -> None:
    st.header("ROUTE BUILDER")

    origin = st.selectbox(
        "ORIGIN:",
        [""] + state.index.origin_options,
        format_func=lambda v: v or "-- Select origin ID --",
    )
    destination = st.selectbox(
        "DESTINATION:",
        [""] + state.index.destination_options,
        format_func=lambda v: v or "-- Select destination ID --",
    )
    state.select_origin(origin)
    state.select_destination(destination)

    if st.button("DRAW STREET ROUTE", disabled=not state.can_draw_route(), use_container_width=True):
        try:
            with st.spinner("Requesting route..."):
                service.draw_route(state, state.selection.origin_id, state.selection.destination_id)
        except (SelectionNotFound, RoutingError) as e:
            st.error(str(e))

    if state.route is not None:
        if st.button("REMOVE ROUTE", use_container_width=True):
            service.remove_route(state)

    info = state.route_info()
    if info:
        st.subheader("ROUTE INFO")
        for label, value in info:
            st.markdown(f"**{label}:** {value}")


def render_camera_controls(state: AppState) -> None:
    st.subheader("CAMERA CONTROLS")
    left, right = st.columns(2)
    if left.button("FLAT", use_container_width=True):
        state.camera.set_flat()
    if right.button("ROTATE LEFT", use_container_width=True):
        state.camera.rotate_left()
    if left.button("ROTATE RIGHT", use_container_width=True):
        state.camera.rotate_right()
    if right.button("RESET", use_container_width=True):
        state.camera.reset()


def main() -> None:
    st.set_page_config(page_title="Hex Route Dashboard", layout="wide")

    settings = get_settings()
    surface = DeckSurface(height=MAP_HEIGHT)
    state = get_state(surface)
    state.load_dataset(get_dataset(settings.dataset_source))

    service = RouteService(
        OSRMClient(
            base_url=settings.osrm_base_url,
            profile=settings.osrm_profile,
            timeout=settings.osrm_timeout,
        ),
        fit_padding=settings.fit_padding,
    )

    with st.sidebar:
        show = st.checkbox("VISUALIZE MOST VISITED AREAS", value=state.show_cells)
        state.toggle_cells(show)
        st.divider()
        render_route_builder(state, service)
        st.divider()
        render_camera_controls(state)

    deck = surface.build_deck(state.camera.state, state.layers())
    st.pydeck_chart(deck, use_container_width=True, height=MAP_HEIGHT)


if __name__ == "__main__":
    main()
