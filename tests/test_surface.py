from camera.models import INITIAL_CAMERA
from dashboard.surface import DeckSurface


def test_deck_carries_layers_in_order_and_camera(state, make_service, payload):
    make_service(payload()).draw_route(state, "A", "Z")
    surface = DeckSurface()

    deck = surface.build_deck(INITIAL_CAMERA, state.layers())

    assert [layer.id for layer in deck.layers] == ["hex-layer", "route-layer", "point-layer"]
    assert deck.initial_view_state.zoom == INITIAL_CAMERA.zoom
    assert deck.initial_view_state.pitch == INITIAL_CAMERA.pitch


def test_empty_state_renders_an_empty_map():
    deck = DeckSurface().build_deck(INITIAL_CAMERA, [])
    assert deck.layers == []
