import pytest

from cells.models import Dataset
from dashboard.settings import Settings, load_settings
from dashboard.state import AppState


def test_index_is_rebuilt_only_for_a_new_dataset(state, dataset, hex_collection):
    index = state.index
    assert state.load_dataset(dataset) is index

    other = Dataset.from_geojson(hex_collection)
    assert state.load_dataset(other) is not index


def test_selection_and_draw_guard():
    state = AppState()
    assert not state.can_draw_route()

    state.select_origin("A")
    state.select_destination("")
    assert state.selection.destination_id is None
    assert not state.can_draw_route()

    state.select_destination("Z")
    assert state.can_draw_route()


def test_toggle_cells_only_affects_choropleth(state, make_service, payload):
    make_service(payload()).draw_route(state, "A", "Z")
    assert [layer.id for layer in state.layers()] == ["hex-layer", "route-layer", "point-layer"]

    assert state.toggle_cells() is False
    assert [layer.id for layer in state.layers()] == ["route-layer", "point-layer"]

    state.toggle_cells(True)
    assert state.show_cells


def test_route_info_rows(state, make_service, payload):
    assert state.route_info() is None

    state.select_origin("B")
    state.select_destination("Y")
    make_service(payload()).draw_route(state, "B", "Y")

    info = dict(state.route_info())
    assert info["Origin"] == "B"
    assert info["Origin Centroid"] == "[1.00000, 1.00000]"
    assert info["Destination Centroid"] == "[11.00000, 11.00000]"
    assert info["CO₂ (1 Car Trip)"] == "300 g"
    assert info["Number of Visits to Destination Hex."] == "40"


def test_route_info_missing_stats(state, make_service, payload):
    make_service(payload()).draw_route(state, "A", "Z")
    info = dict(state.route_info())
    assert info["CO₂ (1 Car Trip)"] == "N/A"
    assert info["Number of Visits to Destination Hex."] == "0"


def test_load_settings_from_environment(monkeypatch):
    monkeypatch.setenv("OSRM_BASE_URL", "http://localhost:5000")
    monkeypatch.setenv("OSRM_TIMEOUT", "")
    monkeypatch.setenv("FIT_PADDING", "60")

    settings = load_settings()
    assert settings.osrm_base_url == "http://localhost:5000"
    assert settings.osrm_timeout is None
    assert settings.fit_padding == 60


def test_settings_validation():
    with pytest.raises(ValueError):
        Settings(osrm_base_url="").validate()
    with pytest.raises(ValueError):
        Settings(fit_padding=-1).validate()


def test_route_info_shows_whole_float_stats_without_decimals(hex_collection, make_service, payload):
    props = hex_collection["features"][1]["properties"]
    props["EXTRAPOLATED_NUMBER_OF_USERS"] = 40.0
    props["Single_CarTrip_Co2"] = 300.0
    state = AppState()
    state.load_dataset(Dataset.from_geojson(hex_collection))

    make_service(payload()).draw_route(state, "B", "Y")

    info = dict(state.route_info())
    assert info["Number of Visits to Destination Hex."] == "40"
    assert info["CO₂ (1 Car Trip)"] == "300 g"


def test_route_info_keeps_fractional_stats(state, make_service, payload):
    make_service(payload()).draw_route(state, "B", "X")
    assert dict(state.route_info())["CO₂ (1 Car Trip)"] == "120.5 g"
