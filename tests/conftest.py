import pytest

from camera.controller import CameraController
from cells.models import Dataset
from dashboard.state import AppState
from routing.route_service import RouteService


def square(west, south, size=2):
    """Closed square ring, centroid at (west + size/2, south + size/2)."""
    east, north = west + size, south + size
    return {
        "type": "Polygon",
        "coordinates": [[[west, south], [west, north], [east, north], [east, south], [west, south]]],
    }


def cell(geometry, origin, destination, users, co2):
    return {
        "type": "Feature",
        "geometry": geometry,
        "properties": {
            "origin_code_level_9": origin,
            "destination_code_level_9": destination,
            "EXTRAPOLATED_NUMBER_OF_USERS": users,
            "Single_CarTrip_Co2": co2,
        },
    }


class RecordingSurface:
    """Stands in for the render surface: records bounds-fits, zooms to 12."""
    def __init__(self):
        self.fits = []

    def fit_bounds(self, camera, box, padding):
        self.fits.append((box, padding))
        return camera.with_changes(longitude=box.center[0], latitude=box.center[1], zoom=12)


@pytest.fixture
def hex_collection():
    return {
        "type": "FeatureCollection",
        "features": [
            cell(square(0, 0), "B", "X", 10, 120.5),
            cell(square(10, 10), "A", "Y", 40, 300),
            cell(square(20, 0), "A", "Z", None, None),
        ],
    }


@pytest.fixture
def dataset(hex_collection):
    return Dataset.from_geojson(hex_collection)


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def state(dataset, surface):
    app_state = AppState(camera=CameraController(surface=surface))
    app_state.load_dataset(dataset)
    return app_state


def ok_payload(coordinates=None):
    coordinates = coordinates or [[11, 11], [15, 5], [21, 1]]
    return {"code": "Ok", "routes": [{"geometry": {"type": "LineString", "coordinates": coordinates}}]}


class MockOSRM:
    """Returns queued payloads (or raises queued errors) and records requests."""
    def __init__(self, *answers):
        self.answers = list(answers)
        self.calls = []

    def route_geometry(self, origin, destination):
        self.calls.append((origin, destination))
        answer = self.answers.pop(0)
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture
def make_service():
    def make(*answers):
        return RouteService(MockOSRM(*answers))
    return make


@pytest.fixture
def payload():
    return ok_payload
