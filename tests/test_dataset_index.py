import json

import pytest
import requests

from cells.errors import DatasetLoadFailure
from cells.index import DatasetIndex
from cells.loader import load_dataset, load_dataset_or_none
from cells.models import Dataset


def test_option_lists_are_deduplicated_and_sorted(dataset):
    index = DatasetIndex(dataset)
    assert index.origin_options == ["A", "B"]
    assert index.destination_options == ["X", "Y", "Z"]


def test_option_lists_are_memoized_per_index(dataset):
    index = DatasetIndex(dataset)
    assert index.origin_options is index.origin_options
    assert index.destination_options is index.destination_options


def test_missing_dataset_yields_empty_options_and_floor_max():
    index = DatasetIndex(None)
    assert not index.loaded
    assert index.features == ()
    assert index.origin_options == []
    assert index.destination_options == []
    assert index.max_visit_count == 1


def test_max_visit_count(dataset):
    assert DatasetIndex(dataset).max_visit_count == 40


def test_max_visit_count_floor_when_all_zero(hex_collection):
    for feature in hex_collection["features"]:
        feature["properties"]["EXTRAPOLATED_NUMBER_OF_USERS"] = 0
    assert DatasetIndex(Dataset.from_geojson(hex_collection)).max_visit_count == 1


def test_null_codes_are_left_out_of_options(hex_collection):
    hex_collection["features"][0]["properties"]["origin_code_level_9"] = None
    index = DatasetIndex(Dataset.from_geojson(hex_collection))
    assert index.origin_options == ["A"]


def test_find_returns_first_match(dataset):
    index = DatasetIndex(dataset)
    assert index.find_origin("A").destination_code == "Y"
    assert index.find_destination("Z").visit_count == 0
    assert index.find_origin("nope") is None
    assert index.find_destination("nope") is None


def test_load_dataset_from_file(tmp_path, hex_collection):
    path = tmp_path / "output.geojson"
    path.write_text(json.dumps(hex_collection))

    dataset = load_dataset(str(path))
    assert len(dataset) == 3
    assert dataset.features[0].co2_per_trip == 120.5


def test_load_dataset_rejects_non_feature_collection(tmp_path):
    path = tmp_path / "bad.geojson"
    path.write_text(json.dumps({"type": "Feature"}))

    with pytest.raises(DatasetLoadFailure):
        load_dataset(str(path))


def test_load_dataset_over_http(monkeypatch, hex_collection):
    class FakeResponse:
        def raise_for_status(self):
            pass

        def json(self):
            return hex_collection

    calls = []

    def fake_get(url, timeout=None):
        calls.append(url)
        return FakeResponse()

    monkeypatch.setattr(requests, "get", fake_get)

    dataset = load_dataset("https://example.org/output.geojson")
    assert calls == ["https://example.org/output.geojson"]
    assert len(dataset) == 3


def test_startup_load_failure_only_logs(tmp_path, caplog):
    missing = str(tmp_path / "missing.geojson")
    assert load_dataset_or_none(missing) is None
    assert "Dataset load failed" in caplog.text


@pytest.mark.parametrize("collection", [
    {"type": "FeatureCollection", "features": [None]},
    {"type": "FeatureCollection", "features": "cells"},
    {"type": "FeatureCollection"},
    {"type": "FeatureCollection", "features": [{"type": "Feature", "properties": ["not", "a", "dict"]}]},
])
def test_malformed_features_fail_to_load(tmp_path, collection):
    path = tmp_path / "bad.geojson"
    path.write_text(json.dumps(collection))

    with pytest.raises(DatasetLoadFailure):
        load_dataset(str(path))
    assert load_dataset_or_none(str(path)) is None
