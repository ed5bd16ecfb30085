"""
Purpose: Fetch the precomputed cell geojson once at startup.
What it does:
- Accepts an http(s) URL (fetched with requests) or a local file path
- Parses the feature collection into a Dataset
- load_dataset raises DatasetLoadFailure; load_dataset_or_none only logs,
  leaving the dashboard usable with an empty map
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import requests

from .errors import DatasetLoadFailure
from .models import Dataset

logger = logging.getLogger(__name__)


def _is_url(source: str) -> bool:
    return source.startswith("http://") or source.startswith("https://")


def _read_collection(source: str, timeout: Optional[float]) -> Dict[str, Any]:
    if _is_url(source):
        response = requests.get(source, timeout=timeout)
        response.raise_for_status()
        return response.json()

    with open(Path(source), "r", encoding="utf-8") as f:
        return json.load(f)


def load_dataset(source: str, timeout: Optional[float] = None) -> Dataset:
    """
    Load and parse the feature collection at `source`.

    Raises:
        DatasetLoadFailure: the source is unreachable, is not JSON, or is not
        a feature collection of feature objects.
    """
    try:
        collection = _read_collection(source, timeout)
    except (requests.RequestException, OSError, ValueError) as e:
        raise DatasetLoadFailure(f"Could not load dataset from {source}: {e}") from e

    if not isinstance(collection, dict) or collection.get("type") != "FeatureCollection":
        raise DatasetLoadFailure(f"Dataset at {source} is not a FeatureCollection")

    features = collection.get("features")
    if not isinstance(features, list) or not all(isinstance(f, dict) for f in features):
        raise DatasetLoadFailure(f"Dataset at {source} has malformed features")

    try:
        dataset = Dataset.from_geojson(collection)
    except (AttributeError, TypeError, ValueError) as e:
        raise DatasetLoadFailure(f"Could not parse dataset from {source}: {e}") from e
    logger.info(f"Loaded {len(dataset)} cells from {source}")
    return dataset


def load_dataset_or_none(source: str, timeout: Optional[float] = None) -> Optional[Dataset]:
    """
    Startup variant: a failure happens before any user action, so it is
    logged instead of surfaced and the dataset stays None.
    """
    try:
        return load_dataset(source, timeout=timeout)
    except DatasetLoadFailure as e:
        logger.error(f"Dataset load failed: {e}")
        return None
