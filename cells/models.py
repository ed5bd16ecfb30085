"""
Purpose: Domain models for the cells capability.
What it does:
- Defines core data structures:
- Feature (geometry, origin code, destination code, visit count, CO2 per trip)
- Dataset (immutable ordered sequence of Features, loaded once at startup)

Defines the property keys the precomputed geojson carries:
- origin_code_level_9
- destination_code_level_9
- EXTRAPOLATED_NUMBER_OF_USERS
- Single_CarTrip_Co2

Rule: No HTTP calls, no layer logic. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

ORIGIN_KEY = "origin_code_level_9"
DESTINATION_KEY = "destination_code_level_9"
VISITS_KEY = "EXTRAPOLATED_NUMBER_OF_USERS"
CO2_KEY = "Single_CarTrip_Co2"


def _as_code(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class Feature:
    """
    One polygonal cell of the dataset.
    geometry is kept as the raw geojson geometry dict (ring of [lng, lat] pairs).
    """

    geometry: Optional[Dict[str, Any]]
    origin_code: Optional[str] = None
    destination_code: Optional[str] = None
    visit_count: float = 0
    co2_per_trip: Optional[float] = None

    #raw properties, handed to the render surface for tooltips
    properties: Dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_geojson(cls, feature: Dict[str, Any]) -> Feature:
        properties = dict(feature.get("properties") or {})
        return cls(
            geometry=feature.get("geometry"),
            origin_code=_as_code(properties.get(ORIGIN_KEY)),
            destination_code=_as_code(properties.get(DESTINATION_KEY)),
            #missing or null visit counts are treated as 0
            visit_count=properties.get(VISITS_KEY) or 0,
            co2_per_trip=properties.get(CO2_KEY),
            properties=properties,
        )

    def to_geojson(self) -> Dict[str, Any]:
        return {
            "type": "Feature",
            "geometry": self.geometry,
            "properties": dict(self.properties),
        }


@dataclass(frozen=True)
class Dataset:
    """
    The loaded feature collection. Owned by the application root and
    read-only to every other component.
    """

    features: Tuple[Feature, ...] = ()

    @classmethod
    def from_geojson(cls, collection: Dict[str, Any]) -> Dataset:
        raw_features: List[Dict[str, Any]] = collection.get("features") or []
        return cls(features=tuple(Feature.from_geojson(f) for f in raw_features))

    def to_geojson(self) -> Dict[str, Any]:
        return {
            "type": "FeatureCollection",
            "features": [feature.to_geojson() for feature in self.features],
        }

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self):
        return iter(self.features)
