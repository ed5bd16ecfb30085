"""
Purpose: Route-side data structures.
What it does:
- RouteStats: display stats copied from the destination cell
- RouteResult: the drawn route as a single-feature LineString collection
- RouteRequest: one outstanding OSRM call, tagged with its generation

Rule: No HTTP calls, no state transitions. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple

LngLat = Tuple[float, float]


@dataclass(frozen=True)
class RouteStats:
    co2: Optional[float] = None  # grams for a single car trip
    visits: Optional[float] = None  # visits to the destination cell


@dataclass(frozen=True)
class RouteResult:
    """
    Created on a successful fetch, cleared on removal or on an empty answer.
    Never partially updated.
    """
    geojson: Dict[str, Any]

    @property
    def geometry(self) -> Dict[str, Any]:
        return self.geojson["features"][0]["geometry"]

    @property
    def coordinates(self) -> List[List[float]]:
        return self.geometry["coordinates"]

    @staticmethod
    def from_geometry(geometry: Dict[str, Any]) -> RouteResult:
        return RouteResult(
            geojson={
                "type": "FeatureCollection",
                "features": [
                    {
                        "type": "Feature",
                        "geometry": geometry,
                        "properties": {"title": "Route"},
                    }
                ],
            }
        )


@dataclass(frozen=True)
class RouteRequest:
    """
    Output of resolving a selection (what goes to OSRM).
    generation is compared against the state's counter when the answer arrives.
    """
    generation: int
    origin_id: str
    destination_id: str
    origin: LngLat
    destination: LngLat
