"""
Purpose: Small geometry helpers the route orchestrator depends on.
What it does:
- centroid_of: unweighted mean of a polygon's first-ring vertices (proxy point for a cell)
- bounding_box: min/max extent of a route's coordinates

The centroid is the plain vertex mean, not the area-weighted centroid.
OSRM requests and camera fits are computed from this exact value.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Tuple

LngLat = Tuple[float, float]

ORIGIN_FALLBACK: LngLat = (0.0, 0.0)


@dataclass(frozen=True)
class BoundingBox:
    west: float
    south: float
    east: float
    north: float

    @property
    def sw(self) -> LngLat:
        return (self.west, self.south)

    @property
    def ne(self) -> LngLat:
        return (self.east, self.north)

    @property
    def center(self) -> LngLat:
        return ((self.west + self.east) / 2, (self.south + self.north) / 2)


def centroid_of(geometry: Optional[Dict[str, Any]]) -> LngLat:
    """
    Mean [lng, lat] of the polygon's outer ring.
    Anything that is not a Polygon (or None) falls back to (0, 0).
    """
    if not geometry or geometry.get("type") != "Polygon":
        return ORIGIN_FALLBACK

    rings = geometry.get("coordinates") or []
    if not rings or not rings[0]:
        return ORIGIN_FALLBACK

    ring = list(rings[0])
    #a closed ring repeats its first vertex; count it once
    if len(ring) > 1 and list(ring[0][:2]) == list(ring[-1][:2]):
        ring = ring[:-1]

    sum_lng = 0.0
    sum_lat = 0.0
    for lng, lat, *_ in ring:
        sum_lng += lng
        sum_lat += lat
    return (sum_lng / len(ring), sum_lat / len(ring))


def bounding_box(coordinates: Sequence[Sequence[float]]) -> BoundingBox:
    """Extent of all [lng, lat] pairs. Raises ValueError on an empty sequence."""
    if not coordinates:
        raise ValueError("Cannot compute a bounding box of no coordinates.")

    lngs = [c[0] for c in coordinates]
    lats = [c[1] for c in coordinates]
    return BoundingBox(west=min(lngs), south=min(lats), east=max(lngs), north=max(lats))
