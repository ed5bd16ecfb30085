"""
Purpose: Core data model for the map camera.
What it does:
Defines the view parameters handed to the render surface and the fixed
state RESET returns to (Helsinki region, tilted).
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict


@dataclass(frozen=True)
class CameraState:
    longitude: float
    latitude: float
    zoom: float
    pitch: float = 0
    bearing: float = 0

    def with_changes(self, **changes: Any) -> CameraState:
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, float]:
        return {
            "longitude": self.longitude,
            "latitude": self.latitude,
            "zoom": self.zoom,
            "pitch": self.pitch,
            "bearing": self.bearing,
        }


INITIAL_CAMERA = CameraState(
    longitude=24.8084,
    latitude=60.1699,
    zoom=10,
    pitch=60,
    bearing=20,
)
