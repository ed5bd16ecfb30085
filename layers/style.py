"""
Purpose: Central configuration for how each layer is drawn (single source of truth).
What it does:

Stores the fixed drawing parameters of the three layers:

CHOROPLETH: extruded, opacity 0.8, elevation scale 2

ROUTE: cyan line, min 4 px wide

POINTS: green origin, red destination, 25 m radius, min 5 px

Rule: No logic here, just parameters so the look can be tuned without
rewriting the layer builder.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

RGB = Tuple[int, int, int]


@dataclass(frozen=True)
class LayerStyle:
    """
    Drawing parameters for the choropleth, route and marker layers.
    """

    # --- Choropleth (hex cells) ---
    choropleth_id: str = "hex-layer"
    choropleth_opacity: float = 0.8
    elevation_scale: float = 2

    # --- Route line ---
    route_id: str = "route-layer"
    route_color: RGB = (0, 255, 255)
    route_width_min_pixels: int = 4

    # --- Origin / destination markers ---
    # Radius is in meters; the pixel floor keeps markers visible at low zoom.
    point_id: str = "point-layer"
    origin_color: RGB = (0, 255, 0)
    destination_color: RGB = (255, 0, 0)
    point_radius: float = 25
    point_radius_min_pixels: int = 5

    def validate(self) -> None:
        """
        Basic sanity checks. Call once at startup if you want.
        """
        if not 0 <= self.choropleth_opacity <= 1:
            raise ValueError("choropleth_opacity must be within [0, 1]")

        if self.route_width_min_pixels <= 0:
            raise ValueError("route_width_min_pixels must be > 0")

        if self.point_radius <= 0 or self.point_radius_min_pixels <= 0:
            raise ValueError("point radii must be > 0")


def default_style() -> LayerStyle:
    """
    Convenience factory for the default style.
    """
    s = LayerStyle()
    s.validate()
    return s
