"""
Purpose: pydeck render surface.
What it does:
- Turns LayerDescriptors into pydeck layers and assembles a pdk.Deck
  (carto dark-matter basemap, destination-id tooltip)
- Owns the projection used for bounds-fits: Web Mercator zoom + centre that
  frame a box inside the viewport minus padding, like maplibre's fitBounds
"""

from __future__ import annotations

import math
from typing import List, Optional, Sequence

import pydeck as pdk

from camera.models import CameraState
from layers.builder import LayerDescriptor
from routing.geometry import BoundingBox

from .settings import MAP_STYLE

TILE_SIZE = 512  # deck.gl world size at zoom 0
TOOLTIP = {"html": "<b>Destination ID:</b> {destination_code_level_9}"}


def _mercator_x(lng: float) -> float:
    return (lng + 180) / 360


def _mercator_y(lat: float) -> float:
    lat = max(min(lat, 85.051129), -85.051129)
    phi = math.radians(lat)
    return (1 - math.log(math.tan(math.pi / 4 + phi / 2)) / math.pi) / 2


def _inverse_mercator_y(y: float) -> float:
    return math.degrees(2 * math.atan(math.exp(math.pi * (1 - 2 * y))) - math.pi / 2)


class DeckSurface:
    """
    Render surface backed by pydeck. width/height describe the viewport the
    deck is shown in and only matter for bounds-fits.
    """
    def __init__(self, width: int = 1000, height: int = 700, max_zoom: float = 20, map_style: str = MAP_STYLE):
        self.width = width
        self.height = height
        self.max_zoom = max_zoom
        self.map_style = map_style

    def to_pydeck_layer(self, descriptor: LayerDescriptor) -> pdk.Layer:
        return pdk.Layer(descriptor.kind, descriptor.data, id=descriptor.id, **descriptor.props)

    def build_deck(self, camera: CameraState, descriptors: Sequence[LayerDescriptor]) -> pdk.Deck:
        layers: List[pdk.Layer] = [self.to_pydeck_layer(d) for d in descriptors]
        return pdk.Deck(
            layers=layers,
            initial_view_state=pdk.ViewState(**camera.to_dict()),
            map_provider="carto",
            map_style=self.map_style,
            views=[pdk.View(type="MapView", controller=True)],
            tooltip=TOOLTIP,
        )

    def fit_bounds(self, camera: CameraState, box: BoundingBox, padding: int, max_zoom: Optional[float] = None) -> CameraState:
        """
        Camera whose centre and zoom frame `box` with `padding` pixels on
        every side. Pitch and bearing are kept.
        """
        max_zoom = self.max_zoom if max_zoom is None else max_zoom

        x_min, x_max = _mercator_x(box.west), _mercator_x(box.east)
        y_min, y_max = _mercator_y(box.north), _mercator_y(box.south)
        span_x = abs(x_max - x_min)
        span_y = abs(y_max - y_min)

        avail_w = max(self.width - 2 * padding, 1)
        avail_h = max(self.height - 2 * padding, 1)

        #a degenerate box (single point) zooms in as far as allowed
        scales = []
        if span_x > 0:
            scales.append(avail_w / (span_x * TILE_SIZE))
        if span_y > 0:
            scales.append(avail_h / (span_y * TILE_SIZE))
        zoom = min(math.log2(min(scales)), max_zoom) if scales else max_zoom

        return camera.with_changes(
            longitude=(box.west + box.east) / 2,
            latitude=_inverse_mercator_y((y_min + y_max) / 2),
            zoom=zoom,
        )
