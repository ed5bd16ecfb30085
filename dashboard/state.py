"""
Purpose: The single application-state record and its transitions.
What it does:
Owns Dataset (through its index), Selection, RouteResult, centroids, stats,
CameraState (through the camera controller) and the cell toggle.

Every user event maps to one method here (or to RouteService, which mutates
this record). Nothing else keeps a private copy of these fields.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from camera.controller import CameraController
from cells.index import DatasetIndex
from cells.models import Dataset
from layers.builder import LayerDescriptor, build_layers
from layers.style import LayerStyle
from routing.models import RouteResult, RouteStats

LngLat = Tuple[float, float]


def _format_number(value) -> str:
    #whole floats read like integers (40.0 -> "40")
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


@dataclass
class Selection:
    origin_id: Optional[str] = None
    destination_id: Optional[str] = None


@dataclass
class AppState:
    index: DatasetIndex = field(default_factory=DatasetIndex)
    selection: Selection = field(default_factory=Selection)

    route: Optional[RouteResult] = None
    origin_centroid: Optional[LngLat] = None
    destination_centroid: Optional[LngLat] = None
    stats: RouteStats = field(default_factory=RouteStats)

    camera: CameraController = field(default_factory=CameraController)
    show_cells: bool = True

    # bumped by every draw/remove; see routing.route_service
    route_generation: int = 0

    # --- Dataset ---

    def load_dataset(self, dataset: Optional[Dataset]) -> DatasetIndex:
        """
        Install a dataset. The index (and its memoized option lists) is only
        rebuilt when the Dataset reference actually changes.
        """
        if dataset is not self.index.dataset:
            self.index = DatasetIndex(dataset)
        return self.index

    # --- Selection / toggle ---

    def select_origin(self, origin_id: Optional[str]) -> None:
        self.selection.origin_id = origin_id or None

    def select_destination(self, destination_id: Optional[str]) -> None:
        self.selection.destination_id = destination_id or None

    def toggle_cells(self, show: Optional[bool] = None) -> bool:
        self.show_cells = (not self.show_cells) if show is None else bool(show)
        return self.show_cells

    def can_draw_route(self) -> bool:
        return bool(self.selection.origin_id and self.selection.destination_id)

    # --- Derived views ---

    def layers(self, style: Optional[LayerStyle] = None) -> List[LayerDescriptor]:
        return build_layers(
            self.index,
            self.show_cells,
            self.route,
            self.origin_centroid,
            self.destination_centroid,
            style=style,
        )

    def route_info(self) -> Optional[List[Tuple[str, str]]]:
        """
        Label/value rows of the ROUTE INFO panel, None while no centroids
        are known. Centroids read [lat, lng] with 5 decimals.
        """
        if self.origin_centroid is None or self.destination_centroid is None:
            return None

        o_lng, o_lat = self.origin_centroid
        d_lng, d_lat = self.destination_centroid
        co2 = f"{_format_number(self.stats.co2)} g" if self.stats.co2 is not None else "N/A"
        visits = _format_number(self.stats.visits) if self.stats.visits is not None else "N/A"

        return [
            ("Origin", self.selection.origin_id or ""),
            ("Destination", self.selection.destination_id or ""),
            ("Origin Centroid", f"[{o_lat:.5f}, {o_lng:.5f}]"),
            ("Destination Centroid", f"[{d_lat:.5f}, {d_lng:.5f}]"),
            ("CO₂ (1 Car Trip)", co2),
            ("Number of Visits to Destination Hex.", visits),
        ]
