"""
Purpose: Derive the drawable layers from the current state.
What it does:
Pure function of (dataset index, cell toggle, route, centroid pair) returning
an ordered list of LayerDescriptor:

1. choropleth of every cell, extruded by visit count, colored by color_for
   (only when the toggle is on and a dataset is loaded)
2. route line (only when a route is drawn)
3. origin + destination markers (only when both centroids are known)

Order matters: cells under route under markers, so nothing the user picked
is ever hidden.

Descriptors are render-surface agnostic; dashboard/surface.py turns them
into pydeck layers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from cells.index import DatasetIndex
from routing.models import RouteResult

from .color_ramp import color_for
from .style import LayerStyle, default_style

LngLat = Tuple[float, float]

GEOJSON_LAYER = "GeoJsonLayer"
SCATTERPLOT_LAYER = "ScatterplotLayer"


@dataclass(frozen=True)
class LayerDescriptor:
    """
    One drawable layer: a deck.gl layer type, its data and its props.
    """
    id: str
    kind: str
    data: Any
    props: Dict[str, Any] = field(default_factory=dict)


def choropleth_layer(index: DatasetIndex, style: LayerStyle) -> LayerDescriptor:
    max_visits = index.max_visit_count
    features = []
    for feature in index.features:
        visits = feature.visit_count or 0
        shape = feature.to_geojson()
        shape["properties"]["elevation"] = visits
        shape["properties"]["fill_color"] = list(color_for(visits, max_visits))
        features.append(shape)

    return LayerDescriptor(
        id=style.choropleth_id,
        kind=GEOJSON_LAYER,
        data={"type": "FeatureCollection", "features": features},
        props={
            "pickable": True,
            "extruded": True,
            "filled": True,
            "stroked": False,
            "wireframe": False,
            "opacity": style.choropleth_opacity,
            "elevation_scale": style.elevation_scale,
            "get_elevation": "properties.elevation",
            "get_fill_color": "properties.fill_color",
        },
    )


def route_layer(route: RouteResult, style: LayerStyle) -> LayerDescriptor:
    return LayerDescriptor(
        id=style.route_id,
        kind=GEOJSON_LAYER,
        data=route.geojson,
        props={
            "pickable": True,
            "stroked": True,
            "filled": False,
            "get_line_color": list(style.route_color),
            "line_width_min_pixels": style.route_width_min_pixels,
        },
    )


def point_layer(origin: LngLat, destination: LngLat, style: LayerStyle) -> LayerDescriptor:
    points = [
        {"position": list(origin), "color": list(style.origin_color), "title": "Origin"},
        {"position": list(destination), "color": list(style.destination_color), "title": "Destination"},
    ]
    return LayerDescriptor(
        id=style.point_id,
        kind=SCATTERPLOT_LAYER,
        data=points,
        props={
            "pickable": True,
            "get_position": "position",
            "get_fill_color": "color",
            "get_radius": style.point_radius,
            "radius_min_pixels": style.point_radius_min_pixels,
        },
    )


def build_layers(
        index: DatasetIndex,
        show_cells: bool,
        route: Optional[RouteResult] = None,
        origin_centroid: Optional[LngLat] = None,
        destination_centroid: Optional[LngLat] = None,
        *,
        style: Optional[LayerStyle] = None,
) -> List[LayerDescriptor]:
    style = style or default_style()
    layers: List[LayerDescriptor] = []

    if show_cells and index.loaded:
        layers.append(choropleth_layer(index, style))

    if route is not None:
        layers.append(route_layer(route, style))

    if origin_centroid is not None and destination_centroid is not None:
        layers.append(point_layer(origin_centroid, destination_centroid, style))

    return layers
