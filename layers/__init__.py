"""
Purpose: Package entry + stable exports for map layers.

Public API:
- color_for: visit count -> RGBA ramp
- LayerStyle / default_style: fixed drawing parameters
- LayerDescriptor / build_layers: ordered layers for the render surface
"""
from .color_ramp import color_for
from .style import LayerStyle, default_style
from .builder import LayerDescriptor, build_layers

__all__ = ["color_for",
           "LayerStyle",
             "default_style",
               "LayerDescriptor",
               "build_layers",
               ]
