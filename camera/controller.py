"""
Purpose: Owns the CameraState and every way it can change.
What it does:
- explicit camera buttons: flat, rotate left/right, reset
- bounds-fit after a drawn route (projection math belongs to the render surface)
- gesture updates reported by the render surface

No queuing or merging: each write replaces the state and the last one
before the next render wins.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from routing.geometry import BoundingBox

from .models import INITIAL_CAMERA, CameraState

ROTATE_STEP_DEGREES = 15
GESTURE_FIELDS = ("longitude", "latitude", "zoom", "pitch", "bearing")


class BoundsFitter(Protocol):
    """The part of the render surface the camera delegates bounds-fits to."""

    def fit_bounds(self, camera: CameraState, box: BoundingBox, padding: int) -> CameraState:
        ...


class CameraController:
    def __init__(self, surface: Optional[BoundsFitter] = None, initial: CameraState = INITIAL_CAMERA):
        self.surface = surface
        self.initial = initial
        self.state = initial

    def set_flat(self) -> CameraState:
        self.state = self.state.with_changes(pitch=0)
        return self.state

    def rotate(self, delta_degrees: float) -> CameraState:
        #bearing is left unnormalized, the render surface wraps it
        self.state = self.state.with_changes(bearing=self.state.bearing + delta_degrees)
        return self.state

    def rotate_left(self) -> CameraState:
        return self.rotate(-ROTATE_STEP_DEGREES)

    def rotate_right(self) -> CameraState:
        return self.rotate(ROTATE_STEP_DEGREES)

    def reset(self) -> CameraState:
        self.state = self.initial
        return self.state

    def fit_bounds(self, box: BoundingBox, padding: int) -> CameraState:
        """
        Ask the render surface for a camera framing `box`. Without a surface
        (headless use) the camera is left unchanged.
        """
        if self.surface is None:
            return self.state
        self.state = self.surface.fit_bounds(self.state, box, padding)
        return self.state

    def apply_gesture(self, view: Any) -> CameraState:
        """
        Overwrite the state from a pan/zoom/rotate reported by the render
        surface (a mapping or a ViewState-like object). Missing fields keep
        their current value.
        """
        changes = {}
        for name in GESTURE_FIELDS:
            if isinstance(view, Mapping):
                value = view.get(name)
            else:
                value = getattr(view, name, None)
            if value is not None:
                changes[name] = value
        self.state = self.state.with_changes(**changes)
        return self.state
