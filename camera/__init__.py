"""
Purpose: Package entry + stable exports for the map camera.
"""
from .models import CameraState, INITIAL_CAMERA
from .controller import CameraController

__all__ = ["CameraState", "INITIAL_CAMERA", "CameraController"]
