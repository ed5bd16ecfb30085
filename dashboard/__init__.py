"""
Purpose: Package entry for the dashboard shell.
What it does:
Exposes the application-state record, settings and the pydeck render
surface. The Streamlit script itself lives in dashboard/app.py and is not
imported here so the state can be used without a running Streamlit server.
"""
from .settings import Settings, load_settings
from .state import AppState, Selection
from .surface import DeckSurface

__all__ = ["Settings", "load_settings", "AppState", "Selection", "DeckSurface"]
