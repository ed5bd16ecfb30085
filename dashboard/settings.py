"""
Purpose: Central configuration for the dashboard (single source of truth).
What it does:

Reads the two external endpoints and a few knobs from the environment
(.env supported through python-dotenv):

OSRM_BASE_URL = https://router.project-osrm.org

OSRM_PROFILE = driving

OSRM_TIMEOUT = unset (wait indefinitely)

DATASET_SOURCE = output.geojson (path or http(s) URL)

FIT_PADDING = 40

LOG_LEVEL = INFO

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

DEFAULT_OSRM_BASE_URL = "https://router.project-osrm.org"
DEFAULT_DATASET_SOURCE = "output.geojson"
MAP_STYLE = "https://basemaps.cartocdn.com/gl/dark-matter-gl-style/style.json"


@dataclass(frozen=True)
class Settings:
    osrm_base_url: str = DEFAULT_OSRM_BASE_URL
    osrm_profile: str = "driving"

    # None leaves OSRM calls without a timeout; a hung request keeps the
    # dashboard pending.
    osrm_timeout: Optional[float] = None

    dataset_source: str = DEFAULT_DATASET_SOURCE

    # Pixels kept free around a route when the camera frames it.
    fit_padding: int = 40

    log_level: str = "INFO"

    def validate(self) -> None:
        """
        Basic sanity checks. Call once at startup if you want.
        """
        if not self.osrm_base_url:
            raise ValueError("osrm_base_url must not be empty")

        if not self.dataset_source:
            raise ValueError("dataset_source must not be empty")

        if self.osrm_timeout is not None and self.osrm_timeout <= 0:
            raise ValueError("osrm_timeout must be > 0 when set")

        if self.fit_padding < 0:
            raise ValueError("fit_padding must be >= 0")


def _optional_float(raw: Optional[str]) -> Optional[float]:
    if raw is None or raw.strip() == "":
        return None
    return float(raw)


def load_settings() -> Settings:
    """
    Build Settings from the environment (and .env if present).
    """
    load_dotenv()
    s = Settings(
        osrm_base_url=os.getenv("OSRM_BASE_URL", DEFAULT_OSRM_BASE_URL),
        osrm_profile=os.getenv("OSRM_PROFILE", "driving"),
        osrm_timeout=_optional_float(os.getenv("OSRM_TIMEOUT")),
        dataset_source=os.getenv("DATASET_SOURCE", DEFAULT_DATASET_SOURCE),
        fit_padding=int(os.getenv("FIT_PADDING", "40")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
    s.validate()
    return s
