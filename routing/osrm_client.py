#Purpose: The OSRM "adapter/client".
#Sole responsibility: talk to OSRM via HTTP and return normalized outputs.
#Encapsulates OSRM-specific details:
#coordinate formatting (lon,lat)
#URL construction (/route)
#error handling
#parsing response JSON into your internal shape
#It should not contain selection rules or camera logic.


from dotenv import load_dotenv
import logging
import os
from typing import List, Tuple, Dict, Any, Optional
import requests

# Read OSRM base URL from environment
# Example in .env:
# OSRM_BASE_URL=https://router.project-osrm.org
load_dotenv()
BASE_URL = os.getenv("OSRM_BASE_URL", "https://router.project-osrm.org")

logger = logging.getLogger(__name__)

# Internal coordinate type: (lng, lat), the same order geojson and OSRM use
LngLat = Tuple[float, float]

#OSRM codes that mean "request was fine, there is just no route"
NO_ROUTE_CODES = ("NoRoute", "NoSegment")


class OSRMError(Exception):
    """Custom exception for OSRM client errors."""
    pass


class OSRMClient:
    """
    OSRM Adapter / Client

    Sole responsibility:
    - Talk to OSRM via HTTP
    - Format (lng, lat) centroids as OSRM path coordinates
    - Return the route payload with geojson geometries

    """
    def __init__(self, base_url: Optional[str] = None, profile: str = "driving", timeout: Optional[float] = None):
        self.base_url = (base_url or BASE_URL).rstrip("/")
        #None waits for OSRM indefinitely
        self.timeout = timeout
        self.profile = profile #the mode of transportation (driving, walking, cycling)

        if not self.base_url:
            raise ValueError("OSRM base URL not set. Please set OSRM_BASE_URL in the .env file.")

        #----------------
        # Internal helper methods for coordinate formatting, URL construction
        #----------------
    def format_coordinates(self, coords: List[LngLat]) -> str:
        """Convert list of (lng, lat) to OSRM format 'lng,lat;lng,lat;...'"""
        return ';'.join([f"{lng},{lat}" for lng, lat in coords])

    def route_url(self, origin: LngLat, destination: LngLat) -> str:
        coordinates = self.format_coordinates([origin, destination])
        return f"{self.base_url}/route/v1/{self.profile}/{coordinates}"

        #----------------
        # Public methods
        #----------------
    def route_geometry(self, origin: LngLat, destination: LngLat) -> Dict[str, Any]:
        """
            calls the OSRM /route endpoint once and returns the raw payload,
            with each route carrying a geojson LineString geometry.

            Returns:
                {
                    "code": str,
                    "routes": [{"geometry": {"type": "LineString", "coordinates": [...]}, ...}],
                }
            An empty "routes" list means OSRM found no route.

            Raises:
                OSRMError: network failure, non-JSON body or an OSRM error code.
        """
        url = self.route_url(origin, destination)
        logger.info(f"Requesting {self.profile} route {url}")

        try:
            response = requests.get(
                url,
                params={
                    "overview": "full",
                    "geometries": "geojson",
                },
                timeout=self.timeout,
            )
            data = response.json() #OSRM answers JSON for errors as well (e.g. 400 NoRoute)
        except (requests.RequestException, ValueError) as e:
            raise OSRMError(f"OSRM request failed: {e}") from e

        if not isinstance(data, dict):
            raise OSRMError("OSRM error: malformed response")

        code = data.get("code")
        if code in NO_ROUTE_CODES:
            return {"code": code, "routes": []}

        #validating OSRM response
        if code != "Ok":
            raise OSRMError(f"OSRM error: {data.get('message', 'Unknown error')}")

        routes = data.get("routes") or []
        if not isinstance(routes, list):
            raise OSRMError("OSRM error: malformed routes")

        return {"code": code, "routes": routes}
