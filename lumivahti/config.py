# config.py
"""Configuration settings for the Lumivahti snow load service."""

import os
from zoneinfo import ZoneInfo

HTTP_TIMEOUT_S: float = float(os.environ.get("LUMIVAHTI_HTTP_TIMEOUT", "8.0"))
"""Per-call timeout (seconds) for every upstream request."""

DEV: bool = os.environ.get("DEV", "0") == "1"

TZ: ZoneInfo = ZoneInfo("Europe/Helsinki")
"""Timezone for calendar arithmetic (forecast days, seasonal tables)."""

USER_AGENT: str = os.getenv(
    "LUMIVAHTI_USER_AGENT",
    "Lumivahti/1.0 (snow monitoring; contact: info@pp-kattohuolto.fi)",
)

# ------------------- UPSTREAM SERVICES -------------------

FMI_WFS_URL: str = os.getenv("LUMIVAHTI_FMI_WFS_URL", "https://opendata.fmi.fi/wfs")
FMI_OBSERVATION_QUERY: str = "fmi::observations::weather::daily::timevaluepair"
FMI_FORECAST_QUERY: str = "ecmwf::forecast::surface::point::timevaluepair"
"""ECMWF reaches ~10 days; HARMONIE only ~48 h."""

NOMINATIM_URL: str = os.getenv(
    "LUMIVAHTI_NOMINATIM_URL", "https://nominatim.openstreetmap.org/search"
)

# ------------------- SERVICE AREA -------------------

REFERENCE_LAT: float = 62.8933
REFERENCE_LON: float = 27.6783
"""Kuopio centre, the point service-area distance is measured from."""

SERVICE_RADIUS_KM: float = 80.0

# ------------------- SNOW LOAD -------------------

SNOW_LOAD_FACTOR: float = 2.5
"""kg/m² per cm of snow depth."""

DEPTH_MIN_CM: float = 0.0
DEPTH_MAX_CM: float = 500.0
"""Valid observed depth is DEPTH_MIN_CM <= d < DEPTH_MAX_CM."""

DEFAULT_THRESHOLD: int = 140

STATUS_MODERATE_PCT: float = 80.0
STATUS_CRITICAL_PCT: float = 100.0

ALERT_THRESHOLD_RATIO: float = 0.8

CUSTOM_THRESHOLD_MIN: int = 80
CUSTOM_THRESHOLD_MAX: int = 200

# ------------------- STATIONS -------------------

OBSERVATION_LOOKBACK_DAYS: int = 7
STATION_SEARCH_RADII_KM: tuple[int, ...] = (25, 50)
KM_PER_DEGREE: float = 111.0

# ------------------- FORECAST / THAW -------------------

FORECAST_DAYS: int = 3

THAW_MAX_TEMP_C: float = 1.0
THAW_MIN_PRECIP_MM: float = 5.0
"""A forecast day is a thaw day when max temp >= 1 °C and precip >= 5 mm."""

WET_SNOW_LOAD_PCT: float = 60.0
"""Load share of threshold from which thaw days raise the wet snow warning."""
