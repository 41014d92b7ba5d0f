# lumivahti/api/__init__.py
from .snow_data import (
    PostalCodeNotFoundError as PostalCodeNotFoundError,
    format_updated_ago as format_updated_ago,
    get_snow_data as get_snow_data,
)
from .geocode import GEOCODE_CACHE as GEOCODE_CACHE, GeocodeCache as GeocodeCache
from .snow_load import effective_threshold as effective_threshold, ROOF_TYPES as ROOF_TYPES
from .warning import build_notification as build_notification
