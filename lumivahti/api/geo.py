from __future__ import annotations

import math

EARTH_RADIUS_KM = 6371.0


def distance_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Isoympyräetäisyys kilometreinä (Haversine)."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def bounding_box(lat: float, lon: float, radius_km: float, km_per_degree: float = 111.0) -> str:
    """
    WFS:n bbox-parametri "minLon,minLat,maxLon,maxLat" säteen ympärille.
    Pituusasteen leveys kapenee kosinin mukaan leveysasteelta.
    """
    lat_delta = radius_km / km_per_degree
    lon_delta = radius_km / (km_per_degree * math.cos(math.radians(lat)))
    return f"{lon - lon_delta},{lat - lat_delta},{lon + lon_delta},{lat + lat_delta}"
