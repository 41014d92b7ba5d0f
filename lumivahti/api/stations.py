# lumivahti/api/stations.py
"""
Lähimmän luotettavan lumensyvyyshavainnon haku.

Strategiat kokeillaan järjestyksessä, ensimmäinen tulos voittaa:
  1) aluekohtaiset asemalistat (Kilpisjärvi, Inari/Ivalo)
  2) bbox-haku 25 km säteellä, sitten 50 km
  3) leveysaste/vuodenaika-arvio (seasonal.estimated_depth_result)

Yksittäisen vaiheen HTTP- tai jäsennysvirhe tarkoittaa "ei tulosta" ja
haku jatkuu seuraavaan vaiheeseen. Viimeinen vaihe ei koskaan epäonnistu.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from functools import partial

from lumivahti.api.fmi_parse import latest_valid_measurement, nearest_station_reading, parse_position
from lumivahti.api.geo import bounding_box, distance_km
from lumivahti.api.http import http_get_text
from lumivahti.api.models import ObservationStation, SnowDepthResult
from lumivahti.api.seasonal import estimated_depth_result
from lumivahti.api.weather_utils import round_half_up
from lumivahti.config import (
    FMI_OBSERVATION_QUERY,
    FMI_WFS_URL,
    KM_PER_DEGREE,
    OBSERVATION_LOOKBACK_DAYS,
    STATION_SEARCH_RADII_KM,
    TZ,
)

logger = logging.getLogger("lumivahti")

Strategy = Callable[[], SnowDepthResult | None]


@dataclass(frozen=True)
class BoundingBox:
    """Avoin suorakaide: rajat eivät kuulu alueeseen."""

    lat_min: float = -math.inf
    lat_max: float = math.inf
    lon_min: float = -math.inf
    lon_max: float = math.inf

    def contains(self, lat: float, lon: float) -> bool:
        return self.lat_min < lat < self.lat_max and self.lon_min < lon < self.lon_max


@dataclass(frozen=True)
class RegionOverride:
    """Alue, jolla tunnetut asemat kokeillaan ennen bbox-hakua."""

    name: str
    stations: tuple[ObservationStation, ...]
    postal_codes: frozenset[str] = frozenset()
    postal_prefixes: tuple[str, ...] = ()
    bbox: BoundingBox | None = None

    def applies(self, lat: float, lon: float, postal_code: str | None) -> bool:
        if postal_code:
            if postal_code in self.postal_codes:
                return True
            if any(postal_code.startswith(p) for p in self.postal_prefixes):
                return True
        return self.bbox is not None and self.bbox.contains(lat, lon)


KILPISJARVI = RegionOverride(
    name="Kilpisjärvi",
    stations=(
        ObservationStation("102016", "Kilpisjärvi kyläkeskus", 69.0458, 20.7877),
        ObservationStation("102017", "Kilpisjärvi Saana", 69.0422, 20.8508),
    ),
    postal_codes=frozenset({"99100", "99130", "99490"}),
    bbox=BoundingBox(lat_min=69.0, lon_min=20.5, lon_max=21.0),
)

INARI_IVALO = RegionOverride(
    name="Inari/Ivalo",
    stations=(
        ObservationStation("101784", "Ivalo lentoasema", 68.6073, 27.4053),
        ObservationStation("101885", "Inari Saariselkä matkailukeskus", 68.4151, 27.4132),
        ObservationStation("102003", "Inari Raja-Jooseppi", 68.4778, 28.3000),
    ),
    postal_prefixes=("998", "997"),
    bbox=BoundingBox(lat_min=68.0, lat_max=69.5, lon_min=27.0, lon_max=29.0),
)

REGION_OVERRIDES: tuple[RegionOverride, ...] = (KILPISJARVI, INARI_IVALO)


def _fmt_time(ts: datetime) -> str:
    return ts.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")


def observation_window(now: datetime, days: int = OBSERVATION_LOOKBACK_DAYS) -> tuple[str, str]:
    """(starttime, endtime) WFS-muodossa, `days` päivää taaksepäin."""
    return _fmt_time(now - timedelta(days=days)), _fmt_time(now)


def _observation_params(start: str, end: str, **selector: str) -> dict[str, str]:
    return {
        "service": "WFS",
        "version": "2.0.0",
        "request": "getFeature",
        "storedquery_id": FMI_OBSERVATION_QUERY,
        **selector,
        "starttime": start,
        "endtime": end,
        "parameters": "snow",
    }


def fetch_station_observation(
    station: ObservationStation, lat: float, lon: float, start: str, end: str
) -> SnowDepthResult | None:
    """Yhden aseman uusin kelvollinen havainto, tai None."""
    try:
        xml_text = http_get_text(FMI_WFS_URL, params=_observation_params(start, end, fmisid=station.id))
    except Exception as e:
        logger.warning("Station %s (%s) fetch failed: %s", station.name, station.id, e)
        return None

    latest = latest_valid_measurement(xml_text)
    if latest is None:
        return None

    if station.latitude is not None and station.longitude is not None:
        station_pos: tuple[float, float] | None = (station.latitude, station.longitude)
    else:
        station_pos = parse_position(xml_text)
    if station_pos is None:
        return None

    dist = distance_km(lat, lon, *station_pos)
    return SnowDepthResult(
        depth_cm=round_half_up(latest.depth_cm),
        station_name=station.name,
        station_distance_km=round_half_up(dist),
        updated_at=latest.observed_at,
    )


def search_stations_in_radius(
    lat: float, lon: float, radius_km: float, start: str, end: str
) -> SnowDepthResult | None:
    """bbox-haku: lähin asema säteen sisällä, jolla on kelvollinen mittaus."""
    bbox = bounding_box(lat, lon, radius_km, KM_PER_DEGREE)
    logger.info("FMI snow query (%s km): bbox=%s", radius_km, bbox)

    try:
        xml_text = http_get_text(FMI_WFS_URL, params=_observation_params(start, end, bbox=bbox))
    except Exception as e:
        logger.warning("Station search (%s km) failed: %s", radius_km, e)
        return None

    result = nearest_station_reading(xml_text, lat, lon, radius_km)
    if result is None:
        logger.info("No stations with snow data within %s km", radius_km)
    return result


def _first_station_in_region(
    region: RegionOverride, lat: float, lon: float, start: str, end: str
) -> SnowDepthResult | None:
    for station in region.stations:
        result = fetch_station_observation(station, lat, lon, start, end)
        if result is not None:
            logger.info(
                "%s station %s: %s cm snow, %s km away",
                region.name,
                result.station_name,
                result.depth_cm,
                result.station_distance_km,
            )
            return result
    return None


def build_strategies(
    lat: float,
    lon: float,
    postal_code: str | None,
    start: str,
    end: str,
    regions: Sequence[RegionOverride] = REGION_OVERRIDES,
    radii: Sequence[float] = STATION_SEARCH_RADII_KM,
) -> list[tuple[str, Strategy]]:
    """Nimetyt strategiat siinä järjestyksessä kuin ne kokeillaan."""
    strategies: list[tuple[str, Strategy]] = [
        (f"region:{region.name}", partial(_first_station_in_region, region, lat, lon, start, end))
        for region in regions
        if region.applies(lat, lon, postal_code)
    ]
    strategies.extend(
        (f"radius:{radius}km", partial(search_stations_in_radius, lat, lon, radius, start, end))
        for radius in radii
    )
    return strategies


def get_snow_depth_with_station_info(
    lat: float,
    lon: float,
    postal_code: str | None = None,
    *,
    now: datetime | None = None,
    regions: Sequence[RegionOverride] = REGION_OVERRIDES,
    radii: Sequence[float] = STATION_SEARCH_RADII_KM,
) -> SnowDepthResult:
    """Lumensyvyys ja asematiedot; pahimmillaan vuodenaika-arvio ilman asemaa."""
    now = now or datetime.now(UTC)
    start, end = observation_window(now)

    for name, strategy in build_strategies(lat, lon, postal_code, start, end, regions, radii):
        try:
            result = strategy()
        except Exception as e:
            logger.error("Station strategy %s failed: %s", name, e)
            continue
        if result is not None:
            return result

    logger.warning("No stations found within %s km of (%s, %s)", max(radii, default=0), lat, lon)
    return estimated_depth_result(lat, now.astimezone(TZ).date())
