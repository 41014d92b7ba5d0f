# lumivahti/api/snow_data.py
"""
Lumitietojen julkinen entrypoint: get_snow_data(postinumero, raja).

Palauttaa aina käyttökelpoisen SnowDataResultin tai nostaa
PostalCodeNotFoundErrorin. Alempien tasojen virheet eivät pääse läpi:
asemahaku ja ennuste putoavat tarvittaessa vuodenaika-arvioihin.
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from lumivahti.api.forecast import get_snow_forecast_with_thaw_warning
from lumivahti.api.geo import distance_km
from lumivahti.api.geocode import GeocodeCache, resolve_postal_code
from lumivahti.api.models import ForecastResult, SnowDataResult, SnowDepthResult, StationInfo
from lumivahti.api.seasonal import estimated_depth_result, fallback_forecast
from lumivahti.api.snow_load import (
    classify_load,
    normalize_threshold,
    snow_load,
    status_color,
    status_text,
)
from lumivahti.api.stations import get_snow_depth_with_station_info
from lumivahti.api.warning import heavy_wet_snow_warning
from lumivahti.api.weather_utils import round_half_up
from lumivahti.config import REFERENCE_LAT, REFERENCE_LON, SERVICE_RADIUS_KM, TZ
from lumivahti.utils import report_error

logger = logging.getLogger("lumivahti")


class PostalCodeNotFoundError(LookupError):
    """Postinumeroa ei löytynyt taulukosta eikä geokoodauksella."""

    error = "postal_code_not_found"
    message = "Postinumeroa ei löytynyt. Tarkista, että postinumero on oikein."

    def __init__(self, postal_code: str):
        super().__init__(self.message)
        self.postal_code = postal_code


def _plural(n: int, one: str, many: str) -> str:
    return one if n == 1 else f"{n} {many}"


def format_updated_ago(updated_at: datetime | None, now: datetime) -> str | None:
    """'juuri nyt', '5 minuuttia sitten', '1 tunti sitten', '3 päivää sitten'."""
    if updated_at is None:
        return None

    seconds = (now - updated_at).total_seconds()
    minutes = int(seconds // 60)
    hours = int(seconds // 3600)

    if hours >= 24:
        return _plural(hours // 24, "1 päivä sitten", "päivää sitten")
    if hours >= 1:
        return _plural(hours, "1 tunti sitten", "tuntia sitten")
    if minutes >= 1:
        return _plural(minutes, "1 minuutti sitten", "minuuttia sitten")
    return "juuri nyt"


def _snow_depth(lat: float, lon: float, postal_code: str, now: datetime) -> SnowDepthResult:
    try:
        return get_snow_depth_with_station_info(lat, lon, postal_code, now=now)
    except Exception as e:
        report_error(f"get_snow_depth_with_station_info: {postal_code}", e)
        return estimated_depth_result(lat, now.astimezone(TZ).date())


def _forecast(lat: float, lon: float, threshold: int, depth_cm: int, now: datetime) -> ForecastResult:
    try:
        return get_snow_forecast_with_thaw_warning(
            lat, lon, threshold, current_depth_cm=depth_cm, now=now
        )
    except Exception as e:
        report_error("get_snow_forecast_with_thaw_warning", e)
        return ForecastResult(forecast=fallback_forecast(lat, now.astimezone(TZ).date()))


def get_snow_data(
    postal_code: str,
    threshold: int | None = None,
    *,
    now: datetime | None = None,
    cache: GeocodeCache | None = None,
) -> SnowDataResult:
    """
    Kokoaa lumikuorman, riskitason, kolmen päivän ennusteen ja
    märän lumen varoituksen annetulle postinumerolle.
    """
    now = now or datetime.now(UTC)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)
    threshold = normalize_threshold(threshold)

    info = resolve_postal_code(postal_code, cache=cache)
    if info is None:
        raise PostalCodeNotFoundError(postal_code)

    lat, lon = info.latitude, info.longitude
    distance_from_reference = distance_km(lat, lon, REFERENCE_LAT, REFERENCE_LON)

    snow = _snow_depth(lat, lon, postal_code, now)
    current_load = snow_load(snow.depth_cm)
    status = classify_load(current_load, threshold)

    forecast = _forecast(lat, lon, threshold, snow.depth_cm, now)
    warning = heavy_wet_snow_warning(current_load, threshold, forecast.has_thaw_conditions)

    logger.info(
        "Snow data %s (%s): %s cm, %s/%s kg/m², status=%s, wet snow warning=%s",
        postal_code,
        info.city_name,
        snow.depth_cm,
        current_load,
        threshold,
        status,
        warning,
    )

    return SnowDataResult(
        current_load=current_load,
        snow_depth=snow.depth_cm,
        threshold=threshold,
        status=status,
        status_text=status_text(status),
        status_color=status_color(status),
        forecast=forecast.forecast,
        city=info.city_name,
        distance_from_reference_point=round_half_up(distance_from_reference),
        is_within_service_area=distance_from_reference <= SERVICE_RADIUS_KM,
        heavy_wet_snow_warning=warning,
        thaw_conditions=forecast.thaw_conditions,
        station_info=StationInfo(
            name=snow.station_name,
            distance=snow.station_distance_km,
            updated_ago=format_updated_ago(snow.updated_at, now),
            updated_at=snow.updated_at,
        ),
    )
