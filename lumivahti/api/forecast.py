# lumivahti/api/forecast.py
"""
Kolmen päivän lumiennuste ja suojasäävaroitus.

Haetaan FMI:n ECMWF-pisteennuste (lämpötila + tunnin sademäärä) huomisesta
alkaen, kootaan näytteet päiväkohtaisiin koreihin ja johdetaan niistä
päivän min/max/keskilämpö, sademäärä ja -tyyppi, ikoni sekä lumensyvyyden
kehitys. Jos haku tai jäsennys epäonnistuu missä tahansa vaiheessa,
palautetaan seasonal.fallback_forecast ilman suojasääpäiviä.
"""

from __future__ import annotations

import logging
import math
from datetime import UTC, date, datetime, time, timedelta

from lumivahti.api.fmi_parse import DayBucket, parse_forecast_buckets
from lumivahti.api.fmi_symbols import icon_from_symbol, most_common_symbol
from lumivahti.api.http import http_get_text
from lumivahti.api.models import ForecastDay, ForecastResult, PrecipType, ThawCondition
from lumivahti.api.seasonal import day_labels, fallback_forecast
from lumivahti.api.stations import get_snow_depth_with_station_info
from lumivahti.api.weather_utils import round_half_up
from lumivahti.config import (
    FMI_FORECAST_QUERY,
    FMI_WFS_URL,
    FORECAST_DAYS,
    THAW_MAX_TEMP_C,
    THAW_MIN_PRECIP_MM,
    TZ,
)

logger = logging.getLogger("lumivahti")

FORECAST_PARAMETERS = "Temperature,Precipitation1h"

PRECIP_WORDS: dict[str, str] = {
    "snow": "lunta",
    "rain": "vettä",
    "sleet": "räntää",
    "none": "",
}


# --- päiväkohtaiset säännöt ----------------------------------------------------
def precip_type(avg_temp: float, max_temp: float, min_temp: float, precip: float) -> PrecipType:
    """Sateen olomuoto lämpötiloista."""
    if precip <= 0:
        return "none"
    if max_temp < -1:
        return "snow"
    if min_temp > 2:
        return "rain"
    # nollaraja ylittyy päivän aikana
    if max_temp > 0 and min_temp < 0:
        return "sleet"
    if avg_temp <= 0:
        return "snow"
    if avg_temp >= 2:
        return "rain"
    return "sleet"


def precip_label(amount: float, kind: PrecipType) -> str:
    """'0 mm', '0–1 mm lunta' tai '4 mm vettä'."""
    if kind == "none" or amount < 0.1:
        return "0 mm"
    word = PRECIP_WORDS[kind]
    if amount <= 1:
        return f"0–{max(1, math.ceil(amount))} mm {word}"
    return f"{round_half_up(amount)} mm {word}"


def is_thaw_day(max_temp: float, total_precip: float) -> bool:
    return max_temp >= THAW_MAX_TEMP_C and total_precip >= THAW_MIN_PRECIP_MM


def project_snow_depth(accumulated: float, avg_temp: float, total_precip: float) -> float:
    """Pakkasella sade kertyy lumeksi, yli +2 °C:ssa lumi sulaa."""
    if avg_temp < 0 and total_precip > 0:
        return accumulated + total_precip
    if avg_temp > 2:
        return max(0.0, accumulated - (avg_temp - 2) * 2)
    return accumulated


# --- haku ----------------------------------------------------------------------
def forecast_window(today: date, days: int = FORECAST_DAYS) -> tuple[str, str]:
    """Huomisen alusta `days` päivää eteenpäin (paikallista aikaa), UTC-merkkijonoina."""
    start = datetime.combine(today + timedelta(days=1), time(0), tzinfo=TZ)
    end = start + timedelta(days=days)
    fmt = "%Y-%m-%dT%H:%M:%SZ"
    return start.astimezone(UTC).strftime(fmt), end.astimezone(UTC).strftime(fmt)


def fetch_forecast_xml(lat: float, lon: float, start: str, end: str) -> str:
    params = {
        "service": "WFS",
        "version": "2.0.0",
        "request": "getFeature",
        "storedquery_id": FMI_FORECAST_QUERY,
        "latlon": f"{lat},{lon}",
        "starttime": start,
        "endtime": end,
        "parameters": FORECAST_PARAMETERS,
    }
    return http_get_text(FMI_WFS_URL, params=params)


# --- päivien kokoaminen --------------------------------------------------------
def _observed_day(
    day: date, bucket: DayBucket, accumulated: float
) -> tuple[ForecastDay, float, ThawCondition | None]:
    iso, day_name, date_label = day_labels(day)

    min_temp = round_half_up(min(bucket.temps))
    max_temp = round_half_up(max(bucket.temps))
    avg_temp = round_half_up(sum(bucket.temps) / len(bucket.temps))
    total_precip = sum(bucket.precip)
    rounded_precip = round_half_up(total_precip * 10) / 10

    kind = precip_type(avg_temp, max_temp, min_temp, total_precip)

    thaw = None
    if is_thaw_day(max_temp, total_precip):
        thaw = ThawCondition(date=iso, max_temp=max_temp, total_precip=rounded_precip)

    accumulated = project_snow_depth(accumulated, avg_temp, total_precip)
    icon = icon_from_symbol(most_common_symbol(bucket.symbols), avg_temp, total_precip)

    forecast_day = ForecastDay(
        date=iso,
        day_name=day_name,
        date_label=date_label,
        snow_depth_cm=round_half_up(accumulated),
        min_temp=min_temp,
        max_temp=max_temp,
        avg_temp=avg_temp,
        precip_amount_mm=rounded_precip,
        precip_type=kind,
        precip_label=precip_label(rounded_precip, kind),
        icon=icon,
    )
    return forecast_day, accumulated, thaw


def _synthetic_day(day: date, lat: float, accumulated: float) -> ForecastDay:
    """Päivä, jolle ennusteesta ei löytynyt lämpötiloja."""
    iso, day_name, date_label = day_labels(day)
    default_temp = -8 if lat > 64 else -3
    return ForecastDay(
        date=iso,
        day_name=day_name,
        date_label=date_label,
        snow_depth_cm=round_half_up(accumulated),
        min_temp=default_temp - 3,
        max_temp=default_temp + 2,
        avg_temp=default_temp,
        precip_amount_mm=0.0,
        precip_type="none",
        precip_label="0 mm",
        icon="cloudy",
    )


def build_forecast(
    buckets: dict[str, DayBucket], lat: float, today: date, current_depth_cm: float
) -> ForecastResult:
    """Kolme päivää huomisesta alkaen; lumensyvyys kulkee päivästä toiseen."""
    days: list[ForecastDay] = []
    thaw_conditions: list[ThawCondition] = []
    accumulated = float(current_depth_cm)

    for i in range(1, FORECAST_DAYS + 1):
        day = today + timedelta(days=i)
        bucket = buckets.get(day.isoformat())

        if bucket is None or not bucket.temps:
            days.append(_synthetic_day(day, lat, accumulated))
            continue

        forecast_day, accumulated, thaw = _observed_day(day, bucket, accumulated)
        days.append(forecast_day)
        if thaw is not None:
            thaw_conditions.append(thaw)

    return ForecastResult(
        forecast=days,
        has_thaw_conditions=bool(thaw_conditions),
        thaw_conditions=thaw_conditions,
    )


def _fallback(lat: float, today: date) -> ForecastResult:
    return ForecastResult(forecast=fallback_forecast(lat, today))


def get_snow_forecast_with_thaw_warning(
    lat: float,
    lon: float,
    threshold: int,
    *,
    current_depth_cm: float | None = None,
    now: datetime | None = None,
) -> ForecastResult:
    """
    Julkinen entry point ennusteelle.

    current_depth_cm: asemahaun jo selvittämä lähtösyvyys. Jos None,
    syvyys haetaan tässä (pelkillä koordinaateilla).
    threshold ei vaikuta ennusteeseen; se on mukana kutsujan rajapinnassa.
    """
    now = now or datetime.now(UTC)
    today = now.astimezone(TZ).date()

    try:
        start, end = forecast_window(today)
        logger.info("FMI forecast query for (%s, %s): %s – %s", lat, lon, start, end)
        xml_text = fetch_forecast_xml(lat, lon, start, end)

        buckets = parse_forecast_buckets(xml_text, TZ)
        if not buckets:
            logger.warning("Could not parse FMI forecast response, using seasonal forecast")
            return _fallback(lat, today)

        if current_depth_cm is None:
            current_depth_cm = get_snow_depth_with_station_info(lat, lon, now=now).depth_cm

        return build_forecast(buckets, lat, today, current_depth_cm)
    except Exception as e:
        logger.error("Error fetching forecast, using seasonal forecast: %s", e)
        return _fallback(lat, today)
