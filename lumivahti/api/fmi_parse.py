# lumivahti/api/fmi_parse.py
"""
FMI:n WFS timevaluepair -vastausten jäsennys.

Vastaus on jono nimettyjä pistesarjoja (omso:PointTimeSeriesObservation),
joissa on aseman nimi, sijainti (gml:pos) ja aika/arvo-parit
(wml2:MeasurementTVP). Jäsennys tehdään säännöllisillä lausekkeilla, jotta
osittainen tai rikkinäinen dokumentti tuottaa sen mitä siitä saadaan:
  * sijainti puuttuu → sarja ohitetaan (ellei kutsuja tunne sijaintia)
  * arvo ei ole numero → näyte ohitetaan
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import UTC, datetime, tzinfo

from lumivahti.api.geo import distance_km
from lumivahti.api.models import SeriesReading, SnowDepthResult, SnowObservation
from lumivahti.api.weather_utils import as_float, round_half_up
from lumivahti.config import DEPTH_MAX_CM, DEPTH_MIN_CM

UNKNOWN_STATION = "Unknown"

_SERIES_RE = re.compile(
    r"<omso:PointTimeSeriesObservation[^>]*>(.*?)</omso:PointTimeSeriesObservation>", re.S
)
_NAME_RE = re.compile(r"<gml:name[^>]*>([^<]+)</gml:name>")
_POS_RE = re.compile(r"<gml:pos[^>]*>([^<]+)</gml:pos>")
_TVP_RE = re.compile(r"<wml2:MeasurementTVP>(.*?)</wml2:MeasurementTVP>", re.S)
_TIME_RE = re.compile(r"<wml2:time>([^<]+)</wml2:time>")
_VALUE_RE = re.compile(r"<wml2:value>([^<]+)</wml2:value>")
_PROPERTY_RE = re.compile(r'observedProperty[^>]*xlink:href="[^"]*/([^/"]+)"')


@dataclass
class DayBucket:
    temps: list[float] = field(default_factory=list)
    precip: list[float] = field(default_factory=list)
    symbols: list[float] = field(default_factory=list)


def parse_time(raw: str) -> datetime | None:
    """ISO-aikaleima → tz-tietoinen datetime (naivi tulkitaan UTC:ksi)."""
    try:
        dt = datetime.fromisoformat(raw.strip().replace("Z", "+00:00"))
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt


def iter_series(xml_text: str) -> list[str]:
    return _SERIES_RE.findall(xml_text or "")


def parse_position(content: str) -> tuple[float, float] | None:
    """Ensimmäinen gml:pos "lat lon" -pari, tai None."""
    match = _POS_RE.search(content or "")
    if not match:
        return None
    coords = match.group(1).split()
    if len(coords) < 2:
        return None
    lat, lon = as_float(coords[0]), as_float(coords[1])
    if lat is None or lon is None:
        return None
    return lat, lon


def parse_station_name(content: str) -> str:
    match = _NAME_RE.search(content)
    name = match.group(1).strip() if match else ""
    return name or UNKNOWN_STATION


def parse_measurements(content: str) -> list[tuple[datetime, float]]:
    """Kaikki numeeriset aika/arvo-parit dokumenttijärjestyksessä."""
    out: list[tuple[datetime, float]] = []
    for block in _TVP_RE.findall(content or ""):
        time_match = _TIME_RE.search(block)
        value_match = _VALUE_RE.search(block)
        # näyte ilman aikaa tai arvoa ohitetaan
        if not time_match or not value_match:
            continue
        value = as_float(value_match.group(1))
        ts = parse_time(time_match.group(1))
        if value is None or ts is None:
            continue
        out.append((ts, value))
    return out


def is_valid_depth(value: float) -> bool:
    return DEPTH_MIN_CM <= value < DEPTH_MAX_CM


def latest_valid_measurement(content: str) -> SnowObservation | None:
    """
    Uusin kelvollinen lumensyvyys. Saman aikaleiman tapauksessa
    dokumentissa myöhemmin tuleva voittaa.
    """
    latest: SnowObservation | None = None
    for ts, value in parse_measurements(content):
        if not is_valid_depth(value):
            continue
        if latest is None or ts >= latest.observed_at:
            latest = SnowObservation(depth_cm=value, observed_at=ts)
    return latest


def parse_station_series(xml_text: str) -> list[SeriesReading]:
    """Jokainen sarja omaksi lukemakseen; sijainti voi puuttua (None)."""
    readings: list[SeriesReading] = []
    for content in iter_series(xml_text):
        pos = parse_position(content)
        readings.append(
            SeriesReading(
                station_name=parse_station_name(content),
                latitude=pos[0] if pos else None,
                longitude=pos[1] if pos else None,
                latest=latest_valid_measurement(content),
            )
        )
    return readings


def nearest_station_reading(
    xml_text: str, lat: float, lon: float, max_distance_km: float
) -> SnowDepthResult | None:
    """
    Aluehaun tulos: lähin asema säteen sisällä, jolla on vähintään yksi
    kelvollinen mittaus. None, jos yksikään sarja ei kelpaa.
    """
    best: SnowDepthResult | None = None
    best_distance = float("inf")

    for reading in parse_station_series(xml_text):
        if reading.latitude is None or reading.longitude is None:
            continue
        if reading.latest is None:
            continue

        dist = distance_km(lat, lon, reading.latitude, reading.longitude)
        if dist > max_distance_km or dist >= best_distance:
            continue

        best_distance = dist
        best = SnowDepthResult(
            depth_cm=round_half_up(reading.latest.depth_cm),
            station_name=reading.station_name,
            station_distance_km=round_half_up(dist),
            updated_at=reading.latest.observed_at,
        )

    return best


def _series_kind(content: str) -> str:
    match = _PROPERTY_RE.search(content)
    name = match.group(1).lower() if match else ""
    if "temperature" in name:
        return "temps"
    if "precipitation" in name:
        return "precip"
    if "weathersymbol" in name:
        return "symbols"
    return ""


def parse_forecast_buckets(xml_text: str, tz: tzinfo) -> dict[str, DayBucket]:
    """
    Ennustesarjat päiväkohtaisiin koreihin (paikallinen kalenteripäivä,
    avain ISO-päivämäärä). Sarjan laji päätellään observedProperty-linkistä.
    """
    buckets: dict[str, DayBucket] = {}

    for content in iter_series(xml_text):
        kind = _series_kind(content)
        for ts, value in parse_measurements(content):
            key = ts.astimezone(tz).date().isoformat()
            bucket = buckets.setdefault(key, DayBucket())
            if kind:
                getattr(bucket, kind).append(value)

    return buckets
