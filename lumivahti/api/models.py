# lumivahti/api/models.py
"""Pyyntökohtaiset tietorakenteet. Mitään ei tallenneta pysyvästi."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Literal

PrecipType = Literal["snow", "rain", "sleet", "none"]
Status = Literal["safe", "moderate", "critical"]


@dataclass(frozen=True)
class PostalLocation:
    postal_code: str
    latitude: float
    longitude: float
    city_name: str


@dataclass(frozen=True)
class ObservationStation:
    id: str
    name: str
    latitude: float | None = None
    longitude: float | None = None


@dataclass(frozen=True)
class SnowObservation:
    depth_cm: float
    observed_at: datetime


@dataclass(frozen=True)
class SeriesReading:
    """Yksi WFS-aikasarja: asema, sijainti (jos löytyi) ja uusin kelvollinen mittaus."""

    station_name: str
    latitude: float | None
    longitude: float | None
    latest: SnowObservation | None


@dataclass(frozen=True)
class SnowDepthResult:
    depth_cm: int
    station_name: str | None = None
    station_distance_km: int | None = None
    updated_at: datetime | None = None


@dataclass
class ForecastDay:
    date: str
    day_name: str
    date_label: str
    snow_depth_cm: int
    min_temp: int
    max_temp: int
    avg_temp: int
    precip_amount_mm: float
    precip_type: PrecipType
    precip_label: str
    icon: str


@dataclass(frozen=True)
class ThawCondition:
    date: str
    max_temp: int
    total_precip: float


@dataclass
class ForecastResult:
    forecast: list[ForecastDay]
    has_thaw_conditions: bool = False
    thaw_conditions: list[ThawCondition] = field(default_factory=list)


@dataclass(frozen=True)
class StationInfo:
    name: str | None
    distance: int | None
    updated_ago: str | None
    updated_at: datetime | None = None


@dataclass
class SnowDataResult:
    current_load: int
    snow_depth: int
    threshold: int
    status: Status
    status_text: str
    status_color: str
    forecast: list[ForecastDay]
    city: str
    distance_from_reference_point: int
    is_within_service_area: bool
    heavy_wet_snow_warning: bool
    thaw_conditions: list[ThawCondition]
    station_info: StationInfo

    def to_dict(self) -> dict[str, Any]:
        """JSON-kelpoinen muoto käyttöliittymälle (aikaleimat ISO-merkkijonoina)."""
        data = asdict(self)
        updated_at = self.station_info.updated_at
        data["station_info"]["updated_at"] = updated_at.isoformat() if updated_at else None
        return data
