# lumivahti/api/snow_load.py
from __future__ import annotations

from typing import Final

from lumivahti.api.models import Status
from lumivahti.api.weather_utils import round_half_up
from lumivahti.config import (
    ALERT_THRESHOLD_RATIO,
    CUSTOM_THRESHOLD_MAX,
    CUSTOM_THRESHOLD_MIN,
    DEFAULT_THRESHOLD,
    SNOW_LOAD_FACTOR,
    STATUS_CRITICAL_PCT,
    STATUS_MODERATE_PCT,
)

CUSTOM_ROOF_TYPE: Final = "Oma raja"

# Kattotyyppi → kestoraja kg/m². "Oma raja" = käyttäjän oma arvo.
ROOF_TYPES: Final[dict[str, int]] = {
    "Omakotitalo (kestävä)": 180,
    "Vanhempi omakotitalo": 140,
    "Autokatos / varasto": 100,
    "Halli / peltikatos": 120,
    CUSTOM_ROOF_TYPE: 0,
}

# tila → (teksti, väri)
STATUS_PRESENTATION: Final[dict[str, tuple[str, str]]] = {
    "safe": ("Turvallinen", "#22c55e"),
    "moderate": ("Kohtalainen riski", "#eab308"),
    "critical": ("Kriittinen", "#ef4444"),
}


def snow_load(depth_cm: float) -> int:
    """Lumikuorma kg/m² lumensyvyydestä."""
    return round_half_up(depth_cm * SNOW_LOAD_FACTOR)


def load_percentage(load: float, threshold: float) -> float:
    return load / threshold * 100


def classify_percentage(percentage: float) -> Status:
    if percentage >= STATUS_CRITICAL_PCT:
        return "critical"
    if percentage >= STATUS_MODERATE_PCT:
        return "moderate"
    return "safe"


def classify_load(load: float, threshold: float) -> Status:
    return classify_percentage(load_percentage(load, threshold))


def status_text(status: Status) -> str:
    return STATUS_PRESENTATION[status][0]


def status_color(status: Status) -> str:
    return STATUS_PRESENTATION[status][1]


def is_valid_custom_threshold(value: int) -> bool:
    return CUSTOM_THRESHOLD_MIN <= value <= CUSTOM_THRESHOLD_MAX


def effective_threshold(roof_type: str | None, custom_threshold: int | None = None) -> int:
    """Käytettävä raja: oma arvo "Oma raja" -tyypillä, muuten taulukosta, oletus 140."""
    if roof_type == CUSTOM_ROOF_TYPE and custom_threshold:
        return custom_threshold
    return ROOF_TYPES.get(roof_type or "", 0) or DEFAULT_THRESHOLD


def normalize_threshold(threshold: int | None) -> int:
    """Puuttuva tai ei-positiivinen raja → oletusraja."""
    if threshold is None or threshold <= 0:
        return DEFAULT_THRESHOLD
    return threshold


def default_alert_threshold(threshold: int) -> int:
    """80 % rajasta, enintään 200 kg/m² (hälytysrajan yläraja)."""
    return min(round_half_up(threshold * ALERT_THRESHOLD_RATIO), CUSTOM_THRESHOLD_MAX)
