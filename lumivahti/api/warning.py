# lumivahti/api/warning.py
"""
Raskaan märän lumen varoitus ja hälytystekstit.

Vain puhtaita funktioita: tila "onko varoitus jo näytetty" ja ilmoitusten
toimitus kuuluvat kutsujalle.
"""

from __future__ import annotations

from typing import Final, Literal

from lumivahti.api.snow_load import load_percentage
from lumivahti.config import WET_SNOW_LOAD_PCT

NotificationKind = Literal["regular", "wet-snow-warning"]

WET_SNOW_HEADING: Final = "Lumivahti: VAROITUS!"
WET_SNOW_MESSAGE: Final = "Lumi raskastumassa rajusti – lauha + vesisade tulossa. Tarkista katto."
REGULAR_HEADING: Final = "Lumivahti"

LOAD_RANGE: Final = (0, 500)
ALERT_THRESHOLD_RANGE: Final = (50, 200)


class InvalidNotificationError(ValueError):
    """Heitetään, jos hälytyksen tyyppi tai lukuarvot eivät kelpaa."""


def heavy_wet_snow_warning(current_load: float, threshold: float, has_thaw_conditions: bool) -> bool:
    """Kuorma ≥ 60 % rajasta ja ennusteessa vähintään yksi suojasääpäivä."""
    return load_percentage(current_load, threshold) >= WET_SNOW_LOAD_PCT and has_thaw_conditions


def should_alert(current_load: float, alert_threshold: float) -> bool:
    return current_load >= alert_threshold


def build_notification(
    kind: NotificationKind,
    current_load: int | None = None,
    alert_threshold: int | None = None,
) -> dict[str, str]:
    """Palauttaa {"headings", "message"} annetulle hälytystyypille."""
    if kind == "wet-snow-warning":
        return {"headings": WET_SNOW_HEADING, "message": WET_SNOW_MESSAGE}

    if kind != "regular":
        raise InvalidNotificationError(f"Virheellinen ilmoitustyyppi: {kind}")

    if current_load is None or not LOAD_RANGE[0] <= current_load <= LOAD_RANGE[1]:
        raise InvalidNotificationError("Virheellinen lumikuorma")
    if alert_threshold is None or not (
        ALERT_THRESHOLD_RANGE[0] <= alert_threshold <= ALERT_THRESHOLD_RANGE[1]
    ):
        raise InvalidNotificationError("Virheellinen hälytysraja")

    return {
        "headings": REGULAR_HEADING,
        "message": (
            f"Lumikuorma on nyt {current_load} kg/m² – "
            f"lähestyy hälytysrajaa ({alert_threshold} kg/m²)"
        ),
    }
