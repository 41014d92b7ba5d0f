# lumivahti/api/seasonal.py
"""
Karkeat leveysaste- ja kuukausipohjaiset arviot, joita käytetään kun
havaintoasemaa tai ennustetta ei saada. Vakiot on viritetty käsin, eivät
ole mallin tuloksia: UI:n käytös katkosten aikana riippuu niistä.

Kuukausi-indeksi on 0–11 (tammikuu = 0).
"""

from __future__ import annotations

from datetime import date, timedelta

from lumivahti.api.models import ForecastDay, SnowDepthResult
from lumivahti.config import FORECAST_DAYS

FI_DAY_NAMES = ("Ma", "Ti", "Ke", "To", "Pe", "La", "Su")


def month_index(day: date) -> int:
    return day.month - 1


def day_labels(day: date) -> tuple[str, str, str]:
    """(ISO-päivä, viikonpäivä, "Pe 28.11.")"""
    day_name = FI_DAY_NAMES[day.weekday()]
    return day.isoformat(), day_name, f"{day_name} {day.day}.{day.month}."


def estimate_snow_depth(lat: float, today: date) -> int:
    """Lumensyvyysarvio (cm) leveysvyöhykkeen ja vuodenajan mukaan."""
    month = month_index(today)
    is_winter = month >= 10 or month <= 2
    # talvi tarkistetaan ensin, joten käytännössä vain huhtikuu (3)
    is_late_winter = month in (2, 3)

    if lat > 68:  # Kilpisjärvi, Utsjoki
        return 25 if is_winter else (15 if is_late_winter else 5)
    if lat > 66:  # Rovaniemi
        return 15 if is_winter else (8 if is_late_winter else 2)
    if lat > 64:  # Oulu
        return 10 if is_winter else (5 if is_late_winter else 0)
    if lat > 62:  # Kuopio
        return 8 if is_winter else (3 if is_late_winter else 0)
    return 3 if is_winter else 0


def estimated_depth_result(lat: float, today: date) -> SnowDepthResult:
    """Arvio ilman asematietoja."""
    return SnowDepthResult(depth_cm=estimate_snow_depth(lat, today))


def fallback_forecast(lat: float, today: date) -> list[ForecastDay]:
    """Tasainen synteettinen kolmen päivän ennuste."""
    month = month_index(today)
    is_winter = month >= 10 or month <= 3

    base_snow = 45 if lat > 64 else 30 if lat > 62 else 15
    base_temp = -12 if lat > 64 else -8 if lat > 62 else -4

    days: list[ForecastDay] = []
    for i in range(1, FORECAST_DAYS + 1):
        iso, day_name, date_label = day_labels(today + timedelta(days=i))
        temp = base_temp + (i % 3 - 1) * 2
        days.append(
            ForecastDay(
                date=iso,
                day_name=day_name,
                date_label=date_label,
                snow_depth_cm=base_snow + i * 2 if is_winter else max(0, base_snow - i * 3),
                min_temp=temp - 3,
                max_temp=temp + 2,
                avg_temp=temp,
                precip_amount_mm=1.0 if is_winter else 0.0,
                precip_type="snow" if is_winter else "none",
                precip_label="0–1 mm lunta" if is_winter else "0 mm",
                icon="snow" if is_winter else "cloudy",
            )
        )
    return days
