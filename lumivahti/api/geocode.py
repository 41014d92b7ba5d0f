# lumivahti/api/geocode.py
"""
Postinumero → koordinaatit.

1) staattinen taulukko (postal_data.POSTAL_CODES)
2) Nominatim-geokoodaus Suomeen rajattuna, tulos välimuistiin prosessin ajaksi

Myös "ei löytynyt" -tulos jää välimuistiin, jotta samaa numeroa ei kysytä
uudelleen.
"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Any

from lumivahti.api.http import http_get_json
from lumivahti.api.models import PostalLocation
from lumivahti.api.postal_data import POSTAL_CODES
from lumivahti.api.weather_utils import as_float
from lumivahti.config import NOMINATIM_URL

logger = logging.getLogger("lumivahti")

UNKNOWN_CITY = "Unknown"

_MISSING = object()


class GeocodeCache:
    """
    Postinumerokohtainen välimuisti. Arvo None = tiedetty huti.

    Taustasäiliö on vaihdettavissa (testeissä oma dict, tuotannossa
    prosessin oma). Kirjoitukset ovat idempotentteja: sama postinumero
    tuottaa aina saman arvon, joten rinnakkaiset kirjoitukset eivät riko mitään.
    """

    def __init__(self, backing: MutableMapping[str, PostalLocation | None] | None = None):
        self._store: MutableMapping[str, PostalLocation | None] = (
            backing if backing is not None else {}
        )

    def __contains__(self, postal_code: object) -> bool:
        return postal_code in self._store

    def __len__(self) -> int:
        return len(self._store)

    def get(self, postal_code: str) -> Any:
        """Palauttaa arvon tai _MISSING-vahdin, jos avainta ei ole."""
        return self._store.get(postal_code, _MISSING)

    def set(self, postal_code: str, value: PostalLocation | None) -> None:
        self._store[postal_code] = value

    def clear(self) -> None:
        self._store.clear()


GEOCODE_CACHE = GeocodeCache()


def lookup_static(postal_code: str) -> PostalLocation | None:
    entry = POSTAL_CODES.get(postal_code)
    if entry is None:
        return None
    lat, lon, city = entry
    return PostalLocation(postal_code=postal_code, latitude=lat, longitude=lon, city_name=city)


def city_from_display_name(display_name: Any) -> str:
    """'33720, Tampere, Pirkanmaa, Suomi' → 'Tampere'."""
    if not isinstance(display_name, str):
        return UNKNOWN_CITY
    parts = [p.strip() for p in display_name.split(",")]
    if len(parts) >= 2 and parts[1]:
        return parts[1]
    return UNKNOWN_CITY


def _parse_candidate(postal_code: str, data: Any) -> PostalLocation | None:
    if not isinstance(data, list) or not data:
        return None

    first = data[0]
    if not isinstance(first, dict):
        return None

    lat = as_float(first.get("lat"))
    lon = as_float(first.get("lon"))
    if lat is None or lon is None:
        return None

    return PostalLocation(
        postal_code=postal_code,
        latitude=lat,
        longitude=lon,
        city_name=city_from_display_name(first.get("display_name")),
    )


def geocode_postal_code(
    postal_code: str, cache: GeocodeCache | None = None
) -> PostalLocation | None:
    """Nominatim-haku välimuistin kautta. Mikä tahansa virhe → None."""
    cache = GEOCODE_CACHE if cache is None else cache

    cached = cache.get(postal_code)
    if cached is not _MISSING:
        return cached

    params = {
        "q": f"{postal_code}, Finland",
        "format": "json",
        "countrycodes": "fi",
        "limit": 1,
    }
    logger.info("Geocoding postal code %s", postal_code)

    try:
        data = http_get_json(NOMINATIM_URL, params=params)
        info = _parse_candidate(postal_code, data)
    except Exception as e:
        logger.warning("Geocoding %s failed: %s", postal_code, e)
        info = None

    if info is None:
        logger.warning("No geocoding result for postal code %s", postal_code)
    else:
        logger.info(
            "Geocoded %s -> %s (%s, %s)", postal_code, info.city_name, info.latitude, info.longitude
        )

    cache.set(postal_code, info)
    return info


def resolve_postal_code(
    postal_code: str, cache: GeocodeCache | None = None
) -> PostalLocation | None:
    """Staattinen taulukko ensin, sitten geokoodaus. None = postinumeroa ei löytynyt."""
    info = lookup_static(postal_code)
    if info is not None:
        return info

    logger.info("Postal code %s not in static map, using geocoding", postal_code)
    return geocode_postal_code(postal_code, cache=cache)
