from __future__ import annotations

import math
from typing import Any

import pandas as pd


def _cast_to_float(value: Any) -> float | None:
    """Muunna annettu arvo float-tyypiksi, tai palauta None jos muunnos epäonnistuu."""
    if isinstance(value, str):
        value = value.strip().replace(",", ".")

    try:
        out = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None

    # FMI palauttaa puuttuvan arvon merkkijonona "NaN"
    if math.isnan(out) or math.isinf(out):
        return None
    return out


def _cast_to_int(value: Any) -> int | None:
    """Muunna annettu arvo int-tyypiksi, tai palauta None jos muunnos epäonnistuu."""
    out = _cast_to_float(value)
    return int(out) if out is not None else None


def _normalize_scalar(value: Any) -> Any | None:
    """
    Yhtenäinen esikäsittely eri lähdetyypeille:
    - None → None
    - pandas NA → None
    - numpy-scalar tms. → .item()
    """
    if value is None:
        return None

    try:
        if pd.isna(value):
            return None
    except (TypeError, ValueError):
        # pd.isna ei osaa käsitellä tyyppiä (esim. lista) → jatketaan
        pass

    if hasattr(value, "item"):
        try:
            value = value.item()
        except (TypeError, ValueError):
            pass

    return value


def safe_cast(value: Any, type_: type) -> Any | None:
    """
    Turvallinen muunnos annetuksi tyypiksi (int, float, str).
    Palauttaa None, jos muunnos ei onnistu.
    """
    value = _normalize_scalar(value)
    if value is None:
        return None

    if type_ is float:
        return _cast_to_float(value)
    if type_ is int:
        return _cast_to_int(value)

    try:
        return type_(value)
    except (TypeError, ValueError):
        return None


def as_int(x: Any) -> int | None:
    return safe_cast(x, int)


def as_float(x: Any) -> float | None:
    return safe_cast(x, float)


def round_half_up(x: float) -> int:
    """Pyöristys puolikkaat ylöspäin (-2.5 → -2, 2.5 → 3), ei pankkiiripyöristystä."""
    return math.floor(x + 0.5)
