from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from typing import Final

from lumivahti.api.weather_utils import as_int

# FMI:n sääsymbolit (WeatherSymbol3):
#   1 selkeää, 2 puolipilvistä, 3 pilvistä
#   21–25 kuuroja, 31–34 sadetta, 41–45 lumikuuroja, 51–54 lumisadetta
#   61–65 ukkosta, 71–74 räntää
# (alku, loppu) → ikoni; None = ikoni riippuu lämpötilasta
_ICON_BY_SYMBOL_RANGE: Final[tuple[tuple[int, int, str | None], ...]] = (
    (51, 54, "snow"),
    (41, 45, "snow"),
    (31, 34, "rain"),
    (21, 25, None),
    (71, 74, "rain"),
    (1, 1, "sunny"),
    (2, 2, "partly-cloudy"),
)


def most_common_symbol(symbols: Sequence[float]) -> int:
    """Yleisin symboli; tasatilanteessa ensin nähty. Tyhjä lista → 0."""
    codes = [c for c in (as_int(s) for s in symbols) if c is not None]
    if not codes:
        return 0
    # Counter säilyttää lisäysjärjestyksen ja most_common on vakaa
    return Counter(codes).most_common(1)[0][0]


def icon_from_symbol(symbol: int, temp: float, precip: float) -> str:
    """
    FMI-symboli → ikoniavain. Jos symboli ei ratkaise, päätellään
    sademäärästä ja lämpötilasta.
    """
    for start, end, icon in _ICON_BY_SYMBOL_RANGE:
        if start <= symbol <= end:
            if icon is None:
                return "snow" if temp < 0 else "rain"
            return icon

    if precip > 0 and temp < 0:
        return "snow"
    if precip > 0:
        return "rain"
    return "cloudy"
