# tests/test_fmi_symbols.py
import pytest

from lumivahti.api.fmi_symbols import icon_from_symbol, most_common_symbol


def test_most_common_symbol_tie_goes_to_first_seen():
    assert most_common_symbol([3.0, 1.0, 1.0, 3.0]) == 3
    assert most_common_symbol([1, 31, 31]) == 31
    assert most_common_symbol([]) == 0


@pytest.mark.parametrize(
    "symbol, temp, precip, expected",
    [
        (52, 5, 0, "snow"),
        (43, 5, 0, "snow"),
        (32, -5, 0, "rain"),
        (22, -1, 0, "snow"),
        (22, 1, 0, "rain"),
        (72, -3, 0, "rain"),
        (1, 0, 0, "sunny"),
        (2, 0, 0, "partly-cloudy"),
        (0, -2, 1.0, "snow"),
        (0, 2, 1.0, "rain"),
        (3, 2, 0, "cloudy"),
        (64, 10, 0, "cloudy"),
    ],
)
def test_icon_from_symbol(symbol, temp, precip, expected):
    assert icon_from_symbol(symbol, temp, precip) == expected
