# tests/test_snow_data.py
from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

import lumivahti.api.snow_data as sd
from lumivahti.api.models import ForecastResult, SnowDepthResult, ThawCondition
from lumivahti.api.seasonal import estimate_snow_depth, fallback_forecast

NOW = datetime(2025, 1, 14, 10, 0, tzinfo=UTC)


@pytest.fixture
def offline(monkeypatch):
    """Ei verkkoa: geokoodaus ei löydä mitään."""
    monkeypatch.setattr("lumivahti.api.geocode.http_get_json", lambda *a, **kw: [])


def _thaw_forecast(lat, lon, threshold, *, current_depth_cm=None, now=None):
    return ForecastResult(
        forecast=fallback_forecast(lat, now.date()),
        has_thaw_conditions=True,
        thaw_conditions=[ThawCondition("2025-01-15", 3, 6.0)],
    )


def test_unknown_postal_code_raises_not_found(offline, geocode_cache):
    with pytest.raises(sd.PostalCodeNotFoundError) as exc:
        sd.get_snow_data("12345", 140, now=NOW, cache=geocode_cache)

    assert exc.value.error == "postal_code_not_found"
    assert exc.value.postal_code == "12345"
    assert "Postinumeroa ei löytynyt" in str(exc.value)


def test_assembles_result(monkeypatch, offline, geocode_cache):
    observed = NOW - timedelta(hours=2)
    monkeypatch.setattr(
        sd,
        "get_snow_depth_with_station_info",
        lambda lat, lon, postal_code, now=None: SnowDepthResult(36, "Kuopio Savilahti", 1, observed),
    )
    monkeypatch.setattr(sd, "get_snow_forecast_with_thaw_warning", _thaw_forecast)

    result = sd.get_snow_data("70100", 140, now=NOW, cache=geocode_cache)

    assert result.current_load == 90
    assert result.snow_depth == 36
    assert result.status == "safe"
    assert result.status_text == "Turvallinen"
    assert result.city == "Kuopio"
    assert result.distance_from_reference_point == 0
    assert result.is_within_service_area is True
    assert result.heavy_wet_snow_warning is True
    assert len(result.forecast) == 3
    assert result.station_info.name == "Kuopio Savilahti"
    assert result.station_info.distance == 1
    assert result.station_info.updated_ago == "2 tuntia sitten"


def test_outside_service_area_and_default_threshold(monkeypatch, offline, geocode_cache):
    monkeypatch.setattr(
        sd, "get_snow_depth_with_station_info", lambda *a, **kw: SnowDepthResult(depth_cm=60)
    )
    monkeypatch.setattr(
        sd,
        "get_snow_forecast_with_thaw_warning",
        lambda lat, lon, threshold, **kw: ForecastResult(forecast=fallback_forecast(lat, NOW.date())),
    )

    result = sd.get_snow_data("00100", None, now=NOW, cache=geocode_cache)

    assert result.threshold == 140
    assert result.current_load == 150
    assert result.status == "critical"
    assert result.heavy_wet_snow_warning is False
    assert result.is_within_service_area is False
    assert result.distance_from_reference_point == 336
    assert result.station_info.updated_ago is None


def test_lower_level_failures_never_escape(monkeypatch, offline, geocode_cache):
    def boom(*a, **kw):
        raise RuntimeError("unexpected")

    monkeypatch.setattr(sd, "get_snow_depth_with_station_info", boom)
    monkeypatch.setattr(sd, "get_snow_forecast_with_thaw_warning", boom)
    monkeypatch.setattr(sd, "report_error", lambda ctx, e: None)

    result = sd.get_snow_data("00100", 140, now=NOW, cache=geocode_cache)

    assert result.snow_depth == estimate_snow_depth(60.1699, NOW.date())
    assert result.station_info.name is None
    assert result.forecast == fallback_forecast(60.1699, NOW.date())
    assert result.heavy_wet_snow_warning is False


def test_end_to_end_with_upstream_down(monkeypatch, offline, geocode_cache):
    def down(*a, **kw):
        raise ConnectionError("FMI down")

    monkeypatch.setattr("lumivahti.api.stations.http_get_text", down)
    monkeypatch.setattr("lumivahti.api.forecast.http_get_text", down)

    result = sd.get_snow_data("96100", 140, now=NOW, cache=geocode_cache)

    # Rovaniemi talvella: 15 cm arvio
    assert result.snow_depth == 15
    assert result.current_load == 38
    assert result.city == "Rovaniemi"
    assert len(result.forecast) == 3


def test_to_dict_is_json_ready(monkeypatch, offline, geocode_cache):
    observed = datetime(2025, 1, 14, 6, 0, tzinfo=UTC)
    monkeypatch.setattr(
        sd,
        "get_snow_depth_with_station_info",
        lambda *a, **kw: SnowDepthResult(20, "Kuopio Savilahti", 1, observed),
    )
    monkeypatch.setattr(sd, "get_snow_forecast_with_thaw_warning", _thaw_forecast)

    data = sd.get_snow_data("70100", 140, now=NOW, cache=geocode_cache).to_dict()

    assert data["station_info"]["updated_at"] == "2025-01-14T06:00:00+00:00"
    assert data["forecast"][0]["precip_type"] == "snow"
    assert data["thaw_conditions"] == [{"date": "2025-01-15", "max_temp": 3, "total_precip": 6.0}]
    assert data["status_color"] == "#22c55e"


@pytest.mark.parametrize(
    "delta, expected",
    [
        (timedelta(seconds=30), "juuri nyt"),
        (timedelta(minutes=1), "1 minuutti sitten"),
        (timedelta(minutes=45), "45 minuuttia sitten"),
        (timedelta(hours=1, minutes=5), "1 tunti sitten"),
        (timedelta(hours=23, minutes=59), "23 tuntia sitten"),
        (timedelta(hours=24), "1 päivä sitten"),
        (timedelta(days=3, hours=5), "3 päivää sitten"),
        (timedelta(minutes=-5), "juuri nyt"),
    ],
)
def test_format_updated_ago(delta, expected):
    assert sd.format_updated_ago(NOW - delta, NOW) == expected


def test_format_updated_ago_none():
    assert sd.format_updated_ago(None, NOW) is None


def test_naive_now_is_treated_as_utc(monkeypatch, offline, geocode_cache):
    observed = NOW - timedelta(hours=2)
    monkeypatch.setattr(
        sd,
        "get_snow_depth_with_station_info",
        lambda *a, **kw: SnowDepthResult(36, "Kuopio Savilahti", 1, observed),
    )
    monkeypatch.setattr(sd, "get_snow_forecast_with_thaw_warning", _thaw_forecast)

    result = sd.get_snow_data("70100", 140, now=NOW.replace(tzinfo=None), cache=geocode_cache)

    assert result.station_info.updated_ago == "2 tuntia sitten"
