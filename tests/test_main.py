# tests/test_main.py

import json
from datetime import UTC, datetime

import main
from lumivahti.api import PostalCodeNotFoundError
from lumivahti.api.models import SnowDataResult, StationInfo


def _result() -> SnowDataResult:
    return SnowDataResult(
        current_load=90,
        snow_depth=36,
        threshold=140,
        status="safe",
        status_text="Turvallinen",
        status_color="#22c55e",
        forecast=[],
        city="Kuopio",
        distance_from_reference_point=0,
        is_within_service_area=True,
        heavy_wet_snow_warning=False,
        thaw_conditions=[],
        station_info=StationInfo(
            name="Kuopio Savilahti",
            distance=1,
            updated_ago="juuri nyt",
            updated_at=datetime(2025, 1, 14, 10, 0, tzinfo=UTC),
        ),
    )


def test_main_prints_json(monkeypatch, capsys):
    calls = []

    def fake_get(postal_code, threshold):
        calls.append((postal_code, threshold))
        return _result()

    monkeypatch.setattr(main, "get_snow_data", fake_get)

    assert main.main(["70100", "120"]) == 0
    assert calls == [("70100", 120)]

    out = json.loads(capsys.readouterr().out)
    assert out["city"] == "Kuopio"
    assert out["station_info"]["updated_at"] == "2025-01-14T10:00:00+00:00"


def test_main_not_found(monkeypatch, capsys):
    def fake_get(postal_code, threshold):
        raise PostalCodeNotFoundError(postal_code)

    monkeypatch.setattr(main, "get_snow_data", fake_get)

    assert main.main(["12345"]) == 1
    out = json.loads(capsys.readouterr().out)
    assert out["error"] == "postal_code_not_found"


def test_main_usage_errors(capsys):
    assert main.main([]) == 2
    assert main.main(["70100", "abc"]) == 2
    assert "Virheellinen raja" in capsys.readouterr().err
