# tests/test_warning.py
import pytest

import lumivahti.api.warning as w


def test_heavy_wet_snow_warning_needs_load_and_thaw():
    assert w.heavy_wet_snow_warning(90, 140, True) is True  # 64.3 %
    assert w.heavy_wet_snow_warning(90, 140, False) is False
    assert w.heavy_wet_snow_warning(80, 140, True) is False  # 57 %
    assert w.heavy_wet_snow_warning(84, 140, True) is True  # tasan 60 %


def test_should_alert():
    assert w.should_alert(112, 112)
    assert not w.should_alert(111, 112)


def test_build_notification_wet_snow():
    out = w.build_notification("wet-snow-warning")
    assert out["headings"] == "Lumivahti: VAROITUS!"
    assert "vesisade" in out["message"]


def test_build_notification_regular():
    out = w.build_notification("regular", current_load=115, alert_threshold=112)
    assert out["headings"] == "Lumivahti"
    assert out["message"] == "Lumikuorma on nyt 115 kg/m² – lähestyy hälytysrajaa (112 kg/m²)"


@pytest.mark.parametrize(
    "kind, load, alert",
    [
        ("spam", 100, 100),
        ("regular", None, 100),
        ("regular", 501, 100),
        ("regular", 100, 49),
        ("regular", 100, None),
    ],
)
def test_build_notification_rejects_invalid(kind, load, alert):
    with pytest.raises(w.InvalidNotificationError):
        w.build_notification(kind, current_load=load, alert_threshold=alert)
