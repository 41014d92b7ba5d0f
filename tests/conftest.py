from __future__ import annotations

from types import SimpleNamespace

import pytest

from lumivahti.api.geocode import GeocodeCache

_HREF = "https://opendata.fmi.fi/meta?observableProperty=forecast&amp;param={prop}&amp;language=eng"


def build_series(
    name: str | None = None,
    pos: tuple[float, float] | None = None,
    measurements: tuple[tuple[str, str], ...] | list[tuple[str, str]] = (),
    prop: str | None = None,
) -> str:
    """Yksi omso:PointTimeSeriesObservation FMI:n WFS-muodossa."""
    parts = ['<omso:PointTimeSeriesObservation gml:id="obs-obs-1-1">']
    if prop:
        parts.append(f'<om:observedProperty xlink:href="{_HREF.format(prop=prop)}"/>')
    parts.append("<om:featureOfInterest><sams:SF_SpatialSamplingFeature>")
    if name:
        parts.append(f'<gml:name codeSpace="http://xml.fmi.fi/namespace/locationcode/name">{name}</gml:name>')
    if pos:
        parts.append(f'<gml:pos srsDimension="2">{pos[0]} {pos[1]} </gml:pos>')
    parts.append("</sams:SF_SpatialSamplingFeature></om:featureOfInterest>")
    parts.append("<om:result><wml2:MeasurementTimeseries>")
    for ts, value in measurements:
        parts.append(
            "<wml2:point><wml2:MeasurementTVP>"
            f"<wml2:time>{ts}</wml2:time>"
            f"<wml2:value>{value}</wml2:value>"
            "</wml2:MeasurementTVP></wml2:point>"
        )
    parts.append("</wml2:MeasurementTimeseries></om:result>")
    parts.append("</omso:PointTimeSeriesObservation>")
    return "\n".join(parts)


def build_document(*series: str) -> str:
    members = "".join(f"<wfs:member>{s}</wfs:member>" for s in series)
    return f'<?xml version="1.0" encoding="UTF-8"?><wfs:FeatureCollection>{members}</wfs:FeatureCollection>'


@pytest.fixture
def wfs():
    return SimpleNamespace(series=build_series, document=build_document)


@pytest.fixture
def geocode_cache():
    return GeocodeCache({})
