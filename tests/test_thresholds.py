import json

import pandas as pd
import pytest
from pydantic import ValidationError

from aquaponics_charts.entities.reading import ExpandedBand, ThresholdBand
from aquaponics_charts.enums.sensor_type import SensorType, normalize_sensor_type
from aquaponics_charts.enums.status import ReadingStatus, Severity
from aquaponics_charts.utils.thresholds import (
    classify_series,
    classify_value,
    default_threshold_band,
    dominant_status,
    expand_threshold_band,
    parse_threshold_settings,
    severity,
)

BAND = ThresholdBand(min=20, max=28)


@pytest.mark.parametrize(
    "value, expected",
    [
        (19.9, ReadingStatus.LOW),
        (28.1, ReadingStatus.HIGH),
        (24.0, ReadingStatus.OPTIMAL),
        (20.0, ReadingStatus.OPTIMAL),
        (28.0, ReadingStatus.OPTIMAL),
    ],
)
def test_classify_value(value, expected):
    assert classify_value(value, BAND) == expected


@pytest.mark.parametrize("value", [-1e9, 0.0, 24.0, 1e9])
def test_no_thresholds_is_always_optimal(value):
    assert classify_value(value, None) == ReadingStatus.OPTIMAL


def test_malformed_band_is_rejected():
    with pytest.raises(ValidationError):
        ThresholdBand(min=28, max=20)
    assert ThresholdBand(min=5, max=5).min == 5


def test_classify_series_adds_status_and_color():
    df = pd.DataFrame({"value": [19.0, 24.0, 30.0]})
    classified = classify_series(df, BAND)

    assert classified["status"].tolist() == ["low", "optimal", "high"]
    assert classified["color"].tolist() == [
        ReadingStatus.LOW.color,
        ReadingStatus.OPTIMAL.color,
        ReadingStatus.HIGH.color,
    ]
    assert list(df.columns) == ["value"]

    unbanded = classify_series(df, None)
    assert set(unbanded["status"]) == {"optimal"}


@pytest.mark.parametrize(
    "statuses, expected",
    [
        (["low", "low", "optimal"], ReadingStatus.LOW),
        (["high", "high", "low"], ReadingStatus.HIGH),
        (["optimal", "low"], ReadingStatus.OPTIMAL),
        (["low", "high"], ReadingStatus.LOW),
        (["high", "optimal", "high", "optimal"], ReadingStatus.OPTIMAL),
        ([], ReadingStatus.OPTIMAL),
    ],
)
def test_dominant_status(statuses, expected):
    assert dominant_status(statuses) == expected


def test_three_distinct_status_colors():
    colors = {status.color for status in ReadingStatus}
    assert len(colors) == 3


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("temperature", SensorType.TEMPERATURE),
        ("Temperatura", SensorType.TEMPERATURE),
        (" ph ", SensorType.PH),
        ("oxigeno disuelto", SensorType.OXYGEN),
        ("OXIGENO", SensorType.OXYGEN),
        ("turbidity", None),
        ("", None),
        (None, None),
    ],
)
def test_normalize_sensor_type(raw, expected):
    assert normalize_sensor_type(raw) == expected


def test_default_bands():
    assert default_threshold_band(SensorType.TEMPERATURE) == ThresholdBand(min=22, max=28)
    assert default_threshold_band("ph") == ThresholdBand(min=6.8, max=7.6)
    assert default_threshold_band("oxigeno") == ThresholdBand(min=6, max=10)
    assert default_threshold_band("unknown") == ThresholdBand(min=0, max=100)


def test_parse_nested_settings():
    settings = {"thresholds": {"temperature": {"min": 20, "max": 28}, "ph": {"min": 6.5, "max": 8}}}
    assert parse_threshold_settings(settings, "TEMPERATURE") == ThresholdBand(min=20, max=28)
    assert parse_threshold_settings(settings, SensorType.PH) == ThresholdBand(min=6.5, max=8)
    assert parse_threshold_settings(settings, "oxygen") is None


def test_parse_settings_json_string_and_flat_form():
    blob = json.dumps({"thresholds": {"oxygenMin": 5, "oxygenMax": 9}})
    assert parse_threshold_settings(blob, "OXIGENO_DISUELTO") == ThresholdBand(min=5, max=9)


@pytest.mark.parametrize(
    "settings",
    [
        None,
        "{not json",
        {},
        {"thresholds": "nope"},
        {"thresholds": {"temperature": {"min": "20", "max": 28}}},
        {"thresholds": {"temperature": {"min": True, "max": 28}}},
        {"thresholds": {"temperature": {"min": 30, "max": 20}}},
    ],
)
def test_unusable_settings_give_no_band(settings):
    assert parse_threshold_settings(settings, "temperature") is None


def test_unknown_sensor_type_gives_no_band():
    assert parse_threshold_settings({"thresholds": {"level": {"min": 1, "max": 2}}}, "level") is None


def test_expand_band_pads_by_band_width():
    zones = expand_threshold_band(ThresholdBand(min=19, max=30))
    assert zones.min_critical == pytest.approx(16.8)
    assert zones.min_warning == pytest.approx(17.9)
    assert zones.max_warning == pytest.approx(31.1)
    assert zones.max_critical == pytest.approx(32.2)

    assert expand_threshold_band(ThresholdBand(min=22, max=28)) == ExpandedBand(
        min_critical=20.8, min_warning=21.4, max_warning=28.6, max_critical=29.2
    )


def test_expand_zero_width_band():
    zones = expand_threshold_band(ThresholdBand(min=7, max=7))
    assert (zones.min_critical, zones.min_warning, zones.max_warning, zones.max_critical) == (7, 7, 7, 7)


@pytest.mark.parametrize(
    "value, expected",
    [
        (24.0, Severity.OPTIMAL),
        (18.5, Severity.OPTIMAL),
        (17.9, Severity.OPTIMAL),
        (17.5, Severity.WARNING),
        (31.5, Severity.WARNING),
        (32.2, Severity.WARNING),
        (16.7, Severity.CRITICAL),
        (40.0, Severity.CRITICAL),
    ],
)
def test_severity_zones(value, expected):
    zones = expand_threshold_band(ThresholdBand(min=19, max=30))
    assert severity(value, zones) == expected


def test_severity_is_separate_from_reading_status():
    band = ThresholdBand(min=19, max=30)
    assert classify_value(18.5, band) == ReadingStatus.LOW
    assert severity(18.5, expand_threshold_band(band)) == Severity.OPTIMAL
    assert {status.value for status in ReadingStatus} == {"low", "optimal", "high"}
