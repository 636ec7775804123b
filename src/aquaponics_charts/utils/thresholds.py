"""Threshold classification of readings and threshold configuration helpers."""
import json
import logging
from collections import Counter
from typing import Any, Dict, Iterable, Optional, Union

import numpy as np
import pandas as pd
from pydantic import ValidationError

from ..entities.reading import ExpandedBand, ThresholdBand
from ..enums.sensor_type import SensorType, normalize_sensor_type
from ..enums.status import STATUS_COLORS, STATUS_PRIORITY, ReadingStatus, Severity

logger = logging.getLogger(__name__)

DEFAULT_BANDS: Dict[SensorType, ThresholdBand] = {
    SensorType.TEMPERATURE: ThresholdBand(min=22, max=28),
    SensorType.PH: ThresholdBand(min=6.8, max=7.6),
    SensorType.OXYGEN: ThresholdBand(min=6, max=10),
}

FALLBACK_BAND = ThresholdBand(min=0, max=100)

SENSOR_UNITS: Dict[SensorType, str] = {
    SensorType.TEMPERATURE: "°C",
    SensorType.PH: "pH",
    SensorType.OXYGEN: "mg/L",
}

# Zone padding as a fraction of the optimal range
WARNING_MARGIN = 0.1
CRITICAL_MARGIN = 0.2


def classify_value(value: float, thresholds: Optional[ThresholdBand]) -> ReadingStatus:
    """low below min, high above max, optimal otherwise or without a band."""
    if thresholds is None:
        return ReadingStatus.OPTIMAL
    if value < thresholds.min:
        return ReadingStatus.LOW
    if value > thresholds.max:
        return ReadingStatus.HIGH
    return ReadingStatus.OPTIMAL


def classify_series(df: pd.DataFrame, thresholds: Optional[ThresholdBand]) -> pd.DataFrame:
    """Return a copy of df with 'status' and 'color' columns added."""
    classified = df.copy()
    values = classified["value"].to_numpy(dtype=float)

    if thresholds is None:
        statuses = np.full(len(values), ReadingStatus.OPTIMAL.value, dtype=object)
    else:
        statuses = np.where(
            values < thresholds.min,
            ReadingStatus.LOW.value,
            np.where(values > thresholds.max, ReadingStatus.HIGH.value, ReadingStatus.OPTIMAL.value),
        ).astype(object)

    classified["status"] = statuses
    classified["color"] = [STATUS_COLORS[ReadingStatus(status)] for status in statuses]
    return classified


def dominant_status(statuses: Iterable[Union[ReadingStatus, str]]) -> ReadingStatus:
    """
    Most frequent status of a series.

    Ties go to optimal, then low, then high. An empty series is optimal.
    """
    counts = Counter(ReadingStatus(status) for status in statuses)
    # max() keeps the first maximal element, so iteration order is the tie-break
    return max(STATUS_PRIORITY, key=lambda status: counts.get(status, 0))


def expand_threshold_band(band: ThresholdBand) -> ExpandedBand:
    """
    Widen an optimal band into warning and critical limits.

    Warning limits sit 10% of the band width outside min/max, critical
    limits 20%, rounded to two decimals.
    """
    width = band.max - band.min
    return ExpandedBand(
        min_critical=round(band.min - width * CRITICAL_MARGIN, 2),
        min_warning=round(band.min - width * WARNING_MARGIN, 2),
        max_warning=round(band.max + width * WARNING_MARGIN, 2),
        max_critical=round(band.max + width * CRITICAL_MARGIN, 2),
    )


def severity(value: float, zones: ExpandedBand) -> Severity:
    """critical outside the critical limits, warning outside the warning limits."""
    if value < zones.min_critical or value > zones.max_critical:
        return Severity.CRITICAL
    if value < zones.min_warning or value > zones.max_warning:
        return Severity.WARNING
    return Severity.OPTIMAL


def default_threshold_band(sensor_type: Union[SensorType, str, None]) -> ThresholdBand:
    """Factory optimal band of a sensor type, 0-100 for unknown types."""
    if not isinstance(sensor_type, SensorType):
        sensor_type = normalize_sensor_type(sensor_type)
    return DEFAULT_BANDS.get(sensor_type, FALLBACK_BAND)


def _band_from_entry(entry: Any) -> Optional[ThresholdBand]:
    if not isinstance(entry, dict):
        return None
    low, high = entry.get("min"), entry.get("max")
    if isinstance(low, bool) or isinstance(high, bool):
        return None
    if not isinstance(low, (int, float)) or not isinstance(high, (int, float)):
        return None
    return ThresholdBand(min=low, max=high)


def parse_threshold_settings(
    settings: Union[Dict[str, Any], str, None],
    sensor_type: Union[SensorType, str, None],
) -> Optional[ThresholdBand]:
    """
    Extract the threshold band of one sensor type from a user settings blob.

    Accepts the blob as a dict or a JSON string, in either the nested form
    ``{"thresholds": {"temperature": {"min": 22, "max": 28}}}`` or the flat
    form ``{"thresholds": {"temperatureMin": 22, "temperatureMax": 28}}``.

    Returns:
        The band, or None when the blob has no usable entry for the sensor.
        A band with min above max is not usable either.
    """
    if not isinstance(sensor_type, SensorType):
        sensor_type = normalize_sensor_type(sensor_type)
    if sensor_type is None or settings is None:
        return None

    if isinstance(settings, str):
        try:
            settings = json.loads(settings)
        except json.JSONDecodeError as e:
            logger.warning(f"Unreadable threshold settings: {e}")
            return None

    thresholds = settings.get("thresholds") if isinstance(settings, dict) else None
    if not isinstance(thresholds, dict):
        logger.warning("No thresholds field in settings")
        return None

    key = sensor_type.settings_key
    entry = thresholds.get(key)
    if entry is None and f"{key}Min" in thresholds:
        entry = {"min": thresholds.get(f"{key}Min"), "max": thresholds.get(f"{key}Max")}

    if entry is None:
        logger.warning(f"No thresholds found for {sensor_type.value}")
        return None

    try:
        band = _band_from_entry(entry)
    except ValidationError as e:
        logger.warning(f"Rejected thresholds for {sensor_type.value}: {e.errors()[0]['msg']}")
        return None

    if band is None:
        logger.warning(f"Thresholds for {sensor_type.value} are not numeric min/max values")
    return band
