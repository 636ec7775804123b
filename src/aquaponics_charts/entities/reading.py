from datetime import datetime, timezone

from pydantic import BaseModel, Field, field_validator, model_validator

from ..exceptions.chart_exceptions import InvalidThresholdError


def as_utc(value: datetime) -> datetime:
    # Naive timestamps are stored as UTC by the acquisition side
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class Reading(BaseModel):
    """Single timestamped sensor value."""
    time: datetime
    value: float

    @field_validator("time")
    @classmethod
    def _normalize_time(cls, value: datetime) -> datetime:
        return as_utc(value)


class ThresholdBand(BaseModel):
    """Optimal range for one sensor series."""
    min: float = Field(description="Lowest optimal value")
    max: float = Field(description="Highest optimal value")

    @model_validator(mode="after")
    def _check_order(self) -> "ThresholdBand":
        if self.min > self.max:
            raise InvalidThresholdError(
                f"Threshold min ({self.min}) is greater than max ({self.max})"
            )
        return self


class TimeWindow(BaseModel):
    """Explicit display range requested by the caller."""
    start: datetime
    end: datetime

    @field_validator("start", "end")
    @classmethod
    def _normalize_bounds(cls, value: datetime) -> datetime:
        return as_utc(value)

    @model_validator(mode="after")
    def _check_order(self) -> "TimeWindow":
        if self.start > self.end:
            raise ValueError("Range start must not be after range end")
        return self


class ExpandedBand(BaseModel):
    """Warning and critical limits around an optimal band."""
    min_critical: float
    min_warning: float
    max_warning: float
    max_critical: float


class SensorThresholds(BaseModel):
    """Default band of a sensor type, as exposed to the frontend."""
    sensor_type: str
    unit: str
    thresholds: ThresholdBand
    zones: ExpandedBand
