import math
from datetime import datetime
from typing import Dict
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict

from ..entities.reading import as_utc
from ..enums.granularity import GranularityBucket
from ..exceptions.chart_exceptions import InvalidDisplaySettingsError

SUPPORTED_LOCALES = ("es", "en")

UNIT_SECONDS: Dict[str, float] = {
    "second": 1.0,
    "minute": 60.0,
    "hour": 3600.0,
    "day": 86400.0,
    "week": 7 * 86400.0,
    "month": 30.436875 * 86400.0,
    "year": 365.2425 * 86400.0,
}

_MONTHS = {
    "es": ["enero", "febrero", "marzo", "abril", "mayo", "junio", "julio",
           "agosto", "septiembre", "octubre", "noviembre", "diciembre"],
    "en": ["January", "February", "March", "April", "May", "June", "July",
           "August", "September", "October", "November", "December"],
}

_WEEKDAYS = {
    "es": ["lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo"],
    "en": ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"],
}


class TickFormat(BaseModel):
    """Label rule and tick spacing for one granularity bucket."""
    model_config = ConfigDict(frozen=True)

    bucket: GranularityBucket
    label_format: str
    tooltip_format: str
    tick_unit: str
    min_tick_spacing: int
    timezone: str
    locale: str


# bucket -> (label strftime pattern, tooltip pattern, tick unit, minimum units between ticks)
_FORMAT_TABLE = {
    GranularityBucket.MINUTES: ("%H:%M:%S", "%a %d %b %Y %H:%M:%S", "minute", 1),
    GranularityBucket.HOURS: ("%H:%M", "%a %d %b %Y %H:%M", "hour", 1),
    GranularityBucket.DAYS: ("%d %b %H:%M", "%a %d %b %Y %H:%M", "day", 1),
    GranularityBucket.WEEKS: ("%d %b", "%a %d %b %Y", "week", 1),
    GranularityBucket.MONTHS: ("%b %Y", "%d %b %Y", "month", 1),
    GranularityBucket.YEARS: ("%d/%m/%Y", "%d %b %Y", "year", 1),
}


def resolve_timezone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidDisplaySettingsError(f"Unknown timezone: {name}") from e


def select_tick_format(
    bucket: GranularityBucket,
    timezone: str = "UTC",
    locale: str = "es",
) -> TickFormat:
    """
    Look up the axis label rule for a granularity bucket.

    The display timezone and locale are part of the returned rule so that
    formatting never depends on process-wide settings.
    """
    if locale not in SUPPORTED_LOCALES:
        raise InvalidDisplaySettingsError(
            f"Unsupported locale: {locale} (expected one of {', '.join(SUPPORTED_LOCALES)})"
        )
    resolve_timezone(timezone)

    label_format, tooltip_format, tick_unit, min_spacing = _FORMAT_TABLE[bucket]
    return TickFormat(
        bucket=bucket,
        label_format=label_format,
        tooltip_format=tooltip_format,
        tick_unit=tick_unit,
        min_tick_spacing=min_spacing,
        timezone=timezone,
        locale=locale,
    )


def tick_step(start: datetime, end: datetime, tick_format: TickFormat, target_ticks: int = 8) -> int:
    """Tick units between two rendered labels so at most ~target_ticks show."""
    span_seconds = max((as_utc(end) - as_utc(start)).total_seconds(), 0.0)
    units = span_seconds / UNIT_SECONDS[tick_format.tick_unit]
    step = math.ceil(units / max(target_ticks, 1))
    return max(tick_format.min_tick_spacing, step)


def _localize_names(pattern: str, moment: datetime, locale: str) -> str:
    month = _MONTHS[locale][moment.month - 1]
    weekday = _WEEKDAYS[locale][moment.weekday()]
    # Full names first so "%B" is not consumed as "%b"
    return (
        pattern
        .replace("%B", month)
        .replace("%b", month[:3])
        .replace("%A", weekday)
        .replace("%a", weekday[:3])
    )


def format_tick(moment: datetime, tick_format: TickFormat, tooltip: bool = False) -> str:
    """
    Render a timestamp with the bucket's label (or tooltip) pattern.

    Naive timestamps are read as UTC, never as the host's local time.
    """
    local = as_utc(moment).astimezone(resolve_timezone(tick_format.timezone))
    pattern = tick_format.tooltip_format if tooltip else tick_format.label_format
    return local.strftime(_localize_names(pattern, local, tick_format.locale))
