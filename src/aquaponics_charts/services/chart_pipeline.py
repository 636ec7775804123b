import logging
from typing import List, Optional, Sequence

import pandas as pd

from ..app_settings import AppSettings
from ..entities.reading import Reading, ThresholdBand, TimeWindow
from ..entities.render_model import AxisConfig, ClassifiedPoint, RenderModel, SamplingInfo
from ..enums.downsampling import DownsamplingMethod
from ..enums.status import ReadingStatus
from ..utils.frames import readings_to_frame
from ..utils.sampling import WINDOW_HALF_WIDTH, intelligent_sample
from ..utils.summary import summarize
from ..utils.thresholds import classify_series, dominant_status
from ..utils.tick_format import select_tick_format, tick_step
from ..utils.time_range import classify_time_range

logger = logging.getLogger(__name__)


class ChartPipeline:
    """
    Turns raw readings into a render-ready chart model.

    Holds configuration only; every call works on its own inputs, so one
    instance can serve any number of charts.
    """

    def __init__(
        self,
        default_points: int = 150,
        sampling_floor: int = 50,
        target_ticks: int = 8,
        timezone: str = "UTC",
        locale: str = "es",
        window_half_width: float = WINDOW_HALF_WIDTH,
    ):
        self.default_points = default_points
        self.sampling_floor = sampling_floor
        self.target_ticks = target_ticks
        self.timezone = timezone
        self.locale = locale
        self.window_half_width = window_half_width

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "ChartPipeline":
        return cls(
            default_points=settings.default_points,
            sampling_floor=settings.sampling_floor,
            target_ticks=settings.target_ticks,
            timezone=settings.display_timezone,
            locale=settings.display_locale,
            window_half_width=settings.window_half_width,
        )

    def build_axis_config(
        self,
        df: pd.DataFrame,
        explicit_range: Optional[TimeWindow],
        timezone: str,
        locale: str,
    ) -> AxisConfig:
        """Resolve the displayed range and pick its label rule."""
        if explicit_range is not None:
            start, end = explicit_range.start, explicit_range.end
        else:
            start = df["time"].iloc[0].to_pydatetime()
            end = df["time"].iloc[-1].to_pydatetime()

        bucket = classify_time_range(start, end)
        tick_format = select_tick_format(bucket, timezone=timezone, locale=locale)

        return AxisConfig(
            bucket=bucket,
            label_format=tick_format.label_format,
            tooltip_format=tick_format.tooltip_format,
            tick_unit=tick_format.tick_unit,
            min_tick_spacing=tick_format.min_tick_spacing,
            tick_step=tick_step(start, end, tick_format, self.target_ticks),
            timezone=tick_format.timezone,
            locale=tick_format.locale,
            start=start,
            end=end,
        )

    def sample(
        self,
        df: pd.DataFrame,
        max_points: int,
        method: DownsamplingMethod,
    ) -> pd.DataFrame:
        """Apply the point budget, leaving series at or below the sampling floor untouched."""
        floor = min(self.sampling_floor, max_points)
        if len(df) <= floor:
            return df
        return intelligent_sample(df, max_points, method=method, half_width=self.window_half_width)

    def run(
        self,
        readings: Sequence[Reading],
        thresholds: Optional[ThresholdBand] = None,
        explicit_range: Optional[TimeWindow] = None,
        max_points: Optional[int] = None,
        method: DownsamplingMethod = DownsamplingMethod.VARIATION,
        timezone: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> RenderModel:
        """
        Shape a reading series for rendering.

        Args:
            readings: Readings ordered by time; not modified
            thresholds: Optimal band, or None to show every point as optimal
            explicit_range: Displayed range; defaults to first/last reading
            max_points: Point budget; defaults to the pipeline's budget
            method: Point selection strategy used when sampling
            timezone: Label timezone override
            locale: Label locale override

        Returns:
            RenderModel in state "ready", or the empty-state model when there
            are no readings
        """
        if not readings:
            return RenderModel.empty(method)

        budget = max_points if max_points is not None else self.default_points
        df = readings_to_frame(readings)

        axis_config = self.build_axis_config(
            df,
            explicit_range,
            timezone or self.timezone,
            locale or self.locale,
        )

        sampled = self.sample(df, budget, method)
        classified = classify_series(sampled, thresholds)
        series = self._to_points(classified)
        dominant = dominant_status(classified["status"])

        summary = summarize(df)

        logger.debug(
            f"Rendered {len(df)} readings as {len(series)} points "
            f"({axis_config.bucket.value}, dominant={dominant.value})"
        )

        return RenderModel(
            state="ready",
            axis_config=axis_config,
            series=series,
            dominant_status=dominant,
            dominant_color=dominant.color,
            summary=summary,
            sampling_info=SamplingInfo(
                original_count=len(df),
                sampled_count=len(series),
                sampled=len(series) < len(df),
                method=method,
            ),
        )

    @staticmethod
    def _to_points(classified: pd.DataFrame) -> List[ClassifiedPoint]:
        return [
            ClassifiedPoint(
                time=time.to_pydatetime(),
                value=float(value),
                status=ReadingStatus(status),
                color=color,
            )
            for time, value, status, color in zip(
                classified["time"], classified["value"], classified["status"], classified["color"]
            )
        ]
