from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

from ..enums.downsampling import DownsamplingMethod
from ..enums.granularity import GranularityBucket
from ..enums.status import ReadingStatus


class ClassifiedPoint(BaseModel):
    """Sampled reading with its status and display color."""
    time: datetime
    value: float
    status: ReadingStatus
    color: str


class SummaryStats(BaseModel):
    """Extrema and mean of the full, unsampled series."""
    min: float = 0.0
    max: float = 0.0
    avg: float = 0.0


class AxisConfig(BaseModel):
    """X axis configuration for the rendering side."""
    bucket: GranularityBucket
    label_format: str
    tooltip_format: str
    tick_unit: str
    min_tick_spacing: int
    tick_step: int
    timezone: str
    locale: str
    start: datetime
    end: datetime


class SamplingInfo(BaseModel):
    original_count: int = 0
    sampled_count: int = 0
    sampled: bool = False
    method: DownsamplingMethod = DownsamplingMethod.VARIATION


class RenderModel(BaseModel):
    """
    Render-ready chart structure.

    ``state`` is ``"empty"`` when there was nothing to draw. In that case the
    axis, summary and dominant status are absent rather than zeroed, so
    callers must branch on ``state``.
    """
    state: Literal["ready", "empty"]
    axis_config: Optional[AxisConfig] = None
    series: List[ClassifiedPoint] = Field(default_factory=list)
    dominant_status: Optional[ReadingStatus] = None
    dominant_color: Optional[str] = None
    summary: Optional[SummaryStats] = None
    sampling_info: SamplingInfo = Field(default_factory=SamplingInfo)

    @property
    def is_empty(self) -> bool:
        return self.state == "empty"

    @classmethod
    def empty(cls, method: DownsamplingMethod = DownsamplingMethod.VARIATION) -> "RenderModel":
        return cls(state="empty", sampling_info=SamplingInfo(method=method))
