from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from ..app_settings import app_settings
from ..enums.downsampling import DownsamplingMethod
from .reading import Reading, ThresholdBand, TimeWindow


class ChartRequest(BaseModel):
    """Body of a chart render request."""
    readings: List[Reading] = Field(default_factory=list, description="Readings ordered by time")
    thresholds: Optional[ThresholdBand] = Field(None, description="Optimal band for the series")
    sensor_type: Optional[str] = Field(None, description="Sensor type, used with settings")
    settings: Optional[Union[Dict[str, Any], str]] = Field(
        None, description="User settings blob holding per-sensor thresholds"
    )
    range: Optional[TimeWindow] = Field(None, description="Explicit displayed range")
    points: Optional[int] = Field(
        None,
        ge=app_settings.points_min,
        le=app_settings.points_max,
        description="Point budget",
    )
    method: DownsamplingMethod = Field(DownsamplingMethod.VARIATION, description="variation|uniform")
    timezone: Optional[str] = Field(None, description="Timezone for axis labels")
    locale: Optional[str] = Field(None, description="Locale for axis labels (es|en)")
