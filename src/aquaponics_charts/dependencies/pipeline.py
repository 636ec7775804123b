from functools import lru_cache

from ..app_settings import app_settings
from ..services.chart_pipeline import ChartPipeline


@lru_cache()
def get_chart_pipeline() -> ChartPipeline:
    """Get the chart pipeline instance (singleton, stateless)."""
    return ChartPipeline.from_settings(app_settings)
