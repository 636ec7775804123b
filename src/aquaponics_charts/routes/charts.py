import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from ..app_settings import app_settings
from ..dependencies.pipeline import get_chart_pipeline
from ..entities.chart_request import ChartRequest
from ..entities.reading import SensorThresholds, ThresholdBand
from ..enums.sensor_type import SensorType
from ..exceptions.chart_exceptions import ChartException
from ..services.chart_pipeline import ChartPipeline
from ..utils.arrow_response import client_wants_arrow, series_to_arrow_streaming_response
from ..utils.thresholds import (
    SENSOR_UNITS,
    default_threshold_band,
    expand_threshold_band,
    parse_threshold_settings,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/charts")


def resolve_thresholds(body: ChartRequest) -> Optional[ThresholdBand]:
    """Explicit band first, then the settings blob for the sensor type."""
    if body.thresholds is not None:
        return body.thresholds
    if body.settings is not None and body.sensor_type:
        return parse_threshold_settings(body.settings, body.sensor_type)
    return None


@router.post("/render")
def render_chart(
    request: Request,
    body: ChartRequest,
    pipeline: ChartPipeline = Depends(get_chart_pipeline),
) -> Dict[str, Any]:
    """Sample, classify and summarize a reading series for a chart."""
    try:
        model = pipeline.run(
            body.readings,
            thresholds=resolve_thresholds(body),
            explicit_range=body.range,
            max_points=body.points,
            method=body.method,
            timezone=body.timezone,
            locale=body.locale,
        )
    except ChartException as e:
        raise HTTPException(400, str(e))
    except Exception as e:
        logger.error(f"Error in render endpoint: {e}")
        raise HTTPException(500, f"Chart error: {str(e)}")

    if client_wants_arrow(request):
        return series_to_arrow_streaming_response(model.series, state=model.state, filename="series.arrow")

    return model.model_dump(mode="json")


@router.get("/constraints")
async def get_constraints() -> Dict[str, Any]:
    """Point budget limits and display defaults for the frontend."""
    return app_settings.get_api_constraints()


@router.get("/thresholds/defaults", response_model=List[SensorThresholds])
async def get_default_thresholds() -> List[SensorThresholds]:
    """Factory optimal bands per sensor type, with their warning and critical zones."""
    defaults = []
    for sensor_type in SensorType:
        band = default_threshold_band(sensor_type)
        defaults.append(
            SensorThresholds(
                sensor_type=sensor_type.value,
                unit=SENSOR_UNITS[sensor_type],
                thresholds=band,
                zones=expand_threshold_band(band),
            )
        )
    return defaults
