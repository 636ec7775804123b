import io
from typing import List, Optional

import pyarrow as pa
import pyarrow.ipc as pa_ipc
from starlette.requests import Request
from starlette.responses import StreamingResponse

from ..entities.render_model import ClassifiedPoint

ARROW_MIME = "application/vnd.apache.arrow.stream"
RENDER_STATE_HEADER = "X-Render-State"

SERIES_SCHEMA = pa.schema([
    pa.field("time", pa.timestamp("us", tz="UTC")),
    pa.field("value", pa.float64()),
    pa.field("status", pa.string()),
    pa.field("color", pa.string()),
])


def _accepted_types(accept: str) -> List[str]:
    """Media types listed in an Accept header, minus those sent with q=0."""
    accepted = []
    for media_range in accept.split(","):
        media_type, *params = [part.strip() for part in media_range.split(";")]
        if any(param.replace(" ", "") in ("q=0", "q=0.0", "q=0.00", "q=0.000") for param in params):
            continue
        if media_type:
            accepted.append(media_type.lower())
    return accepted


def client_wants_arrow(request: Request) -> bool:
    """True when the Accept header asks for the Arrow IPC stream format."""
    return ARROW_MIME in _accepted_types(request.headers.get("accept", ""))


def series_to_table(series: List[ClassifiedPoint]) -> pa.Table:
    """Columnar time/value/status/color table of a classified series."""
    return pa.Table.from_arrays(
        [
            pa.array([point.time for point in series], type=SERIES_SCHEMA.field("time").type),
            pa.array([point.value for point in series], type=pa.float64()),
            pa.array([point.status.value for point in series], type=pa.string()),
            pa.array([point.color for point in series], type=pa.string()),
        ],
        schema=SERIES_SCHEMA,
    )


def series_to_arrow_streaming_response(
    series: List[ClassifiedPoint],
    state: str = "ready",
    filename: Optional[str] = "series.arrow",
) -> StreamingResponse:
    """
    Arrow IPC stream of a classified series.

    The render state travels in the X-Render-State header, since an empty
    chart and a zero-row table are not the same thing to the caller.
    """
    table = series_to_table(series)
    sink = pa.BufferOutputStream()
    with pa_ipc.new_stream(sink, SERIES_SCHEMA) as writer:
        writer.write_table(table)

    return StreamingResponse(
        io.BytesIO(sink.getvalue().to_pybytes()),
        media_type=ARROW_MIME,
        headers={
            RENDER_STATE_HEADER: state,
            "Content-Disposition": f'inline; filename="{filename}"',
        },
    )
