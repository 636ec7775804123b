import pyarrow as pa
import pytest
from starlette.requests import Request

from aquaponics_charts.entities.render_model import ClassifiedPoint
from aquaponics_charts.enums.status import ReadingStatus
from aquaponics_charts.utils.arrow_response import (
    ARROW_MIME,
    SERIES_SCHEMA,
    client_wants_arrow,
    series_to_table,
)

from .conftest import T0


def _request(accept=None):
    headers = [] if accept is None else [(b"accept", accept.encode())]
    return Request({"type": "http", "method": "POST", "path": "/", "headers": headers})


@pytest.mark.parametrize(
    "accept, expected",
    [
        (None, False),
        ("application/json", False),
        (ARROW_MIME, True),
        (f"application/json, {ARROW_MIME};q=0.5", True),
        (f"{ARROW_MIME};q=0, application/json", False),
        (f"{ARROW_MIME}; q=0.0", False),
        ("APPLICATION/VND.APACHE.ARROW.STREAM", True),
    ],
)
def test_client_wants_arrow(accept, expected):
    assert client_wants_arrow(_request(accept)) is expected


def test_series_table_has_fixed_schema():
    series = [
        ClassifiedPoint(time=T0, value=21.5, status=ReadingStatus.OPTIMAL, color=ReadingStatus.OPTIMAL.color),
        ClassifiedPoint(time=T0, value=30.0, status=ReadingStatus.HIGH, color=ReadingStatus.HIGH.color),
    ]
    table = series_to_table(series)

    assert table.schema.equals(SERIES_SCHEMA)
    assert table.column("value").to_pylist() == [21.5, 30.0]
    assert table.column("status").to_pylist() == ["optimal", "high"]
    assert table.schema.field("time").type == pa.timestamp("us", tz="UTC")


def test_empty_series_keeps_schema():
    table = series_to_table([])
    assert table.num_rows == 0
    assert table.schema.equals(SERIES_SCHEMA)
