from datetime import datetime, timedelta, timezone
from typing import Iterable, List

import pytest

from aquaponics_charts.entities.reading import Reading

T0 = datetime(2025, 3, 5, 15, 0, 0, tzinfo=timezone.utc)


def build_readings(
    values: Iterable[float],
    start: datetime = T0,
    step: timedelta = timedelta(minutes=1),
) -> List[Reading]:
    return [Reading(time=start + i * step, value=value) for i, value in enumerate(values)]


@pytest.fixture
def make_readings():
    return build_readings


@pytest.fixture
def spike_readings():
    """1000 readings over three days, baseline ~20 with one spike of 99."""
    import math

    step = timedelta(days=3) / 999
    values = [20 + 0.2 * math.sin(i / 5) for i in range(1000)]
    values[613] = 99.0
    return build_readings(values, step=step)


@pytest.fixture
def client():
    from fastapi.testclient import TestClient

    from aquaponics_charts.app import app

    with TestClient(app) as test_client:
        yield test_client
