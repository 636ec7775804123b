from typing import Sequence, Union

import pandas as pd

from ..entities.reading import Reading
from ..entities.render_model import SummaryStats


def summarize(data: Union[pd.DataFrame, Sequence[Reading]]) -> SummaryStats:
    """
    Min, max and mean of a full series.

    Must be given the unsampled data. An empty series gives zeros, which
    are a display default and not a measurement.
    """
    if isinstance(data, pd.DataFrame):
        values = data["value"]
    else:
        values = pd.Series([reading.value for reading in data], dtype="float64")

    if values.empty:
        return SummaryStats()

    return SummaryStats(
        min=float(values.min()),
        max=float(values.max()),
        avg=float(values.mean()),
    )
