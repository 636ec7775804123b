from typing import Sequence

import pandas as pd

from ..entities.reading import Reading

FRAME_COLUMNS = ["time", "value"]


def readings_to_frame(readings: Sequence[Reading]) -> pd.DataFrame:
    """Build a 'time'/'value' DataFrame (UTC timestamps) keeping input order."""
    if not readings:
        return pd.DataFrame({
            "time": pd.Series([], dtype="datetime64[ns, UTC]"),
            "value": pd.Series([], dtype="float64"),
        })

    return pd.DataFrame({
        "time": pd.to_datetime([reading.time for reading in readings], utc=True),
        "value": pd.Series([reading.value for reading in readings], dtype="float64"),
    })
