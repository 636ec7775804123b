import logging
from typing import List, Sequence

import numpy as np
import pandas as pd

from ..entities.reading import Reading
from ..enums.downsampling import DownsamplingMethod
from ..exceptions.chart_exceptions import InvalidSamplingParameterError

logger = logging.getLogger(__name__)

# Window padding on each side of a target position, as a fraction of the
# spacing between targets. Tunable heuristic.
WINDOW_HALF_WIDTH = 0.5


def variation_scores(values: np.ndarray) -> np.ndarray:
    """
    Local variation of every point: |v[j] - v[j-1]| + |v[j] - v[j+1]|.

    The first and last points compare to themselves on the missing side.
    """
    values = np.asarray(values, dtype=float)
    if len(values) == 0:
        return values.copy()

    previous = np.empty_like(values)
    previous[0] = values[0]
    previous[1:] = values[:-1]

    following = np.empty_like(values)
    following[-1] = values[-1]
    following[:-1] = values[1:]

    return np.abs(values - previous) + np.abs(values - following)


def _check_budget(max_points: int) -> None:
    if max_points < 2:
        raise InvalidSamplingParameterError(f"max_points must be at least 2, got {max_points}")


def variation_indices(
    values: Sequence[float],
    max_points: int,
    half_width: float = WINDOW_HALF_WIDTH,
) -> List[int]:
    """
    Indices kept by the variation sampler, in original order.

    First and last points are always kept. Each of the remaining
    ``max_points - 2`` slots gets a window around an evenly spaced target
    position, and keeps the window's point with the highest variation score
    (earliest index on ties). Duplicate picks collapse, so the result may be
    shorter than the budget but never longer.
    """
    _check_budget(max_points)
    n = len(values)
    if n <= max_points:
        return list(range(n))

    selected = {0, n - 1}
    slots = max_points - 2
    if slots == 0:
        return sorted(selected)

    scores = variation_scores(np.asarray(values, dtype=float))
    step = (n - 2) / slots
    pad = step * half_width

    for i in range(slots):
        target = 1 + (i + 0.5) * step
        range_start = max(1, int(np.floor(target - pad)))
        range_end = min(n - 1, int(np.ceil(target + pad)))

        if range_end <= range_start:
            continue

        # argmax returns the first maximum, which gives the earliest-index tie-break
        selected.add(range_start + int(np.argmax(scores[range_start:range_end])))

    return sorted(selected)


def uniform_indices(n: int, max_points: int) -> List[int]:
    """Evenly strided indices, first and last included."""
    _check_budget(max_points)
    if n <= max_points:
        return list(range(n))
    return sorted(set(np.linspace(0, n - 1, max_points, dtype=int).tolist()))


def sample_indices(
    values: Sequence[float],
    max_points: int,
    method: DownsamplingMethod = DownsamplingMethod.VARIATION,
    half_width: float = WINDOW_HALF_WIDTH,
) -> List[int]:
    if method == DownsamplingMethod.UNIFORM:
        return uniform_indices(len(values), max_points)
    return variation_indices(values, max_points, half_width=half_width)


def intelligent_sample(
    df: pd.DataFrame,
    max_points: int,
    method: DownsamplingMethod = DownsamplingMethod.VARIATION,
    half_width: float = WINDOW_HALF_WIDTH,
) -> pd.DataFrame:
    """
    Shape-preserving downsampling for time series data.

    Args:
        df: DataFrame with 'time' and 'value' columns, ordered by time
        max_points: Point budget (at least 2)
        method: Point selection strategy
        half_width: Window padding factor for the variation method

    Returns:
        The input itself when it already fits the budget, otherwise a new
        DataFrame holding the selected rows in original order
    """
    _check_budget(max_points)
    if len(df) <= max_points:
        return df

    indices = sample_indices(df["value"].to_numpy(), max_points, method=method, half_width=half_width)
    logger.debug(f"Sampled {len(df)} rows down to {len(indices)} ({method.value})")

    return df.iloc[indices].copy().reset_index(drop=True)


def sample_readings(
    readings: Sequence[Reading],
    max_points: int,
    method: DownsamplingMethod = DownsamplingMethod.VARIATION,
    half_width: float = WINDOW_HALF_WIDTH,
) -> List[Reading]:
    """Same as intelligent_sample, on a plain list of readings."""
    _check_budget(max_points)
    if len(readings) <= max_points:
        return list(readings)

    values = [reading.value for reading in readings]
    return [readings[i] for i in sample_indices(values, max_points, method=method, half_width=half_width)]
