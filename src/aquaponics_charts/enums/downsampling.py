from enum import Enum


class DownsamplingMethod(str, Enum):
    """Downsampling methods for time series data."""
    VARIATION = "variation"
    UNIFORM = "uniform"
