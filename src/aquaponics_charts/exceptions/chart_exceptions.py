"""Custom exceptions for the chart shaping pipeline."""


class ChartException(Exception):
    """Base exception for chart shaping."""
    pass


class InvalidThresholdError(ChartException, ValueError):
    """Raised when a threshold band has min greater than max."""
    pass


class InvalidSamplingParameterError(ChartException):
    """Raised when the sampler is asked for fewer than two points."""
    pass


class InvalidDisplaySettingsError(ChartException):
    """Raised when a timezone or locale for axis labels is not usable."""
    pass
