from __future__ import annotations


class ChartDataError(ValueError):
    """Raised when chart data cannot be used for the requested operation."""


class EmptyDatasetError(ChartDataError):
    """Raised when a reduction needs at least one point in every series."""


class ZeroRangeError(ChartDataError):
    """Raised when pixel mapping needs a positive value range."""

    def __init__(self, value_range: float) -> None:
        super().__init__(f"value range must be > 0 for pixel mapping, got {value_range!r}")
        self.value_range = value_range


class ChartConfigError(ValueError):
    """Raised when a chart configuration file or mapping is invalid."""
