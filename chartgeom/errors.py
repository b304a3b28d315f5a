"""Typed validation errors raised by the chart geometry engine.

Every error is a `ValueError` so callers that only care about "bad data" can
catch one type, while the subclasses carry the structured details needed to
build a precise empty state.
"""

from __future__ import annotations


class ChartDataError(ValueError):
    """Base class for datasets that cannot be turned into geometry."""


class LengthMismatchError(ChartDataError):
    """Raised when a series (or style list) length differs from the label count."""

    def __init__(self, *, expected: int, actual: int, series_index: int | None) -> None:
        """Initialize the error.

        Args:
            expected: Number of labels in the dataset.
            actual: Length of the offending series.
            series_index: Index of the offending series, or None for category styles.
        """

        subject = "category_styles" if series_index is None else f"series {series_index}"
        super().__init__(f"Length mismatch: {subject} has {actual} values but there are {expected} labels.")
        self.expected = expected
        self.actual = actual
        self.series_index = series_index


class EmptyDatasetError(ChartDataError):
    """Raised when a dataset has no labels or no series."""


class InvalidValueError(ChartDataError):
    """Raised when a series value is not a finite real number."""

    def __init__(self, *, series_index: int, category_index: int, value: object) -> None:
        """Initialize the error.

        Args:
            series_index: Index of the series holding the value.
            category_index: Index of the value within the series.
            value: The rejected raw value.
        """

        super().__init__(
            f"Series {series_index} value at index {category_index} is not a finite number: {value!r}."
        )
        self.series_index = series_index
        self.category_index = category_index
        self.value = value


class SeriesCountError(ChartDataError):
    """Raised when a single-series chart receives more than one series."""

    def __init__(self, *, chart_type: str, count: int) -> None:
        super().__init__(f"{chart_type} charts take exactly one series, got {count}.")
        self.chart_type = chart_type
        self.count = count


class NonPositiveTotalError(ChartDataError):
    """Raised when a pie series sums to zero or less."""

    def __init__(self, *, total: float) -> None:
        super().__init__(f"Pie series total must be positive, got {total!r}.")
        self.total = total


class NegativeValueError(ChartDataError):
    """Raised when a pie series contains a negative slice."""

    def __init__(self, *, category_index: int, value: float) -> None:
        super().__init__(f"Pie value at index {category_index} is negative: {value!r}.")
        self.category_index = category_index
        self.value = value


class ScaleRangeError(ChartDataError):
    """Raised when explicit scale bounds are inverted."""

    def __init__(self, *, minimum: float, maximum: float) -> None:
        super().__init__(f"Scale minimum {minimum!r} is greater than maximum {maximum!r}.")
        self.minimum = minimum
        self.maximum = maximum


class PayloadError(ChartDataError):
    """Raised when a raw chart payload is missing a required key."""

    def __init__(self, *, key: str) -> None:
        super().__init__(f"Chart payload is missing required key {key!r}.")
        self.key = key
