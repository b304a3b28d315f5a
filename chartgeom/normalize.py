"""Dataset validation and coercion.

`normalize` is the only entry point that accepts untrusted numbers. Everything
downstream (scales, generators, labels) assumes a `CanonicalDataset` and does
not re-validate.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from decimal import Decimal
from numbers import Real

from .dto import CanonicalDataset, CanonicalSeries, ChartDataset, ChartType, DataSeries, SeriesStyle
from .errors import (
    EmptyDatasetError,
    InvalidValueError,
    LengthMismatchError,
    NegativeValueError,
    NonPositiveTotalError,
    PayloadError,
    SeriesCountError,
)

SINGLE_SERIES_CHART_TYPES: frozenset[str] = frozenset({"pie", "bar"})


def normalize(dataset: ChartDataset, *, chart_type: ChartType) -> CanonicalDataset:
    """Validate a raw dataset and coerce it into canonical form.

    Checks run in a fixed order so the same bad input always produces the same
    error: lengths, emptiness, value types, series count, then the pie-only
    total and sign checks.

    Args:
        dataset: Raw dataset from the data-fetch layer.
        chart_type: Chart type the dataset will be rendered as.

    Returns:
        A new CanonicalDataset; `dataset` is left untouched.

    Raises:
        LengthMismatchError: A series or the style list does not match the labels.
        EmptyDatasetError: There are no labels or no series.
        InvalidValueError: A value is not a finite real number.
        SeriesCountError: A pie or bar dataset has more than one series.
        NonPositiveTotalError: A pie series sums to zero or less.
        NegativeValueError: A pie series contains a negative value.
    """

    labels = tuple(str(label) for label in dataset.labels)
    expected = len(labels)

    for series_index, series in enumerate(dataset.series):
        if len(series.values) != expected:
            raise LengthMismatchError(expected=expected, actual=len(series.values), series_index=series_index)
    if dataset.category_styles and len(dataset.category_styles) != expected:
        raise LengthMismatchError(expected=expected, actual=len(dataset.category_styles), series_index=None)

    if expected == 0:
        raise EmptyDatasetError("Dataset has no labels.")
    if not dataset.series:
        raise EmptyDatasetError("Dataset has no series.")

    canonical = tuple(_canonical_series(series, index) for index, series in enumerate(dataset.series))

    if chart_type in SINGLE_SERIES_CHART_TYPES and len(canonical) != 1:
        raise SeriesCountError(chart_type=chart_type, count=len(canonical))

    if chart_type == "pie":
        only = canonical[0]
        if only.total <= 0:
            raise NonPositiveTotalError(total=only.total)
        for category_index, value in enumerate(only.values):
            if value < 0:
                raise NegativeValueError(category_index=category_index, value=value)

    return CanonicalDataset(
        chart_type=chart_type,
        labels=labels,
        series=canonical,
        category_styles=tuple(dataset.category_styles),
    )


def coerce_value(raw: object, *, series_index: int, category_index: int) -> float:
    """Coerce a raw numeric value to a finite float.

    Args:
        raw: Raw value (int, float, Decimal, or another numbers.Real).
        series_index: Series index, used in error details.
        category_index: Value index, used in error details.

    Returns:
        The value as a float.

    Raises:
        InvalidValueError: When the value is a bool, not a real number, or not finite.
    """

    if isinstance(raw, bool) or not isinstance(raw, (Real, Decimal)):
        raise InvalidValueError(series_index=series_index, category_index=category_index, value=raw)
    value = float(raw)
    if not math.isfinite(value):
        raise InvalidValueError(series_index=series_index, category_index=category_index, value=raw)
    return value


def _canonical_series(series: DataSeries, index: int) -> CanonicalSeries:
    values = tuple(
        coerce_value(raw, series_index=index, category_index=category_index)
        for category_index, raw in enumerate(series.values)
    )
    return CanonicalSeries(
        index=index,
        values=values,
        total=math.fsum(values) if values else 0.0,
        name=series.name,
        style=series.style,
    )


def dataset_from_payload(payload: Mapping[str, object]) -> ChartDataset:
    """Build a ChartDataset from a dashboard payload mapping.

    Two shapes are accepted:

    - single series: `{"labels": [...], "data": [...], "colors": [...]}`
      (`colors` optional, one per label);
    - multi series: `{"labels": [...], "datasets": [{"label", "data", "color"}]}`.

    Values are carried over as-is; validation happens in `normalize`.

    Args:
        payload: Mapping produced by the data-fetch layer.

    Returns:
        A ChartDataset.

    Raises:
        PayloadError: When `labels` is missing, or neither `data` nor `datasets` exists,
            or a dataset entry has no `data`.
    """

    labels = _sequence(payload, "labels")

    if "datasets" in payload:
        series: list[DataSeries] = []
        for entry in _sequence(payload, "datasets"):
            if not isinstance(entry, Mapping):
                raise PayloadError(key="datasets")
            name = entry.get("label")
            color = entry.get("color")
            series.append(
                DataSeries(
                    values=tuple(_sequence(entry, "data")),
                    name=None if name is None else str(name),
                    style=SeriesStyle(color=None if color is None else str(color), name=None if name is None else str(name)),
                )
            )
        return ChartDataset(labels=tuple(str(label) for label in labels), series=tuple(series))

    values = _sequence(payload, "data")
    colors = payload.get("colors") or ()
    category_styles = tuple(SeriesStyle(color=str(color)) for color in colors)  # type: ignore[union-attr]
    return ChartDataset(
        labels=tuple(str(label) for label in labels),
        series=(DataSeries(values=tuple(values)),),
        category_styles=category_styles,
    )


def _sequence(payload: Mapping[str, object], key: str) -> Sequence[object]:
    value = payload.get(key)
    if value is None or isinstance(value, (str, bytes)) or not isinstance(value, Sequence):
        raise PayloadError(key=key)
    return value
