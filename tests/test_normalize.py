"""Unit tests for dataset validation and payload coercion."""

from __future__ import annotations

from decimal import Decimal

import pytest

from chartgeom.dto import ChartDataset, DataSeries, SeriesStyle
from chartgeom.errors import (
    ChartDataError,
    EmptyDatasetError,
    InvalidValueError,
    LengthMismatchError,
    NegativeValueError,
    NonPositiveTotalError,
    PayloadError,
    SeriesCountError,
)
from chartgeom.normalize import dataset_from_payload, normalize

pytestmark = pytest.mark.unit


def _dataset(labels: tuple[str, ...], *series: tuple[object, ...]) -> ChartDataset:
    return ChartDataset(labels=labels, series=tuple(DataSeries(values=values) for values in series))


def test_normalize_coerces_values_to_floats_and_totals() -> None:
    """Integers and Decimals become floats; totals are precomputed."""

    canonical = normalize(_dataset(("a", "b"), (1, Decimal("2.5"))), chart_type="bar")

    assert canonical.chart_type == "bar"
    assert canonical.series[0].values == (1.0, 2.5)
    assert canonical.series[0].total == 3.5
    assert all(isinstance(value, float) for value in canonical.series[0].values)


def test_normalize_rejects_length_mismatch_before_anything_else() -> None:
    """A short series fails with LengthMismatchError carrying the details."""

    with pytest.raises(LengthMismatchError) as excinfo:
        normalize(_dataset(("a", "b", "c"), (1, 2)), chart_type="line")

    assert excinfo.value.expected == 3
    assert excinfo.value.actual == 2
    assert excinfo.value.series_index == 0


def test_normalize_length_check_precedes_empty_check() -> None:
    """Empty labels with a non-empty series is a mismatch, not an empty dataset."""

    with pytest.raises(LengthMismatchError):
        normalize(_dataset((), (1, 2)), chart_type="bar")


def test_normalize_rejects_mismatched_category_styles() -> None:
    """Category styles must be empty or one per label."""

    dataset = ChartDataset(
        labels=("a", "b"),
        series=(DataSeries(values=(1, 2)),),
        category_styles=(SeriesStyle(color="#fff"),),
    )
    with pytest.raises(LengthMismatchError) as excinfo:
        normalize(dataset, chart_type="pie")
    assert excinfo.value.series_index is None


def test_normalize_empty_labels_raise_empty_dataset() -> None:
    """Scenario C: an empty dataset fails with EmptyDatasetError."""

    with pytest.raises(EmptyDatasetError):
        normalize(_dataset((), ()), chart_type="pie")


def test_normalize_requires_at_least_one_series() -> None:
    """A dataset with labels but no series is empty."""

    with pytest.raises(EmptyDatasetError):
        normalize(ChartDataset(labels=("a",), series=()), chart_type="line")


@pytest.mark.parametrize("bad", [None, "12", True, float("nan"), float("inf")])
def test_normalize_rejects_non_finite_or_non_numeric_values(bad: object) -> None:
    """Only finite real numbers are accepted."""

    with pytest.raises(InvalidValueError) as excinfo:
        normalize(_dataset(("a", "b"), (1, bad)), chart_type="line")
    assert excinfo.value.category_index == 1


def test_normalize_single_series_charts_reject_multiple_series() -> None:
    """Pie and bar charts take exactly one series."""

    with pytest.raises(SeriesCountError):
        normalize(_dataset(("a",), (1,), (2,)), chart_type="bar")


def test_normalize_pie_all_zero_series_has_no_sector_split() -> None:
    """Scenario D: an all-zero pie fails with NonPositiveTotalError."""

    with pytest.raises(NonPositiveTotalError) as excinfo:
        normalize(_dataset(("a", "b", "c"), (0, 0, 0)), chart_type="pie")
    assert excinfo.value.total == 0.0


def test_normalize_pie_rejects_negative_slices_even_with_positive_total() -> None:
    """A negative slice has no wedge, even when the total is positive."""

    with pytest.raises(NegativeValueError) as excinfo:
        normalize(_dataset(("a", "b"), (5, -1)), chart_type="pie")
    assert excinfo.value.category_index == 1


def test_normalize_line_and_bar_accept_negative_and_zero_totals() -> None:
    """The total check is pie-only."""

    assert normalize(_dataset(("a", "b"), (0, 0)), chart_type="bar").series[0].total == 0.0
    assert normalize(_dataset(("a", "b"), (-3, 1)), chart_type="line").series[0].total == -2.0


def test_normalize_errors_are_value_errors() -> None:
    """Callers can catch a single ChartDataError (or ValueError)."""

    assert issubclass(EmptyDatasetError, ChartDataError)
    assert issubclass(ChartDataError, ValueError)


def test_normalize_does_not_mutate_input() -> None:
    """The raw dataset is unchanged after normalization."""

    dataset = _dataset(("a", "b"), (1, 2))
    normalize(dataset, chart_type="bar")
    assert dataset.series[0].values == (1, 2)


def test_dataset_from_payload_single_series_with_colors() -> None:
    """`{labels, data, colors}` becomes one series plus category styles."""

    dataset = dataset_from_payload({"labels": ["Q1", "Q2"], "data": [45, 52], "colors": ["#111", "#222"]})

    assert dataset.labels == ("Q1", "Q2")
    assert dataset.series[0].values == (45, 52)
    assert [style.color for style in dataset.category_styles] == ["#111", "#222"]


def test_dataset_from_payload_multi_series() -> None:
    """`{labels, datasets}` becomes named, styled series."""

    dataset = dataset_from_payload(
        {
            "labels": ["Jan", "Feb"],
            "datasets": [
                {"label": "Revenue", "data": [1, 2], "color": "#3b82f6"},
                {"label": "Expenses", "data": [3, 4]},
            ],
        }
    )

    assert [series.name for series in dataset.series] == ["Revenue", "Expenses"]
    assert dataset.series[0].style == SeriesStyle(color="#3b82f6", name="Revenue")
    assert dataset.series[1].style is not None
    assert dataset.series[1].style.color is None


@pytest.mark.parametrize(
    ("payload", "key"),
    [
        ({"data": [1]}, "labels"),
        ({"labels": ["a"]}, "data"),
        ({"labels": ["a"], "datasets": [{"label": "x"}]}, "data"),
        ({"labels": "abc", "data": [1, 2, 3]}, "labels"),
    ],
)
def test_dataset_from_payload_missing_keys(payload: dict[str, object], key: str) -> None:
    """Missing or malformed keys raise PayloadError naming the key."""

    with pytest.raises(PayloadError) as excinfo:
        dataset_from_payload(payload)
    assert excinfo.value.key == key
