"""Unit tests for multi-series polyline geometry."""

from __future__ import annotations

import pytest

from chartgeom.dto import CanonicalSeries, ChartDataset, LineLayout, PlotArea
from chartgeom.lines import category_x, compute_lines
from chartgeom.normalize import normalize
from chartgeom.scales import compute_scale

pytestmark = pytest.mark.unit


def _series(*values: float, index: int = 0, name: str | None = None) -> CanonicalSeries:
    return CanonicalSeries(index=index, values=tuple(values), total=sum(values), name=name)


def test_series_share_one_scale_over_the_union(ledger_dataset: ChartDataset) -> None:
    """Scenario E: both series are plotted against the union of their values."""

    canonical = normalize(ledger_dataset, chart_type="line")
    area = LineLayout().area
    scale = compute_scale(canonical.all_values, (area.bottom, area.top))
    revenue, expenses = compute_lines(canonical.series, scale)

    assert (scale.minimum, scale.maximum) == (65000.0, 165000.0)
    assert revenue.points[-1].y == area.top
    assert expenses.points[0].y == area.bottom
    # Expenses never reach the top of the plot on the shared axis.
    assert min(point.y for point in expenses.points) > area.top


def test_points_are_evenly_spaced_across_the_plot() -> None:
    """x = left + i / (n - 1) * plot_width."""

    area = PlotArea(width=600.0, height=200.0)
    assert [category_x(index, 5, area) for index in range(5)] == [40.0, 170.0, 300.0, 430.0, 560.0]


def test_single_point_is_pinned_to_plot_start() -> None:
    """A one-category axis does not divide by zero."""

    layout = LineLayout()
    scale = compute_scale([5.0], (layout.area.bottom, layout.area.top))
    (line,) = compute_lines([_series(5.0)], scale, layout)

    assert line.points[0].x == layout.area.left
    assert line.points[0].y == 100.0
    assert line.path_command == "M 40 100"


def test_path_command_connects_points_in_order() -> None:
    """Path data is a move followed by straight segments."""

    scale = compute_scale([0.0, 10.0], (160.0, 40.0))
    (line,) = compute_lines([_series(0.0, 5.0, 10.0)], scale)

    assert line.path_command == "M 40 160 L 300 100 L 560 40"
    assert [point.category_index for point in line.points] == [0, 1, 2]


def test_lines_keep_series_order_and_metadata() -> None:
    """Descriptors carry the series index and name through."""

    scale = compute_scale([1.0, 2.0, 3.0, 4.0], (160.0, 40.0))
    lines = compute_lines([_series(1.0, 2.0, name="A"), _series(3.0, 4.0, index=1, name="B")], scale)

    assert [(line.series_index, line.name) for line in lines] == [(0, "A"), (1, "B")]


def test_series_geometry_is_independent_of_neighbours() -> None:
    """Adding a series does not move another one when the shared scale is unchanged."""

    scale = compute_scale([0.0, 100.0], (160.0, 40.0))
    (alone,) = compute_lines([_series(10.0, 90.0)], scale)
    together = compute_lines([_series(10.0, 90.0), _series(50.0, 20.0, index=1)], scale)

    assert together[0].points == alone.points


def test_line_generation_is_idempotent(ledger_dataset: ChartDataset) -> None:
    """Repeated calls produce structurally identical output."""

    canonical = normalize(ledger_dataset, chart_type="line")
    scale = compute_scale(canonical.all_values, (160.0, 40.0))
    assert compute_lines(canonical.series, scale) == compute_lines(canonical.series, scale)
