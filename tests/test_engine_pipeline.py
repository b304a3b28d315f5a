"""Unit tests for the end-to-end chart geometry pipelines."""

from __future__ import annotations

import pytest

from chartgeom import bar_chart, line_chart, pie_chart
from chartgeom.dto import ChartDataset, DataSeries
from chartgeom.errors import EmptyDatasetError, NonPositiveTotalError, SeriesCountError
from chartgeom.labels import make_formatter

pytestmark = pytest.mark.unit


def _quarters(*values: float) -> ChartDataset:
    return ChartDataset(labels=("Q1", "Q2", "Q3", "Q4")[: len(values)], series=(DataSeries(values=values),))


def test_pie_chart_legend_reports_value_and_share(vehicle_status_dataset: ChartDataset) -> None:
    """Legend rows read `value (share%)` in category order."""

    geometry = pie_chart(vehicle_status_dataset)

    assert [entry.text for entry in geometry.legend] == [
        "142 (57.5%)",
        "23 (9.3%)",
        "67 (27.1%)",
        "15 (6.1%)",
    ]
    assert [entry.label for entry in geometry.legend] == list(vehicle_status_dataset.labels)
    assert geometry.sectors[0].style is not None
    assert geometry.sectors[0].style.color == "#10b981"


def test_pie_chart_rejects_all_zero_data() -> None:
    """Pipeline errors propagate and no geometry is returned."""

    with pytest.raises(NonPositiveTotalError):
        pie_chart(_quarters(0, 0, 0))


def test_pie_chart_rejects_multiple_series() -> None:
    """A pie has a single series."""

    dataset = ChartDataset(labels=("a",), series=(DataSeries(values=(1,)), DataSeries(values=(2,))))
    with pytest.raises(SeriesCountError):
        pie_chart(dataset)


def test_bar_chart_labels_and_gridlines() -> None:
    """Bars get value labels above them and category labels below the plot."""

    geometry = bar_chart(_quarters(45, 52, 61, 48))
    area = geometry.layout.area

    assert (geometry.scale.minimum, geometry.scale.maximum) == (0.0, 61.0)
    assert [label.text for label in geometry.value_labels] == ["45", "52", "61", "48"]
    assert geometry.value_labels[2].y == area.top - 8.0
    assert [label.text for label in geometry.category_labels] == ["Q1", "Q2", "Q3", "Q4"]
    assert {label.y for label in geometry.category_labels} == {area.bottom + 15.0}
    assert [line.text for line in geometry.gridlines] == ["0", "15.25", "30.5", "45.75", "61"]


def test_bar_chart_negative_value_label_sits_below_the_bar() -> None:
    """Negative bars are labeled past their far end."""

    geometry = bar_chart(_quarters(-10, 20))
    negative_bar = geometry.bars[0]

    assert geometry.scale.minimum == -10.0
    assert geometry.value_labels[0].y == pytest.approx(negative_bar.y + negative_bar.height + 8.0)
    assert geometry.value_labels[1].y < geometry.bars[1].y


def test_bar_chart_rejects_empty_dataset() -> None:
    """Scenario C holds through the pipeline."""

    with pytest.raises(EmptyDatasetError):
        bar_chart(ChartDataset(labels=(), series=()))


def test_line_chart_shared_scale_and_legend(ledger_dataset: ChartDataset) -> None:
    """One scale spans every series; each series gets a legend entry."""

    geometry = line_chart(ledger_dataset, formatter=make_formatter(prefix="€"))

    assert (geometry.scale.minimum, geometry.scale.maximum) == (65000.0, 165000.0)
    assert [entry.label for entry in geometry.legend] == ["Revenue", "Expenses"]
    assert [line.text for line in geometry.gridlines] == ["€65,000", "€90,000", "€115,000", "€140,000", "€165,000"]
    assert len(geometry.category_labels) == 12
    assert geometry.category_labels[0].x == geometry.layout.area.left
    assert geometry.category_labels[-1].x == geometry.layout.area.right


def test_line_chart_names_unnamed_series() -> None:
    """Series without names fall back to a positional legend label."""

    dataset = ChartDataset(labels=("a", "b"), series=(DataSeries(values=(1, 2)), DataSeries(values=(3, 4))))
    geometry = line_chart(dataset)

    assert [entry.text for entry in geometry.legend] == ["Series 1", "Series 2"]


def test_line_chart_custom_tick_count(ledger_dataset: ChartDataset) -> None:
    """The gridline count is configurable."""

    assert len(line_chart(ledger_dataset, tick_count=3).gridlines) == 3


def test_pipelines_are_deterministic(vehicle_status_dataset: ChartDataset, ledger_dataset: ChartDataset) -> None:
    """Identical input produces identical geometry."""

    assert pie_chart(vehicle_status_dataset) == pie_chart(vehicle_status_dataset)
    assert line_chart(ledger_dataset) == line_chart(ledger_dataset)
