"""Chart geometry pipeline entry points.

Each function runs the full pipeline for one chart type:
normalize -> scale -> geometry -> labels. Validation errors from `normalize`
propagate unchanged, and nothing is returned for a dataset that fails.
"""

from __future__ import annotations

from .bars import compute_bars, compute_gridlines
from .dto import (
    BarChartGeometry,
    BarLayout,
    ChartDataset,
    Gridline,
    LegendEntry,
    LineChartGeometry,
    LineLayout,
    PieChartGeometry,
    PieLayout,
    TextLabel,
)
from .labels import ValueFormatter, format_percent, format_value
from .lines import category_x, compute_lines
from .normalize import normalize
from .pie import compute_pie_sectors
from .scales import DEFAULT_TICK_COUNT, compute_scale


def pie_chart(
    dataset: ChartDataset,
    *,
    layout: PieLayout = PieLayout(),
    formatter: ValueFormatter | None = None,
    percent_formatter: ValueFormatter | None = None,
) -> PieChartGeometry:
    """Compute pie sectors and legend entries for a single-series dataset.

    Args:
        dataset: Raw dataset with exactly one series.
        layout: Pie center and radius.
        formatter: Value formatter for legend text.
        percent_formatter: Share formatter for legend text (receives 0..1).

    Returns:
        PieChartGeometry with one sector and one legend entry per label.
    """

    canonical = normalize(dataset, chart_type="pie")
    series = canonical.series[0]
    render_value = formatter or format_value
    render_share = percent_formatter or format_percent

    styles = tuple(canonical.category_style(index) for index in range(len(canonical.labels)))
    sectors = compute_pie_sectors(series.values, labels=canonical.labels, styles=styles, layout=layout)
    legend = tuple(
        LegendEntry(
            index=sector.index,
            label=sector.label,
            text=f"{render_value(sector.value)} ({render_share(sector.share)})",
            style=sector.style,
        )
        for sector in sectors
    )
    return PieChartGeometry(layout=layout, sectors=sectors, legend=legend)


def bar_chart(
    dataset: ChartDataset,
    *,
    layout: BarLayout = BarLayout(),
    tick_count: int = DEFAULT_TICK_COUNT,
    formatter: ValueFormatter | None = None,
) -> BarChartGeometry:
    """Compute bars, gridlines, and labels for a single-series dataset.

    The value domain always includes 0 so bars have a baseline inside the plot.

    Args:
        dataset: Raw dataset with exactly one series.
        layout: Plot box and bar width ratio.
        tick_count: Number of gridlines.
        formatter: Value formatter for gridline and bar labels.

    Returns:
        BarChartGeometry.
    """

    canonical = normalize(dataset, chart_type="bar")
    series = canonical.series[0]
    render = formatter or format_value
    area = layout.area

    scale = compute_scale(
        series.values,
        (area.bottom, area.top),
        minimum=min(0.0, *series.values),
        maximum=max(0.0, *series.values),
    )
    styles = tuple(canonical.category_style(index) for index in range(len(canonical.labels)))
    bars = compute_bars(series.values, scale, layout, labels=canonical.labels, styles=styles)
    gridlines = _labeled_gridlines(compute_gridlines(scale, area, tick_count), render)

    value_labels = tuple(
        TextLabel(
            x=bar.x + bar.width / 2,
            y=(bar.y + bar.height + layout.value_label_offset) if bar.value < 0 else (bar.y - layout.value_label_offset),
            text=render(bar.value),
        )
        for bar in bars
    )
    category_labels = tuple(
        TextLabel(x=bar.x + bar.width / 2, y=area.bottom + layout.category_label_offset, text=bar.label)
        for bar in bars
    )
    return BarChartGeometry(
        layout=layout,
        scale=scale,
        bars=bars,
        gridlines=gridlines,
        value_labels=value_labels,
        category_labels=category_labels,
    )


def line_chart(
    dataset: ChartDataset,
    *,
    layout: LineLayout = LineLayout(),
    tick_count: int = DEFAULT_TICK_COUNT,
    formatter: ValueFormatter | None = None,
) -> LineChartGeometry:
    """Compute polylines for every series against one shared scale.

    Args:
        dataset: Raw dataset with one or more series sharing the label axis.
        layout: Plot box.
        tick_count: Number of gridlines.
        formatter: Value formatter for gridline labels.

    Returns:
        LineChartGeometry whose scale spans the union of all series values.
    """

    canonical = normalize(dataset, chart_type="line")
    render = formatter or format_value
    area = layout.area

    scale = compute_scale(canonical.all_values, (area.bottom, area.top))
    lines = compute_lines(canonical.series, scale, layout)
    gridlines = _labeled_gridlines(compute_gridlines(scale, area, tick_count), render)

    count = len(canonical.labels)
    category_labels = tuple(
        TextLabel(x=category_x(index, count, area), y=area.bottom + layout.category_label_offset, text=label)
        for index, label in enumerate(canonical.labels)
    )
    legend = tuple(
        LegendEntry(
            index=series.index,
            label=series.name or f"Series {series.index + 1}",
            text=series.name or f"Series {series.index + 1}",
            style=series.style,
        )
        for series in canonical.series
    )
    return LineChartGeometry(
        layout=layout,
        scale=scale,
        lines=lines,
        gridlines=gridlines,
        category_labels=category_labels,
        legend=legend,
    )


def _labeled_gridlines(gridlines: tuple[Gridline, ...], render: ValueFormatter) -> tuple[Gridline, ...]:
    return tuple(
        Gridline(value=line.value, position=line.position, start=line.start, end=line.end, text=render(line.value))
        for line in gridlines
    )
