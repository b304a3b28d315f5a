"""Bar rectangle geometry.

Bars grow from the baseline (the coordinate of value 0) towards the value's
coordinate, so negative values extend to the other side of the baseline
instead of hanging from the plot edge.
"""

from __future__ import annotations

from collections.abc import Sequence

from .dto import BarDescriptor, BarLayout, Gridline, PlotArea, Scale, SeriesStyle
from .scales import DEFAULT_TICK_COUNT, clamp_to_domain, compute_ticks


def compute_bars(
    series: Sequence[float],
    scale: Scale,
    layout: BarLayout = BarLayout(),
    *,
    labels: Sequence[str] = (),
    styles: Sequence[SeriesStyle | None] = (),
) -> tuple[BarDescriptor, ...]:
    """Convert a single series into bar rectangles.

    Each category gets an equal slot of `plot_width / count`; the bar fills
    `bar_width_ratio` of the slot and is centered in it. Zero values produce
    zero-height bars and are not omitted.

    Args:
        series: Values to draw.
        scale: Value-axis scale. When 0 lies outside its domain the baseline is
            the nearest domain bound.
        layout: Plot box and bar width ratio.
        labels: Optional labels aligned with `series`.
        styles: Optional per-category styles aligned with `series`.

    Returns:
        One BarDescriptor per value, in input order. `y` is the smaller of the
        two vertical coordinates, `height` is always non-negative.
    """

    values = tuple(float(value) for value in series)
    if not values:
        return ()

    area = layout.area
    slot_width = area.plot_width / len(values)
    bar_width = slot_width * layout.bar_width_ratio
    baseline = scale.map(clamp_to_domain(scale, 0.0))

    bars: list[BarDescriptor] = []
    for index, value in enumerate(values):
        # A zero bar sits on the baseline even when the scale is degenerate.
        top = baseline if value == 0 else scale.map(value)
        bars.append(
            BarDescriptor(
                category_index=index,
                label=labels[index] if index < len(labels) else "",
                value=value,
                x=area.left + index * slot_width + (slot_width - bar_width) / 2,
                y=min(top, baseline),
                width=bar_width,
                height=abs(top - baseline),
                style=styles[index] if index < len(styles) else None,
            )
        )
    return tuple(bars)


def compute_gridlines(scale: Scale, area: PlotArea, count: int = DEFAULT_TICK_COUNT) -> tuple[Gridline, ...]:
    """Return horizontal gridlines spanning `area` at the scale's tick positions."""

    return tuple(
        Gridline(value=tick.value, position=tick.position, start=area.left, end=area.right)
        for tick in compute_ticks(scale, count)
    )
