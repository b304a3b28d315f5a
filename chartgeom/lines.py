"""Polyline geometry for one or more series sharing a label axis."""

from __future__ import annotations

from collections.abc import Sequence

from .dto import CanonicalSeries, LineDescriptor, LineLayout, PlotArea, PointDescriptor, Scale
from .pie import format_coordinate


def category_x(index: int, count: int, area: PlotArea) -> float:
    """Return the x coordinate of a category on an evenly spaced axis.

    A single category is pinned to the plot start.
    """

    if count <= 1:
        return area.left
    return area.left + (index / (count - 1)) * area.plot_width


def compute_lines(
    series: Sequence[CanonicalSeries],
    scale: Scale,
    layout: LineLayout = LineLayout(),
) -> tuple[LineDescriptor, ...]:
    """Convert series into polylines plotted against one shared scale.

    Args:
        series: Series aligned with a common label axis.
        scale: Shared value scale, computed over the union of every series.
        layout: Plot box.

    Returns:
        One LineDescriptor per series, in input order.
    """

    lines: list[LineDescriptor] = []
    for series_index, entry in enumerate(series):
        count = len(entry.values)
        points = tuple(
            PointDescriptor(
                category_index=index,
                x=category_x(index, count, layout.area),
                y=scale.map(value),
                value=value,
            )
            for index, value in enumerate(entry.values)
        )
        lines.append(
            LineDescriptor(
                series_index=series_index,
                name=entry.name,
                points=points,
                path_command=polyline_path(points),
                style=entry.style,
            )
        )
    return tuple(lines)


def polyline_path(points: Sequence[PointDescriptor]) -> str:
    """Build `M x y L x y ...` path data connecting points in order."""

    commands = [
        f"{'M' if index == 0 else 'L'} {format_coordinate(point.x)} {format_coordinate(point.y)}"
        for index, point in enumerate(points)
    ]
    return " ".join(commands)
