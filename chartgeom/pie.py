"""Pie sector geometry.

Angles are in degrees, starting due east and growing clockwise on a y-down
canvas. Sector boundaries come from the cumulative value share, so the last
sector always ends at exactly 360 degrees.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from .dto import PieLayout, SectorDescriptor, SeriesStyle
from .errors import NonPositiveTotalError

FULL_CIRCLE = 360.0
HALF_CIRCLE = 180.0


def compute_pie_sectors(
    series: Sequence[float],
    *,
    labels: Sequence[str] = (),
    styles: Sequence[SeriesStyle | None] = (),
    layout: PieLayout = PieLayout(),
) -> tuple[SectorDescriptor, ...]:
    """Convert a single series into ordered pie sectors.

    Zero values produce zero-width sectors; they are kept so sector indexes
    stay aligned with the dataset labels.
    A sector wider than a half circle whose rim endpoints format to the same
    point is drawn with the full-circle path.

    Args:
        series: Non-negative values with a positive total.
        labels: Optional labels aligned with `series`.
        styles: Optional per-category styles aligned with `series`.
        layout: Center and radius of the pie.

    Returns:
        One SectorDescriptor per value, in input order.

    Raises:
        NonPositiveTotalError: When the series total is zero or less.
    """

    values = tuple(float(value) for value in series)
    total = math.fsum(values)
    if total <= 0:
        raise NonPositiveTotalError(total=total)

    sectors: list[SectorDescriptor] = []
    start_angle = 0.0
    for index, value in enumerate(values):
        cumulative = math.fsum(values[: index + 1])
        end_angle = FULL_CIRCLE * (cumulative / total)
        sweep = end_angle - start_angle
        full_circle = sweep >= FULL_CIRCLE or (
            sweep > HALF_CIRCLE and _rim_points_coincide(start_angle, end_angle, layout=layout)
        )
        sectors.append(
            SectorDescriptor(
                index=index,
                label=labels[index] if index < len(labels) else "",
                value=value,
                share=value / total,
                start_angle=start_angle,
                end_angle=end_angle,
                large_arc=sweep > HALF_CIRCLE,
                full_circle=full_circle,
                path_command=(
                    full_circle_path(start_angle, layout=layout)
                    if full_circle
                    else sector_path(start_angle, end_angle, layout=layout)
                ),
                style=styles[index] if index < len(styles) else None,
            )
        )
        start_angle = end_angle
    return tuple(sectors)


def polar_point(angle: float, *, layout: PieLayout) -> tuple[float, float]:
    """Return the point on the pie's rim at `angle` degrees."""

    radians = math.radians(angle)
    return (
        layout.center_x + layout.radius * math.cos(radians),
        layout.center_y + layout.radius * math.sin(radians),
    )


def sector_path(start_angle: float, end_angle: float, *, layout: PieLayout) -> str:
    """Build SVG path data for a wedge narrower than a full circle."""

    x1, y1 = polar_point(start_angle, layout=layout)
    x2, y2 = polar_point(end_angle, layout=layout)
    large_arc = 1 if end_angle - start_angle > HALF_CIRCLE else 0
    r = format_coordinate(layout.radius)
    return (
        f"M {format_coordinate(layout.center_x)} {format_coordinate(layout.center_y)} "
        f"L {format_coordinate(x1)} {format_coordinate(y1)} "
        f"A {r} {r} 0 {large_arc} 1 {format_coordinate(x2)} {format_coordinate(y2)} Z"
    )


def full_circle_path(start_angle: float, *, layout: PieLayout) -> str:
    """Build SVG path data for a 360 degree sector.

    An arc whose endpoints coincide draws nothing, so the circle is split into
    two half arcs through the opposite point.
    """

    x1, y1 = polar_point(start_angle, layout=layout)
    x2, y2 = polar_point(start_angle + HALF_CIRCLE, layout=layout)
    r = format_coordinate(layout.radius)
    start = f"{format_coordinate(x1)} {format_coordinate(y1)}"
    return (
        f"M {start} "
        f"A {r} {r} 0 1 1 {format_coordinate(x2)} {format_coordinate(y2)} "
        f"A {r} {r} 0 1 1 {start} Z"
    )


def _rim_points_coincide(start_angle: float, end_angle: float, *, layout: PieLayout) -> bool:
    """Return True when two rim angles format to the same path point."""

    start = tuple(format_coordinate(part) for part in polar_point(start_angle, layout=layout))
    end = tuple(format_coordinate(part) for part in polar_point(end_angle, layout=layout))
    return start == end


def format_coordinate(value: float) -> str:
    """Format a coordinate for path data with up to 4 decimals."""

    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text in {"-0", ""} else text
