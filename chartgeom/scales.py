"""Scale calculations for value axes.

A Scale is a linear value-to-coordinate mapping. Ticks are positioned with the
same `Scale.map` used for data points so labels and geometry always agree.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .dto import Scale, Tick
from .errors import EmptyDatasetError, ScaleRangeError

logger = logging.getLogger(__name__)

DEFAULT_TICK_COUNT = 5


def compute_scale(
    values: Iterable[float],
    pixel_range: tuple[float, float],
    *,
    minimum: float | None = None,
    maximum: float | None = None,
) -> Scale:
    """Compute a linear scale over a set of values.

    Args:
        values: Data values covered by the scale. For multi-series charts pass the
            union of every series so all series share one axis.
        pixel_range: `(start, end)` coordinates for the domain bounds.
        minimum: Optional explicit lower bound (overrides `min(values)`).
        maximum: Optional explicit upper bound (overrides `max(values)`).

    Returns:
        A Scale. When the domain has zero width the scale is marked degenerate
        and maps every value to the pixel-range midpoint.

    Raises:
        EmptyDatasetError: When `values` is empty and a bound is not overridden.
        ScaleRangeError: When the resolved minimum exceeds the maximum.
    """

    materialized = tuple(float(value) for value in values)
    if (minimum is None or maximum is None) and not materialized:
        raise EmptyDatasetError("Cannot derive a scale from an empty value set.")

    low = float(minimum) if minimum is not None else min(materialized)
    high = float(maximum) if maximum is not None else max(materialized)
    if low > high:
        raise ScaleRangeError(minimum=low, maximum=high)

    start, end = pixel_range
    degenerate = high - low == 0
    if degenerate:
        logger.debug("Degenerate scale at %r; mapping all values to the midpoint.", low)
    return Scale(minimum=low, maximum=high, pixel_range=(float(start), float(end)), degenerate=degenerate)


def compute_ticks(scale: Scale, count: int = DEFAULT_TICK_COUNT) -> tuple[Tick, ...]:
    """Compute evenly spaced ticks from `scale.minimum` to `scale.maximum`.

    Args:
        scale: Scale to place ticks on.
        count: Number of ticks, including both bounds.

    Returns:
        `count` ticks in ascending value order. A degenerate scale yields a
        single tick at its only value.

    Raises:
        ValueError: When `count` is less than 2.
    """

    if count < 2:
        raise ValueError(f"Tick count must be at least 2, got {count}.")
    if scale.degenerate:
        return (Tick(value=scale.minimum, position=scale.map(scale.minimum)),)

    span = scale.maximum - scale.minimum
    ticks: list[Tick] = []
    for index in range(count):
        if index == count - 1:
            value = scale.maximum
        else:
            value = scale.minimum + span * index / (count - 1)
        ticks.append(Tick(value=value, position=scale.map(value)))
    return tuple(ticks)


def clamp_to_domain(scale: Scale, value: float) -> float:
    """Clamp a value into the scale's domain."""

    return min(max(value, scale.minimum), scale.maximum)
