"""Feed dashboard data sources through the chart geometry engine."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import asdict, dataclass
from functools import partial
from typing import Any

from chartgeom.dto import BarChartGeometry, LineChartGeometry, PieChartGeometry
from chartgeom.engine import bar_chart, line_chart, pie_chart
from chartgeom.errors import ChartDataError
from chartgeom.labels import ValueFormatter, format_percent, make_formatter
from chartgeom.normalize import dataset_from_payload
from dashboard.demo import load_source
from dashboard.styles import PALETTES, apply_category_styles, apply_series_styles

from .schema import DashboardChartConfig

logger = logging.getLogger(__name__)

ChartGeometry = PieChartGeometry | BarChartGeometry | LineChartGeometry

EMPTY_STATE_MESSAGE = "No data available for this chart."


@dataclass(frozen=True, slots=True)
class RenderedChart:
    """A dashboard chart panel produced from a DashboardChartConfig.

    Exactly one of `geometry` and `error` is set.
    """

    config: DashboardChartConfig
    geometry: ChartGeometry | None
    error: str | None = None
    error_type: str | None = None
    detail: str | None = None

    @property
    def width(self) -> float:
        """Return the SVG viewport width for the chart."""

        if isinstance(self.geometry, PieChartGeometry):
            return self.geometry.layout.width
        if self.geometry is None:
            return 0.0
        return self.geometry.layout.area.width

    @property
    def height(self) -> float:
        """Return the SVG viewport height for the chart."""

        if isinstance(self.geometry, PieChartGeometry):
            return self.geometry.layout.height
        if self.geometry is None:
            return 0.0
        return self.geometry.layout.area.height


def value_formatter(config: DashboardChartConfig, *, locale: str, currency_prefix: str) -> ValueFormatter:
    """Return the value formatter for a chart's value format."""

    if config.value_format == "currency":
        return make_formatter(locale, prefix=currency_prefix)
    return make_formatter(locale)


def render_chart(
    config: DashboardChartConfig,
    *,
    locale: str,
    tick_count: int,
    currency_prefix: str,
    payload: Mapping[str, object] | None = None,
) -> RenderedChart:
    """Render a single chart panel.

    Args:
        config: Chart definition.
        locale: Locale tag for number formatting.
        tick_count: Gridline count for bar and line charts.
        currency_prefix: Prefix used when `config.value_format == "currency"`.
        payload: Optional payload overriding the config's data source.

    Returns:
        RenderedChart with geometry, or with an error message when the data
        cannot be charted.
    """

    raw = payload if payload is not None else load_source(config.source)
    palette = PALETTES[config.palette]
    formatter = value_formatter(config, locale=locale, currency_prefix=currency_prefix)

    try:
        dataset = dataset_from_payload(raw)
        geometry: ChartGeometry
        if config.chart_type == "pie":
            geometry = pie_chart(
                apply_category_styles(dataset, palette),
                formatter=formatter,
                percent_formatter=partial(format_percent, locale=locale),
            )
        elif config.chart_type == "bar":
            geometry = bar_chart(apply_category_styles(dataset, palette), tick_count=tick_count, formatter=formatter)
        else:
            geometry = line_chart(apply_series_styles(dataset, palette), tick_count=tick_count, formatter=formatter)
    except ChartDataError as exc:
        logger.warning("Chart %r has no renderable data: %s", config.id, exc)
        return RenderedChart(
            config=config,
            geometry=None,
            error=EMPTY_STATE_MESSAGE,
            error_type=type(exc).__name__,
            detail=str(exc),
        )

    return RenderedChart(config=config, geometry=geometry)


def render_charts(
    configs: tuple[DashboardChartConfig, ...],
    *,
    locale: str,
    tick_count: int,
    currency_prefix: str,
) -> tuple[RenderedChart, ...]:
    """Render a set of charts, in the same order as `configs`."""

    return tuple(
        render_chart(config, locale=locale, tick_count=tick_count, currency_prefix=currency_prefix)
        for config in configs
    )


def geometry_payload(rendered: RenderedChart) -> dict[str, Any]:
    """Return a JSON-serializable payload for a rendered chart."""

    payload: dict[str, Any] = {
        "chart": {
            "id": rendered.config.id,
            "title": rendered.config.title,
            "chart_type": rendered.config.chart_type,
        },
    }
    if rendered.geometry is None:
        payload["error"] = rendered.error
        payload["error_type"] = rendered.error_type
        payload["detail"] = rendered.detail
        return payload
    payload["geometry"] = asdict(rendered.geometry)
    return payload
