"""Views for the fleet dashboard and its chart geometry API."""

from __future__ import annotations

from dataclasses import dataclass

from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.shortcuts import render
from django.views.decorators.http import require_GET

from chartgeom.labels import format_value
from dashboard.charting.configs import CHART_CONFIG_BY_ID, ordered_chart_configs
from dashboard.charting.render import geometry_payload, render_chart, render_charts
from dashboard.context_processors import request_locale
from dashboard.demo import DEMO_METRICS, DashboardMetric


@dataclass(frozen=True, slots=True)
class MetricCard:
    """A formatted metric card for the dashboard template."""

    title: str
    value_text: str
    change_text: str
    trend: str


def _metric_card(metric: DashboardMetric, *, locale: str) -> MetricCard:
    prefix = settings.DASHBOARD_CURRENCY_PREFIX if metric.is_currency else ""
    change_text = ""
    trend = "flat"
    if metric.change is not None:
        sign = "+" if metric.change > 0 else ""
        change_text = f"{sign}{format_value(metric.change, locale, suffix=metric.change_unit)} {metric.change_label}".strip()
        trend = "up" if metric.change > 0 else ("down" if metric.change < 0 else "flat")
    return MetricCard(
        title=metric.title,
        value_text=format_value(metric.value, locale, prefix=prefix),
        change_text=change_text,
        trend=trend,
    )


@require_GET
def dashboard(request: HttpRequest) -> HttpResponse:
    """Render the dashboard: metric cards plus pie, bar, and line charts."""

    locale = request_locale(request)
    charts = render_charts(
        ordered_chart_configs(),
        locale=locale,
        tick_count=settings.DASHBOARD_TICK_COUNT,
        currency_prefix=settings.DASHBOARD_CURRENCY_PREFIX,
    )
    metrics = tuple(_metric_card(metric, locale=locale) for metric in DEMO_METRICS)
    return render(
        request,
        "dashboard/dashboard.html",
        {"charts": charts, "metrics": metrics},
    )


@require_GET
def chart_geometry_api(request: HttpRequest, chart_id: str) -> JsonResponse:
    """Return the computed geometry for one dashboard chart as JSON.

    Responds 404 for unknown chart ids and 422 when the chart's data cannot be
    turned into geometry.
    """

    config = CHART_CONFIG_BY_ID.get(chart_id)
    if config is None:
        return JsonResponse({"error": f"Unknown chart id: {chart_id!r}."}, status=404)

    rendered = render_chart(
        config,
        locale=request_locale(request),
        tick_count=settings.DASHBOARD_TICK_COUNT,
        currency_prefix=settings.DASHBOARD_CURRENCY_PREFIX,
    )
    status = 422 if rendered.geometry is None else 200
    return JsonResponse(geometry_payload(rendered), status=status, json_dumps_params={"ensure_ascii": False})
