"""Built-in chart definitions for the dashboard."""

from __future__ import annotations

from typing import Final

from .schema import DashboardChartConfig


def _validate_chart_configs(configs: tuple[DashboardChartConfig, ...]) -> None:
    """Raise ValueError when chart ids are duplicated."""

    seen: set[str] = set()
    for config in configs:
        if config.id in seen:
            raise ValueError(f"Duplicate dashboard chart id: {config.id!r}.")
        seen.add(config.id)


DASHBOARD_CHARTS: Final[tuple[DashboardChartConfig, ...]] = (
    DashboardChartConfig(
        id="vehicle_status",
        title="Vehicle Status",
        chart_type="pie",
        source="vehicle_status_counts",
        palette="vehicle_status",
        order=1,
    ),
    DashboardChartConfig(
        id="contracts_per_quarter",
        title="Contracts per Quarter",
        chart_type="bar",
        source="contracts_per_quarter",
        palette="contract_quarter",
        order=2,
    ),
    DashboardChartConfig(
        id="revenue_vs_expenses",
        title="Revenue vs Expenses",
        chart_type="line",
        source="monthly_ledger",
        palette="ledger_series",
        value_format="currency",
        order=3,
    ),
)

_validate_chart_configs(DASHBOARD_CHARTS)

CHART_CONFIG_BY_ID: Final[dict[str, DashboardChartConfig]] = {config.id: config for config in DASHBOARD_CHARTS}


def ordered_chart_configs() -> tuple[DashboardChartConfig, ...]:
    """Return dashboard charts in display order."""

    return tuple(sorted(DASHBOARD_CHARTS, key=lambda config: config.order))
