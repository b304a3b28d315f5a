"""Demo data sources for the dashboard.

These payloads stand in for the data-fetch layer (vehicle status counts,
quarterly contract counts, monthly ledger totals). They use the same plain
mapping shapes the fetch layer returns, so they go through
`chartgeom.normalize.dataset_from_payload` like real data would.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from dashboard.styles import ContractQuarter, LedgerSeries, VehicleStatus

MONTHS: Final[tuple[str, ...]] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

DEMO_SOURCES: Final[dict[str, dict[str, object]]] = {
    "vehicle_status_counts": {
        "labels": [status.value for status in VehicleStatus],
        "data": [142, 23, 67, 15],
    },
    "contracts_per_quarter": {
        "labels": [quarter.value for quarter in ContractQuarter],
        "data": [45, 52, 61, 48],
    },
    "monthly_ledger": {
        "labels": list(MONTHS),
        "datasets": [
            {
                "label": LedgerSeries.revenue.value,
                "data": [95000, 102000, 98000, 115000, 127000, 134000, 128000, 145000, 139000, 152000, 148000, 165000],
            },
            {
                "label": LedgerSeries.expenses.value,
                "data": [65000, 68000, 71000, 75000, 78000, 82000, 79000, 86000, 83000, 89000, 87000, 91000],
            },
        ],
    },
}


@dataclass(frozen=True, slots=True)
class DashboardMetric:
    """A headline metric card.

    Args:
        title: Card title.
        value: Current value.
        change: Change versus the previous period, in `change_unit`.
        change_label: Trailing text for the change line.
        is_currency: Whether `value` is a monetary amount.
        change_unit: Suffix for the change value (empty or `%`).
    """

    title: str
    value: float
    change: float | None = None
    change_label: str = ""
    is_currency: bool = False
    change_unit: str = ""


DEMO_METRICS: Final[tuple[DashboardMetric, ...]] = (
    DashboardMetric(title="Total Vehicles", value=247, change=12, change_label="from last month"),
    DashboardMetric(title="Active Contracts", value=189, change=8, change_label="from last month"),
    DashboardMetric(title="Total Customers", value=156, change=-3, change_label="from last month"),
    DashboardMetric(
        title="Monthly Revenue",
        value=127450,
        change=15.8,
        change_label="from last month",
        is_currency=True,
        change_unit="%",
    ),
)


def load_source(source: str) -> dict[str, object]:
    """Return the payload for a data source key.

    Raises:
        KeyError: When the source is unknown.
    """

    return DEMO_SOURCES[source]
