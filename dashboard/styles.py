"""Category-to-color resolution for dashboard charts.

Colors are resolved here, by the caller, and handed to the geometry engine as
opaque `SeriesStyle` tokens. Each palette maps a closed category enumeration to
a color; labels outside the enumeration fall back to `DEFAULT_COLOR`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from enum import StrEnum
from typing import Final

from chartgeom.dto import ChartDataset, SeriesStyle


class VehicleStatus(StrEnum):
    """Fleet vehicle status as shown on the dashboard."""

    active = "Active"
    maintenance = "Maintenance"
    available = "Available"
    out_of_service = "Out of Service"


class ContractQuarter(StrEnum):
    """Fiscal quarter buckets for contract counts."""

    q1 = "Q1"
    q2 = "Q2"
    q3 = "Q3"
    q4 = "Q4"


class LedgerSeries(StrEnum):
    """Monthly ledger series plotted on the revenue chart."""

    revenue = "Revenue"
    expenses = "Expenses"


DEFAULT_COLOR: Final[str] = "#3b82f6"

VEHICLE_STATUS_COLORS: Final[dict[str, str]] = {
    VehicleStatus.active: "#10b981",
    VehicleStatus.maintenance: "#f59e0b",
    VehicleStatus.available: "#3b82f6",
    VehicleStatus.out_of_service: "#ef4444",
}

CONTRACT_QUARTER_COLORS: Final[dict[str, str]] = {
    ContractQuarter.q1: "#6366f1",
    ContractQuarter.q2: "#8b5cf6",
    ContractQuarter.q3: "#06b6d4",
    ContractQuarter.q4: "#10b981",
}

LEDGER_SERIES_COLORS: Final[dict[str, str]] = {
    LedgerSeries.revenue: "#3b82f6",
    LedgerSeries.expenses: "#ef4444",
}

PALETTES: Final[dict[str, Mapping[str, str]]] = {
    "vehicle_status": VEHICLE_STATUS_COLORS,
    "contract_quarter": CONTRACT_QUARTER_COLORS,
    "ledger_series": LEDGER_SERIES_COLORS,
}


def color_for(key: str, palette: Mapping[str, str]) -> str:
    """Return the palette color for a category key, or `DEFAULT_COLOR`."""

    return palette.get(key, DEFAULT_COLOR)


def apply_category_styles(dataset: ChartDataset, palette: Mapping[str, str]) -> ChartDataset:
    """Return a copy of `dataset` with one style per label (pie/bar charts)."""

    styles = tuple(SeriesStyle(color=color_for(label, palette), name=label) for label in dataset.labels)
    return replace(dataset, category_styles=styles)


def apply_series_styles(dataset: ChartDataset, palette: Mapping[str, str]) -> ChartDataset:
    """Return a copy of `dataset` with each series styled by its name (line charts)."""

    styled = tuple(
        replace(series, style=SeriesStyle(color=color_for(series.name or "", palette), name=series.name))
        for series in dataset.series
    )
    return replace(dataset, series=styled)
