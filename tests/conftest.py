"""Pytest fixtures shared across engine and Django integration tests."""

from __future__ import annotations

from collections.abc import Sequence

import pytest

from chartgeom.dto import ChartDataset, DataSeries, SeriesStyle


@pytest.fixture
def vehicle_status_dataset() -> ChartDataset:
    """Return the vehicle-status pie dataset (total 247)."""

    return ChartDataset(
        labels=("Active", "Maintenance", "Available", "Out of Service"),
        series=(DataSeries(values=(142, 23, 67, 15)),),
        category_styles=(
            SeriesStyle(color="#10b981"),
            SeriesStyle(color="#f59e0b"),
            SeriesStyle(color="#3b82f6"),
            SeriesStyle(color="#ef4444"),
        ),
    )


@pytest.fixture
def ledger_dataset() -> ChartDataset:
    """Return two 12-month series sharing one label axis."""

    return ChartDataset(
        labels=("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"),
        series=(
            DataSeries(
                values=(95000, 102000, 98000, 115000, 127000, 134000, 128000, 145000, 139000, 152000, 148000, 165000),
                name="Revenue",
                style=SeriesStyle(color="#3b82f6", name="Revenue"),
            ),
            DataSeries(
                values=(65000, 68000, 71000, 75000, 78000, 82000, 79000, 86000, 83000, 89000, 87000, 91000),
                name="Expenses",
                style=SeriesStyle(color="#ef4444", name="Expenses"),
            ),
        ),
    )


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    The suite is runnable by intent:
    - `unit`: pure, fast tests with no Django request cycle or IO.
    - `integration`: tests touching Django views, templates, or commands.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
