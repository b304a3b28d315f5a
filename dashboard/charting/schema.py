"""Schema types for declarative dashboard charts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from chartgeom.dto import ChartType

ValueFormat = Literal["number", "currency"]


@dataclass(frozen=True, slots=True)
class DashboardChartConfig:
    """Declarative chart definition for the dashboard.

    Args:
        id: Stable, unique identifier used in URLs and the export command.
        title: Chart title displayed in the UI.
        chart_type: Geometry pipeline to run (`pie`, `bar`, or `line`).
        source: Data source key resolved by `dashboard.demo.load_source`.
        palette: Palette key in `dashboard.styles.PALETTES`.
        value_format: How values are labeled (plain number or currency).
        order: Display order on the dashboard.
    """

    id: str
    title: str
    chart_type: ChartType
    source: str
    palette: str
    value_format: ValueFormat = "number"
    order: int = 999
