"""DTO types consumed and returned by the chart geometry engine.

DTOs are plain, immutable data containers. Inputs describe labeled numeric
series; outputs describe renderer-agnostic primitives (sectors, rectangles,
polylines, text anchors). Nothing here knows how a primitive is painted.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ChartType = Literal["pie", "bar", "line"]
TextAnchor = Literal["start", "middle", "end"]


@dataclass(frozen=True, slots=True)
class SeriesStyle:
    """Opaque style metadata passed through to descriptors.

    Args:
        color: Caller-resolved color token (e.g. `#3b82f6`).
        name: Optional legend label override.
    """

    color: str | None = None
    name: str | None = None


@dataclass(frozen=True, slots=True)
class DataSeries:
    """A raw numeric series as supplied by the data-fetch layer.

    Args:
        values: One value per dataset label. Values are validated by `normalize`.
        name: Optional series name (legend label for line charts).
        style: Optional per-series style.
    """

    values: tuple[object, ...]
    name: str | None = None
    style: SeriesStyle | None = None


@dataclass(frozen=True, slots=True)
class ChartDataset:
    """Labels plus one or more equal-length numeric series.

    Args:
        labels: Ordered category names.
        series: One or more series aligned with `labels`.
        category_styles: Empty, or one style per label (pie sectors / bars).
    """

    labels: tuple[str, ...]
    series: tuple[DataSeries, ...]
    category_styles: tuple[SeriesStyle, ...] = ()


@dataclass(frozen=True, slots=True)
class CanonicalSeries:
    """A validated series with float values.

    Attributes:
        index: Position of the series in the dataset.
        values: Finite float values aligned with the dataset labels.
        total: Sum of `values`.
        name: Series name, if any.
        style: Series style, if any.
    """

    index: int
    values: tuple[float, ...]
    total: float
    name: str | None = None
    style: SeriesStyle | None = None


@dataclass(frozen=True, slots=True)
class CanonicalDataset:
    """The Normalizer's output.

    Attributes:
        chart_type: Chart type the dataset was validated for.
        labels: Ordered category names.
        series: Validated series.
        category_styles: One style per label (empty when none were supplied).
    """

    chart_type: ChartType
    labels: tuple[str, ...]
    series: tuple[CanonicalSeries, ...]
    category_styles: tuple[SeriesStyle, ...] = ()

    @property
    def all_values(self) -> tuple[float, ...]:
        """Return the union of every series' values, in series order."""

        return tuple(value for series in self.series for value in series.values)

    def category_style(self, index: int) -> SeriesStyle | None:
        """Return the style for a category index, or None when unstyled."""

        if not self.category_styles:
            return None
        return self.category_styles[index]


@dataclass(frozen=True, slots=True)
class Scale:
    """Linear mapping from a value domain to a pixel range.

    Args:
        minimum: Lower bound of the value domain.
        maximum: Upper bound of the value domain (`>= minimum`).
        pixel_range: `(start, end)` coordinates for `minimum` and `maximum`.
            `end` may be smaller than `start` (SVG y axes grow downwards).
        degenerate: True when `minimum == maximum`.
    """

    minimum: float
    maximum: float
    pixel_range: tuple[float, float]
    degenerate: bool = False

    @property
    def midpoint(self) -> float:
        """Return the center of the pixel range."""

        start, end = self.pixel_range
        return (start + end) / 2.0

    def map(self, value: float) -> float:
        """Map a data value to a coordinate.

        A degenerate scale maps every value to the pixel-range midpoint.
        """

        start, end = self.pixel_range
        if self.degenerate:
            return self.midpoint
        if value == self.minimum:
            return float(start)
        if value == self.maximum:
            return float(end)
        ratio = (value - self.minimum) / (self.maximum - self.minimum)
        return start + ratio * (end - start)


@dataclass(frozen=True, slots=True)
class Tick:
    """A tick value and its coordinate on the scale's axis."""

    value: float
    position: float


@dataclass(frozen=True, slots=True)
class TickLabel:
    """A formatted tick ready for display."""

    position: float
    text: str


@dataclass(frozen=True, slots=True)
class TextLabel:
    """A text anchor positioned alongside generated geometry."""

    x: float
    y: float
    text: str
    anchor: TextAnchor = "middle"


@dataclass(frozen=True, slots=True)
class Gridline:
    """A horizontal gridline at a tick position.

    Attributes:
        value: Tick value.
        position: Y coordinate of the line.
        start: X coordinate where the line starts.
        end: X coordinate where the line ends.
        text: Formatted tick value (empty until labels are attached).
    """

    value: float
    position: float
    start: float
    end: float
    text: str = ""


@dataclass(frozen=True, slots=True)
class LegendEntry:
    """A legend row for a sector or a line series."""

    index: int
    label: str
    text: str
    style: SeriesStyle | None = None


@dataclass(frozen=True, slots=True)
class SectorDescriptor:
    """A pie sector.

    Attributes:
        index: Category index (aligned with dataset labels).
        label: Category label.
        value: Source value.
        share: `value / total`.
        start_angle: Start angle in degrees (0 = east, clockwise).
        end_angle: End angle in degrees.
        large_arc: SVG large-arc flag (`end_angle - start_angle > 180`).
        full_circle: True when the sector spans the whole circle.
        path_command: SVG path data for the sector.
        style: Category style, passed through.
    """

    index: int
    label: str
    value: float
    share: float
    start_angle: float
    end_angle: float
    large_arc: bool
    full_circle: bool
    path_command: str
    style: SeriesStyle | None = None

    @property
    def sweep(self) -> float:
        """Return the sector's angular width in degrees."""

        return self.end_angle - self.start_angle


@dataclass(frozen=True, slots=True)
class BarDescriptor:
    """A bar rectangle anchored at the value-axis baseline."""

    category_index: int
    label: str
    value: float
    x: float
    y: float
    width: float
    height: float
    style: SeriesStyle | None = None


@dataclass(frozen=True, slots=True)
class PointDescriptor:
    """A single point on a line series."""

    category_index: int
    x: float
    y: float
    value: float


@dataclass(frozen=True, slots=True)
class LineDescriptor:
    """A polyline for one series."""

    series_index: int
    name: str | None
    points: tuple[PointDescriptor, ...]
    path_command: str
    style: SeriesStyle | None = None


@dataclass(frozen=True, slots=True)
class PlotArea:
    """Outer chart box with a uniform padding around the plot.

    Args:
        width: Full chart width.
        height: Full chart height.
        padding: Space between the chart edge and the plot on every side.
    """

    width: float
    height: float
    padding: float = 40.0

    @property
    def left(self) -> float:
        return self.padding

    @property
    def right(self) -> float:
        return self.width - self.padding

    @property
    def top(self) -> float:
        return self.padding

    @property
    def bottom(self) -> float:
        return self.height - self.padding

    @property
    def plot_width(self) -> float:
        return self.width - 2 * self.padding

    @property
    def plot_height(self) -> float:
        return self.height - 2 * self.padding


@dataclass(frozen=True, slots=True)
class PieLayout:
    """Pie geometry parameters (defaults match a 200x200 dashboard card)."""

    width: float = 200.0
    height: float = 200.0
    center_x: float = 100.0
    center_y: float = 100.0
    radius: float = 80.0


@dataclass(frozen=True, slots=True)
class BarLayout:
    """Bar geometry parameters.

    Args:
        area: Chart box and plot padding.
        bar_width_ratio: Fraction of each category slot occupied by the bar.
        value_label_offset: Gap between a bar end and its value label.
        category_label_offset: Gap between the plot bottom and category labels.
    """

    area: PlotArea = PlotArea(width=400.0, height=250.0)
    bar_width_ratio: float = 0.6
    value_label_offset: float = 8.0
    category_label_offset: float = 15.0


@dataclass(frozen=True, slots=True)
class LineLayout:
    """Line geometry parameters."""

    area: PlotArea = PlotArea(width=600.0, height=200.0)
    category_label_offset: float = 15.0


@dataclass(frozen=True, slots=True)
class PieChartGeometry:
    """Pipeline result for a pie chart."""

    layout: PieLayout
    sectors: tuple[SectorDescriptor, ...]
    legend: tuple[LegendEntry, ...]


@dataclass(frozen=True, slots=True)
class BarChartGeometry:
    """Pipeline result for a bar chart."""

    layout: BarLayout
    scale: Scale
    bars: tuple[BarDescriptor, ...]
    gridlines: tuple[Gridline, ...]
    value_labels: tuple[TextLabel, ...]
    category_labels: tuple[TextLabel, ...]


@dataclass(frozen=True, slots=True)
class LineChartGeometry:
    """Pipeline result for a multi-series line chart."""

    layout: LineLayout
    scale: Scale
    lines: tuple[LineDescriptor, ...]
    gridlines: tuple[Gridline, ...]
    category_labels: tuple[TextLabel, ...]
    legend: tuple[LegendEntry, ...]
