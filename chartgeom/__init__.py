"""Pure chart geometry engine for fleetdesk dashboards.

This package turns labeled numeric series into renderer-agnostic geometry
(pie sectors, bar rectangles, polylines, text anchors). It must not import
Django or perform any I/O.
"""

from .engine import bar_chart, line_chart, pie_chart

__all__ = ["bar_chart", "line_chart", "pie_chart"]
