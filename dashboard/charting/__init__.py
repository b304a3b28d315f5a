"""Declarative dashboard chart configuration and rendering helpers.

Charts on the dashboard are driven by `DashboardChartConfig` objects rather
than bespoke view logic. This package holds the schema, the built-in configs,
and the glue that feeds data sources through the geometry engine.
"""
