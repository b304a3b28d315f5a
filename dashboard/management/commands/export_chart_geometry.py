"""Export the computed geometry of a dashboard chart as JSON.

Useful for inspecting descriptors without a browser, or for feeding another
renderer from the same geometry the dashboard draws.
"""

from __future__ import annotations

import json

from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from dashboard.charting.configs import CHART_CONFIG_BY_ID
from dashboard.charting.render import geometry_payload, render_chart


class Command(BaseCommand):
    """Write one chart's geometry payload to stdout."""

    help = "Compute and print the geometry descriptors for a dashboard chart."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument("chart_id", help=f"Chart id ({', '.join(sorted(CHART_CONFIG_BY_ID))}).")
        parser.add_argument(
            "--locale",
            default=None,
            help="Locale tag for labels (defaults to DASHBOARD_LOCALE).",
        )
        parser.add_argument(
            "--indent",
            type=int,
            default=None,
            help="Indent the JSON output by this many spaces.",
        )

    def handle(self, *args, **options) -> None:
        """Run the command."""

        chart_id = options["chart_id"]
        config = CHART_CONFIG_BY_ID.get(chart_id)
        if config is None:
            known = ", ".join(sorted(CHART_CONFIG_BY_ID))
            raise CommandError(f"Unknown chart id {chart_id!r}. Known ids: {known}.")

        rendered = render_chart(
            config,
            locale=options["locale"] or settings.DASHBOARD_LOCALE,
            tick_count=settings.DASHBOARD_TICK_COUNT,
            currency_prefix=settings.DASHBOARD_CURRENCY_PREFIX,
        )
        if rendered.geometry is None:
            raise CommandError(f"Chart {chart_id!r} could not be rendered: {rendered.detail}")

        self.stdout.write(json.dumps(geometry_payload(rendered), indent=options["indent"], ensure_ascii=False))
