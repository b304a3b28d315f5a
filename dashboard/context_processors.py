"""Template context processors for fleetdesk."""

from __future__ import annotations

import re

from django.conf import settings
from django.http import HttpRequest

_LOCALE_TAG = re.compile(r"^[A-Za-z]{2,3}(?:[-_][A-Za-z]{2})?$")


def request_locale(request: HttpRequest) -> str:
    """Return the number-formatting locale for a request.

    A well-formed `?locale=` query parameter wins over `DASHBOARD_LOCALE`.
    """

    requested = request.GET.get("locale", "").strip()
    if requested and _LOCALE_TAG.match(requested):
        return requested
    return settings.DASHBOARD_LOCALE


def dashboard_locale(request: HttpRequest) -> dict[str, str]:
    """Expose the active formatting locale to all templates.

    Args:
        request: Current request object.

    Returns:
        Context dict with `dashboard_locale`.
    """

    return {"dashboard_locale": request_locale(request)}
