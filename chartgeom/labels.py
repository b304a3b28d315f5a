"""Locale-aware number formatting for tick, value, and legend labels.

Formatting is kept separate from geometry: every pipeline entry point accepts
a `ValueFormatter`, so callers can swap in their own without touching the
generators.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Callable, Final

from .dto import Scale, TickLabel
from .scales import DEFAULT_TICK_COUNT, compute_ticks

ValueFormatter = Callable[[float], str]


@dataclass(frozen=True, slots=True)
class LocaleFormat:
    """Separators used when rendering numbers for a locale."""

    group: str
    decimal: str


DEFAULT_LOCALE: Final[str] = "en-US"

LOCALE_FORMATS: Final[dict[str, LocaleFormat]] = {
    "en-US": LocaleFormat(group=",", decimal="."),
    "en-GB": LocaleFormat(group=",", decimal="."),
    "fr-FR": LocaleFormat(group="\u202f", decimal=","),
    "de-DE": LocaleFormat(group=".", decimal=","),
    "es-ES": LocaleFormat(group=".", decimal=","),
    "it-IT": LocaleFormat(group=".", decimal=","),
}


def resolve_locale(locale: str | None) -> LocaleFormat:
    """Return separators for a locale tag.

    Lookup tries the exact tag (`_` and `-` are interchangeable), then the
    first tag sharing the language, then `en-US`.
    """

    if not locale:
        return LOCALE_FORMATS[DEFAULT_LOCALE]
    tag = locale.replace("_", "-")
    for known, fmt in LOCALE_FORMATS.items():
        if known.lower() == tag.lower():
            return fmt
    language = tag.split("-", 1)[0].lower()
    for known, fmt in LOCALE_FORMATS.items():
        if known.split("-", 1)[0].lower() == language:
            return fmt
    return LOCALE_FORMATS[DEFAULT_LOCALE]


def format_value(
    value: float,
    locale: str | None = DEFAULT_LOCALE,
    *,
    decimals: int | None = None,
    prefix: str = "",
    suffix: str = "",
) -> str:
    """Format a number with locale grouping and decimal separators.

    Args:
        value: Number to format.
        locale: Locale tag such as `en-US` or `fr-FR`.
        decimals: Fixed number of decimals. When None, integral values print
            without decimals and others with up to two (trailing zeros trimmed).
        prefix: Text placed before the digits (e.g. a currency symbol).
        suffix: Text placed after the digits (e.g. `%`).

    Returns:
        The formatted string, e.g. `€127,450` or `1.234,5`.
    """

    fmt = resolve_locale(locale)
    number = float(value)
    digits = decimals if decimals is not None else (0 if number.is_integer() else 2)
    text = f"{abs(number):,.{digits}f}"
    if decimals is None and "." in text:
        text = text.rstrip("0").rstrip(".")

    negative = number < 0 and any(ch not in "0.," for ch in text)
    text = text.replace(",", "\0").replace(".", fmt.decimal).replace("\0", fmt.group)
    return f"{'-' if negative else ''}{prefix}{text}{suffix}"


def format_percent(share: float, locale: str | None = DEFAULT_LOCALE, *, decimals: int = 1) -> str:
    """Format a 0..1 share as a percentage (e.g. `0.575` -> `57.5%`)."""

    return format_value(share * 100.0, locale, decimals=decimals, suffix="%")


def make_formatter(
    locale: str | None = DEFAULT_LOCALE,
    *,
    decimals: int | None = None,
    prefix: str = "",
    suffix: str = "",
) -> ValueFormatter:
    """Bind `format_value` options into a single-argument formatter."""

    return partial(format_value, locale=locale, decimals=decimals, prefix=prefix, suffix=suffix)


def format_tick(
    scale: Scale,
    index: int,
    *,
    count: int = DEFAULT_TICK_COUNT,
    formatter: ValueFormatter | None = None,
) -> TickLabel:
    """Return the position and text of one tick on a scale.

    Args:
        scale: Scale whose ticks are labeled.
        index: Tick index in ascending value order.
        count: Tick count used to generate ticks (a degenerate scale has one).
        formatter: Optional value formatter; defaults to `format_value`.

    Returns:
        TickLabel for the requested tick.

    Raises:
        IndexError: When `index` is outside the generated ticks (negative indexes included).
    """

    ticks = compute_ticks(scale, count)
    if not 0 <= index < len(ticks):
        raise IndexError(f"Tick index {index} is outside 0..{len(ticks) - 1}.")
    tick = ticks[index]
    render = formatter or format_value
    return TickLabel(position=tick.position, text=render(tick.value))
