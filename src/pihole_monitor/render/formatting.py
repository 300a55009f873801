"""Locale-aware formatting helpers for rendered output."""

import math
from datetime import datetime
from typing import Any, Optional
from zoneinfo import ZoneInfo

from pihole_monitor.models import StatusResult
from pihole_monitor.render.messages import catalog
from pihole_monitor.utils.timestamps import minutes_since, normalize_timestamp, utc_now

PLACEHOLDER = "–"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def _uses_comma_decimal(locale: str) -> bool:
    return locale.startswith("de")


def format_int(value: Any, locale: str = "de_DE") -> str:
    """Format a count with thousands grouping (1.234 de, 1,234 en)."""
    try:
        number = int(value or 0)
    except (TypeError, ValueError):
        number = 0
    grouped = f"{number:,}"
    if _uses_comma_decimal(locale):
        return grouped.replace(",", ".")
    return grouped


def format_pct(value: Any, locale: str = "de_DE") -> str:
    """Format a percentage with one decimal (23,4 % de, 23.4 % en)."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return PLACEHOLDER
    if not math.isfinite(number):
        return PLACEHOLDER
    text = f"{number:.1f}"
    if _uses_comma_decimal(locale):
        text = text.replace(".", ",")
    return f"{text} %"


def age_text(
    fetched_at: Optional[datetime],
    locale: str = "de_DE",
    now: Optional[datetime] = None,
) -> str:
    """Relative age: minutes below one hour, hours below two days, then days."""
    messages = catalog(locale)
    age = minutes_since(fetched_at, now or utc_now())
    if age is None:
        return messages["no_timestamp"]

    minutes = _round_half_up(age)
    if minutes < 1:
        return messages["just_now"]
    if minutes < 60:
        return messages["minutes_ago"].format(n=minutes)
    hours = _round_half_up(minutes / 60)
    if hours < 48:
        return messages["hours_ago"].format(n=hours)
    return messages["days_ago"].format(n=_round_half_up(hours / 24))


def format_time(value: Optional[datetime], display_timezone: str = "UTC") -> str:
    """Clock time HH:MM in the display timezone."""
    if value is None:
        return PLACEHOLDER
    return normalize_timestamp(value).astimezone(ZoneInfo(display_timezone)).strftime("%H:%M")


def status_text(status: StatusResult, locale: str = "de_DE") -> str:
    """Localized one-line status, e.g. "WARNUNG: Nur 1 Client(s) aktiv"."""
    messages = catalog(locale)
    level = messages[f"level.{status.level.value}"]
    key = f"reason.{status.reason.value}" if status.reason else "reason.none"
    try:
        reason = messages[key].format(**status.params)
    except (KeyError, IndexError):
        reason = messages[key]
    return f"{level}: {reason}"


def failure_notice(error: str, locale: str = "de_DE") -> str:
    """Human-readable notice for an interactive run whose fetch failed."""
    messages = catalog(locale)
    return f"{messages['notice.title']}\n{messages['notice.body'].format(error=error)}"
