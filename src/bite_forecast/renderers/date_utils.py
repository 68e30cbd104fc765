"""Shared time-formatting helpers for renderers."""

from __future__ import annotations

from datetime import datetime, timedelta, tzinfo
from zoneinfo import ZoneInfo

DEFAULT_TZ = ZoneInfo("America/Chicago")


def _clock(when: datetime) -> tuple[str, str]:
    """12-hour clock text without suffix, plus 'am'/'pm'."""
    hour = when.hour % 12 or 12
    text = f"{hour}:{when.minute:02d}" if when.minute else str(hour)
    return text, "am" if when.hour < 12 else "pm"


def day_prefix(when: datetime, now: datetime) -> str:
    """'Today', 'Tomorrow' or the short weekday name of ``when``."""
    if when.date() == now.date():
        return "Today"
    if when.date() == (now + timedelta(days=1)).date():
        return "Tomorrow"
    return when.strftime("%a")


def format_time_window(
    start: datetime, end: datetime, now: datetime, tz: tzinfo = DEFAULT_TZ
) -> str:
    """Human-readable window label in the lake's local time.

    Returns e.g. ``Today 5-7pm``, ``Tomorrow 11am-1pm`` or ``Sat 6:30-8am``.
    """
    start_local = start.astimezone(tz)
    end_local = end.astimezone(tz)
    prefix = day_prefix(start_local, now.astimezone(tz))

    start_text, start_suffix = _clock(start_local)
    end_text, end_suffix = _clock(end_local)
    if start_suffix == end_suffix:
        return f"{prefix} {start_text}-{end_text}{end_suffix}"
    return f"{prefix} {start_text}{start_suffix}-{end_text}{end_suffix}"


def format_hour(when: datetime, tz: tzinfo = DEFAULT_TZ) -> str:
    """Compact hour label, e.g. ``5pm``."""
    text, suffix = _clock(when.astimezone(tz))
    return f"{text}{suffix}"
