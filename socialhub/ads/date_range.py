"""
Date-range labels for ad reporting.

A label is either a relative window ("LAST_30_DAYS", "last_7_days",
"last 30 days") or an opaque vendor enum passed through untouched.
"""

import re
from dataclasses import dataclass
from datetime import date, timedelta

DEFAULT_WINDOW_DAYS = 7

_RELATIVE_WINDOW = re.compile(r"^last[\s_-]*(\d+)[\s_-]*days?$", re.IGNORECASE)


@dataclass(frozen=True)
class DateWindow:
    start: date
    end: date

    @property
    def start_iso(self) -> str:
        return self.start.isoformat()

    @property
    def end_iso(self) -> str:
        return self.end.isoformat()


def relative_window_days(label: str) -> int | None:
    """Number of days in a relative window label, or None for vendor enums."""
    match = _RELATIVE_WINDOW.match(label.strip())
    if not match:
        return None
    return int(match.group(1))


def window_for(days: int, today: date | None = None) -> DateWindow:
    today = today or date.today()
    return DateWindow(start=today - timedelta(days=days), end=today)


def resolve_window(
    label: str,
    today: date | None = None,
    default_days: int = DEFAULT_WINDOW_DAYS,
) -> DateWindow:
    """Explicit calendar window for a label; non-relative labels use default_days."""
    days = relative_window_days(label)
    return window_for(days if days is not None else default_days, today)
