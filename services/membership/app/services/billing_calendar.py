"""Calendar arithmetic for validity windows and billing periods.

Month steps clamp the day of month to the last day of the target month, so
Jan 31 + 1 month is Feb 29 in a leap year (Feb 28 otherwise) and Jan 31 + 6
months is Jul 31. Period boundaries are always measured from the window start
(``valid_from + i units``) instead of chaining from the previous boundary, which
would otherwise drift once a short month has clamped the day.

The system this service replaced let the day roll over into the next month
(Jan 31 + 1 month became Mar 2). Clamping instead keeps every period end
inside its own month, and records created by that system may therefore end
a day or two later than the same request would end here.
"""

from __future__ import annotations

import calendar
from datetime import datetime, timedelta, timezone
from typing import Optional, Tuple

from app.models.enums import BillingInterval

MONTHS_PER_UNIT = {
    BillingInterval.MONTHLY: 1,
    BillingInterval.YEARLY: 12,
}
DAYS_PER_WEEK = 7


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def add_months(start: datetime, months: int) -> datetime:
    """
    Add months while keeping day in valid range (e.g., Jan 31 + 1 month => Feb 28/29).
    """
    y = start.year + (start.month - 1 + months) // 12
    m = (start.month - 1 + months) % 12 + 1
    day = min(start.day, calendar.monthrange(y, m)[1])
    return start.replace(year=y, month=m, day=day)


def advance(start: datetime, interval: BillingInterval, units: int = 1) -> datetime:
    """Move ``units`` billing intervals forward from ``start``."""
    if interval is BillingInterval.WEEKLY:
        return start + timedelta(days=DAYS_PER_WEEK * units)
    return add_months(start, MONTHS_PER_UNIT[interval] * units)


def compute_validity(
    valid_from: Optional[datetime],
    interval: BillingInterval,
    periods: int,
    *,
    now: Optional[datetime] = None,
) -> Tuple[datetime, datetime]:
    """Return ``(valid_from, valid_until)``; ``valid_from`` defaults to ``now``."""
    start = ensure_utc(valid_from) if valid_from is not None else ensure_utc(now or utc_now())
    return start, advance(start, interval, periods)


__all__ = ["add_months", "advance", "compute_validity", "ensure_utc", "utc_now"]
