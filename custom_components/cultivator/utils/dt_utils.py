# File: utils/dt_utils.py
"""Date and time utilities for Cultivator.

Pure Python date/time functions with ZERO Home Assistant dependencies.
All functions here can be unit tested without Home Assistant mocking.

Uses standard library datetime/zoneinfo plus dateutil for parsing and
calendar arithmetic.

Functions:
    - set_default_timezone / get_default_timezone: Local timezone config
    - dt_now_local / dt_now_utc / dt_today_local: Wall-clock readers
    - as_utc / as_local / start_of_local_day: Timezone conversion
    - dt_parse_date / dt_parse: Parse stored ISO strings
    - dt_to_iso_date: Normalize a date-ish input to "YYYY-MM-DD"
    - dt_add_days / dt_previous_day_iso: Calendar-day arithmetic
    - is_same_local_day: Calendar-day comparison in local timezone
    - days_elapsed_ceil: Elapsed days rounded up (decay clock)
    - days_between_dates: Whole calendar days between two dates
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta
import logging
import math
from zoneinfo import ZoneInfo

# Third-party date utilities (no HA dependency)
from dateutil import parser as dt_parser
from dateutil.relativedelta import relativedelta

# Module-level logger (no HA dependency)
_LOGGER = logging.getLogger(__name__)

# Default timezone - can be overridden by caller
DEFAULT_TIME_ZONE: ZoneInfo = ZoneInfo("UTC")

SECONDS_PER_DAY = 86400


# ==============================================================================
# Timezone Configuration
# ==============================================================================


def set_default_timezone(tz: ZoneInfo) -> None:
    """Set the default timezone for all dt_utils functions.

    Call this during integration setup to configure the user's timezone.
    """
    global DEFAULT_TIME_ZONE  # noqa: PLW0603
    DEFAULT_TIME_ZONE = tz


def get_default_timezone() -> ZoneInfo:
    """Get the current default timezone."""
    return DEFAULT_TIME_ZONE


# ==============================================================================
# Current Date/Time Functions
# ==============================================================================


def dt_now_local(tz: ZoneInfo | None = None) -> datetime:
    """Return the current datetime in local timezone (timezone-aware)."""
    return datetime.now(tz or DEFAULT_TIME_ZONE)


def dt_now_utc() -> datetime:
    """Return the current datetime in UTC (timezone-aware)."""
    return datetime.now(UTC)


def dt_today_local(tz: ZoneInfo | None = None) -> date:
    """Return today's date in local timezone as a `datetime.date`."""
    return dt_now_local(tz).date()


# ==============================================================================
# Timezone Conversion
# ==============================================================================


def as_utc(dt_obj: datetime) -> datetime:
    """Convert a datetime to UTC, treating naive values as local time."""
    if dt_obj.tzinfo is None:
        dt_obj = dt_obj.replace(tzinfo=DEFAULT_TIME_ZONE)
    return dt_obj.astimezone(UTC)


def as_local(dt_obj: datetime, tz: ZoneInfo | None = None) -> datetime:
    """Convert a datetime to local timezone, treating naive values as UTC."""
    if dt_obj.tzinfo is None:
        dt_obj = dt_obj.replace(tzinfo=UTC)
    return dt_obj.astimezone(tz or DEFAULT_TIME_ZONE)


def start_of_local_day(dt_obj: datetime, tz: ZoneInfo | None = None) -> datetime:
    """Get the start of day (00:00:00) for a datetime in local timezone."""
    local_dt = as_local(dt_obj, tz)
    return local_dt.replace(hour=0, minute=0, second=0, microsecond=0)


# ==============================================================================
# Parsing
# ==============================================================================


def dt_parse_date(value: str | date | None) -> date | None:
    """Safely parse a stored date value into a `datetime.date`.

    Accepts `date`/`datetime` objects and ISO strings ("2025-04-07" or a full
    ISO datetime, whose date part is used).

    Returns:
        datetime.date or None if parsing fails.
    """
    if not value:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    try:
        return date.fromisoformat(value)
    except ValueError:
        pass

    try:
        return dt_parser.isoparse(value).date()
    except (ValueError, OverflowError):
        _LOGGER.debug("Unable to parse date value '%s'", value)
        return None


def dt_parse(value: str | datetime | None) -> datetime | None:
    """Parse an ISO datetime string into a timezone-aware datetime.

    Naive values are interpreted in the default timezone.

    Returns:
        Aware datetime, or None when the input is empty or unparseable.
    """
    if not value:
        return None
    if isinstance(value, datetime):
        result = value
    elif isinstance(value, str):
        try:
            result = dt_parser.isoparse(value)
        except (ValueError, OverflowError):
            _LOGGER.debug("Unable to parse datetime value '%s'", value)
            return None
    else:
        return None

    if result.tzinfo is None:
        result = result.replace(tzinfo=DEFAULT_TIME_ZONE)
    return result


def dt_to_iso_date(value: str | date | datetime) -> str:
    """Normalize a date, datetime or ISO string to "YYYY-MM-DD".

    Datetimes are converted to the local calendar day first.

    Raises:
        ValueError: When the value cannot be interpreted as a date.
    """
    if isinstance(value, datetime):
        return as_local(value).date().isoformat()
    parsed = dt_parse_date(value)
    if parsed is None:
        raise ValueError(f"Invalid date value: {value!r}")
    return parsed.isoformat()


# ==============================================================================
# Calendar Arithmetic
# ==============================================================================


def dt_add_days(value: str | date, days: int) -> str:
    """Return the ISO date `days` calendar days after `value` (negative allowed)."""
    base = dt_parse_date(value)
    if base is None:
        raise ValueError(f"Invalid date value: {value!r}")
    return (base + relativedelta(days=days)).isoformat()


def dt_previous_day_iso(value: str | date) -> str:
    """Return the ISO date of the day before `value`."""
    return dt_add_days(value, -1)


def is_same_local_day(
    first: str | datetime | None,
    second: str | datetime | None,
    tz: ZoneInfo | None = None,
) -> bool:
    """Return True when both instants fall on the same local calendar day."""
    first_dt = dt_parse(first)
    second_dt = dt_parse(second)
    if first_dt is None or second_dt is None:
        return False
    return as_local(first_dt, tz).date() == as_local(second_dt, tz).date()


def days_elapsed_ceil(
    start: str | datetime | None, end: str | datetime | None
) -> int:
    """Return the absolute elapsed time between two instants in days, rounded up.

    Any partial day counts as a full day; 25 hours is 2 days. An unparseable
    bound yields 0.
    """
    start_dt = dt_parse(start)
    end_dt = dt_parse(end)
    if start_dt is None or end_dt is None:
        return 0
    seconds = abs((end_dt - start_dt).total_seconds())
    return math.ceil(seconds / SECONDS_PER_DAY)


def days_between_dates(earlier: str | date, later: str | date) -> int:
    """Return whole calendar days from `earlier` to `later` (negative if reversed)."""
    earlier_date = dt_parse_date(earlier)
    later_date = dt_parse_date(later)
    if earlier_date is None or later_date is None:
        raise ValueError(f"Invalid date range: {earlier!r} -> {later!r}")
    return (later_date - earlier_date) // timedelta(days=1)
