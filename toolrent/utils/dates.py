"""Date utilities for rental periods and display."""
import logging
from datetime import datetime, timezone

from dateutil import parser as date_parser
from dateutil import tz
from dateutil.relativedelta import relativedelta

logger = logging.getLogger(__name__)

INVALID_DATE = "Invalid date"

# Fixed English abbreviations so output does not depend on the process locale.
MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def utc_now():
    """Current instant as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def local_zone():
    # Built per call so a changed TZ environment is picked up.
    return tz.tzlocal()


def ensure_aware(value):
    """Treat naive datetimes as local wall-clock time."""
    if value.tzinfo is None:
        return value.replace(tzinfo=local_zone())
    return value


def parse_timestamp(value):
    """
    Parse an ISO-8601 timestamp from the backend.

    Args:
        value: ISO string, datetime, or None

    Returns:
        Aware datetime, or None if the value is missing or unparseable
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return ensure_aware(value)
    text = str(value).strip()
    try:
        parsed = date_parser.isoparse(text)
    except (ValueError, OverflowError, TypeError):
        logger.debug("Unparseable timestamp: %r", value)
        return None

    # A bare date is midnight UTC; a date-time without an offset is local time.
    if parsed.tzinfo is None and "T" not in text and " " not in text:
        return parsed.replace(tzinfo=timezone.utc)
    return ensure_aware(parsed)


def add_days(start, days):
    """
    Add whole calendar days on the local calendar.

    The local wall-clock time is kept, so a day that spans a DST change is 23
    or 25 hours long. Returns an aware UTC datetime.
    """
    local_start = ensure_aware(start).astimezone(local_zone())
    return (local_start + relativedelta(days=days)).astimezone(timezone.utc)


def _display(value):
    return f"{MONTH_ABBREVIATIONS[value.month - 1]} {value.day}, {value.year}"


def format_date(value=None):
    """
    Format a timestamp as "<Mon> <D>, <YYYY>", e.g. "Jan 5, 2024".

    Missing input renders today's date. Anything that cannot be parsed renders
    as "Invalid date". Never raises.
    """
    try:
        if value is None or value == "":
            logger.debug("No date provided, showing today")
            return _display(datetime.now())

        parsed = parse_timestamp(value)
        if parsed is None:
            return INVALID_DATE

        return _display(parsed.astimezone())
    except (ValueError, OverflowError, OSError):
        logger.debug("Date formatting failed for %r", value, exc_info=True)
        return INVALID_DATE


def time_ago(value, now=None):
    """
    Describe how long ago a timestamp was, e.g. "3 days ago" or "Just now".

    Args:
        value: ISO string or datetime
        now: Reference instant (default: current UTC time)

    Returns:
        Relative time string, or "Invalid date" if the timestamp is unparseable
    """
    then = parse_timestamp(value)
    if then is None:
        return INVALID_DATE

    now = ensure_aware(now) if now is not None else utc_now()
    seconds = int((now - then).total_seconds())
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24

    if days > 0:
        return f"{days} {'day' if days == 1 else 'days'} ago"
    elif hours > 0:
        return f"{hours} {'hour' if hours == 1 else 'hours'} ago"
    elif minutes > 0:
        return f"{minutes} {'minute' if minutes == 1 else 'minutes'} ago"
    return "Just now"
