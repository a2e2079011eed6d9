"""Date and time rendering shared by balance slips and statements."""
from datetime import datetime, tzinfo

from dateutil import tz

from bank_kata.i18n import _

DEFAULT_ZONE_NAME = "America/New_York"
"""US Eastern time, switching between EST and EDT."""

DEFAULT_ZONE: tzinfo = tz.gettz(DEFAULT_ZONE_NAME)  # type: ignore[assignment]

_MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)


def _localize(instant: datetime, zone: tzinfo) -> datetime:
    if instant.tzinfo is None:
        raise ValueError(f"Cannot format a naive datetime: {instant}")
    return instant.astimezone(zone)


def format_date(instant: datetime, zone: tzinfo = DEFAULT_ZONE) -> str:
    """Format *instant* as ``MMM dd, yyyy`` in *zone*, e.g. ``Feb 10, 2020``."""
    local = _localize(instant, zone)
    month = _(_MONTH_ABBREVIATIONS[local.month - 1])
    return f"{month} {local.day:02d}, {local.year:04d}"


def format_time(instant: datetime, zone: tzinfo = DEFAULT_ZONE) -> str:
    """Format *instant* as 24-hour ``HH:mm:ss`` in *zone*."""
    return _localize(instant, zone).strftime("%H:%M:%S")


def format_timestamp(instant: datetime, zone: tzinfo = DEFAULT_ZONE) -> str:
    """Render the date/time line used by slips and statements.

    The ``ET`` suffix is a fixed label and does not follow daylight saving.
    """
    return (
        f"{_('Date')}: {format_date(instant, zone)} "
        f"{_('Time')}: {format_time(instant, zone)} ET"
    )
