"""
Date helpers with explicit timezone handling.

Schedule days are calendar dates in the configured clinic timezone,
never the host timezone.
"""

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def today_in(timezone_name: str) -> date:
    """
    Return today's calendar date in the named IANA timezone.

    Falls back to UTC when the zone is unknown to the tz database.

    Args:
        timezone_name: IANA zone name (e.g. "Europe/Vienna")

    Returns:
        The current local date
    """
    try:
        zone = ZoneInfo(timezone_name)
    except (ZoneInfoNotFoundError, ValueError):
        zone = UTC
    return datetime.now(zone).date()


def parse_iso_date(value: str | None) -> date | None:
    """
    Parse an ISO calendar date (YYYY-MM-DD); None when missing or malformed.

    Args:
        value: Raw query/path value

    Returns:
        Parsed date or None
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None
