# solaredge_api/models/timefmt.py
"""Date formats used by the monitoring API.

All timestamps are naive and expressed in the site's local time zone.
"""

from __future__ import annotations

from datetime import date, datetime

DATE_FORMAT = "%Y-%m-%d"
DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def format_datetime(value: datetime) -> str:
    return value.strftime(DATETIME_FORMAT)


def parse_date(raw: str) -> date:
    return datetime.strptime(raw, DATE_FORMAT).date()


def parse_datetime(raw: str) -> datetime:
    """Parse ``YYYY-MM-DD HH:MM:SS``; a bare date is read as midnight."""
    try:
        return datetime.strptime(raw, DATETIME_FORMAT)
    except ValueError:
        return datetime.strptime(raw, DATE_FORMAT)
