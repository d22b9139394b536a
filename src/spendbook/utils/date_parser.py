"""Date parsing utilities for bank statement values."""

import re
from datetime import datetime
from typing import Optional

from dateutil import parser as date_parser

from spendbook.domain.errors import (
    DATE_EMPTY,
    DATE_REQUIRED,
    DateRequiredError,
    InvalidDateFormatError,
    invalid_date_format,
)

# Trailing "DD/MM/YYYY HH:MM:SS", as appended by some banks to descriptions
DESCRIPTION_DATE_TIME_PATTERN = re.compile(
    r"(\d{2})/(\d{2})/(\d{4})\s+(\d{2}):(\d{2}):(\d{2})$"
)

# Tried in order; all are anchored at the end of the string only
DATE_PATTERNS = (
    re.compile(r"(\d{2})-(\d{2})-(\d{4})\s+(\d{2}):(\d{2}):(\d{2})$"),
    re.compile(r"(\d{2})-(\d{2})-(\d{4})$"),
    DESCRIPTION_DATE_TIME_PATTERN,
)


def _build_datetime(match: re.Match) -> Optional[datetime]:
    """Build a local datetime from day/month/year[/h/m/s] groups.

    Returns None when the components do not form a real date or time.
    """
    day, month, year, *clock = (int(group) for group in match.groups())
    try:
        return datetime(year, month, day, *clock)
    except ValueError:
        return None


def extract_date_time_from_description(description: Optional[str]) -> Optional[datetime]:
    """Extract a trailing "DD/MM/YYYY HH:MM:SS" timestamp from a description.

    Args:
        description: Transaction description text

    Returns:
        Naive local datetime, or None if there is no valid trailing timestamp
    """
    if not description:
        return None
    match = DESCRIPTION_DATE_TIME_PATTERN.search(description)
    if match is None:
        return None
    return _build_datetime(match)


def strip_date_time_from_description(description: str) -> str:
    """Remove a valid trailing timestamp from a description.

    The description is returned stripped; it is otherwise unchanged when no
    valid timestamp is found.
    """
    if extract_date_time_from_description(description) is None:
        return description.strip()
    return DESCRIPTION_DATE_TIME_PATTERN.sub("", description).strip()


def parse_date(date_str: Optional[str]) -> datetime:
    """Parse a statement date into a datetime.

    Supported formats, tried in order:
    - "DD-MM-YYYY HH:MM:SS"
    - "DD-MM-YYYY"
    - "DD/MM/YYYY HH:MM:SS"
    - anything dateutil understands, e.g. "2024-01-15" or "Jan 15, 2024"

    Args:
        date_str: Date string

    Returns:
        Naive local datetime

    Raises:
        DateRequiredError: If the value is missing or blank
        InvalidDateFormatError: If no format matches
    """
    if not date_str:
        raise DateRequiredError(DATE_REQUIRED)

    trimmed = str(date_str).strip()
    if not trimmed:
        raise DateRequiredError(DATE_EMPTY)

    for pattern in DATE_PATTERNS:
        match = pattern.search(trimmed)
        if match is not None:
            parsed = _build_datetime(match)
            if parsed is not None:
                return parsed

    try:
        parsed = date_parser.parse(trimmed)
    except (ValueError, OverflowError):
        raise InvalidDateFormatError(invalid_date_format(date_str)) from None

    # Values with a UTC offset are converted to naive local time
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed
