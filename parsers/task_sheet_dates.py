"""
Date and time window parsing for task sheet stops.

Stop lines carry a day-first date with optional start and end times:
    "01.06.2024 08:00-10:00"
    "01.06 08:00"          (year taken from the reference date)
    "01.06.2024"

IMPORTANT: dates are DD.MM[.YYYY]. Month-first input is NOT supported.
"""

import re
from datetime import date, datetime, timezone
from typing import Optional

import pandas as pd
import structlog

from models.task_sheet import TimeWindow

logger = structlog.get_logger(__name__)

# DATE[ TIME]?[-TIME]?
DATETIME_RANGE_PATTERN = re.compile(r'^([0-9.]+) ?([0-9:]+)?-?([0-9:]+)?$')

DATETIME_FORMATS = [
    "%d.%m.%Y %H:%M:%S",
    "%d.%m.%Y %H:%M",
    "%d.%m.%Y %H",
    "%d.%m.%Y",
    "%d.%m.%y %H:%M:%S",
    "%d.%m.%y %H:%M",
    "%d.%m.%y %H",
    "%d.%m.%y",
]

# Carbon-style ISO string: UTC, microseconds, Z suffix
ISO_INSTANT_FORMAT = "%Y-%m-%dT%H:%M:%S.%fZ"

# Anything earlier is a misread fragment, not a stop date
MIN_YEAR = 1900


def _complete_date(date_part: str, reference_date: date) -> Optional[str]:
    """
    Append the reference year to a day.month token.

    Returns:
        "DD.MM.YYYY"-shaped string, or None unless day and month are present
    """
    pieces = [p for p in date_part.split('.') if p]
    if len(pieces) == 2:
        pieces.append(str(reference_date.year))
    if len(pieces) != 3:
        return None
    return '.'.join(pieces)


def parse_instant(value: str) -> Optional[str]:
    """
    Parse a "DD.MM.YYYY[ HH:MM[:SS]]" string to an ISO-8601 UTC instant.

    Tries the fixed day-first formats, then pandas with dayfirst=True.

    Returns:
        ISO string, or None if the value cannot be parsed
    """
    value = value.strip()
    if not value:
        return None

    parsed = None
    for fmt in DATETIME_FORMATS:
        try:
            parsed = datetime.strptime(value, fmt)
            break
        except ValueError:
            continue

    if parsed is None:
        try:
            result = pd.to_datetime(value, dayfirst=True)
        except (ValueError, TypeError, OverflowError):
            logger.debug("datetime_unparseable", value=value)
            return None

        if pd.isna(result):
            return None

        parsed = result.to_pydatetime()
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)

    if parsed.year < MIN_YEAR:
        logger.debug("datetime_out_of_range", value=value, year=parsed.year)
        return None

    return parsed.strftime(ISO_INSTANT_FORMAT)


def parse_time_window(
    value: Optional[str],
    reference_date: Optional[date] = None,
) -> TimeWindow:
    """
    Parse a stop's date/time token into a time window.

    The date is combined with the start time for datetime_from and with the
    end time for datetime_to. Each side parses independently: a bad side
    becomes None without touching the other.

    Args:
        value: Token such as "01.06.2024 08:00-10:00"
        reference_date: Supplies the year when the token has none (default: today)

    Returns:
        TimeWindow (both None when the token does not look like a date)
    """
    match = DATETIME_RANGE_PATTERN.match(value or "")
    if not match:
        return TimeWindow()

    reference_date = reference_date or date.today()
    date_part = _complete_date(match.group(1), reference_date)
    if date_part is None:
        logger.debug("datetime_without_date", value=value)
        return TimeWindow()

    start_time = match.group(2)
    end_time = match.group(3)

    start_str = f"{date_part} {start_time}" if start_time else date_part
    end_str = f"{date_part} {end_time}" if end_time else date_part

    return TimeWindow(
        datetime_from=parse_instant(start_str),
        datetime_to=parse_instant(end_str),
    )
