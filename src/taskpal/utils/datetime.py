"""Fixed-pattern date and time helpers.

Dates typed by the user and dates written to the storage file share the
same strict patterns, so a file written by taskpal can always be read back.
"""

from datetime import date, datetime, time
from typing import Tuple

from ..exceptions import DateTimeParseError

# Human readable patterns used in error messages
DATE_TIME_PATTERN = "yyyy-MM-dd HHmm"
TIME_PATTERN = "HHmm"
DATE_PATTERN = "yyyy-MM-dd"
TIMING_PATTERN = f"{DATE_TIME_PATTERN}-{TIME_PATTERN}"

# strptime equivalents
DATE_TIME_FORMAT = "%Y-%m-%d %H%M"
TIME_FORMAT = "%H%M"
DATE_FORMAT = "%Y-%m-%d"

# Display formats for task listings
DISPLAY_DATE_TIME_FORMAT = "%b %d %Y %H:%M"
DISPLAY_TIME_FORMAT = "%H:%M"
DISPLAY_DATE_FORMAT = "%b %d %Y"


def _error_index(text: str, pattern: str) -> int:
    """Return the index of the first character that breaks ``pattern``.

    Letters in the pattern stand for digits, anything else must match
    literally. When the shape is right but a field is out of range the
    error is reported at index 0.
    """
    for index, expected in enumerate(pattern):
        if index >= len(text):
            return index
        actual = text[index]
        if expected.isalpha():
            if not actual.isdigit():
                return index
        elif actual != expected:
            return index
    if len(text) > len(pattern):
        return len(pattern)
    return 0


def _parse(text: str, fmt: str, pattern: str) -> datetime:
    # strptime accepts single digit fields, the fixed patterns do not
    if len(text) != len(pattern):
        raise DateTimeParseError(text, pattern, _error_index(text, pattern))
    try:
        return datetime.strptime(text, fmt)
    except ValueError:
        raise DateTimeParseError(text, pattern, _error_index(text, pattern)) from None


def parse_date_time(text: str) -> datetime:
    """Parse ``yyyy-MM-dd HHmm`` into a naive local datetime."""
    return _parse(text, DATE_TIME_FORMAT, DATE_TIME_PATTERN)


def parse_time(text: str) -> time:
    """Parse ``HHmm`` into a time of day."""
    return _parse(text, TIME_FORMAT, TIME_PATTERN).time()


def parse_date(text: str) -> date:
    """Parse ``yyyy-MM-dd`` into a calendar date."""
    return _parse(text, DATE_FORMAT, DATE_PATTERN).date()


def format_date_time(value: datetime) -> str:
    return value.strftime(DATE_TIME_FORMAT)


def format_time(value: time) -> str:
    return value.strftime(TIME_FORMAT)


def display_date_time(value: datetime) -> str:
    return value.strftime(DISPLAY_DATE_TIME_FORMAT)


def display_time(value: time) -> str:
    return value.strftime(DISPLAY_TIME_FORMAT)


def display_date(value: date) -> str:
    return value.strftime(DISPLAY_DATE_FORMAT)


def parse_timing(text: str) -> Tuple[datetime, time]:
    """Parse an event timing ``yyyy-MM-dd HHmm-HHmm`` into start and end.

    Errors name the whole timing text and the position inside it.
    """
    split = len(DATE_TIME_PATTERN)
    if len(text) != len(TIMING_PATTERN) or text[split] != "-":
        raise DateTimeParseError(text, TIMING_PATTERN, _error_index(text, TIMING_PATTERN))
    try:
        start = parse_date_time(text[:split])
    except DateTimeParseError as e:
        raise DateTimeParseError(text, TIMING_PATTERN, e.position) from None
    try:
        end = parse_time(text[split + 1:])
    except DateTimeParseError as e:
        raise DateTimeParseError(text, TIMING_PATTERN, split + 1 + e.position) from None
    return start, end
