import re
from datetime import datetime, timedelta

from floorball_cal.utils.misc_utils import clean_text

DEFAULT_EVENT_DURATION_MINUTES = 90

# D.M.YYYY H:MM, e.g. "12.3.2024 18:30"
GERMAN_DATETIME_PATTERN = re.compile(
    r"(\d{1,2})\.(\d{1,2})\.(\d{4})\s+(\d{1,2}):(\d{2})"
)


class ParseError(ValueError):
    """Raised when a date/time string does not match the expected German format."""

    def __init__(self, value: str, reason: str = "unexpected format"):
        self.value = value
        self.reason = reason
        super().__init__(f"Could not parse date value {value!r}: {reason}")


def parse_german_datetime(raw_value: str) -> datetime:
    """Parses ``D.M.YYYY H:MM`` (found anywhere in the input) into a naive local datetime.

    No timezone is attached; the site publishes local times without an offset.

    Raises:
        ParseError: if the pattern is not found or the components do not form
            a valid date and time.
    """
    normalized = clean_text(raw_value)
    match = GERMAN_DATETIME_PATTERN.search(normalized)
    if match is None:
        raise ParseError(raw_value)

    day, month, year, hours, minutes = (int(group) for group in match.groups())
    try:
        return datetime(year, month, day, hours, minutes)
    except ValueError as e:
        raise ParseError(raw_value, str(e)) from e


def compute_default_end(
    start: datetime, duration_minutes: int = DEFAULT_EVENT_DURATION_MINUTES
) -> datetime:
    """Returns ``start`` plus ``duration_minutes``."""
    return start + timedelta(minutes=duration_minutes)
