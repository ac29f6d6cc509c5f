"""Date and time normalization for fixture rows.

Input text is parsed into datetime.date / datetime.time values, which carry
the ordering, and display strings are derived from those values rather than
from the original text (so the weekday is computed, never read).

Formats:
  input date     "01/05/2024"      (DD/MM/YYYY, zero padded day and month)
  input time     "2:00:00 PM"      (12-hour clock, hour padding optional,
                                    upper-case AM/PM)
  display date   "Wednesday 1 May"
  display time   "2:00 PM"
"""

import re
from datetime import date, datetime, time

from tgfc_fixtures.errors import FixtureParseError

DATE_FORMAT = "%d/%m/%Y"

# strptime accepts single-digit days and months; the source format does not.
_DATE_RE = re.compile(r"^\d{2}/\d{2}/\d{4}$")
# Upper-case period, single space, two-digit minute and second.
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2}):(\d{2}) (AM|PM)$")

# English names regardless of the process locale (%A/%B/%p follow LC_TIME)
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def parse_date(text: str) -> date:
    """Parse a "DD/MM/YYYY" date.

    Raises:
        FixtureParseError: If the text is not a valid calendar date in that format.
    """
    if not _DATE_RE.match(text):
        raise FixtureParseError(f"Unable to parse date {text!r}: expected DD/MM/YYYY")
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as e:
        raise FixtureParseError(f"Unable to parse date {text!r}: {e}") from e


def parse_time(text: str) -> time:
    """Parse an "H:MM:SS AM|PM" time of day.

    Raises:
        FixtureParseError: If the text is not a valid 12-hour clock time.
    """
    match = _TIME_RE.match(text)
    if not match:
        raise FixtureParseError(f"Unable to parse time {text!r}: expected H:MM:SS AM|PM")

    hour, minute, second = (int(g) for g in match.group(1, 2, 3))
    if not 1 <= hour <= 12:
        raise FixtureParseError(f"Unable to parse time {text!r}: hour must be 1-12")
    hour = hour % 12 + (12 if match.group(4) == "PM" else 0)
    try:
        return time(hour, minute, second)
    except ValueError as e:
        raise FixtureParseError(f"Unable to parse time {text!r}: {e}") from e


def format_time(value: time) -> str:
    """Format a time as "H:MM AM|PM", dropping seconds. The hour is not padded."""
    hour = value.hour % 12 or 12
    period = "AM" if value.hour < 12 else "PM"
    return f"{hour}:{value.minute:02d} {period}"


def format_date(value: date) -> str:
    """Format a date as "Weekday D Month", e.g. "Saturday 12 April"."""
    return f"{WEEKDAY_NAMES[value.weekday()]} {value.day} {MONTH_NAMES[value.month - 1]}"
