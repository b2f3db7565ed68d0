"""Date-time parsing and formatting.

All values are naive ``datetime`` objects in local time; no timezone
conversion is ever applied. Three textual forms exist:

- input: ``YYYY-MM-DD HHMM`` or ``YYYY-MM-DD`` (midnight), as typed by the user
- machine: ``YYYY-MM-DD HHMM``, written to the task file
- display: ``Mon DD YYYY HH:MM``, shown to the user
"""

import re
from datetime import datetime
from typing import Optional

from ..exceptions import DateFormatError


DATE_TIME_FORMAT = "%Y-%m-%d %H%M"
DATE_FORMAT = "%Y-%m-%d"
DISPLAY_FORMAT = "%b %d %Y %H:%M"

_INPUT_FORMATS = (DATE_TIME_FORMAT, DATE_FORMAT)

# strptime alone accepts unpadded fields such as "2019-1-2 900"
_INPUT_SHAPE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}( [0-9]{4})?")


def parse_date_time(text: Optional[str]) -> datetime:
    """Parse user or file date text into a naive datetime.

    Args:
        text: Date text in ``YYYY-MM-DD HHMM`` or ``YYYY-MM-DD`` form

    Returns:
        The parsed datetime (midnight when no time was given)

    Raises:
        DateFormatError: If the text is missing or matches neither form
    """
    if text is None or not text.strip():
        raise DateFormatError(
            "", "☹ OOPS!!! A date is required, e.g. 2019-12-02 1800."
        )

    cleaned = text.strip()
    if not _INPUT_SHAPE.fullmatch(cleaned):
        raise DateFormatError(cleaned)
    for fmt in _INPUT_FORMATS:
        try:
            return datetime.strptime(cleaned, fmt)
        except ValueError:
            continue
    raise DateFormatError(cleaned)


def format_display(dt: datetime) -> str:
    """Render a datetime for people, e.g. ``Dec 02 2019 18:00``."""
    return dt.strftime(DISPLAY_FORMAT)


def format_machine(dt: datetime) -> str:
    """Render a datetime for the task file; always re-parseable.

    The year is padded by hand because strftime drops leading zeros on
    some platforms (year 999 becomes "999", which will not parse back).
    """
    return f"{dt.year:04d}-{dt:%m-%d %H%M}"
