"""Date helpers for due dates written as YYYY-MM-DD."""

import re
from datetime import date, datetime
from typing import Optional

ISO_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")


def today() -> date:
    """Return the current local date."""
    return date.today()


def is_iso_date_shape(text: str) -> bool:
    """Check that text has the strict YYYY-MM-DD shape.

    Only the shape is checked; ``2025-13-45`` passes.
    """
    return bool(ISO_DATE_RE.match(text or ""))


def parse_iso_date(text: Optional[str]) -> Optional[date]:
    """Parse a YYYY-MM-DD string into a date.

    Args:
        text: Date string, or None

    Returns:
        The parsed date, or None if the string is missing, has the wrong
        shape or names a day that does not exist
    """
    if not text or not is_iso_date_shape(text):
        return None
    try:
        return datetime.strptime(text, "%Y-%m-%d").date()
    except ValueError:
        return None
