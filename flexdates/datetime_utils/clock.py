"""Clock access for the date utilities.

Every read of "now" in the package goes through :func:`now` so the current
moment can be substituted in one place.
"""

import math
from datetime import datetime
from typing import Optional

from .parser import FlexibleDate, to_date

def now() -> datetime:
    """Return the current moment as an aware datetime in the local zone."""
    return datetime.now().astimezone()

def timestamp(d: Optional[FlexibleDate] = None, utc: Optional[bool] = None) -> int:
    """
    Return whole seconds since 1970-01-01.

    Args:
        d: Optional date to convert, defaults to the current moment
        utc: Read timezone-less text as UTC, defaults to the configured value

    Returns:
        The floor of the epoch seconds of `d`, or of now

    Raises:
        InvalidInputError: If `d` cannot be coerced into a datetime
    """
    if d is None:
        return math.floor(now().timestamp())
    return math.floor(to_date(d, utc).timestamp())
