"""Date coercion utilities.

Turns the loosely typed values callers pass around (epoch seconds, a handful
of fixed text layouts, datetimes) into aware datetimes in the local zone.
"""

from datetime import date, datetime, time, timezone
from typing import Optional, Union

from dateutil import parser as date_parser
from loguru import logger

from ..config import resolve_utc
from ..errors import InvalidInputError

FlexibleDate = Union[int, float, str, datetime, date]

# Zero offset appended to timezone-less text when it should be read as UTC
UTC_OFFSET = '+00:00'

def _from_epoch(seconds: Union[int, float]) -> datetime:
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc).astimezone()
    except (ValueError, OverflowError, OSError) as e:
        raise InvalidInputError(f"Invalid timestamp: {seconds}") from e

def _offset(utc: bool) -> str:
    return UTC_OFFSET if utc else ''

def resolve_local(d: datetime) -> datetime:
    """
    Re-resolve the local offset of an aware datetime after its fields changed.

    The wall-clock fields are kept and the offset is looked up again, so a
    value moved across a daylight saving change lands on the right moment.
    Naive datetimes are returned unchanged.
    """
    if d.tzinfo is None:
        return d
    return d.replace(tzinfo=None).astimezone()

def normalize_date_string(val: str, utc: bool = True) -> str:
    """
    Rewrite one of the recognised text layouts as a complete ISO 8601 string.

    The layout is chosen by length alone:

    - 10: ``YYYY-MM-DD``
    - 16: ``YYYY-MM-DD HH:MM``
    - 19: ``YYYY-MM-DD HH:MM:SS``
    - over 19 with a ``.`` at index 19: fractional seconds, which are dropped
    - 24: already offset-qualified, returned as is

    Args:
        val: The date text
        utc: Append a zero UTC offset where the layout has none

    Returns:
        The ISO 8601 text to parse

    Raises:
        InvalidInputError: If the length matches none of the layouts
    """
    length = len(val)

    if length == 10:
        return val + 'T00:00:00' + _offset(utc)

    if length == 16:
        return val.replace(' ', 'T', 1) + ':00' + _offset(utc)

    if length == 19:
        return val.replace(' ', 'T', 1) + _offset(utc)

    if length > 19 and val[19] == '.':
        return val[:19].replace(' ', 'T', 1) + _offset(utc)

    if length == 24:
        return val

    logger.warning(f"normalize_date_string: unrecognised layout of length {length}: {val!r}")
    raise InvalidInputError(f"Invalid date string: {val}")

def to_date(val: FlexibleDate, utc: Optional[bool] = None) -> datetime:
    """
    Convert a flexible date value into a datetime.

    Args:
        val: Epoch seconds, date text in a recognised layout, a date, or a datetime
        utc: Read timezone-less text as UTC, defaults to the configured value

    Returns:
        A datetime in the local zone; naive datetimes are returned unchanged

    Raises:
        InvalidInputError: If the value cannot be converted
    """
    utc = resolve_utc(utc)

    if isinstance(val, bool):
        raise InvalidInputError(f"Unsupported date value: {val!r}")

    if isinstance(val, (int, float)):
        return _from_epoch(val)

    if isinstance(val, str):
        iso_text = normalize_date_string(val, utc)
        logger.debug(f"to_date: {val!r} normalised to {iso_text!r}")
        try:
            parsed = date_parser.isoparse(iso_text)
        except ValueError as e:
            raise InvalidInputError(f"Invalid date string: {val}") from e
        return parsed.astimezone()

    if isinstance(val, datetime):
        return val.astimezone() if val.tzinfo is not None else val

    if isinstance(val, date):
        return datetime.combine(val, time()).astimezone()

    raise InvalidInputError(f"Unsupported date argument type: {type(val)}")

def to_birth_date(val: FlexibleDate) -> datetime:
    """
    Convert a date of birth into a datetime, always reading text as local time.

    Ten character text gets a midnight time added, any other text is handed to
    the general dateutil parser.

    Raises:
        InvalidInputError: If the value cannot be converted
    """
    if isinstance(val, bool):
        raise InvalidInputError(f"Unsupported date value: {val!r}")

    if isinstance(val, (int, float)):
        return _from_epoch(val)

    if isinstance(val, str):
        text = val + 'T00:00:00' if len(val) == 10 else val
        try:
            parsed = date_parser.parse(text)
        except (ValueError, OverflowError) as e:
            raise InvalidInputError(f"Invalid date string: {val}") from e
        return parsed.astimezone()

    if isinstance(val, datetime):
        return val.astimezone() if val.tzinfo is not None else val

    if isinstance(val, date):
        return datetime.combine(val, time()).astimezone()

    raise InvalidInputError(f"Unsupported date argument type: {type(val)}")
