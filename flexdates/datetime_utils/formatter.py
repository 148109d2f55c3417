"""Formatting utilities: ISO strings, locale aware strings and elapsed times."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from babel import Locale, UnknownLocaleError
from babel.dates import format_date, format_skeleton, format_time
from loguru import logger

from . import clock
from .parser import FlexibleDate, to_date
from ..config import DatesConfig
from ..errors import InvalidArgumentError

TEXT_TYPES = ('long', 'short')

# Long dates use the locale's full pattern, skeletons don't widen names
NICE_SKELETONS = {
    'short': 'yMMMEd',
}
RELATIVE_SKELETONS = {
    'long': 'MMMMd',
    'short': 'MMMd',
}

@dataclass(frozen=True)
class ElapsedOptions:
    """Field selection for :func:`elapsed`."""
    show_minutes: bool = True
    show_seconds: bool = True
    show_zero_hours: bool = False
    show_zero_minutes: bool = False

def _pad(n: int) -> str:
    return f"{n:02d}"

def _same_day(a: datetime, b: datetime) -> bool:
    return a.day == b.day and a.month == b.month and a.year == b.year

def _resolve_locale(locale: Optional[str]) -> Locale:
    identifier = DatesConfig.locale if locale is None else locale
    try:
        return Locale.parse(identifier.replace('-', '_'))
    except (UnknownLocaleError, ValueError) as e:
        logger.warning(f"Unknown locale {identifier!r}")
        raise InvalidArgumentError(f"Unknown locale: {identifier}") from e

def _resolve_text(text: Optional[str]) -> str:
    text = DatesConfig.text if text is None else text
    if text not in TEXT_TYPES:
        logger.warning(f"Unknown text type {text!r}")
        raise InvalidArgumentError(f"text must be one of 'long' or 'short'. Received: {text}")
    return text

def iso(d: FlexibleDate, time: bool = True, utc: Optional[bool] = None, numbers_only: bool = False) -> str:
    """
    Return a date string in a modified ISO format suitable for DBs and most systems.

    Args:
        d: The date value
        time: Set to False to only return the date with no time
        utc: Read timezone-less text as UTC, defaults to the configured value
        numbers_only: Set to True to drop the dashes, colons and space

    Returns:
        'YYYY-MM-DD HH:MM:SS', 'YYYY-MM-DD', or the digits only variants

    Examples:
        >>> iso('2025-02-11 09:22:13', numbers_only=True)  # with a UTC host
        '20250211092213'
    """
    d = to_date(d, utc)

    date_part = (str(d.year), _pad(d.month), _pad(d.day))
    s_date = ('' if numbers_only else '-').join(date_part)

    if not time:
        return s_date

    time_part = (_pad(d.hour), _pad(d.minute), _pad(d.second))
    s_time = ('' if numbers_only else ':').join(time_part)

    return f"{s_date}{s_time}" if numbers_only else f"{s_date} {s_time}"

def is_today(d: FlexibleDate, utc: Optional[bool] = None) -> bool:
    """Return True if the date falls on the current day."""
    return _same_day(to_date(d, utc), clock.now())

def nice(
    d: FlexibleDate,
    locale: Optional[str] = None,
    text: Optional[str] = None,
    time: bool = True,
    utc: Optional[bool] = None
) -> str:
    """
    Return a date formatted for people in the given locale.

    Args:
        d: The date value
        locale: Locale identifier, e.g. 'en-US' or 'fr_CA'
        text: 'long' or 'short' month and weekday names
        time: Set to False to leave out the time
        utc: Read timezone-less text as UTC, defaults to the configured value

    Returns:
        e.g. 'Tuesday, February 11, 2025 9:22:13 AM'

    Raises:
        InvalidArgumentError: If the locale or text type is unknown
    """
    text = _resolve_text(text)
    loc = _resolve_locale(locale)
    d = to_date(d, utc)

    if text == 'long':
        s_date = format_date(d, format='full', locale=loc)
    else:
        s_date = format_skeleton(NICE_SKELETONS[text], d, tzinfo=d.tzinfo, locale=loc)
    if not time:
        return s_date

    s_time = format_time(d, format='medium', tzinfo=d.tzinfo, locale=loc)
    return f"{s_date} {s_time}"

def relative(
    d: FlexibleDate,
    locale: Optional[str] = None,
    text: Optional[str] = None,
    utc: Optional[bool] = None
) -> str:
    """
    Return a short description of the date relative to the current day.

    Today gives the 24 hour time ('HH:MM'), other days the month and day, with
    the year added when it is not the current one.

    Raises:
        InvalidArgumentError: If the locale or text type is unknown
    """
    text = _resolve_text(text)
    loc = _resolve_locale(locale)
    today = clock.now()
    d = to_date(d, utc)

    if _same_day(d, today):
        return f"{_pad(d.hour)}:{_pad(d.minute)}"

    s_ret = format_skeleton(RELATIVE_SKELETONS[text], d, tzinfo=d.tzinfo, locale=loc)
    if d.year != today.year:
        s_ret += f", {d.year}"
    return s_ret

def elapsed(seconds: int, opts: Optional[ElapsedOptions] = None) -> str:
    """
    Convert a number of seconds into human readable hours, minutes and seconds.

    Only the fields the magnitude and options call for are included, seconds
    are never shown without minutes.

    Args:
        seconds: The seconds elapsed
        opts: Field selection, defaults to ElapsedOptions()

    Returns:
        The fields joined by ':', e.g. '1:01:01', '2:05' or '42'
    """
    if opts is None:
        opts = ElapsedOptions()

    h, r = divmod(seconds, 3600)
    m, s = divmod(r, 60)

    fields = []

    # Hours
    if h:
        fields.append(str(h))
        if opts.show_minutes:
            fields.append(_pad(m))
            if opts.show_seconds:
                fields.append(_pad(s))

    # Minutes
    elif m:
        if opts.show_zero_hours:
            fields.append('0')
        if opts.show_minutes:
            fields.append(_pad(m) if opts.show_zero_hours else str(m))
            if opts.show_seconds:
                fields.append(_pad(s))

    # Seconds only
    else:
        if opts.show_zero_hours:
            fields.extend(['0', '00'])
        elif opts.show_zero_minutes:
            fields.append('0')
        if opts.show_minutes and opts.show_seconds:
            zero_padded = opts.show_zero_hours or opts.show_zero_minutes
            fields.append(_pad(s) if zero_padded else str(s))

    return ':'.join(fields)
