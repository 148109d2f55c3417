"""Calendar arithmetic: day-of-week lookups, increments, ages and timeframes."""

from datetime import datetime, timedelta, timezone
from dateutil.relativedelta import relativedelta
from loguru import logger
from typing import Optional, Tuple, Union

from . import clock
from .formatter import iso
from .parser import FlexibleDate, resolve_local, to_birth_date, to_date
from ..errors import InvalidArgumentError

MS_PER_DAY = 86400000
MS_PER_WEEK = MS_PER_DAY * 7

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

TIMEFRAME_TYPES = ('day', 'days', 'week', 'weeks', 'month', 'months', 'year', 'years')
TIMEFRAME_FORMATS = ('date', 'datetime', 'timestamp')

def js_weekday(d: datetime) -> int:
    """Return the day of the week with Sunday as 0 and Saturday as 6."""
    return (d.weekday() + 1) % 7

def _check_dow(name: str, dow: int) -> None:
    if dow < 0 or dow > 6:
        logger.warning(f"{name}: dow out of range: {dow}")
        raise InvalidArgumentError(f"{name} dow param can not be less than 0 or more than 6")

def _check_weeks(name: str, weeks: int) -> None:
    if weeks < 1:
        logger.warning(f"{name}: weeks out of range: {weeks}")
        raise InvalidArgumentError(f"{name} weeks param can not be less than 1")

def _midnight(d: datetime) -> datetime:
    return resolve_local(d.replace(hour=0, minute=0, second=0, microsecond=0))

def _shift_ms(d: datetime, ms: int) -> datetime:
    # Fixed millisecond offsets on the absolute timeline, re-read as local time
    return (d + timedelta(milliseconds=ms)).astimezone()

def age(d: FlexibleDate) -> int:
    """
    Return the current age of someone based on their date of birth.

    The age is the number of whole years in the millisecond distance between
    now and the birth date, it does not check whether the birthday has passed
    this year.

    Args:
        d: The date of birth

    Returns:
        The age in years
    """
    born = to_birth_date(d)
    current = clock.now()
    if born.tzinfo is None:
        current = current.replace(tzinfo=None)
    diff_ms = (current - born) // timedelta(milliseconds=1)
    age_date = EPOCH + timedelta(milliseconds=diff_ms)
    return abs(age_date.year - 1970)

def day_of_week(dow: int) -> datetime:
    """
    Return midnight of a day in the current week, regardless of past or future.

    Args:
        dow: The day of the week (Sunday is 0, Saturday is 6)

    Returns:
        A new datetime in the local zone

    Raises:
        InvalidArgumentError: If dow is not between 0 and 6
    """
    _check_dow('day_of_week', dow)

    today = _midnight(clock.now())
    diff = js_weekday(today) - dow
    return _shift_ms(today, -(diff * MS_PER_DAY))

def next_day_of_week(dow: int, weeks: int = 1) -> datetime:
    """
    Return midnight of a day of the week in the next week, or many weeks ahead.

    Args:
        dow: The day of the week (Sunday is 0, Saturday is 6)
        weeks: Number of weeks in the future, defaults to 1

    Returns:
        A new datetime in the local zone

    Raises:
        InvalidArgumentError: If dow is not between 0 and 6, or weeks is less than 1
    """
    _check_dow('next_day_of_week', dow)
    _check_weeks('next_day_of_week', weeks)

    today = _midnight(clock.now())
    diff = 7 + (dow - js_weekday(today))
    ms = diff * MS_PER_DAY
    if weeks > 1:
        ms += (weeks - 1) * MS_PER_WEEK
    return _shift_ms(today, ms)

def previous_day_of_week(dow: int, weeks: int = 1) -> datetime:
    """
    Return midnight of a day of the week in the previous week, or many weeks back.

    Args:
        dow: The day of the week (Sunday is 0, Saturday is 6)
        weeks: Number of weeks in the past, defaults to 1

    Returns:
        A new datetime in the local zone

    Raises:
        InvalidArgumentError: If dow is not between 0 and 6, or weeks is less than 1
    """
    _check_dow('previous_day_of_week', dow)
    _check_weeks('previous_day_of_week', weeks)

    today = _midnight(clock.now())
    diff = 7 + (js_weekday(today) - dow)
    ms = diff * MS_PER_DAY
    if weeks > 1:
        ms += (weeks - 1) * MS_PER_WEEK
    return _shift_ms(today, -ms)

def increment(days: int = 1, from_: Optional[FlexibleDate] = None, utc: Optional[bool] = None) -> datetime:
    """
    Return a date moved by the given number of days. Use negative to decrement.

    Args:
        days: The number of days to move by
        from_: The date to start from, defaults to now
        utc: Read timezone-less text as UTC, defaults to the configured value

    Returns:
        A new datetime
    """
    start = clock.now() if from_ is None else to_date(from_, utc)
    return resolve_local(start + relativedelta(days=days))

def timeframe(count: int, type_: str, fmt: str = 'date') -> Tuple[Union[str, int], Union[str, int]]:
    """
    Calculate a look-back range ending today.

    The range starts at midnight `count` units of `type_` before today and ends
    at the last second of today, e.g. 2 weeks ago, 15 days ago, 1 year ago.

    Args:
        count: The number of `type_` to count back
        type_: The unit, one of 'day', 'week', 'month' or 'year' (plurals accepted)
        fmt: The output format, 'date', 'datetime' or 'timestamp'

    Returns:
        A (start, end) tuple of strings for 'date' and 'datetime', or epoch
        seconds for 'timestamp'

    Raises:
        InvalidArgumentError: If `type_` or `fmt` is not recognised
    """
    today = clock.now()
    end = resolve_local(today.replace(hour=23, minute=59, second=59, microsecond=0))
    start = _midnight(today)

    if type_ in ('day', 'days'):
        start = increment(-count, start)
    elif type_ in ('week', 'weeks'):
        start = increment(-(count * 7), start)
    elif type_ in ('month', 'months'):
        start = resolve_local(start - relativedelta(months=count))
    elif type_ in ('year', 'years'):
        start = resolve_local(start - relativedelta(years=count))
    else:
        logger.warning(f"timeframe: unknown type {type_!r}")
        raise InvalidArgumentError(
            f"timeframe type invalid. Must be one of 'day', 'week', 'month', or 'year'. Received: {type_}"
        )

    logger.debug(f"timeframe: {count} {type_} -> start={start.isoformat()} end={end.isoformat()}")

    if fmt == 'date':
        return iso(start, time=False), iso(end, time=False)
    elif fmt == 'datetime':
        return iso(start), iso(end)
    elif fmt == 'timestamp':
        return clock.timestamp(start), clock.timestamp(end)

    logger.warning(f"timeframe: unknown format {fmt!r}")
    raise InvalidArgumentError(
        f"timeframe format invalid. Must be one of 'date', 'datetime', or 'timestamp'. Received: {fmt}"
    )
