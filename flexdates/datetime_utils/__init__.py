"""
Date and time utilities.

This package provides:
- Coercion of epoch seconds, date text and datetimes into datetimes
- Calendar arithmetic (days of the week, increments, ages, timeframes)
- ISO, locale aware, relative and elapsed time formatting
- Clock access
"""

from .parser import FlexibleDate, to_date, to_birth_date, normalize_date_string
from .clock import now, timestamp
from .formatter import ElapsedOptions, elapsed, is_today, iso, nice, relative
from .calculator import (
    age,
    day_of_week,
    increment,
    js_weekday,
    next_day_of_week,
    previous_day_of_week,
    timeframe,
)

__all__ = [
    'FlexibleDate',
    'to_date',
    'to_birth_date',
    'normalize_date_string',
    'now',
    'timestamp',
    'ElapsedOptions',
    'elapsed',
    'is_today',
    'iso',
    'nice',
    'relative',
    'age',
    'day_of_week',
    'increment',
    'js_weekday',
    'next_day_of_week',
    'previous_day_of_week',
    'timeframe',
]
