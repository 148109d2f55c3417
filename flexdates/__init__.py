"""flexdates - Useful functions related to dates and times."""
from loguru import logger

from .datetime_utils import (
    ElapsedOptions,
    FlexibleDate,
    age,
    day_of_week,
    elapsed,
    increment,
    is_today,
    iso,
    next_day_of_week,
    nice,
    previous_day_of_week,
    relative,
    timeframe,
    timestamp,
    to_date,
)
from .errors import (
    DatesError,
    InvalidInputError,
    InvalidArgumentError,
)
from .config import DatesConfig, set_config

__version__ = "0.1.0"

# Silent until the application opts in through setup_logging()
logger.disable("flexdates")

__all__ = [
    'age',
    'day_of_week',
    'elapsed',
    'increment',
    'iso',
    'is_today',
    'next_day_of_week',
    'nice',
    'previous_day_of_week',
    'relative',
    'timeframe',
    'timestamp',
    'to_date',
    'ElapsedOptions',
    'FlexibleDate',
    'DatesConfig',
    'set_config',
    'DatesError',
    'InvalidInputError',
    'InvalidArgumentError',
]
