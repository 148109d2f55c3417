import sys
import argparse
import traceback

from flexdates import (
    ElapsedOptions,
    age,
    day_of_week,
    elapsed,
    iso,
    next_day_of_week,
    nice,
    previous_day_of_week,
    relative,
    timeframe,
    timestamp,
)
from flexdates.datetime_utils.calculator import TIMEFRAME_FORMATS, TIMEFRAME_TYPES
from flexdates.logging import setup_logging

def date_arg(value):
    """All digit arguments are epoch seconds, anything else is date text."""
    return int(value) if value.isdigit() else value

def build_parser():
    parser = argparse.ArgumentParser(prog='flexdates', description="Parse, calculate and format dates.")
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('iso', help='Format a date as YYYY-MM-DD HH:MM:SS')
    p.add_argument('date', type=date_arg)
    p.add_argument('--no-time', action='store_true', help='Only output the date')
    p.add_argument('--local', action='store_true', help='Read timezone-less text as local time')
    p.add_argument('--numbers-only', action='store_true', help='Drop dashes, colons and spaces')

    p = sub.add_parser('nice', help='Format a date for people')
    p.add_argument('date', type=date_arg)
    p.add_argument('--locale', default=None, help='Locale identifier (default: en-US)')
    p.add_argument('--short', action='store_true', help='Use short month and weekday names')
    p.add_argument('--no-time', action='store_true', help='Only output the date')
    p.add_argument('--local', action='store_true', help='Read timezone-less text as local time')

    p = sub.add_parser('relative', help='Describe a date relative to today')
    p.add_argument('date', type=date_arg)
    p.add_argument('--locale', default=None, help='Locale identifier (default: en-US)')
    p.add_argument('--short', action='store_true', help='Use short month names')
    p.add_argument('--local', action='store_true', help='Read timezone-less text as local time')

    p = sub.add_parser('elapsed', help='Format a number of seconds as H:MM:SS')
    p.add_argument('seconds', type=int)
    p.add_argument('--no-minutes', action='store_true', help='Hide minutes (and seconds)')
    p.add_argument('--no-seconds', action='store_true', help='Hide seconds')
    p.add_argument('--zero-hours', action='store_true', help='Show hours even when zero')
    p.add_argument('--zero-minutes', action='store_true', help='Show minutes even when zero')

    p = sub.add_parser('timeframe', help='Range from N units ago until the end of today')
    p.add_argument('count', type=int)
    p.add_argument('type', choices=TIMEFRAME_TYPES)
    p.add_argument('--format', choices=TIMEFRAME_FORMATS, default='date')

    p = sub.add_parser('timestamp', help='Epoch seconds of a date, or of now')
    p.add_argument('date', type=date_arg, nargs='?', default=None)
    p.add_argument('--local', action='store_true', help='Read timezone-less text as local time')

    p = sub.add_parser('age', help='Age in years from a date of birth')
    p.add_argument('date', type=date_arg)

    p = sub.add_parser('dow', help='Date of a day of the week (Sunday is 0)')
    p.add_argument('dow', type=int)
    group = p.add_mutually_exclusive_group()
    group.add_argument('--next', type=int, metavar='WEEKS', help='Weeks ahead')
    group.add_argument('--previous', type=int, metavar='WEEKS', help='Weeks back')

    return parser

def run(args):
    """Execute the parsed command and return the text to print."""
    utc = not getattr(args, 'local', False)
    text = 'short' if getattr(args, 'short', False) else None

    if args.command == 'iso':
        return iso(args.date, time=not args.no_time, utc=utc, numbers_only=args.numbers_only)
    if args.command == 'nice':
        return nice(args.date, locale=args.locale, text=text, time=not args.no_time, utc=utc)
    if args.command == 'relative':
        return relative(args.date, locale=args.locale, text=text, utc=utc)
    if args.command == 'elapsed':
        opts = ElapsedOptions(
            show_minutes=not args.no_minutes,
            show_seconds=not args.no_seconds,
            show_zero_hours=args.zero_hours,
            show_zero_minutes=args.zero_minutes,
        )
        return elapsed(args.seconds, opts)
    if args.command == 'timeframe':
        start, end = timeframe(args.count, args.type, args.format)
        return f"{start}\n{end}"
    if args.command == 'timestamp':
        return str(timestamp(args.date, utc=utc))
    if args.command == 'age':
        return str(age(args.date))

    # dow
    if args.next is not None:
        d = next_day_of_week(args.dow, args.next)
    elif args.previous is not None:
        d = previous_day_of_week(args.dow, args.previous)
    else:
        d = day_of_week(args.dow)
    return iso(d, time=False)

def main():
    parser = build_parser()
    args = parser.parse_args()

    if args.debug:
        setup_logging(level="DEBUG")

    try:
        print(run(args))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        if args.debug:
            traceback.print_exc(file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
