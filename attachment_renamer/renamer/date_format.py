"""
Moment.js style date formatting for {{DATE:...}} template directives.
File: attachment_renamer/renamer/date_format.py

Supports the commonly used tokens:

    YYYY YY Q           year, quarter
    MMMM MMM MM Mo M    month
    DDDD DDD DD Do D    day of year, day of month
    dddd ddd dd d E     weekday
    GGGG WW W           ISO week-year and week
    HH H hh h kk k      hours (24h, 12h, 1-24)
    mm m ss s           minutes, seconds
    SSS SS S            fractional seconds
    A a                 AM/PM, am/pm
    X x                 unix seconds, unix milliseconds
    ZZ Z                UTC offset (+0200, +02:00)
    [text]              literal text

Anything else is copied through unchanged.
"""

from datetime import datetime

from attachment_renamer.renamer.renamer_regex_patterns import DATE_FORMAT_TOKEN_RGX


MONTH_NAMES = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December'
]
WEEKDAY_NAMES = ['Sunday', 'Monday', 'Tuesday', 'Wednesday', 'Thursday', 'Friday', 'Saturday']


def _ordinal(number: int) -> str:
    if 10 <= number % 100 <= 20:
        suffix = 'th'
    else:
        suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(number % 10, 'th')
    return f"{number}{suffix}"


def _utc_offset(moment: datetime, separator: str) -> str:
    offset = moment.utcoffset()
    if offset is None:
        offset = moment.astimezone().utcoffset()
    total_minutes = int(offset.total_seconds() // 60)
    sign = '+' if total_minutes >= 0 else '-'
    hours, minutes = divmod(abs(total_minutes), 60)
    return f"{sign}{hours:02d}{separator}{minutes:02d}"


def _render_token(token: str, moment: datetime) -> str:
    """Render a single format token."""
    weekday = moment.isoweekday() % 7      # Sunday = 0
    hour12 = moment.hour % 12 or 12
    iso_year, iso_week, _ = moment.isocalendar()

    if token.startswith('['):
        return token[1:-1]

    renderers = {
        'YYYY': lambda: f"{moment.year:04d}",
        'YY':   lambda: f"{moment.year % 100:02d}",
        'Q':    lambda: str((moment.month - 1) // 3 + 1),
        'MMMM': lambda: MONTH_NAMES[moment.month - 1],
        'MMM':  lambda: MONTH_NAMES[moment.month - 1][:3],
        'MM':   lambda: f"{moment.month:02d}",
        'Mo':   lambda: _ordinal(moment.month),
        'M':    lambda: str(moment.month),
        'DDDD': lambda: f"{moment.timetuple().tm_yday:03d}",
        'DDD':  lambda: str(moment.timetuple().tm_yday),
        'DD':   lambda: f"{moment.day:02d}",
        'Do':   lambda: _ordinal(moment.day),
        'D':    lambda: str(moment.day),
        'dddd': lambda: WEEKDAY_NAMES[weekday],
        'ddd':  lambda: WEEKDAY_NAMES[weekday][:3],
        'dd':   lambda: WEEKDAY_NAMES[weekday][:2],
        'd':    lambda: str(weekday),
        'E':    lambda: str(moment.isoweekday()),
        'GGGG': lambda: f"{iso_year:04d}",
        'WW':   lambda: f"{iso_week:02d}",
        'W':    lambda: str(iso_week),
        'HH':   lambda: f"{moment.hour:02d}",
        'H':    lambda: str(moment.hour),
        'hh':   lambda: f"{hour12:02d}",
        'h':    lambda: str(hour12),
        'kk':   lambda: f"{moment.hour or 24:02d}",
        'k':    lambda: str(moment.hour or 24),
        'mm':   lambda: f"{moment.minute:02d}",
        'm':    lambda: str(moment.minute),
        'ss':   lambda: f"{moment.second:02d}",
        's':    lambda: str(moment.second),
        'SSS':  lambda: f"{moment.microsecond // 1000:03d}",
        'SS':   lambda: f"{moment.microsecond // 10000:02d}",
        'S':    lambda: str(moment.microsecond // 100000),
        'A':    lambda: 'AM' if moment.hour < 12 else 'PM',
        'a':    lambda: 'am' if moment.hour < 12 else 'pm',
        'X':    lambda: str(int(moment.timestamp())),
        'x':    lambda: str(int(moment.timestamp() * 1000)),
        'ZZ':   lambda: _utc_offset(moment, ''),
        'Z':    lambda: _utc_offset(moment, ':'),
    }

    renderer = renderers.get(token)
    return renderer() if renderer else token


def format_date(moment: datetime, fmt: str) -> str:
    """
    Format a datetime with a Moment.js style format string.

    Args:
        moment: Date/time to format (naive values are treated as local time)
        fmt: Format string like "YYYY-MM-DD" or "YYYYMMDD[T]HHmmss"

    Returns:
        Formatted string
    """
    return DATE_FORMAT_TOKEN_RGX.sub(lambda m: _render_token(m.group(0), moment), fmt)


# End of file #
