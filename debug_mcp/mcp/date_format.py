"""PHP-style date formatting.

Renders ``datetime`` objects with the directive characters of PHP's
``date()`` function (``Y-m-d H:i:s`` and friends), so MCP clients written
against that vocabulary keep working. Characters that are not directives are
copied as-is and a backslash escapes the following character.

Month and weekday names are always English, independent of the process locale.
"""

import calendar
from datetime import datetime, timedelta, timezone
from typing import Callable, Dict, Tuple

DEFAULT_FORMAT = "Y-m-d H:i:s"

_WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
_MONTHS = [
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
]


def _offset_seconds(dt: datetime) -> int:
    offset = dt.utcoffset() or timedelta(0)
    return int(offset.total_seconds())


def _offset(dt: datetime, separator: str) -> str:
    total = _offset_seconds(dt)
    sign = "-" if total < 0 else "+"
    hours, remainder = divmod(abs(total), 3600)
    return f"{sign}{hours:02d}{separator}{remainder // 60:02d}"


def _ordinal_suffix(day: int) -> str:
    if 11 <= day <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def _swatch_beat(dt: datetime) -> str:
    # Biel Mean Time is UTC+1
    utc = dt.astimezone(timezone.utc) if dt.tzinfo else dt
    seconds = (utc.hour * 3600 + utc.minute * 60 + utc.second + 3600) % 86400
    return f"{int(seconds / 86.4):03d}"


def _timezone_identifier(dt: datetime) -> str:
    key = getattr(dt.tzinfo, "key", None)
    if key:
        return key
    return dt.tzname() or "UTC"


def _hour12(dt: datetime) -> int:
    return dt.hour % 12 or 12


# Directive character -> (description, renderer)
DIRECTIVES: Dict[str, Tuple[str, Callable[[datetime], str]]] = {
    # Day
    "d": ("Day of the month, 2 digits with leading zeros", lambda dt: f"{dt.day:02d}"),
    "D": ("Day of the week, three letters", lambda dt: _WEEKDAYS[dt.weekday()][:3]),
    "j": ("Day of the month without leading zeros", lambda dt: str(dt.day)),
    "l": ("Full name of the day of the week", lambda dt: _WEEKDAYS[dt.weekday()]),
    "N": ("ISO 8601 day of the week, 1 (Monday) to 7 (Sunday)", lambda dt: str(dt.isoweekday())),
    "S": ("English ordinal suffix for the day of the month", lambda dt: _ordinal_suffix(dt.day)),
    "w": ("Day of the week, 0 (Sunday) to 6 (Saturday)", lambda dt: str(dt.isoweekday() % 7)),
    "z": ("Day of the year, starting from 0", lambda dt: str(dt.timetuple().tm_yday - 1)),
    # Week
    "W": ("ISO 8601 week number of the year", lambda dt: f"{dt.isocalendar()[1]:02d}"),
    # Month
    "F": ("Full name of the month", lambda dt: _MONTHS[dt.month - 1]),
    "m": ("Month, 2 digits with leading zeros", lambda dt: f"{dt.month:02d}"),
    "M": ("Month, three letters", lambda dt: _MONTHS[dt.month - 1][:3]),
    "n": ("Month without leading zeros", lambda dt: str(dt.month)),
    "t": ("Number of days in the month", lambda dt: str(calendar.monthrange(dt.year, dt.month)[1])),
    # Year
    "L": ("Whether it is a leap year, 1 or 0", lambda dt: "1" if calendar.isleap(dt.year) else "0"),
    "o": ("ISO 8601 week-numbering year", lambda dt: str(dt.isocalendar()[0])),
    "Y": ("Year, at least 4 digits", lambda dt: f"{dt.year:04d}"),
    "y": ("Year, 2 digits", lambda dt: f"{dt.year % 100:02d}"),
    # Time
    "a": ("Lowercase am or pm", lambda dt: "am" if dt.hour < 12 else "pm"),
    "A": ("Uppercase AM or PM", lambda dt: "AM" if dt.hour < 12 else "PM"),
    "B": ("Swatch Internet time", _swatch_beat),
    "g": ("12-hour format of an hour without leading zeros", lambda dt: str(_hour12(dt))),
    "G": ("24-hour format of an hour without leading zeros", lambda dt: str(dt.hour)),
    "h": ("12-hour format of an hour with leading zeros", lambda dt: f"{_hour12(dt):02d}"),
    "H": ("24-hour format of an hour with leading zeros", lambda dt: f"{dt.hour:02d}"),
    "i": ("Minutes with leading zeros", lambda dt: f"{dt.minute:02d}"),
    "s": ("Seconds with leading zeros", lambda dt: f"{dt.second:02d}"),
    "u": ("Microseconds", lambda dt: f"{dt.microsecond:06d}"),
    "v": ("Milliseconds", lambda dt: f"{dt.microsecond // 1000:03d}"),
    # Timezone
    "e": ("Timezone identifier", _timezone_identifier),
    "I": ("Whether daylight saving time is in effect, 1 or 0", lambda dt: "1" if dt.dst() else "0"),
    "O": ("Difference to UTC without colon", lambda dt: _offset(dt, "")),
    "P": ("Difference to UTC with colon", lambda dt: _offset(dt, ":")),
    "p": ("Like P, but Z for +00:00", lambda dt: "Z" if _offset_seconds(dt) == 0 else _offset(dt, ":")),
    "T": ("Timezone abbreviation", lambda dt: dt.tzname() or "UTC"),
    "Z": ("Timezone offset in seconds", lambda dt: str(_offset_seconds(dt))),
    # Full date/time
    "c": ("ISO 8601 date", lambda dt: format_datetime(dt, "Y-m-d\\TH:i:sP")),
    "r": ("RFC 2822 formatted date", lambda dt: format_datetime(dt, "D, d M Y H:i:s O")),
    "U": ("Seconds since the Unix epoch", lambda dt: str(calendar.timegm(dt.utctimetuple()))),
}


def format_datetime(dt: datetime, fmt: str = DEFAULT_FORMAT) -> str:
    """Format ``dt`` using PHP ``date()`` directives.

    Args:
        dt: Moment to render. Naive values are treated as UTC for
            timezone-related directives.
        fmt: Format pattern, e.g. "Y-m-d H:i:s" or "D, d M Y".

    Returns:
        Formatted string.

    Raises:
        TypeError: If ``fmt`` is not a string.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"Format must be a string, got {type(fmt).__name__}")

    parts = []
    escaped = False
    for char in fmt:
        if escaped:
            parts.append(char)
            escaped = False
        elif char == "\\":
            escaped = True
        elif char in DIRECTIVES:
            parts.append(DIRECTIVES[char][1](dt))
        else:
            parts.append(char)
    if escaped:
        parts.append("\\")
    return "".join(parts)


def describe_directives() -> Dict[str, str]:
    """Return directive characters mapped to their descriptions."""
    return {char: description for char, (description, _) in DIRECTIVES.items()}


__all__ = ["DEFAULT_FORMAT", "DIRECTIVES", "format_datetime", "describe_directives"]
