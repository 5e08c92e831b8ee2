"""Date-time codec compatible with the default JAXB text format.

The server accepts ``YYYY-MM-DDThh:mm:ss[.fff]+hh:mm`` only: fractional
seconds are optional and the zone is always a numeric offset, never ``Z``.
"""

import re
from datetime import datetime, timedelta, timezone

from perfrepo_client.errors import TimestampParseError

JAXB_PATTERN = re.compile(
    r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d{1,9}))?"
    r"(?P<sign>[+-])(?P<offset_hours>\d{2}):(?P<offset_minutes>\d{2})"
)


def format_jaxb_time(value: datetime) -> str:
    """Format a datetime with millisecond precision and a numeric offset.

    Naive datetimes are taken to be in the local zone. Trailing zeros of the
    fraction are trimmed and the fraction is dropped when it is zero.
    """
    if value.tzinfo is None:
        value = value.astimezone()

    # strftime does not zero-pad years below 1000 on every platform
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    millis = f"{value.microsecond // 1000:03d}".rstrip("0")
    if millis:
        text += f".{millis}"

    offset = value.utcoffset() or timedelta()
    sign = "-" if offset < timedelta() else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def parse_jaxb_time(text: str) -> datetime:
    """Parse JAXB date-time text, taking the offset literally.

    Raises:
        TimestampParseError: If ``text`` does not match the JAXB format

    """
    match = JAXB_PATTERN.fullmatch(text.strip())
    if match is None:
        raise TimestampParseError(f"Unable to parse {text!r} as JAXB date-time")

    offset = timedelta(
        hours=int(match["offset_hours"]), minutes=int(match["offset_minutes"])
    )
    if match["sign"] == "-":
        offset = -offset

    fraction = (match["fraction"] or "").ljust(6, "0")[:6]
    try:
        return datetime(
            int(match["year"]),
            int(match["month"]),
            int(match["day"]),
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            int(fraction),
            tzinfo=timezone(offset),
        )
    except ValueError as e:
        raise TimestampParseError(f"Unable to parse {text!r}: {e}") from e
