"""Tests for the JAXB date-time codec."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from perfrepo_client.errors import TimestampParseError
from perfrepo_client.models.timestamps import format_jaxb_time, parse_jaxb_time

CEST = timezone(timedelta(hours=2))
IST = timezone(timedelta(hours=5, minutes=30))
EST = timezone(timedelta(hours=-5))
NST = timezone(-timedelta(hours=3, minutes=30))


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (datetime(2016, 7, 7, tzinfo=UTC), "2016-07-07T00:00:00+00:00"),
        (
            datetime(2016, 7, 7, 10, 15, 30, 500000, tzinfo=CEST),
            "2016-07-07T10:15:30.5+02:00",
        ),
        (
            datetime(2016, 7, 7, 10, 15, 30, 123456, tzinfo=IST),
            "2016-07-07T10:15:30.123+05:30",
        ),
        (
            datetime(2016, 7, 7, 10, 15, 30, 20000, tzinfo=EST),
            "2016-07-07T10:15:30.02-05:00",
        ),
        (
            datetime(2016, 7, 7, 10, 15, 30, 999, tzinfo=NST),
            "2016-07-07T10:15:30-03:30",
        ),
        (datetime(999, 1, 2, 3, 4, 5, tzinfo=UTC), "0999-01-02T03:04:05+00:00"),
    ],
)
def test_format(value: datetime, expected: str) -> None:
    """Formats with trimmed milliseconds and a numeric offset."""
    assert format_jaxb_time(value) == expected


def test_format_never_uses_zulu() -> None:
    """UTC is written as +00:00."""
    assert not format_jaxb_time(datetime.now(UTC)).endswith("Z")


def test_format_naive_uses_local_zone() -> None:
    """Naive datetimes are formatted in the local zone."""
    naive = datetime(2020, 1, 15, 8, 30)
    assert format_jaxb_time(naive) == format_jaxb_time(naive.astimezone())


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("2016-07-07T00:00:00+00:00", datetime(2016, 7, 7, tzinfo=UTC)),
        (
            "2016-07-07T10:15:30.5+02:00",
            datetime(2016, 7, 7, 10, 15, 30, 500000, tzinfo=CEST),
        ),
        (
            "2016-07-07T10:15:30.123456789-05:00",
            datetime(2016, 7, 7, 10, 15, 30, 123456, tzinfo=EST),
        ),
    ],
)
def test_parse(text: str, expected: datetime) -> None:
    """Parses variable-width fractions, truncating below microseconds."""
    parsed = parse_jaxb_time(text)

    assert parsed == expected
    assert parsed.microsecond == expected.microsecond


def test_parse_keeps_offset_literally() -> None:
    """The offset in the text becomes the offset of the result."""
    parsed = parse_jaxb_time("2016-07-07T10:15:30-03:30")

    assert parsed.utcoffset() == -timedelta(hours=3, minutes=30)
    assert parsed.hour == 10


@pytest.mark.parametrize(
    "text",
    [
        "2016-07-07T10:15:30Z",
        "2016-07-07T10:15:30",
        "2016-07-07 10:15:30+00:00",
        "2016-07-07T10:15+00:00",
        "2016-13-07T10:15:30+00:00",
        "2016-07-07T10:15:30+99:00",
        "yesterday",
        "",
    ],
)
def test_parse_rejects_other_formats(text: str) -> None:
    """Text outside the JAXB format raises a parse error naming it."""
    with pytest.raises(TimestampParseError, match="Unable to parse"):
        parse_jaxb_time(text)


@pytest.mark.parametrize(
    "value",
    [
        datetime(2016, 7, 10, tzinfo=UTC),
        datetime(2016, 7, 13, 23, 59, 59, 999000, tzinfo=CEST),
        datetime(1999, 12, 31, 12, 0, 0, 1000, tzinfo=NST),
        datetime(2099, 2, 28, 6, 7, 8, 450000, tzinfo=IST),
    ],
)
def test_round_trip(value: datetime) -> None:
    """Millisecond-precision values survive encode and decode."""
    decoded = parse_jaxb_time(format_jaxb_time(value))

    assert decoded == value
    assert decoded.utcoffset() == value.utcoffset()
