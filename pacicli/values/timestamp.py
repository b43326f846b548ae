"""
Timestamp values exchanged with the API.

Two wire dialects are accepted:

* the data dialect, ``2006-01-02 15:04:05.000000-0700``: variable fraction
  digits and a 1-4 digit numeric UTC offset without a colon, seconds optional;
* the ``date(1)`` dialect, ``Mon Jan _2 15:04:05 MST 2006``.

Output is always the data dialect with six fraction digits and a four digit
offset. Command flags additionally accept ``2006-01-02 15:04 MST``.
"""

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable

from pacicli.errors import InvalidTimestampError
from pacicli.values.base import TextValue

DATA_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S.%f%z"
DATA_TIMESTAMP_LAYOUTS = (DATA_TIMESTAMP_FORMAT, "%Y-%m-%d %H:%M.%f%z")
# Data dialect after padding; every field is fixed width
_DATA_TIMESTAMP_PATTERN = re.compile(
    r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}(?::\d{2})?\.\d{6}[+-]\d{4}", re.ASCII
)
ARG_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"
ARG_TIMESTAMP_HELP = "'YYYY-MM-DD hh:mm TZ' (e.g. '2023-01-15 10:30 UTC')"

FRACTION_DIGITS = 6
OFFSET_DIGITS = 4

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = {
    name: number
    for number, name in enumerate(
        (
            "Jan", "Feb", "Mar", "Apr", "May", "Jun",
            "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
        ),
        start=1,
    )
}

# Zone abbreviations with a fixed offset; anything else is read as UTC+0
_ZONE_OFFSETS_HOURS = {
    "UTC": 0,
    "GMT": 0,
    "EST": -5,
    "EDT": -4,
    "CST": -6,
    "CDT": -5,
    "MST": -7,
    "MDT": -6,
    "PST": -8,
    "PDT": -7,
    "CET": 1,
    "CEST": 2,
    "JST": 9,
}


def _zone(abbreviation: str) -> timezone:
    if not (abbreviation.isascii() and abbreviation.isalpha()):
        raise ValueError(f"invalid zone abbreviation: {abbreviation!r}")
    if not 3 <= len(abbreviation) <= 5:
        raise ValueError(f"invalid zone abbreviation: {abbreviation!r}")
    hours = _ZONE_OFFSETS_HOURS.get(abbreviation.upper(), 0)
    if hours == 0:
        return timezone.utc
    return timezone(timedelta(hours=hours), abbreviation.upper())


def _split_offset(text: str) -> tuple[str, str, str]:
    if "+" in text:
        parts = text.split("+")
        if len(parts) != 2:
            raise ValueError("more than one '+' in timestamp")
        prefix, suffix = parts
        sign = "+"
    elif "-" in text:
        # The offset is the trailing component, so the last '-' is its sign
        prefix, sign, suffix = text.rpartition("-")
    else:
        raise ValueError("no UTC offset sign in timestamp")

    if not prefix or not suffix:
        raise ValueError("empty date-time or offset part")
    return prefix, sign, suffix


def parse_data_timestamp(text: str) -> datetime:
    """
    Parse the data dialect, normalizing fraction and offset digit counts.

    Args:
        text: e.g. ``2023-01-15 10:30:00.123-0500`` or ``2023-01-15 10:30-05``

    Returns:
        Timezone-aware datetime

    Raises:
        ValueError: If the text is not in the data dialect
    """
    prefix, sign, offset = _split_offset(text)

    if not (offset.isascii() and offset.isdigit()) or len(offset) > OFFSET_DIGITS:
        raise ValueError(f"invalid UTC offset: {offset!r}")

    if "." in prefix:
        parts = prefix.split(".")
        if len(parts) != 2:
            raise ValueError("more than one '.' in timestamp")
        normalized = prefix + "0" * (FRACTION_DIGITS - len(parts[1]))
    else:
        normalized = prefix + "." + "0" * FRACTION_DIGITS
    normalized += sign + offset + "0" * (OFFSET_DIGITS - len(offset))
    if not _DATA_TIMESTAMP_PATTERN.fullmatch(normalized):
        raise ValueError(f"{normalized!r} does not match the data timestamp layout")

    for layout in DATA_TIMESTAMP_LAYOUTS:
        try:
            return datetime.strptime(normalized, layout)
        except ValueError:
            continue
    raise ValueError(f"{normalized!r} does not match the data timestamp layout")


def parse_unix_date(text: str) -> datetime:
    """
    Parse the ``date(1)`` dialect, e.g. ``Mon Jan 15 10:30:00 UTC 2023``.

    Raises:
        ValueError: If the text is not in this dialect
    """
    parts = text.split()
    if len(parts) != 6:
        raise ValueError("expected 6 fields in a unix date")
    weekday, month, day, clock, zone, year = parts

    if weekday not in _WEEKDAYS:
        raise ValueError(f"invalid weekday: {weekday!r}")
    if month not in _MONTHS:
        raise ValueError(f"invalid month: {month!r}")
    if len(year) != 4:
        raise ValueError(f"invalid year: {year!r}")

    naive = datetime.strptime(
        f"{year}-{_MONTHS[month]:02d}-{day} {clock}", "%Y-%m-%d %H:%M:%S"
    )
    return naive.replace(tzinfo=_zone(zone))


def parse_argument_timestamp(text: str) -> datetime:
    """
    Parse the command flag dialect, e.g. ``2023-01-15 10:30 UTC``.

    Raises:
        ValueError: If the text is not in this dialect
    """
    clock, _, zone = text.strip().rpartition(" ")
    if not clock:
        raise ValueError("missing zone abbreviation")
    naive = datetime.strptime(clock, ARG_TIMESTAMP_FORMAT)
    return naive.replace(tzinfo=_zone(zone))


# Dialects tried in order by Timestamp.parse
TIMESTAMP_DIALECTS: tuple[Callable[[str], datetime], ...] = (
    parse_data_timestamp,
    parse_unix_date,
)


@dataclass(frozen=True)
class Timestamp(TextValue):
    """An absolute instant, printed in the data dialect."""

    instant: datetime

    def __post_init__(self) -> None:
        if self.instant.tzinfo is None:
            raise InvalidTimestampError(
                message="Timestamp requires a timezone-aware datetime",
                error_code="VALUE-NaiveTimestamp",
                details={"instant": self.instant.isoformat()},
            )

    @classmethod
    def parse(cls, text: str) -> "Timestamp":
        """
        Parse any accepted wire dialect.

        Raises:
            InvalidTimestampError: If no dialect matches
        """
        for dialect in TIMESTAMP_DIALECTS:
            try:
                return cls(dialect(text))
            except ValueError:
                continue
        raise InvalidTimestampError(
            message=f"Can't parse timestamp: '{text}'",
            error_code="VALUE-InvalidTimestamp",
            details={"text": text},
        )

    @classmethod
    def parse_argument(cls, text: str) -> "Timestamp":
        """
        Parse a --from/--to flag value.

        Accepts the flag dialect first, then any wire dialect.

        Raises:
            InvalidTimestampError: If no dialect matches
        """
        try:
            return cls(parse_argument_timestamp(text))
        except ValueError:
            pass
        try:
            return cls.parse(text)
        except InvalidTimestampError as e:
            raise InvalidTimestampError(
                message=f"Timestamp value must be in {ARG_TIMESTAMP_HELP} format: '{text}'",
                error_code="VALUE-InvalidTimestamp",
                details={"text": text},
            ) from e

    def to_text(self) -> str:
        # %Y is not zero-padded below year 1000 on every platform
        year = f"{self.instant.year:04d}"
        return year + self.instant.strftime(DATA_TIMESTAMP_FORMAT[2:])
