"""Tests for the Timestamp wire value and its dialect parsers."""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import BaseModel

from pacicli.errors import InvalidTimestampError
from pacicli.values import (
    Timestamp,
    parse_argument_timestamp,
    parse_data_timestamp,
    parse_unix_date,
)


class TestDataDialect:
    """Tests for the ``YYYY-MM-DD hh:mm:ss.ffffff-hhmm`` dialect."""

    def test_short_fraction_is_padded(self):
        ts = Timestamp.parse("2023-01-15 10:30:00.123-0500")

        assert ts.to_text() == "2023-01-15 10:30:00.123000-0500"

    def test_missing_seconds_and_fraction(self):
        ts = Timestamp.parse("2023-01-15 10:30-0500")

        assert ts.to_text() == "2023-01-15 10:30:00.000000-0500"

    def test_missing_fraction(self):
        ts = Timestamp.parse("2023-01-15 10:30:45+0100")

        assert ts.to_text() == "2023-01-15 10:30:45.000000+0100"

    def test_short_offset_is_padded(self):
        """A two digit offset is read as hours."""
        ts = Timestamp.parse("2023-01-15 10:30:00.5+02")

        assert ts.to_text() == "2023-01-15 10:30:00.500000+0200"
        assert ts.instant.utcoffset() == timedelta(hours=2)

    def test_full_precision_is_unchanged(self):
        text = "2024-02-29 23:59:59.999999+0930"

        assert Timestamp.parse(text).to_text() == text

    def test_instant_is_timezone_aware(self):
        dt = parse_data_timestamp("2023-01-15 10:30:00-0500")

        assert dt == datetime(2023, 1, 15, 15, 30, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "text",
        [
            "2023-01-15 10:30:00",
            "2023-01-15 10:30:00.1234567-0500",
            "2023-01-15 10:30:00+01+02",
            "2023-01-15 10:30:00.1.2-0500",
            "2023-01-15 10:30:00-05000",
            "2023-01-15 10:30:00-ab",
            "2023-13-15 10:30:00-0500",
            "2023-1-5 1:2:3+0000",
            "2023-01-15 10:30:0-0500",
            "-0500",
        ],
    )
    def test_invalid_data_text(self, text):
        with pytest.raises(ValueError):
            parse_data_timestamp(text)


class TestUnixDateDialect:
    """Tests for the ``date(1)`` dialect."""

    def test_utc_date(self):
        ts = Timestamp.parse("Mon Jan 15 10:30:00 UTC 2023")

        assert ts.to_text() == "2023-01-15 10:30:00.000000+0000"

    def test_space_padded_day(self):
        ts = Timestamp.parse("Sun Jan  1 00:00:01 UTC 2023")

        assert ts.to_text() == "2023-01-01 00:00:01.000000+0000"

    def test_known_zone_offset(self):
        dt = parse_unix_date("Mon Jan 15 10:30:00 EST 2023")

        assert dt.utcoffset() == timedelta(hours=-5)

    def test_unknown_zone_is_utc(self):
        dt = parse_unix_date("Mon Jan 15 10:30:00 XYZ 2023")

        assert dt.utcoffset() == timedelta(0)

    @pytest.mark.parametrize(
        "text",
        [
            "Mon Jan 15 10:30:00 2023",
            "Foo Jan 15 10:30:00 UTC 2023",
            "Mon Foo 15 10:30:00 UTC 2023",
            "Mon Jan 15 10:30 UTC 2023",
            "Mon Jan 15 10:30:00 U1C 2023",
            "Mon Jan 15 10:30:00 UTC 23",
        ],
    )
    def test_invalid_unix_date(self, text):
        with pytest.raises(ValueError):
            parse_unix_date(text)


class TestArgumentDialect:
    """Tests for the --from/--to flag dialect."""

    def test_utc_argument(self):
        ts = Timestamp.parse_argument("2023-01-15 10:30 UTC")

        assert ts.to_text() == "2023-01-15 10:30:00.000000+0000"

    def test_argument_with_zone_offset(self):
        dt = parse_argument_timestamp("2023-01-15 10:30 PST")

        assert dt.utcoffset() == timedelta(hours=-8)

    def test_argument_falls_back_to_data_dialect(self):
        ts = Timestamp.parse_argument("2023-01-15 10:30:00.123-0500")

        assert ts.to_text() == "2023-01-15 10:30:00.123000-0500"

    def test_invalid_argument_names_the_format(self):
        with pytest.raises(InvalidTimestampError) as exc_info:
            Timestamp.parse_argument("yesterday")

        assert "YYYY-MM-DD hh:mm TZ" in exc_info.value.message


class TestTimestamp:
    """Tests for the Timestamp value itself."""

    def test_parse_failure_raises_invalid_timestamp(self):
        with pytest.raises(InvalidTimestampError) as exc_info:
            Timestamp.parse("not a timestamp")

        assert exc_info.value.error_code == "VALUE-InvalidTimestamp"
        assert exc_info.value.details == {"text": "not a timestamp"}

    def test_naive_datetime_is_rejected(self):
        with pytest.raises(InvalidTimestampError):
            Timestamp(datetime(2023, 1, 15, 10, 30))

    def test_str_is_wire_text(self):
        ts = Timestamp(datetime(2023, 1, 15, 10, 30, tzinfo=timezone.utc))

        assert str(ts) == "2023-01-15 10:30:00.000000+0000"

    def test_year_below_1000_is_zero_padded(self):
        ts = Timestamp.parse("0999-01-15 10:30:00+0000")

        assert ts.instant.year == 999
        assert ts.to_text() == "0999-01-15 10:30:00.000000+0000"
        assert Timestamp.parse(ts.to_text()) == ts

    def test_model_field_round_trip(self):
        class Holder(BaseModel):
            at: Timestamp

        holder = Holder(at="2023-01-15 10:30-0500")

        assert holder.model_dump(mode="json") == {
            "at": "2023-01-15 10:30:00.000000-0500"
        }
