"""Tests for PHP-style date formatting."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo

import pytest

from debug_mcp.mcp.date_format import DEFAULT_FORMAT, DIRECTIVES, describe_directives, format_datetime

# Thursday, 2024-02-29 15:04:05.123456 in Warsaw (CET, UTC+1, no DST)
WARSAW = datetime(2024, 2, 29, 15, 4, 5, 123456, tzinfo=ZoneInfo("Europe/Warsaw"))
UTC_MOMENT = datetime(2021, 1, 3, 0, 7, 9, tzinfo=ZoneInfo("UTC"))


class TestFormatDatetime:
    """Tests for format_datetime."""

    def test_default_format(self):
        """Default pattern renders date and 24h time."""
        assert format_datetime(WARSAW) == "2024-02-29 15:04:05"
        assert DEFAULT_FORMAT == "Y-m-d H:i:s"

    @pytest.mark.parametrize(
        "fmt,expected",
        [
            ("Y", "2024"),
            ("y", "24"),
            ("m/n", "02/2"),
            ("d j", "29 29"),
            ("D l N w", "Thu Thursday 4 4"),
            ("F M", "February Feb"),
            ("jS", "29th"),
            ("z t L", "59 29 1"),
            ("g G h H", "3 15 03 15"),
            ("a A", "pm PM"),
            ("i:s", "04:05"),
            ("u v", "123456 123"),
            ("e T", "Europe/Warsaw CET"),
            ("O P p Z I", "+0100 +01:00 +01:00 3600 0"),
            ("W o", "09 2024"),
        ],
    )
    def test_directives(self, fmt, expected):
        """Individual directives match PHP date() output."""
        assert format_datetime(WARSAW, fmt) == expected

    def test_iso_and_rfc(self):
        """Compound directives c and r."""
        assert format_datetime(WARSAW, "c") == "2024-02-29T15:04:05+01:00"
        assert format_datetime(WARSAW, "r") == "Thu, 29 Feb 2024 15:04:05 +0100"

    def test_unix_timestamp(self):
        """U renders seconds since the epoch."""
        moment = datetime(1970, 1, 2, tzinfo=timezone.utc)
        assert format_datetime(moment, "U") == "86400"

    def test_utc_p_is_z(self):
        """p renders Z for a zero offset."""
        assert format_datetime(UTC_MOMENT, "p") == "Z"

    def test_iso_week_year_differs_from_calendar_year(self):
        """2021-01-03 belongs to ISO week 53 of 2020."""
        assert format_datetime(UTC_MOMENT, "o-W Y") == "2020-53 2021"

    def test_midnight_twelve_hour_clock(self):
        """Hour 0 renders as 12 am."""
        assert format_datetime(UTC_MOMENT, "g h a") == "12 12 am"

    @pytest.mark.parametrize("day,suffix", [(1, "st"), (2, "nd"), (3, "rd"), (11, "th"), (12, "th"), (22, "nd"), (23, "rd")])
    def test_ordinal_suffix(self, day, suffix):
        """English ordinal suffixes, including the teens."""
        assert format_datetime(datetime(2024, 3, day), "S") == suffix

    def test_swatch_beat(self):
        """B is computed from UTC+1."""
        assert format_datetime(UTC_MOMENT, "B") == "046"

    def test_literal_characters_pass_through(self):
        """Characters that are not directives are copied."""
        assert format_datetime(WARSAW, "Y/m-d @ H.i") == "2024/02-29 @ 15.04"

    def test_backslash_escapes_directive(self):
        """A backslash makes the next character literal."""
        assert format_datetime(WARSAW, "\\Y\\-Y") == "Y-2024"

    def test_trailing_backslash_kept(self):
        """A trailing backslash is emitted as-is."""
        assert format_datetime(WARSAW, "Y\\") == "2024\\"

    def test_empty_format(self):
        """Empty pattern renders empty string."""
        assert format_datetime(WARSAW, "") == ""

    def test_non_string_format_raises(self):
        """Format must be a string."""
        with pytest.raises(TypeError, match="Format must be a string"):
            format_datetime(WARSAW, 123)


class TestDirectiveTable:
    """Tests for the directive table."""

    def test_minimum_vocabulary(self):
        """Year, month, day, hour, minute, second and AM/PM are covered."""
        for char in "YmdHisA":
            assert char in DIRECTIVES

    def test_describe_directives(self):
        """Every directive has a description."""
        descriptions = describe_directives()
        assert set(descriptions) == set(DIRECTIVES)
        assert all(descriptions.values())
