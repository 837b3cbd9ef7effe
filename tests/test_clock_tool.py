"""Tests for the clock tool."""

import re
from datetime import datetime, timezone
from zoneinfo import available_timezones

import pytest

from debug_mcp.mcp.tools.clock import ClockTool

FIXED_UTC = datetime(2025, 6, 1, 12, 30, 45, tzinfo=timezone.utc)
DEFAULT_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")


@pytest.fixture
def fixed_clock():
    """Clock tool frozen at 2025-06-01 12:30:45 UTC."""
    return ClockTool(now=lambda tz: FIXED_UTC.astimezone(tz))


class TestClockTool:
    """Tests for ClockTool.execute."""

    def test_defaults(self, fixed_clock):
        """Default format and timezone render UTC time."""
        result = fixed_clock.execute()
        assert result.ok is True
        assert result.to_dict() == {"time": "2025-06-01 12:30:45"}

    def test_timezone_is_applied(self, fixed_clock):
        """Requested timezone shifts the reading."""
        result = fixed_clock.execute(timezone="America/New_York")
        assert result.to_dict() == {"time": "2025-06-01 08:30:45"}

    def test_custom_format(self, fixed_clock):
        """Caller-supplied PHP format is used."""
        result = fixed_clock.execute(format="D, d M Y g:i A T", timezone="Europe/London")
        assert result.to_dict() == {"time": "Sun, 01 Jun 2025 1:30 PM BST"}

    def test_year_only(self):
        """format=Y returns the current 4-digit year."""
        result = ClockTool().execute(format="Y", timezone="UTC")
        assert result.to_dict() == {"time": str(datetime.now(timezone.utc).year)}

    def test_real_clock_default_format(self):
        """Live clock output matches the default pattern."""
        result = ClockTool().execute()
        assert DEFAULT_PATTERN.match(result.to_dict()["time"])

    @pytest.mark.parametrize("tz", sorted(available_timezones())[::40] + ["UTC", "Asia/Kolkata"])
    def test_valid_timezones_use_default_pattern(self, tz):
        """Every valid timezone yields a default-format time string."""
        result = ClockTool().execute(timezone=tz)
        assert result.ok is True
        assert DEFAULT_PATTERN.match(result.payload["time"])

    @pytest.mark.parametrize("tz", ["Mars/Olympus_Mons", "", "utc", "America/New York", "+02:00"])
    def test_invalid_timezone(self, fixed_clock, tz):
        """Unknown timezone is rejected without a time key."""
        result = fixed_clock.execute(timezone=tz)
        data = result.to_dict()
        assert data["error"] == "Invalid timezone"
        assert "time" not in data
        assert data["details"] == (
            f'Timezone "{tz}" is not valid. Use one of the valid timezone identifiers '
            "(e.g., UTC, America/New_York, Europe/London)"
        )

    def test_invalid_timezone_skips_clock(self):
        """Validation failure performs no clock read."""
        calls = []
        clock = ClockTool(now=lambda tz: calls.append(tz) or FIXED_UTC)
        clock.execute(timezone="Nowhere/Land")
        assert calls == []

    def test_non_string_format(self, fixed_clock):
        """Formatting errors are reported, not raised."""
        result = fixed_clock.execute(format=None)
        assert result.to_dict() == {
            "error": "Failed to generate time",
            "details": "Format must be a string, got NoneType",
        }

    def test_clock_source_failure(self):
        """Errors while reading the clock are reported with their message."""

        def broken_now(tz):
            raise OverflowError("date value out of range")

        result = ClockTool(now=broken_now).execute()
        assert result.to_dict() == {"error": "Failed to generate time", "details": "date value out of range"}


class TestClockSchema:
    """Tests for the declared argument schema."""

    def test_schema_defaults(self):
        """Schema advertises both parameters with their defaults."""
        schema = ClockTool().args_schema
        assert schema["properties"]["format"]["default"] == "Y-m-d H:i:s"
        assert schema["properties"]["timezone"]["default"] == "UTC"
        assert schema["required"] == []

    def test_name_and_description(self):
        """Tool is published as 'clock'."""
        tool = ClockTool()
        assert tool.name == "clock"
        assert "timezone" in tool.description
