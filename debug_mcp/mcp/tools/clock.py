"""Clock tool.

Zwraca aktualny czas w wybranej strefie czasowej, sformatowany
dyrektywami PHP ``date()`` (domyślnie ``Y-m-d H:i:s``).
"""

from datetime import datetime, tzinfo
from typing import Any, Callable, Dict, Optional
from zoneinfo import ZoneInfo, available_timezones

from debug_mcp.mcp.date_format import DEFAULT_FORMAT, format_datetime
from debug_mcp.mcp.results import ToolResult, validate_choice
from debug_mcp.mcp.tools.base import BaseTool

DEFAULT_TIMEZONE = "UTC"

TIMEZONE_HINT = "Use one of the valid timezone identifiers (e.g., UTC, America/New_York, Europe/London)"


class ClockTool(BaseTool):
    """Aktualny czas z konfigurowalnym formatem i strefą czasową."""

    name = "clock"
    description = "Get current time with customizable format and timezone"

    def __init__(self, now: Optional[Callable[[tzinfo], datetime]] = None) -> None:
        """
        Inicjalizuj zegar.

        Args:
            now: Źródło czasu wywoływane z żądaną strefą czasową;
                domyślnie ``datetime.now``.
        """
        super().__init__()
        self._now = now or datetime.now

    @property
    def args_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "format": {
                    "type": "string",
                    "default": DEFAULT_FORMAT,
                    "description": "PHP date() format, e.g. 'Y-m-d H:i:s', 'D, d M Y', 'c'.",
                },
                "timezone": {
                    "type": "string",
                    "default": DEFAULT_TIMEZONE,
                    "description": "IANA timezone identifier, e.g. 'UTC' or 'Europe/Warsaw'.",
                },
            },
            "required": [],
        }

    def execute(self, format: str = DEFAULT_FORMAT, timezone: str = DEFAULT_TIMEZONE) -> ToolResult:
        error = validate_choice(timezone, available_timezones(), "timezone", hint=TIMEZONE_HINT)
        if error:
            self.logger.warning("Rejected timezone: %s", timezone)
            return error

        try:
            moment = self._now(ZoneInfo(timezone))
            formatted = format_datetime(moment, format)
        except Exception as e:
            self.logger.warning("Failed to generate time (format=%r, timezone=%s): %s", format, timezone, e)
            return ToolResult.failure("Failed to generate time", str(e))

        return ToolResult.success({"time": formatted})
