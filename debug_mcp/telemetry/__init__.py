"""Telemetry and monitoring module."""

from debug_mcp.telemetry.metrics import tool_duration_seconds, tool_invocations_total

__all__ = [
    "tool_duration_seconds",
    "tool_invocations_total",
]
