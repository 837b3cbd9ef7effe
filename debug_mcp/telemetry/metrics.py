"""Prometheus metrics for MCP tool invocations."""

from prometheus_client import Counter, Histogram

tool_invocations_total = Counter(
    'mcp_tool_invocations_total',
    'Total number of MCP tool invocations',
    ['tool', 'status'],
)

tool_duration_seconds = Histogram(
    'mcp_tool_duration_seconds',
    'MCP tool invocation duration in seconds',
    ['tool'],
    buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
)
