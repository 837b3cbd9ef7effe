"""MCP (Model Context Protocol) module dla Debug MCP.

Rejestr narzędzi udostępnianych klientom MCP. Wbudowane narzędzia są
rejestrowane w globalnym rejestrze przy imporcie.
"""

from debug_mcp.mcp.registry import (
    Tool,
    ToolInvokeResult,
    ToolRegistry,
    registry,
)
from debug_mcp.mcp.results import ToolResult, validate_choice
from debug_mcp.mcp.tools import register_builtin_tools

register_builtin_tools(registry)

__all__ = [
    "Tool",
    "ToolInvokeResult",
    "ToolRegistry",
    "ToolResult",
    "registry",
    "validate_choice",
]
