"""MCP Tools package.

Narzędzia udostępniane klientom MCP i tabela ich rejestracji.
"""

from typing import List

from debug_mcp.mcp.registry import Tool, ToolRegistry
from debug_mcp.mcp.tools.base import BaseTool
from debug_mcp.mcp.tools.clock import ClockTool
from debug_mcp.mcp.tools.system_info import SystemInfoTool


def builtin_tools() -> List[BaseTool]:
    """Zwróć nowe instancje wszystkich wbudowanych narzędzi."""
    return [ClockTool(), SystemInfoTool()]


def register_builtin_tools(target: ToolRegistry) -> None:
    """Zarejestruj każde wbudowane narzędzie w ``target`` pod jego nazwą.

    Raises:
        ValueError: Jeśli narzędzie o tej nazwie jest już zarejestrowane.
    """
    for tool in builtin_tools():
        target.register(
            Tool(
                name=tool.name,
                description=tool.description,
                args_schema=tool.args_schema,
                handler=tool.execute,
            )
        )


__all__ = [
    "BaseTool",
    "ClockTool",
    "SystemInfoTool",
    "builtin_tools",
    "register_builtin_tools",
]
