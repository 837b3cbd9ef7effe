"""Base class for MCP tools."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict

from debug_mcp.mcp.results import ToolResult


class BaseTool(ABC):
    """
    Base class for all tools exposed to MCP clients.

    A tool declares its name, a description and a JSON Schema of its
    string arguments. ``execute`` always returns a ``ToolResult`` and never
    raises: invalid input and runtime failures are reported as data.
    """

    name: str = ""
    description: str = ""

    def __init__(self) -> None:
        self.logger = logging.getLogger(f"[tool] {self.name}")

    @property
    def args_schema(self) -> Dict[str, Any]:
        """JSON Schema of the tool arguments."""
        return {"type": "object", "properties": {}, "required": []}

    @abstractmethod
    def execute(self, **arguments: Any) -> ToolResult:
        """
        Run the tool.

        Args:
            **arguments: Tool arguments; missing ones take their declared defaults.

        Returns:
            Success payload or error envelope.
        """
