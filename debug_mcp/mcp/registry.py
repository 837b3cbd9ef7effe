"""MCP Tool Registry.

Rejestr narzędzi MCP przechowujący informacje o dostępnych narzędziach,
ich schematach argumentów i handlerach. Same narzędzia nie znają rejestru.
"""

import logging
import socket
import time
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional

from debug_mcp.mcp.results import ToolResult
from debug_mcp.telemetry.metrics import tool_duration_seconds, tool_invocations_total

logger = logging.getLogger(__name__)


@dataclass
class Tool:
    """Definicja narzędzia MCP.

    Attributes:
        name: Unikalny identyfikator narzędzia (np. "clock").
        description: Opis działania narzędzia.
        args_schema: JSON Schema dla argumentów wejściowych.
        handler: Funkcja obsługująca wywołanie (async lub sync).
    """

    name: str
    description: str
    args_schema: Dict[str, Any] = field(default_factory=lambda: {"type": "object", "properties": {}, "required": []})
    handler: Optional[Callable[..., Any]] = None


@dataclass
class ToolInvokeResult:
    """Wynik wywołania narzędzia MCP.

    Attributes:
        ok: Czy wywołanie zakończyło się sukcesem.
        tool: Nazwa wywołanego narzędzia.
        result: Dane zwrócone przez handler; dla błędów narzędzia
            koperta ``{error, details}``.
        error: Opis błędu (gdy ok=False).
        meta: Metadane wywołania (czas trwania, host).
    """

    ok: bool
    tool: str
    result: Optional[Dict[str, Any]] = None
    error: Optional[str] = None
    meta: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Konwertuj do słownika."""
        return {
            "ok": self.ok,
            "tool": self.tool,
            "result": self.result,
            "error": self.error,
            "meta": self.meta,
        }


class ToolRegistry:
    """Rejestr narzędzi MCP.

    Przechowuje zarejestrowane narzędzia i umożliwia ich wyszukiwanie oraz wywoływanie.
    """

    def __init__(self) -> None:
        self._tools: Dict[str, Tool] = {}
        self._invocation_count: int = 0
        self._last_invoked_tool: Optional[str] = None
        self._logger = logging.getLogger("mcp.registry")

    def register(self, tool: Tool) -> None:
        """Zarejestruj narzędzie.

        Args:
            tool: Definicja narzędzia.

        Raises:
            ValueError: Jeśli narzędzie o tej nazwie już istnieje.
        """
        if tool.name in self._tools:
            raise ValueError(f"Tool '{tool.name}' already registered")
        self._tools[tool.name] = tool
        self._logger.debug("Registered tool: %s", tool.name)

    def unregister(self, name: str) -> bool:
        """Usuń narzędzie z rejestru.

        Returns:
            True jeśli narzędzie zostało usunięte, False jeśli nie istniało.
        """
        if name in self._tools:
            del self._tools[name]
            self._logger.debug("Unregistered tool: %s", name)
            return True
        return False

    def get(self, name: str) -> Optional[Tool]:
        """Pobierz narzędzie po nazwie lub None, jeśli nie istnieje."""
        return self._tools.get(name)

    def list_tools(self) -> List[Tool]:
        """Zwróć listę wszystkich zarejestrowanych narzędzi."""
        return list(self._tools.values())

    def list_tool_names(self) -> List[str]:
        """Zwróć listę nazw zarejestrowanych narzędzi."""
        return list(self._tools.keys())

    def clear(self) -> None:
        """Usuń wszystkie narzędzia i wyzeruj statystyki."""
        self._tools.clear()
        self._invocation_count = 0
        self._last_invoked_tool = None

    def _finish(self, tool_name: str, start_time: float, hostname: str, status: str) -> Dict[str, Any]:
        duration = time.time() - start_time
        tool_invocations_total.labels(tool=tool_name, status=status).inc()
        tool_duration_seconds.labels(tool=tool_name).observe(duration)
        return {"duration_ms": int(duration * 1000), "host": hostname}

    async def invoke(
        self,
        tool_name: str,
        arguments: Optional[Dict[str, Any]] = None,
    ) -> ToolInvokeResult:
        """Wywołaj narzędzie z podanymi argumentami.

        Args:
            tool_name: Nazwa narzędzia.
            arguments: Argumenty przekazywane do handlera.

        Returns:
            Wynik wywołania. Wyjątki handlera i koperty błędów narzędzia
            są zwracane z ok=False; nic nie jest rzucane.
        """
        start_time = time.time()
        hostname = socket.gethostname()

        tool = self.get(tool_name)
        if not tool:
            return ToolInvokeResult(
                ok=False,
                tool=tool_name,
                error=f"Tool '{tool_name}' not found",
                meta={"duration_ms": 0, "host": hostname},
            )

        if not tool.handler:
            return ToolInvokeResult(
                ok=False,
                tool=tool_name,
                error=f"Tool '{tool_name}' has no handler",
                meta={"duration_ms": 0, "host": hostname},
            )

        try:
            args = arguments or {}
            result = tool.handler(**args)
            if isinstance(result, Awaitable):
                result = await result
        except TypeError as e:
            meta = self._finish(tool_name, start_time, hostname, "error")
            error_msg = f"Invalid arguments: {e}"
            self._logger.error("Tool '%s' invocation failed: %s", tool_name, error_msg)
            return ToolInvokeResult(ok=False, tool=tool_name, error=error_msg, meta=meta)
        except Exception as e:
            meta = self._finish(tool_name, start_time, hostname, "error")
            self._logger.error("Tool '%s' invocation failed: %s", tool_name, e)
            return ToolInvokeResult(ok=False, tool=tool_name, error=str(e), meta=meta)

        self._invocation_count += 1
        self._last_invoked_tool = tool_name

        if isinstance(result, ToolResult):
            if not result.ok:
                meta = self._finish(tool_name, start_time, hostname, "failure")
                self._logger.warning("Tool '%s' reported %s: %s", tool_name, result.error, result.details)
                return ToolInvokeResult(
                    ok=False,
                    tool=tool_name,
                    result=result.to_dict(),
                    error=result.error,
                    meta=meta,
                )
            result = result.to_dict()

        meta = self._finish(tool_name, start_time, hostname, "success")
        self._logger.info("Tool '%s' invoked successfully (duration: %dms)", tool_name, meta["duration_ms"])

        return ToolInvokeResult(
            ok=True,
            tool=tool_name,
            result=result if isinstance(result, dict) else {"value": result},
            meta=meta,
        )

    def get_stats(self) -> Dict[str, Any]:
        """Zwróć statystyki rejestru."""
        return {
            "total_tools": len(self._tools),
            "invocation_count": self._invocation_count,
            "last_invoked_tool": self._last_invoked_tool,
        }


# Globalny rejestr narzędzi
registry = ToolRegistry()
