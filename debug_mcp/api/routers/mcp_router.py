"""MCP Router - endpointy API dla narzędzi Model Context Protocol.

Endpointy:
- GET /api/mcp/tools - lista dostępnych narzędzi
- POST /api/mcp/tools/invoke - wywołanie narzędzia
- GET /api/mcp/stats - statystyki rejestru
- GET /api/mcp/history - ostatnie wywołania z mcp-tools.log
"""

import logging
import os
from collections import deque
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from debug_mcp.config import Settings, settings as default_settings
from debug_mcp.mcp import registry

logger = logging.getLogger(__name__)

# Dedykowany logger dla mcp-tools.log
mcp_file_logger = logging.getLogger("mcp.tools")


def _get_settings(request: Request) -> Settings:
    """Pobierz konfigurację aplikacji (app.state.settings lub globalną)."""
    return getattr(request.app.state, "settings", None) or default_settings


def _setup_mcp_file_logger(active_settings: Settings) -> None:
    """Podłącz handler pliku mcp-tools.log dla podanej konfiguracji.

    Handler wskazujący na inny plik jest zastępowany.
    """
    log_path = os.path.abspath(active_settings.mcp_log_path)
    for handler in list(mcp_file_logger.handlers):
        if isinstance(handler, logging.FileHandler):
            if handler.baseFilename == log_path:
                return
            mcp_file_logger.removeHandler(handler)
            handler.close()

    os.makedirs(active_settings.mcp_log_dir, exist_ok=True)

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
    mcp_file_logger.addHandler(file_handler)
    mcp_file_logger.setLevel(logging.INFO)


router = APIRouter(prefix="/api/mcp", tags=["mcp"])


class InvokeToolRequest(BaseModel):
    """Żądanie wywołania narzędzia MCP."""

    tool: str = Field(..., description="Name of the tool to invoke")
    arguments: Optional[Dict[str, Any]] = Field(default=None, description="Tool arguments")


@router.get("/tools")
async def list_tools() -> JSONResponse:
    """Zwróć listę dostępnych narzędzi MCP.

    Format odpowiedzi:
    {
        "ok": true,
        "tools": [
            {"name": "clock", "description": "...", "args_schema": {...}}
        ],
        "count": 2
    }
    """
    tool_list: List[Dict[str, Any]] = []

    for tool in registry.list_tools():
        tool_list.append(
            {
                "name": tool.name,
                "description": tool.description,
                "args_schema": tool.args_schema,
            }
        )

    return JSONResponse(
        {
            "ok": True,
            "tools": tool_list,
            "count": len(tool_list),
        }
    )


@router.post("/tools/invoke")
async def invoke_tool(payload: InvokeToolRequest, request: Request) -> JSONResponse:
    """Wywołaj narzędzie MCP.

    Format odpowiedzi:
    {
        "ok": true,
        "tool": "clock",
        "result": {"time": "2025-12-01 12:34:56"},
        "error": null,
        "meta": {"duration_ms": 0, "host": "devbox"}
    }

    Błędy zgłoszone przez narzędzie zachowują kopertę {error, details} w "result".
    """
    logger.info("Invoking MCP tool: %s with arguments: %s", payload.tool, payload.arguments)

    result = await registry.invoke(payload.tool, payload.arguments)

    _setup_mcp_file_logger(_get_settings(request))
    if result.ok:
        mcp_file_logger.info("INVOKE %s -> SUCCESS (%dms)", payload.tool, result.meta.get("duration_ms", 0))
        logger.info("[MCP] %s -> success (%dms)", payload.tool, result.meta.get("duration_ms", 0))
    else:
        mcp_file_logger.warning("INVOKE %s -> ERROR: %s", payload.tool, result.error)
        logger.warning("[MCP] %s -> error: %s", payload.tool, result.error)

    status_code = 200 if result.ok else (404 if "not found" in (result.error or "") else 400)

    return JSONResponse(result.to_dict(), status_code=status_code)


@router.get("/stats")
async def get_stats() -> JSONResponse:
    """Zwróć statystyki wywołań narzędzi."""
    return JSONResponse(
        {
            "ok": True,
            "stats": registry.get_stats(),
        }
    )


@router.get("/history")
async def get_invocation_history(request: Request, limit: int = 50) -> JSONResponse:
    """Zwróć ostatnie wpisy z mcp-tools.log.

    Args:
        limit: Maksymalna liczba wpisów (1-200).
    """
    limit = min(max(1, limit), 200)
    history: List[str] = []

    log_path = _get_settings(request).mcp_log_path
    if os.path.exists(log_path):
        try:
            with open(log_path, "r", encoding="utf-8", errors="replace") as f:
                lines = deque((line.strip() for line in f if line.strip()), maxlen=limit)
            history = list(lines)
        except OSError as e:
            logger.warning("Failed to read %s: %s", log_path, e)

    return JSONResponse(
        {
            "ok": True,
            "history": history,
            "count": len(history),
            "log_path": log_path,
        }
    )
