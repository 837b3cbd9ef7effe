"""System info tool.

Informacje o działającym interpreterze pogrupowane w sekcje:
- general: wersja, limity, raportowanie ostrzeżeń
- extensions: moduły wbudowane i załadowane rozszerzenia
- paths: ścieżka wyszukiwania modułów i pliki konfiguracyjne
"""

from typing import Any, Dict, Optional

from debug_mcp.mcp.results import ToolResult, validate_choice
from debug_mcp.mcp.tools.base import BaseTool
from debug_mcp.utils.environment import (
    ERROR_REPORTING_ALL,
    ERROR_REPORTING_LEVELS,
    EnvironmentInspector,
    HostEnvironmentInspector,
)

VALID_SECTIONS = ["general", "extensions", "paths", "all"]

GENERAL_KEYS = ("python_version", "implementation_version", "memory_limit", "max_execution_time", "error_reporting")
EXTENSIONS_KEYS = ("extensions", "count")
PATHS_KEYS = ("include_path", "config_file_path", "config_file_scan_dir")


def describe_error_reporting(level: int) -> str:
    """Zamień maskę raportowania ostrzeżeń na tekst.

    Args:
        level: Maska zbudowana z ERROR_REPORTING_LEVELS.

    Returns:
        "ALL" dla pełnej maski, w przeciwnym razie nazwy ustawionych bitów
        połączone " | " w kolejności tabeli, lub sama liczba gdy żaden bit
        nie jest znany.
    """
    if level == ERROR_REPORTING_ALL:
        return "ALL"

    active = [name for bit, name, _category in ERROR_REPORTING_LEVELS if level & bit]
    return " | ".join(active) if active else str(level)


class SystemInfoTool(BaseTool):
    """Narzędzie raportujące konfigurację i środowisko interpretera."""

    name = "system_info"
    description = "Inspect Python runtime configuration and environment"

    def __init__(self, inspector: Optional[EnvironmentInspector] = None) -> None:
        super().__init__()
        self.inspector = inspector or HostEnvironmentInspector()

    @property
    def args_schema(self) -> Dict[str, Any]:
        return {
            "type": "object",
            "properties": {
                "section": {
                    "type": "string",
                    "enum": VALID_SECTIONS,
                    "default": "general",
                    "description": "Group of facts to report; 'all' combines the others.",
                },
            },
            "required": [],
        }

    def execute(self, section: str = "general") -> ToolResult:
        error = validate_choice(section, VALID_SECTIONS, "section")
        if error:
            self.logger.warning("Rejected section: %s", section)
            return error

        result: Dict[str, Any] = {}

        if section in ("general", "all"):
            result.update(self._general_info())

        if section in ("extensions", "all"):
            result.update(self._extensions_info())

        if section in ("paths", "all"):
            result.update(self._paths_info())

        return ToolResult.success(result)

    def _general_info(self) -> Dict[str, Any]:
        return {
            "python_version": self.inspector.runtime_version(),
            "implementation_version": self.inspector.engine_version(),
            "memory_limit": self.inspector.memory_limit() or "unknown",
            "max_execution_time": self.inspector.max_execution_time() or "unknown",
            "error_reporting": describe_error_reporting(self.inspector.error_reporting_level()),
        }

    def _extensions_info(self) -> Dict[str, Any]:
        extensions = sorted(self.inspector.loaded_extensions())
        return {
            "extensions": extensions,
            "count": len(extensions),
        }

    def _paths_info(self) -> Dict[str, Any]:
        return {
            "include_path": self.inspector.include_path(),
            "config_file_path": self.inspector.loaded_config_file() or "none",
            "config_file_scan_dir": self.inspector.scanned_config_files() or "none",
        }
