"""Read-only access to the facts of the running interpreter.

``EnvironmentInspector`` is the only place the ``system_info`` tool reads
ambient process state from. ``HostEnvironmentInspector`` inspects the live
interpreter; ``StaticEnvironmentInspector`` returns fixed values and is used
in tests.
"""

from __future__ import annotations

import importlib.machinery
import logging
import os
import platform
import site
import sys
import warnings
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Type

try:
    import resource
except ImportError:  # pragma: no cover - not available on Windows
    resource = None  # type: ignore

logger = logging.getLogger(__name__)

# (bit, name, warning category) in rendering order
ERROR_REPORTING_LEVELS: Tuple[Tuple[int, str, Type[Warning]], ...] = (
    (1 << 0, "USER_WARNING", UserWarning),
    (1 << 1, "DEPRECATION", DeprecationWarning),
    (1 << 2, "PENDING_DEPRECATION", PendingDeprecationWarning),
    (1 << 3, "SYNTAX", SyntaxWarning),
    (1 << 4, "RUNTIME", RuntimeWarning),
    (1 << 5, "FUTURE", FutureWarning),
    (1 << 6, "IMPORT", ImportWarning),
    (1 << 7, "UNICODE", UnicodeWarning),
    (1 << 8, "BYTES", BytesWarning),
    (1 << 9, "RESOURCE", ResourceWarning),
    (1 << 10, "ENCODING", EncodingWarning),
)

ERROR_REPORTING_ALL = sum(bit for bit, _name, _category in ERROR_REPORTING_LEVELS)


class EnvironmentInspector(ABC):
    """Source of runtime facts reported by the ``system_info`` tool."""

    @abstractmethod
    def runtime_version(self) -> str:
        """Version of the language runtime, e.g. "3.12.1"."""

    @abstractmethod
    def engine_version(self) -> str:
        """Identifier of the interpreter implementation, e.g. "cpython 3.12.1"."""

    @abstractmethod
    def memory_limit(self) -> Optional[str]:
        """Configured memory limit, or None when unset."""

    @abstractmethod
    def max_execution_time(self) -> Optional[str]:
        """Configured maximum execution time in seconds, or None when unset."""

    @abstractmethod
    def error_reporting_level(self) -> int:
        """Bitmask of reported warning categories (see ERROR_REPORTING_LEVELS)."""

    @abstractmethod
    def loaded_extensions(self) -> List[str]:
        """Names of built-in and loaded extension modules, in any order."""

    @abstractmethod
    def include_path(self) -> str:
        """Module search path."""

    @abstractmethod
    def loaded_config_file(self) -> Optional[str]:
        """Path of the loaded interpreter configuration file, or None."""

    @abstractmethod
    def scanned_config_files(self) -> Optional[str]:
        """Additional configuration files scanned at startup, or None."""


def _shorthand_bytes(value: int) -> str:
    """Render a byte count the way PHP ini values look ("512M", "2G")."""
    if value <= 0:
        return str(value)
    for suffix, size in (("G", 1024**3), ("M", 1024**2), ("K", 1024)):
        if value % size == 0:
            return f"{value // size}{suffix}"
    return str(value)


def _soft_limit(limit_name: str) -> Optional[int]:
    if resource is None:
        return None
    limit = getattr(resource, limit_name, None)
    if limit is None:
        return None
    try:
        soft, _hard = resource.getrlimit(limit)
    except (OSError, ValueError) as exc:
        logger.debug("getrlimit(%s) failed: %s", limit_name, exc)
        return None
    if soft == resource.RLIM_INFINITY:
        return None
    return soft


def _is_reported(category: Type[Warning]) -> bool:
    """Check whether the active warning filters let ``category`` through.

    Filters restricted to a message or module pattern are skipped; only
    category-wide filters decide.
    """
    for action, message, filter_category, module, _lineno in warnings.filters:
        if message is not None and getattr(message, "pattern", message):
            continue
        if module is not None and getattr(module, "pattern", module):
            continue
        if issubclass(category, filter_category):
            return action != "ignore"
    return warnings.defaultaction != "ignore"


class HostEnvironmentInspector(EnvironmentInspector):
    """Inspector backed by the running Python interpreter."""

    def runtime_version(self) -> str:
        return platform.python_version()

    def engine_version(self) -> str:
        version = sys.implementation.version
        return f"{sys.implementation.name} {version.major}.{version.minor}.{version.micro}"

    def memory_limit(self) -> Optional[str]:
        soft = _soft_limit("RLIMIT_AS")
        return _shorthand_bytes(soft) if soft is not None else None

    def max_execution_time(self) -> Optional[str]:
        soft = _soft_limit("RLIMIT_CPU")
        return str(soft) if soft is not None else None

    def error_reporting_level(self) -> int:
        level = 0
        for bit, _name, category in ERROR_REPORTING_LEVELS:
            if _is_reported(category):
                level |= bit
        return level

    def loaded_extensions(self) -> List[str]:
        suffixes = tuple(importlib.machinery.EXTENSION_SUFFIXES)
        names = set(sys.builtin_module_names)
        for name, module in list(sys.modules.items()):
            spec = getattr(module, "__spec__", None)
            origin = getattr(spec, "origin", None) or getattr(module, "__file__", None)
            if isinstance(origin, str) and origin.endswith(suffixes):
                names.add(name)
        return list(names)

    def include_path(self) -> str:
        return os.pathsep.join(sys.path)

    def loaded_config_file(self) -> Optional[str]:
        if sys.prefix == sys.base_prefix:
            return None
        path = os.path.join(sys.prefix, "pyvenv.cfg")
        return path if os.path.isfile(path) else None

    def scanned_config_files(self) -> Optional[str]:
        directories: List[str] = []
        getsitepackages = getattr(site, "getsitepackages", None)
        if callable(getsitepackages):
            directories.extend(getsitepackages())
        if site.ENABLE_USER_SITE:
            directories.append(site.getusersitepackages())

        files: List[str] = []
        for directory in dict.fromkeys(directories):
            if not os.path.isdir(directory):
                continue
            try:
                entries = sorted(os.listdir(directory))
            except OSError as exc:
                logger.debug("Cannot list %s: %s", directory, exc)
                continue
            files.extend(os.path.join(directory, entry) for entry in entries if entry.endswith(".pth"))
        return ", ".join(files) or None


@dataclass
class StaticEnvironmentInspector(EnvironmentInspector):
    """Inspector returning fixed values."""

    python_version: str = "3.12.0"
    implementation: str = "cpython 3.12.0"
    memory: Optional[str] = "512M"
    cpu_time: Optional[str] = "30"
    error_reporting: int = ERROR_REPORTING_ALL
    extensions: List[str] = field(default_factory=lambda: ["sys", "_json", "builtins", "_socket"])
    search_path: str = "/usr/lib/python3.12"
    config_file: Optional[str] = None
    scanned_files: Optional[str] = None

    def runtime_version(self) -> str:
        return self.python_version

    def engine_version(self) -> str:
        return self.implementation

    def memory_limit(self) -> Optional[str]:
        return self.memory

    def max_execution_time(self) -> Optional[str]:
        return self.cpu_time

    def error_reporting_level(self) -> int:
        return self.error_reporting

    def loaded_extensions(self) -> List[str]:
        return list(self.extensions)

    def include_path(self) -> str:
        return self.search_path

    def loaded_config_file(self) -> Optional[str]:
        return self.config_file

    def scanned_config_files(self) -> Optional[str]:
        return self.scanned_files


__all__ = [
    "ERROR_REPORTING_ALL",
    "ERROR_REPORTING_LEVELS",
    "EnvironmentInspector",
    "HostEnvironmentInspector",
    "StaticEnvironmentInspector",
]
