"""
Debug MCP - runtime inspection tools for Model Context Protocol clients.

This package provides:
- ``clock`` tool returning the current time in a PHP-style format and timezone
- ``system_info`` tool reporting interpreter version, limits, extensions and paths
- Tool registry and FastAPI router used to list and invoke the tools
"""

__version__ = "0.1.0"
