"""Shared fixtures for Debug MCP tests."""

import os
import tempfile

import pytest

# Keep mcp-tools.log out of the working tree; must run before debug_mcp.config is imported.
os.environ.setdefault("MCP_LOG_DIR", tempfile.mkdtemp(prefix="debug-mcp-logs-"))

from debug_mcp.utils.environment import StaticEnvironmentInspector  # noqa: E402


@pytest.fixture
def static_inspector():
    """Inspector with fixed, known values."""
    return StaticEnvironmentInspector(
        python_version="3.12.4",
        implementation="cpython 3.12.4",
        memory="256M",
        cpu_time="60",
        extensions=["zlib", "_json", "array", "_socket"],
        search_path="/app:/usr/lib/python3.12",
        config_file="/venv/pyvenv.cfg",
        scanned_files="/venv/lib/python3.12/site-packages/distutils-precedence.pth",
    )
