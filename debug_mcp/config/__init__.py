"""Configuration module."""

from debug_mcp.config.settings import Settings, settings

__all__ = ["Settings", "settings"]
