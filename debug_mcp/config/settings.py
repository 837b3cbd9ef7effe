"""Settings and configuration for the Debug MCP server."""

import logging
import os
from dataclasses import dataclass, field

_settings_logger = logging.getLogger(__name__)


def _safe_int(env_var: str, default: str) -> int:
    """Safely parse an integer from an environment variable.

    Args:
        env_var: Name of the environment variable.
        default: Default value as a string.

    Returns:
        Parsed integer value, or default if parsing fails.
    """
    value = os.getenv(env_var, default)
    try:
        return int(value)
    except ValueError:
        _settings_logger.warning("Invalid value '%s' for %s, using default %s", value, env_var, default)
        return int(default)


@dataclass
class Settings:
    """Configuration settings for the Debug MCP server."""

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Standalone MCP server
    mcp_host: str = field(default_factory=lambda: os.getenv("MCP_HOST", "127.0.0.1"))
    mcp_port: int = field(default_factory=lambda: _safe_int("MCP_PORT", "8210"))

    # Directory holding mcp-tools.log (invocation history)
    mcp_log_dir: str = field(default_factory=lambda: os.getenv("MCP_LOG_DIR", "logs"))

    # Prometheus /metrics endpoint
    enable_metrics: bool = field(default_factory=lambda: os.getenv("ENABLE_METRICS", "true").lower() == "true")

    @property
    def mcp_base_url(self) -> str:
        """Get the base URL of the standalone MCP server."""
        return f"http://{self.mcp_host}:{self.mcp_port}"

    @property
    def mcp_log_path(self) -> str:
        """Get the path of the invocation log file."""
        return os.path.join(self.mcp_log_dir, "mcp-tools.log")


# Global settings instance
settings = Settings()
