"""HTTP API for Debug MCP."""
