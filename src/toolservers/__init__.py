"""MCP tool servers for HTTP requests and macOS system access."""

__version__ = "0.1.0"
