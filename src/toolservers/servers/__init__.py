"""MCP stdio servers."""
