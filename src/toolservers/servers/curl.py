#!/usr/bin/env python3
"""Curl MCP server — performs a single HTTP request per tool call.

Tools:
    curl — Make an HTTP request with a custom method, headers and body
"""

from toolservers.executors.base import Executor
from toolservers.executors.http import HttpExecutor
from toolservers.servers.transport import run
from toolservers.tools.models import CurlOptions, ToolName
from toolservers.tools.registry import ToolDefinition, ToolRegistry

SERVICE_NAME = "mcp-toolservers-curl"


def build_registry(http: Executor | None = None) -> ToolRegistry:
    http = http or HttpExecutor()
    return ToolRegistry([
        ToolDefinition(
            name=ToolName.CURL,
            description=(
                "Make an HTTP request to any URL with customizable method, headers, and body."
            ),
            input_model=CurlOptions,
            handler=http.execute,
        ),
    ])


def main() -> None:
    run(SERVICE_NAME, build_registry)


if __name__ == "__main__":
    main()
