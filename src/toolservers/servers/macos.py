#!/usr/bin/env python3
"""macOS MCP server — system information and native notifications.

Tools:
    systemInfo       — CPU, memory, disk or network details (or all of them)
    sendNotification — Display a native macOS notification
"""

from toolservers.executors.base import Executor
from toolservers.executors.system import NotificationExecutor, SystemInfoExecutor
from toolservers.servers.transport import run
from toolservers.tools.models import NotificationOptions, SystemInfoOptions, ToolName
from toolservers.tools.registry import ToolDefinition, ToolRegistry

SERVICE_NAME = "mcp-toolservers-macos"


def build_registry(
    system_info: Executor | None = None,
    notifications: Executor | None = None,
) -> ToolRegistry:
    system_info = system_info or SystemInfoExecutor()
    notifications = notifications or NotificationExecutor()
    return ToolRegistry([
        ToolDefinition(
            name=ToolName.SYSTEM_INFO,
            description="Retrieve system information from macOS using various system commands",
            input_model=SystemInfoOptions,
            handler=system_info.execute,
        ),
        ToolDefinition(
            name=ToolName.SEND_NOTIFICATION,
            description="Send a native macOS notification",
            input_model=NotificationOptions,
            handler=notifications.execute,
        ),
    ])


def main() -> None:
    run(SERVICE_NAME, build_registry)


if __name__ == "__main__":
    main()
