"""Tests for the MCP SDK wiring of the dispatcher."""

import json
import os
import subprocess
import sys
from unittest.mock import AsyncMock, MagicMock, patch

import mcp.types as types
import pytest

from toolservers.core.errors import MissingArgumentsError, UnknownToolError
from toolservers.executors.system import NotificationExecutor, SystemInfoExecutor
from toolservers.servers import curl, macos
from toolservers.servers.transport import create_server, run
from toolservers.tools.dispatcher import Dispatcher


@pytest.fixture
def server(fake_runner):
    registry = macos.build_registry(
        system_info=SystemInfoExecutor(fake_runner),
        notifications=NotificationExecutor(AsyncMock(return_value="")),
    )
    return create_server("test-macos", Dispatcher(registry))


def call_request(name: str, arguments: dict | None) -> types.CallToolRequest:
    return types.CallToolRequest(
        method="tools/call",
        params=types.CallToolRequestParams(name=name, arguments=arguments),
    )


async def test_list_tools(server):
    handler = server.request_handlers[types.ListToolsRequest]

    result = await handler(types.ListToolsRequest(method="tools/list"))

    tools = result.root.tools
    assert [tool.name for tool in tools] == ["systemInfo", "sendNotification"]
    assert tools[0].inputSchema["properties"]["category"]["enum"] == [
        "cpu",
        "memory",
        "disk",
        "network",
        "all",
    ]


async def test_call_tool_returns_text_content(server):
    handler = server.request_handlers[types.CallToolRequest]

    result = await handler(call_request("systemInfo", {"category": "cpu"}))

    content = result.root.content
    assert len(content) == 1
    assert content[0].type == "text"
    assert json.loads(content[0].text) == {"model": "Apple M2 Pro", "cores": 12}
    assert not result.root.isError


async def test_call_tool_without_arguments(server):
    handler = server.request_handlers[types.CallToolRequest]

    with pytest.raises(MissingArgumentsError):
        await handler(call_request("systemInfo", None))


async def test_call_unknown_tool(server):
    handler = server.request_handlers[types.CallToolRequest]

    with pytest.raises(UnknownToolError, match="Unknown tool: curl"):
        await handler(call_request("curl", {}))


def test_server_advertises_tools_capability(server):
    options = server.create_initialization_options()

    assert options.server_name == "test-macos"
    assert options.capabilities.tools is not None


def test_run_exits_on_transport_failure():
    with patch(
        "toolservers.servers.transport.serve",
        new_callable=AsyncMock,
        side_effect=RuntimeError("stdin closed"),
    ), patch("toolservers.servers.transport.setup_logging"):
        with pytest.raises(SystemExit) as exc_info:
            run("test-macos", macos.build_registry)

    assert exc_info.value.code == 1


def test_logging_is_configured_before_registry_is_built():
    calls = []
    setup = MagicMock(side_effect=lambda **kwargs: calls.append("setup_logging"))

    def build_registry():
        calls.append("build_registry")
        return curl.build_registry()

    with patch("toolservers.servers.transport.setup_logging", setup), patch(
        "toolservers.servers.transport.serve", new_callable=AsyncMock
    ):
        run("test-curl", build_registry)

    assert calls == ["setup_logging", "build_registry"]


@pytest.mark.parametrize("module", ["toolservers.servers.curl", "toolservers.servers.macos"])
def test_entry_point_keeps_stdout_for_protocol(module):
    """With no input the server exits without writing anything to stdout."""
    proc = subprocess.run(
        [sys.executable, "-m", module],
        input=b"",
        capture_output=True,
        timeout=30,
        env={**os.environ, "LOG_LEVEL": "DEBUG"},
    )

    assert proc.stdout == b""
    assert b"Registered tools" in proc.stderr
