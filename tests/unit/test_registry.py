"""Unit tests for the tool registry and the servers' tool sets."""

from unittest.mock import AsyncMock

import jsonschema
import pytest

from toolservers.servers import curl, macos
from toolservers.tools.models import CurlOptions, SystemInfoOptions, ToolName
from toolservers.tools.registry import ToolDefinition, ToolRegistry
from toolservers.tools.validation import validate_tool_arguments


def make_tool(name: ToolName, model=CurlOptions) -> ToolDefinition:
    return ToolDefinition(name=name, description=f"{name.value} tool", input_model=model, handler=AsyncMock())


def test_list_preserves_registration_order():
    registry = ToolRegistry([
        make_tool(ToolName.SEND_NOTIFICATION),
        make_tool(ToolName.CURL),
        make_tool(ToolName.SYSTEM_INFO, SystemInfoOptions),
    ])

    assert [tool.name for tool in registry.list_tools()] == [
        "sendNotification",
        "curl",
        "systemInfo",
    ]


def test_get_returns_definition_or_none():
    tool = make_tool(ToolName.CURL)
    registry = ToolRegistry([tool])

    assert registry.get("curl") is tool
    assert registry.get("wget") is None
    assert "curl" in registry
    assert len(registry) == 1


def test_duplicate_names_rejected():
    with pytest.raises(ValueError, match="Duplicate tool name: curl"):
        ToolRegistry([make_tool(ToolName.CURL), make_tool(ToolName.CURL)])


def test_advertised_schema_comes_from_input_model():
    tool = make_tool(ToolName.CURL)

    schema = ToolRegistry([tool]).list_tools()[0].inputSchema

    assert schema == CurlOptions.model_json_schema()
    assert schema["required"] == ["url"]
    assert schema["properties"]["method"]["default"] == "GET"
    assert schema["properties"]["timeout"]["maximum"] == 300000


def test_tool_schema_serializes_with_camel_case_key():
    schema = ToolRegistry([make_tool(ToolName.CURL)]).list_tools()[0]

    dumped = schema.model_dump()

    assert set(dumped) == {"name", "description", "inputSchema"}


class TestServerToolSets:
    def test_curl_server_tools(self):
        registry = curl.build_registry()

        assert registry.names() == ["curl"]
        assert registry.get("curl").description.startswith("Make an HTTP request")

    def test_macos_server_tools(self):
        registry = macos.build_registry()

        assert registry.names() == ["systemInfo", "sendNotification"]

    @pytest.mark.parametrize(
        "arguments",
        [
            {"url": "https://example.com", "method": "DELETE", "timeout": 10},
            {"url": "https://example.com", "headers": {"Accept": "text/html"}},
        ],
    )
    def test_advertised_schema_accepts_what_validator_accepts(self, arguments):
        tool = curl.build_registry().get("curl")

        assert validate_tool_arguments(tool.input_model, arguments).ok
        jsonschema.validate(instance=arguments, schema=tool.input_schema)

    def test_advertised_schema_rejects_what_validator_rejects(self):
        tool = macos.build_registry().get("systemInfo")
        arguments = {"category": "gpu"}

        assert not validate_tool_arguments(tool.input_model, arguments).ok
        with pytest.raises(jsonschema.ValidationError):
            jsonschema.validate(instance=arguments, schema=tool.input_schema)
