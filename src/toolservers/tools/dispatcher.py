"""Tool call dispatch: lookup, validation, execution, response wrapping."""

import json
from collections.abc import Mapping
from typing import Any

from toolservers.core.errors import InvalidArgumentsError, MissingArgumentsError, UnknownToolError
from toolservers.core.logging import bind_context, get_logger, unbind_context
from toolservers.tools.models import TextContent, ToolResponse, ToolSchema
from toolservers.tools.registry import ToolRegistry
from toolservers.tools.validation import validate_tool_arguments

logger = get_logger(__name__)


class Dispatcher:
    """Routes host requests to registered tools.

    This is the only place where validation outcomes become errors; any
    exception raised by a handler propagates to the host unchanged.
    """

    def __init__(self, registry: ToolRegistry):
        self.registry = registry

    def list_tools(self) -> list[ToolSchema]:
        """List all registered tools for discovery."""
        tools = self.registry.list_tools()
        logger.debug(f"Returning {len(tools)} tools")
        return tools

    async def call_tool(self, name: str, arguments: Mapping[str, Any] | None) -> ToolResponse:
        """Execute a tool by name.

        Args:
            name: Tool name as sent by the host
            arguments: Raw arguments, or None if the host sent none

        Returns:
            ToolResponse with the pretty-printed JSON result as a single text item

        Raises:
            MissingArgumentsError: If no arguments object was sent
            UnknownToolError: If no tool is registered under ``name``
            InvalidArgumentsError: If the arguments violate the tool's schema
        """
        if arguments is None:
            raise MissingArgumentsError()

        tool = self.registry.get(name)
        if tool is None:
            logger.warning(f"Unknown tool requested: {name}")
            raise UnknownToolError(name)

        outcome = validate_tool_arguments(tool.input_model, arguments)
        if not outcome.ok:
            raise InvalidArgumentsError(outcome.violations)

        bind_context(tool=name)
        try:
            logger.info(f"Executing tool: {name}")
            result = await tool.handler(outcome.value)
        except Exception as e:
            logger.error(f"Tool execution failed: {e}")
            raise
        finally:
            unbind_context("tool")

        text = json.dumps(result, indent=2, ensure_ascii=False)
        return ToolResponse(content=[TextContent(text=text)])
