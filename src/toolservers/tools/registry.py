"""Static tool registry: name -> description, input schema and handler."""

from collections.abc import Awaitable, Callable, Iterable, Iterator
from dataclasses import dataclass
from functools import cached_property
from typing import Any

from jsonschema import Draft202012Validator, SchemaError
from pydantic import BaseModel

from toolservers.core.logging import get_logger
from toolservers.tools.models import ToolName, ToolSchema

logger = get_logger(__name__)

ToolHandler = Callable[[Any], Awaitable[Any]]


@dataclass(frozen=True)
class ToolDefinition:
    """A registered tool.

    The advertised input schema is generated from ``input_model``, the same
    model the dispatcher validates arguments against.
    """

    name: ToolName
    description: str
    input_model: type[BaseModel]
    handler: ToolHandler

    @cached_property
    def input_schema(self) -> dict[str, Any]:
        return self.input_model.model_json_schema()

    def to_schema(self) -> ToolSchema:
        return ToolSchema(
            name=self.name.value,
            description=self.description,
            input_schema=self.input_schema,
        )


class ToolRegistry:
    """Fixed, ordered set of tools. No registration after construction."""

    def __init__(self, definitions: Iterable[ToolDefinition]):
        tools: dict[str, ToolDefinition] = {}
        for definition in definitions:
            name = definition.name.value
            if name in tools:
                raise ValueError(f"Duplicate tool name: {name}")
            try:
                Draft202012Validator.check_schema(definition.input_schema)
            except SchemaError as e:
                raise ValueError(f"Invalid input schema for tool {name}: {e.message}") from e
            tools[name] = definition
        self._tools = tools
        logger.debug(f"Registered tools: {', '.join(tools)}")

    def list_tools(self) -> list[ToolSchema]:
        """Return every tool in registration order."""
        return [definition.to_schema() for definition in self._tools.values()]

    def get(self, name: str) -> ToolDefinition | None:
        """Look up a tool by name."""
        return self._tools.get(name)

    def names(self) -> list[str]:
        return list(self._tools)

    def __contains__(self, name: object) -> bool:
        return name in self._tools

    def __iter__(self) -> Iterator[ToolDefinition]:
        return iter(self._tools.values())

    def __len__(self) -> int:
        return len(self._tools)
