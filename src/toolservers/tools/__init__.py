"""Tool schemas, registry, validation and dispatch."""

from toolservers.tools.dispatcher import Dispatcher
from toolservers.tools.models import ToolName, ToolResponse, ToolSchema
from toolservers.tools.registry import ToolDefinition, ToolRegistry
from toolservers.tools.validation import ValidationResult, Violation, validate_tool_arguments

__all__ = [
    "Dispatcher",
    "ToolDefinition",
    "ToolName",
    "ToolRegistry",
    "ToolResponse",
    "ToolSchema",
    "ValidationResult",
    "Violation",
    "validate_tool_arguments",
]
