"""Error taxonomy shared by the validator, executors and dispatcher."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from toolservers.tools.validation import Violation


class ErrorKind(str, Enum):
    """Category of a tool call failure."""

    MISSING_ARGUMENTS = "missing_arguments"
    UNKNOWN_TOOL = "unknown_tool"
    INVALID_ARGUMENTS = "invalid_arguments"
    TIMEOUT = "timeout"
    EXECUTION = "execution"


class ToolError(Exception):
    """Base class for failures surfaced to the host as a tool call error."""

    kind: ErrorKind = ErrorKind.EXECUTION


class MissingArgumentsError(ToolError):
    """Raised when a call arrives without an arguments object."""

    kind = ErrorKind.MISSING_ARGUMENTS

    def __init__(self) -> None:
        super().__init__("Arguments are required")


class UnknownToolError(ToolError):
    """Raised when the requested tool is not registered."""

    kind = ErrorKind.UNKNOWN_TOOL

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown tool: {name}")


class InvalidArgumentsError(ToolError):
    """Raised when arguments fail schema validation.

    Carries every violation found, not just the first one.
    """

    kind = ErrorKind.INVALID_ARGUMENTS

    def __init__(self, violations: list[Violation]) -> None:
        self.violations = list(violations)
        issues = ", ".join(str(v) for v in self.violations)
        super().__init__(f"Invalid arguments: {issues}")


class RequestTimeoutError(ToolError):
    """Raised when an HTTP request is cancelled by its timeout."""

    kind = ErrorKind.TIMEOUT

    def __init__(self, timeout_ms: int) -> None:
        self.timeout_ms = timeout_ms
        super().__init__(f"Request timed out after {timeout_ms}ms")


class CurlRequestError(ToolError):
    """Raised for any non-timeout network or protocol failure."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Curl request failed: {reason}")


class CommandError(ToolError):
    """Raised when an external command cannot be spawned or exits non-zero."""

    def __init__(self, command: str, returncode: int | None, stderr: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
        message = f"Command failed: {command}"
        if stderr:
            message = f"{message}\n{stderr}"
        super().__init__(message)


class UnknownCategoryError(ToolError):
    """Raised for a system info category outside the supported set."""

    def __init__(self, category: str) -> None:
        self.category = category
        super().__init__(f"Unknown category: {category}")
