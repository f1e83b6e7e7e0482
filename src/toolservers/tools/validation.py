"""Input validation utilities."""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from toolservers.core.logging import get_logger

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class Violation:
    """A single failed constraint, addressed by dotted field path."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


@dataclass(frozen=True)
class ValidationResult(Generic[ModelT]):
    """Outcome of validating arguments: a value or a list of violations."""

    value: ModelT | None = None
    violations: list[Violation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations


def validate_tool_arguments(schema: type[ModelT], arguments: Any) -> ValidationResult[ModelT]:
    """Validate tool arguments against a schema model.

    Defaults are applied for absent optional fields. Values are never
    coerced to another type.

    Args:
        schema: Strict pydantic model describing the tool input
        arguments: Raw, untrusted arguments from the host

    Returns:
        ValidationResult holding either the model instance or all violations
    """
    try:
        value = schema.model_validate(arguments)
    except ValidationError as e:
        violations = [
            Violation(
                field=".".join(str(part) for part in error["loc"]),
                message=error["msg"],
            )
            for error in e.errors()
        ]
        logger.warning(
            f"Tool argument validation failed for {schema.__name__}",
            violations=len(violations),
        )
        return ValidationResult(violations=violations)

    logger.debug(f"Tool arguments validated successfully for {schema.__name__}")
    return ValidationResult(value=value)
