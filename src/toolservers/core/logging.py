"""Structured logging configuration for the tool servers.

- structlog for structured logging
- Context propagation via contextvars (service, version, tool)
- Console rendering for development, JSON for log shipping
- Everything goes to stderr: stdout is reserved for the MCP stdio transport
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor


def setup_logging(
    service_name: str,
    service_version: str = "0.1.0",
    log_level: str = "INFO",
    log_format: str = "console",
) -> None:
    """Configure structured logging for a server process.

    Args:
        service_name: Name of the server (e.g., "mcp-toolservers-curl")
        service_version: Server version (e.g., "0.1.0")
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR)
        log_format: Output format - "json" or "console"
    """
    # Silence noisy library loggers
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)
    logging.getLogger("mcp").setLevel(logging.WARNING)

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if log_format == "json":
        processors = shared_processors + [
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ]
    else:
        # No colors: stderr usually ends up in the host's log file
        processors = shared_processors + [
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        service=service_name,
        version=service_version,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance with optional name binding.

    Args:
        name: Optional logger name (typically __name__)

    Returns:
        A lazy structlog logger, resolved against the configuration in
        effect at its first use rather than at import time
    """
    if name:
        return structlog.get_logger(logger_name=name)
    return structlog.get_logger()


def bind_context(**kwargs: Any) -> None:
    """Bind additional context variables to all subsequent logs.

    Example:
        bind_context(tool="curl")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Remove specific context variables.

    Args:
        keys: Names of context variables to remove
    """
    structlog.contextvars.unbind_contextvars(*keys)
