"""Core package initialization."""

from toolservers.core.config import settings
from toolservers.core.logging import get_logger, setup_logging

__all__ = ["settings", "setup_logging", "get_logger"]
