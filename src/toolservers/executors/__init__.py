"""Executors performing the external operation behind each tool."""

from toolservers.executors.base import Executor, run_command, run_exec
from toolservers.executors.http import HttpExecutor
from toolservers.executors.system import NotificationExecutor, SystemInfoExecutor

__all__ = [
    "Executor",
    "HttpExecutor",
    "NotificationExecutor",
    "SystemInfoExecutor",
    "run_command",
    "run_exec",
]
