"""Common executor interface and external command runner."""

import asyncio
from typing import Any, Protocol

from toolservers.core.errors import CommandError
from toolservers.core.logging import get_logger

logger = get_logger(__name__)


class Executor(Protocol):
    """Performs the external operation behind a tool."""

    async def execute(self, args: Any) -> Any: ...


class CommandRunner(Protocol):
    async def __call__(self, command: str) -> str: ...


class ExecRunner(Protocol):
    async def __call__(self, program: str, *args: str) -> str: ...


async def _communicate(command: str, process: asyncio.subprocess.Process) -> str:
    try:
        stdout, stderr = await process.communicate()
    except asyncio.CancelledError:
        if process.returncode is None:
            process.kill()
        raise
    if process.returncode != 0:
        logger.error(f"Command exited with status {process.returncode}: {command}")
        raise CommandError(command, process.returncode, stderr.decode(errors="replace").strip())
    return stdout.decode(errors="replace")


async def run_command(command: str) -> str:
    """Run a shell command once and return its stdout.

    Args:
        command: Literal shell command line

    Returns:
        Decoded standard output

    Raises:
        CommandError: If the command cannot be spawned or exits non-zero
    """
    logger.debug(f"Running command: {command}")
    try:
        process = await asyncio.create_subprocess_shell(
            command,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise CommandError(command, None, str(e)) from e
    return await _communicate(command, process)


async def run_exec(program: str, *args: str) -> str:
    """Run a program with an argument vector, bypassing the shell.

    Raises:
        CommandError: If the program cannot be spawned or exits non-zero
    """
    command = " ".join([program, *args])
    logger.debug(f"Running program: {program}")
    try:
        process = await asyncio.create_subprocess_exec(
            program,
            *args,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        raise CommandError(command, None, str(e)) from e
    return await _communicate(command, process)
