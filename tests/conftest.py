"""Pytest configuration and fixtures."""

import pytest

from toolservers.core.errors import CommandError
from toolservers.executors.system import COMMANDS

CPU_OUTPUT = "Apple M2 Pro\n12\n"
MEMORY_OUTPUT = (
    "17179869184\n"
    "Mach Virtual Memory Statistics: (page size of 16384 bytes)\n"
    "Pages free:                               12345.\n"
    "Pages active:                            234567.\n"
)
DISK_OUTPUT = (
    "Filesystem       Size   Used  Avail Capacity  Mounted on\n"
    "/dev/disk3s1s1  460Gi   10Gi  300Gi     4%    /\n"
)
NETWORK_OUTPUT = (
    "en0: flags=8863<UP,BROADCAST,SMART,RUNNING,SIMPLEX,MULTICAST> mtu 1500\n"
    "\tinet 192.168.1.20 netmask 0xffffff00 broadcast 192.168.1.255\n"
)


class FakeRunner:
    """Command runner returning canned output per command line."""

    def __init__(self, outputs: dict[str, str], failing: set[str] | None = None):
        self.outputs = outputs
        self.failing = failing or set()
        self.calls: list[str] = []

    async def __call__(self, command: str) -> str:
        self.calls.append(command)
        if command in self.failing:
            raise CommandError(command, 1, "command not found")
        return self.outputs[command]


@pytest.fixture
def command_outputs():
    """Provide canned macOS command output keyed by command line."""
    return {
        COMMANDS["cpu"]: CPU_OUTPUT,
        COMMANDS["memory"]: MEMORY_OUTPUT,
        COMMANDS["disk"]: DISK_OUTPUT,
        COMMANDS["network"]: NETWORK_OUTPUT,
    }


@pytest.fixture
def fake_runner(command_outputs):
    """Provide a runner that succeeds for every known command."""
    return FakeRunner(command_outputs)


@pytest.fixture
def failing_runner(command_outputs):
    """Provide a factory for runners where the given categories fail."""

    def _make(*categories: str) -> FakeRunner:
        return FakeRunner(command_outputs, failing={COMMANDS[c] for c in categories})

    return _make
