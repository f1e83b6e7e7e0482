"""macOS executors behind the ``systemInfo`` and ``sendNotification`` tools."""

import asyncio

from toolservers.core.errors import UnknownCategoryError
from toolservers.core.logging import get_logger
from toolservers.executors.base import CommandRunner, ExecRunner, run_command, run_exec
from toolservers.tools.models import (
    AllSystemInfo,
    CpuInfo,
    DiskInfo,
    MemoryInfo,
    NetworkInfo,
    NotificationOptions,
    NotificationResult,
    SystemInfoOptions,
    SystemInfoResult,
)

logger = get_logger(__name__)

NETWORK_INTERFACE = "en0"

COMMANDS = {
    "cpu": "sysctl -n machdep.cpu.brand_string && sysctl -n hw.ncpu",
    "memory": "sysctl -n hw.memsize && vm_stat",
    "disk": "df -h /",
    "network": f"ifconfig {NETWORK_INTERFACE}",
}

BYTES_PER_GB = 1024 * 1024 * 1024

# Title, message and sound name arrive as argv items; they are never spliced
# into the script source.
NOTIFICATION_SCRIPT = (
    "on run argv",
    "display notification (item 2 of argv) with title (item 1 of argv) "
    "sound name (item 3 of argv)",
    "end run",
)


def _parse_int(text: str) -> int | None:
    try:
        return int(text.strip())
    except ValueError:
        return None


def format_gigabytes(total_bytes: int) -> str:
    """Format a byte count as gigabytes with two decimals, e.g. ``16.00 GB``."""
    return f"{total_bytes / BYTES_PER_GB:.2f} GB"


class SystemInfoExecutor:
    """Reads system information by running fixed OS commands."""

    def __init__(self, runner: CommandRunner = run_command):
        self._run = runner

    async def execute(self, args: SystemInfoOptions) -> SystemInfoResult:
        return await self.get_system_info(args.category)

    async def get_system_info(self, category: str) -> SystemInfoResult:
        logger.info(f"Collecting system info: {category}")
        if category == "cpu":
            return await self._cpu()
        if category == "memory":
            return await self._memory()
        if category == "disk":
            return await self._disk()
        if category == "network":
            return await self._network()
        if category == "all":
            return await self._all()
        raise UnknownCategoryError(category)

    async def _cpu(self) -> CpuInfo:
        stdout = await self._run(COMMANDS["cpu"])
        lines = stdout.split("\n")
        model = lines[0]
        cores = _parse_int(lines[1]) if len(lines) > 1 else None
        return {"model": model, "cores": cores}

    async def _memory(self) -> MemoryInfo:
        stdout = await self._run(COMMANDS["memory"])
        total_bytes, _, vm_stat = stdout.partition("\n")
        parsed = _parse_int(total_bytes)
        total = format_gigabytes(parsed) if parsed is not None else "NaN GB"
        return {"total": total, "vmStat": vm_stat}

    async def _disk(self) -> DiskInfo:
        return {"diskInfo": await self._run(COMMANDS["disk"])}

    async def _network(self) -> NetworkInfo:
        return {"networkInfo": await self._run(COMMANDS["network"])}

    async def _all(self) -> AllSystemInfo:
        tasks = [
            asyncio.ensure_future(self._cpu()),
            asyncio.ensure_future(self._memory()),
            asyncio.ensure_future(self._disk()),
            asyncio.ensure_future(self._network()),
        ]
        try:
            cpu, memory, disk, network = await asyncio.gather(*tasks)
        except BaseException:
            # First failure wins; queries still in flight are cancelled
            for task in tasks:
                task.cancel()
            raise
        return {"cpu": cpu, "memory": memory, "disk": disk, "network": network}


class NotificationExecutor:
    """Displays a native notification through ``osascript``."""

    def __init__(self, runner: ExecRunner = run_exec):
        self._run = runner

    async def execute(self, args: NotificationOptions) -> NotificationResult:
        sound_name = "default" if args.sound else "none"
        script_args: list[str] = []
        for line in NOTIFICATION_SCRIPT:
            script_args.extend(["-e", line])
        # "--" ends osascript option parsing so a dash-leading title stays an argv item
        await self._run(
            "osascript", *script_args, "--", args.title, args.message, sound_name
        )
        logger.info("Notification sent")
        return {"success": True, "message": "Notification sent"}
