import logging
import os
from collections.abc import Awaitable, Callable
from types import MappingProxyType

from ..config import RunnerSettings
from ..errors import UnknownCommandError
from ..presets import Suite
from .flags import build_common_args, create_flags
from .options import BenchmarkOptions
from .process import run_tool

logger = logging.getLogger(__name__)

Command = Callable[[BenchmarkOptions, RunnerSettings], Awaitable[None]]


def _tsperf(settings: RunnerSettings, *args: str) -> list[str]:
    return [settings.node_exe, settings.tsperf_exe, *args]


async def install_hosts(options: BenchmarkOptions, settings: RunnerSettings) -> None:
    """Install every host named by any of the three suites."""
    host_args = create_flags("host", [os.getenv(suite.hosts_var) for suite in Suite])
    await run_tool(_tsperf(settings, "host", "install", *host_args))


async def benchmark_tsc(options: BenchmarkOptions, settings: RunnerSettings) -> None:
    built_dir = options.require_built_dir()
    tsc_path = os.path.join(built_dir, "tsc.js")

    tsperf_args = await build_common_args(Suite.TSC, options, settings)
    await run_tool(_tsperf(settings, "benchmark", "tsc", "--tsc", tsc_path, *tsperf_args))


async def benchmark_tsserver(options: BenchmarkOptions, settings: RunnerSettings) -> None:
    built_dir = options.require_built_dir()
    tsserver_path = os.path.join(built_dir, "tsserver.js")

    tsperf_args = await build_common_args(Suite.TSSERVER, options, settings)
    await run_tool(
        _tsperf(settings, "benchmark", "tsserver", "--tsserver", tsserver_path, *tsperf_args)
    )


async def benchmark_startup(options: BenchmarkOptions, settings: RunnerSettings) -> None:
    built_dir = options.require_built_dir()

    tsperf_args = await build_common_args(Suite.STARTUP, options, settings)
    await run_tool(
        _tsperf(settings, "benchmark", "startup", "--builtDir", built_dir, *tsperf_args)
    )


COMMANDS: MappingProxyType[str, Command] = MappingProxyType(
    {
        "install-hosts": install_hosts,
        "benchmark-tsc": benchmark_tsc,
        "benchmark-tsserver": benchmark_tsserver,
        "benchmark-startup": benchmark_startup,
    }
)


async def run_command(name: str, options: BenchmarkOptions, settings: RunnerSettings) -> None:
    command = COMMANDS.get(name)
    if command is None:
        raise UnknownCommandError(name)
    logger.debug("Running %s", name)
    await command(options, settings)
