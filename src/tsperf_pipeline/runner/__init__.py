"""Benchmark runner: turns job environment and flags into one ts-perf call.

Modules:
    - commands: install-hosts and benchmark-* operations
    - flags: shared ts-perf argument assembly
    - options: BenchmarkOptions flag bag
    - process: child process spawning
"""

from .commands import COMMANDS, run_command
from .flags import build_common_args, create_flags
from .options import BenchmarkOptions

__all__ = [
    "COMMANDS",
    "BenchmarkOptions",
    "build_common_args",
    "create_flags",
    "run_command",
]
