import logging
import os
from collections.abc import Iterable
from pathlib import Path

from ..config import (
    REPOSITORY_TYPE,
    REPOSITORY_URL,
    RunnerSettings,
    get_non_empty_env,
    is_true_literal,
)
from ..config.settings import (
    AGENT_CPU_ENV,
    AZURE_STORAGE_CONNECTION_STRING_ENV,
    BLOB_LATEST_ENV,
)
from ..presets import Suite
from ..repo import get_repo_info
from .options import BenchmarkOptions

logger = logging.getLogger(__name__)


def create_flags(name: str, values: Iterable[str | None]) -> list[str]:
    """Turn comma-separated lists into repeated ``--name value`` pairs.

    Values are split on commas and deduplicated across all inputs, keeping the
    position of each value's first occurrence.
    """
    unique: dict[str, None] = {}
    for value in values:
        if value is None:
            continue
        for item in value.split(","):
            unique.setdefault(item, None)

    args: list[str] = []
    for item in unique:
        args.extend([f"--{name}", item])
    return args


def _passthrough_args(options: BenchmarkOptions) -> list[str]:
    args: list[str] = []
    for flag, value in (
        ("--baseline", options.baseline),
        ("--load", options.load),
        ("--baselineName", options.baseline_name),
        ("--benchmarkName", options.benchmark_name),
        ("--format", options.format),
    ):
        if value:
            args.extend([flag, value])
    if options.quiet:
        args.append("--quiet")
    return args


async def _save_args(suite: Suite, options: BenchmarkOptions, save: str) -> list[str]:
    Path(os.path.dirname(save) or ".").mkdir(parents=True, exist_ok=True)

    hosts = get_non_empty_env(suite.hosts_var)
    scenarios = get_non_empty_env(suite.scenarios_var)
    iterations = get_non_empty_env(suite.iterations_var)
    cpus = get_non_empty_env(AGENT_CPU_ENV)
    info = await get_repo_info(options.built_dir or ".")

    args = ["--save", save]
    args.extend(create_flags("host", [hosts]))
    args.extend(create_flags("scenario", [scenarios]))
    args.extend(["--iterations", iterations])
    args.extend(["--cpus", cpus])

    args.extend(["--date", info.date])
    args.extend(["--repositoryType", REPOSITORY_TYPE])
    args.extend(["--repositoryUrl", REPOSITORY_URL])
    args.extend(["--repositoryBranch", info.branch])
    args.extend(["--repositoryCommit", info.commit])
    args.extend(["--repositoryDate", info.date])
    return args


async def _save_blob_args(options: BenchmarkOptions, save_blob: str) -> list[str]:
    info = await get_repo_info(options.built_dir or ".")
    get_non_empty_env(AZURE_STORAGE_CONNECTION_STRING_ENV)

    args = [
        "--save",
        f"blob:{info.branch}/{info.timestamp_dir}/{info.commit_short}.{save_blob}.benchmark",
    ]
    if is_true_literal(get_non_empty_env(BLOB_LATEST_ENV)):
        args.extend(["--save", f"blob:{info.branch}/latest.{save_blob}.benchmark"])
    return args


async def build_common_args(
    suite: Suite,
    options: BenchmarkOptions,
    settings: RunnerSettings,
) -> list[str]:
    """Assemble the ts-perf flags shared by every benchmark subcommand.

    ``--save`` records a local result with full provenance and takes
    precedence over ``--saveBlob``; the comparison and formatting flags only
    apply when no local save is requested.

    Raises:
        ConfigurationError: If a value required by the chosen save mode is missing.
        RepoInfoError: If git provenance cannot be collected.
    """
    args: list[str] = []
    if settings.scenario_config_dir:
        args.extend(["--scenarioConfigDir", settings.scenario_config_dir])

    if options.save:
        logger.info("Saving %s results to %s", suite.value, options.save)
        args.extend(await _save_args(suite, options, options.save))
        return args

    if options.save_blob:
        logger.info("Saving %s results to blob storage (%s)", suite.value, options.save_blob)
        args.extend(await _save_blob_args(options, options.save_blob))

    args.extend(_passthrough_args(options))
    return args
