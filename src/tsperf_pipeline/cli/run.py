import asyncio
import logging
from collections.abc import Callable
from typing import Any

import click

from ..config import RunnerSettings, load_env
from ..errors import ConfigurationError, RepoInfoError, ToolProcessError, ToolStartError
from ..runner import BenchmarkOptions, run_command
from . import configure_logging

logger = logging.getLogger(__name__)


def _benchmark_options(func: Callable[..., Any]) -> Callable[..., Any]:
    decorators = [
        click.option(
            "--builtDir", "built_dir", default=None, help="Directory with tsc.js and tsserver.js"
        ),
        click.option("--save", default=None, help="Save results to this local file"),
        click.option(
            "--saveBlob", "save_blob", default=None, help="Save results to blob storage as NAME"
        ),
        click.option("--baseline", default=None, help="Baseline results file to compare against"),
        click.option("--load", default=None, help="Load saved results instead of running"),
        click.option("--baselineName", "baseline_name", default=None, help="Baseline label"),
        click.option(
            "--benchmarkName", "benchmark_name", default=None, help="Label for this benchmark"
        ),
        click.option("--format", "output_format", default=None, help="ts-perf output format"),
        click.option("--quiet", is_flag=True, help="Reduce ts-perf output"),
    ]
    for decorator in reversed(decorators):
        func = decorator(func)
    return func


def _execute(ctx: click.Context, options: BenchmarkOptions) -> None:
    settings: RunnerSettings = ctx.obj
    name = ctx.info_name or ""
    try:
        asyncio.run(run_command(name, options, settings))
    except ToolProcessError as exc:
        logger.error("%s failed: %s", name, exc)
        raise SystemExit(exc.exit_status) from exc
    except (ConfigurationError, RepoInfoError, ToolStartError) as exc:
        raise click.ClickException(str(exc)) from exc


def _run_benchmark(ctx: click.Context, **kwargs: Any) -> None:
    kwargs["format"] = kwargs.pop("output_format")
    _execute(ctx, BenchmarkOptions(**kwargs))


@click.group()
@click.pass_context
def main(ctx: click.Context) -> None:
    """Run ts-perf for a single CI benchmark job."""
    load_env()
    configure_logging()
    try:
        ctx.obj = RunnerSettings.from_env()
    except ConfigurationError as exc:
        raise click.ClickException(str(exc)) from exc


@main.command("install-hosts")
@click.pass_context
def install_hosts(ctx: click.Context) -> None:
    """Install the runtime hosts named by TSPERF_*_HOSTS."""
    _execute(ctx, BenchmarkOptions())


@main.command("benchmark-tsc")
@_benchmark_options
@click.pass_context
def benchmark_tsc(ctx: click.Context, **kwargs: Any) -> None:
    """Benchmark tsc.js from --builtDir."""
    _run_benchmark(ctx, **kwargs)


@main.command("benchmark-tsserver")
@_benchmark_options
@click.pass_context
def benchmark_tsserver(ctx: click.Context, **kwargs: Any) -> None:
    """Benchmark tsserver.js from --builtDir."""
    _run_benchmark(ctx, **kwargs)


@main.command("benchmark-startup")
@_benchmark_options
@click.pass_context
def benchmark_startup(ctx: click.Context, **kwargs: Any) -> None:
    """Benchmark startup time of the build in --builtDir."""
    _run_benchmark(ctx, **kwargs)


if __name__ == "__main__":
    main()
