import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest

from tsperf_pipeline.config import RunnerSettings
from tsperf_pipeline.repo import RepoInfo

_MANAGED_ENV_PREFIXES = ("TSPERF_", "USE_BASELINE_MACHINE")


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Strip pipeline variables and keep .env files out of every test."""
    for name in list(os.environ):
        if name.startswith(_MANAGED_ENV_PREFIXES):
            monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("tsperf_pipeline.config.compat.load_dotenv", lambda *a, **k: False)


@pytest.fixture
def settings() -> RunnerSettings:
    return RunnerSettings(tsperf_exe="/opt/ts-perf/bin/ts-perf")


@pytest.fixture
def repo_info() -> RepoInfo:
    return RepoInfo(
        date="2023-08-12T17:30:05.000Z",
        branch="main",
        commit="0123456789abcdef0123456789abcdef01234567",
        commit_short="0123456",
        timestamp_dir="2023/08/12/17-30-05",
    )


@pytest.fixture
def mock_repo_info(repo_info: RepoInfo) -> Iterator[AsyncMock]:
    with patch(
        "tsperf_pipeline.runner.flags.get_repo_info",
        new=AsyncMock(return_value=repo_info),
    ) as mock:
        yield mock


@pytest.fixture
def mock_run_tool() -> Iterator[AsyncMock]:
    with patch("tsperf_pipeline.runner.commands.run_tool", new=AsyncMock()) as mock:
        yield mock


@pytest.fixture
def save_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Environment of a fan-out tsc job asked to --save its results."""
    monkeypatch.setenv("TSPERF_TSC_HOSTS", "node@16.17.1")
    monkeypatch.setenv("TSPERF_TSC_SCENARIOS", "Angular")
    monkeypatch.setenv("TSPERF_TSC_ITERATIONS", "6")
    monkeypatch.setenv("TSPERF_AGENT_BENCHMARK_CPU", "4")


@pytest.fixture
def built_dir(tmp_path: Path) -> Path:
    built = tmp_path / "built" / "local"
    built.mkdir(parents=True)
    return built
