import logging
import os
from dataclasses import dataclass

from .compat import get_non_empty_env

logger = logging.getLogger(__name__)

__all__ = [
    "LOG_LEVEL_ENV",
    "REPOSITORY_TYPE",
    "REPOSITORY_URL",
    "RunnerSettings",
]

# Logging
LOG_LEVEL_ENV = "TSPERF_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

# Matrix generator
BASELINE_MACHINE_ENV = "USE_BASELINE_MACHINE"

# Runner: tool location
TSPERF_EXE_ENV = "TSPERF_EXE"
NODE_EXE_ENV = "TSPERF_NODE"
DEFAULT_NODE_EXE = "node"

# Runner: per-run inputs
SCENARIO_CONFIG_DIR_ENV = "TSPERF_INTERNAL_SCENARIO_CONFIG_DIR"
AGENT_CPU_ENV = "TSPERF_AGENT_BENCHMARK_CPU"
# ts-perf reads the connection string itself; only presence is checked here
AZURE_STORAGE_CONNECTION_STRING_ENV = "TSPERF_AZURE_STORAGE_CONNECTION_STRING"
BLOB_LATEST_ENV = "TSPERF_BLOB_LATEST"

# Provenance recorded with saved results
REPOSITORY_TYPE = "git"
REPOSITORY_URL = "https://github.com/microsoft/TypeScript"


@dataclass(frozen=True)
class RunnerSettings:
    tsperf_exe: str
    node_exe: str = DEFAULT_NODE_EXE
    scenario_config_dir: str | None = None

    @classmethod
    def from_env(cls) -> "RunnerSettings":
        tsperf_exe = get_non_empty_env(TSPERF_EXE_ENV)
        node_exe = os.getenv(NODE_EXE_ENV, "").strip() or DEFAULT_NODE_EXE
        scenario_config_dir = os.getenv(SCENARIO_CONFIG_DIR_ENV) or None
        if scenario_config_dir:
            logger.debug("Using scenario config dir: %s", scenario_config_dir)

        return cls(
            tsperf_exe=tsperf_exe,
            node_exe=node_exe,
            scenario_config_dir=scenario_config_dir,
        )
