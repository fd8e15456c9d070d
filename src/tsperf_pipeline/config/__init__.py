"""Configuration module for tsperf-pipeline."""

from .compat import check_non_empty, get_non_empty_env, is_true_literal, load_env
from .settings import (
    BASELINE_MACHINE_ENV,
    REPOSITORY_TYPE,
    REPOSITORY_URL,
    RunnerSettings,
)

__all__ = [
    # Settings
    "BASELINE_MACHINE_ENV",
    "REPOSITORY_TYPE",
    "REPOSITORY_URL",
    "RunnerSettings",
    # Environment helpers
    "check_non_empty",
    "get_non_empty_env",
    "is_true_literal",
    "load_env",
]
