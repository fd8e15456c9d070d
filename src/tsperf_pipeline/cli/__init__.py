"""CLI entry points.

Commands:
    - matrix: Expand a preset into the CI job matrix (tsperf-matrix)
    - run: Drive one ts-perf invocation for a CI job (tsperf-run)
"""

import logging
import os

from ..config.settings import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV


def configure_logging() -> None:
    """Send log records to stderr; stdout is reserved for CI directives."""
    log_level_str = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    log_level = getattr(logging, log_level_str, logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
    )
