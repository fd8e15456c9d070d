import logging
import re
from dataclasses import dataclass, field
from typing import Any

from .presets import Preset, Suite, SuiteSpec, get_preset

logger = logging.getLogger(__name__)

JOB_NAME_VAR = "TSPERF_JOB_NAME"
BASELINE_JOB_NAME = "all"

_UNSAFE_JOB_NAME_CHARS = re.compile(r"[^a-zA-Z0-9_]")

JobParams = dict[str, Any]


@dataclass(frozen=True)
class MatrixResult:
    matrix: dict[str, JobParams] = field(default_factory=dict)
    merge_tsc: bool = False
    merge_tsserver: bool = False
    merge_startup: bool = False

    def merge_flag(self, suite: Suite) -> bool:
        merge: bool = getattr(self, f"merge_{suite.value}")
        return merge


def sanitize_job_name(name: str) -> str:
    return _UNSAFE_JOB_NAME_CHARS.sub("_", name)


def _baseline_matrix(preset: Preset) -> dict[str, JobParams]:
    # A single job on the baseline machine is much faster than fanning out.
    params: JobParams = {JOB_NAME_VAR: BASELINE_JOB_NAME}
    for suite in Suite:
        spec = preset.get(suite)
        params[suite.enabled_var] = spec is not None
        if spec is None:
            continue
        params[suite.hosts_var] = ",".join(spec.hosts)
        params[suite.scenarios_var] = ",".join(spec.scenarios)
        params[suite.iterations_var] = spec.iterations
    return {BASELINE_JOB_NAME: params}


def _fan_out_jobs(suite: Suite, spec: SuiteSpec) -> dict[str, JobParams]:
    jobs: dict[str, JobParams] = {}
    for host in spec.hosts:
        for scenario in spec.scenarios:
            job_name = sanitize_job_name(f"{suite.value}_{host}_{scenario}")
            # Duplicate host/scenario pairs collapse onto one name; last one wins.
            jobs[job_name] = {
                JOB_NAME_VAR: job_name,
                suite.enabled_var: True,
                suite.hosts_var: host,
                suite.scenarios_var: scenario,
                suite.iterations_var: spec.iterations,
            }
    return jobs


def generate_matrix(preset_name: str | None, baselining: bool) -> MatrixResult:
    """Expand a named preset into CI jobs.

    Baselining runs every suite in one job named ``all``. Otherwise each
    host/scenario pair of each suite gets its own job so the work spreads
    across as many agents as possible.

    Args:
        preset_name: Key in the preset table.
        baselining: Whether the run targets the dedicated baseline machine.

    Returns:
        The job matrix and one merge flag per suite. A merge flag is set
        whenever the suite is part of the preset, since its results are
        always reduced into a single suite-level report downstream.

    Raises:
        UnknownPresetError: If ``preset_name`` is not a known preset.
    """
    preset = get_preset(preset_name)

    if baselining:
        matrix = _baseline_matrix(preset)
    else:
        matrix = {}
        for suite, spec in preset.suites():
            matrix.update(_fan_out_jobs(suite, spec))

    present = {suite for suite, _ in preset.suites()}
    logger.info(
        "Preset %s expanded to %d job(s) (baselining=%s)", preset_name, len(matrix), baselining
    )
    return MatrixResult(
        matrix=matrix,
        merge_tsc=Suite.TSC in present,
        merge_tsserver=Suite.TSSERVER in present,
        merge_startup=Suite.STARTUP in present,
    )
