__version__ = "0.1.0"

from .matrix import MatrixResult, generate_matrix, sanitize_job_name
from .presets import PRESETS, Preset, Suite, SuiteSpec, get_preset
from .runner import BenchmarkOptions, create_flags, run_command

__all__ = [
    "__version__",
    "PRESETS",
    "BenchmarkOptions",
    "MatrixResult",
    "Preset",
    "Suite",
    "SuiteSpec",
    "create_flags",
    "generate_matrix",
    "get_preset",
    "run_command",
    "sanitize_job_name",
]
