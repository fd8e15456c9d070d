from dataclasses import dataclass

from ..config import check_non_empty


@dataclass(frozen=True)
class BenchmarkOptions:
    """Command-line flags shared by the ``benchmark-*`` subcommands."""

    built_dir: str | None = None
    save: str | None = None
    save_blob: str | None = None
    baseline: str | None = None
    load: str | None = None
    baseline_name: str | None = None
    benchmark_name: str | None = None
    format: str | None = None
    quiet: bool = False

    def require_built_dir(self) -> str:
        return check_non_empty(self.built_dir, "Expected non-empty --builtDir")
