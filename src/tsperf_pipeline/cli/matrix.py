import os

import click

from ..config import BASELINE_MACHINE_ENV, is_true_literal, load_env
from ..errors import UnknownPresetError
from ..matrix import generate_matrix
from ..presets import preset_names
from ..reporting import AzurePipelinesReporter, emit_matrix
from . import configure_logging


@click.command()
@click.option(
    "--preset",
    "preset_name",
    default=None,
    help=f"Preset to expand ({', '.join(preset_names())})",
)
@click.option(
    "--baselining/--no-baselining",
    default=None,
    help=f"Run all suites as one job (default: from {BASELINE_MACHINE_ENV})",
)
def main(preset_name: str | None, baselining: bool | None) -> None:
    """Print the benchmark job matrix and merge flags for the CI pipeline."""
    load_env()
    configure_logging()

    if baselining is None:
        baselining = is_true_literal(os.getenv(BASELINE_MACHINE_ENV))

    try:
        result = generate_matrix(preset_name, baselining)
    except UnknownPresetError as exc:
        raise click.ClickException(str(exc)) from exc

    emit_matrix(result, AzurePipelinesReporter())


if __name__ == "__main__":
    main()
