import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

import click

from .matrix import MatrixResult
from .presets import Suite

MATRIX_OUTPUT = "MATRIX"


def format_output_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Mapping):
        return json.dumps(value, separators=(",", ":"))
    return str(value)


class OrchestratorReporter(ABC):
    """Publishes named output variables to the CI system."""

    @abstractmethod
    def set_output(self, name: str, value: Any) -> None: ...

    def echo(self, text: str) -> None:
        click.echo(text)


class AzurePipelinesReporter(OrchestratorReporter):
    def set_output(self, name: str, value: Any) -> None:
        self.echo(
            f"##vso[task.setvariable variable={name};isOutput=true]{format_output_value(value)}"
        )


def emit_matrix(result: MatrixResult, reporter: OrchestratorReporter) -> None:
    reporter.echo(json.dumps(result.matrix, indent=4))
    reporter.set_output(MATRIX_OUTPUT, result.matrix)
    for suite in Suite:
        reporter.set_output(suite.merge_var, result.merge_flag(suite))
