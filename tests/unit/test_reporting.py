import json
from typing import Any

import pytest

from tsperf_pipeline.matrix import MatrixResult, generate_matrix
from tsperf_pipeline.reporting import (
    AzurePipelinesReporter,
    OrchestratorReporter,
    emit_matrix,
    format_output_value,
)


class _RecordingReporter(OrchestratorReporter):
    def __init__(self) -> None:
        self.lines: list[str] = []
        self.outputs: list[tuple[str, Any]] = []

    def echo(self, text: str) -> None:
        self.lines.append(text)

    def set_output(self, name: str, value: Any) -> None:
        self.outputs.append((name, value))


def test_format_output_value() -> None:
    assert format_output_value(True) == "true"
    assert format_output_value(False) == "false"
    assert format_output_value({"a": {"b": 1}}) == '{"a":{"b":1}}'
    assert format_output_value(6) == "6"


def test_azure_reporter_writes_setvariable_directive(capsys) -> None:
    AzurePipelinesReporter().set_output("TSPERF_MERGE_TSC", True)

    out = capsys.readouterr().out
    assert out == "##vso[task.setvariable variable=TSPERF_MERGE_TSC;isOutput=true]true\n"


def test_emit_matrix_order_and_values() -> None:
    result = generate_matrix("tsc-only", baselining=True)
    reporter = _RecordingReporter()

    emit_matrix(result, reporter)

    assert json.loads(reporter.lines[0]) == result.matrix
    assert reporter.lines[0].startswith("{\n    ")
    assert reporter.outputs == [
        ("MATRIX", result.matrix),
        ("TSPERF_MERGE_TSC", True),
        ("TSPERF_MERGE_TSSERVER", False),
        ("TSPERF_MERGE_STARTUP", False),
    ]


def test_emit_empty_matrix(capsys) -> None:
    emit_matrix(MatrixResult(), AzurePipelinesReporter())

    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "{}",
        "##vso[task.setvariable variable=MATRIX;isOutput=true]{}",
        "##vso[task.setvariable variable=TSPERF_MERGE_TSC;isOutput=true]false",
        "##vso[task.setvariable variable=TSPERF_MERGE_TSSERVER;isOutput=true]false",
        "##vso[task.setvariable variable=TSPERF_MERGE_STARTUP;isOutput=true]false",
    ]


def test_reporter_without_set_output_cannot_be_created() -> None:
    class _Incomplete(OrchestratorReporter):
        pass

    with pytest.raises(TypeError):
        _Incomplete()  # type: ignore[abstract]
