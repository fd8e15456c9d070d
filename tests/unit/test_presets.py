import pytest

from tsperf_pipeline.errors import UnknownPresetError
from tsperf_pipeline.presets import (
    NODE_16,
    PRESETS,
    Preset,
    Suite,
    SuiteSpec,
    get_preset,
    preset_names,
)


def test_preset_names_are_known() -> None:
    assert preset_names() == ["full", "regular", "tsc-only"]


def test_get_preset_unknown_raises() -> None:
    with pytest.raises(UnknownPresetError, match="Unknown preset: nightly"):
        get_preset("nightly")


def test_get_preset_none_raises() -> None:
    with pytest.raises(UnknownPresetError):
        get_preset(None)


def test_preset_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        PRESETS["custom"] = Preset()  # type: ignore[index]


def test_suites_yield_present_suites_in_order() -> None:
    suites = [suite for suite, _ in get_preset("full").suites()]
    assert suites == [Suite.TSC, Suite.TSSERVER, Suite.STARTUP]

    assert [suite for suite, _ in get_preset("tsc-only").suites()] == [Suite.TSC]


def test_suite_env_var_names() -> None:
    assert Suite.TSSERVER.enabled_var == "TSPERF_TSSERVER"
    assert Suite.TSSERVER.hosts_var == "TSPERF_TSSERVER_HOSTS"
    assert Suite.TSSERVER.scenarios_var == "TSPERF_TSSERVER_SCENARIOS"
    assert Suite.TSSERVER.iterations_var == "TSPERF_TSSERVER_ITERATIONS"
    assert Suite.STARTUP.merge_var == "TSPERF_MERGE_STARTUP"


class TestSuiteSpecValidation:
    def test_rejects_non_positive_iterations(self) -> None:
        with pytest.raises(ValueError, match="iterations"):
            SuiteSpec(hosts=(NODE_16,), iterations=0, scenarios=("Angular",))

    def test_rejects_empty_scenarios(self) -> None:
        with pytest.raises(ValueError, match="empty"):
            SuiteSpec(hosts=(NODE_16,), iterations=1, scenarios=())

    def test_rejects_duplicate_scenarios(self) -> None:
        with pytest.raises(ValueError, match="unique"):
            SuiteSpec(hosts=(NODE_16,), iterations=1, scenarios=("Angular", "Angular"))
