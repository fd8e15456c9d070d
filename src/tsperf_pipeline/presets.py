"""Fixed benchmark presets selected by name in CI.

Keep the preset names in sync with the TSPERF_PRESET pipeline parameter.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from .errors import UnknownPresetError


class Suite(str, Enum):
    TSC = "tsc"
    TSSERVER = "tsserver"
    STARTUP = "startup"

    @property
    def enabled_var(self) -> str:
        return f"TSPERF_{self.name}"

    @property
    def hosts_var(self) -> str:
        return f"TSPERF_{self.name}_HOSTS"

    @property
    def scenarios_var(self) -> str:
        return f"TSPERF_{self.name}_SCENARIOS"

    @property
    def iterations_var(self) -> str:
        return f"TSPERF_{self.name}_ITERATIONS"

    @property
    def merge_var(self) -> str:
        return f"TSPERF_MERGE_{self.name}"


@dataclass(frozen=True)
class SuiteSpec:
    hosts: tuple[str, ...]
    iterations: int
    scenarios: tuple[str, ...]

    def __post_init__(self) -> None:
        if self.iterations <= 0:
            raise ValueError(f"iterations must be positive, got {self.iterations}")
        if not self.scenarios:
            raise ValueError("scenarios must not be empty")
        if len(set(self.scenarios)) != len(self.scenarios):
            raise ValueError(f"scenarios must be unique: {self.scenarios}")


@dataclass(frozen=True)
class Preset:
    tsc: SuiteSpec | None = None
    tsserver: SuiteSpec | None = None
    startup: SuiteSpec | None = None

    def get(self, suite: Suite) -> SuiteSpec | None:
        spec: SuiteSpec | None = getattr(self, suite.value)
        return spec

    def suites(self) -> Iterator[tuple[Suite, SuiteSpec]]:
        """Yield present suites in tsc, tsserver, startup order."""
        for suite in Suite:
            spec = self.get(suite)
            if spec is not None:
                yield suite, spec


DEFAULT_ITERATIONS = 6

# Arbitrary; latest release as of 2023-08-12.
NODE_20 = "node@20.5.1"
# Match the Electron runtimes bundled with recent VS Code releases.
NODE_18 = "node@18.15.0"
NODE_16 = "node@16.17.1"

ALL_TSC_SCENARIOS = ("Angular", "Monaco", "TFS", "material-ui", "Compiler-Unions", "xstate")
ALL_TSSERVER_SCENARIOS = ("Compiler-UnionsTSServer", "CompilerTSServer", "xstateTSServer")
ALL_STARTUP_SCENARIOS = (
    "tsc-startup",
    "tsserver-startup",
    "tsserverlibrary-startup",
    "typescript-startup",
)

_TSSERVER_NODE_16 = SuiteSpec(
    hosts=(NODE_16,), iterations=DEFAULT_ITERATIONS, scenarios=ALL_TSSERVER_SCENARIOS
)
_STARTUP_NODE_16 = SuiteSpec(
    hosts=(NODE_16,), iterations=DEFAULT_ITERATIONS, scenarios=ALL_STARTUP_SCENARIOS
)
_TSC_NODE_16 = SuiteSpec(
    hosts=(NODE_16,), iterations=DEFAULT_ITERATIONS, scenarios=ALL_TSC_SCENARIOS
)

PRESETS: MappingProxyType[str, Preset] = MappingProxyType(
    {
        "full": Preset(
            tsc=SuiteSpec(
                hosts=(NODE_20, NODE_18, NODE_16),
                iterations=DEFAULT_ITERATIONS,
                scenarios=ALL_TSC_SCENARIOS,
            ),
            tsserver=_TSSERVER_NODE_16,
            startup=_STARTUP_NODE_16,
        ),
        "regular": Preset(
            tsc=_TSC_NODE_16,
            tsserver=_TSSERVER_NODE_16,
            startup=_STARTUP_NODE_16,
        ),
        "tsc-only": Preset(tsc=_TSC_NODE_16),
    }
)


def preset_names() -> list[str]:
    return list(PRESETS)


def get_preset(name: str | None) -> Preset:
    preset = PRESETS.get(name) if name is not None else None
    if preset is None:
        raise UnknownPresetError(name)
    return preset
