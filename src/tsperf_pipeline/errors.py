class TsPerfError(RuntimeError):
    """Base class for all tsperf-pipeline failures."""


class ConfigurationError(TsPerfError):
    """A required flag or environment value is missing or invalid."""


class UnknownPresetError(ConfigurationError):
    def __init__(self, name: str | None):
        super().__init__(f"Unknown preset: {name}")
        self.name = name


class UnknownCommandError(ConfigurationError):
    def __init__(self, name: str | None):
        super().__init__(f"Unknown subcommand {name}")
        self.name = name


class RepoInfoError(TsPerfError):
    """Structured error for failed git provenance lookups.

    Attributes:
        command: git command that failed.
    """

    def __init__(self, message: str, *, command: list[str] | None = None):
        super().__init__(message)
        self.command = command or []


class ToolProcessError(TsPerfError):
    """The external benchmarking tool exited with a non-zero status.

    Attributes:
        returncode: Exit status of the child process.
        command: Argument vector that was spawned.
    """

    def __init__(self, *, returncode: int, command: list[str]):
        super().__init__(f"{command[0]} exited with code {returncode}")
        self.returncode = returncode
        self.command = command

    @property
    def exit_status(self) -> int:
        """Shell-style status: a child killed by signal N maps to 128 + N."""
        if self.returncode < 0:
            return 128 - self.returncode
        return self.returncode


class ToolStartError(TsPerfError):
    """The external benchmarking tool could not be launched.

    Attributes:
        command: Argument vector that failed to start.
    """

    def __init__(self, message: str, *, command: list[str]):
        super().__init__(message)
        self.command = command
