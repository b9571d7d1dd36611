"""Build error taxonomy.

Errors are plain values carried inside ``Err``. The kind tells the caller
which stage failed; the message carries the full detail that was logged
where the failure was detected.
"""

from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Stage that produced a build error."""

    CONFIG_LOAD = "config-load"  # unreadable/invalid config or metadata
    LINT = "lint"
    DIRECTORY = "directory"  # destination neither exists nor can be created
    PRODUCER = "producer"  # bundler, minifier, CSS, HTML or copy failure


@dataclass(frozen=True, slots=True)
class BuildError:
    """A failure raised by one build stage.

    Attributes:
        kind: The stage category that failed.
        message: Human-readable detail.
        task: Name of the task being built, if any.
    """

    kind: ErrorKind
    message: str
    task: str | None = None

    def __str__(self) -> str:
        prefix = f"[{self.kind.value}]"
        if self.task:
            prefix = f"{prefix} task '{self.task}':"
        return f"{prefix} {self.message}"


def config_error(message: str) -> BuildError:
    return BuildError(ErrorKind.CONFIG_LOAD, message)


def lint_error(message: str) -> BuildError:
    return BuildError(ErrorKind.LINT, message)


def directory_error(message: str, task: str | None = None) -> BuildError:
    return BuildError(ErrorKind.DIRECTORY, message, task)


def producer_error(message: str, task: str | None = None) -> BuildError:
    return BuildError(ErrorKind.PRODUCER, message, task)
