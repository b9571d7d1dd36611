"""Progress reporting for a build run.

The controller and pipeline announce what they are doing through a
``BuildReporter``. The default implementation writes to the logging
system; the command line uses a colored console reporter instead.
"""

import abc
import logging
from collections.abc import Sequence

from appbuilder.domain.build.integrity import integrity_attribute
from appbuilder.domain.build.models import Artifact, BuildStatus, ProjectMetadata

logger = logging.getLogger(__name__)


def format_elapsed(nanoseconds: int) -> str:
    """Format a duration as seconds with millisecond precision.

    Examples:
        >>> format_elapsed(2_045_999_999)
        '2.045'
        >>> format_elapsed(7_000_000)
        '0.007'
    """
    seconds, remainder = divmod(max(nanoseconds, 0), 1_000_000_000)
    return f"{seconds}.{remainder // 1_000_000:03d}"


def describe_artifact(artifact: Artifact) -> str:
    """One report line for a written file, e.g. ``js dist/app.min.js sha384-...``."""
    line = f"{artifact.kind.value:<4} {artifact.path}"
    if artifact.integrity:
        line = f"{line} {integrity_attribute(artifact.integrity)}"
    return line


class BuildReporter(abc.ABC):
    @abc.abstractmethod
    def start(self, metadata: ProjectMetadata) -> None:
        """Announce the start of a build."""

    @abc.abstractmethod
    def step(self, message: str, level: int = 0) -> None:
        """Announce one step; ``level`` 1 marks a step inside a task."""

    @abc.abstractmethod
    def output(self, text: str) -> None:
        """Relay a tool's report verbatim."""

    @abc.abstractmethod
    def finish(
        self,
        metadata: ProjectMetadata | None,
        status: BuildStatus,
        elapsed: str,
        artifacts: Sequence[Artifact] = (),
    ) -> None:
        """Announce the outcome of the build and the files it wrote."""


class LoggingReporter(BuildReporter):
    """Reporter that sends everything to the module logger."""

    def start(self, metadata: ProjectMetadata) -> None:
        logger.info(f"Start build of {metadata.name} - {metadata.version}")

    def step(self, message: str, level: int = 0) -> None:
        logger.info(f"{'  ' * level}{message}")

    def output(self, text: str) -> None:
        if text.strip():
            logger.info(text.rstrip())

    def finish(
        self,
        metadata: ProjectMetadata | None,
        status: BuildStatus,
        elapsed: str,
        artifacts: Sequence[Artifact] = (),
    ) -> None:
        if status is BuildStatus.OK and metadata is not None:
            for artifact in artifacts:
                logger.info(f"  {describe_artifact(artifact)}")
            logger.info(
                f"{metadata.name} - {metadata.version} - build {metadata.build_number}"
                f" done in {elapsed} seconds"
            )
        else:
            logger.error(f"Build canceled after {elapsed} seconds - errors occurred")
