"""Application layer for appbuilder.

Orchestrates a build: the controller runs the top-level sequence and the
pipeline builds one task at a time, both driving the external tools only
through the interfaces in ``ports``.

Example usage:
    >>> from appbuilder.application import BuildRunController
    >>> controller = BuildRunController(settings, "debug", linter, stylelinter, bundler, minifier)
    >>> exit_status = controller.run()
"""

from appbuilder.application.controller import EXIT_ERROR, EXIT_OK, BuildRunController
from appbuilder.application.pipeline import TaskPipeline
from appbuilder.application.ports import (
    Bundler,
    JsLinter,
    LintReport,
    Minifier,
    StyleLinter,
)
from appbuilder.application.reporting import (
    BuildReporter,
    LoggingReporter,
    describe_artifact,
    format_elapsed,
)

__all__ = [
    # Orchestration
    "BuildRunController",
    "TaskPipeline",
    "EXIT_OK",
    "EXIT_ERROR",
    # Ports
    "JsLinter",
    "StyleLinter",
    "Bundler",
    "Minifier",
    "LintReport",
    # Reporting
    "BuildReporter",
    "LoggingReporter",
    "describe_artifact",
    "format_elapsed",
]
