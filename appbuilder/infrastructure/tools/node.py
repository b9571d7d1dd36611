"""Runner for node command-line tools.

Wraps ``subprocess.run`` with Result-based error handling. Tools are
started through a runner prefix (``npx`` by default) so that the versions
installed in the project's ``node_modules`` are used.
"""

import logging
import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path

from appbuilder.domain.shared import BuildError, Err, ErrorKind, Ok, Result

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToolOutput:
    """Captured output of a finished tool process."""

    returncode: int
    stdout: str
    stderr: str


class NodeTool:
    """One node CLI tool, e.g. ``eslint`` or ``rollup``.

    Example:
        rollup = NodeTool("rollup", runner="npx")
        result = rollup.run(["src/main.js", "--file", "tmp/app.js"])
        if isinstance(result, Ok) and result.value.returncode == 0:
            ...
    """

    def __init__(
        self,
        name: str,
        runner: str = "npx",
        cwd: Path | None = None,
        error_kind: ErrorKind = ErrorKind.PRODUCER,
    ) -> None:
        """Initialize the tool.

        Args:
            name: Executable name as understood by the runner.
            runner: Command prefix, split with shell rules; empty runs the
                executable directly.
            cwd: Working directory for the process.
            error_kind: Kind of the errors this tool reports.
        """
        self.name = name
        self._prefix = shlex.split(runner) if runner else []
        self._cwd = cwd
        self._error_kind = error_kind

    def command(self, args: list[str]) -> list[str]:
        return [*self._prefix, self.name, *args]

    def error(self, message: str) -> BuildError:
        """Log a failure of this tool and wrap it as a build error."""
        logger.error(f"{self.name}: {message}")
        return BuildError(self._error_kind, f"{self.name}: {message}")

    def run(self, args: list[str], stdin: str | None = None) -> Result[ToolOutput, BuildError]:
        """Run the tool to completion.

        A non-zero exit status is not an error here; callers decide what
        each status means for their tool.

        Returns:
            Ok(ToolOutput) once the process exited, Err(BuildError) if it
            could not be started.
        """
        command = self.command(args)
        logger.debug(f"Running {shlex.join(command)}")
        try:
            completed = subprocess.run(
                command,
                cwd=str(self._cwd) if self._cwd else None,
                input=stdin,
                capture_output=True,
                text=True,
                encoding="utf-8",
            )
        except OSError as e:
            return Err(self.error(f"cannot start: {e}"))

        return Ok(ToolOutput(completed.returncode, completed.stdout, completed.stderr))

    def failure(self, output: ToolOutput) -> Err[BuildError]:
        """Wrap a failed run, with its full output, as an error."""
        detail = (output.stderr or output.stdout).strip()
        return Err(self.error(f"exited with status {output.returncode}: {detail}"))
