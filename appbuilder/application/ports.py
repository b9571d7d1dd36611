"""Interfaces of the external tools a build drives.

The pipeline only sees these abstract classes; the node-based adapters in
``appbuilder.infrastructure.tools`` implement them, and tests substitute
in-process fakes.
"""

import abc
from dataclasses import dataclass
from pathlib import Path

from appbuilder.domain.shared import BuildError, Result


@dataclass(frozen=True)
class LintReport:
    """Outcome of one lint pass.

    Attributes:
        output: Human-readable report to show the user.
        error_count: Number of errors; any non-zero value fails the build.
    """

    output: str
    error_count: int = 0

    @property
    def passed(self) -> bool:
        return self.error_count == 0


class JsLinter(abc.ABC):
    NAME: str = "JS linter"

    @abc.abstractmethod
    def lint(self, files: list[str]) -> Result[LintReport, BuildError]:
        """Lint (and auto-fix) ``files``, returning diagnostics."""
        raise NotImplementedError


class StyleLinter(abc.ABC):
    NAME: str = "style linter"

    @abc.abstractmethod
    def lint(self, files: list[str]) -> Result[LintReport, BuildError]:
        """Lint stylesheets, returning the textual report."""
        raise NotImplementedError


class Bundler(abc.ABC):
    NAME: str = "bundler"

    @abc.abstractmethod
    def bundle(self, entry: Path, output: Path) -> Result[Path, BuildError]:
        """Bundle the module graph of ``entry`` into one self-executing file."""
        raise NotImplementedError


class Minifier(abc.ABC):
    NAME: str = "minifier"

    @abc.abstractmethod
    def minify(self, source: str, preamble: str) -> Result[str, BuildError]:
        """Return minified ``source`` with ``preamble`` placed first."""
        raise NotImplementedError
