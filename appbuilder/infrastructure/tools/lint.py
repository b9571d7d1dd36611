"""Linter adapters: ESLint for scripts, Stylelint for stylesheets."""

import json
from pathlib import Path
from typing import Any

from appbuilder.application.ports import JsLinter, LintReport, StyleLinter
from appbuilder.domain.shared import BuildError, Err, ErrorKind, Ok, Result
from appbuilder.infrastructure.tools.node import NodeTool

FIX_TYPES = ("directive", "problem", "suggestion", "layout")

# eslint exits 2 on configuration problems and crashes
ESLINT_FATAL = 2

# stylelint exits 2 when it found problems; anything else non-zero is fatal
STYLELINT_PROBLEMS = 2


def format_stylish(results: list[dict[str, Any]]) -> str:
    """Render ESLint JSON results in the layout of its ``stylish`` formatter."""
    lines: list[str] = []
    errors = warnings = 0
    for result in results:
        messages = result.get("messages") or []
        errors += result.get("errorCount", 0)
        warnings += result.get("warningCount", 0)
        if not messages:
            continue
        lines.append("")
        lines.append(result.get("filePath", "<unknown>"))
        for message in messages:
            severity = "error" if message.get("severity") == 2 else "warning"
            position = f"{message.get('line', 0)}:{message.get('column', 0)}"
            rule = message.get("ruleId") or ""
            lines.append(f"  {position:<8} {severity:<7} {message.get('message', '')}  {rule}".rstrip())

    problems = errors + warnings
    if problems:
        lines.append("")
        lines.append(f"✖ {problems} problems ({errors} errors, {warnings} warnings)")
    return "\n".join(lines)


class ESLintRunner(JsLinter):
    """Runs ESLint with auto-fix and counts the remaining errors."""

    NAME = "ESLint"

    def __init__(self, runner: str = "npx", cwd: Path | None = None) -> None:
        self._tool = NodeTool("eslint", runner=runner, cwd=cwd, error_kind=ErrorKind.LINT)

    def lint(self, files: list[str]) -> Result[LintReport, BuildError]:
        args = ["--fix", "--fix-type", ",".join(FIX_TYPES), "--format", "json", *files]
        result = self._tool.run(args)
        if isinstance(result, Err):
            return result

        output = result.value
        if output.returncode >= ESLINT_FATAL:
            return self._tool.failure(output)

        try:
            results = json.loads(output.stdout or "[]")
        except json.JSONDecodeError as e:
            return Err(self._tool.error(f"unreadable output: {e}"))
        if not isinstance(results, list):
            return Err(self._tool.error("unexpected output, expected a list of results"))

        error_count = sum(item.get("errorCount", 0) for item in results)
        return Ok(LintReport(format_stylish(results), error_count))


class StyleLintRunner(StyleLinter):
    """Runs Stylelint with the string formatter.

    The string formatter gives no count, so a report mentioning ``error``
    counts as one error.
    """

    NAME = "StyleLint"

    def __init__(
        self,
        runner: str = "npx",
        config: Path | None = None,
        cwd: Path | None = None,
    ) -> None:
        self._tool = NodeTool("stylelint", runner=runner, cwd=cwd, error_kind=ErrorKind.LINT)
        self._config = config

    def lint(self, files: list[str]) -> Result[LintReport, BuildError]:
        args = [*files, "--formatter", "string"]
        if self._config is not None and self._config.exists():
            args += ["--config", str(self._config)]

        result = self._tool.run(args)
        if isinstance(result, Err):
            return result

        output = result.value
        if output.returncode not in (0, STYLELINT_PROBLEMS):
            return self._tool.failure(output)

        # stylelint 16 prints the report on stderr, older releases on stdout
        report = "\n".join(part for part in (output.stdout, output.stderr) if part.strip())
        return Ok(LintReport(report, 1 if "error" in report else 0))
