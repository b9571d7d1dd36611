"""Rollup adapter producing a self-executing bundle."""

from pathlib import Path

from appbuilder.application.ports import Bundler
from appbuilder.domain.shared import BuildError, Err, Ok, Result
from appbuilder.infrastructure.tools.node import NodeTool


class RollupBundler(Bundler):
    NAME = "Rollup"

    def __init__(self, runner: str = "npx", cwd: Path | None = None) -> None:
        self._tool = NodeTool("rollup", runner=runner, cwd=cwd)

    def bundle(self, entry: Path, output: Path) -> Result[Path, BuildError]:
        result = self._tool.run([str(entry), "--file", str(output), "--format", "iife"])
        if isinstance(result, Err):
            return result
        if result.value.returncode != 0:
            return self._tool.failure(result.value)
        if not output.is_file():
            return Err(self._tool.error(f"no bundle written to {output}"))
        return Ok(output)
