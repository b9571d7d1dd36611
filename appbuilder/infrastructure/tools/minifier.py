"""Terser adapter: mangles and compresses a bundle read from stdin."""

from pathlib import Path

from appbuilder.application.ports import Minifier
from appbuilder.domain.shared import BuildError, Err, Ok, Result
from appbuilder.infrastructure.tools.node import NodeTool

DEFAULT_ECMA = 2020


class TerserMinifier(Minifier):
    NAME = "Terser"

    def __init__(
        self,
        runner: str = "npx",
        ecma: int = DEFAULT_ECMA,
        cwd: Path | None = None,
    ) -> None:
        self._tool = NodeTool("terser", runner=runner, cwd=cwd)
        self._ecma = ecma

    def minify(self, source: str, preamble: str) -> Result[str, BuildError]:
        args = ["--compress", "--mangle", "--ecma", str(self._ecma)]
        result = self._tool.run(args, stdin=source)
        if isinstance(result, Err):
            return result
        if result.value.returncode != 0:
            return self._tool.failure(result.value)
        return Ok(preamble + result.value.stdout)
