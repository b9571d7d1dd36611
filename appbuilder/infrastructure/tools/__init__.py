"""Adapters for the node tools a build drives.

- ESLintRunner / StyleLintRunner: project-wide lint passes
- RollupBundler: entry file -> IIFE bundle
- TerserMinifier: bundle -> minified code with license preamble
"""

from appbuilder.infrastructure.tools.bundler import RollupBundler
from appbuilder.infrastructure.tools.lint import ESLintRunner, StyleLintRunner
from appbuilder.infrastructure.tools.minifier import TerserMinifier
from appbuilder.infrastructure.tools.node import NodeTool, ToolOutput

__all__ = [
    "NodeTool",
    "ToolOutput",
    "ESLintRunner",
    "StyleLintRunner",
    "RollupBundler",
    "TerserMinifier",
]
