"""Task pipeline.

Runs the steps of one task in their fixed order:

    clean dirs -> reset hashes -> reset scratch -> destination
    -> JS (bundle, minify, hash) -> CSS (assemble, hash) -> HTML -> copies

Clean comes first so it cannot delete fresh output; JS and CSS come before
HTML because the HTML embeds their hashes. The first ``Err`` marks the run
as failed and ends the task.
"""

import dataclasses
import logging
from pathlib import Path

from appbuilder.application.ports import Bundler, Minifier
from appbuilder.application.reporting import BuildReporter, LoggingReporter
from appbuilder.domain.build import (
    Artifact,
    ArtifactKind,
    AssetRef,
    BuildRunState,
    ProjectMetadata,
    TaskSpec,
    assemble,
    digest,
    license_preamble,
    rewrite,
)
from appbuilder.domain.shared import BuildError, Err, Ok, Result, flat_map, producer_error
from appbuilder.infrastructure import filesystem

logger = logging.getLogger(__name__)


class TaskPipeline:
    """Builds the tasks of one run, one at a time.

    Example:
        pipeline = TaskPipeline(state, metadata, bundler, minifier, Path("tmp"))
        for task in config.tasks:
            if isinstance(pipeline.run_task(task), Err):
                break
    """

    def __init__(
        self,
        state: BuildRunState,
        metadata: ProjectMetadata,
        bundler: Bundler,
        minifier: Minifier,
        scratch_dir: Path,
        reporter: BuildReporter | None = None,
    ) -> None:
        self._state = state
        self._metadata = metadata
        self._bundler = bundler
        self._minifier = minifier
        self._scratch_dir = scratch_dir
        self._reporter = reporter or LoggingReporter()

    def run_task(self, spec: TaskSpec) -> Result[None, BuildError]:
        """Build one task.

        A task whose type differs from the run's build type is skipped
        without touching the filesystem.

        Returns:
            Ok(None) when the task was built or skipped, Err(BuildError)
            for the first failing step. The run state is set to error in
            the latter case.
        """
        state = self._state
        if spec.type != state.build_type:
            logger.debug(f"Skipping task {spec.name} (type {spec.type})")
            return Ok(None)

        state.current_task = spec
        if spec.clean_dirs:
            self._reporter.step("Cleaning dirs")
            result = filesystem.clean_dirs(spec.clean_dirs)
            if isinstance(result, Err):
                return self._fail(spec, result.error)

        self._reporter.step(f"Building task {spec.name}")
        state.reset_hashes()
        filesystem.remove_tree(self._scratch_dir)

        dest = filesystem.ensure_dir(spec.dest_dir)
        if isinstance(dest, Err):
            return self._fail(spec, dest.error)
        dest_dir = dest.value

        steps = []
        if spec.js_file:
            steps.append(self._build_js)
        if spec.css_files:
            steps.append(self._build_css)
        if spec.html_file:
            steps.append(self._build_html)
        if spec.copy_files:
            steps.append(self._copy_files)

        for step in steps:
            result = step(spec, dest_dir)
            if isinstance(result, Err):
                return self._fail(spec, result.error)
        return Ok(None)

    def _fail(self, spec: TaskSpec, error: BuildError) -> Err[BuildError]:
        self._state.fail()
        return Err(dataclasses.replace(error, task=spec.name))

    def _build_js(self, spec: TaskSpec, dest_dir: Path) -> Result[None, BuildError]:
        intermediate = self._scratch_dir / f"{spec.name}.js"
        try:
            self._scratch_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error(f"Cannot create scratch directory {self._scratch_dir}: {e}")
            return Err(producer_error(f"Cannot create scratch directory: {e}"))

        try:
            self._reporter.step(f"Running {self._bundler.NAME}", level=1)
            bundled = self._bundler.bundle(Path(spec.js_file), intermediate)
            source = flat_map(bundled, filesystem.read_text)
            if isinstance(source, Err):
                return source

            self._reporter.step(f"Running {self._minifier.NAME}", level=1)
            preamble = license_preamble(self._metadata)
            minified = self._minifier.minify(source.value, preamble)
            if isinstance(minified, Err):
                return minified
        finally:
            filesystem.remove_tree(self._scratch_dir)

        code = minified.value
        written = filesystem.write_text(dest_dir / spec.js_output_name, code)
        if isinstance(written, Err):
            return written
        token = digest(code)
        self._state.js_hash = token
        self._state.artifacts.append(Artifact(ArtifactKind.JS, written.value, token))
        return Ok(None)

    def _build_css(self, spec: TaskSpec, dest_dir: Path) -> Result[None, BuildError]:
        self._reporter.step("Building CSS", level=1)
        sources = []
        for name in spec.css_files:
            content = filesystem.read_text(Path(name))
            if isinstance(content, Err):
                return content
            sources.append(content.value)

        css, token = assemble(sources, release=self._state.release)
        written = filesystem.write_text(dest_dir / spec.css_output_name, css)
        if isinstance(written, Err):
            return written
        self._state.css_hash = token
        self._state.artifacts.append(Artifact(ArtifactKind.CSS, written.value, token))
        return Ok(None)

    def _build_html(self, spec: TaskSpec, dest_dir: Path) -> Result[None, BuildError]:
        self._reporter.step("Building HTML", level=1)
        template = filesystem.read_text(Path(spec.html_file))
        if isinstance(template, Err):
            return template

        state = self._state
        js = None
        if state.js_hash:
            js = AssetRef(spec.js_placeholder, spec.js_output_name, state.js_hash)
        css = None
        if state.css_hash:
            css = AssetRef(spec.css_placeholder, spec.css_output_name, state.css_hash)

        html = rewrite(template.value, js=js, css=css)
        written = filesystem.write_text(dest_dir / spec.html_output_name, html)
        if isinstance(written, Err):
            return written
        state.artifacts.append(Artifact(ArtifactKind.HTML, written.value))
        return Ok(None)

    def _copy_files(self, spec: TaskSpec, dest_dir: Path) -> Result[None, BuildError]:
        self._reporter.step("Copying files", level=1)
        result = filesystem.copy_files(spec.copy_files)
        if isinstance(result, Err):
            return result
        for descriptor in spec.copy_files:
            self._state.artifacts.append(Artifact(ArtifactKind.COPY, Path(descriptor.dest)))
        return Ok(None)
