"""Build run controller.

Top-level sequence of a build:

1. load project metadata (build counter incremented once, here)
2. start banner
3. load the build configuration
4. project-wide lint passes
5. tasks, in configuration order, stopping at the first failure
6. on success persist the metadata; final banner with elapsed time

Each step runs only if every previous one succeeded.
"""

import logging
import time
from collections.abc import Callable

from appbuilder.application.pipeline import TaskPipeline
from appbuilder.application.ports import Bundler, JsLinter, Minifier, StyleLinter
from appbuilder.application.reporting import BuildReporter, LoggingReporter, format_elapsed
from appbuilder.domain.build import BuildConfig, BuildRunState, BuildStatus, ProjectMetadata
from appbuilder.domain.shared import BuildError, Err, Ok, Result, lint_error
from appbuilder.infrastructure.storage import BuildConfigRepository, MetadataRepository
from appbuilder.settings import BuildSettings

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1


class BuildRunController:
    """Runs one build from metadata loading to the final banner.

    Example:
        controller = BuildRunController(
            settings, "release", ESLintRunner(), StyleLintRunner(),
            RollupBundler(), TerserMinifier(),
        )
        raise SystemExit(controller.run())
    """

    def __init__(
        self,
        settings: BuildSettings,
        build_type: str | None,
        js_linter: JsLinter,
        style_linter: StyleLinter,
        bundler: Bundler,
        minifier: Minifier,
        reporter: BuildReporter | None = None,
        clock: Callable[[], int] = time.perf_counter_ns,
    ) -> None:
        self._settings = settings
        self._js_linter = js_linter
        self._style_linter = style_linter
        self._bundler = bundler
        self._minifier = minifier
        self._reporter = reporter or LoggingReporter()
        self._clock = clock
        self._metadata_repo = MetadataRepository(settings.package)
        self._config_repo = BuildConfigRepository(settings.config)
        self.state = BuildRunState(build_type=build_type)
        self.error: BuildError | None = None

    def run(self) -> int:
        """Run the build.

        Returns:
            0 when every stage succeeded, 1 otherwise.
        """
        state = self.state
        loaded = self._metadata_repo.load()
        if isinstance(loaded, Err):
            return self._finish(None, loaded.error)
        metadata = loaded.value.next_build()

        state.started_at = self._clock()
        self._reporter.start(metadata)

        if not state.build_type:
            logger.warning("No build type given (--type=...); every task will be skipped")

        result = self._config_repo.load()
        if isinstance(result, Ok):
            config = result.value
            result = self._lint(config)
        if isinstance(result, Ok):
            result = self._run_tasks(config, metadata)
        if isinstance(result, Ok):
            result = self._metadata_repo.save(metadata)

        return self._finish(metadata, result.error if isinstance(result, Err) else None)

    def _lint(self, config: BuildConfig) -> Result[None, BuildError]:
        passes = (
            (self._js_linter, config.eslint_files),
            (self._style_linter, config.stylelint_files),
        )
        for linter, files in passes:
            if not files:
                continue
            self._reporter.step(f"Running {linter.NAME}")
            result = linter.lint(files)
            if isinstance(result, Err):
                return result

            report = result.value
            self._reporter.output(report.output)
            if not report.passed:
                message = f"{linter.NAME} reported {report.error_count} error(s)"
                logger.error(message)
                return Err(lint_error(message))
        return Ok(None)

    def _run_tasks(self, config: BuildConfig, metadata: ProjectMetadata) -> Result[None, BuildError]:
        pipeline = TaskPipeline(
            self.state,
            metadata,
            self._bundler,
            self._minifier,
            self._settings.scratch_dir,
            self._reporter,
        )
        for task in config.tasks:
            result = pipeline.run_task(task)
            if isinstance(result, Err):
                return result
        return Ok(None)

    def _finish(self, metadata: ProjectMetadata | None, error: BuildError | None) -> int:
        state = self.state
        if error is not None:
            self.error = error
            state.fail()
        elapsed = 0 if state.started_at is None else self._clock() - state.started_at
        artifacts = state.artifacts if state.status is BuildStatus.OK else []
        self._reporter.finish(metadata, state.status, format_elapsed(elapsed), artifacts)
        return EXIT_OK if state.status is BuildStatus.OK else EXIT_ERROR
