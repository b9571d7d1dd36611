import json
from pathlib import Path

import pytest

from appbuilder.application.ports import Bundler, JsLinter, LintReport, Minifier, StyleLinter
from appbuilder.application.reporting import BuildReporter
from appbuilder.domain.shared import Err, Ok, producer_error
from appbuilder.settings import BuildSettings


class FakeBundler(Bundler):
    NAME = "fake bundler"

    def __init__(self, fail=False):
        self.fail = fail
        self.calls = []

    def bundle(self, entry, output):
        self.calls.append((entry, output))
        if self.fail:
            return Err(producer_error("bundle failed"))
        source = Path(entry).read_text(encoding="utf-8")
        output.write_text(f"(function () {{\n{source}\n}})();\n", encoding="utf-8")
        return Ok(output)


class FakeMinifier(Minifier):
    NAME = "fake minifier"

    def __init__(self, fail=False):
        self.fail = fail
        self.sources = []

    def minify(self, source, preamble):
        self.sources.append(source)
        if self.fail:
            return Err(producer_error("minify failed"))
        return Ok(preamble + " ".join(source.split()))


class FakeLinter(JsLinter, StyleLinter):
    def __init__(self, name="fake linter", error_count=0):
        self.NAME = name
        self.error_count = error_count
        self.calls = []

    def lint(self, files):
        self.calls.append(list(files))
        return Ok(LintReport(f"{len(files)} file(s) checked", self.error_count))


class RecordingReporter(BuildReporter):
    def __init__(self):
        self.events = []
        self.artifacts = []

    def start(self, metadata):
        self.events.append(("start", metadata.build_number))

    def step(self, message, level=0):
        self.events.append(("step", message))

    def output(self, text):
        self.events.append(("output", text))

    def finish(self, metadata, status, elapsed, artifacts=()):
        self.events.append(("finish", status, elapsed))
        self.artifacts = list(artifacts)

    @property
    def steps(self):
        return [event[1] for event in self.events if event[0] == "step"]


PACKAGE = {
    "name": "demo-app",
    "version": "2.1.0",
    "license": "GPL-3.0-or-later",
    "sources": "https://example.org/demo-app",
    "buildNumber": 41,
    "type": "module",
}


def write_json(path, data):
    path.write_text(json.dumps(data, indent=4), encoding="utf-8")


@pytest.fixture
def project(tmp_path, monkeypatch):
    """An empty project directory used as the working directory."""
    monkeypatch.chdir(tmp_path)
    (tmp_path / "src").mkdir()
    write_json(tmp_path / "package.json", PACKAGE)
    return tmp_path


@pytest.fixture
def settings(project):
    return BuildSettings(
        config=project / "AppBuilder.json",
        package=project / "package.json",
        scratch_dir=project / "tmp",
    )


@pytest.fixture
def reporter():
    return RecordingReporter()
