import json

import pytest

from appbuilder.domain.build import DEFAULT_JS_PLACEHOLDER, BuildConfig, ProjectMetadata, TaskSpec
from appbuilder.domain.shared import Err, ErrorKind, Ok
from appbuilder.infrastructure.storage import BuildConfigRepository, JsonStorage, MetadataRepository

from conftest import PACKAGE, write_json


def test_load_json_missing_file(tmp_path):
    result = JsonStorage().load_json(tmp_path / "nope.json")
    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.CONFIG_LOAD
    assert "File not found" in result.error.message


def test_load_json_rejects_non_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert isinstance(JsonStorage().load_json(path), Err)


def test_metadata_load_and_next_build(project):
    result = MetadataRepository(project / "package.json").load()
    assert isinstance(result, Ok)

    metadata = result.value
    assert metadata.name == "demo-app"
    assert metadata.build_number == 41
    assert metadata.next_build().build_number == 42
    assert metadata.build_number == 41


def test_metadata_is_frozen(project):
    metadata = MetadataRepository(project / "package.json").load().value
    with pytest.raises(Exception):
        metadata.build_number = 100


def test_metadata_malformed_json(project):
    path = project / "package.json"
    path.write_text('{"name": "demo", ', encoding="utf-8")
    result = MetadataRepository(path).load()
    assert isinstance(result, Err)
    assert "Invalid JSON" in result.error.message


def test_metadata_missing_build_number(project):
    path = project / "package.json"
    write_json(path, {"name": "demo", "version": "1.0.0"})
    result = MetadataRepository(path).load()
    assert isinstance(result, Err)
    assert "buildNumber" in result.error.message


def test_metadata_save_keeps_other_keys_and_order(project):
    path = project / "package.json"
    repo = MetadataRepository(path)
    metadata = repo.load().value.next_build()

    assert isinstance(repo.save(metadata), Ok)

    text = path.read_text(encoding="utf-8")
    saved = json.loads(text)
    assert saved == {**PACKAGE, "buildNumber": 42}
    assert list(saved) == list(PACKAGE)
    assert text == json.dumps({**PACKAGE, "buildNumber": 42}, indent=4)


def test_metadata_author_object():
    metadata = ProjectMetadata.from_document(
        {**PACKAGE, "author": {"name": "Jane Doe", "email": "jane@example.org"}}
    )
    assert metadata.author == "Jane Doe"


def test_build_config_defaults(project):
    path = project / "AppBuilder.json"
    write_json(path, {"tasks": [{"name": "app", "type": "debug", "destDir": "out/"}]})

    result = BuildConfigRepository(path).load()

    assert isinstance(result, Ok)
    config = result.value
    assert config.eslint_files == []
    assert config.stylelint_files == []
    task = config.tasks[0]
    assert task.css_files == []
    assert task.clean_dirs == []
    assert task.copy_files == []
    assert task.js_file is None
    assert task.js_placeholder == DEFAULT_JS_PLACEHOLDER


def test_build_config_reads_camel_case_fields(project):
    path = project / "AppBuilder.json"
    write_json(
        path,
        {
            "ESLintFiles": ["src/**/*.js"],
            "styleLintFiles": ["src/**/*.css"],
            "tasks": [
                {
                    "name": "app",
                    "type": "release",
                    "destDir": "dist/",
                    "jsFile": "src/main.js",
                    "cssFiles": ["src/a.css"],
                    "htmlFile": "src/html/index.html",
                    "cleanDirs": ["dist/"],
                    "copyFiles": [{"src": "src/img", "dest": "dist/img"}],
                }
            ],
        },
    )

    config = BuildConfigRepository(path).load().value

    assert config.eslint_files == ["src/**/*.js"]
    task = config.tasks[0]
    assert task.dest_dir == "dist/"
    assert task.html_output_name == "index.html"
    assert task.copy_files[0].dest == "dist/img"


def test_build_config_missing_required_field(project):
    path = project / "AppBuilder.json"
    write_json(path, {"tasks": [{"name": "app", "destDir": "out/"}]})
    result = BuildConfigRepository(path).load()
    assert isinstance(result, Err)
    assert "tasks.0.type" in result.error.message


def test_build_config_duplicate_task_names():
    with pytest.raises(ValueError):
        BuildConfig.model_validate(
            {
                "tasks": [
                    {"name": "app", "type": "debug", "destDir": "a/"},
                    {"name": "app", "type": "release", "destDir": "b/"},
                ]
            }
        )


def test_task_output_names():
    task = TaskSpec(name="viewer", type="debug", destDir="out", htmlFile="src\\pages\\index.html")
    assert task.js_output_name == "viewer.min.js"
    assert task.css_output_name == "viewer.min.css"
    assert task.html_output_name == "index.html"
