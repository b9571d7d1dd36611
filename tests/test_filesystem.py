from appbuilder.domain.build import CopyDescriptor
from appbuilder.domain.shared import Err, ErrorKind, Ok
from appbuilder.infrastructure import filesystem


def test_clean_dirs_creates_missing_directory(tmp_path):
    target = tmp_path / "dist" / "assets"
    assert isinstance(filesystem.clean_dirs([str(target)]), Ok)
    assert target.is_dir()
    assert list(target.iterdir()) == []


def test_clean_dirs_twice_leaves_empty_directory(tmp_path):
    target = tmp_path / "dist"
    target.mkdir()
    (target / "stale.js").write_text("old", encoding="utf-8")
    (target / "sub").mkdir()
    (target / "sub" / "x.css").write_text("old", encoding="utf-8")

    for _ in range(2):
        assert isinstance(filesystem.clean_dirs([str(target)]), Ok)
        assert target.is_dir()
        assert list(target.iterdir()) == []


def test_clean_dirs_replaces_a_file(tmp_path):
    target = tmp_path / "dist"
    target.write_text("not a directory", encoding="utf-8")
    assert isinstance(filesystem.clean_dirs([str(target)]), Ok)
    assert target.is_dir()


def test_ensure_dir_creates_directory(tmp_path):
    result = filesystem.ensure_dir(str(tmp_path / "out" / "nested"))
    assert isinstance(result, Ok)
    assert result.value.is_dir()


def test_ensure_dir_rejects_empty_name():
    result = filesystem.ensure_dir("")
    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.DIRECTORY


def test_ensure_dir_rejects_regular_file(tmp_path):
    path = tmp_path / "out"
    path.write_text("", encoding="utf-8")
    result = filesystem.ensure_dir(str(path))
    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.DIRECTORY


def test_write_text_writes_exact_bytes(tmp_path):
    path = tmp_path / "a.css"
    filesystem.write_text(path, "a{}\r\nb{}\n")
    assert path.read_bytes() == b"a{}\r\nb{}\n"


def test_copy_file_creates_parent_directories(tmp_path):
    src = tmp_path / "favicon.ico"
    src.write_bytes(b"\x00\x01")
    dest = tmp_path / "dist" / "img" / "favicon.ico"

    result = filesystem.copy_files([CopyDescriptor(src=str(src), dest=str(dest))])

    assert isinstance(result, Ok)
    assert dest.read_bytes() == b"\x00\x01"


def test_copy_directory_recursively_overwrites(tmp_path):
    src = tmp_path / "fonts"
    (src / "sub").mkdir(parents=True)
    (src / "a.woff").write_text("new", encoding="utf-8")
    (src / "sub" / "b.woff").write_text("b", encoding="utf-8")
    dest = tmp_path / "dist" / "fonts"
    dest.mkdir(parents=True)
    (dest / "a.woff").write_text("old", encoding="utf-8")

    result = filesystem.copy_files([CopyDescriptor(src=str(src), dest=str(dest))])

    assert isinstance(result, Ok)
    assert (dest / "a.woff").read_text(encoding="utf-8") == "new"
    assert (dest / "sub" / "b.woff").read_text(encoding="utf-8") == "b"


def test_copy_stops_at_first_missing_source(tmp_path):
    good = tmp_path / "good.txt"
    good.write_text("x", encoding="utf-8")
    descriptors = [
        CopyDescriptor(src=str(tmp_path / "missing.txt"), dest=str(tmp_path / "out" / "m.txt")),
        CopyDescriptor(src=str(good), dest=str(tmp_path / "out" / "good.txt")),
    ]

    result = filesystem.copy_files(descriptors)

    assert isinstance(result, Err)
    assert result.error.kind is ErrorKind.PRODUCER
    assert not (tmp_path / "out" / "good.txt").exists()


def test_read_text_keeps_line_endings(tmp_path):
    path = tmp_path / "a.css"
    path.write_bytes(b"a{}\r\nb{}\rc{}\n")
    assert filesystem.read_text(path) == Ok("a{}\r\nb{}\rc{}\n")
