from __future__ import annotations

from pathlib import Path

import pytest

from lib_safe_fs.adapters.filesystem.write import safe_create_file, safe_write_file
from lib_safe_fs.domain.errors import FileWriteError, FileWriteErrorKind


def test_safe_create_file_no_overwrite_succeeds(tmp_path: Path) -> None:
    path = tmp_path / "file.txt"

    with safe_create_file(path, False) as handle:
        handle.write(b"hello-world")

    assert path.read_text(encoding="utf-8") == "hello-world"


def test_safe_create_file_text_mode(tmp_path: Path) -> None:
    path = tmp_path / "file.txt"

    with safe_create_file(path, encoding="utf-8") as handle:
        handle.write("grüße")

    assert path.read_text(encoding="utf-8") == "grüße"


def test_safe_create_file_exists_no_overwrite_fails(tmp_path: Path) -> None:
    path = tmp_path / "file.txt"
    path.write_text("hello-world", encoding="utf-8")

    with pytest.raises(FileWriteError) as info:
        safe_create_file(path, False)

    error = info.value
    assert error.kind is FileWriteErrorKind.ALREADY_EXISTS
    assert error.is_already_exists()
    assert not error.is_other()
    assert str(path) in str(error)
    assert path.read_text(encoding="utf-8") == "hello-world"


def test_safe_create_file_exists_overwrite_succeeds(tmp_path: Path) -> None:
    path = tmp_path / "file.txt"
    path.write_text("hello-world", encoding="utf-8")

    with safe_create_file(path, True) as handle:
        handle.write(b"something-else")

    assert path.read_text(encoding="utf-8") == "something-else"


def test_safe_create_file_creates_parent_directories(tmp_path: Path) -> None:
    path = tmp_path / "aaa" / "bbb" / "file.txt"

    with safe_create_file(path) as handle:
        handle.write(b"nested")

    assert path.read_bytes() == b"nested"


def test_safe_create_file_parent_is_a_file_is_other(tmp_path: Path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(FileWriteError) as info:
        safe_create_file(blocker / "file.txt")

    error = info.value
    assert error.is_other()
    assert isinstance(error.downcast_other(OSError), OSError)


def test_safe_write_file_no_overwrite_succeeds(tmp_path: Path) -> None:
    path = tmp_path / "file.txt"

    safe_write_file(path, "hello-world", False)

    assert path.read_text(encoding="utf-8") == "hello-world"


def test_safe_write_file_overwrite_succeeds(tmp_path: Path) -> None:
    path = tmp_path / "file.txt"

    safe_write_file(path, b"hello-world", True)

    assert path.read_bytes() == b"hello-world"


def test_safe_write_file_exists_no_overwrite_fails(tmp_path: Path) -> None:
    path = tmp_path / "file.txt"
    path.write_text("hello-world", encoding="utf-8")

    with pytest.raises(FileWriteError) as info:
        safe_write_file(path, "something-else", False)

    assert info.value.kind is FileWriteErrorKind.ALREADY_EXISTS
    assert str(path) in str(info.value)
    assert path.read_text(encoding="utf-8") == "hello-world"


def test_safe_write_file_exists_overwrite_succeeds(tmp_path: Path) -> None:
    path = tmp_path / "file.txt"
    path.write_text("hello-world", encoding="utf-8")

    safe_write_file(path, "something-else", True)

    assert path.read_text(encoding="utf-8") == "something-else"


def test_safe_write_file_leaves_created_directories_on_failure(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Parent creation is a side effect that survives a failing open."""

    def deny(self: Path, *args: object, **kwargs: object) -> None:
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "open", deny)
    path = tmp_path / "aaa" / "bbb" / "file.txt"

    with pytest.raises(FileWriteError) as info:
        safe_write_file(path, "hello-world")

    assert info.value.is_other()
    assert isinstance(info.value.downcast_other(PermissionError), PermissionError)
    assert path.parent.is_dir()
    assert not path.exists()
