from __future__ import annotations

import errno
from pathlib import Path

import pytest

from lib_safe_fs.adapters.filesystem.read import classify_read_error, open_file, read_bytes, read_text_file
from lib_safe_fs.domain.errors import FileReadError, FileReadErrorKind


def test_read_text_file_succeeds(tmp_path: Path) -> None:
    path = tmp_path / "file.txt"
    path.write_text("hello-world", encoding="utf-8")

    assert read_text_file(path) == "hello-world"


def test_read_text_file_accepts_str_paths(tmp_path: Path) -> None:
    path = tmp_path / "file.txt"
    path.write_text("hello-world", encoding="utf-8")

    assert read_text_file(str(path)) == "hello-world"


@pytest.mark.os_dependent
def test_read_text_file_is_a_directory_fails(tmp_path: Path) -> None:
    with pytest.raises(FileReadError) as info:
        read_text_file(tmp_path)

    error = info.value
    assert error.kind is FileReadErrorKind.IS_A_DIRECTORY
    assert error.is_is_a_directory()
    assert not error.is_not_found()
    assert not error.is_other()
    assert str(tmp_path) in str(error)


def test_read_text_file_not_found_fails(tmp_path: Path) -> None:
    path = tmp_path / "file.txt"

    with pytest.raises(FileReadError) as info:
        read_text_file(path)

    error = info.value
    assert error.kind is FileReadErrorKind.NOT_FOUND
    assert not error.is_is_a_directory()
    assert error.is_not_found()
    assert not error.is_other()
    assert str(path) in str(error)


def test_read_text_file_invalid_encoding_is_other(tmp_path: Path) -> None:
    path = tmp_path / "file.txt"
    path.write_bytes(b"\xff\xfe\xfa")

    with pytest.raises(FileReadError) as info:
        read_text_file(path)

    error = info.value
    assert error.is_other()
    assert isinstance(error.downcast_other(UnicodeDecodeError), UnicodeDecodeError)


def test_open_file_succeeds(tmp_path: Path) -> None:
    path = tmp_path / "file.txt"
    path.write_bytes(b"hello-world")

    with open_file(path) as handle:
        assert handle.read() == b"hello-world"


def test_open_file_not_found_fails(tmp_path: Path) -> None:
    path = tmp_path / "file.txt"

    with pytest.raises(FileReadError) as info:
        open_file(path)

    assert info.value.is_not_found()
    assert str(path) in str(info.value)


def test_read_bytes_succeeds(tmp_path: Path) -> None:
    path = tmp_path / "file.txt"
    path.write_bytes(b"hello-world")

    assert read_bytes(path) == b"hello-world"


def test_read_bytes_not_found_fails(tmp_path: Path) -> None:
    path = tmp_path / "file.txt"

    with pytest.raises(FileReadError) as info:
        read_bytes(path)

    assert info.value.kind is FileReadErrorKind.NOT_FOUND


@pytest.mark.os_dependent
def test_windows_strategy_maps_access_denied_on_directory(tmp_path: Path) -> None:
    """Windows reports EACCES when opening a directory; the nt strategy must reclassify it."""

    exc = PermissionError(errno.EACCES, "Permission denied")

    assert classify_read_error(exc, tmp_path, platform="nt").is_is_a_directory()
    assert classify_read_error(exc, tmp_path / "file.txt", platform="nt").is_other()
    assert classify_read_error(exc, tmp_path, platform="posix").is_other()


def test_unclassified_os_error_is_wrapped_untouched(tmp_path: Path) -> None:
    exc = OSError(errno.EIO, "I/O error")

    error = classify_read_error(exc, tmp_path / "file.txt")

    assert error.is_other()
    assert error.downcast_other(OSError) is exc
