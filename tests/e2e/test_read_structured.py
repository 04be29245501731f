"""End-to-end coverage of suffix-based dispatch through the public package surface."""

from __future__ import annotations

from pathlib import Path

import pytest

import lib_safe_fs
from lib_safe_fs import (
    FileReadError,
    JsonError,
    JsonErrorKind,
    UnsupportedFormat,
    YamlError,
    YamlErrorKind,
    read_structured_file,
    reader_for,
)


@pytest.mark.parametrize(
    ("name", "body"),
    [
        ("config.json", '{"message": "hello-world"}'),
        ("config.yaml", "message: hello-world\n"),
        ("config.YML", "message: hello-world\n"),
        ("config.toml", 'message = "hello-world"\n'),
    ],
)
def test_read_structured_file_dispatches_by_suffix(tmp_path: Path, name: str, body: str) -> None:
    path = tmp_path / name
    path.write_text(body, encoding="utf-8")

    assert read_structured_file(path) == {"message": "hello-world"}


def test_unknown_suffix_is_rejected(tmp_path: Path) -> None:
    path = tmp_path / "config.ini"
    path.write_text("[section]\n", encoding="utf-8")

    with pytest.raises(UnsupportedFormat) as info:
        read_structured_file(path)

    assert info.value.is_unsupported()
    assert str(path) in str(info.value)


def test_reader_for_is_case_insensitive() -> None:
    assert reader_for("A.JSON").format_name == "json"


def test_malformed_json_through_dispatch(tmp_path: Path) -> None:
    path = tmp_path / "file.json"
    path.write_text('xxx{"message": "hello-world"}', encoding="utf-8")

    with pytest.raises(JsonError) as info:
        read_structured_file(path)

    assert info.value.kind is JsonErrorKind.SYNTAX
    assert str(path) in str(info.value)


def test_missing_yaml_recovers_not_found_through_boundary(tmp_path: Path) -> None:
    path = tmp_path / "file.yaml"

    with pytest.raises(YamlError) as info:
        read_structured_file(path)

    assert info.value.kind is YamlErrorKind.OTHER
    assert info.value.downcast_other(FileReadError).is_not_found()


def test_public_surface_matches_all() -> None:
    for name in lib_safe_fs.__all__:
        assert hasattr(lib_safe_fs, name), name
