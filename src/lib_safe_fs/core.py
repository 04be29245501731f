"""Composition root for ``lib_safe_fs``.

Purpose
-------
Wire the format adapters behind a suffix lookup and export the stable,
consumer-ready API in one place.

Contents
--------
* :data:`_FORMAT_READERS` – mapping of file suffixes to reader instances.
* :func:`reader_for` – resolve the reader registered for a path.
* :func:`read_structured_file` – format-aware read of JSON/YAML/TOML files.

System Role
-----------
The CLI and consumers that do not know a file's format upfront call
:func:`read_structured_file`; everything else is re-exported from the adapters.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Mapping

from .adapters.filesystem import (
    DEFAULT_ENCODING,
    DEFAULT_SENTINEL_LIMIT,
    WorkingDirectory,
    find_sentinel_dir,
    find_sentinel_file,
    open_file,
    read_bytes,
    read_text_file,
    safe_back_up,
    safe_create_file,
    safe_write_file,
)
from .adapters.formats.structured import (
    JSONFileReader,
    TOMLFileReader,
    YAMLFileReader,
    read_json_file,
    read_toml_file,
    read_yaml_file,
)
from .application.ports import FormatReader
from .domain.errors import (
    FileReadError,
    FileReadErrorKind,
    FileWriteError,
    FileWriteErrorKind,
    JsonError,
    JsonErrorKind,
    SafeFsError,
    SourceLocation,
    TomlError,
    TomlErrorKind,
    UnsupportedFormat,
    UnsupportedFormatKind,
    YamlError,
    YamlErrorKind,
)
from .domain.paths import file_name_safe_timestamp, label_file_name
from .observability import log_debug

# Supported structured readers keyed by lower-case suffix.
_FORMAT_READERS: Mapping[str, FormatReader] = {
    ".json": JSONFileReader(),
    ".yaml": YAMLFileReader(),
    ".yml": YAMLFileReader(),
    ".toml": TOMLFileReader(),
}


def reader_for(path: str | os.PathLike[str]) -> FormatReader:
    """Return the reader registered for the suffix of *path*.

    Examples
    --------
    >>> reader_for("settings.YML").format_name
    'yaml'
    >>> reader_for("notes.txt")
    Traceback (most recent call last):
    ...
    lib_safe_fs.domain.errors.UnsupportedFormat: No reader for suffix .txt of notes.txt
    """

    file_path = Path(path)
    reader = _FORMAT_READERS.get(file_path.suffix.lower())
    if reader is None:
        raise UnsupportedFormat.for_path(file_path)
    return reader


def read_structured_file(path: str | os.PathLike[str], model: Any = None) -> Any:
    """Read *path* with the reader matching its suffix.

    Parameters
    ----------
    path:
        A ``.json``, ``.yaml``/``.yml`` or ``.toml`` file.
    model:
        Optional target type forwarded to the reader for validation.

    Raises
    ------
    UnsupportedFormat
        When the suffix has no registered reader.
    JsonError | YamlError | TomlError
        As raised by the selected reader.

    Examples
    --------
    >>> from tempfile import TemporaryDirectory
    >>> tmp = TemporaryDirectory()
    >>> target = Path(tmp.name) / "config.toml"
    >>> _ = target.write_text('message = "hello-world"', encoding="utf-8")
    >>> read_structured_file(target)
    {'message': 'hello-world'}
    >>> tmp.cleanup()
    """

    reader = reader_for(path)
    log_debug("structured_file_dispatch", operation="load", path=str(path), format=reader.format_name)
    return reader.read(path, model)


__all__ = [
    "DEFAULT_ENCODING",
    "DEFAULT_SENTINEL_LIMIT",
    "FileReadError",
    "FileReadErrorKind",
    "FileWriteError",
    "FileWriteErrorKind",
    "JsonError",
    "JsonErrorKind",
    "SafeFsError",
    "SourceLocation",
    "TomlError",
    "TomlErrorKind",
    "UnsupportedFormat",
    "UnsupportedFormatKind",
    "WorkingDirectory",
    "YamlError",
    "YamlErrorKind",
    "file_name_safe_timestamp",
    "find_sentinel_dir",
    "find_sentinel_file",
    "label_file_name",
    "open_file",
    "read_bytes",
    "read_json_file",
    "read_structured_file",
    "read_text_file",
    "read_toml_file",
    "read_yaml_file",
    "reader_for",
    "safe_back_up",
    "safe_create_file",
    "safe_write_file",
]
