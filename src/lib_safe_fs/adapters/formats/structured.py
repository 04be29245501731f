"""Structured configuration file readers.

Purpose
-------
Convert JSON, YAML and TOML files into Python values while translating every
failure into the format's own error family. Adapters are small wrappers around
``json``/``yaml.safe_load``/``tomllib`` so classification, optional schema
validation and observability live in one place.

Contents
--------
* :class:`BaseFormatReader` – shared reading, wrapping and validation helpers.
* :class:`JSONFileReader` / :class:`YAMLFileReader` / :class:`TOMLFileReader` –
  format adapters.
* :func:`read_json_file` / :func:`read_yaml_file` / :func:`read_toml_file` –
  module-level entry points delegating to shared reader instances.

System Role
-----------
Invoked directly by callers or through
:func:`lib_safe_fs.core.read_structured_file`. A missing or unreadable file
surfaces as the format error's ``OTHER`` kind wrapping the
:class:`~lib_safe_fs.domain.errors.FileReadError`.
"""

from __future__ import annotations

import json
import os
from enum import Enum
from pathlib import Path
from typing import Any, ClassVar

try:  # Python >= 3.11
    import tomllib
except ModuleNotFoundError:  # pragma: no cover - fallback for <3.11
    import tomli as tomllib  # type: ignore[no-redef]

import yaml
from pydantic import TypeAdapter
from pydantic import ValidationError as SchemaValidationError

from ...domain.errors import (
    FileReadError,
    JsonError,
    JsonErrorKind,
    SourceLocation,
    TomlError,
    TomlErrorKind,
    YamlError,
    YamlErrorKind,
)
from ...observability import log_debug, log_error, make_event
from ..filesystem.read import read_text_file


class BaseFormatReader:
    """Common utilities shared by the structured readers.

    Subclasses set :attr:`format_name` and :attr:`error_type` and implement
    :meth:`_parse`, raising the format error for parser failures.
    """

    format_name: ClassVar[str]
    error_type: ClassVar[type[JsonError] | type[YamlError] | type[TomlError]]

    def read(self, path: str | os.PathLike[str], model: Any = None) -> Any:
        """Return the document at *path*, validated against *model* when given.

        Parameters
        ----------
        path:
            File to read.
        model:
            Optional target type understood by :class:`pydantic.TypeAdapter`
            (pydantic models, dataclasses, ``TypedDict``, ``list[int]``...).

        Side Effects
        ------------
        Emits ``structured_file_loaded`` debug or ``structured_file_invalid``
        error events.
        """

        file_path = Path(path)
        text = self._read(file_path)
        data = self._parse(text, file_path)
        if model is not None:
            data = self._validate(data, model, file_path)
        log_debug("structured_file_loaded", **make_event("load", file_path, {"format": self.format_name}))
        return data

    def _read(self, path: Path) -> str:
        try:
            return read_text_file(path)
        except FileReadError as exc:
            raise self.error_type.other(exc, path=path) from exc

    def _parse(self, text: str, path: Path) -> Any:  # pragma: no cover - abstract
        raise NotImplementedError

    def _validate(self, data: Any, model: Any, path: Path) -> Any:
        try:
            return TypeAdapter(model).validate_python(data)
        except SchemaValidationError as exc:
            raise self._failure(self.error_type.kind_type["DATA"], str(exc), path) from exc

    def _failure(self, kind: Enum, detail: str, path: Path, location: SourceLocation | None = None):
        log_error(
            "structured_file_invalid",
            **make_event("load", path, {"format": self.format_name, "kind": kind.name, "error": detail}),
        )
        return self.error_type.parse_failure(kind, detail, path, location)


class JSONFileReader(BaseFormatReader):
    """Read JSON documents with the standard library decoder."""

    format_name = "json"
    error_type = JsonError

    def _parse(self, text: str, path: Path) -> Any:
        """Decode *text*, classifying failures into ``EOF``, ``SYNTAX`` or ``IO``.

        Nesting too deep for the decoder is reported as ``SYNTAX``.

        Examples
        --------
        >>> JSONFileReader()._parse('{"enabled": true}', Path("demo.json"))
        {'enabled': True}
        >>> JSONFileReader()._parse('{"enabled": ', Path("demo.json"))
        Traceback (most recent call last):
        ...
        lib_safe_fs.domain.errors.JsonError: Expecting value: line 1 column 13 (char 12) in demo.json
        """

        try:
            return json.loads(text)
        except json.JSONDecodeError as exc:
            location = SourceLocation(line=exc.lineno, column=exc.colno, offset=exc.pos)
            raise self._failure(_classify_json_error(exc), str(exc), path, location) from exc
        except RecursionError as exc:
            raise self._failure(JsonErrorKind.SYNTAX, str(exc), path) from exc
        except OSError as exc:
            raise self._failure(JsonErrorKind.IO, str(exc), path) from exc


class YAMLFileReader(BaseFormatReader):
    """Read YAML documents with PyYAML's safe loader."""

    format_name = "yaml"
    error_type = YamlError

    def _parse(self, text: str, path: Path) -> Any:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise self._failure(YamlErrorKind.SYNTAX, _flatten(str(exc)), path, _yaml_location(exc)) from exc
        except ValueError as exc:
            # safe constructors reject scalars such as `2001-13-45` or `!!int abc` with ValueError
            raise self._failure(YamlErrorKind.SYNTAX, str(exc), path) from exc


class TOMLFileReader(BaseFormatReader):
    """Read TOML documents using the standard library parser."""

    format_name = "toml"
    error_type = TomlError

    def _parse(self, text: str, path: Path) -> dict[str, Any]:
        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError as exc:
            raise self._failure(TomlErrorKind.SYNTAX, str(exc), path, _toml_location(exc)) from exc


def _classify_json_error(exc: json.JSONDecodeError) -> JsonErrorKind:
    """Return ``EOF`` when decoding ran out of input, ``SYNTAX`` otherwise.

    Examples
    --------
    >>> def fail(doc):
    ...     try:
    ...         json.loads(doc)
    ...     except json.JSONDecodeError as exc:
    ...         return _classify_json_error(exc).name
    >>> fail('{"message": ')
    'EOF'
    >>> fail('"unterminated')
    'EOF'
    >>> fail('xxx{}')
    'SYNTAX'
    """

    if exc.pos >= len(exc.doc.rstrip()) or exc.msg.startswith("Unterminated string"):
        return JsonErrorKind.EOF
    return JsonErrorKind.SYNTAX


def _yaml_location(exc: yaml.YAMLError) -> SourceLocation | None:
    mark = getattr(exc, "problem_mark", None) or getattr(exc, "context_mark", None)
    if mark is None:
        return None
    return SourceLocation(line=mark.line + 1, column=mark.column + 1, offset=mark.index)


def _toml_location(exc: Exception) -> SourceLocation | None:
    # lineno/colno/pos are only populated by newer tomllib releases.
    line = getattr(exc, "lineno", None)
    column = getattr(exc, "colno", None)
    if line is None or column is None:
        return None
    return SourceLocation(line=line, column=column, offset=getattr(exc, "pos", None))


def _flatten(message: str) -> str:
    return " ".join(part.strip() for part in message.splitlines() if part.strip())


_JSON_READER = JSONFileReader()
_YAML_READER = YAMLFileReader()
_TOML_READER = TOMLFileReader()


def read_json_file(path: str | os.PathLike[str], model: Any = None) -> Any:
    """Read and decode the JSON document at *path*; see :meth:`BaseFormatReader.read`.

    Raises
    ------
    JsonError
        ``SYNTAX``/``EOF``/``IO`` for decoder failures, ``DATA`` for schema
        mismatches, ``OTHER`` wrapping a :class:`FileReadError`.
    """

    return _JSON_READER.read(path, model)


def read_yaml_file(path: str | os.PathLike[str], model: Any = None) -> Any:
    """Read and decode the YAML document at *path*; an empty document yields ``None``."""

    return _YAML_READER.read(path, model)


def read_toml_file(path: str | os.PathLike[str], model: Any = None) -> Any:
    """Read and decode the TOML document at *path* into a ``dict`` (or *model*)."""

    return _TOML_READER.read(path, model)
