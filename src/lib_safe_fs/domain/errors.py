"""Domain-level error taxonomy.

Purpose
-------
Expose the stable error families shared by the filesystem adapters, the format
readers, and consuming applications. Every family pairs an exception class with
a closed :class:`enum.Enum` of failure kinds plus an ``OTHER`` catch-all that
wraps an unclassified upstream cause.

Contents
--------
* :class:`SourceLocation` – line/column/offset of a syntactic failure.
* :class:`SafeFsError` – umbrella base class implementing ``kind``,
  ``is_other`` and :meth:`SafeFsError.downcast_other`.
* :class:`FileReadError` / :class:`FileWriteError` – filesystem families.
* :class:`JsonError` / :class:`YamlError` / :class:`TomlError` – format
  families.
* :class:`UnsupportedFormat` – raised by suffix dispatch for unknown formats.

System Role
-----------
Adapters translate native failures (``OSError``, parser exceptions, schema
validation errors) into these types so callers depend on one taxonomy no
matter which library sits underneath. Kind enums may grow new members; callers
should not assume a match over them is exhaustive.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import ClassVar, TypeVar

E = TypeVar("E", bound=BaseException)


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """Position of a syntactic failure inside a parsed document.

    ``line`` and ``column`` are 1-based; ``offset`` is the 0-based character
    index when the parser reports one.

    Examples
    --------
    >>> str(SourceLocation(line=3, column=7))
    'line 3, column 7'
    """

    line: int
    column: int
    offset: int | None = None

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


class FileReadErrorKind(Enum):
    IS_A_DIRECTORY = "is_a_directory"
    NOT_FOUND = "not_found"
    OTHER = "other"


class FileWriteErrorKind(Enum):
    ALREADY_EXISTS = "already_exists"
    OTHER = "other"


class JsonErrorKind(Enum):
    DATA = "data"
    EOF = "eof"
    IO = "io"
    SYNTAX = "syntax"
    OTHER = "other"


class YamlErrorKind(Enum):
    SYNTAX = "syntax"
    DATA = "data"
    OTHER = "other"


class TomlErrorKind(Enum):
    SYNTAX = "syntax"
    DATA = "data"
    OTHER = "other"


class UnsupportedFormatKind(Enum):
    UNSUPPORTED = "unsupported"
    OTHER = "other"


class SafeFsError(Exception):
    """Base type for all exceptions emitted by ``lib_safe_fs``.

    Why
    ----
    Provide a single catch-all type plus the kind/downcast protocol shared by
    every error family.

    What
    ----
    Stores the kind, the path involved, a display message, an optional
    :class:`SourceLocation`, and, for the ``OTHER`` kind only, the wrapped
    cause. Subclasses set :attr:`kind_type` to their kind enum.

    Examples
    --------
    >>> error = FileWriteError.other(PermissionError("denied"))
    >>> error.kind is FileWriteErrorKind.OTHER
    True
    >>> isinstance(error.downcast_other(PermissionError), PermissionError)
    True
    >>> error.downcast_other(KeyError) is None
    True
    """

    kind_type: ClassVar[type[Enum]]

    def __init__(
        self,
        kind: Enum,
        message: str,
        *,
        path: Path | None = None,
        location: SourceLocation | None = None,
        cause: BaseException | None = None,
    ) -> None:
        if not isinstance(kind, self.kind_type):
            raise TypeError(f"{type(self).__name__} expects a {self.kind_type.__name__}, got {kind!r}")
        if (kind.name == "OTHER") != (cause is not None):
            raise ValueError("a wrapped cause is required for the OTHER kind and forbidden otherwise")
        super().__init__(message)
        self._kind = kind
        self._cause = cause
        self.message = message
        self.path = path
        self.location = location

    @classmethod
    def other(cls, cause: BaseException, *, path: Path | None = None):
        """Wrap *cause* untouched in the ``OTHER`` variant, reusing its message."""

        if path is None and isinstance(cause, SafeFsError):
            path = cause.path
        return cls(cls.kind_type["OTHER"], str(cause), path=path, cause=cause)

    @property
    def kind(self) -> Enum:
        """Return the failure category; a pure function of the internal variant."""

        return self._kind

    def is_other(self) -> bool:
        return self._kind.name == "OTHER"

    def downcast_other(self, error_type: type[E]) -> E | None:
        """Return the wrapped cause when the kind is ``OTHER`` and it is an *error_type*.

        Parameters
        ----------
        error_type:
            Exception class the caller expects to find beneath the generic
            boundary (for instance :class:`FileReadError` inside a
            :class:`YamlError`).

        Returns
        -------
        error_type | None
            The cause itself, or ``None`` when the error is a named kind or
            the cause has a different type.
        """

        if not self.is_other() or not isinstance(self._cause, error_type):
            return None
        return self._cause

    def __reduce__(self):
        location = None if self.location is None else (self.location.line, self.location.column, self.location.offset)
        return _restore_error, (type(self), self._kind, self.message, self.path, location, self._cause)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self._kind.name}, message={self.message!r})"


def _restore_error(
    error_type: type[SafeFsError],
    kind: Enum,
    message: str,
    path: Path | None,
    location: tuple[int, int, int | None] | None,
    cause: BaseException | None,
) -> SafeFsError:
    """Rebuild a pickled error; keeps errors intact across process boundaries."""

    restored_location = None if location is None else SourceLocation(*location)
    return error_type(kind, message, path=path, location=restored_location, cause=cause)


class FileReadError(SafeFsError):
    """Raised when a file cannot be read in full."""

    kind_type = FileReadErrorKind

    @classmethod
    def is_a_directory(cls, path: Path) -> FileReadError:
        return cls(FileReadErrorKind.IS_A_DIRECTORY, f"File system object {path} is a directory not a file", path=path)

    @classmethod
    def not_found(cls, path: Path) -> FileReadError:
        return cls(FileReadErrorKind.NOT_FOUND, f"File {path} not found", path=path)

    def is_is_a_directory(self) -> bool:
        return self.kind is FileReadErrorKind.IS_A_DIRECTORY

    def is_not_found(self) -> bool:
        return self.kind is FileReadErrorKind.NOT_FOUND


class FileWriteError(SafeFsError):
    """Raised when a file cannot be created or written."""

    kind_type = FileWriteErrorKind

    @classmethod
    def already_exists(cls, path: Path) -> FileWriteError:
        return cls(FileWriteErrorKind.ALREADY_EXISTS, f"File {path} already exists", path=path)

    def is_already_exists(self) -> bool:
        return self.kind is FileWriteErrorKind.ALREADY_EXISTS


class _ParseError(SafeFsError):
    """Shared constructor for format families: ``<message> in <path>``."""

    @classmethod
    def parse_failure(
        cls,
        kind: Enum,
        detail: str,
        path: Path,
        location: SourceLocation | None = None,
    ):
        return cls(kind, f"{detail} in {path}", path=path, location=location)

    def is_syntax(self) -> bool:
        return self.kind.name == "SYNTAX"

    def is_data(self) -> bool:
        return self.kind.name == "DATA"


class JsonError(_ParseError):
    """Raised when a JSON document cannot be read, parsed, or validated."""

    kind_type = JsonErrorKind

    def is_eof(self) -> bool:
        return self.kind is JsonErrorKind.EOF

    def is_io(self) -> bool:
        return self.kind is JsonErrorKind.IO


class YamlError(_ParseError):
    """Raised when a YAML document cannot be read, parsed, or validated."""

    kind_type = YamlErrorKind


class TomlError(_ParseError):
    """Raised when a TOML document cannot be read, parsed, or validated."""

    kind_type = TomlErrorKind


class UnsupportedFormat(SafeFsError):
    """Raised when no structured reader is registered for a file suffix."""

    kind_type = UnsupportedFormatKind

    @classmethod
    def for_path(cls, path: Path) -> UnsupportedFormat:
        suffix = path.suffix or "<none>"
        return cls(UnsupportedFormatKind.UNSUPPORTED, f"No reader for suffix {suffix} of {path}", path=path)

    def is_unsupported(self) -> bool:
        return self.kind is UnsupportedFormatKind.UNSUPPORTED


__all__ = [
    "SourceLocation",
    "SafeFsError",
    "FileReadError",
    "FileReadErrorKind",
    "FileWriteError",
    "FileWriteErrorKind",
    "JsonError",
    "JsonErrorKind",
    "YamlError",
    "YamlErrorKind",
    "TomlError",
    "TomlErrorKind",
    "UnsupportedFormat",
    "UnsupportedFormatKind",
]
