"""Whole-file readers with classified failures.

Purpose
-------
Thin wrappers over "read the whole file" that translate ``OSError`` and text
decoding failures into :class:`lib_safe_fs.domain.errors.FileReadError`. The
format readers build on :func:`read_text_file`.

Contents
--------
* :func:`read_text_file` / :func:`read_bytes` / :func:`open_file` – public
  readers.
* :func:`classify_read_error` – maps an ``OSError`` onto the read kinds.
* :data:`_IS_A_DIRECTORY_STRATEGIES` – per-platform is-a-directory detection.

System Role
-----------
Single-shot semantics: no retry and no partial-read recovery.
"""

from __future__ import annotations

import errno
import os
from pathlib import Path
from typing import BinaryIO, Callable, Final

from ...domain.errors import FileReadError
from ...observability import log_debug, make_event

DEFAULT_ENCODING: Final[str] = "utf-8"


def _posix_is_a_directory(exc: OSError, path: Path) -> bool:
    return exc.errno == errno.EISDIR


def _windows_is_a_directory(exc: OSError, path: Path) -> bool:
    # Windows reports EACCES when a directory is opened as a file.
    return exc.errno == errno.EISDIR or (exc.errno == errno.EACCES and path.is_dir())


_IS_A_DIRECTORY_STRATEGIES: Final[dict[str, Callable[[OSError, Path], bool]]] = {
    "posix": _posix_is_a_directory,
    "nt": _windows_is_a_directory,
}


def classify_read_error(exc: OSError, path: Path, *, platform: str | None = None) -> FileReadError:
    """Translate *exc* raised while reading *path* into a :class:`FileReadError`.

    Why
    ----
    Keep the platform-dependent is-a-directory check behind one function so the
    strategy can be swapped (and tested) per OS family.

    Parameters
    ----------
    exc:
        The ``OSError`` raised by the read attempt.
    path:
        Path being read; used for messages and the Windows directory probe.
    platform:
        ``os.name`` style key selecting the strategy. Defaults to the running
        interpreter; unknown keys fall back to the POSIX strategy.

    Examples
    --------
    >>> import errno
    >>> classify_read_error(OSError(errno.ENOENT, "missing"), Path("x.txt")).is_not_found()
    True
    >>> classify_read_error(OSError(errno.EISDIR, "dir"), Path("x")).is_is_a_directory()
    True
    >>> classify_read_error(OSError(errno.EIO, "io"), Path("x")).is_other()
    True
    """

    strategy = _IS_A_DIRECTORY_STRATEGIES.get(platform or os.name, _posix_is_a_directory)
    if strategy(exc, path):
        error = FileReadError.is_a_directory(path)
    elif exc.errno == errno.ENOENT:
        error = FileReadError.not_found(path)
    else:
        error = FileReadError.other(exc, path=path)
    log_debug("file_read_failed", **make_event("read", path, {"kind": error.kind.name, "error": str(exc)}))
    return error


def read_text_file(path: str | os.PathLike[str], *, encoding: str = DEFAULT_ENCODING) -> str:
    """Return the full contents of *path* decoded with *encoding*.

    Raises
    ------
    FileReadError
        ``NOT_FOUND`` / ``IS_A_DIRECTORY`` for those conditions, ``OTHER``
        wrapping the original exception for everything else (including
        :class:`UnicodeDecodeError`).

    Examples
    --------
    >>> from tempfile import TemporaryDirectory
    >>> tmp = TemporaryDirectory()
    >>> target = Path(tmp.name) / "file.txt"
    >>> _ = target.write_text("hello-world", encoding="utf-8")
    >>> read_text_file(target)
    'hello-world'
    >>> tmp.cleanup()
    """

    file_path = Path(path)
    try:
        text = file_path.read_text(encoding=encoding)
    except OSError as exc:
        raise classify_read_error(exc, file_path) from exc
    except UnicodeDecodeError as exc:
        raise FileReadError.other(exc, path=file_path) from exc
    log_debug("file_read", **make_event("read", file_path, {"size": len(text), "encoding": encoding}))
    return text


def read_bytes(path: str | os.PathLike[str]) -> bytes:
    """Return the raw bytes stored at *path*, classifying failures like :func:`read_text_file`."""

    file_path = Path(path)
    try:
        payload = file_path.read_bytes()
    except OSError as exc:
        raise classify_read_error(exc, file_path) from exc
    log_debug("file_read", **make_event("read", file_path, {"size": len(payload)}))
    return payload


def open_file(path: str | os.PathLike[str]) -> BinaryIO:
    """Open *path* for binary reading; the caller owns (and must close) the handle."""

    file_path = Path(path)
    try:
        return file_path.open("rb")
    except OSError as exc:
        raise classify_read_error(exc, file_path) from exc
