"""Safe file creation with explicit conflict semantics.

Purpose
-------
Create or overwrite files without check-then-act races: the "do not clobber"
path relies solely on exclusive creation, and parent directories are created
on demand.

Contents
--------
* :func:`safe_create_file` – open a new (or truncated) file handle.
* :func:`safe_write_file` – create and fully write a file in one call.
* :func:`classify_write_error` / :func:`_ensure_parent` – helpers.
"""

from __future__ import annotations

import errno
import os
from pathlib import Path
from typing import IO

from ...domain.errors import FileWriteError
from ...observability import log_debug, make_event
from .read import DEFAULT_ENCODING


def classify_write_error(exc: OSError, path: Path) -> FileWriteError:
    """Map *exc* to ``ALREADY_EXISTS`` when the target exists, otherwise ``OTHER``.

    Examples
    --------
    >>> classify_write_error(FileExistsError(errno.EEXIST, "exists"), Path("a")).is_already_exists()
    True
    >>> classify_write_error(PermissionError(errno.EACCES, "denied"), Path("a")).is_other()
    True
    """

    if exc.errno == errno.EEXIST:
        return FileWriteError.already_exists(path)
    return FileWriteError.other(exc, path=path)


def safe_create_file(
    path: str | os.PathLike[str],
    overwrite: bool = False,
    *,
    encoding: str | None = None,
) -> IO:
    """Open *path* for writing, creating parent directories first.

    Why
    ----
    Callers that must never clobber user files get an atomic create; callers
    that explicitly opt in to ``overwrite`` get a truncating open.

    Parameters
    ----------
    path:
        Destination file path.
    overwrite:
        ``False`` opens with exclusive creation and fails if the file exists;
        ``True`` truncates or creates unconditionally.
    encoding:
        When given, a text handle using this encoding is returned; otherwise a
        binary handle.

    Returns
    -------
    IO
        Open handle owned by the caller.

    Raises
    ------
    FileWriteError
        ``ALREADY_EXISTS`` when ``overwrite`` is ``False`` and the file exists;
        ``OTHER`` for directory creation failures and any other ``OSError``.

    Side Effects
    ------------
    Parent directories remain created even when opening the file fails.
    """

    file_path = Path(path)
    _ensure_parent(file_path)
    mode = "w" if overwrite else "x"
    try:
        if encoding is None:
            return file_path.open(mode + "b")
        return file_path.open(mode, encoding=encoding)
    except OSError as exc:
        log_debug("file_write_failed", **make_event("create", file_path, {"overwrite": overwrite, "error": str(exc)}))
        raise classify_write_error(exc, file_path) from exc


def safe_write_file(
    path: str | os.PathLike[str],
    contents: bytes | str,
    overwrite: bool = False,
    *,
    encoding: str = DEFAULT_ENCODING,
) -> None:
    """Write *contents* to *path* honouring the same conflict rules as :func:`safe_create_file`.

    ``str`` contents are encoded with *encoding*. The function returns only after
    every byte has been written and the handle closed.

    Examples
    --------
    >>> from tempfile import TemporaryDirectory
    >>> tmp = TemporaryDirectory()
    >>> target = Path(tmp.name) / "nested" / "file.txt"
    >>> safe_write_file(target, "hello-world")
    >>> target.read_text(encoding="utf-8")
    'hello-world'
    >>> safe_write_file(target, "again")
    Traceback (most recent call last):
    ...
    lib_safe_fs.domain.errors.FileWriteError: File ... already exists
    >>> tmp.cleanup()
    """

    file_path = Path(path)
    payload = contents.encode(encoding) if isinstance(contents, str) else bytes(contents)
    with safe_create_file(file_path, overwrite) as handle:
        try:
            handle.write(payload)
        except OSError as exc:
            raise classify_write_error(exc, file_path) from exc
    log_debug("file_written", **make_event("write", file_path, {"size": len(payload), "overwrite": overwrite}))


def _ensure_parent(path: Path) -> None:
    """Create the parent directory chain of *path*; any failure is ``OTHER``."""

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FileWriteError.other(exc, path=path) from exc
