"""Collision-avoiding timestamped backups.

Purpose
-------
Copy a file next to itself under a unique, timestamp-labelled name. The name is
reserved by exclusive creation before any bytes are copied, so two callers can
never end up sharing a backup path.

Contents
--------
* :func:`safe_back_up` – public API.
* :func:`_back_up` – implementation with an injectable first timestamp.
* :func:`_backup_path_for` – candidate name computation.

System Role
-----------
The sequence "reserve placeholder, then copy" is not crash-atomic: a failure
between both steps leaves a zero-byte or partial file behind.
"""

from __future__ import annotations

import os
import shutil
from datetime import datetime, timezone
from pathlib import Path

from ...domain.errors import FileWriteError
from ...domain.paths import file_name_safe_timestamp, label_file_name
from ...observability import log_debug, log_info, make_event


def safe_back_up(path: str | os.PathLike[str]) -> Path:
    """Create a timestamped copy of *path* and return the backup's location.

    Parameters
    ----------
    path:
        Absolute path of an existing regular file.

    Returns
    -------
    Path
        Newly created sibling such as ``file-20190317T164300000Z.ext`` holding
        the bytes of *path*.

    Raises
    ------
    ValueError
        When *path* is relative or not an existing file (caller bug).
    FileWriteError
        ``OTHER`` wrapping any ``OSError`` other than a name collision.
    """

    return _back_up(Path(path), None)


def _back_up(path: Path, now: datetime | None) -> Path:
    _require_absolute_file(path)
    backup_path = _backup_path_for(path, now or datetime.now(timezone.utc))
    attempts = 1
    while True:
        try:
            with backup_path.open("xb"):
                break
        except FileExistsError:
            log_debug("backup_collision", **make_event("backup", backup_path, {"attempts": attempts}))
            backup_path = _backup_path_for(path, datetime.now(timezone.utc))
            attempts += 1
        except OSError as exc:
            raise FileWriteError.other(exc, path=backup_path) from exc

    try:
        shutil.copy(path, backup_path)
    except OSError as exc:
        raise FileWriteError.other(exc, path=backup_path) from exc
    log_info("backup_created", **make_event("backup", path, {"backup": str(backup_path), "attempts": attempts}))
    return backup_path


def _backup_path_for(path: Path, moment: datetime) -> Path:
    label = file_name_safe_timestamp(moment)
    candidate = label_file_name(path, label)
    if candidate is None:
        raise ValueError(f"Cannot derive a backup name from {path}")
    return candidate


def _require_absolute_file(path: Path) -> None:
    if not path.is_absolute():
        raise ValueError(f"Backup source must be an absolute path: {path}")
    if not path.is_file():
        raise ValueError(f"Backup source must be an existing file: {path}")
