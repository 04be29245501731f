"""Pure path labelling helpers used by the backup generator.

Contents
--------
* :func:`file_name_safe_timestamp` – millisecond UTC timestamp token without
  ``-``, ``:`` or ``.`` characters.
* :func:`label_file_name` – insert ``-<label>`` between a file's stem and its
  suffix.

Both helpers are side-effect free and never touch the filesystem.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path


def file_name_safe_timestamp(moment: datetime) -> str:
    """Return *moment* as a filesystem-safe RFC 3339 token with millisecond precision.

    Naive datetimes are interpreted as UTC; aware ones are converted.

    Examples
    --------
    >>> file_name_safe_timestamp(datetime(2019, 3, 17, 16, 43, 0, tzinfo=timezone.utc))
    '20190317T164300000Z'
    >>> file_name_safe_timestamp(datetime(2019, 3, 17, 16, 43, 0, 123456))
    '20190317T164300123Z'
    """

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    stamp = moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    for char in "-:.":
        stamp = stamp.replace(char, "")
    return stamp


def label_file_name(path: Path, label: str) -> Path | None:
    """Return *path* with ``-<label>`` inserted before the final suffix.

    Returns ``None`` when *path* has no file name component (``/`` or empty).

    Examples
    --------
    >>> label_file_name(Path("/aaa/bbb/ccc.txt"), "ddd").as_posix()
    '/aaa/bbb/ccc-ddd.txt'
    >>> label_file_name(Path("ccc"), "ddd").as_posix()
    'ccc-ddd'
    >>> label_file_name(Path("/"), "ddd") is None
    True
    """

    if not path.name:
        return None
    return path.with_name(f"{path.stem}-{label}{path.suffix}")
