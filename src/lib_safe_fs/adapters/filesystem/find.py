"""Bounded upward search for sentinel files and directories.

Purpose
-------
Locate a project or configuration root by walking from a start directory
towards the filesystem root, looking for a well-known marker.

Contents
--------
* :data:`DEFAULT_SENTINEL_LIMIT` – number of directories visited by default.
* :func:`find_sentinel_dir` / :func:`find_sentinel_file` – public API.
* :func:`_iter_ancestors` – yields the start directory and its parents.
"""

from __future__ import annotations

import os
from itertools import islice
from pathlib import Path
from typing import Callable, Final, Iterator

from ...observability import log_debug, make_event

DEFAULT_SENTINEL_LIMIT: Final[int] = 30


def find_sentinel_dir(
    sentinel_name: str | os.PathLike[str],
    start_dir: str | os.PathLike[str],
    limit: int | None = None,
) -> Path | None:
    """Return ``<ancestor>/<sentinel_name>`` for the nearest ancestor holding that directory.

    Examples
    --------
    >>> from tempfile import TemporaryDirectory
    >>> tmp = TemporaryDirectory()
    >>> root = Path(tmp.name)
    >>> start = root / "aaa" / "bbb" / "ccc"
    >>> start.mkdir(parents=True)
    >>> (root / "aaa" / "SENTINEL").mkdir()
    >>> find_sentinel_dir("SENTINEL", start, limit=3) == root / "aaa" / "SENTINEL"
    True
    >>> find_sentinel_dir("SENTINEL", start, limit=2) is None
    True
    >>> tmp.cleanup()
    """

    return _find_sentinel(sentinel_name, start_dir, limit, Path.is_dir)


def find_sentinel_file(
    sentinel_name: str | os.PathLike[str],
    start_dir: str | os.PathLike[str],
    limit: int | None = None,
) -> Path | None:
    """Return ``<ancestor>/<sentinel_name>`` for the nearest ancestor holding that file."""

    return _find_sentinel(sentinel_name, start_dir, limit, Path.is_file)


def _find_sentinel(
    sentinel_name: str | os.PathLike[str],
    start_dir: str | os.PathLike[str],
    limit: int | None,
    matches: Callable[[Path], bool],
) -> Path | None:
    """Visit at most *limit* directories starting at *start_dir*, nearest first."""

    budget = DEFAULT_SENTINEL_LIMIT if limit is None else max(limit, 0)
    for directory in islice(_iter_ancestors(Path(start_dir)), budget):
        candidate = directory / sentinel_name
        if matches(candidate):
            log_debug("sentinel_found", **make_event("find", candidate, {"start_dir": str(start_dir)}))
            return candidate
    log_debug("sentinel_missing", **make_event("find", start_dir, {"sentinel": str(sentinel_name), "limit": budget}))
    return None


def _iter_ancestors(start: Path) -> Iterator[Path]:
    yield start
    yield from start.parents
