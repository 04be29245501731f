"""Scoped change of the process working directory.

:class:`WorkingDirectory` saves the current directory, switches to a new one,
and restores the saved directory exactly once, either through :meth:`close`
or when the ``with`` block exits (including on exceptions).
"""

from __future__ import annotations

import os
from pathlib import Path
from types import TracebackType

from ...observability import log_debug, make_event


class WorkingDirectory:
    """Guard that restores the previous working directory on exit.

    Examples
    --------
    >>> from tempfile import TemporaryDirectory
    >>> tmp = TemporaryDirectory()
    >>> before = Path.cwd()
    >>> with WorkingDirectory.change(tmp.name):
    ...     Path.cwd().resolve() == Path(tmp.name).resolve()
    True
    >>> Path.cwd() == before
    True
    >>> tmp.cleanup()
    """

    def __init__(self, saved_dir: Path) -> None:
        self._saved_dir: Path | None = saved_dir

    @classmethod
    def change(cls, directory: str | os.PathLike[str]) -> WorkingDirectory:
        """Switch to *directory* and return a guard holding the previous one."""

        saved_dir = Path.cwd()
        os.chdir(directory)
        log_debug("working_dir_changed", **make_event("chdir", directory, {"saved": str(saved_dir)}))
        return cls(saved_dir)

    @property
    def active(self) -> bool:
        return self._saved_dir is not None

    def close(self) -> None:
        """Restore the saved directory; later calls are no-ops."""

        if self._saved_dir is None:
            return
        os.chdir(self._saved_dir)
        log_debug("working_dir_restored", **make_event("chdir", self._saved_dir))
        self._saved_dir = None

    def __enter__(self) -> WorkingDirectory:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
