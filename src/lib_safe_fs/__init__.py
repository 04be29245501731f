"""Public package surface for ``lib_safe_fs``.

Re-exports the stable API assembled in :mod:`lib_safe_fs.core` together with
the logging hooks from :mod:`lib_safe_fs.observability`, so both
``import lib_safe_fs`` and ``python -m lib_safe_fs`` reach the same functions.
"""

from __future__ import annotations

from .core import *  # noqa: F403
from .core import __all__ as _core_all
from .observability import bind_trace_id, get_logger

__all__ = [*_core_all, "bind_trace_id", "get_logger"]
