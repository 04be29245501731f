"""Application-layer ports describing adapter responsibilities.

Purpose
-------
Define the structural contracts the composition root depends on so format
adapters can be swapped or extended without touching suffix dispatch.

Contents
--------
* :class:`FormatReader` – parses one structured file format.
* :class:`HasOtherError` – the kind/downcast surface every error family offers.

System Role
-----------
These protocols are ``runtime_checkable`` so contract tests can assert that the
default adapters and error types satisfy them.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import Any, Protocol, TypeVar, runtime_checkable

E = TypeVar("E", bound=BaseException)


@runtime_checkable
class FormatReader(Protocol):
    """Parse a structured file into Python values.

    Why
    ----
    Segregate parsing concerns (JSON/YAML/TOML) from suffix dispatch.
    """

    format_name: str

    def read(self, path: str | os.PathLike[str], model: Any = None) -> Any:
        """Read *path* and return its value or raise the format's error family."""


@runtime_checkable
class HasOtherError(Protocol):
    """An error that may wrap an inner cause retrievable through downcasting."""

    @property
    def kind(self) -> Enum:
        """Closed classification of the failure."""

    def is_other(self) -> bool:
        """Return ``True`` when the error wraps an unclassified cause."""

    def downcast_other(self, error_type: type[E]) -> E | None:
        """Return the wrapped cause if it is an *error_type*, otherwise ``None``."""
