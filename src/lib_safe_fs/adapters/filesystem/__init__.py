"""Filesystem primitives: classified readers, safe writers, backups, sentinel search."""

from .backup import safe_back_up
from .find import DEFAULT_SENTINEL_LIMIT, find_sentinel_dir, find_sentinel_file
from .read import DEFAULT_ENCODING, open_file, read_bytes, read_text_file
from .working_dir import WorkingDirectory
from .write import safe_create_file, safe_write_file

__all__ = [
    "DEFAULT_ENCODING",
    "DEFAULT_SENTINEL_LIMIT",
    "WorkingDirectory",
    "find_sentinel_dir",
    "find_sentinel_file",
    "open_file",
    "read_bytes",
    "read_text_file",
    "safe_back_up",
    "safe_create_file",
    "safe_write_file",
]
