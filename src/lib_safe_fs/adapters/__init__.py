"""Adapters touching the filesystem and third-party parsers."""
