"""CLI adapter for ``lib_safe_fs`` built on ``lib_cli_exit_tools``.

Purpose
-------
Expose the filesystem primitives on the command line so operators can back up
files, locate project roots, and inspect structured files without writing
Python.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command that wires global traceback handling into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata for quick diagnostics.
* :func:`cli_read` – format-aware read printed as JSON.
* :func:`cli_write` – non-clobbering (or explicit overwrite) write.
* :func:`cli_backup` – timestamped backup of a file.
* :func:`cli_find_sentinel` – bounded upward sentinel search.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
The CLI lives in the outermost layer and only calls the public API in
:mod:`lib_safe_fs.core`. Library errors propagate to :func:`main`, where
``lib_cli_exit_tools`` renders them and picks the exit code.
"""

from __future__ import annotations

import json
import sys
from importlib import metadata
from pathlib import Path
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .core import DEFAULT_SENTINEL_LIMIT, find_sentinel_dir, find_sentinel_file, read_structured_file
from .core import safe_back_up, safe_write_file

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

SENTINEL_KIND_CHOICES: Final[tuple[str, ...]] = ("dir", "file")


def _resolve_version() -> str:
    """Return the installed package version, or ``"0.0.0"`` when metadata is missing."""

    try:
        return metadata.version("lib_safe_fs")
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="File-system safety primitives: safe writes, backups, sentinel search",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="lib_safe_fs",
    message="lib_safe_fs version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command configuring traceback handling for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata("lib_safe_fs")
    except metadata.PackageNotFoundError:
        click.echo("lib_safe_fs (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', 'lib_safe_fs')}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command("read", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("path", type=click.Path(path_type=Path, dir_okay=True))
@click.option(
    "--indent",
    type=int,
    default=None,
    help="Pretty-print JSON output with the provided indent size",
)
def cli_read(path: Path, indent: Optional[int]) -> None:
    """Read a JSON, YAML or TOML file and print it as JSON.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> from tempfile import TemporaryDirectory
    >>> tmp = TemporaryDirectory()
    >>> target = Path(tmp.name) / "config.yaml"
    >>> _ = target.write_text("message: hello-world", encoding="utf-8")
    >>> CliRunner().invoke(cli, ["read", str(target)]).output.strip()
    '{"message": "hello-world"}'
    >>> tmp.cleanup()
    """

    data = read_structured_file(path)
    click.echo(json.dumps(data, indent=indent, default=str))


@cli.command("write", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("path", type=click.Path(path_type=Path))
@click.option("--text", required=True, help="UTF-8 text written to PATH")
@click.option(
    "--overwrite/--no-overwrite",
    default=False,
    help="Replace an existing file instead of failing",
    show_default=True,
)
def cli_write(path: Path, text: str, overwrite: bool) -> None:
    """Write TEXT to PATH, creating parent directories; refuses to clobber unless --overwrite."""

    safe_write_file(path, text, overwrite)
    click.echo(str(path))


@cli.command("backup", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument(
    "path",
    type=click.Path(path_type=Path, exists=True, file_okay=True, dir_okay=False, resolve_path=True),
)
def cli_backup(path: Path) -> None:
    """Copy PATH to a uniquely named, timestamp-labelled sibling and print its location."""

    click.echo(str(safe_back_up(path)))


@cli.command("find-sentinel", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("name")
@click.option(
    "--start-dir",
    type=click.Path(path_type=Path, exists=True, file_okay=False, dir_okay=True, resolve_path=True),
    default=None,
    help="Directory where the upward search begins (defaults to CWD)",
)
@click.option(
    "--limit",
    type=int,
    default=DEFAULT_SENTINEL_LIMIT,
    show_default=True,
    help="Maximum number of directories visited",
)
@click.option(
    "--kind",
    "sentinel_kind",
    type=click.Choice(SENTINEL_KIND_CHOICES, case_sensitive=False),
    default="dir",
    show_default=True,
    help="Whether the sentinel is a directory or a file",
)
def cli_find_sentinel(name: str, start_dir: Optional[Path], limit: int, sentinel_kind: str) -> None:
    """Print the nearest NAME found walking upward from --start-dir."""

    start = start_dir or Path.cwd()
    finder = find_sentinel_file if sentinel_kind.lower() == "file" else find_sentinel_dir
    found = finder(name, start, limit)
    if found is None:
        raise click.ClickException(f"Sentinel {name} not found within {limit} directories of {start}")
    click.echo(str(found))


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="lib_safe_fs",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
