# Copyright (c) Pxshot.
# SPDX-License-Identifier: MIT
"""pxshot-json CLI: inspect JSON documents with the package's own tree.

Commands:
    check    Parse a document and report whether it is well-formed.
    fmt      Re-print a document compactly, or indented with ``--pretty``.
    get      Follow a chain of member names and print the value found.
    version  Print the package version.

Every command reads the file given with ``--file`` or standard input.

Environment:
    PXSHOT_JSON_MAX_DEPTH   Maximum container nesting accepted by the parser.
    PXSHOT_JSON_LOG_LEVEL   Root log level (JSON lines on stderr).
"""

from __future__ import annotations

import sys
from pathlib import Path

import typer

from pxshot_json import __version__
from pxshot_json.config.settings import get_settings
from pxshot_json.domain.exceptions.json_tree import JsonMalformedInput
from pxshot_json.infrastructure.logging.logger import configure_root_logging, get_json_logger
from pxshot_json.jsontree.parser import parse
from pxshot_json.jsontree.printer import print_formatted, print_unformatted
from pxshot_json.jsontree.value import Value, lookup

log = get_json_logger(__name__)

app = typer.Typer(add_completion=False, no_args_is_help=True)

_FILE_OPTION = typer.Option(
    None,
    "--file",
    "-f",
    exists=True,
    dir_okay=False,
    readable=True,
    help="JSON document to read; standard input when omitted.",
)


@app.callback()
def _main() -> None:
    """Inspect and re-print JSON documents."""
    configure_root_logging(get_settings().log_level)


def _read_source(source: Path | None) -> bytes:
    """Return the raw bytes of ``source``, or of standard input."""
    if source is None:
        return sys.stdin.buffer.read()
    return source.read_bytes()


def _load(source: Path | None) -> Value:
    """Parse ``source`` or exit with status 1 and a one-line diagnostic."""
    raw = _read_source(source)
    try:
        return parse(raw, max_depth=get_settings().max_depth)
    except JsonMalformedInput as exc:
        log.debug(
            "cli.parse_failed",
            extra={"extra": {"source": str(source or "-"), **exc.details}},
        )
        position = exc.details.get("position")
        typer.echo(f"error: {exc.message} (position {position})", err=True)
        raise typer.Exit(code=1) from exc


@app.command("check")
def check(source: Path | None = _FILE_OPTION) -> None:
    """Exit 0 and print ``ok`` when the document is well-formed."""
    root = _load(source)
    typer.echo(f"ok: {root.kind.value}")


@app.command("fmt")
def fmt(
    source: Path | None = _FILE_OPTION,
    pretty: bool = typer.Option(False, "--pretty", help="Indent objects with tabs."),
) -> None:
    """Print the document compactly, or indented with ``--pretty``."""
    root = _load(source)
    typer.echo(print_formatted(root) if pretty else print_unformatted(root))


@app.command("get")
def get(
    keys: list[str] = typer.Argument(..., help="Member names to follow from the root."),
    source: Path | None = _FILE_OPTION,
    raw: bool = typer.Option(False, "--raw", help="Print strings without quotes."),
) -> None:
    """Print the value reached by following ``keys`` through nested objects."""
    node: Value | None = _load(source)
    for key in keys:
        node = lookup(node, key)
        if node is None:
            typer.echo(f"error: member {key!r} not found", err=True)
            raise typer.Exit(code=1)

    if raw and node.is_string:
        typer.echo(node.string_value)
    else:
        typer.echo(print_unformatted(node))


@app.command("version")
def version() -> None:
    """Print the package version."""
    typer.echo(__version__)


if __name__ == "__main__":  # pragma: no cover
    app()
