# src/zgit/cli.py
"""zgit Command Line Interface.

Entry point for the zgit CLI tool. Thin glue over zgit.core: every
ObjectStoreError is shown as a single red ``Error: ...`` line on stderr
with exit code 1, never as a traceback.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn

import typer
from pydantic import ValidationError

from zgit import __version__
from zgit.contracts.errors import ObjectStoreError
from zgit.core.config import ZgitSettings, load_settings
from zgit.core.framing import fingerprint, parse_header, parse_kind, payload_of
from zgit.core.object_store import read_object, store_object
from zgit.core.repository import init_repository

__all__ = ["app"]

app = typer.Typer(
    name="zgit",
    help="zgit: a minimal content-addressable version control store.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"zgit version {__version__}")
        raise typer.Exit()


def _fail(message: str) -> NoReturn:
    typer.secho(f"Error: {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(1)


def _settings(ctx: typer.Context) -> ZgitSettings:
    settings: ZgitSettings = ctx.obj
    return settings


@app.callback()
def main(
    ctx: typer.Context,
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    settings_file: Path | None = typer.Option(
        None,
        "--settings",
        "-s",
        help="Path to settings YAML file (ZGIT_* environment variables still apply).",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose/debug logging.",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Output structured JSON logs (for machine processing).",
    ),
) -> None:
    """zgit: a minimal content-addressable version control store."""
    from zgit.core.logging import configure_logging

    try:
        settings = load_settings(settings_file)
    except FileNotFoundError:
        _fail(f"Settings file not found: {settings_file}")
    except ValidationError as e:
        typer.echo("Configuration errors:", err=True)
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            typer.echo(f"  - {loc}: {error['msg']}", err=True)
        raise typer.Exit(1) from None

    log_level = "DEBUG" if verbose else settings.logging.level
    # stdout is reserved for command output (object ids, raw payloads)
    configure_logging(
        json_output=json_logs or settings.logging.json_output,
        level=log_level,
        stream=sys.stderr,
    )
    ctx.obj = settings


@app.command()
def init(
    ctx: typer.Context,
    path: Path = typer.Argument(Path("."), help="Directory to initialize (must exist)."),
) -> None:
    """Create an empty zgit repository, or report the one already enclosing PATH."""
    settings = _settings(ctx)
    try:
        result = init_repository(path, settings=settings)
    except ObjectStoreError as e:
        _fail(str(e))

    if result.created:
        typer.secho(f"Initialized empty zgit repository in {result.root / settings.marker}", fg=typer.colors.GREEN)
    else:
        typer.secho(f"Already a zgit repository in {result.root}", fg=typer.colors.GREEN)


@app.command("hash-object")
def hash_object(
    ctx: typer.Context,
    file: Path | None = typer.Argument(None, help="File whose content is hashed."),
    object_type: str = typer.Option("blob", "--type", "-t", help="Object kind: blob, tree, commit or tag."),
    write: bool = typer.Option(False, "--write", "-w", help="Store the object in the repository."),
    stdin: bool = typer.Option(False, "--stdin", help="Read the content from standard input."),
) -> None:
    """Print the object id of FILE (or stdin), optionally storing it."""
    settings = _settings(ctx)
    if stdin == (file is not None):
        _fail("Provide exactly one of FILE or --stdin")

    try:
        kind = parse_kind(object_type)
        if stdin:
            source = typer.get_binary_stream("stdin")
            oid = store_object(Path.cwd(), kind, source, settings=settings) if write else fingerprint(kind, source)
        else:
            assert file is not None
            try:
                with file.open("rb") as source:
                    oid = (
                        store_object(Path.cwd(), kind, source, settings=settings)
                        if write
                        else fingerprint(kind, source)
                    )
            except OSError as e:
                _fail(f"Cannot read {file}: {e.strerror or e}")
    except ObjectStoreError as e:
        _fail(str(e))

    typer.echo(oid.hex)


@app.command("cat-file")
def cat_file(
    ctx: typer.Context,
    obj: str = typer.Argument(..., metavar="OBJECT", help="Object id or unique prefix (at least 2 characters)."),
    show_type: bool = typer.Option(False, "-t", help="Show the object's kind."),
    show_size: bool = typer.Option(False, "-s", help="Show the object's payload size in bytes."),
    pretty: bool = typer.Option(False, "-p", help="Print the object's payload."),
) -> None:
    """Show the kind, size or payload of a stored object."""
    settings = _settings(ctx)
    if sum((show_type, show_size, pretty)) != 1:
        _fail("Specify exactly one of -t, -s or -p")

    try:
        kind, framed = read_object(Path.cwd(), obj, settings=settings)
        if show_type:
            typer.echo(kind.value)
        elif show_size:
            _, length, _ = parse_header(framed)
            typer.echo(str(length))
        else:
            typer.echo(payload_of(framed), nl=False)
    except ObjectStoreError as e:
        _fail(str(e))


if __name__ == "__main__":
    app()
