from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from tracekit.config import TrackerSettings
from tracekit.facade import TrackerUtils
from tracekit.log import configure_logging

app = typer.Typer(help="Tracker payload utilities")
console = Console()

def _tracker(ctx: typer.Context) -> TrackerUtils:
    if ctx.obj is None:
        ctx.obj = TrackerUtils(TrackerSettings.from_env())
    return ctx.obj


def _parse_pairs(pairs: list[str]) -> dict[str, str]:
    payload: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"expected KEY=VALUE, got {pair!r}")
        payload[key] = value
    return payload


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Annotated[
        str | None,
        typer.Option("--log-level", "-l", help="Log level (default: TRACEKIT_LOG_LEVEL or WARNING)"),
    ] = None,
) -> None:
    """Configure settings and logging for every command."""
    settings = TrackerSettings.from_env()
    if log_level is not None:
        try:
            settings = TrackerSettings.model_validate({**settings.model_dump(), "log_level": log_level})
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--log-level") from exc
    configure_logging(settings.log_level)
    ctx.obj = TrackerUtils(settings)


@app.command()
def timestamp(ctx: typer.Context) -> None:
    """Print the current time in milliseconds since the unix epoch."""
    console.print(_tracker(ctx).timestamp_ms())


@app.command()
def guid(ctx: typer.Context) -> None:
    """Print a new random GUID."""
    console.print(_tracker(ctx).new_guid())


@app.command("json")
def to_json(
    ctx: typer.Context,
    pairs: Annotated[list[str], typer.Argument(help="Payload entries as KEY=VALUE")],
) -> None:
    """Print a payload as compact JSON."""
    text = _tracker(ctx).dict_to_json(_parse_pairs(pairs))
    if text is None:
        raise typer.Exit(code=1)
    console.print(text, markup=False, highlight=False, soft_wrap=True)


@app.command()
def query(
    ctx: typer.Context,
    pairs: Annotated[list[str], typer.Argument(help="Payload entries as KEY=VALUE")],
) -> None:
    """Print a payload as a querystring."""
    console.print(_tracker(ctx).to_query_string(_parse_pairs(pairs)), markup=False, highlight=False, soft_wrap=True)


@app.command()
def b64(
    ctx: typer.Context,
    text: Annotated[str, typer.Argument(help="Text to encode")],
) -> None:
    """Print the base64 form and UTF-8 byte length of text."""
    tracker = _tracker(ctx)
    table = Table(title="Encoded Text")
    table.add_column("field")
    table.add_column("value")
    table.add_row("base64", tracker.base64_encode(text))
    table.add_row("utf8_length", str(tracker.utf8_length(text)))
    console.print(table)


@app.command()
def write(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Blob file to write")],
    pairs: Annotated[list[str], typer.Argument(help="Payload entries as KEY=VALUE")],
) -> None:
    """Serialize a payload into a blob file."""
    payload = _parse_pairs(pairs)
    if not _tracker(ctx).write_payload_to_file(path, payload):
        console.print(f"Failed to write payload to {path}")
        raise typer.Exit(code=1)
    console.print(f"Wrote {len(payload)} entries to {path}")


@app.command()
def read(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Blob file to read")],
) -> None:
    """Print the payload stored in a blob file."""
    payload = _tracker(ctx).read_payload_from_file(path)
    if payload is None:
        console.print(f"Failed to read payload from {path}")
        raise typer.Exit(code=1)

    table = Table(title=str(path))
    table.add_column("key")
    table.add_column("value")
    for key, value in payload.items():
        table.add_row(key, "" if value is None else str(value))
    console.print(table)


if __name__ == "__main__":
    app()
