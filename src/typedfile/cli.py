"""CLI implementation for typedfile."""

import json
import logging
from pathlib import Path
from typing import Any, List, NoReturn, Optional, Tuple

import typer

from . import TypedFile, read, write, append, truncate, count
from .core.model import ElementKind, TypedFileError
from .core.util import join_values, parse_value, value_range

app = typer.Typer(add_completion=False, help="Read and write files of typed binary elements.")

_KIND_OPTION = typer.Option(ElementKind.INT32, "--kind", "-k", case_sensitive=False, help="Element kind stored in the file")


def _fail(err: Exception) -> NoReturn:
    typer.echo(f"Error: {err}", err=True)
    raise typer.Exit(code=1)


def collect_values(kind: ElementKind, values: Optional[List[str]], span: Optional[Tuple[int, int]]) -> List[Any]:
    """Turn positional values or a --range into typed values."""
    has_span = bool(span) and None not in span
    if values and has_span:
        raise ValueError("Give values or --range, not both")
    if has_span:
        return [parse_value(kind, str(i)) for i in value_range(*span)]
    return [parse_value(kind, v) for v in values or []]


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr"),
):
    """Read and write files of typed binary elements."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@app.command("read")
def read_cmd(
    path: Path = typer.Argument(..., help="File to read"),
    kind: ElementKind = _KIND_OPTION,
    sep: str = typer.Option(" ", "--sep", help="Separator printed after every element"),
    jsonl: bool = typer.Option(False, "--jsonl", help="Emit one JSON value per line"),
):
    """Print every element stored in PATH."""
    try:
        values = read(TypedFile(path, kind))
        if jsonl:
            for value in values:
                typer.echo(json.dumps(value))
        else:
            typer.echo(join_values(values, sep))
    except (TypedFileError, OSError) as e:
        _fail(e)


def _store(path: Path, kind: ElementKind, values: Optional[List[str]], span: Optional[Tuple[int, int]], *, extend: bool) -> int:
    try:
        items = collect_values(kind, values, span)
    except ValueError as e:
        _fail(e)
    file = TypedFile(path, kind)
    try:
        return append(file, items) if extend else write(file, items)
    except (TypedFileError, OSError) as e:
        _fail(e)


@app.command("write")
def write_cmd(
    path: Path = typer.Argument(..., help="File to overwrite"),
    values: Optional[List[str]] = typer.Argument(None, help="Values to store"),
    kind: ElementKind = _KIND_OPTION,
    span: Optional[Tuple[int, int]] = typer.Option(None, "--range", help="Store BEGIN..END (END excluded) instead of VALUES"),
):
    """Replace the contents of PATH with VALUES."""
    n = _store(path, kind, values, span, extend=False)
    typer.echo(f"wrote {n} {kind} elements to {path}")


@app.command("append")
def append_cmd(
    path: Path = typer.Argument(..., help="File to extend"),
    values: Optional[List[str]] = typer.Argument(None, help="Values to store"),
    kind: ElementKind = _KIND_OPTION,
    span: Optional[Tuple[int, int]] = typer.Option(None, "--range", help="Store BEGIN..END (END excluded) instead of VALUES"),
):
    """Append VALUES to the end of PATH."""
    n = _store(path, kind, values, span, extend=True)
    typer.echo(f"appended {n} {kind} elements to {path}")


@app.command("truncate")
def truncate_cmd(
    path: Path = typer.Argument(..., help="File to shrink"),
    elements: int = typer.Argument(..., min=0, help="Number of elements to keep"),
    kind: ElementKind = _KIND_OPTION,
):
    """Keep only the first ELEMENTS elements of PATH."""
    try:
        truncate(TypedFile(path, kind), elements)
    except (TypedFileError, OSError) as e:
        _fail(e)
    typer.echo(f"truncated {path} to {elements} {kind} elements")


@app.command("count")
def count_cmd(
    path: Path = typer.Argument(..., help="File to inspect"),
    kind: ElementKind = _KIND_OPTION,
):
    """Print the number of elements stored in PATH."""
    try:
        typer.echo(count(TypedFile(path, kind)))
    except (TypedFileError, OSError) as e:
        _fail(e)


@app.command("delete")
def delete_cmd(
    path: Path = typer.Argument(..., help="File to remove"),
):
    """Remove PATH if it exists."""
    try:
        removed = TypedFile(path, None).delete()
    except (TypedFileError, OSError) as e:
        _fail(e)
    typer.echo(f"deleted {path}" if removed else f"{path} does not exist")


if __name__ == "__main__":
    app()
