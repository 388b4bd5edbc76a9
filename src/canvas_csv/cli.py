"""
Typer-powered CLI converting a .canvas document into from;label;to CSV rows.
"""
from __future__ import annotations

from typing import Optional

import typer

from .config import __version__, resolve_options, settings
from .converter import convert
from .errors import CanvasToolError
from .logger import configure_logging, err_console

app = typer.Typer(add_completion=False, help="Convert a .canvas graph into a semicolon-separated edge list")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{settings.tool_name} {__version__}")
        raise typer.Exit()


@app.command()
def main(
    input_file: Optional[str] = typer.Argument(None, metavar="INPUT", help="Input .canvas path (or - for stdin)"),
    in_path: Optional[str] = typer.Option(None, "--in", "-i", help="Input .canvas path (or - for stdin)"),
    out_path: Optional[str] = typer.Option(
        None, "--out", "-o", help="Output .csv path (or - for stdout). Default: input basename + .csv"
    ),
    keep_path: bool = typer.Option(False, "--keep-path", help="For file nodes, keep the full path instead of the base name"),
    verbose: int = typer.Option(0, "--verbose", "-v", count=True, help="Log progress to stderr (-vv for debug)"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
    ),
):
    """
    Write one from;label;to row per canvas edge, in edge order.
    """
    configure_logging(verbose)
    try:
        options = resolve_options(in_path, input_file, out_path, keep_path)
        convert(options)
    except CanvasToolError as exc:
        err_console.print(f"{settings.tool_name}: {exc}", markup=False, emoji=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
