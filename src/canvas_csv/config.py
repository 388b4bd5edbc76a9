"""
Central configuration for the canvas converter.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from .errors import UsageError

__version__ = "0.1.0"


class Settings(BaseModel):
    tool_name: str = "canvas-csv"
    stdio_sentinel: str = "-"
    delimiter: str = ";"
    line_terminator: str = "\n"
    bom: bytes = b"\xef\xbb\xbf"
    output_suffix: str = ".csv"
    log_level: str = "WARNING"


settings = Settings()


class ConvertOptions(BaseModel):
    in_path: str
    out_path: str
    keep_path: bool = False


def default_output(in_path: str) -> str:
    """
    `-` stays on stdout; anything else becomes the input file name, with
    everything from its last dot replaced by .csv, in the working directory.
    """
    if in_path == settings.stdio_sentinel:
        return settings.stdio_sentinel
    name = Path(in_path).name
    dot = name.rfind(".")
    if dot >= 0:
        name = name[:dot]
    return name + settings.output_suffix


def resolve_options(
    in_path: Optional[str],
    positional: Optional[str] = None,
    out_path: Optional[str] = None,
    keep_path: bool = False,
) -> ConvertOptions:
    in_path = in_path or positional
    if not in_path:
        raise UsageError("missing --in (or first arg)")
    return ConvertOptions(
        in_path=in_path,
        out_path=out_path or default_output(in_path),
        keep_path=keep_path,
    )
