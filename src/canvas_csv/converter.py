"""
End-to-end conversion: load, parse, resolve, write.
"""
from __future__ import annotations

import io

from .config import ConvertOptions
from .logger import get_logger
from .parser import parse_canvas
from .resolver import EdgeResolver
from .streams import open_sink, read_source, strip_bom, write_rows

log = get_logger("converter")


def convert(options: ConvertOptions) -> int:
    data = read_source(options.in_path)
    document = parse_canvas(data)
    resolver = EdgeResolver(document, keep_path=options.keep_path)
    rows = (row.as_row() for row in resolver.rows())
    # output is only opened once the input parsed, so bad input leaves it untouched
    with open_sink(options.out_path) as stream:
        count = write_rows(rows, stream)
    log.info(
        "wrote %d rows from %d nodes to %s (%d dangling endpoints)",
        count,
        len(document.nodes),
        options.out_path,
        resolver.dangling,
    )
    return count


def convert_bytes(data: bytes, keep_path: bool = False) -> str:
    document = parse_canvas(strip_bom(data))
    resolver = EdgeResolver(document, keep_path=keep_path)
    buffer = io.StringIO(newline="")
    write_rows((row.as_row() for row in resolver.rows()), buffer)
    return buffer.getvalue()
