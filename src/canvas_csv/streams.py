"""
Byte source and CSV sink, each bound to a file path or to stdio via `-`.
"""
from __future__ import annotations

import csv
import io
import sys
from contextlib import contextmanager
from typing import IO, Iterable, Iterator, List

from .config import settings
from .errors import CanvasIOError
from .logger import get_logger

log = get_logger("streams")


def strip_bom(data: bytes) -> bytes:
    if data.startswith(settings.bom):
        return data[len(settings.bom):]
    return data


def read_source(path: str) -> bytes:
    """
    Read the whole input. The file handle is closed before returning, on success or failure.
    """
    if path == settings.stdio_sentinel:
        try:
            data = sys.stdin.buffer.read()
        except OSError as exc:
            raise CanvasIOError(exc, phase="read input") from exc
        log.debug("read %d bytes from stdin", len(data))
        return strip_bom(data)

    try:
        handle = open(path, "rb")
    except OSError as exc:
        raise CanvasIOError(exc, phase="open input") from exc
    with handle:
        try:
            data = handle.read()
        except OSError as exc:
            raise CanvasIOError(exc, phase="read input") from exc
    log.debug("read %d bytes from %s", len(data), path)
    return strip_bom(data)


@contextmanager
def open_sink(path: str) -> Iterator[IO[str]]:
    """
    Yield a UTF-8 text stream with no newline translation. Files are created or
    truncated and always closed; stdout is flushed and detached, never closed.
    """
    if path == settings.stdio_sentinel:
        sys.stdout.flush()
        stream = io.TextIOWrapper(sys.stdout.buffer, encoding="utf-8", newline="")
        try:
            yield stream
        finally:
            try:
                stream.detach()
            except OSError as exc:
                raise CanvasIOError(exc, phase="flush csv") from exc
        return

    try:
        handle = open(path, "w", encoding="utf-8", newline="")
    except OSError as exc:
        raise CanvasIOError(exc, phase="open output") from exc
    try:
        yield handle
    finally:
        try:
            handle.close()
        except OSError as exc:
            raise CanvasIOError(exc, phase="close output") from exc


def csv_writer(stream: IO[str]):
    return csv.writer(
        stream,
        delimiter=settings.delimiter,
        lineterminator=settings.line_terminator,
        quoting=csv.QUOTE_MINIMAL,
    )


def write_rows(rows: Iterable[List[str]], stream: IO[str]) -> int:
    writer = csv_writer(stream)
    count = 0
    for row in rows:
        try:
            writer.writerow(row)
        except (OSError, UnicodeError, csv.Error) as exc:
            raise CanvasIOError(exc, phase="write csv") from exc
        count += 1
    try:
        stream.flush()
    except (OSError, UnicodeError) as exc:
        raise CanvasIOError(exc, phase="flush csv") from exc
    return count
