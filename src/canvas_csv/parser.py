"""
Two-stage canvas decoding: a strict schema first, then a lenient one that
ignores unknown properties.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from pydantic import ValidationError

from .errors import CanvasParseError
from .logger import get_logger
from .models import CanvasDocument, LenientCanvasDocument

log = get_logger("parser")

_ESCAPE_RE = re.compile(
    r"\\u([dD][89abAB][0-9a-fA-F]{2})\\u([dD][c-fC-F][0-9a-fA-F]{2})"
    r"|(\\u[dD][89a-fA-F][0-9a-fA-F]{2})"
    r"|\\.",
    re.DOTALL,
)


@dataclass
class ParseResult:
    ok: bool
    document: Optional[CanvasDocument] = None
    error: str = ""
    lenient: bool = False


def describe_error(exc: ValueError) -> str:
    """
    Collapse a pydantic ValidationError into a single diagnostic line.
    """
    if not isinstance(exc, ValidationError):
        return str(exc).replace("\n", " ")
    parts = []
    for err in exc.errors():
        location = ".".join(str(part) for part in err["loc"])
        message = err["msg"]
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or str(exc).replace("\n", " ")


def strict_decode(data: bytes) -> CanvasDocument:
    return CanvasDocument.model_validate_json(data)


def replace_lone_surrogates(text: str) -> str:
    """
    Swap `\\uD800`-style escapes that do not form a surrogate pair for `\\uFFFD`.
    """

    def substitute(match: re.Match) -> str:
        return "\\ufffd" if match.group(3) else match.group(0)

    return _ESCAPE_RE.sub(substitute, text)


def lenient_decode(data: bytes) -> CanvasDocument:
    text = replace_lone_surrogates(data.decode("utf-8", errors="replace"))
    return LenientCanvasDocument.model_validate_json(text)


def parse_with_recovery(data: bytes) -> ParseResult:
    try:
        return ParseResult(ok=True, document=strict_decode(data))
    except ValueError as strict_exc:
        strict_error = describe_error(strict_exc)

    try:
        document = lenient_decode(data)
    except ValueError:
        return ParseResult(ok=False, error=strict_error)
    log.info("strict decode failed (%s), accepted with lenient schema", strict_error)
    return ParseResult(ok=True, document=document, lenient=True)


def parse_canvas(data: bytes) -> CanvasDocument:
    result = parse_with_recovery(data)
    if not result.ok:
        raise CanvasParseError(result.error)
    return result.document
