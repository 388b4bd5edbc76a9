"""
Exception hierarchy. Every error here is fatal to a run.
"""
from __future__ import annotations


class CanvasToolError(Exception):
    phase = "error"

    def __init__(self, cause: object, phase: str | None = None) -> None:
        self.cause = cause
        if phase is not None:
            self.phase = phase
        super().__init__(f"{self.phase}: {cause}")


class UsageError(CanvasToolError):
    phase = "usage"


class CanvasIOError(CanvasToolError):
    phase = "io"


class CanvasParseError(CanvasToolError):
    phase = "parse .canvas JSON"
