"""
Data models for canvas documents and the rows derived from them.
"""
from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class CanvasNode(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: str = ""
    type: str = ""
    text: str = ""
    file: str = ""
    url: str = ""
    label: str = ""

    @field_validator("id", "type", "text", "file", "url", "label", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    def is_empty(self) -> bool:
        return not any((self.id, self.type, self.text, self.file, self.url, self.label))


class CanvasEdge(BaseModel):
    model_config = ConfigDict(extra="forbid")

    fromNode: str = ""
    toNode: str = ""
    label: str = ""
    # some exports carry the edge caption as "text"
    text: str = ""

    @field_validator("fromNode", "toNode", "label", "text", mode="before")
    @classmethod
    def null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class CanvasDocument(BaseModel):
    model_config = ConfigDict(extra="forbid")

    nodes: List[CanvasNode] = Field(default_factory=list)
    edges: List[CanvasEdge] = Field(default_factory=list)

    @field_validator("nodes", "edges", mode="before")
    @classmethod
    def null_as_list(cls, value: Any) -> Any:
        return [] if value is None else value


class LenientCanvasNode(CanvasNode):
    model_config = ConfigDict(extra="ignore")


class LenientCanvasEdge(CanvasEdge):
    model_config = ConfigDict(extra="ignore")


class LenientCanvasDocument(CanvasDocument):
    model_config = ConfigDict(extra="ignore")

    nodes: List[LenientCanvasNode] = Field(default_factory=list)
    edges: List[LenientCanvasEdge] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def null_as_empty_document(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator("nodes", "edges", mode="before")
    @classmethod
    def null_as_list(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, list):
            # null elements become zero-value nodes and edges
            return [{} if item is None else item for item in value]
        return value


EMPTY_NODE = CanvasNode()


class EdgeRow(BaseModel):
    from_display: str = ""
    label: str = ""
    to_display: str = ""

    def as_row(self) -> List[str]:
        return [self.from_display, self.label, self.to_display]
