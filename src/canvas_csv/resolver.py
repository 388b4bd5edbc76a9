"""
Display-string resolution for nodes and edges.
"""
from __future__ import annotations

import posixpath
from typing import Callable, Dict, Iterator, Tuple

from .logger import get_logger
from .models import EMPTY_NODE, CanvasDocument, CanvasEdge, CanvasNode, EdgeRow

log = get_logger("resolver")


def base_name(path: str) -> str:
    """
    Last `/`-separated element, ignoring trailing slashes. An all-slash path is `/`.
    """
    if not path:
        return "."
    stripped = path.rstrip("/")
    if not stripped:
        return "/"
    return posixpath.basename(stripped)


def _file_display(node: CanvasNode, keep_path: bool) -> str:
    return node.file if keep_path else base_name(node.file)


# first non-empty wins
DISPLAY_PRECEDENCE: Tuple[Tuple[str, Callable[[CanvasNode, bool], str]], ...] = (
    ("text", lambda node, keep_path: node.text),
    ("label", lambda node, keep_path: node.label),
    ("file", _file_display),
    ("url", lambda node, keep_path: node.url),
    ("id", lambda node, keep_path: node.id),
)


def node_display(node: CanvasNode, keep_path: bool = False) -> str:
    if node.is_empty():
        return ""
    for field, accessor in DISPLAY_PRECEDENCE:
        if getattr(node, field):
            return accessor(node, keep_path)
    return ""


def edge_label(edge: CanvasEdge) -> str:
    return edge.label or edge.text


def single_line(value: str) -> str:
    value = value.replace("\r\n", "\n").replace("\r", "\n")
    return value.replace("\n", " ").strip()


class EdgeResolver:
    def __init__(self, document: CanvasDocument, keep_path: bool = False) -> None:
        self.document = document
        self.keep_path = keep_path
        self.index = self._build_index()
        self.dangling = 0

    def _build_index(self) -> Dict[str, CanvasNode]:
        index: Dict[str, CanvasNode] = {}
        for node in self.document.nodes:
            if node.id in index:
                log.debug("duplicate node id %r, keeping the later node", node.id)
            index[node.id] = node
        return index

    def lookup(self, node_id: str) -> CanvasNode:
        node = self.index.get(node_id)
        if node is None:
            self.dangling += 1
            log.debug("edge endpoint %r matches no node", node_id)
            return EMPTY_NODE
        return node

    def resolve(self, edge: CanvasEdge) -> EdgeRow:
        from_node = self.lookup(edge.fromNode)
        to_node = self.lookup(edge.toNode)
        return EdgeRow(
            from_display=single_line(node_display(from_node, self.keep_path)),
            label=single_line(edge_label(edge)),
            to_display=single_line(node_display(to_node, self.keep_path)),
        )

    def rows(self) -> Iterator[EdgeRow]:
        for edge in self.document.edges:
            yield self.resolve(edge)
