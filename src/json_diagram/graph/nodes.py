"""Dataclasses for the node-and-connector graph handed to the renderer.

Python attribute names are snake_case; ``to_dict()`` produces the camelCase
shape the diagram front-end consumes (``additionalInfo``, ``sourceID``,
``data.actualdata`` and so on).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

__all__ = [
    "Annotation",
    "DiagramConnector",
    "DiagramData",
    "DiagramNode",
    "DisplayContent",
]


@dataclass(frozen=True, slots=True)
class Annotation:
    """One label fragment drawn inside a node.

    Attributes:
        content: The text to draw.
        id:      Optional addressable id.  Key/value labels of leaf nodes
                 carry ``Key_<node>_<key>`` / ``Value_<node>_<key>`` ids so a
                 renderer can style them individually; container labels
                 have none.
    """

    content: str
    id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        if self.id is None:
            return {"content": self.content}
        return {"id": self.id, "content": self.content}


@dataclass(frozen=True, slots=True)
class DisplayContent:
    """Structured label of a keyed container node: key names + child count."""

    keys: tuple[str, ...]
    display_value: int

    def to_dict(self) -> dict[str, Any]:
        return {"key": list(self.keys), "displayValue": self.display_value}


@dataclass(slots=True)
class DiagramNode:
    """One visual box in the diagram.

    Attributes:
        id:              Unique within one ``DiagramData``.
        width:           Box width.
        height:          Box height.
        annotations:     Ordered label fragments.
        is_leaf:         True for nodes holding terminal scalar values.
        path:            Traversal route in the source JSON, e.g.
                         ``Root.address[2].city``.  Descriptive only.
        title:           Human-readable one-string summary.
        raw_content:     Same text as ``title``; kept separate because
                         renderers treat it as the copyable payload.
        merged_content:  ``"key {count}"`` fallback label for keyed containers.
        display_content: Key names and child count for keyed containers.
    """

    id: str
    width: float
    height: float
    annotations: list[Annotation]
    is_leaf: bool
    path: str
    title: str
    raw_content: str
    merged_content: str | None = None
    display_content: DisplayContent | None = None

    def to_dict(self) -> dict[str, Any]:
        additional_info: dict[str, Any] = {"isLeaf": self.is_leaf}
        if self.merged_content is not None:
            additional_info["mergedContent"] = self.merged_content

        data: dict[str, Any] = {
            "path": self.path,
            "title": self.title,
            "actualdata": self.raw_content,
        }
        if self.display_content is not None:
            data["displayContent"] = self.display_content.to_dict()

        return {
            "id": self.id,
            "width": self.width,
            "height": self.height,
            "annotations": [a.to_dict() for a in self.annotations],
            "additionalInfo": additional_info,
            "data": data,
        }


@dataclass(frozen=True, slots=True)
class DiagramConnector:
    """A directed edge from a parent node to a child node."""

    id: str
    source_id: str
    target_id: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "sourceID": self.source_id, "targetID": self.target_id}


@dataclass(slots=True)
class DiagramData:
    """The output graph: insertion-ordered nodes and connectors.

    An empty ``DiagramData`` means "nothing to render", not an error.
    """

    nodes: list[DiagramNode] = field(default_factory=list)
    connectors: list[DiagramConnector] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.nodes and not self.connectors

    def node(self, node_id: str) -> DiagramNode:
        """Return the node with ``node_id``.

        Raises:
            KeyError: If no node has that id.
        """
        for candidate in self.nodes:
            if candidate.id == node_id:
                return candidate
        raise KeyError(node_id)

    def children(self, node_id: str) -> list[DiagramNode]:
        """Return the direct children of ``node_id`` in connector order."""
        by_id = {n.id: n for n in self.nodes}
        return [
            by_id[c.target_id]
            for c in self.connectors
            if c.source_id == node_id and c.target_id in by_id
        ]

    def to_dict(self) -> dict[str, Any]:
        return {
            "nodes": [n.to_dict() for n in self.nodes],
            "connectors": [c.to_dict() for c in self.connectors],
        }
