"""GraphBuilder: the mutable per-call context that accumulates the output graph.

One GraphBuilder is created per ``process_data`` call and threaded through
the emitter and the forest consolidator.  It owns the node and connector
lists, the set of ids already handed out, and the injected IdSource, so no
state is shared between calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from json_diagram.graph.consolidator import find_root_ids
from json_diagram.graph.nodes import (
    Annotation,
    DiagramConnector,
    DiagramData,
    DiagramNode,
    DisplayContent,
)

if TYPE_CHECKING:
    from json_diagram.config import DiagramConfig
    from json_diagram.protocols import IdSource

__all__ = ["GraphBuilder"]


class GraphBuilder:
    """Accumulates nodes and connectors in insertion order.

    Every ``add_*`` method takes a *candidate* id and returns the id that was
    actually assigned.  Candidates are used verbatim unless already taken,
    in which case ``-2``, ``-3``, ... is appended until the id is free.
    Callers must derive child ids from the returned id.
    """

    def __init__(self, config: DiagramConfig, id_source: IdSource) -> None:
        self.config = config
        self._id_source = id_source
        self._nodes: list[DiagramNode] = []
        self._connectors: list[DiagramConnector] = []
        self._ids: set[str] = set()

    # ------------------------------------------------------------------
    # Ids
    # ------------------------------------------------------------------

    def suffix(self) -> str:
        """Return the next random suffix from the injected IdSource."""
        return self._id_source.next_id()

    def _claim(self, candidate: str) -> str:
        node_id = candidate
        n = 2
        while node_id in self._ids:
            node_id = f"{candidate}-{n}"
            n += 1
        self._ids.add(node_id)
        return node_id

    # ------------------------------------------------------------------
    # Nodes
    # ------------------------------------------------------------------

    def add_leaf(
        self,
        candidate_id: str,
        fields: list[tuple[str, str]] | None,
        content: str,
        path: str,
    ) -> str:
        """Add a leaf node.

        Args:
            candidate_id: Preferred id.
            fields:       ``(key, value_label)`` pairs for a node that
                          merges primitive fields; each contributes a key and a
                          value annotation.  ``None`` for a bare scalar leaf
                          whose only annotation is ``content``.
            content:      Title / raw content of the node.
            path:         Traversal path.
        """
        node_id = self._claim(candidate_id)
        if fields is None:
            annotations = [Annotation(content=content)]
        else:
            annotations = []
            for key, value_label in fields:
                annotations.append(Annotation(content=f"{key}:", id=f"Key_{node_id}_{key}"))
                annotations.append(Annotation(content=value_label, id=f"Value_{node_id}_{key}"))
        self._nodes.append(
            DiagramNode(
                id=node_id,
                width=self.config.node_width,
                height=self.config.node_height,
                annotations=annotations,
                is_leaf=True,
                path=path,
                title=content,
                raw_content=content,
            )
        )
        return node_id

    def add_container(self, candidate_id: str, key: str, count: int, path: str) -> str:
        """Add a keyed container node with a ``{count}`` badge when count > 0."""
        node_id = self._claim(candidate_id)
        annotations = [Annotation(content=key)]
        if count > 0:
            annotations.append(Annotation(content=f"{{{count}}}"))
        self._nodes.append(
            DiagramNode(
                id=node_id,
                width=self.config.node_width,
                height=self.config.node_height,
                annotations=annotations,
                is_leaf=False,
                path=path,
                title=key,
                raw_content=key,
                merged_content=f"{key} {{{count}}}",
                display_content=DisplayContent(keys=(key,), display_value=count),
            )
        )
        return node_id

    def add_label_container(self, candidate_id: str, label: str, path: str) -> str:
        """Add an unkeyed container node such as ``Item 3``."""
        node_id = self._claim(candidate_id)
        self._nodes.append(
            DiagramNode(
                id=node_id,
                width=self.config.node_width,
                height=self.config.node_height,
                annotations=[Annotation(content=label)],
                is_leaf=False,
                path=path,
                title=label,
                raw_content=label,
            )
        )
        return node_id

    def add_synthetic_root(self) -> str:
        """Add the small, unlabeled root used by forest consolidation."""
        config = self.config
        node_id = self._claim(config.main_root_id)
        self._nodes.append(
            DiagramNode(
                id=node_id,
                width=config.artificial_root_size,
                height=config.artificial_root_size,
                annotations=[Annotation(content="")],
                is_leaf=False,
                path=config.main_root_path,
                title=config.main_root_title,
                raw_content="",
            )
        )
        return node_id

    # ------------------------------------------------------------------
    # Connectors
    # ------------------------------------------------------------------

    def connect(self, source_id: str, target_id: str) -> DiagramConnector:
        """Add a connector between two nodes already in the graph.

        Raises:
            ValueError: If either endpoint is unknown.
        """
        for endpoint in (source_id, target_id):
            if endpoint not in self._ids:
                msg = f"connector endpoint {endpoint!r} is not a node in this graph"
                raise ValueError(msg)
        connector = DiagramConnector(
            id=f"connector-{source_id}-{target_id}",
            source_id=source_id,
            target_id=target_id,
        )
        self._connectors.append(connector)
        return connector

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def root_ids(self) -> list[str]:
        """Ids of nodes that no connector targets, in node order."""
        return find_root_ids(self._nodes, self._connectors)

    def build(self) -> DiagramData:
        """Return the accumulated graph as a fresh DiagramData."""
        return DiagramData(nodes=list(self._nodes), connectors=list(self._connectors))
