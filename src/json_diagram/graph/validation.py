"""Graph validation - check an output graph for structural issues.

Used by the pytest plugin and by consumers that load graphs produced
elsewhere before handing them to a renderer.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from json_diagram.graph.consolidator import find_root_ids
from json_diagram.graph.nodes import DiagramData

__all__ = ["GraphIssue", "IssueSeverity", "find_graph_issues"]


class IssueSeverity(StrEnum):
    """Severity levels for validation issues."""

    ERROR = auto()  # renderer cannot draw the graph correctly
    WARNING = auto()  # drawable, but probably not what the caller wants


@dataclass(frozen=True, slots=True)
class GraphIssue:
    """A single issue found in a graph."""

    severity: IssueSeverity
    message: str
    node_id: str | None = None
    connector_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"type": str(self.severity), "message": self.message}
        if self.node_id is not None:
            result["node_id"] = self.node_id
        if self.connector_id is not None:
            result["connector_id"] = self.connector_id
        return result


def find_graph_issues(
    graph: DiagramData, *, require_single_root: bool = False
) -> list[GraphIssue]:
    """Validate a graph and return every issue found.

    Checks for:
    - Duplicate node ids - ERROR
    - Connectors whose source or target is not a node - ERROR
    - Nodes with more than one incoming connector - ERROR
    - Duplicate connector ids - WARNING
    - More than one root - ERROR when ``require_single_root``, else WARNING

    An empty graph has no issues.
    """
    issues: list[GraphIssue] = []

    node_ids = Counter(n.id for n in graph.nodes)
    for node_id, count in node_ids.items():
        if count > 1:
            issues.append(
                GraphIssue(
                    IssueSeverity.ERROR,
                    f"Node id {node_id!r} is used by {count} nodes",
                    node_id=node_id,
                )
            )

    incoming: Counter[str] = Counter()
    for connector in graph.connectors:
        for role, endpoint in (
            ("source", connector.source_id),
            ("target", connector.target_id),
        ):
            if endpoint not in node_ids:
                issues.append(
                    GraphIssue(
                        IssueSeverity.ERROR,
                        f"Connector {role} {endpoint!r} does not exist",
                        connector_id=connector.id,
                    )
                )
        incoming[connector.target_id] += 1

    for node_id, count in incoming.items():
        if count > 1 and node_id in node_ids:
            issues.append(
                GraphIssue(
                    IssueSeverity.ERROR,
                    f"Node {node_id!r} has {count} parents",
                    node_id=node_id,
                )
            )

    connector_ids = Counter(c.id for c in graph.connectors)
    for connector_id, count in connector_ids.items():
        if count > 1:
            issues.append(
                GraphIssue(
                    IssueSeverity.WARNING,
                    f"Connector id {connector_id!r} is used {count} times",
                    connector_id=connector_id,
                )
            )

    root_ids = find_root_ids(graph.nodes, graph.connectors)
    if len(root_ids) > 1:
        severity = IssueSeverity.ERROR if require_single_root else IssueSeverity.WARNING
        issues.append(
            GraphIssue(severity, f"Graph has {len(root_ids)} roots: {root_ids}")
        )

    return issues
