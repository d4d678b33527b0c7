"""Graph subpackage: JSON-to-diagram conversion primitives.

Re-exports the public API for the graph module:
- DiagramData, DiagramNode, DiagramConnector, Annotation, DisplayContent:
  the output model
- GraphBuilder: per-call context that accumulates nodes and connectors
- categorize_keys / child_count: shape classification
- resolve_root: top-level wrapper resolution
- emit_root: the traversal that fills a GraphBuilder
- consolidate_forest: joins disconnected roots under a synthetic root
- find_graph_issues: invariant checks for a finished graph
"""

from json_diagram.graph.builder import GraphBuilder
from json_diagram.graph.classifier import KeyCategories, categorize_keys, child_count
from json_diagram.graph.consolidator import consolidate_forest, find_root_ids
from json_diagram.graph.emitter import emit_root
from json_diagram.graph.identifiers import normalize_identifier
from json_diagram.graph.nodes import (
    Annotation,
    DiagramConnector,
    DiagramData,
    DiagramNode,
    DisplayContent,
)
from json_diagram.graph.root import RootResolution, resolve_root
from json_diagram.graph.validation import GraphIssue, IssueSeverity, find_graph_issues

__all__ = [
    "Annotation",
    "DiagramConnector",
    "DiagramData",
    "DiagramNode",
    "DisplayContent",
    "GraphBuilder",
    "GraphIssue",
    "IssueSeverity",
    "KeyCategories",
    "RootResolution",
    "categorize_keys",
    "child_count",
    "consolidate_forest",
    "emit_root",
    "find_graph_issues",
    "find_root_ids",
    "normalize_identifier",
    "resolve_root",
]
