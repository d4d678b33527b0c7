"""Public API functions for json-diagram.

``process_data`` turns an arbitrary JSON value into a node-and-connector
graph; ``process_json`` does the same for JSON text.  Each call creates a
fresh GraphBuilder, so calls never share state.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from json_diagram.config import DiagramConfig
from json_diagram.graph.builder import GraphBuilder
from json_diagram.graph.consolidator import consolidate_forest
from json_diagram.graph.emitter import emit_root
from json_diagram.graph.nodes import DiagramData
from json_diagram.graph.root import is_valid_input, resolve_root
from json_diagram.id_sources import RandomIdSource
from json_diagram.protocols import IdSource

__all__ = ["process_data", "process_json"]

logger = logging.getLogger(__name__)


def process_data(
    value: Any,
    config: DiagramConfig | None = None,
    id_source: IdSource | None = None,
) -> DiagramData:
    """Convert a JSON value into diagram nodes and connectors.

    Anything other than a non-empty JSON object yields an empty
    ``DiagramData``: callers should treat that as "nothing to render".

    Args:
        value:     A decoded JSON value (dict, list, str, int, float, bool,
                   None).
        config:    Node sizes and root labels.  Defaults to
                   ``DiagramConfig()`` when None.
        id_source: Provider of the random suffixes on leaf and array-item
                   ids.  Defaults to a fresh ``RandomIdSource()``; pass a
                   seeded or counting source for reproducible ids.

    Returns:
        A ``DiagramData`` whose node ids are unique and whose connectors all
        reference nodes in the same graph.
    """
    if not is_valid_input(value):
        logger.debug(
            "Nothing to draw for %s input; returning empty graph", type(value).__name__
        )
        return DiagramData()

    config = config if config is not None else DiagramConfig()
    builder = GraphBuilder(
        config, id_source if id_source is not None else RandomIdSource()
    )

    resolution = resolve_root(value, config)
    anchor_id = emit_root(builder, resolution)

    if anchor_id is None and (
        resolution.skip_empty_root or len(builder.root_ids()) > 1
    ):
        consolidate_forest(builder)

    graph = builder.build()
    logger.debug(
        "Built diagram with %d nodes and %d connectors",
        len(graph.nodes),
        len(graph.connectors),
    )
    return graph


def process_json(
    text: str | bytes,
    config: DiagramConfig | None = None,
    id_source: IdSource | None = None,
) -> DiagramData:
    """Decode JSON text and pass the result to ``process_data``.

    Raises:
        json.JSONDecodeError: If ``text`` is not valid JSON.
    """
    return process_data(json.loads(text), config=config, id_source=id_source)
