"""Forest consolidation: joins disconnected roots under one synthetic root."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from json_diagram.graph.nodes import DiagramConnector, DiagramNode

if TYPE_CHECKING:
    from json_diagram.graph.builder import GraphBuilder

__all__ = ["consolidate_forest", "find_root_ids"]

logger = logging.getLogger(__name__)


def find_root_ids(
    nodes: Iterable[DiagramNode], connectors: Iterable[DiagramConnector]
) -> list[str]:
    """Return ids of nodes that no connector targets, in node order."""
    targeted = {c.target_id for c in connectors}
    return [n.id for n in nodes if n.id not in targeted]


def consolidate_forest(builder: GraphBuilder) -> str | None:
    """Connect every root of a forest to a new synthetic root.

    Zero or one root: no-op.  Running it on a graph it already consolidated
    is also a no-op, since the synthetic root is then the only root.

    Returns:
        The synthetic root id if one was added, else ``None``.
    """
    root_ids = builder.root_ids()
    if len(root_ids) <= 1:
        return None

    main_root_id = builder.add_synthetic_root()
    for root_id in root_ids:
        builder.connect(main_root_id, root_id)
    logger.debug("Joined %d roots under synthetic root %r", len(root_ids), main_root_id)
    return main_root_id
