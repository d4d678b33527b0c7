"""json-diagram - turn arbitrary JSON into node-and-connector diagrams."""

from __future__ import annotations

from json_diagram.api import process_data, process_json
from json_diagram.config import DiagramConfig
from json_diagram.graph.nodes import (
    Annotation,
    DiagramConnector,
    DiagramData,
    DiagramNode,
    DisplayContent,
)
from json_diagram.graph.validation import find_graph_issues
from json_diagram.id_sources import CounterIdSource, RandomIdSource
from json_diagram.protocols import IdSource
from json_diagram.theme import ThemeMode, ThemeService, ThemeSettings, theme_settings

__version__: str = "0.1.0"
__all__: list[str] = [
    "Annotation",
    "CounterIdSource",
    "DiagramConfig",
    "DiagramConnector",
    "DiagramData",
    "DiagramNode",
    "DisplayContent",
    "IdSource",
    "RandomIdSource",
    "ThemeMode",
    "ThemeService",
    "ThemeSettings",
    "find_graph_issues",
    "process_data",
    "process_json",
    "theme_settings",
]
