"""Root resolution: decides how the outermost JSON layer is treated.

Runs before key categorization because it decides which object's keys are
inspected first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from json_diagram.config import DiagramConfig
from json_diagram.graph.classifier import as_mapping, is_nested
from json_diagram.graph.identifiers import is_blank

__all__ = ["RootResolution", "is_valid_input", "resolve_root"]


@dataclass(frozen=True, slots=True)
class RootResolution:
    """Outcome of root resolution.

    Attributes:
        data:            The object whose keys form the top level.
        root_label:      Semantic label for the top-level anchor.
        skip_empty_root: True when a blank-key wrapper was unwrapped.
    """

    data: dict[str, Any]
    root_label: str
    skip_empty_root: bool


def is_valid_input(value: Any) -> bool:
    """True only for a non-empty JSON object."""
    return isinstance(value, dict) and len(value) > 0


def resolve_root(value: dict[str, Any], config: DiagramConfig) -> RootResolution:
    """Resolve the top level of a valid input object.

    - One blank key holding an object or array: the wrapper is transparent
      and its value becomes the top level.  An array is viewed as an object
      keyed by index.
    - One named key holding an object or array: the key becomes the root
      label; the input is still processed as-is.
    - Anything else: the default root label.
    """
    if len(value) == 1:
        ((key, inner),) = value.items()
        if is_nested(inner):
            if is_blank(key):
                return RootResolution(
                    data=as_mapping(inner),
                    root_label=config.default_root_label,
                    skip_empty_root=True,
                )
            return RootResolution(data=value, root_label=key, skip_empty_root=False)

    return RootResolution(
        data=value, root_label=config.default_root_label, skip_empty_root=False
    )
