"""DiagramConfig: immutable settings for the JSON-to-diagram transform.

DiagramConfig is a frozen (immutable) dataclass holding node sizes and the
fixed labels used for root anchors, the transparent-wrapper data root, and the
synthetic root added by forest consolidation.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DiagramConfig"]


@dataclass(frozen=True, slots=True)
class DiagramConfig:
    """Immutable configuration for ``process_data``.

    Attributes:
        node_width: Width assigned to every regular node (> 0).
        node_height: Height assigned to every regular node (> 0).
        artificial_root_size: Width and height of the synthetic root (> 0).
        default_root_label: Root label used when the input is not a
            single-key wrapper.
        data_root_label: Root label used for primitive fields surfacing
            directly under a transparent (blank-key) wrapper.
        main_root_id: Node id of the synthetic consolidation root.
        root_path: Path prefix of every node emitted from the top level.
        main_root_path: Path of the synthetic consolidation root.
        main_root_title: Title of the synthetic consolidation root.
    """

    node_width: float = 150
    node_height: float = 50
    artificial_root_size: float = 40
    default_root_label: str = "root"
    data_root_label: str = "data-root"
    main_root_id: str = "main-root"
    root_path: str = "Root"
    main_root_path: str = "MainRoot"
    main_root_title: str = "Main Artificial Root"

    def __post_init__(self) -> None:
        for name in ("node_width", "node_height", "artificial_root_size"):
            size = getattr(self, name)
            if size <= 0:
                msg = f"{name} must be > 0, got {size}"
                raise ValueError(msg)
        for name in (
            "default_root_label",
            "data_root_label",
            "main_root_id",
            "root_path",
        ):
            if not getattr(self, name).strip():
                msg = f"{name} must be a non-blank string"
                raise ValueError(msg)
