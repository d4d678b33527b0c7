"""Node/connector emission: walks a JSON tree and fills a GraphBuilder.

The walk is depth-first pre-order, driven by an explicit work stack so that
arbitrarily deep input never hits Python's recursion limit.  Pending work is
pushed in reverse so it pops in document order; the resulting node and
connector order is exactly that of the equivalent recursive walk.

Emission rules:

- Object: all primitive fields merge into one leaf (``<parent>-leaf-<suffix>``)
  connected to the parent; every non-empty nested field becomes a keyed
  container (``<parent>-<key>``) connected to the parent and is walked.
- Array: null items are skipped.  For item ``i`` the base id is
  ``<parent>-<i>``:

  * scalar (or nested array) item -> leaf ``<base>-<suffix>``;
  * object item with primitives, or with more than one nested field ->
    an intermediate node (a leaf merging the primitives, else an
    ``Item <i>`` container) whose nested fields hang below it;
  * object item with exactly one nested field and no primitives ->
    pass-through: the field's container connects straight to the array.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from json_diagram.graph.classifier import (
    categorize_keys,
    child_count,
    format_field_value,
    format_value,
    is_empty,
)
from json_diagram.graph.identifiers import is_blank, normalize_identifier

if TYPE_CHECKING:
    from json_diagram.graph.builder import GraphBuilder
    from json_diagram.graph.root import RootResolution

__all__ = ["emit_root"]


@dataclass(frozen=True, slots=True)
class _PendingContainer:
    """A keyed container still to be emitted, then walked."""

    key: str
    value: Any
    candidate_id: str
    parent_id: str | None
    path: str


@dataclass(frozen=True, slots=True)
class _PendingItem:
    """An array item still to be emitted."""

    item: Any
    index: int
    parent_id: str
    array_path: str


_Work = _PendingContainer | _PendingItem


def emit_root(builder: GraphBuilder, resolution: RootResolution) -> str | None:
    """Emit the top level of a resolved input and everything below it.

    Args:
        builder:    Per-call graph context.
        resolution: Output of ``resolve_root``.

    Returns:
        The id of the root anchor leaf when the top level has primitive
        fields, else ``None``.  Top-level containers are connected to the
        anchor only when it exists.
    """
    config = builder.config
    data = resolution.data
    categories = categorize_keys(data)

    anchor_id: str | None = None
    if categories.primitive_keys:
        label = (
            config.data_root_label
            if resolution.skip_empty_root
            else normalize_identifier(resolution.root_label)
        )
        anchor_id = builder.add_leaf(
            f"{label}-{builder.suffix()}",
            _field_labels(data, categories.primitive_keys),
            _field_lines(data, categories.primitive_keys),
            config.root_path,
        )

    stack: list[_Work] = [
        _PendingContainer(
            key=key,
            value=data[key],
            candidate_id=normalize_identifier(
                config.data_root_label if is_blank(key) else key
            ),
            parent_id=anchor_id,
            path=f"{config.root_path}.{key}",
        )
        for key in reversed(categories.nested_keys)
        if not is_empty(data[key])
    ]
    _drain(builder, stack)
    return anchor_id


def _drain(builder: GraphBuilder, stack: list[_Work]) -> None:
    while stack:
        work = stack.pop()
        if isinstance(work, _PendingItem):
            _emit_item(builder, work, stack)
        else:
            _emit_container(builder, work, stack)


def _emit_container(
    builder: GraphBuilder, work: _PendingContainer, stack: list[_Work]
) -> None:
    node_id = builder.add_container(
        work.candidate_id, work.key, child_count(work.value), work.path
    )
    if work.parent_id is not None:
        builder.connect(work.parent_id, node_id)
    _expand(builder, work.value, node_id, work.path, stack)


def _expand(
    builder: GraphBuilder, value: Any, parent_id: str, path: str, stack: list[_Work]
) -> None:
    """Emit what belongs directly under ``parent_id`` and queue the rest."""
    if isinstance(value, list):
        stack.extend(
            _PendingItem(item=item, index=idx, parent_id=parent_id, array_path=path)
            for idx, item in reversed(list(enumerate(value)))
            if item is not None
        )
        return

    if not isinstance(value, dict):
        return

    categories = categorize_keys(value)
    if categories.primitive_keys:
        leaf_id = builder.add_leaf(
            f"{parent_id}-leaf-{builder.suffix()}",
            _field_labels(value, categories.primitive_keys),
            _field_lines(value, categories.primitive_keys),
            f"{path}.leaf",
        )
        builder.connect(parent_id, leaf_id)

    stack.extend(
        _PendingContainer(
            key=key,
            value=value[key],
            candidate_id=normalize_identifier(f"{parent_id}-{key}"),
            parent_id=parent_id,
            path=f"{path}.{key}",
        )
        for key in reversed(categories.nested_keys)
        if not is_empty(value[key])
    )


def _emit_item(builder: GraphBuilder, work: _PendingItem, stack: list[_Work]) -> None:
    base_id = normalize_identifier(f"{work.parent_id}-{work.index}")
    item_path = f"{work.array_path}[{work.index}]"
    item = work.item

    if not isinstance(item, dict):
        content = format_value(item)
        leaf_id = builder.add_leaf(
            f"{base_id}-{builder.suffix()}", None, content, item_path
        )
        builder.connect(work.parent_id, leaf_id)
        return

    categories = categorize_keys(item)
    primitive_keys = categories.primitive_keys
    nested_keys = [k for k in categories.nested_keys if not is_empty(item[k])]

    if primitive_keys or len(nested_keys) > 1:
        if primitive_keys:
            item_id = builder.add_leaf(
                f"{base_id}-{builder.suffix()}",
                _field_labels(item, primitive_keys),
                _field_lines(item, primitive_keys),
                item_path,
            )
        else:
            item_id = builder.add_label_container(
                base_id, f"Item {work.index}", item_path
            )
        builder.connect(work.parent_id, item_id)
        stack.extend(
            _PendingContainer(
                key=key,
                value=item[key],
                candidate_id=normalize_identifier(f"{item_id}-{key}"),
                parent_id=item_id,
                path=f"{item_path}.{key}",
            )
            for key in reversed(nested_keys)
        )
        return

    if nested_keys:
        (key,) = nested_keys
        stack.append(
            _PendingContainer(
                key=key,
                value=item[key],
                candidate_id=normalize_identifier(f"{base_id}-{key}"),
                parent_id=work.parent_id,
                path=f"{item_path}.{key}",
            )
        )
    # An item with no primitives and no non-empty nested fields emits nothing.


def _field_labels(obj: dict[str, Any], keys: list[str]) -> list[tuple[str, str]]:
    return [(key, format_field_value(obj[key])) for key in keys]


def _field_lines(obj: dict[str, Any], keys: list[str]) -> str:
    return "\n".join(f"{key}: {format_value(obj[key])}" for key in keys)
