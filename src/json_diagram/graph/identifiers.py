"""Deterministic node-id normalization.

Container node ids are derived from key paths such as
``"order_items-0-unit_price"``.  Normalization keeps hyphens as path
separators and folds each underscore-separated word after the first into
capitalized-lowercase form::

    normalize_identifier("user_name")            # "userName"
    normalize_identifier("root-ORDER_ITEMS-0")   # "root-ORDERItems-0"

The first word of every hyphen segment is left untouched, so already
normalized ids pass through unchanged and ids can be built incrementally
from a normalized parent id.
"""

from __future__ import annotations

from threading import RLock

from cachetools import LRUCache, cached

__all__ = ["is_blank", "normalize_identifier"]


# Ids repeat heavily across calls on same-shaped documents; the lock keeps
# the shared cache safe for concurrent process_data() calls.
@cached(cache=LRUCache(maxsize=4096), lock=RLock())
def normalize_identifier(raw: str) -> str:
    """Convert underscore-separated words to camel-like segments.

    Args:
        raw: A key or a hyphen-joined key path.

    Returns:
        The normalized id.  Empty input is returned unchanged.
    """
    if not raw:
        return raw
    return "-".join(_camel_segment(segment) for segment in raw.split("-"))


def _camel_segment(segment: str) -> str:
    first, *rest = segment.split("_")
    return first + "".join(word[:1].upper() + word[1:].lower() for word in rest)


def is_blank(text: str) -> bool:
    """Return True for an empty or whitespace-only string."""
    return not text or not text.strip()
