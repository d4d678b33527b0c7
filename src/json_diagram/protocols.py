"""IdSource Protocol for the random id-suffix extension point.

Leaf, scalar and array-item nodes receive a random suffix so that siblings
with identical content never collide.  Any object with a conformant
``next_id`` method can be injected into ``process_data``; no inheritance
required.

Example::

    from json_diagram.protocols import IdSource

    class FixedSource:
        def next_id(self) -> str:
            return "x"

    assert isinstance(FixedSource(), IdSource)  # True: structural conformance
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class IdSource(Protocol):
    """Structural protocol for id-suffix providers.

    The ``next_id`` method must return a short, non-empty string made of
    characters that survive identifier normalization unchanged (lowercase
    letters and digits).  Uniqueness between calls is expected but not
    required: the graph builder disambiguates any collision.
    """

    def next_id(self) -> str: ...
