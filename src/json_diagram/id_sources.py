"""Built-in IdSource implementations.

``RandomIdSource`` reproduces the nine-character base-36 suffixes the
diagram front-end has always used.  Pass a ``seed`` to make a run
reproducible.  ``CounterIdSource`` hands out sequential base-36 values and
is what tests use when they need to predict node ids exactly.
"""

from __future__ import annotations

import itertools
import random
import string

__all__ = ["CounterIdSource", "RandomIdSource"]

_ALPHABET = string.digits + string.ascii_lowercase


def _to_base36(number: int) -> str:
    if number == 0:
        return "0"
    digits = []
    while number:
        number, rem = divmod(number, 36)
        digits.append(_ALPHABET[rem])
    return "".join(reversed(digits))


class RandomIdSource:
    """Random base-36 suffix generator.

    Satisfies the ``IdSource`` Protocol structurally.  Each instance owns
    its own ``random.Random`` so that seeding one source never affects
    another, or the global ``random`` module.

    Args:
        seed: Optional seed.  ``None`` seeds from system entropy.
        length: Number of characters per suffix.  Defaults to 9.
    """

    def __init__(self, seed: int | str | None = None, length: int = 9) -> None:
        if length < 1:
            msg = f"length must be >= 1, got {length}"
            raise ValueError(msg)
        self._rng = random.Random(seed)
        self._length = length

    def next_id(self) -> str:
        return "".join(self._rng.choice(_ALPHABET) for _ in range(self._length))


class CounterIdSource:
    """Deterministic sequential suffixes: ``"0"``, ``"1"``, ... ``"a"``, ...

    Example::

        source = CounterIdSource()
        source.next_id()  # "0"
        source.next_id()  # "1"
    """

    def __init__(self, start: int = 0) -> None:
        self._counter = itertools.count(start)

    def next_id(self) -> str:
        return _to_base36(next(self._counter))
