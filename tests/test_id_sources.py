"""Tests for the built-in IdSource implementations."""

from __future__ import annotations

import random
import re

import pytest

from json_diagram import CounterIdSource, IdSource, RandomIdSource


class TestRandomIdSource:
    def test_default_shape(self) -> None:
        source = RandomIdSource()
        for _ in range(50):
            assert re.fullmatch(r"[0-9a-z]{9}", source.next_id())

    def test_custom_length(self) -> None:
        assert len(RandomIdSource(length=4).next_id()) == 4

    def test_zero_length_rejected(self) -> None:
        with pytest.raises(ValueError, match="length must be >= 1"):
            RandomIdSource(length=0)

    def test_seed_reproduces_sequence(self) -> None:
        first = RandomIdSource(seed=42)
        second = RandomIdSource(seed=42)
        assert [first.next_id() for _ in range(5)] == [second.next_id() for _ in range(5)]

    def test_does_not_touch_global_random(self) -> None:
        random.seed(1)
        expected = random.random()
        random.seed(1)
        RandomIdSource(seed=5).next_id()
        assert random.random() == expected


class TestCounterIdSource:
    def test_counts_in_base36(self) -> None:
        source = CounterIdSource()
        ids = [source.next_id() for _ in range(37)]
        assert ids[:3] == ["0", "1", "2"]
        assert ids[10] == "a"
        assert ids[35] == "z"
        assert ids[36] == "10"

    def test_start(self) -> None:
        assert CounterIdSource(start=36 * 36).next_id() == "100"


@pytest.mark.parametrize("source", [RandomIdSource(), CounterIdSource()])
def test_satisfies_protocol(source: IdSource) -> None:
    assert isinstance(source, IdSource)


def test_arbitrary_object_with_next_id_satisfies_protocol() -> None:
    class Fixed:
        def next_id(self) -> str:
            return "x"

    assert isinstance(Fixed(), IdSource)
    assert not isinstance(object(), IdSource)
