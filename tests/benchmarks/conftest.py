"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents.  No random values.
Three tiers: a 10-key flat object, a 100-row array of records, and a
500-level nested chain.
"""

from __future__ import annotations

from typing import Any

import pytest


def generate_flat_object(num_keys: int, prefix: str = "key") -> dict[str, Any]:
    """Generate a flat dict with deterministic string values."""
    return {f"{prefix}_{i}": f"value_{i}" for i in range(num_keys)}


def generate_records(num_rows: int) -> dict[str, Any]:
    """Generate an ``orders`` array mixing every array-item shape."""
    rows: list[Any] = []
    for i in range(num_rows):
        if i % 4 == 0:
            rows.append({"id": i, "total": i * 1.5, "tags": [f"t{i}", None]})
        elif i % 4 == 1:
            rows.append({"shipment": {"carrier": "ups", "eta": f"day-{i}"}})
        elif i % 4 == 2:
            rows.append({"billing": {"zip": i}, "lines": [{"sku": i}]})
        else:
            rows.append(f"note-{i}")
    return {"orders": rows, "count": num_rows}


def generate_chain(depth: int) -> dict[str, Any]:
    """Generate ``{"n": {"n": ... {"v": 1}}}`` nested ``depth`` times."""
    doc: dict[str, Any] = {"v": 1}
    for _ in range(depth):
        doc = {"n": doc}
    return doc


@pytest.fixture
def doc_10key_flat() -> dict[str, Any]:
    """10-key flat object: one merged leaf."""
    return generate_flat_object(10)


@pytest.fixture
def doc_100row_records() -> dict[str, Any]:
    """100-row array covering scalar, pass-through and intermediate items."""
    return generate_records(100)


@pytest.fixture
def doc_500_deep() -> dict[str, Any]:
    """500-level nested chain."""
    return generate_chain(500)
