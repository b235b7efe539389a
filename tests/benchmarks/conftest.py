"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents.  No random values.
Three tiers: ~100 nodes flat, ~1k nodes nested, ~10k nodes nested.
Each tier provides an "identical" pair and a "modified" pair in which every
tenth leaf changed and a few keys were added or removed.
"""

from __future__ import annotations

import json
from typing import Any

import pytest


def generate_document(sections: int, items: int, fields: int) -> dict[str, Any]:
    """Generate ``sections`` x ``items`` records of ``fields`` scalar fields each."""
    return {
        f"section_{i}": [
            {f"field_{k}": f"value_{i}_{j}_{k}" if k % 2 else i * j + k for k in range(fields)}
            for j in range(items)
        ]
        for i in range(sections)
    }


def _modify(document: dict[str, Any]) -> dict[str, Any]:
    """Copy of ``document`` with every tenth leaf changed and shape edits."""
    modified: dict[str, Any] = json.loads(json.dumps(document))
    counter = 0
    for records in modified.values():
        for record in records:
            for key in list(record):
                if counter % 10 == 0:
                    record[key] = f"changed_{counter}"
                counter += 1
        if records:
            records[0]["extra"] = True
            records.pop()
    return modified


def _pair(sections: int, items: int, fields: int, modified: bool) -> tuple[str, str]:
    left = generate_document(sections, items, fields)
    right = _modify(left) if modified else left
    return json.dumps(left), json.dumps(right)


# --- Fixtures for each size tier ---


@pytest.fixture
def pair_small_identical() -> tuple[str, str]:
    """~100 nodes: 2 sections x 5 records x 8 fields."""
    return _pair(2, 5, 8, modified=False)


@pytest.fixture
def pair_small_modified() -> tuple[str, str]:
    return _pair(2, 5, 8, modified=True)


@pytest.fixture
def pair_medium_identical() -> tuple[str, str]:
    """~1k nodes: 10 sections x 10 records x 9 fields."""
    return _pair(10, 10, 9, modified=False)


@pytest.fixture
def pair_medium_modified() -> tuple[str, str]:
    return _pair(10, 10, 9, modified=True)


@pytest.fixture
def pair_large_identical() -> tuple[str, str]:
    """~10k nodes: 20 sections x 50 records x 9 fields."""
    return _pair(20, 50, 9, modified=False)


@pytest.fixture
def pair_large_modified() -> tuple[str, str]:
    return _pair(20, 50, 9, modified=True)
