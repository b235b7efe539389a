"""DiffRecord and DiffSummary: the output types of the diff engine.

Records are frozen; once the engine emits them they never change.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum, auto
from typing import Any

from jsonscope.formatter import escape_lone_surrogates
from jsonscope.tree.builder import to_python
from jsonscope.tree.nodes import Value
from jsonscope.tree.paths import Path

__all__ = ["DiffKind", "DiffRecord", "DiffSummary", "records_to_json"]


class DiffKind(StrEnum):
    """Classification of one diff record.

    - ADDED     -> "added"     : present only on the right
    - REMOVED   -> "removed"   : present only on the left
    - CHANGED   -> "changed"   : present on both sides, not deeply equal
    - UNCHANGED -> "unchanged" : present on both sides, deeply equal
    """

    ADDED = auto()
    REMOVED = auto()
    CHANGED = auto()
    UNCHANGED = auto()


@dataclass(frozen=True, slots=True)
class DiffRecord:
    """One path-addressed change between two documents.

    Attributes:
        path:   Address of the compared node.
        kind:   What happened at ``path``.
        before: Left-hand value; absent (None) for ADDED.
        after:  Right-hand value; absent (None) for REMOVED.

    A JSON ``null`` is ``NULL`` (a ``JsonNull``), never Python ``None``, so
    "absent" and "null" stay distinguishable.
    """

    path: Path
    kind: DiffKind
    before: Value | None = None
    after: Value | None = None

    def __post_init__(self) -> None:
        has_before = self.before is not None
        has_after = self.after is not None
        expected = {
            DiffKind.ADDED: (False, True),
            DiffKind.REMOVED: (True, False),
            DiffKind.CHANGED: (True, True),
            DiffKind.UNCHANGED: (True, True),
        }[self.kind]
        if (has_before, has_after) != expected:
            msg = (
                f"{self.kind} record at {self.path.label()!r} needs "
                f"before={'set' if expected[0] else 'absent'}, "
                f"after={'set' if expected[1] else 'absent'}"
            )
            raise ValueError(msg)

    @property
    def label(self) -> str:
        """Human-readable path; ``root`` for the document root."""
        return self.path.label()

    @property
    def is_change(self) -> bool:
        return self.kind is not DiffKind.UNCHANGED

    def to_dict(self) -> dict[str, Any]:
        """JSON-encodable form: ``{"path", "kind", "before"?, "after"?}``."""
        out: dict[str, Any] = {"path": self.label, "kind": str(self.kind)}
        if self.before is not None:
            out["before"] = to_python(self.before)
        if self.after is not None:
            out["after"] = to_python(self.after)
        return out


@dataclass(frozen=True, slots=True)
class DiffSummary:
    """Per-kind counts over a list of records.

    Attributes:
        added, removed, changed, unchanged: Number of records of each kind.
    """

    added: int = 0
    removed: int = 0
    changed: int = 0
    unchanged: int = 0

    @classmethod
    def from_records(cls, records: Iterable[DiffRecord]) -> DiffSummary:
        counts = dict.fromkeys(DiffKind, 0)
        for record in records:
            counts[record.kind] += 1
        return cls(
            added=counts[DiffKind.ADDED],
            removed=counts[DiffKind.REMOVED],
            changed=counts[DiffKind.CHANGED],
            unchanged=counts[DiffKind.UNCHANGED],
        )

    @property
    def total(self) -> int:
        return self.added + self.removed + self.changed + self.unchanged

    @property
    def changes(self) -> int:
        """Records that are not UNCHANGED."""
        return self.added + self.removed + self.changed

    @property
    def is_identical(self) -> bool:
        return self.changes == 0

    @property
    def change_ratio(self) -> float:
        """Share of records that are changes, in [0.0, 1.0]; 0.0 when empty."""
        if self.total == 0:
            return 0.0
        return self.changes / self.total


def records_to_json(records: Sequence[DiffRecord], indent: int | None = 2) -> str:
    """Encode records as a JSON array for external consumption."""
    text = json.dumps([record.to_dict() for record in records], ensure_ascii=False, indent=indent)
    return escape_lone_surrogates(text)
