"""Search/filter over tree rows and diff records.

A row or record matches when the search term is a case-insensitive
substring of its path string or of its rendered value.  Filtering only
narrows what is displayed; it never touches the caller's expanded set.
"""

from __future__ import annotations

from collections.abc import Sequence

from jsonscope.config import FormatOptions
from jsonscope.formatter import format_value, render_scalar
from jsonscope.result import DiffKind, DiffRecord
from jsonscope.tree.materializer import TreeRow
from jsonscope.tree.nodes import Value, is_container, iter_children
from jsonscope.tree.paths import Path

__all__ = ["filter_records", "filter_rows", "find_paths", "only_changes"]

_COMPACT = FormatOptions(compact=True)


def _fold(text: str) -> str:
    return text.casefold()


def filter_rows(rows: Sequence[TreeRow], term: str) -> list[TreeRow]:
    """Keep rows whose path label or rendered summary contains ``term``.

    Rows and diff records share the path label, so the root matches "root"
    in both views.

    An empty term returns every row.
    """
    if not term:
        return list(rows)
    needle = _fold(term)
    return [row for row in rows if needle in _fold(row.path.label()) or needle in _fold(row.summary)]


def filter_records(records: Sequence[DiffRecord], term: str) -> list[DiffRecord]:
    """Keep records whose path label or before/after JSON contains ``term``.

    An empty term returns every record.
    """
    if not term:
        return list(records)
    needle = _fold(term)
    return [record for record in records if needle in _fold(_record_haystack(record))]


def _record_haystack(record: DiffRecord) -> str:
    parts = [record.label]
    for side in (record.before, record.after):
        if side is not None:
            parts.append(format_value(side, _COMPACT))
    return "\n".join(parts)


def only_changes(records: Sequence[DiffRecord]) -> list[DiffRecord]:
    """Drop UNCHANGED records ("show only differences")."""
    return [record for record in records if record.kind is not DiffKind.UNCHANGED]


def find_paths(value: Value, term: str) -> list[Path]:
    """Paths of every node, visible or not, whose path or literal matches ``term``.

    Containers match on their path only.  Results are in document order, so
    a caller can pass them to ``expand_to`` to reveal the hits.
    """
    if not term:
        return []
    needle = _fold(term)
    hits: list[Path] = []
    stack: list[tuple[Path, Value]] = [(Path.root(), value)]
    while stack:
        path, node = stack.pop()
        label = path.label()
        haystack = label if is_container(node) else f"{label}\n{render_scalar(node)}"
        if needle in _fold(haystack):
            hits.append(path)
        children = [(path.child(segment), child) for segment, child in iter_children(node)]
        stack.extend(reversed(children))
    return hits
