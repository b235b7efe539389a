"""TreeMaterializer: projects a Value plus a set of expanded paths into rows.

The row list is a pure function of ``(value, expanded_paths)``.  It is
rebuilt from scratch on every call instead of being patched, which keeps
expand/collapse trivially correct; the cost is one walk over the *visible*
nodes, bounded by realistic document sizes.

Expansion is lazy: a container's children are only visited when the
container's path is in ``expanded_paths``.  A collapsed container still
reports ``has_children`` so the view can draw an expander.

Collapse convention: ``collapse_all()`` returns ``{Path.root()}``, i.e. the
root stays open and its direct children are visible.  Passing an empty set
collapses even the root to a single summary row.
"""

from __future__ import annotations

from collections.abc import Iterable, Set
from dataclasses import dataclass

from jsonscope.config import DEFAULT_MAX_DEPTH
from jsonscope.errors import DepthLimitError, InvariantViolation
from jsonscope.formatter import render_scalar
from jsonscope.tree.nodes import (
    VALUE_TYPES,
    JsonArray,
    JsonObject,
    Value,
    ValueKind,
    child_count,
    is_container,
    iter_children,
)
from jsonscope.tree.paths import Path

__all__ = [
    "TreeMaterializer",
    "TreeRow",
    "collapse_all",
    "container_paths",
    "expand_all",
    "expand_to",
    "materialize",
    "node_count",
    "resolve",
    "toggle",
]


@dataclass(frozen=True, slots=True)
class TreeRow:
    """One visible line of the tree view.

    Attributes:
        path:         Address of the node.
        depth:        Nesting level; the root row has depth 0.
        kind:         The node's ValueKind.
        summary:      Literal rendering for leaves; ``Array(n)`` / ``Object{n}``
                      for collapsed containers; ``[`` / ``{`` when expanded.
        has_children: True for non-empty containers.
        is_expanded:  True when the node's path is in the expanded set.
        label:        Final path segment for display (key, ``[i]``, ``root``).
        value:        The node itself, for copy-value actions.
    """

    path: Path
    depth: int
    kind: ValueKind
    summary: str
    has_children: bool
    is_expanded: bool
    label: str = ""
    value: Value | None = None


@dataclass(frozen=True, slots=True)
class TreeMaterializer:
    """Builds the visible row list of a document.

    Attributes:
        max_depth: Recursion guard; rows deeper than this raise
            ``DepthLimitError``.
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def materialize(self, value: Value, expanded_paths: Set[Path]) -> list[TreeRow]:
        """Return the visible rows in document order.

        Args:
            value:          The document root.
            expanded_paths: Paths of containers whose children are visible.
                            Paths that do not address a container are ignored.

        Returns:
            A fresh list; exactly one row for the root plus one per visible
            descendant.
        """
        rows: list[TreeRow] = []
        self._emit(value, Path.root(), expanded_paths, rows)
        return rows

    def _emit(self, node: Value, path: Path, expanded: Set[Path], rows: list[TreeRow]) -> None:
        if path.depth > self.max_depth:
            raise DepthLimitError(f"tree exceeded {self.max_depth} levels at {path.label()!r}")
        if not isinstance(node, VALUE_TYPES):
            raise InvariantViolation(f"not a JSON value at {path.label()!r}: {type(node).__name__}")

        container = is_container(node)
        is_expanded = container and path in expanded
        rows.append(
            TreeRow(
                path=path,
                depth=path.depth,
                kind=node.kind,
                summary=_summary(node, is_expanded),
                has_children=child_count(node) > 0,
                is_expanded=is_expanded,
                label=path.last_label(),
                value=node,
            )
        )
        if is_expanded:
            for segment, child in iter_children(node):
                self._emit(child, path.child(segment), expanded, rows)


def _summary(node: Value, is_expanded: bool) -> str:
    if isinstance(node, JsonArray):
        return "[" if is_expanded else f"Array({len(node)})"
    if isinstance(node, JsonObject):
        return "{" if is_expanded else f"Object{{{len(node)}}}"
    return render_scalar(node)


def materialize(value: Value, expanded_paths: Set[Path]) -> list[TreeRow]:
    """Shorthand for ``TreeMaterializer().materialize(value, expanded_paths)``."""
    return TreeMaterializer().materialize(value, expanded_paths)


# ----------------------------------------------------------------------
# Expanded-set helpers (the set is caller-owned; these return new sets)
# ----------------------------------------------------------------------


def container_paths(value: Value) -> frozenset[Path]:
    """Paths of every array and object in the document, root included."""
    paths: set[Path] = set()
    stack: list[tuple[Path, Value]] = [(Path.root(), value)]
    while stack:
        path, node = stack.pop()
        if is_container(node):
            paths.add(path)
            stack.extend((path.child(segment), child) for segment, child in iter_children(node))
    return frozenset(paths)


def expand_all(value: Value) -> frozenset[Path]:
    """Expanded set that makes every node of ``value`` visible."""
    return container_paths(value)


def collapse_all() -> frozenset[Path]:
    """Expanded set holding only the root (the documented default)."""
    return frozenset({Path.root()})


def toggle(expanded: Set[Path], path: Path) -> frozenset[Path]:
    """Return ``expanded`` with ``path`` flipped in or out."""
    if path in expanded:
        return frozenset(p for p in expanded if p != path)
    return frozenset({*expanded, path})


def expand_to(expanded: Set[Path], paths: Path | Iterable[Path]) -> frozenset[Path]:
    """Return ``expanded`` plus every ancestor of ``paths``, so they are visible.

    The target paths themselves are added too, which opens them if they are
    containers.
    """
    targets = [paths] if isinstance(paths, Path) else list(paths)
    opened = set(expanded)
    for target in targets:
        opened.update(target.ancestors())
        opened.add(target)
    return frozenset(opened)


def node_count(value: Value) -> int:
    """Total number of nodes (containers and leaves) in the document."""
    count = 0
    stack: list[Value] = [value]
    while stack:
        node = stack.pop()
        count += 1
        stack.extend(child for _, child in iter_children(node))
    return count


def resolve(value: Value, path: Path) -> Value:
    """Return the node addressed by ``path``.

    Raises:
        KeyError: If ``path`` does not address a node of ``value``.
    """
    node = value
    for depth, segment in enumerate(path.segments):
        child = _child_at(node, segment)
        if child is None:
            raise KeyError(str(Path(path.segments[: depth + 1])) or path.label())
        node = child
    return node


def _child_at(node: Value, segment: str | int) -> Value | None:
    if isinstance(node, JsonArray) and isinstance(segment, int) and 0 <= segment < len(node):
        return node[segment]
    if isinstance(node, JsonObject) and isinstance(segment, str):
        return node.get(segment)
    return None
