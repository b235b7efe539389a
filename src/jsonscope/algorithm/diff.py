"""DiffEngine: positional/key-union structural diff of two Value trees.

Recursive, path-accumulating comparison:

1. **Scalar or kind mismatch**: if either side is not a container, or one is
   an array and the other an object, emit a single record at the current
   path: CHANGED unless the two values are deeply equal (then UNCHANGED).
   Mismatched containers are *not* descended into.
2. **Arrays**: order-sensitive and index-aligned over
   ``n = max(len(left), len(right))``.  Indices past the end of the left
   array are ADDED, past the end of the right array REMOVED, the rest
   recurse.  No reordering or matching heuristic is applied.
3. **Objects**: order-insensitive over the union of keys (left keys in left
   order, then right-only keys in right order).  One-sided keys are
   REMOVED / ADDED, shared keys recurse.

Containers of matching kind are traversed, never recorded themselves, so
two identical documents yield one UNCHANGED record per leaf.  Records come
out depth-first: each subtree's records are contiguous and precede the next
sibling's.

Example::

    engine = DiffEngine()
    engine.diff(loads('{"a": [1, 2]}'), loads('{"a": [1]}'))
    # [DiffRecord(a[0], UNCHANGED, 1, 1), DiffRecord(a[1], REMOVED, before=2)]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum, auto

from jsonscope.config import DEFAULT_MAX_DEPTH, ParseOptions
from jsonscope.errors import DepthLimitError, InvariantViolation, ParseError
from jsonscope.parser import ParseResult, parse
from jsonscope.result import DiffKind, DiffRecord, DiffSummary
from jsonscope.tree.nodes import VALUE_TYPES, JsonArray, JsonObject, Value
from jsonscope.tree.paths import Path

__all__ = ["DiffEngine", "DiffOutcome", "DiffStatus", "diff", "diff_parsed", "diff_text"]

logger = logging.getLogger(__name__)

INCOMPLETE_MESSAGE = "provide two valid JSON documents"


@dataclass(frozen=True, slots=True)
class DiffEngine:
    """Stateless structural diff.

    Attributes:
        max_depth: Recursion guard.  Values nesting deeper than this raise
            ``DepthLimitError``; parsed documents never do, because the
            parser enforces the same default limit.
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def diff(self, left: Value, right: Value) -> list[DiffRecord]:
        """Compare two documents and return the ordered record list.

        Args:
            left:  The "before" document.
            right: The "after" document.

        Returns:
            Records in depth-first document order.

        Raises:
            InvariantViolation: If either input contains a non-Value node.
        """
        records: list[DiffRecord] = []
        self._walk(left, right, Path.root(), records)
        return records

    def _walk(self, left: Value, right: Value, path: Path, records: list[DiffRecord]) -> None:
        if path.depth > self.max_depth:
            raise DepthLimitError(f"diff exceeded {self.max_depth} levels at {path.label()!r}")
        _require_value(left, path)
        _require_value(right, path)

        if isinstance(left, JsonArray) and isinstance(right, JsonArray):
            self._walk_arrays(left, right, path, records)
        elif isinstance(left, JsonObject) and isinstance(right, JsonObject):
            self._walk_objects(left, right, path, records)
        else:
            kind = DiffKind.UNCHANGED if left == right else DiffKind.CHANGED
            records.append(DiffRecord(path=path, kind=kind, before=left, after=right))

    def _walk_arrays(
        self, left: JsonArray, right: JsonArray, path: Path, records: list[DiffRecord]
    ) -> None:
        n_left = len(left)
        n_right = len(right)
        for i in range(max(n_left, n_right)):
            item_path = path.child(i)
            if i >= n_left:
                records.append(DiffRecord(path=item_path, kind=DiffKind.ADDED, after=right[i]))
            elif i >= n_right:
                records.append(DiffRecord(path=item_path, kind=DiffKind.REMOVED, before=left[i]))
            else:
                self._walk(left[i], right[i], item_path, records)

    def _walk_objects(
        self, left: JsonObject, right: JsonObject, path: Path, records: list[DiffRecord]
    ) -> None:
        # Union of keys: dict.fromkeys keeps first-seen order and drops repeats
        for key in dict.fromkeys([*left.keys(), *right.keys()]):
            key_path = path.child(key)
            before = left.get(key)
            after = right.get(key)
            if before is not None and after is not None:
                self._walk(before, after, key_path, records)
            elif before is not None:
                records.append(DiffRecord(path=key_path, kind=DiffKind.REMOVED, before=before))
            else:
                records.append(DiffRecord(path=key_path, kind=DiffKind.ADDED, after=after))


def _require_value(value: object, path: Path) -> None:
    if not isinstance(value, VALUE_TYPES):
        msg = f"not a JSON value at {path.label()!r}: {type(value).__name__}"
        raise InvariantViolation(msg)


def diff(left: Value, right: Value) -> list[DiffRecord]:
    """Compare two documents with a fresh ``DiffEngine``."""
    return DiffEngine().diff(left, right)


# ----------------------------------------------------------------------
# Text-level entry point
# ----------------------------------------------------------------------


class DiffStatus(StrEnum):
    """Whether a text-level diff could run.

    - OK         -> both sides parsed; ``records`` is populated
    - INCOMPLETE -> at least one side is empty and neither is malformed
    - INVALID    -> at least one side is malformed
    """

    OK = auto()
    INCOMPLETE = auto()
    INVALID = auto()


@dataclass(frozen=True, slots=True)
class DiffOutcome:
    """Result of diffing two texts.

    Attributes:
        status:      See ``DiffStatus``.
        records:     Diff records; empty unless ``status`` is OK.
        left_error:  Parse failure of the left text, if any.
        right_error: Parse failure of the right text, if any.
    """

    status: DiffStatus
    records: tuple[DiffRecord, ...] = ()
    left_error: ParseError | None = None
    right_error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.status is DiffStatus.OK

    @property
    def summary(self) -> DiffSummary:
        return DiffSummary.from_records(self.records)

    @property
    def message(self) -> str:
        """Short status line for the caller to display."""
        if self.status is DiffStatus.OK:
            summary = self.summary
            if summary.is_identical:
                return "documents are identical"
            return f"{summary.changes} difference(s)"
        if self.status is DiffStatus.INCOMPLETE:
            return INCOMPLETE_MESSAGE
        sides = [
            f"{side}: {error}"
            for side, error in (("left", self.left_error), ("right", self.right_error))
            if error is not None
        ]
        return f"{INCOMPLETE_MESSAGE} ({'; '.join(sides)})"


def diff_text(
    left_text: str,
    right_text: str,
    options: ParseOptions | None = None,
) -> DiffOutcome:
    """Parse both texts and diff them when both hold a valid document.

    Never raises for string input: malformed or missing documents are
    reported through ``DiffOutcome.status``.
    """
    return diff_parsed(parse(left_text, options), parse(right_text, options))


def diff_parsed(
    left: ParseResult,
    right: ParseResult,
    engine: DiffEngine | None = None,
) -> DiffOutcome:
    """Diff two parse results; the shared tail of ``diff_text`` and the workbench."""
    if not (left.is_valid and right.is_valid):
        return DiffOutcome(status=DiffStatus.INVALID, left_error=left.error, right_error=right.error)
    if left.value is None or right.value is None:
        return DiffOutcome(status=DiffStatus.INCOMPLETE)

    records = (engine if engine is not None else DiffEngine()).diff(left.value, right.value)
    logger.debug("diffed documents: %d record(s)", len(records))
    return DiffOutcome(status=DiffStatus.OK, records=tuple(records))
