"""JsonWorkbench: orchestrator that wires parser, formatter, diff and tree view.

This is the layer a UI (or the CLI) talks to.  It turns raw text plus the
caller-owned state (format options, expanded paths, search term) into
ready-to-display outcomes, and never raises for malformed or empty input:
those surface as a status on the outcome instead.

Architecture:
- Every text goes through a per-instance ``ParseCache``, so re-running the
  same view on unchanged text (the keystroke case) costs nothing.
- The formatter, diff engine and materializer are pure; the workbench only
  holds configuration and the cache, never document state.
- ``expanded_paths`` stays owned by the caller and is passed in on every
  ``tree()`` call.
"""

from __future__ import annotations

import logging
from collections.abc import Set
from dataclasses import dataclass, replace
from typing import Any

from jsonscope.algorithm.diff import DiffEngine, DiffOutcome, DiffStatus, diff_parsed
from jsonscope.cache import ParseCache
from jsonscope.config import FormatOptions, ParseOptions
from jsonscope.errors import ParseError
from jsonscope.formatter import format_value
from jsonscope.parser import ParseStatus
from jsonscope.result import DiffRecord, DiffSummary
from jsonscope.search import filter_records, filter_rows, only_changes
from jsonscope.stats import DocumentStats, document_stats
from jsonscope.tree.materializer import TreeMaterializer, TreeRow, expand_all
from jsonscope.tree.paths import Path

__all__ = ["DiffView", "FormatOutcome", "JsonWorkbench", "TreeOutcome"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FormatOutcome:
    """Formatted text, or why there is none.

    Attributes:
        status: Parse status of the input.
        text:   Formatted document; ``""`` unless ``status`` is OK.
        error:  Parse failure when ``status`` is INVALID.
    """

    status: ParseStatus
    text: str = ""
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.OK


@dataclass(frozen=True, slots=True)
class TreeOutcome:
    """Visible tree rows after search filtering.

    Attributes:
        status:     Parse status of the input.
        rows:       Rows matching the search term, in document order.
        total_rows: Rows before filtering (the "N nodes" count of the view).
        error:      Parse failure when ``status`` is INVALID.
    """

    status: ParseStatus
    rows: tuple[TreeRow, ...] = ()
    total_rows: int = 0
    error: ParseError | None = None

    @property
    def ok(self) -> bool:
        return self.status is ParseStatus.OK


@dataclass(frozen=True, slots=True)
class DiffView:
    """A diff outcome plus the records left after display filters.

    ``summary`` always counts the full, unfiltered record list, so badge
    counts do not move while the user types a search term.
    """

    outcome: DiffOutcome
    records: tuple[DiffRecord, ...] = ()

    @property
    def status(self) -> DiffStatus:
        return self.outcome.status

    @property
    def summary(self) -> DiffSummary:
        return self.outcome.summary


class JsonWorkbench:
    """Stateless-by-design façade over the JSON tooling core.

    Example::

        bench = JsonWorkbench(FormatOptions(indent_width=4, sort_keys=True))
        bench.format('{"b": 1, "a": 2}').text
        # '{\\n    "a": 2,\\n    "b": 1\\n}'

        view = bench.diff('{"a": 1}', '{"a": 2}', changes_only=True)
        [r.label for r in view.records]   # ["a"]
    """

    def __init__(
        self,
        format_options: FormatOptions | None = None,
        max_cache_size: int = 128,
        parse_options: ParseOptions | None = None,
        cache: ParseCache | None = None,
    ) -> None:
        """Initialise the workbench.

        Args:
            format_options: Formatter configuration.  Defaults to
                ``FormatOptions()``.
            max_cache_size: Size of the parse cache when ``cache`` is None.
            parse_options:  Parser configuration when ``cache`` is None.
            cache:          An existing ``ParseCache`` to share.
        """
        self._format_options = format_options if format_options is not None else FormatOptions()
        self._cache = cache if cache is not None else ParseCache(max_cache_size, parse_options)
        self._engine = DiffEngine(max_depth=self._cache.options.max_depth)
        self._materializer = TreeMaterializer(max_depth=self._cache.options.max_depth)

    @property
    def format_options(self) -> FormatOptions:
        return self._format_options

    @property
    def cache(self) -> ParseCache:
        return self._cache

    def with_options(self, **changes: Any) -> JsonWorkbench:
        """Return a workbench with updated ``FormatOptions`` sharing this cache.

        Raises:
            ValueError: If the new options are invalid.
            TypeError: If ``changes`` names an unknown option.
        """
        return JsonWorkbench(replace(self._format_options, **changes), cache=self._cache)

    # ------------------------------------------------------------------
    # Views
    # ------------------------------------------------------------------

    def format(self, text: str) -> FormatOutcome:
        """Format ``text`` with the configured options."""
        result = self._cache.parse(text)
        if result.value is None:
            return FormatOutcome(status=result.status, error=result.error)
        return FormatOutcome(status=result.status, text=format_value(result.value, self._format_options))

    def diff(
        self,
        left_text: str,
        right_text: str,
        term: str = "",
        changes_only: bool = False,
    ) -> DiffView:
        """Diff two texts, then apply the "only differences" toggle and search.

        Diff runs only when both texts hold a valid document; otherwise the
        view's status says why not.
        """
        outcome = diff_parsed(
            self._cache.parse(left_text), self._cache.parse(right_text), self._engine
        )
        if not outcome.ok:
            return DiffView(outcome=outcome)

        visible: list[DiffRecord] = list(outcome.records)
        if changes_only:
            visible = only_changes(visible)
        visible = filter_records(visible, term)
        logger.debug("diff view: %d of %d record(s) visible", len(visible), len(outcome.records))
        return DiffView(outcome=outcome, records=tuple(visible))

    def tree(self, text: str, expanded_paths: Set[Path], term: str = "") -> TreeOutcome:
        """Materialize the visible rows of ``text`` and filter them by ``term``."""
        result = self._cache.parse(text)
        if result.value is None:
            return TreeOutcome(status=result.status, error=result.error)
        rows = self._materializer.materialize(result.value, expanded_paths)
        visible = filter_rows(rows, term)
        return TreeOutcome(status=result.status, rows=tuple(visible), total_rows=len(rows))

    def expand_all(self, text: str) -> frozenset[Path]:
        """Expanded set opening every container of ``text`` (empty if none)."""
        result = self._cache.parse(text)
        if result.value is None:
            return frozenset()
        return expand_all(result.value)

    def stats(self, text: str) -> DocumentStats | None:
        """Shape statistics of ``text``, or None without a valid document."""
        result = self._cache.parse(text)
        if result.value is None:
            return None
        return document_stats(result.value)
