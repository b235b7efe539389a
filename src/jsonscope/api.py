"""Public API functions for jsonscope.

Text-in convenience wrappers around the core.  Each call builds its own
collaborators, so there is zero global state between calls.  Unlike the
``JsonWorkbench`` views these raise on bad input, which suits scripts and
tests better than status objects.
"""

from __future__ import annotations

from collections.abc import Set

from jsonscope.algorithm.diff import DiffEngine
from jsonscope.config import FormatOptions
from jsonscope.formatter import format_text
from jsonscope.parser import loads
from jsonscope.result import DiffRecord
from jsonscope.search import filter_rows
from jsonscope.tree.materializer import TreeMaterializer, TreeRow, collapse_all
from jsonscope.tree.paths import Path

__all__ = ["diff_json", "format_json", "materialize_json"]


def format_json(text: str, options: FormatOptions | None = None) -> str:
    """Reformat JSON text.

    Args:
        text:    JSON text.
        options: Layout configuration.  Defaults to ``FormatOptions()``.

    Returns:
        The formatted text; ``""`` when ``text`` is empty or whitespace.

    Raises:
        ParseError: If ``text`` is malformed.
    """
    return format_text(text, options)


def diff_json(left_text: str, right_text: str) -> list[DiffRecord]:
    """Diff two JSON texts.

    Returns:
        The ordered diff records (see ``DiffEngine``).

    Raises:
        ParseError: If either text is malformed.
        EmptyDocumentError: If either text holds no document.
    """
    return DiffEngine().diff(loads(left_text), loads(right_text))


def materialize_json(
    text: str,
    expanded_paths: Set[Path] | None = None,
    term: str = "",
) -> list[TreeRow]:
    """Return the visible tree rows of a JSON text.

    Args:
        text:           JSON text.
        expanded_paths: Open containers.  Defaults to ``collapse_all()``
                        (root open, everything below collapsed).
        term:           Optional search term applied to the rows.

    Raises:
        ParseError: If ``text`` is malformed.
        EmptyDocumentError: If ``text`` holds no document.
    """
    expanded = expanded_paths if expanded_paths is not None else collapse_all()
    rows = TreeMaterializer().materialize(loads(text), expanded)
    return filter_rows(rows, term)
