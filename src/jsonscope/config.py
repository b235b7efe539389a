"""FormatOptions and ParseOptions: immutable configuration for jsonscope.

Both are frozen dataclasses validated on construction, so an invalid
combination can never reach the formatter or the parser.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["ALLOWED_INDENT_WIDTHS", "DEFAULT_MAX_DEPTH", "FormatOptions", "ParseOptions"]

# Upper bound on nesting for every recursive walk in the core.  Python's json
# decoder and our own recursion each spend one frame per level, so the guard
# stays well under the interpreter's default recursion limit of 1000.
DEFAULT_MAX_DEPTH: int = 256

ALLOWED_INDENT_WIDTHS: tuple[int, ...] = (2, 4, 8)


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """Immutable configuration for the formatter.

    Attributes:
        indent_width: Indentation unit of the pretty-printer.  One of 2, 4, 8.
            Ignored when ``compact`` is True.
        sort_keys: When True, object keys are sorted by code point at every
            nesting level.  Array element order is never changed.
        compact: When True, output contains no inserted whitespace at all.
    """

    indent_width: int = 2
    sort_keys: bool = False
    compact: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.indent_width, bool) or self.indent_width not in ALLOWED_INDENT_WIDTHS:
            msg = f"indent_width must be one of {ALLOWED_INDENT_WIDTHS}, got {self.indent_width!r}"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class ParseOptions:
    """Immutable configuration for the parser.

    Attributes:
        max_depth: Documents nesting deeper than this are rejected with a
            ``ParseError`` instead of exhausting the call stack later.
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            msg = f"max_depth must be >= 1, got {self.max_depth}"
            raise ValueError(msg)
