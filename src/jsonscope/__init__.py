"""jsonscope - parse, format, diff, browse and search JSON documents."""

from __future__ import annotations

from jsonscope.algorithm.diff import DiffEngine, DiffOutcome, DiffStatus, diff, diff_text
from jsonscope.api import diff_json, format_json, materialize_json
from jsonscope.config import FormatOptions, ParseOptions
from jsonscope.errors import (
    ClipboardError,
    EmptyDocumentError,
    FileIOError,
    InvariantViolation,
    JsonScopeError,
    NumberRangeError,
    ParseError,
)
from jsonscope.formatter import format_value
from jsonscope.parser import ParseResult, ParseStatus, loads, parse, validate
from jsonscope.result import DiffKind, DiffRecord, DiffSummary
from jsonscope.search import filter_records, filter_rows, only_changes
from jsonscope.tree.materializer import (
    TreeRow,
    collapse_all,
    expand_all,
    materialize,
    toggle,
)
from jsonscope.tree.nodes import Value, ValueKind
from jsonscope.tree.paths import Path
from jsonscope.workbench import JsonWorkbench

__version__: str = "0.1.0"
__all__: list[str] = [
    "ClipboardError",
    "DiffEngine",
    "DiffKind",
    "DiffOutcome",
    "DiffRecord",
    "DiffStatus",
    "DiffSummary",
    "EmptyDocumentError",
    "FileIOError",
    "FormatOptions",
    "InvariantViolation",
    "JsonScopeError",
    "JsonWorkbench",
    "NumberRangeError",
    "ParseError",
    "ParseOptions",
    "ParseResult",
    "ParseStatus",
    "Path",
    "TreeRow",
    "Value",
    "ValueKind",
    "collapse_all",
    "diff",
    "diff_json",
    "diff_text",
    "expand_all",
    "filter_records",
    "filter_rows",
    "format_json",
    "format_value",
    "loads",
    "materialize",
    "only_changes",
    "parse",
    "toggle",
    "validate",
]
