"""Command-line front end: format, validate, diff, tree and stats subcommands.

Each subcommand reads a file (or stdin for ``-``), drives a ``JsonWorkbench``
and prints plain text.  Exit codes: 0 success, 1 invalid input, 2 I/O error.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence

from jsonscope.algorithm.diff import DiffStatus
from jsonscope.config import ALLOWED_INDENT_WIDTHS, FormatOptions
from jsonscope.errors import FileIOError, InvariantViolation
from jsonscope.files import read_document, write_document
from jsonscope.formatter import format_value
from jsonscope.parser import ParseStatus
from jsonscope.result import DiffKind, DiffRecord, records_to_json
from jsonscope.tree.materializer import TreeRow, collapse_all, expand_to
from jsonscope.tree.paths import Path
from jsonscope.workbench import JsonWorkbench

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_IO = 2

_DIFF_MARKERS = {
    DiffKind.ADDED: "+",
    DiffKind.REMOVED: "-",
    DiffKind.CHANGED: "~",
    DiffKind.UNCHANGED: " ",
}

_COMPACT = FormatOptions(compact=True)


def _read(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return read_document(source)


def _render_record(record: DiffRecord) -> str:
    marker = _DIFF_MARKERS[record.kind]
    before, after = record.before, record.after
    if record.kind is DiffKind.CHANGED and before is not None and after is not None:
        detail = f"{format_value(before, _COMPACT)} -> {format_value(after, _COMPACT)}"
    elif after is not None:
        detail = format_value(after, _COMPACT)
    elif before is not None:
        detail = format_value(before, _COMPACT)
    else:
        raise InvariantViolation(f"diff record at {record.label} has no value")
    return f"{marker} {record.label}: {detail}"


def _render_row(row: TreeRow) -> str:
    if row.has_children:
        marker = "-" if row.is_expanded else "+"
    else:
        marker = " "
    return f"{'  ' * row.depth}{marker} {row.label}: {row.summary}"


def _cmd_format(args: argparse.Namespace) -> int:
    options = FormatOptions(indent_width=args.indent, sort_keys=args.sort_keys, compact=args.compact)
    outcome = JsonWorkbench(options).format(_read(args.file))
    if outcome.status is ParseStatus.INVALID:
        print(f"invalid JSON: {outcome.error}", file=sys.stderr)
        return EXIT_INVALID
    if args.out:
        target = write_document(outcome.text, args.out_dir, args.out)
        print(f"wrote {target}")
    else:
        print(outcome.text)
    return EXIT_OK


def _cmd_validate(args: argparse.Namespace) -> int:
    outcome = JsonWorkbench().format(_read(args.file))
    if outcome.status is ParseStatus.INVALID:
        print(f"invalid: {outcome.error}")
        return EXIT_INVALID
    print("empty" if outcome.status is ParseStatus.EMPTY else "valid")
    return EXIT_OK


def _cmd_diff(args: argparse.Namespace) -> int:
    view = JsonWorkbench().diff(
        _read(args.left),
        _read(args.right),
        term=args.filter,
        changes_only=args.only_changes,
    )
    if view.status is not DiffStatus.OK:
        print(view.outcome.message, file=sys.stderr)
        return EXIT_INVALID
    if args.json:
        print(records_to_json(view.records))
        return EXIT_OK
    for record in view.records:
        print(_render_record(record))
    summary = view.summary
    print(
        f"{summary.added} added, {summary.removed} removed, "
        f"{summary.changed} changed, {summary.unchanged} unchanged"
    )
    return EXIT_OK


def _cmd_tree(args: argparse.Namespace) -> int:
    bench = JsonWorkbench()
    text = _read(args.file)
    if args.expand_all:
        expanded = bench.expand_all(text)
    else:
        try:
            expanded = expand_to(collapse_all(), [Path.parse(p) for p in args.expand])
        except ValueError as exc:
            print(f"bad --expand path: {exc}", file=sys.stderr)
            return EXIT_INVALID
    outcome = bench.tree(text, expanded, term=args.filter)
    if outcome.status is ParseStatus.INVALID:
        print(f"invalid JSON: {outcome.error}", file=sys.stderr)
        return EXIT_INVALID
    for row in outcome.rows:
        print(_render_row(row))
    return EXIT_OK


def _cmd_stats(args: argparse.Namespace) -> int:
    bench = JsonWorkbench()
    text = _read(args.file)
    stats = bench.stats(text)
    if stats is None:
        error = bench.cache.parse(text).error
        print(f"invalid JSON: {error}" if error else "empty document", file=sys.stderr)
        return EXIT_INVALID
    print(json.dumps(stats.to_dict(), indent=2))
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="jsonscope",
        description="Format, validate, diff and browse JSON documents.",
    )
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    sub = ap.add_subparsers(dest="command", required=True)

    p_format = sub.add_parser("format", help="Pretty-print or compact a document")
    p_format.add_argument("file", help="JSON file, or - for stdin")
    p_format.add_argument(
        "--indent",
        type=int,
        choices=ALLOWED_INDENT_WIDTHS,
        default=2,
        help="Indent width (default: 2)",
    )
    p_format.add_argument("--sort-keys", action="store_true", help="Sort object keys recursively")
    p_format.add_argument("--compact", action="store_true", help="No whitespace at all")
    p_format.add_argument("--out", default=None, help="Save to this file name instead of printing")
    p_format.add_argument("--out-dir", default=".", help="Directory for --out (default: .)")
    p_format.set_defaults(func=_cmd_format)

    p_validate = sub.add_parser("validate", help="Check that a document is valid JSON")
    p_validate.add_argument("file", help="JSON file, or - for stdin")
    p_validate.set_defaults(func=_cmd_validate)

    p_diff = sub.add_parser("diff", help="Structural diff of two documents")
    p_diff.add_argument("left", help="Left (before) JSON file")
    p_diff.add_argument("right", help="Right (after) JSON file")
    p_diff.add_argument("--only-changes", action="store_true", help="Hide unchanged leaves")
    p_diff.add_argument("--filter", default="", help="Keep records whose path or value contains TERM")
    p_diff.add_argument("--json", action="store_true", help="Print records as JSON")
    p_diff.set_defaults(func=_cmd_diff)

    p_tree = sub.add_parser("tree", help="Print the document as an expandable tree")
    p_tree.add_argument("file", help="JSON file, or - for stdin")
    p_tree.add_argument(
        "--expand",
        action="append",
        default=[],
        metavar="PATH",
        help="Open PATH and its ancestors, e.g. users[0].address (repeatable)",
    )
    p_tree.add_argument("--expand-all", action="store_true", help="Open every container")
    p_tree.add_argument("--filter", default="", help="Keep rows whose path or value contains TERM")
    p_tree.set_defaults(func=_cmd_tree)

    p_stats = sub.add_parser("stats", help="Node counts and depth statistics")
    p_stats.add_argument("file", help="JSON file, or - for stdin")
    p_stats.set_defaults(func=_cmd_stats)

    return ap


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return int(args.func(args))
    except FileIOError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_IO


if __name__ == "__main__":
    raise SystemExit(main())
