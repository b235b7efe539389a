"""Integration tests for the public API surface.

All imports are from the top-level ``jsonscope`` package, never from
internal submodules.  Walks through the three headline use cases (format,
diff, browse) the way an application embedding the library would.
"""

from __future__ import annotations

import pytest

import jsonscope
from jsonscope import (
    DiffKind,
    DiffStatus,
    FormatOptions,
    JsonWorkbench,
    ParseStatus,
    Path,
    collapse_all,
    diff_text,
    expand_all,
    format_json,
    loads,
    materialize,
    parse,
    toggle,
)


class TestFormatScenario:
    def test_sort_keys_with_two_space_indent(self) -> None:
        options = FormatOptions(indent_width=2, sort_keys=True)
        assert format_json('{"b":1,"a":2}', options) == '{\n  "a": 2,\n  "b": 1\n}'

    def test_unquoted_keys_are_rejected(self) -> None:
        result = parse("{a:1}")
        assert result.status is ParseStatus.INVALID
        assert result.error is not None


class TestDiffScenario:
    def test_nested_change_and_addition(self) -> None:
        outcome = diff_text('{"a":1,"b":{"c":2}}', '{"a":1,"b":{"c":3,"d":4}}')
        assert outcome.status is DiffStatus.OK
        assert [(r.label, r.kind) for r in outcome.records] == [
            ("a", DiffKind.UNCHANGED),
            ("b.c", DiffKind.CHANGED),
            ("b.d", DiffKind.ADDED),
        ]
        changed = outcome.records[1]
        assert changed.before == loads("2")
        assert changed.after == loads("3")
        assert outcome.records[2].before is None
        assert outcome.records[2].after == loads("4")


class TestBrowseScenario:
    def test_expand_one_then_all(self) -> None:
        value = loads('{"users": [{"name": "a"}, {"name": "b"}], "n": 2}')
        rows = materialize(value, collapse_all())
        assert [str(row.path) for row in rows] == ["", "users", "n"]

        rows = materialize(value, toggle(collapse_all(), Path(("users",))))
        assert [str(row.path) for row in rows] == ["", "users", "users[0]", "users[1]", "n"]

        rows = materialize(value, expand_all(value))
        assert [str(row.path) for row in rows][-3:] == ["users[1]", "users[1].name", "n"]


class TestWorkbenchSurface:
    def test_round_trip_through_workbench(self) -> None:
        bench = JsonWorkbench(FormatOptions(indent_width=4))
        text = bench.format('{"x":[1,{"y":null}]}').text
        assert bench.format(text).text == text


class TestExports:
    @pytest.mark.parametrize("name", jsonscope.__all__)
    def test_every_export_resolves(self, name: str) -> None:
        assert getattr(jsonscope, name) is not None

    def test_all_is_sorted(self) -> None:
        assert jsonscope.__all__ == sorted(jsonscope.__all__)
