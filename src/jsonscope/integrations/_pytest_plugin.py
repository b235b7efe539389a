"""pytest plugin for jsonscope.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from jsonscope.algorithm.diff import DiffEngine
from jsonscope.search import only_changes
from jsonscope.tree.builder import from_python

_MAX_LISTED = 20


@pytest.fixture(scope="session")
def assert_json_unchanged() -> Any:
    """Fixture that returns a callable structural-equality asserter.

    The fixture is session-scoped because the returned callable is stateless
    (each call diffs with a fresh ``DiffEngine``).

    Usage in tests::

        def test_roundtrip(assert_json_unchanged):
            assert_json_unchanged({"a": 1, "b": 2}, {"b": 2, "a": 1})

        def test_regression(assert_json_unchanged):
            with pytest.raises(AssertionError, match=r"b\\.c"):
                assert_json_unchanged({"b": {"c": 1}}, {"b": {"c": 2}})

    Returns:
        A callable ``_assert(actual, expected) -> None`` taking plain Python
        JSON data that raises ``AssertionError`` listing every added,
        removed and changed path.
    """

    def _assert(actual: Any, expected: Any) -> None:
        """Assert that two JSON documents are structurally identical.

        Object key order is ignored; array order is not.

        Args:
            actual:   The JSON data produced by the code under test.
            expected: The expected/reference JSON data.

        Raises:
            AssertionError: When the diff holds any non-UNCHANGED record.
        """
        records = DiffEngine().diff(from_python(expected), from_python(actual))
        changes = only_changes(records)
        if not changes:
            return
        lines = [f"  {record.kind}: {record.label}" for record in changes[:_MAX_LISTED]]
        if len(changes) > _MAX_LISTED:
            lines.append(f"  ... and {len(changes) - _MAX_LISTED} more")
        raise AssertionError(
            f"JSON documents differ in {len(changes)} place(s) (expected -> actual):\n"
            + "\n".join(lines)
        )

    return _assert
