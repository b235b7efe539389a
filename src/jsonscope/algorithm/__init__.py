"""algorithm subpackage - public API for the structural diff.

Import from this module (not from sub-modules directly) to stay on the
stable public interface.

Example::

    from jsonscope.algorithm import DiffEngine
    from jsonscope.parser import loads

    records = DiffEngine().diff(loads('{"a": 1}'), loads('{"a": 2}'))
    # [DiffRecord(path=Path(('a',)), kind=DiffKind.CHANGED, ...)]
"""

from __future__ import annotations

from jsonscope.algorithm.diff import (
    DiffEngine,
    DiffOutcome,
    DiffStatus,
    diff,
    diff_parsed,
    diff_text,
)

__all__ = ["DiffEngine", "DiffOutcome", "DiffStatus", "diff", "diff_parsed", "diff_text"]
