"""Integrations subpackage for jsonscope.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_json_unchanged`` fixture
"""

from __future__ import annotations

__all__: list[str] = []
