"""Copy actions: place a path string or a value's text on the clipboard.

Clipboard failures are transient, user-facing notices.  Every backend
exception is wrapped in ``ClipboardError`` (with the cause chained),
logged at warning level and never retried.
"""

from __future__ import annotations

import logging

from jsonscope.errors import ClipboardError
from jsonscope.formatter import copy_text
from jsonscope.protocols import ClipboardBackend
from jsonscope.tree.nodes import Value
from jsonscope.tree.paths import Path

__all__ = ["copy_path", "copy_to_clipboard", "copy_value"]

logger = logging.getLogger(__name__)


def copy_to_clipboard(text: str, backend: ClipboardBackend) -> str:
    """Write ``text`` to ``backend``.

    Returns:
        The text that was copied.

    Raises:
        ClipboardError: If ``text`` is empty or the backend fails.
    """
    if not text:
        raise ClipboardError("nothing to copy")
    try:
        backend.write_text(text)
    except Exception as exc:
        logger.warning("clipboard write failed: %s", exc)
        raise ClipboardError(f"copy failed: {exc}") from exc
    return text


def copy_path(path: Path, backend: ClipboardBackend) -> str:
    """Copy the human-readable form of ``path`` (``root`` for the root)."""
    return copy_to_clipboard(path.label(), backend)


def copy_value(value: Value, backend: ClipboardBackend) -> str:
    """Copy ``value``: strings raw, everything else as 2-space pretty JSON."""
    return copy_to_clipboard(copy_text(value), backend)
