"""MemoryClipboard: an in-process clipboard.

The default backend.  Keeps the copied texts in a list, which makes it the
natural choice for headless runs and tests.
"""

from __future__ import annotations

__all__ = ["MemoryClipboard"]


class MemoryClipboard:
    """Clipboard that stores writes in memory.

    Satisfies the ``ClipboardBackend`` Protocol structurally.

    Example::

        clip = MemoryClipboard()
        clip.write_text("a.b[0]")
        clip.text     # "a.b[0]"
        clip.history  # ["a.b[0]"]
    """

    def __init__(self) -> None:
        self._history: list[str] = []

    @property
    def text(self) -> str:
        """The most recent write, or ``""`` when nothing was copied yet."""
        return self._history[-1] if self._history else ""

    @property
    def history(self) -> list[str]:
        """Every write, oldest first (a copy)."""
        return list(self._history)

    def write_text(self, text: str) -> None:
        self._history.append(text)
