"""TkClipboard: system clipboard access through a Tk root window.

``tkinter`` ships with most CPython builds but can be missing on minimal
installs, so it is imported lazily on first use.  A failure to import or to
reach a display surfaces as the underlying exception, which
``jsonscope.clipboard`` reports as a ``ClipboardError``.
"""

from __future__ import annotations

from typing import Any

__all__ = ["TkClipboard"]


class TkClipboard:
    """Clipboard backed by ``tkinter``'s root-window clipboard.

    Args:
        root: An existing ``tkinter.Tk`` (or any widget).  When None, a hidden
            root window is created on the first write and reused afterwards.
    """

    def __init__(self, root: Any | None = None) -> None:
        self._root: Any | None = root

    def _get_root(self) -> Any:
        if self._root is None:
            import tkinter

            root = tkinter.Tk()
            root.withdraw()
            self._root = root
        return self._root

    def write_text(self, text: str) -> None:
        root = self._get_root()
        root.clipboard_clear()
        root.clipboard_append(text)
        root.update_idletasks()
