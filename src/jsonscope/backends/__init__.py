"""Clipboard backends for jsonscope.

- ``MemoryClipboard``: in-process, the default; used by tests and headless runs.
- ``TkClipboard``: the system clipboard through ``tkinter`` (imported lazily,
  so a Python build without Tk can still import this package).

All backends satisfy the ``ClipboardBackend`` Protocol structurally.
"""

from jsonscope.backends.memory import MemoryClipboard
from jsonscope.backends.tk import TkClipboard

__all__ = ["MemoryClipboard", "TkClipboard"]
