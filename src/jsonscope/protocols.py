"""ClipboardBackend Protocol: the extension point for system clipboards.

Copy actions (copy a path, copy a value) are boundary operations outside the
pure core.  Any object with a conformant ``write_text`` method can serve as
the clipboard; no inheritance is required.

Example::

    from jsonscope.protocols import ClipboardBackend

    class PrintClipboard:
        def write_text(self, text: str) -> None:
            print(text)

    assert isinstance(PrintClipboard(), ClipboardBackend)  # True - structural conformance
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = ["ClipboardBackend"]


@runtime_checkable
class ClipboardBackend(Protocol):
    """Structural protocol for clipboard backends.

    ``write_text`` must either place ``text`` on the clipboard or raise; the
    caller (``jsonscope.clipboard``) turns any exception into a
    ``ClipboardError``.
    """

    def write_text(self, text: str) -> None: ...
