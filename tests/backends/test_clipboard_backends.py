"""Tests for the ClipboardBackend Protocol and the bundled backends."""

from __future__ import annotations

from jsonscope.backends import MemoryClipboard, TkClipboard
from jsonscope.protocols import ClipboardBackend


class _FakeTkRoot:
    def __init__(self) -> None:
        self.calls: list[tuple[str, tuple[object, ...]]] = []

    def clipboard_clear(self) -> None:
        self.calls.append(("clear", ()))

    def clipboard_append(self, text: str) -> None:
        self.calls.append(("append", (text,)))

    def update_idletasks(self) -> None:
        self.calls.append(("update", ()))


class TestProtocolConformance:
    def test_memory_clipboard_conforms(self) -> None:
        assert isinstance(MemoryClipboard(), ClipboardBackend)

    def test_tk_clipboard_conforms(self) -> None:
        assert isinstance(TkClipboard(root=_FakeTkRoot()), ClipboardBackend)

    def test_any_object_with_write_text_conforms(self) -> None:
        class PrintClipboard:
            def write_text(self, text: str) -> None:
                print(text)

        assert isinstance(PrintClipboard(), ClipboardBackend)

    def test_object_without_write_text_does_not_conform(self) -> None:
        assert not isinstance(object(), ClipboardBackend)


class TestMemoryClipboard:
    def test_starts_empty(self) -> None:
        clip = MemoryClipboard()
        assert clip.text == ""
        assert clip.history == []

    def test_records_writes(self) -> None:
        clip = MemoryClipboard()
        clip.write_text("a")
        clip.write_text("b")
        assert clip.text == "b"
        assert clip.history == ["a", "b"]

    def test_history_is_a_copy(self) -> None:
        clip = MemoryClipboard()
        clip.write_text("a")
        clip.history.append("x")
        assert clip.history == ["a"]


class TestTkClipboard:
    def test_writes_through_given_root(self) -> None:
        root = _FakeTkRoot()
        TkClipboard(root=root).write_text("users[0]")
        assert root.calls == [("clear", ()), ("append", ("users[0]",)), ("update", ())]
