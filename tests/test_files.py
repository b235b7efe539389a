"""Tests for read_document / write_document."""

from __future__ import annotations

from pathlib import Path

import pytest

from jsonscope.errors import FileIOError
from jsonscope.files import DEFAULT_FILENAME, read_document, write_document


class TestReadDocument:
    def test_reads_utf8(self, tmp_path: Path) -> None:
        source = tmp_path / "doc.json"
        source.write_text('{"name": "café"}', encoding="utf-8")
        assert read_document(source) == '{"name": "café"}'

    def test_drops_byte_order_mark(self, tmp_path: Path) -> None:
        source = tmp_path / "bom.json"
        source.write_bytes(b"\xef\xbb\xbf[1]")
        assert read_document(str(source)) == "[1]"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileIOError, match="could not read") as exc_info:
            read_document(tmp_path / "missing.json")
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_undecodable_file(self, tmp_path: Path) -> None:
        source = tmp_path / "latin1.json"
        source.write_bytes(b'["\xff"]')
        with pytest.raises(FileIOError):
            read_document(source)


class TestWriteDocument:
    def test_default_name(self, tmp_path: Path) -> None:
        target = write_document("[1]", tmp_path)
        assert target == tmp_path / DEFAULT_FILENAME
        assert target.read_text(encoding="utf-8") == "[1]"

    def test_suffix_is_appended(self, tmp_path: Path) -> None:
        target = write_document("{}", tmp_path, "export")
        assert target.name == "export.json"

    def test_existing_suffix_is_kept(self, tmp_path: Path) -> None:
        assert write_document("{}", tmp_path, "data.txt").name == "data.txt"

    def test_creates_directory(self, tmp_path: Path) -> None:
        target = write_document("{}", tmp_path / "a" / "b")
        assert target.exists()

    def test_empty_text_is_rejected(self, tmp_path: Path) -> None:
        with pytest.raises(FileIOError, match="nothing to save"):
            write_document("", tmp_path)

    def test_lone_surrogate_is_a_file_error(self, tmp_path: Path) -> None:
        with pytest.raises(FileIOError, match="could not write") as exc_info:
            write_document('["\ud800"]', tmp_path)
        assert isinstance(exc_info.value.__cause__, UnicodeEncodeError)
        assert not (tmp_path / DEFAULT_FILENAME).exists()

    def test_unwritable_target(self, tmp_path: Path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("x", encoding="utf-8")
        with pytest.raises(FileIOError, match="could not write"):
            write_document("{}", blocker)
