from __future__ import annotations

"""
Unit tests for the strict text reader.
"""

import pytest

from foldersnap.core.pipeline.components.reader import read_text_file


def test_reads_full_utf8_content(tmp_path):
    path = tmp_path / "unicode.txt"
    path.write_text("línea 1\nlínea 2 ✓\n", encoding="utf-8")
    assert read_text_file(str(path)) == "línea 1\nlínea 2 ✓\n"


def test_invalid_utf8_is_not_replaced(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes("caf\xe9".encode("latin-1"))
    with pytest.raises(UnicodeDecodeError):
        read_text_file(str(path))


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        read_text_file(str(tmp_path / "missing.txt"))


def test_line_endings_are_preserved(tmp_path):
    path = tmp_path / "crlf.txt"
    path.write_bytes(b"a\r\nb\r\nc\rd\n")
    assert read_text_file(str(path)) == "a\r\nb\r\nc\rd\n"


def test_utf8_bom_is_dropped(tmp_path):
    path = tmp_path / "bom.txt"
    path.write_bytes(b"\xef\xbb\xbfhello\r\n")
    assert read_text_file(str(path)) == "hello\r\n"
