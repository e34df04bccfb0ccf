"""Tests for parse_file."""

from __future__ import annotations

import ast

import pytest

from testexport.parsing.parser import parse_file
from tests.factories import BROKEN_MODULE, PYTEST_MODULE


class TestParseFile:
    """Tests for turning files into AST modules."""

    def test_parses_valid_module(self, write_file):
        path = write_file("test_ok.py", PYTEST_MODULE)
        tree = parse_file(path)
        assert isinstance(tree, ast.Module)

    def test_accepts_str_path(self, write_file):
        path = write_file("test_ok.py", PYTEST_MODULE)
        assert parse_file(str(path)) is not None

    def test_syntax_error_returns_none(self, write_file):
        """Unparsable files are not an error, just unusable."""
        path = write_file("test_broken.py", BROKEN_MODULE)
        assert parse_file(path) is None

    def test_invalid_utf8_returns_none(self, tmp_path):
        path = tmp_path / "test_binary.py"
        path.write_bytes(b"def test_x():\n    return '\xff\xfe'\n")
        assert parse_file(path) is None

    def test_null_bytes_return_none(self, tmp_path):
        path = tmp_path / "test_null.py"
        path.write_bytes(b"def test_x():\x00\n    pass\n")
        assert parse_file(path) is None

    def test_utf8_bom_is_accepted(self, tmp_path):
        path = tmp_path / "test_bom.py"
        path.write_bytes(b"\xef\xbb\xbfdef test_x():\n    pass\n")
        assert parse_file(path) is not None

    def test_missing_file_raises(self, tmp_path):
        """I/O failures propagate to the caller."""
        with pytest.raises(OSError):
            parse_file(tmp_path / "missing.py")
