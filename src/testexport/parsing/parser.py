"""Source parsing for Python test files."""

from __future__ import annotations

import ast
from pathlib import Path


def parse_file(file_path: str | Path) -> ast.Module | None:
    """Parse a Python file into its AST.

    Returns None for files that cannot be turned into a usable tree
    (syntax errors, bad encodings, embedded null bytes). I/O errors are
    not swallowed.
    """
    path = Path(file_path)
    source = path.read_bytes()  # bytes so that coding cookies and BOMs are honoured
    try:
        return ast.parse(source, filename=str(path))
    except (SyntaxError, ValueError):
        # ValueError covers null bytes on older interpreters and UnicodeDecodeError
        return None
