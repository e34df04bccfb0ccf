"""Locate Python test files under the paths given on the command line."""

from __future__ import annotations

import fnmatch
import os
from collections.abc import Iterable
from pathlib import Path

TEST_FILE_PATTERNS = ("test_*.py", "*_test.py")

SKIPPED_DIRS = frozenset(
    {
        "__pycache__",
        "node_modules",
        "venv",
        "build",
        "dist",
        "site-packages",
    }
)


def is_test_file(name: str) -> bool:
    """Check if a file name matches pytest's default test-file patterns."""
    return any(fnmatch.fnmatch(name, pattern) for pattern in TEST_FILE_PATTERNS)


def _skip_dir(name: str) -> bool:
    return name in SKIPPED_DIRS or name.startswith(".") or name.endswith(".egg-info")


def _walk(root: Path) -> Iterable[Path]:
    for dirpath, dirnames, filenames in os.walk(root):
        # Prune in place so os.walk does not descend into skipped directories
        dirnames[:] = [d for d in dirnames if not _skip_dir(d)]
        for filename in filenames:
            if is_test_file(filename):
                yield Path(dirpath) / filename


def find_test_files(paths: Iterable[str | Path]) -> list[Path]:
    """Collect test files from files and directories.

    Explicit file paths are kept even when their name does not look like a
    test file. Directories are searched recursively. The result is sorted
    and free of duplicates.
    """
    found: set[Path] = set()
    for raw in paths:
        path = Path(raw)
        if path.is_file():
            found.add(path.absolute())
        elif path.is_dir():
            found.update(p.absolute() for p in _walk(path))
    return sorted(found)
