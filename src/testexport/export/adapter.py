"""Per-file extraction: parse, detect framework, extract test cases."""

from __future__ import annotations

import ast
from collections.abc import Callable
from pathlib import Path

from testexport.core.models import Framework, TestCase
from testexport.parsing import detect_framework, extract_test_cases, parse_file

Parser = Callable[[str], ast.Module | None]
Detector = Callable[[ast.Module], Framework | None]
Extractor = Callable[[ast.Module, str, Framework], list[TestCase]]


class FileExtractor:
    """Turns one test file into TestCase records.

    A file that does not parse or has no recognisable framework yields an
    empty list. Any other failure propagates to the caller, which decides
    whether the run survives it.

    The framework-only query re-parses the file; parsing is deterministic
    and side-effect free, so no cache is kept between the two calls.
    """

    def __init__(
        self,
        parser: Parser = parse_file,
        detector: Detector = detect_framework,
        extractor: Extractor = extract_test_cases,
    ):
        self.parser = parser
        self.detector = detector
        self.extractor = extractor

    def collect_test_cases(self, file_path: str | Path) -> list[TestCase]:
        path = str(Path(file_path).absolute())

        tree = self.parser(path)
        if tree is None:
            return []

        framework = self.detector(tree)
        if framework is None:
            return []

        return list(self.extractor(tree, path, framework))

    def detect_framework(self, file_path: str | Path) -> Framework | None:
        tree = self.parser(str(Path(file_path).absolute()))
        if tree is None:
            return None
        return self.detector(tree)
