"""Python source parsing: AST parsing, framework detection, test-case extraction."""

from testexport.parsing.detector import detect_framework
from testexport.parsing.extractor import extract_test_cases
from testexport.parsing.parser import parse_file

__all__ = [
    "detect_framework",
    "extract_test_cases",
    "parse_file",
]
