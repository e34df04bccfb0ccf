"""testexport - extract test cases from Python test suites and upload them to a collector."""

__version__ = "0.1.0"

from testexport.core.models import (
    Batch,
    ErrorPolicy,
    Framework,
    ProcessingResult,
    TestCase,
)

__all__ = [
    "Batch",
    "ErrorPolicy",
    "Framework",
    "ProcessingResult",
    "TestCase",
]
