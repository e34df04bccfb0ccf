"""Core models and exceptions shared by the export pipeline."""

from testexport.core.exceptions import (
    BatchExportError,
    ConfigurationError,
    ExportError,
    FileProcessingError,
    TransmissionError,
)
from testexport.core.models import Batch, ErrorPolicy, Framework, ProcessingResult, ResultBuilder, TestCase

__all__ = [
    "Batch",
    "BatchExportError",
    "ConfigurationError",
    "ErrorPolicy",
    "ExportError",
    "FileProcessingError",
    "Framework",
    "ProcessingResult",
    "ResultBuilder",
    "TestCase",
    "TransmissionError",
]
