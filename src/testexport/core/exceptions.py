"""Shared exceptions for the testexport package.

Every failure the export pipeline reports to its caller is an ExportError.
Anything else escaping a collaborator is treated as unclassified and gets
wrapped by the component that catches it.
"""

from __future__ import annotations

from pathlib import Path


class ExportError(Exception):
    """Base class for classified export failures."""


class ConfigurationError(ExportError):
    """Raised when export settings are unusable (e.g. missing server URL)."""


class FileProcessingError(ExportError):
    """Raised when a single test file could not be processed."""

    def __init__(self, file_path: str | Path):
        self.file_path = Path(file_path)
        super().__init__(f"Error processing file {self.file_path.name}")


class TransmissionError(ExportError):
    """Exception raised when sending test data to the server fails."""

    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.status_code:
            return f"{self.message} (HTTP {self.status_code})"
        return self.message


class BatchExportError(TransmissionError):
    """Transmission failure of one batch in a multi-batch export."""

    def __init__(self, message: str, batch_number: int, total_batches: int):
        self.batch_number = batch_number
        self.total_batches = total_batches
        super().__init__(message)
