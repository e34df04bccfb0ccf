"""Export pipeline: extract test cases from files and upload them to a collector.

Flow: files -> FileExtractor -> process_all_files -> ResultDispatcher ->
(print | BatchExporter). TestExportService wires the pieces together.
"""

from .adapter import FileExtractor
from .aggregation import process_all_files
from .client import CollectorClient, build_load_url
from .dispatcher import ResultDispatcher, format_test_case_line
from .display import LoadingSpinner, ProgressBar
from .exporter import MAX_BATCH_SIZE, BatchExporter, split_batches, validate_server_url
from .payload import LoadEntry, LoadRequest, build_request_body
from .progress import NULL_PROGRESS, NULL_SPINNER, NullProgress, NullSpinner, ProgressReporter, Spinner
from .service import TestExportService

__all__ = [
    # adapter
    "FileExtractor",
    # aggregation
    "process_all_files",
    # client
    "CollectorClient",
    "build_load_url",
    # dispatcher
    "ResultDispatcher",
    "format_test_case_line",
    # display
    "LoadingSpinner",
    "ProgressBar",
    # exporter
    "MAX_BATCH_SIZE",
    "BatchExporter",
    "split_batches",
    "validate_server_url",
    # payload
    "LoadEntry",
    "LoadRequest",
    "build_request_body",
    # progress
    "NULL_PROGRESS",
    "NULL_SPINNER",
    "NullProgress",
    "NullSpinner",
    "ProgressReporter",
    "Spinner",
    # service
    "TestExportService",
]
