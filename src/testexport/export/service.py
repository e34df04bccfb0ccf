"""Export orchestration: file loop, then print or upload."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from rich.console import Console

from testexport.core.models import ErrorPolicy
from testexport.export.adapter import FileExtractor
from testexport.export.aggregation import process_all_files
from testexport.export.client import CollectorClient
from testexport.export.dispatcher import ResultDispatcher
from testexport.export.exporter import BatchExporter
from testexport.export.progress import NULL_PROGRESS, NULL_SPINNER, ProgressReporter, Spinner


class TestExportService:
    """Extracts test cases from files and reports or exports them.

    All collaborators are optional; the defaults parse Python files with
    ``ast``, post over HTTP and render nothing.
    """

    __test__ = False

    def __init__(
        self,
        extractor: FileExtractor | None = None,
        client: CollectorClient | None = None,
        spinner: Spinner = NULL_SPINNER,
        console: Console | None = None,
    ):
        self.extractor = extractor if extractor is not None else FileExtractor()
        self.exporter = BatchExporter(client=client, spinner=spinner)
        self.dispatcher = ResultDispatcher(exporter=self.exporter, console=console)

    def process_test_files_with_progress(
        self,
        files: Sequence[str | Path],
        api_key: str,
        server_url: str | None,
        dry_run: bool = False,
        verbose: bool = False,
        progress: ProgressReporter | None = None,
    ) -> int:
        """Process all files and report or export what they contain.

        Args:
            files: Test files, in processing order.
            api_key: Collector API key.
            server_url: Collector base URL (only needed for a live export).
            dry_run: Print the test cases instead of sending them.
            verbose: Abort on the first file that fails instead of skipping it.
            progress: Optional per-file progress reporter.

        Returns:
            Number of test cases found (dry run) or exported.
        """
        result = process_all_files(
            files,
            policy=ErrorPolicy.for_verbose(verbose),
            extractor=self.extractor,
            progress=progress if progress is not None else NULL_PROGRESS,
        )
        return self.dispatcher.dispatch(result, api_key, server_url, dry_run)
