"""Decide what to do with a finished run: nothing, print it, or export it."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape

from testexport.core.models import ProcessingResult, TestCase
from testexport.export.exporter import BatchExporter, validate_server_url
from testexport.logging import get_logger

logger = get_logger(__name__)


def format_test_case_line(test_case: TestCase) -> str:
    """Format one dry-run line: ``  - name [label, label] (file)``."""
    return f"  - {test_case.name} [{', '.join(test_case.labels)}] ({test_case.file})"


class ResultDispatcher:
    """Turns a ProcessingResult into the count reported to the caller."""

    def __init__(self, exporter: BatchExporter | None = None, console: Console | None = None):
        self.exporter = exporter if exporter is not None else BatchExporter()
        self.console = console if console is not None else Console(highlight=False)

    def dispatch(
        self,
        result: ProcessingResult,
        api_key: str,
        server_url: str | None,
        dry_run: bool,
    ) -> int:
        """Report or export the collected test cases.

        Returns:
            0 when nothing was found, otherwise the number of test cases
            printed (dry run) or exported.

        Raises:
            ConfigurationError: Live export without a server URL.
            TransmissionError: Export failed.
        """
        if result.is_empty:
            logger.info("No test methods found across all files")
            return 0

        logger.info("Found %d total test methods", result.total)

        if dry_run:
            self.print_test_cases(result.all_test_cases)
            return result.total

        validate_server_url(server_url)
        return self.exporter.export(
            result.all_test_cases,
            result.primary_framework,
            api_key,
            server_url,
        )

    def print_test_cases(self, test_cases: Sequence[TestCase]) -> None:
        self.console.print("All test methods found:")
        for test_case in test_cases:
            self.console.print(escape(format_test_case_line(test_case)))
