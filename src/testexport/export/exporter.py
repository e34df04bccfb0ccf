"""Batch export of test cases to the collector."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator, Sequence

from testexport.core.exceptions import (
    BatchExportError,
    ConfigurationError,
    ExportError,
    TransmissionError,
)
from testexport.core.models import Batch, Framework, TestCase
from testexport.export.client import CollectorClient, build_load_url
from testexport.export.payload import build_request_body
from testexport.export.progress import NULL_SPINNER, Spinner
from testexport.logging import get_logger

logger = get_logger(__name__)

MAX_BATCH_SIZE = 1000

PayloadBuilder = Callable[[Sequence[TestCase], Framework | None], str]


def validate_server_url(server_url: str | None) -> str:
    """Return the server URL or raise ConfigurationError if it is missing or blank."""
    if server_url is None or not server_url.strip():
        raise ConfigurationError(
            "Server URL is required for actual execution (use --url or set TESTEXPORT_URL)"
        )
    return server_url


def split_batches(test_cases: Sequence[TestCase], batch_size: int = MAX_BATCH_SIZE) -> Iterator[Batch]:
    """Yield consecutive batches; all but the last hold exactly ``batch_size`` cases."""
    total = len(test_cases)
    total_batches = math.ceil(total / batch_size)
    for index in range(total_batches):
        start = index * batch_size
        end = min(start + batch_size, total)
        yield Batch(number=index + 1, total=total_batches, test_cases=test_cases[start:end])


class BatchExporter:
    """Sends test cases to the collector, in batches when there are many.

    A failed batch ends the export: later batches are not sent and the
    caller gets an error, never a partial count.
    """

    def __init__(
        self,
        client: CollectorClient | None = None,
        spinner: Spinner = NULL_SPINNER,
        payload_builder: PayloadBuilder = build_request_body,
        batch_size: int = MAX_BATCH_SIZE,
    ):
        self.client = client if client is not None else CollectorClient()
        self.spinner = spinner
        self.payload_builder = payload_builder
        self.batch_size = batch_size

    def export(
        self,
        test_cases: Sequence[TestCase],
        framework: Framework | None,
        api_key: str,
        server_url: str | None,
    ) -> int:
        """Export all test cases.

        Returns:
            Number of test cases exported (always the full count).

        Raises:
            ConfigurationError: If the server URL is missing or blank.
            TransmissionError: If any request fails (BatchExportError in
                multi-batch mode).
        """
        request_url = build_load_url(validate_server_url(server_url), api_key)

        self.spinner.start()
        try:
            if len(test_cases) <= self.batch_size:
                exported = self._export_single_batch(test_cases, framework, request_url)
            else:
                exported = self._export_in_batches(test_cases, framework, request_url)
        except BaseException:
            self.spinner.stop()
            raise

        self.spinner.stop_with_message(f"Successfully exported {exported} test methods")
        return exported

    def _export_single_batch(
        self,
        test_cases: Sequence[TestCase],
        framework: Framework | None,
        request_url: str,
    ) -> int:
        body = self.payload_builder(test_cases, framework)
        try:
            self.client.send_post_request(request_url, body)
        except ExportError:
            raise
        except Exception as e:
            raise TransmissionError(f"Error while executing request: {e}") from e
        return len(test_cases)

    def _export_in_batches(
        self,
        test_cases: Sequence[TestCase],
        framework: Framework | None,
        request_url: str,
    ) -> int:
        total_tests = len(test_cases)
        total_batches = math.ceil(total_tests / self.batch_size)
        logger.info(
            "Large test suite detected (%d tests). Sending in %d batches...",
            total_tests,
            total_batches,
        )

        exported_count = 0
        for batch in split_batches(test_cases, self.batch_size):
            logger.info("Sending batch %s (%d tests)...", batch.label, batch.size)
            body = self.payload_builder(batch.test_cases, framework)
            try:
                self.client.send_post_request(request_url, body)
            except ExportError as e:
                raise BatchExportError(
                    f"Failed at batch {batch.label}: {e}", batch.number, batch.total
                ) from e
            except Exception as e:
                raise BatchExportError(
                    f"Error in batch {batch.label}: {e}", batch.number, batch.total
                ) from e
            exported_count += batch.size

        logger.info(
            "Successfully exported %d test methods in %d batches",
            exported_count,
            total_batches,
        )
        return exported_count
