"""File loop: fold every file's test cases into one ProcessingResult."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from testexport.core.exceptions import FileProcessingError
from testexport.core.models import ErrorPolicy, ProcessingResult, ResultBuilder
from testexport.export.adapter import FileExtractor
from testexport.export.progress import NULL_PROGRESS, ProgressReporter
from testexport.logging import get_logger

logger = get_logger(__name__)


def _process_file(
    builder: ResultBuilder,
    file_path: Path,
    extractor: FileExtractor,
) -> None:
    test_cases = extractor.collect_test_cases(file_path)
    builder.absorb(test_cases, lambda: extractor.detect_framework(file_path))


def process_all_files(
    files: Iterable[str | Path],
    policy: ErrorPolicy = ErrorPolicy.SKIP,
    extractor: FileExtractor | None = None,
    progress: ProgressReporter = NULL_PROGRESS,
) -> ProcessingResult:
    """Process files in order and accumulate their test cases.

    Args:
        files: Test files, processed strictly in the given order.
        policy: SKIP drops a failing file and continues; ABORT stops the
            run with a FileProcessingError naming the file.
        extractor: Per-file extractor (defaults to the AST-based one).
        progress: Receives the processed-file count after every file and a
            single ``finish()`` once the loop completes.

    Returns:
        The final ProcessingResult.

    Raises:
        FileProcessingError: Under ABORT, for the first file that fails.
    """
    extractor = extractor if extractor is not None else FileExtractor()
    builder = ResultBuilder()
    processed = 0

    for file_path in files:
        path = Path(file_path)
        try:
            _process_file(builder, path, extractor)
        except Exception as e:
            if policy is ErrorPolicy.ABORT:
                raise FileProcessingError(path) from e
            logger.debug("Skipping file after error", file=str(path), error=str(e))
        finally:
            processed += 1
            progress.update(processed)

    progress.finish()
    return builder.build()
