"""Domain models for test-case export.

A run walks many files, folds what each file yields into a ProcessingResult
and finally ships the collected TestCase records to the collector in
Batch-sized requests.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from enum import Enum


class Framework(Enum):
    """Supported test frameworks."""

    PYTEST = "pytest"
    UNITTEST = "unittest"


class ErrorPolicy(Enum):
    """What the file loop does when a file fails unexpectedly."""

    SKIP = "skip"  # Drop the file, keep going
    ABORT = "abort"  # Stop the whole run

    @classmethod
    def for_verbose(cls, verbose: bool) -> ErrorPolicy:
        """Verbose runs surface per-file failures instead of hiding them."""
        return cls.ABORT if verbose else cls.SKIP


@dataclass(frozen=True)
class TestCase:
    """A single discovered test function or method."""

    __test__ = False  # Keep pytest from collecting this class

    name: str
    file: str
    labels: tuple[str, ...] = ()
    suites: tuple[str, ...] = ()  # Enclosing classes, outermost first
    line: int | None = None

    @property
    def full_name(self) -> str:
        """Dotted name including enclosing classes."""
        return ".".join((*self.suites, self.name))

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "name": self.name,
            "suites": list(self.suites),
            "labels": list(self.labels),
            "file": self.file,
            "line": self.line,
        }


@dataclass(frozen=True)
class ProcessingResult:
    """Accumulated outcome of one pass over the input files.

    Instances are immutable; ``absorb`` returns the next accumulator value.
    The primary framework is set once, by the first file that yields tests,
    and is never replaced afterwards. Long runs fold through
    ``ResultBuilder`` instead, which appends in place.
    """

    all_test_cases: tuple[TestCase, ...] = ()
    primary_framework: Framework | None = None

    @property
    def total(self) -> int:
        return len(self.all_test_cases)

    @property
    def is_empty(self) -> bool:
        return not self.all_test_cases

    def absorb(
        self,
        test_cases: Iterable[TestCase],
        detect_framework: Callable[[], Framework | None],
    ) -> ProcessingResult:
        """Fold one file's test cases into the result.

        Args:
            test_cases: Test cases extracted from the file, in order.
            detect_framework: Lazily queried for the file's framework, only
                while the primary framework is still unset.

        Returns:
            The updated result (``self`` when the file yielded nothing).
        """
        new_cases = tuple(test_cases)
        if not new_cases:
            return self

        builder = ResultBuilder.from_result(self)
        builder.absorb(new_cases, detect_framework)
        return builder.build()


@dataclass
class ResultBuilder:
    """Mutable counterpart of ProcessingResult for the file loop.

    Appending to a list keeps a run linear in the number of test cases;
    ``build`` freezes the collected state once at the end.
    """

    test_cases: list[TestCase] = field(default_factory=list)
    primary_framework: Framework | None = None

    @classmethod
    def from_result(cls, result: ProcessingResult) -> ResultBuilder:
        return cls(list(result.all_test_cases), result.primary_framework)

    def absorb(
        self,
        test_cases: Iterable[TestCase],
        detect_framework: Callable[[], Framework | None],
    ) -> None:
        """Append one file's test cases; same framework rule as ProcessingResult.absorb.

        Nothing is recorded if ``detect_framework`` raises.
        """
        new_cases = list(test_cases)
        if not new_cases:
            return
        if self.primary_framework is None:
            self.primary_framework = detect_framework()
        self.test_cases.extend(new_cases)

    def build(self) -> ProcessingResult:
        return ProcessingResult(
            all_test_cases=tuple(self.test_cases),
            primary_framework=self.primary_framework,
        )


@dataclass(frozen=True)
class Batch:
    """A contiguous slice of test cases sent in one request."""

    number: int  # 1-based
    total: int  # Number of batches in the export
    test_cases: Sequence[TestCase] = field(default_factory=tuple)

    @property
    def size(self) -> int:
        return len(self.test_cases)

    @property
    def label(self) -> str:
        return f"{self.number}/{self.total}"
