"""Progress reporting interfaces for the export pipeline.

The pipeline reports progress through these protocols and never renders
anything itself. Display components (see ``display.py``) implement them;
the null implementations are the defaults so callers may attach nothing.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class ProgressReporter(Protocol):
    """Per-file progress against a known total."""

    def update(self, count: int) -> None:
        """Report that ``count`` files have been processed so far."""
        ...

    def finish(self) -> None:
        """Signal that the file loop completed."""
        ...


@runtime_checkable
class Spinner(Protocol):
    """Indeterminate indicator shown while requests are in flight."""

    def start(self) -> None: ...

    def stop(self) -> None: ...

    def stop_with_message(self, message: str) -> None: ...


class NullProgress:
    """ProgressReporter that does nothing."""

    def update(self, count: int) -> None:
        pass

    def finish(self) -> None:
        pass


class NullSpinner:
    """Spinner that does nothing."""

    def start(self) -> None:
        pass

    def stop(self) -> None:
        pass

    def stop_with_message(self, message: str) -> None:
        pass


NULL_PROGRESS = NullProgress()
NULL_SPINNER = NullSpinner()
