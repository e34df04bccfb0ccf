"""Rich-based progress widgets for the export CLI.

Both widgets write to stderr by default so that stdout only carries
results (e.g. the dry-run listing).
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    TaskID,
    TextColumn,
    TimeElapsedColumn,
)
from rich.status import Status

DEFAULT_SPINNER_MESSAGE = "Sending test data to server..."


def _stderr_console() -> Console:
    return Console(highlight=False, stderr=True)


class ProgressBar:
    """File-processing progress bar.

    Rendering starts lazily at the first update so that constructing the
    bar has no visible effect.
    """

    def __init__(self, total: int, description: str = "Processing files", console: Console | None = None):
        self.total = total
        self.description = description
        self.console = console or _stderr_console()
        self._progress: Progress | None = None
        self._task_id: TaskID | None = None

    @property
    def started(self) -> bool:
        return self._progress is not None

    def _ensure_started(self) -> Progress:
        if self._progress is None:
            self._progress = Progress(
                TextColumn("[progress.description]{task.description}"),
                BarColumn(),
                MofNCompleteColumn(),
                TimeElapsedColumn(),
                console=self.console,
                transient=False,
            )
            self._progress.start()
            self._task_id = self._progress.add_task(self.description, total=self.total)
        return self._progress

    def update(self, count: int) -> None:
        progress = self._ensure_started()
        progress.update(self._task_id, completed=count)

    def finish(self) -> None:
        progress = self._ensure_started()
        progress.update(self._task_id, completed=self.total)
        self.stop()

    def stop(self) -> None:
        """Stop rendering where the bar is (used when a run is aborted)."""
        if self._progress is not None:
            self._progress.stop()
            self._progress = None
            self._task_id = None


class LoadingSpinner:
    """Indeterminate spinner shown while test data is being sent."""

    def __init__(self, message: str = DEFAULT_SPINNER_MESSAGE, console: Console | None = None):
        self.message = message
        self.console = console or _stderr_console()
        self._status: Status | None = None

    @property
    def running(self) -> bool:
        return self._status is not None

    def start(self) -> None:
        if self._status is None:
            self._status = self.console.status(self.message)
            self._status.start()

    def stop(self) -> None:
        if self._status is not None:
            self._status.stop()
            self._status = None

    def stop_with_message(self, message: str) -> None:
        self.stop()
        self.console.print(f"[green]✓[/green] {escape(message)}")
