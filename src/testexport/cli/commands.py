"""Command handlers for the testexport CLI."""

from __future__ import annotations

import argparse

from rich.console import Console
from rich.markup import escape

from testexport.config import get_settings
from testexport.core.exceptions import ExportError
from testexport.export.client import CollectorClient
from testexport.export.display import LoadingSpinner, ProgressBar
from testexport.export.service import TestExportService
from testexport.logging import configure_logging
from testexport.scanner import find_test_files


def _print_error(console: Console, error: ExportError, verbose: bool) -> None:
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    cause = error.__cause__
    if verbose and cause is not None:
        console.print(f"  [dim]caused by {type(cause).__name__}: {escape(str(cause))}[/dim]")


def run_export(args: argparse.Namespace) -> int:
    """Run the export command."""
    settings = get_settings()
    configure_logging(
        log_level=args.log_level or settings.log_level,
        json_format=args.log_json or settings.log_json,
    )

    out = Console(highlight=False)
    err = Console(highlight=False, stderr=True)

    files = find_test_files(args.paths)
    if not files:
        err.print("[red]Error:[/red] No test files found under the given paths")
        return 1

    service = TestExportService(
        client=CollectorClient(timeout=settings.request_timeout),
        spinner=LoadingSpinner(console=err),
        console=out,
    )
    progress = None if args.no_progress else ProgressBar(total=len(files), console=err)

    try:
        count = service.process_test_files_with_progress(
            files,
            api_key=args.api_key or settings.api_key,
            server_url=args.url or settings.url,
            dry_run=args.dry_run,
            verbose=args.verbose,
            progress=progress,
        )
    except ExportError as e:
        if progress is not None:
            progress.stop()
        _print_error(err, e, args.verbose)
        return 1

    if count == 0:
        out.print("No test methods found")
    elif args.dry_run:
        out.print(f"Found [bold]{count}[/bold] test methods (dry run, nothing sent)")
    else:
        out.print(f"Exported [bold]{count}[/bold] test methods")
    return 0
