"""Main Typer CLI application for testexport."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from testexport import __version__

app = typer.Typer(
    name="testexport",
    help="Extract test cases from Python test files and upload them to a collector",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"testexport {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """testexport command line."""


@app.command()
def export(
    paths: Annotated[
        list[Path],
        typer.Argument(
            help="Test files or directories to scan",
        ),
    ],
    api_key: Annotated[
        str | None,
        typer.Option(
            "-k",
            "--api-key",
            help="Collector API key (or set TESTEXPORT_API_KEY)",
        ),
    ] = None,
    url: Annotated[
        str | None,
        typer.Option(
            "-u",
            "--url",
            help="Collector server URL (or set TESTEXPORT_URL)",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "-n",
            "--dry-run",
            help="List test cases without sending them",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "-v",
            "--verbose",
            help="Stop at the first file that cannot be processed",
        ),
    ] = False,
    no_progress: Annotated[
        bool,
        typer.Option(
            "--no-progress",
            help="Hide the file progress bar",
        ),
    ] = False,
    log_level: Annotated[
        str | None,
        typer.Option(
            "--log-level",
            help="Log level (DEBUG, INFO, WARNING, ERROR)",
        ),
    ] = None,
    log_json: Annotated[
        bool,
        typer.Option(
            "--log-json",
            help="Emit logs as JSON",
        ),
    ] = False,
) -> None:
    """Export test cases found under PATHS.

    Directories are searched recursively for test_*.py and *_test.py files.
    """
    import argparse

    from testexport.cli.commands import run_export

    # Build args namespace for the command handler
    args = argparse.Namespace(
        paths=paths,
        api_key=api_key,
        url=url,
        dry_run=dry_run,
        verbose=verbose,
        no_progress=no_progress,
        log_level=log_level,
        log_json=log_json,
    )

    exit_code = run_export(args)
    raise typer.Exit(code=exit_code)


def main() -> None:
    """Entry point for the Typer CLI."""
    app()
