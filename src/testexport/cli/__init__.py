"""CLI package for testexport."""

from testexport.cli.app import app, main
from testexport.cli.commands import run_export

__all__ = [
    "app",
    "main",
    "run_export",
]
