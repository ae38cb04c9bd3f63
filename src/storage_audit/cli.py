"""CLI interface for storage-audit."""

import logging

import typer
from rich.console import Console
from rich.logging import RichHandler

from storage_audit import __version__
from storage_audit.auditor import run_audit
from storage_audit.catalog import CLEANUP_TIPS
from storage_audit.config import default_config
from storage_audit.display import (
    console,
    make_console,
    set_console,
    show_report,
    show_scanning_progress,
)

app = typer.Typer(
    name="storage-audit",
    help="Read-only audit of caches, build artifacts and other reclaimable disk space.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def configure_logging(debug: bool) -> None:
    """Send log records to stderr so they never mix with the report."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(name)s: %(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"storage-audit version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output (useful for piping or logging).",
    ),
    debug: bool = typer.Option(False, "--debug", help="Log skipped paths and timings to stderr."),
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Audit storage used by caches, build artifacts, IDEs and package managers.

    Read-only: nothing is deleted. Run with sudo for more accurate sizing of
    system directories.
    """
    configure_logging(debug)
    set_console(make_console(no_color=no_color))

    with show_scanning_progress() as progress:
        task = progress.add_task("Starting audit...", total=None)

        def update_progress(description: str) -> None:
            progress.update(task, description=description)

        report = run_audit(default_config(), progress=update_progress)

    show_report(report, CLEANUP_TIPS)


if __name__ == "__main__":
    app()
