"""CLI interface for node-cleaner."""

import logging
from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.prompt import IntPrompt, Prompt

from node_cleaner import __version__
from node_cleaner.cleaner import run_scan
from node_cleaner.display import (
    console,
    show_configuration,
    show_delete_warning,
    show_dry_run_notice,
    show_summary,
)
from node_cleaner.models import ScanConfiguration, default_worker_count
from node_cleaner.notify import get_notifier
from node_cleaner.walker import WalkError

app = typer.Typer(
    name="node-cleaner",
    help="Find and delete all node_modules directories under a path.",
    add_completion=False,
)


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"node-cleaner version {__version__}")
        raise typer.Exit()


def prompt_for_path() -> Path:
    """Ask for the directory to scan until an existing one is given."""
    while True:
        answer = Prompt.ask(
            "Enter the path to scan (or '.' for current directory)",
            default=".",
            console=console,
        )
        path = Path(answer.strip() or ".").expanduser()
        if path.exists():
            return path
        console.print(f"[red]Path does not exist: {path}[/red]")
        console.print("Please try again.")


def prompt_for_mode() -> bool:
    """Ask for dry run (1) or real delete (2). Returns True for dry run."""
    choice = Prompt.ask(
        "Mode - (1) Dry Run (preview only) or (2) Real Delete",
        choices=["1", "2"],
        default="1",
        console=console,
    )
    if choice == "1":
        console.print("[green]Selected: Dry Run (Preview mode)[/green]")
        return True
    console.print("[yellow]Selected: Real Delete mode[/yellow]")
    return False


def prompt_for_workers() -> int:
    """Ask for a worker count between 1 and twice the CPU count."""
    default = default_worker_count()
    maximum = default * 2
    while True:
        workers = IntPrompt.ask(
            f"Number of workers (1-{maximum})",
            default=default,
            console=console,
        )
        if 1 <= workers <= maximum:
            console.print(f"[green]Selected: {workers} workers[/green]")
            return workers
        console.print(f"[red]Please enter a number between 1 and {maximum}[/red]")


def confirm_deletion() -> bool:
    """Require the user to type 'yes' before deleting anything."""
    answer = Prompt.ask("Type 'yes' to confirm", default="", show_default=False, console=console)
    return answer.strip() == "yes"


@app.command()
def main(
    path: Optional[Path] = typer.Option(
        None,
        "--path",
        "-p",
        help="Root directory to scan. Prompts interactively when omitted.",
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Number of worker threads (defaults to the CPU core count).",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Only show what would be deleted, don't actually delete.",
    ),
    yes: bool = typer.Option(False, "-y", "--yes", help="Skip confirmation prompt"),
    notify: bool = typer.Option(True, "--notify/--no-notify", help="Show a notification when done"),
    verbose: bool = typer.Option(False, "--verbose", help="Show debug logging"),
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Find and delete node_modules directories in parallel."""
    configure_logging(verbose)

    if path is None:
        # Interactive mode
        console.print("[bold]Node Modules Cleaner - Interactive Mode[/bold]\n")
        path = prompt_for_path()
        if not dry_run:
            dry_run = prompt_for_mode()
        if workers is None:
            workers = prompt_for_workers()
        console.print()

    try:
        config = ScanConfiguration(
            root_path=path,
            workers=workers if workers is not None else default_worker_count(),
            dry_run=dry_run,
        )
    except ValidationError as e:
        for error in e.errors():
            console.print(f"[red]Error: {error['msg']}[/red]")
        raise typer.Exit(1)

    show_configuration(config)

    if config.dry_run:
        show_dry_run_notice()
    elif not yes:
        show_delete_warning(config)
        if not confirm_deletion():
            console.print("[yellow]Cancelled[/yellow]")
            raise typer.Exit(0)

    try:
        summary = run_scan(config)
    except WalkError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(130)

    show_summary(summary)

    if notify:
        get_notifier(console=console).notify(summary)


if __name__ == "__main__":
    app()
