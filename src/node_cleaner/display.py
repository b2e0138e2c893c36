"""Rich terminal display for node-cleaner."""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from node_cleaner.models import ScanConfiguration, ScanSummary, default_worker_count

console = Console()


def format_size(size_bytes: int) -> str:
    """Format bytes to human-readable string (decimal units)."""
    if size_bytes >= 1000**3:
        return f"{size_bytes / (1000**3):.1f} GB"
    elif size_bytes >= 1000**2:
        return f"{size_bytes / (1000**2):.1f} MB"
    elif size_bytes >= 1000:
        return f"{size_bytes / 1000:.1f} KB"
    else:
        return f"{size_bytes} B"


def show_configuration(config: ScanConfiguration) -> None:
    """Display the resolved configuration."""
    console.print("[bold]Configuration:[/bold]")
    console.print(f"  Path:      {config.root_path}")
    console.print(f"  Workers:   {config.workers}")
    console.print(f"  CPU cores: {default_worker_count()}")
    console.print()


def show_dry_run_notice() -> None:
    """Tell the user nothing will be deleted."""
    console.print(
        Panel(
            "[bold]DRY RUN MODE[/bold] - no directories will be deleted",
            border_style="yellow",
        )
    )


def show_delete_warning(config: ScanConfiguration) -> None:
    """Warn before a real deletion run."""
    console.print(
        Panel(
            f"You are about to delete [bold]ALL[/bold] node_modules directories in\n"
            f"[bold]{config.root_path}[/bold]",
            title="[bold red]Warning[/bold red]",
            border_style="red",
        )
    )


def show_summary(summary: ScanSummary) -> None:
    """Display final statistics for a run."""
    color = "yellow" if summary.has_errors else "green"
    title = "Dry Run Complete" if summary.dry_run else "Cleanup Complete"

    console.print()
    console.print(f"[bold {color}]✓ {title}[/bold {color}]")

    table = Table(show_header=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Directories scanned", str(summary.scanned))
    table.add_row("node_modules found", str(summary.found))
    if summary.dry_run:
        table.add_row("Would delete", str(summary.deleted))
    else:
        table.add_row("node_modules deleted", str(summary.deleted))
        table.add_row("Space freed", f"[bold green]{format_size(summary.bytes_freed)}[/bold green]")
    if summary.has_errors:
        table.add_row("[red]Errors[/red]", f"[red]{summary.errors}[/red]")
    else:
        table.add_row("Errors", "0")
    table.add_row("Execution time", f"{summary.duration_seconds:.2f}s")

    console.print(table)

    if summary.has_errors:
        console.print("[dim]Some directories could not be processed, see the log above.[/dim]")
