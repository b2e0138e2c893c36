"""Completion notifications.

The scan itself never notifies anyone. The CLI picks a notifier for the
current platform and hands it the final summary.
"""

import logging
import platform
import subprocess
from typing import Protocol

from rich.console import Console
from rich.panel import Panel

from node_cleaner.models import ScanSummary

logger = logging.getLogger(__name__)

TITLE = "Node Modules Cleaner"


class CompletionNotifier(Protocol):
    """Anything that can tell the user a run has finished."""

    def notify(self, summary: ScanSummary) -> None: ...


def build_message(summary: ScanSummary) -> str:
    """Build the completion message for a summary."""
    if summary.dry_run:
        message = (
            f"Dry run completed successfully!\n"
            f"{summary.deleted} node_modules would be deleted."
        )
    else:
        message = (
            f"Node Modules Cleaner has completed successfully!\n"
            f"{summary.deleted} node_modules deleted."
        )
    if summary.has_errors:
        message += f"\n{summary.errors} errors, check the console for details."
    return message


def _escape_applescript(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"')


class ConsoleNotifier:
    """Print the completion message in a panel."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()

    def notify(self, summary: ScanSummary) -> None:
        self.console.print()
        self.console.print(Panel(build_message(summary), title=f"[bold]{TITLE}[/bold]", border_style="green"))


class MacNotifier:
    """Show a macOS notification, then a dialog so the result is not missed."""

    # Dialog dismisses itself so an unattended run still exits
    DIALOG_TIMEOUT = 60

    def notify(self, summary: ScanSummary) -> None:
        message = _escape_applescript(build_message(summary))
        self._run_script(
            f'display notification "{message}" with title "{TITLE}" sound name "Glass"',
            timeout=30,
        )
        self._run_script(
            f'display dialog "{message}" with title "{TITLE}" buttons {{"OK"}} '
            f'default button "OK" with icon note giving up after {self.DIALOG_TIMEOUT}',
            timeout=self.DIALOG_TIMEOUT + 30,
        )

    def _run_script(self, script: str, timeout: int) -> None:
        try:
            subprocess.run(
                ["osascript", "-e", script],
                capture_output=True,
                text=True,
                timeout=timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.warning("Could not show notification: %s", e)


class WindowsNotifier:
    """Show a Windows message box."""

    MB_OK = 0x00000000
    MB_ICONINFORMATION = 0x00000040

    def notify(self, summary: ScanSummary) -> None:
        import ctypes

        try:
            ctypes.windll.user32.MessageBoxW(
                0, build_message(summary), TITLE, self.MB_OK | self.MB_ICONINFORMATION
            )
        except (AttributeError, OSError) as e:
            logger.warning("Could not show message box: %s", e)


def get_notifier(
    system: str | None = None, console: Console | None = None
) -> CompletionNotifier:
    """
    Choose the notifier for a platform.

    Args:
        system: Result of platform.system(); detected when omitted
        console: Console the fallback notifier prints to

    Returns:
        MacNotifier on macOS, WindowsNotifier on Windows, otherwise
        ConsoleNotifier
    """
    system = system or platform.system()
    if system == "Darwin":
        return MacNotifier()
    if system == "Windows":
        return WindowsNotifier()
    return ConsoleNotifier(console)
