"""
Status reporting for the VoxPrompt CLI.

Generation code calls the module-level reporter to announce what it is doing;
the CLI decides whether anything is shown by initializing it with a console.
When no console is attached every call is a no-op, so library callers never
see output.
"""

from typing import List, Optional

from rich.console import Console
from rich.status import Status


class ProgressReporter:
    """
    Spinner-backed step reporter with a checkmark trail of finished steps.
    """

    def __init__(self):
        self._status: Optional[Status] = None
        self._console: Optional[Console] = None
        self._completed: List[str] = []
        self._current: Optional[str] = None

    @property
    def completed_steps(self) -> List[str]:
        return list(self._completed)

    def initialize(self, console: Console, initial_message: str = "Starting...") -> Status:
        """
        Attach a console and create the spinner.

        Args:
            console: Rich console to print to
            initial_message: First status line

        Returns:
            Status object, to be used as a context manager by the caller
        """
        self._console = console
        self._status = console.status(f"[dim]{initial_message}[/dim]")
        self._completed = []
        self._current = initial_message
        return self._status

    def reset(self) -> None:
        """Detach from the console so later calls print nothing."""
        self._status = None
        self._console = None
        self._completed = []
        self._current = None

    def step(self, message: str) -> None:
        """Finish the current step and start a new one."""
        if self._status is None:
            return
        if self._current is not None:
            self._mark_done(self._current)
        self._current = message
        self._status.update(f"[dim]{message}[/dim]")

    def complete_step(self, message: Optional[str] = None) -> None:
        """
        Finish the current step without starting another.

        Args:
            message: Replacement text for the checkmark line
        """
        if self._current is None:
            return
        self._mark_done(message or self._current)
        self._current = None

    def fail_step(self, message: str) -> None:
        """Close the current step with a warning marker instead of a checkmark."""
        if self._current is None:
            return
        if self._console is not None:
            self._console.print(f"[yellow]✗[/yellow] [dim]{message}[/dim]")
        self._current = None

    def complete_sub_step(self, message: str) -> None:
        """Print an indented checkmark under the current step."""
        if self._console is not None:
            self._console.print(f"  [green]✓[/green] [dim]{message}[/dim]")

    def _mark_done(self, message: str) -> None:
        self._completed.append(message)
        if self._console is not None:
            self._console.print(f"[green]✓[/green] [dim]{message}[/dim]")


# Global reporter instance
reporter = ProgressReporter()
