"""Error reporting sinks."""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from rich.console import Console
from rich.markup import escape


class ErrorReporter(ABC):
    """Accepts error messages produced while loading symbols."""

    @abstractmethod
    def report_error(self, context: Optional[str], message: str) -> None:
        """Report one error.

        Args:
            context: Optional short label for where the error came from
            message: Full error message
        """
        pass


class ConsoleReporter(ErrorReporter):
    """Print errors to a rich console."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console(stderr=True)

    def report_error(self, context: Optional[str], message: str) -> None:
        prefix = f"[bold red]Error ({escape(context)}):[/bold red]" if context else "[bold red]Error:[/bold red]"
        self.console.print(f"{prefix} {escape(message)}", soft_wrap=True)


class CollectingReporter(ErrorReporter):
    """Keep reported errors in memory."""

    def __init__(self) -> None:
        self.errors: List[Tuple[Optional[str], str]] = []

    def report_error(self, context: Optional[str], message: str) -> None:
        self.errors.append((context, message))


class NullReporter(ErrorReporter):
    """Discard reported errors."""

    def report_error(self, context: Optional[str], message: str) -> None:
        pass
