"""User-visible notices printed to the terminal."""

from rich.console import Console

from ..domain.interfaces.notifier import INotifier


class ConsoleNotifier(INotifier):
    """Prints notices through a rich console, one line each."""

    def __init__(self, console: Console | None = None):
        self.console = console or Console()
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)
        self.console.print(message, style="bold", markup=False, highlight=False)
