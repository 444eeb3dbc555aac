"""Interface for user-visible notices."""

from abc import ABC, abstractmethod


class INotifier(ABC):
    """Fire-and-forget notification surface."""

    @abstractmethod
    def notify(self, message: str) -> None:
        """Show a short message to the user."""
