"""Interface for the editor holding the user's selection."""

from abc import ABC, abstractmethod


class IEditor(ABC):
    """Interface for reading and replacing the current selection."""

    @abstractmethod
    def get_selected_text(self) -> str:
        """Return the selected text (empty string when nothing is selected)."""

    @abstractmethod
    def replace_selected_text(self, text: str) -> None:
        """Replace the selected text in the document.

        Args:
            text: Replacement text
        """
