"""In-memory implementation of IEditor for testing."""

from obsidian_term_linker.domain.interfaces.editor import IEditor


class FakeEditor(IEditor):
    """Editor holding a single selection and recording replacements."""

    def __init__(self, selection: str = ""):
        self.selection = selection
        self.replacements: list[str] = []
        self.should_fail_replace = False

    def get_selected_text(self) -> str:
        return self.selection

    def replace_selected_text(self, text: str) -> None:
        if self.should_fail_replace:
            raise RuntimeError("Editor is read-only")
        self.replacements.append(text)
        self.selection = text
