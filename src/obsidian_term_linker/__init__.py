"""Create glossary notes from selected text and link them in place."""

__version__ = "0.1.0"
