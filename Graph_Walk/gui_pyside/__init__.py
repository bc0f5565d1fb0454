"""PySide6 renderer for the graph walk."""
