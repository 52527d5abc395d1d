"""PySide6 view layer for grouped lists."""
