"""GitDesk UI package (PySide6)."""
