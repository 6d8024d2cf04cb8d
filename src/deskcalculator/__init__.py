"""Desktop four-function calculator (PySide6)."""
__version__ = "0.1.0"
