"""PySide6 adapters for the pure-Python gallery view model."""
