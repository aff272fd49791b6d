"""Sanitize and extend $PATH for shell startup files."""

__version__ = "0.1.0"
