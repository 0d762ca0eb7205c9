# planwright/validation/__init__.py
"""Input validation and sanitization utilities."""

from .sanitize import sanitize_description, sanitize_input_path

__all__ = [
    "sanitize_description",
    "sanitize_input_path",
]
