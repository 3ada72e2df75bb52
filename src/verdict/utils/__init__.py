"""Utility helpers."""
from .importing import import_string, resolve_exception_type

__all__ = ["import_string", "resolve_exception_type"]
