"""Utility helpers for dynamic imports."""
from __future__ import annotations

import builtins
import importlib
from typing import Any, Type


def import_string(path: str) -> Any:
    """Return the attribute at the given dotted path.

    Supports ``module:attr`` or ``module.attr`` syntax.
    """

    if not path:
        raise ValueError("Empty import path provided")
    module_name, sep, attr = path.partition(":")
    if not sep:
        module_name, sep, attr = path.rpartition(".")
    if not module_name or not attr:
        raise ValueError(f"Invalid import path '{path}'")
    module = importlib.import_module(module_name)
    try:
        return getattr(module, attr)
    except AttributeError as exc:
        raise AttributeError(f"Module '{module_name}' has no attribute '{attr}'") from exc


def resolve_exception_type(name: str) -> Type[BaseException]:
    """Resolve an exception class from a builtin name or an import path."""

    text = name.strip()
    if ":" not in text and "." not in text:
        candidate = getattr(builtins, text, None)
        if candidate is None:
            raise ValueError(f"Unknown builtin exception '{text}'")
    else:
        candidate = import_string(text)
    if not isinstance(candidate, type) or not issubclass(candidate, BaseException):
        raise ValueError(f"'{text}' does not name an exception type")
    return candidate
