"""Helpers for loading user-provided callables from a plan's source file."""
from __future__ import annotations

import importlib.util
import sys
from pathlib import Path
from types import ModuleType
from typing import Callable, Dict

_MODULES: Dict[Path, ModuleType] = {}


def load_module(source: Path) -> ModuleType:
    """Import the Python file at ``source`` once and cache the module."""

    path = source.expanduser().resolve()
    if path in _MODULES:
        return _MODULES[path]
    if not path.exists():
        raise FileNotFoundError(f"Custom source file not found: {path}")
    module_name = f"verdict_custom_{path.stem}_{hash(str(path)) & 0xFFFF:x}"
    spec = importlib.util.spec_from_file_location(module_name, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Unable to load module from {path}")
    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module
    spec.loader.exec_module(module)
    _MODULES[path] = module
    return module


def load_from_source(source: Path, func_name: str) -> Callable:
    """Load a callable named ``func_name`` from a Python file at ``source``."""

    module = load_module(source)
    if not hasattr(module, func_name):
        raise AttributeError(f"Function '{func_name}' not found in {source}")
    func = getattr(module, func_name)
    if not callable(func):
        raise TypeError(f"Attribute '{func_name}' in {source} is not callable")
    return func  # type: ignore[return-value]
