"""verdict package initialization."""
from __future__ import annotations

import importlib
import os

from .config import DEFAULT_CONFIG, Config, Language
from .core.evaluator import cancellation_requested
from .core.results import TestResult
from .core.runner import RunReport, run_all
from .core.suite import Results, Suite
from .core.testcase import TestCase
from .version import __version__

__all__ = [
    "__version__",
    "bootstrap",
    "cancellation_requested",
    "Config",
    "DEFAULT_CONFIG",
    "Language",
    "Results",
    "RunReport",
    "Suite",
    "TestCase",
    "TestResult",
    "run_all",
]

_BOOTSTRAPPED = False


def bootstrap() -> None:
    """Initialize verdict (idempotent)."""

    global _BOOTSTRAPPED
    if _BOOTSTRAPPED:
        return
    from .registry import load_builtins

    load_builtins()
    _load_plugins()
    _BOOTSTRAPPED = True


def _load_plugins() -> None:
    plugin_env = os.environ.get("VERDICT_PLUGINS")
    if not plugin_env:
        return
    for item in plugin_env.split(","):
        module_name = item.strip()
        if not module_name:
            continue
        module = importlib.import_module(module_name)
        register = getattr(module, "register", None)
        if callable(register):
            register()
