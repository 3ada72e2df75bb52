"""Built-in named predicates shipped with verdict."""
from __future__ import annotations

from typing import Any

from .registry import NamedPredicate


def _positive(value: Any) -> bool:
    return value > 0


def _negative(value: Any) -> bool:
    return value < 0


def _empty(value: Any) -> bool:
    return len(value) == 0


def _even(value: Any) -> bool:
    return value % 2 == 0


BUILTIN_PREDICATES = (
    NamedPredicate("builtin.positive", _positive, help="should be positive"),
    NamedPredicate("builtin.negative", _negative, help="should be negative"),
    NamedPredicate("builtin.non_negative", lambda value: value >= 0, help="should not be negative"),
    NamedPredicate("builtin.empty", _empty, help="should be empty"),
    NamedPredicate("builtin.non_empty", lambda value: not _empty(value), help="should not be empty"),
    NamedPredicate("builtin.even", _even, help="should be even"),
    NamedPredicate("builtin.odd", lambda value: not _even(value), help="should be odd"),
    NamedPredicate("builtin.truthy", bool, help="should be true"),
    NamedPredicate("builtin.falsy", lambda value: not value, help="should be false"),
    NamedPredicate("builtin.is_none", lambda value: value is None, help="should be None"),
)
