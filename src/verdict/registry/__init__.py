"""Predicate registry public API."""
from .registry import (
    NamedPredicate,
    PredicateRegistry,
    clear_registry,
    load_builtins,
    register_predicate,
    registry,
)

__all__ = [
    "NamedPredicate",
    "PredicateRegistry",
    "registry",
    "register_predicate",
    "load_builtins",
    "clear_registry",
]
