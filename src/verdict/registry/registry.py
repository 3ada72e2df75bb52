"""Named predicate registry used by plan files."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Iterator, Optional


@dataclass(frozen=True)
class NamedPredicate:
    """A predicate addressable by name together with its help text."""

    name: str
    func: Callable[[Any], Any]
    help: Optional[str] = None

    def __call__(self, value: Any) -> Any:
        return self.func(value)


class PredicateRegistry:
    """Stores named predicates and exposes lookup utilities."""

    def __init__(self) -> None:
        self._predicates: Dict[str, NamedPredicate] = {}

    def register(self, predicate: NamedPredicate) -> NamedPredicate:
        if predicate.name in self._predicates:
            raise ValueError(f"Predicate '{predicate.name}' already registered")
        self._predicates[predicate.name] = predicate
        return predicate

    def update_or_register(self, predicate: NamedPredicate) -> NamedPredicate:
        self._predicates[predicate.name] = predicate
        return predicate

    def get(self, name: str) -> NamedPredicate:
        try:
            return self._predicates[name]
        except KeyError as exc:
            raise KeyError(f"Predicate '{name}' is not registered") from exc

    def __contains__(self, name: str) -> bool:
        return name in self._predicates

    def __iter__(self) -> Iterator[NamedPredicate]:
        return iter(self._predicates.values())

    def names(self) -> Iterable[str]:
        return tuple(self._predicates.keys())


registry = PredicateRegistry()


def register_predicate(
    name: str, help: Optional[str] = None
) -> Callable[[Callable[[Any], Any]], Callable[[Any], Any]]:
    """Decorator registering the decorated function under ``name``."""

    def decorator(func: Callable[[Any], Any]) -> Callable[[Any], Any]:
        registry.register(NamedPredicate(name=name, func=func, help=help))
        return func

    return decorator


def clear_registry() -> None:
    registry._predicates.clear()


def load_builtins() -> None:
    from . import builtins  # noqa: WPS433

    for predicate in builtins.BUILTIN_PREDICATES:
        registry.update_or_register(predicate)
