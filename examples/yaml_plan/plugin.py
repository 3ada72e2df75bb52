"""Registers extra named predicates; load with VERDICT_PLUGINS=plugin."""
from verdict.registry import NamedPredicate, registry


def register() -> None:
    registry.update_or_register(
        NamedPredicate(
            name="example.palindrome",
            func=lambda text: str(text) == str(text)[::-1],
            help="should read the same backwards",
        )
    )
