"""Turns plan configuration into runnable suites."""
from __future__ import annotations

import functools
import re
from typing import Any, Callable, Dict, Optional, Tuple

from verdict import factory
from verdict.core.suite import Suite
from verdict.core.testcase import TestCase
from verdict.registry import registry
from verdict.utils.importing import import_string, resolve_exception_type

from . import custom
from .models import ExecutionPlan, MessageCheck, SuiteConfig, TestConfig


def build_suites(plan: ExecutionPlan) -> Tuple[Suite, ...]:
    return tuple(build_suite(suite, plan) for suite in plan.suites)


def build_suite(config: SuiteConfig, plan: ExecutionPlan) -> Suite:
    tests = []
    for test in config.tests:
        try:
            tests.append(build_test(test, plan, config.tags))
        except (AttributeError, ImportError, OSError, TypeError, ValueError) as exc:
            raise ValueError(f"Test '{test.name}' in suite '{config.name}': {exc}") from exc
    return Suite(name=config.name, tests=tuple(tests))


def build_test(config: TestConfig, plan: ExecutionPlan, suite_tags: Tuple[str, ...] = ()) -> TestCase:
    """Build the :class:`TestCase` described by ``config``.

    The target callable is wrapped with its arguments so each run calls it
    again.
    """

    func = resolve_callable(config.call, plan)
    thunk = functools.partial(func, *config.args, **dict(config.kwargs))
    tags = tuple(dict.fromkeys(tuple(suite_tags) + tuple(config.tags)))
    common: Dict[str, Any] = {"timeout": config.timeout, "tags": tags}
    kind = config.kind
    if kind == "equal":
        return factory.equal(config.name, thunk, config.expected, **common)
    if kind == "equal_approx":
        return factory.equal_approx(
            config.name, thunk, config.expected, tolerance=config.tolerance, **common
        )
    if kind == "property":
        predicate, help_text = resolve_predicate(config.predicate or "", plan)
        return factory.property_test(
            config.name, thunk, predicate, help=config.help or help_text, **common
        )
    if kind == "assert":
        return factory.assert_test(config.name, thunk, **common)
    if kind == "refute":
        return factory.refute_test(config.name, thunk, **common)
    common.update(_message_options(config.message))
    if kind == "exception":
        types = [resolve_exception_type(name) for name in config.raises]
        return factory.expect_exception_one_of(config.name, thunk, types, **common)
    if kind == "exception_except":
        excluded = resolve_exception_type(config.excluded or "")
        return factory.expect_exception_except(config.name, thunk, excluded, **common)
    if kind == "any_exception_but_not_implemented":
        return factory.any_exception_but_not_implemented_error(config.name, thunk, **common)
    raise ValueError(f"Unknown test kind '{kind}'")


def resolve_callable(reference: str, plan: ExecutionPlan) -> Callable[..., Any]:
    """Resolve ``module:attr`` paths, or bare names from the plan's source file."""

    if ":" in reference:
        target = import_string(reference)
    elif plan.source is not None:
        target = custom.load_from_source(plan.source, reference)
    elif "." in reference:
        target = import_string(reference)
    else:
        raise ValueError(f"Cannot resolve '{reference}': plan has no 'source' file")
    if not callable(target):
        raise TypeError(f"'{reference}' is not callable")
    return target


def resolve_predicate(reference: str, plan: ExecutionPlan) -> Tuple[Callable[[Any], Any], Optional[str]]:
    """Return a predicate and its default help text."""

    if reference in registry:
        named = registry.get(reference)
        return named.func, named.help
    return resolve_callable(reference, plan), None


def _message_options(check: Optional[MessageCheck]) -> Dict[str, Any]:
    if check is None:
        return {}
    text = check.text
    if check.mode == "exact":
        return {"message": text}
    if check.mode == "contains":
        return {
            "message_predicate": lambda message: text in message,
            "predicate_help": f'contains "{text}"',
        }
    if check.mode == "startswith":
        return {
            "message_predicate": lambda message: message.startswith(text),
            "predicate_help": f'starts with "{text}"',
        }
    if check.mode == "matches":
        try:
            pattern = re.compile(text)
        except re.error as exc:
            raise ValueError(f"Invalid message pattern '{text}': {exc}") from exc
        return {
            "message_predicate": lambda message: pattern.search(message) is not None,
            "predicate_help": f"matches /{text}/",
        }
    raise ValueError(f"Unknown message check '{check.mode}'")
