"""Convenience constructors for every kind of test case.

Each function takes the test name and a zero-argument callable producing the
value under test, and returns a :class:`TestCase` wired to the right matcher::

    suite = Suite.of(
        "Arithmetic",
        equal("sum", lambda: 2 + 3, 5),
        expect_exception("bad input", lambda: int("x"), ValueError),
    )
"""
from __future__ import annotations

from typing import Any, Callable, Optional, Sequence

from .core import matchers
from .core.comparator import approx_equal, values_equal
from .core.evaluator import Thunk
from .core.models import Tolerance
from .core.results import Formatter
from .core.testcase import TestCase

__all__ = [
    "any_exception_but_not_implemented_error",
    "assert_test",
    "equal",
    "equal_approx",
    "equal_by",
    "expect_exception",
    "expect_exception_except",
    "expect_exception_one_of",
    "property_test",
    "refute_test",
]


def equal(
    name: str,
    evaluate: Thunk,
    expected: Any,
    *,
    format: Formatter = repr,
    timeout: Optional[float] = None,
    tags: Sequence[str] = (),
) -> TestCase:
    return equal_by(name, evaluate, expected, values_equal, format=format, timeout=timeout, tags=tags)


def equal_by(
    name: str,
    evaluate: Thunk,
    expected: Any,
    equals: Callable[[Any, Any], bool],
    *,
    format: Formatter = repr,
    timeout: Optional[float] = None,
    tags: Sequence[str] = (),
) -> TestCase:
    """Like :func:`equal` with a custom ``equals(actual, expected)``."""

    matcher = matchers.EqualityMatcher(expected=expected, equals=equals, format=format)
    return TestCase(name, evaluate, matcher, timeout_override=timeout, tags=tuple(tags))


def equal_approx(
    name: str,
    evaluate: Thunk,
    expected: Any,
    *,
    tolerance: Optional[Tolerance] = None,
    format: Formatter = repr,
    timeout: Optional[float] = None,
    tags: Sequence[str] = (),
) -> TestCase:
    """Numeric equality within ``tolerance`` (scalars, sequences or arrays)."""

    tol = tolerance or Tolerance()

    def _close(actual: Any, wanted: Any) -> bool:
        return approx_equal(actual, wanted, tol)

    return equal_by(name, evaluate, expected, _close, format=format, timeout=timeout, tags=tags)


def property_test(
    name: str,
    evaluate: Thunk,
    predicate: Callable[[Any], Any],
    *,
    help: Optional[str] = None,
    format: Formatter = repr,
    timeout: Optional[float] = None,
    tags: Sequence[str] = (),
) -> TestCase:
    matcher = matchers.PropertyMatcher(predicate=predicate, format=format, help=help)
    return TestCase(name, evaluate, matcher, timeout_override=timeout, tags=tuple(tags))


def assert_test(
    name: str,
    evaluate: Thunk,
    *,
    timeout: Optional[float] = None,
    tags: Sequence[str] = (),
) -> TestCase:
    return TestCase(
        name, evaluate, matchers.assert_matcher(), timeout_override=timeout, tags=tuple(tags)
    )


def refute_test(
    name: str,
    evaluate: Thunk,
    *,
    timeout: Optional[float] = None,
    tags: Sequence[str] = (),
) -> TestCase:
    return TestCase(
        name, evaluate, matchers.refute_matcher(), timeout_override=timeout, tags=tuple(tags)
    )


def expect_exception(
    name: str,
    evaluate: Thunk,
    exception_type: type,
    *,
    message: Optional[str] = None,
    message_predicate: Optional[Callable[[str], Any]] = None,
    predicate_help: Optional[str] = None,
    format: Formatter = repr,
    timeout: Optional[float] = None,
    tags: Sequence[str] = (),
) -> TestCase:
    """Expect an instance of ``exception_type`` (subclasses included)."""

    return expect_exception_one_of(
        name,
        evaluate,
        (exception_type,),
        message=message,
        message_predicate=message_predicate,
        predicate_help=predicate_help,
        format=format,
        timeout=timeout,
        tags=tags,
    )


def expect_exception_one_of(
    name: str,
    evaluate: Thunk,
    exception_types: Sequence[type],
    *,
    message: Optional[str] = None,
    message_predicate: Optional[Callable[[str], Any]] = None,
    predicate_help: Optional[str] = None,
    format: Formatter = repr,
    timeout: Optional[float] = None,
    tags: Sequence[str] = (),
) -> TestCase:
    matcher = matchers.exception_one_of(
        *exception_types,
        message=message,
        message_predicate=message_predicate,
        predicate_help=predicate_help,
        format=format,
    )
    return TestCase(name, evaluate, matcher, timeout_override=timeout, tags=tuple(tags))


def expect_exception_except(
    name: str,
    evaluate: Thunk,
    excluded: type,
    *,
    message: Optional[str] = None,
    message_predicate: Optional[Callable[[str], Any]] = None,
    predicate_help: Optional[str] = None,
    format: Formatter = repr,
    timeout: Optional[float] = None,
    tags: Sequence[str] = (),
) -> TestCase:
    matcher = matchers.exception_except(
        excluded,
        message=message,
        message_predicate=message_predicate,
        predicate_help=predicate_help,
        format=format,
    )
    return TestCase(name, evaluate, matcher, timeout_override=timeout, tags=tuple(tags))


def any_exception_but_not_implemented_error(
    name: str,
    evaluate: Thunk,
    *,
    message: Optional[str] = None,
    message_predicate: Optional[Callable[[str], Any]] = None,
    predicate_help: Optional[str] = None,
    format: Formatter = repr,
    timeout: Optional[float] = None,
    tags: Sequence[str] = (),
) -> TestCase:
    return expect_exception_except(
        name,
        evaluate,
        NotImplementedError,
        message=message,
        message_predicate=message_predicate,
        predicate_help=predicate_help,
        format=format,
        timeout=timeout,
        tags=tags,
    )
