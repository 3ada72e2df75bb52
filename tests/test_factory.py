from __future__ import annotations

import numpy as np
import pytest

from verdict import Config
from verdict.core.models import Tolerance
from verdict.core.results import (
    EqualityFailure,
    PropertyFailure,
    Success,
    WrongExceptionMessage,
    WrongExceptionType,
)
from verdict.factory import (
    any_exception_but_not_implemented_error,
    assert_test,
    equal,
    equal_approx,
    equal_by,
    expect_exception,
    expect_exception_except,
    expect_exception_one_of,
    property_test,
    refute_test,
)


def _fail(error: BaseException):
    def thunk():
        raise error

    return thunk


def test_equal_with_arrays(silent_config: Config) -> None:
    assert equal("arr", lambda: np.arange(3), np.array([0, 1, 2])).run(silent_config) == Success()
    result = equal("arr", lambda: np.arange(3), np.arange(4)).run(silent_config)
    assert isinstance(result, EqualityFailure)


def test_equal_by(silent_config: Config) -> None:
    test = equal_by("case insensitive", lambda: "HeLLo", "hello", lambda a, e: a.lower() == e)
    assert test.run(silent_config) == Success()


def test_equal_approx(silent_config: Config) -> None:
    assert equal_approx("pi", lambda: 3.14159, 3.1416, tolerance=Tolerance(1e-4, 0)).run(silent_config) == Success()
    assert equal_approx("list", lambda: [0.1 + 0.2, 1.0], [0.3, 1.0]).run(silent_config) == Success()
    result = equal_approx("far", lambda: 1.0, 2.0).run(silent_config)
    assert isinstance(result, EqualityFailure)


def test_equal_approx_shape_mismatch(silent_config: Config) -> None:
    result = equal_approx("shape", lambda: [1.0, 2.0], [1.0]).run(silent_config)
    assert isinstance(result, EqualityFailure)


def test_property_and_custom_format(silent_config: Config) -> None:
    test = property_test("even", lambda: 3, lambda v: v % 2 == 0, help="should be even", format=hex)
    result = test.run(silent_config)
    assert isinstance(result, PropertyFailure)
    assert result.format(result.actual) == "0x3"
    assert result.description.endswith(": should be even")


def test_assert_refute(silent_config: Config) -> None:
    assert assert_test("true", lambda: [1]).run(silent_config) == Success()
    assert refute_test("false", lambda: "").run(silent_config) == Success()
    assert isinstance(refute_test("not false", lambda: 1).run(silent_config), PropertyFailure)


def test_expect_exception_variants(silent_config: Config) -> None:
    one_of = expect_exception_one_of("lookup", _fail(IndexError("i")), [KeyError, IndexError])
    assert one_of.run(silent_config) == Success()
    contains = expect_exception(
        "contains",
        _fail(ValueError("invalid literal")),
        ValueError,
        message_predicate=lambda message: "literal" in message,
        predicate_help="mentions literal",
    )
    assert contains.run(silent_config) == Success()
    excluded = expect_exception_except("not key", _fail(KeyError("k")), KeyError)
    assert isinstance(excluded.run(silent_config), WrongExceptionType)
    wrong_message = expect_exception("message", _fail(ValueError()), ValueError, message="X")
    result = wrong_message.run(silent_config)
    assert isinstance(result, WrongExceptionMessage)
    assert result.thrown_message == "null"


def test_any_exception_but_not_implemented(silent_config: Config) -> None:
    def stub() -> None:
        raise NotImplementedError

    assert isinstance(any_exception_but_not_implemented_error("stub", stub).run(silent_config), WrongExceptionType)
    implemented = any_exception_but_not_implemented_error("real", _fail(ZeroDivisionError("division by zero")))
    assert implemented.run(silent_config) == Success()


def test_tags_and_timeout_are_recorded() -> None:
    test = equal("tagged", lambda: 1, 1, timeout=2, tags=["fast", "math"])
    assert test.tags == ("fast", "math")
    assert test.timeout_override == 2


def test_empty_one_of_rejected() -> None:
    with pytest.raises(ValueError):
        expect_exception_one_of("none", lambda: 1, [])


def test_key_lookup_with_exact_message(silent_config: Config) -> None:
    test = expect_exception("key", lambda: {}["k"], KeyError, message="k")
    assert test.run(silent_config) == Success()
