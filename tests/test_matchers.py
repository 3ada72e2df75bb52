from __future__ import annotations

import pytest

from verdict import Config, Language
from verdict.core.matchers import (
    EqualityMatcher,
    ExceptionMatcher,
    PropertyMatcher,
    any_exception_but_not_implemented_error,
    assert_matcher,
    exception_except,
    exception_one_of,
    refute_matcher,
)
from verdict.core.models import Completed, Interrupted, Raised, TimedOut
from verdict.core.results import (
    EqualityFailure,
    NoExceptionFailure,
    PropertyFailure,
    Success,
    TimeoutFailure,
    UnexpectedError,
    WrongExceptionMessage,
    WrongExceptionType,
    WrongExceptionTypeAndMessage,
    exception_message,
)


@pytest.fixture
def config() -> Config:
    return Config().with_logging(False)


@pytest.mark.parametrize("value", [0, 5, "text", (1, 2), [1, [2]], None, {"a": 1}])
def test_equal_values_succeed(config: Config, value) -> None:
    assert EqualityMatcher(expected=value).classify(Completed(value), config) == Success()


def test_different_values_fail(config: Config) -> None:
    result = EqualityMatcher(expected=6).classify(Completed(5), config)
    assert result == EqualityFailure(expected=6, actual=5)


def test_equality_with_custom_comparator(config: Config) -> None:
    matcher = EqualityMatcher(expected="ABC", equals=lambda a, e: a.lower() == e.lower())
    assert matcher.classify(Completed("abc"), config) == Success()


def test_equality_comparator_errors_become_unexpected(config: Config) -> None:
    def broken(actual, expected) -> bool:
        raise RuntimeError("cannot compare")

    result = EqualityMatcher(expected=1, equals=broken).classify(Completed(1), config)
    assert isinstance(result, UnexpectedError)
    assert result.thrown_type == "RuntimeError"
    assert result.original_description == "expected result was 1"


def test_equality_raised_and_timeout(config: Config) -> None:
    matcher = EqualityMatcher(expected=5)
    raised = matcher.classify(Raised(KeyError("k")), config)
    assert isinstance(raised, UnexpectedError)
    assert raised.thrown_type == "KeyError"
    assert matcher.classify(TimedOut(2), config) == TimeoutFailure(2, "expected result was 5")


def test_property_matcher(config: Config) -> None:
    matcher = PropertyMatcher(predicate=lambda value: value > 0, help="should be positive")
    assert matcher.classify(Completed(3), config) == Success()
    result = matcher.classify(Completed(-3), config)
    assert isinstance(result, PropertyFailure)
    assert result.actual == -3
    assert result.description == "does not verify expected property: should be positive"


def test_property_without_help(config: Config) -> None:
    matcher = PropertyMatcher(predicate=lambda value: False)
    assert matcher.description(config) == "does not verify expected property"


def test_assert_and_refute(config: Config) -> None:
    assert assert_matcher().classify(Completed(True), config) == Success()
    assert refute_matcher().classify(Completed(False), config) == Success()
    failure = assert_matcher().classify(Completed(False), config)
    assert isinstance(failure, PropertyFailure)
    assert failure.description == "does not verify expected property: should be true"
    assert failure.format(failure.actual) == "property was false"
    refuted = refute_matcher().classify(Completed(True), config)
    assert refuted.description == "does not verify expected property: should be false"
    assert refuted.format(refuted.actual) == "property was true"


def test_property_descriptions_follow_language() -> None:
    spanish = Config(language=Language.SPANISH).with_logging(False)
    failure = assert_matcher().classify(Completed(False), spanish)
    assert failure.description == "no verifica la propiedad esperada: debe ser verdadera"


def _controlled(type_ok: bool, message_ok: bool) -> ExceptionMatcher:
    return ExceptionMatcher(
        type_accepted=lambda error: type_ok,
        help_key="exception.description",
        help_args=("Controlled",),
        message_predicate=lambda message: message_ok,
        predicate_help="controlled",
    )


@pytest.mark.parametrize(
    "type_ok, message_ok, expected",
    [
        (True, True, Success),
        (False, True, WrongExceptionType),
        (True, False, WrongExceptionMessage),
        (False, False, WrongExceptionTypeAndMessage),
    ],
)
def test_exception_truth_table(config: Config, type_ok: bool, message_ok: bool, expected) -> None:
    result = _controlled(type_ok, message_ok).classify(Raised(ValueError("boom")), config)
    assert type(result) is expected
    if expected is not Success:
        assert result.thrown_type == "ValueError"
        assert result.thrown_message == "boom"
        assert result.expected_description == "the exception Controlled"


def test_wrong_message_detail_for_predicate(config: Config) -> None:
    result = _controlled(True, False).classify(Raised(ValueError("boom")), config)
    assert result.detail == "message should satisfy: controlled"


def test_exception_accepts_subclasses(config: Config) -> None:
    matcher = exception_one_of(LookupError)
    assert matcher.classify(Raised(KeyError("k")), config) == Success()


def test_exception_not_raised(config: Config) -> None:
    matcher = exception_one_of(ValueError)
    result = matcher.classify(Completed(42), config)
    assert result == NoExceptionFailure(42, repr, "the exception ValueError")


def test_exception_exact_message(config: Config) -> None:
    matcher = exception_one_of(ValueError, message="X")
    assert matcher.classify(Raised(ValueError("X")), config) == Success()
    result = matcher.classify(Raised(ValueError("Y")), config)
    assert isinstance(result, WrongExceptionMessage)
    assert result.detail == 'expected message was "X"'
    assert result.expected_description == 'the exception ValueError with message "X"'


def test_exception_one_of_description_sorted(config: Config) -> None:
    matcher = exception_one_of(ValueError, KeyError)
    assert matcher.description(config) == "one of exceptions KeyError or ValueError"
    french = Config(language=Language.FRENCH).with_logging(False)
    assert matcher.description(french) == "une des exceptions KeyError ou ValueError"


def test_exception_one_of_requires_types() -> None:
    with pytest.raises(ValueError):
        exception_one_of()
    with pytest.raises(TypeError):
        exception_one_of(int)


def test_exception_except(config: Config) -> None:
    matcher = exception_except(KeyError)
    assert matcher.classify(Raised(ValueError("v")), config) == Success()
    result = matcher.classify(Raised(KeyError("k")), config)
    assert isinstance(result, WrongExceptionType)
    assert result.expected_description == "any exception except KeyError"


def test_any_exception_but_not_implemented(config: Config) -> None:
    matcher = any_exception_but_not_implemented_error()
    assert matcher.classify(Raised(ZeroDivisionError("x")), config) == Success()
    result = matcher.classify(Raised(NotImplementedError()), config)
    assert isinstance(result, WrongExceptionType)
    assert result.thrown_message == "null"


def test_exception_predicate_errors_become_unexpected(config: Config) -> None:
    def broken(message: str) -> bool:
        raise RuntimeError("predicate exploded")

    matcher = exception_one_of(ValueError, message_predicate=broken)
    result = matcher.classify(Raised(ValueError("v")), config)
    assert isinstance(result, UnexpectedError)
    assert result.thrown_message == "predicate exploded"


def test_exception_interrupted_and_timeout(config: Config) -> None:
    matcher = exception_one_of(ValueError)
    interrupted = matcher.classify(Interrupted(KeyboardInterrupt()), config)
    assert isinstance(interrupted, UnexpectedError)
    assert interrupted.thrown_type == "KeyboardInterrupt"
    assert matcher.classify(TimedOut(1), config) == TimeoutFailure(1, "the exception ValueError")


def test_exact_message_and_predicate_are_exclusive() -> None:
    with pytest.raises(ValueError):
        exception_one_of(ValueError, message="X", message_predicate=lambda message: True)


def test_missing_message_is_null() -> None:
    assert exception_message(ValueError()) == "null"
    assert exception_message(ValueError("null")) == "null"
    assert exception_message(ValueError("bad")) == "bad"


def test_single_argument_is_the_message() -> None:
    assert exception_message(KeyError("k")) == "k"
    assert exception_message(ValueError(None)) == "null"
    assert exception_message(ValueError(42)) == "42"
    assert exception_message(OSError(2, "No such file")) == "[Errno 2] No such file"


def test_key_error_message_matches_exactly(config: Config) -> None:
    matcher = exception_one_of(KeyError, message="k")
    assert matcher.classify(Raised(KeyError("k")), config) == Success()
