"""Matchers turning raw evaluation outcomes into test results.

A matcher owns an expectation. ``classify`` compares a :data:`RawOutcome`
against it and always returns a :class:`TestResult`; errors raised by user
supplied comparators or predicates while classifying become
:class:`UnexpectedError` instead of propagating, and a formatter that raises
falls back to ``repr``.

Expectation descriptions are stored as a catalog key plus arguments and only
rendered through :meth:`Config.msg` when a result is produced, so the same
matcher can describe itself in any language.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Optional, Sequence, Tuple, Type, Union

from .comparator import values_equal
from .models import Completed, Interrupted, Raised, RawOutcome, TimedOut
from .results import (
    EqualityFailure,
    Formatter,
    NoExceptionFailure,
    PropertyFailure,
    Success,
    TestResult,
    TimeoutFailure,
    UnexpectedError,
    WrongExceptionMessage,
    WrongExceptionType,
    WrongExceptionTypeAndMessage,
    exception_message,
    format_value,
)

if TYPE_CHECKING:  # pragma: no cover
    from verdict.config import Config

ExceptionType = Type[BaseException]
Equality = Callable[[Any, Any], bool]
Predicate = Callable[[Any], Any]
MessagePredicate = Callable[[str], Any]


@dataclass(frozen=True)
class TypeName:
    type: ExceptionType

    def render(self, config: "Config") -> str:
        return self.type.__name__


@dataclass(frozen=True)
class TypeNameList:
    types: Tuple[ExceptionType, ...]

    def render(self, config: "Config") -> str:
        names = sorted(exc_type.__name__ for exc_type in self.types)
        return config.msg("connector.or").join(names)


@dataclass(frozen=True)
class ExactMessage:
    text: str

    def render(self, config: "Config") -> str:
        return f'"{self.text}"'


@dataclass(frozen=True)
class PredicateHelp:
    text: Optional[str] = None

    def render(self, config: "Config") -> str:
        if self.text:
            return self.text
        return config.msg("detail.unnamed_predicate")


HelpArg = Union[TypeName, TypeNameList, ExactMessage, PredicateHelp, str]


def render_help(key: str, args: Sequence[HelpArg], config: "Config") -> str:
    """Render a catalog ``key`` with lazily rendered ``args``."""

    rendered = [arg if isinstance(arg, str) else arg.render(config) for arg in args]
    return config.msg(key, *rendered)


class Matcher:
    """Interface shared by every matcher."""

    def classify(self, outcome: RawOutcome, config: "Config") -> TestResult:  # pragma: no cover
        raise NotImplementedError

    def description(self, config: "Config") -> str:  # pragma: no cover - interface
        raise NotImplementedError

    def _unsettled(self, outcome: RawOutcome, config: "Config") -> TestResult:
        # Outcomes every matcher classifies the same way.
        if isinstance(outcome, TimedOut):
            return TimeoutFailure(outcome.timeout, self.description(config))
        if isinstance(outcome, (Raised, Interrupted)):
            return UnexpectedError(outcome.error, self.description(config))
        raise TypeError(f"Unsupported outcome {outcome!r}")


@dataclass(frozen=True)
class EqualityMatcher(Matcher):
    """Success iff the completed value equals ``expected``."""

    expected: Any
    equals: Equality = field(default=values_equal, compare=False, repr=False)
    format: Formatter = field(default=repr, compare=False, repr=False)

    def classify(self, outcome: RawOutcome, config: "Config") -> TestResult:
        if not isinstance(outcome, Completed):
            return self._unsettled(outcome, config)
        try:
            same = bool(self.equals(outcome.value, self.expected))
        except Exception as exc:  # user supplied comparator
            return UnexpectedError(exc, self.description(config))
        if same:
            return Success()
        return EqualityFailure(self.expected, outcome.value, self.format)

    def description(self, config: "Config") -> str:
        return config.msg("expected.result", format_value(self.format, self.expected))


@dataclass(frozen=True)
class PropertyMatcher(Matcher):
    """Success iff ``predicate`` holds on the completed value.

    ``format_key`` maps the obtained value to a catalog key and takes
    precedence over ``format``; ``help`` (or the catalog entry ``help_key``)
    explains the property in failure messages.
    """

    predicate: Predicate = field(compare=False)
    format: Formatter = field(default=repr, compare=False, repr=False)
    format_key: Optional[Callable[[Any], str]] = field(default=None, compare=False, repr=False)
    help: Optional[str] = None
    help_key: Optional[str] = None

    def classify(self, outcome: RawOutcome, config: "Config") -> TestResult:
        if not isinstance(outcome, Completed):
            return self._unsettled(outcome, config)
        try:
            holds = bool(self.predicate(outcome.value))
        except Exception as exc:  # user supplied predicate
            return UnexpectedError(exc, self.description(config))
        if holds:
            return Success()
        return PropertyFailure(outcome.value, self._formatter(config), self.description(config))

    def description(self, config: "Config") -> str:
        base = config.msg("property.failure.base")
        help_text = self.help
        if help_text is None and self.help_key is not None:
            help_text = config.msg(self.help_key)
        if not help_text:
            return base
        return base + config.msg("property.failure.suffix", help_text)

    def _formatter(self, config: "Config") -> Formatter:
        format_key = self.format_key
        if format_key is None:
            return self.format

        def _format(value: Any) -> str:
            return config.msg(format_key(value))

        return _format


def _was_true_or_false(value: Any) -> str:
    return "property.was.true" if value else "property.was.false"


def assert_matcher() -> PropertyMatcher:
    """Success iff the obtained value is truthy."""

    return PropertyMatcher(
        predicate=bool,
        format_key=_was_true_or_false,
        help_key="property.must.be.true",
    )


def refute_matcher() -> PropertyMatcher:
    """Success iff the obtained value is falsy."""

    return PropertyMatcher(
        predicate=lambda value: not value,
        format_key=_was_true_or_false,
        help_key="property.must.be.false",
    )


@dataclass(frozen=True)
class ExceptionMatcher(Matcher):
    """Expects the evaluation to raise an accepted error with an acceptable message.

    The type check and the message check are independent; both outcomes are
    reported so a failure says which expectation was violated.
    """

    type_accepted: Callable[[BaseException], Any] = field(compare=False)
    help_key: str
    help_args: Tuple[HelpArg, ...] = ()
    expected_message: Optional[str] = None
    message_predicate: Optional[MessagePredicate] = field(default=None, compare=False)
    predicate_help: Optional[str] = None
    format: Formatter = field(default=repr, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.expected_message is not None and self.message_predicate is not None:
            raise ValueError("Use either an exact message or a message predicate, not both")

    def classify(self, outcome: RawOutcome, config: "Config") -> TestResult:
        if isinstance(outcome, Completed):
            return NoExceptionFailure(outcome.value, self.format, self.description(config))
        if not isinstance(outcome, Raised):
            return self._unsettled(outcome, config)
        error = outcome.error
        try:
            type_ok = bool(self.type_accepted(error))
            message_ok = self._message_accepted(error)
        except Exception as exc:  # user supplied predicate
            return UnexpectedError(exc, self.description(config))
        if type_ok and message_ok:
            return Success()
        if message_ok:
            return WrongExceptionType(error, self.description(config))
        if type_ok:
            return WrongExceptionMessage(error, self.description(config), self.detail(config))
        return WrongExceptionTypeAndMessage(error, self.description(config))

    def description(self, config: "Config") -> str:
        return render_help(self.help_key, self.help_args, config)

    def detail(self, config: "Config") -> str:
        if self.expected_message is not None:
            return render_help(
                "detail.expected_exact_message", (ExactMessage(self.expected_message),), config
            )
        return render_help("detail.expected_predicate", (PredicateHelp(self.predicate_help),), config)

    def _message_accepted(self, error: BaseException) -> bool:
        message = exception_message(error)
        if self.expected_message is not None:
            return message == self.expected_message
        if self.message_predicate is not None:
            return bool(self.message_predicate(message))
        return True


def _check_exception_type(candidate: Any) -> ExceptionType:
    if not isinstance(candidate, type) or not issubclass(candidate, BaseException):
        raise TypeError(f"{candidate!r} is not an exception type")
    return candidate


def _help(
    base_key: str,
    type_arg: HelpArg,
    message: Optional[str],
    message_predicate: Optional[MessagePredicate],
    predicate_help: Optional[str],
) -> Tuple[str, Tuple[HelpArg, ...]]:
    if message is not None:
        return f"{base_key}.with.message.description", (type_arg, ExactMessage(message))
    if message_predicate is not None:
        return f"{base_key}.with.predicate.description", (type_arg, PredicateHelp(predicate_help))
    return f"{base_key}.description", (type_arg,)


def exception_one_of(
    *types: ExceptionType,
    message: Optional[str] = None,
    message_predicate: Optional[MessagePredicate] = None,
    predicate_help: Optional[str] = None,
    format: Formatter = repr,
) -> ExceptionMatcher:
    """Accept errors that are instances of any of ``types``."""

    if not types:
        raise ValueError("At least one accepted exception type is required")
    accepted = tuple(_check_exception_type(exc_type) for exc_type in types)
    if len(accepted) == 1:
        key, args = _help("exception", TypeName(accepted[0]), message, message_predicate, predicate_help)
    else:
        key, args = _help(
            "exception.oneof", TypeNameList(accepted), message, message_predicate, predicate_help
        )
    return ExceptionMatcher(
        type_accepted=lambda error: isinstance(error, accepted),
        help_key=key,
        help_args=args,
        expected_message=message,
        message_predicate=message_predicate,
        predicate_help=predicate_help,
        format=format,
    )


def exception_except(
    excluded: ExceptionType,
    *,
    message: Optional[str] = None,
    message_predicate: Optional[MessagePredicate] = None,
    predicate_help: Optional[str] = None,
    format: Formatter = repr,
) -> ExceptionMatcher:
    """Accept any error that is not an instance of ``excluded``."""

    excluded = _check_exception_type(excluded)
    key, args = _help("exception.except", TypeName(excluded), message, message_predicate, predicate_help)
    return ExceptionMatcher(
        type_accepted=lambda error: not isinstance(error, excluded),
        help_key=key,
        help_args=args,
        expected_message=message,
        message_predicate=message_predicate,
        predicate_help=predicate_help,
        format=format,
    )


def any_exception_but_not_implemented_error(
    *,
    message: Optional[str] = None,
    message_predicate: Optional[MessagePredicate] = None,
    predicate_help: Optional[str] = None,
    format: Formatter = repr,
) -> ExceptionMatcher:
    """Accept any error except :class:`NotImplementedError`.

    Useful for checking that a stub has actually been implemented and fails
    for a real reason.
    """

    return exception_except(
        NotImplementedError,
        message=message,
        message_predicate=message_predicate,
        predicate_help=predicate_help,
        format=format,
    )
