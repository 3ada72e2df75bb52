"""Result data structures produced by a test case run.

Every run produces exactly one of the variants below. Failure variants keep
the raw material needed to explain the failure (values, formatting callables,
thrown errors and human readable descriptions); turning them into text is the
job of :mod:`verdict.reporting.describe`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, ClassVar

Formatter = Callable[[Any], str]

MISSING_MESSAGE = "null"


def exception_message(error: BaseException) -> str:
    """Textual message of ``error``, or ``"null"`` when it carries none.

    An error raised with the literal message ``"null"`` is indistinguishable
    from one raised without a message.
    """

    args = error.args
    if not args:
        return MISSING_MESSAGE
    if len(args) == 1:
        # str(KeyError("k")) is "'k'"; the message is the argument itself.
        return MISSING_MESSAGE if args[0] is None else str(args[0])
    return str(error)


def format_value(format: Formatter, value: Any) -> str:
    """``format(value)``, falling back to ``repr`` when the formatter raises."""

    try:
        return format(value)
    except Exception:  # user supplied formatter
        return repr(value)


class TestResult:
    """Base class of every test outcome."""

    __test__ = False  # Prevent pytest from collecting this as a test class

    kind: ClassVar[str] = ""

    @property
    def is_success(self) -> bool:
        return False


@dataclass(frozen=True)
class Success(TestResult):
    kind: ClassVar[str] = "success"

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True)
class EqualityFailure(TestResult):
    kind: ClassVar[str] = "equality_failure"

    expected: Any
    actual: Any
    format: Formatter = field(default=repr, compare=False, repr=False)


@dataclass(frozen=True)
class PropertyFailure(TestResult):
    kind: ClassVar[str] = "property_failure"

    actual: Any
    format: Formatter = field(compare=False, repr=False)
    description: str = ""


@dataclass(frozen=True)
class NoExceptionFailure(TestResult):
    kind: ClassVar[str] = "no_exception"

    actual: Any
    format: Formatter = field(compare=False, repr=False)
    expected_description: str = ""


@dataclass(frozen=True)
class _ThrownFailure(TestResult):
    """Failure caused by an error; compares by error type and message."""

    thrown: BaseException = field(compare=False)
    thrown_type: str = field(init=False)
    thrown_message: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "thrown_type", type(self.thrown).__name__)
        object.__setattr__(self, "thrown_message", exception_message(self.thrown))


@dataclass(frozen=True)
class WrongExceptionType(_ThrownFailure):
    kind: ClassVar[str] = "wrong_exception_type"

    expected_description: str = ""


@dataclass(frozen=True)
class WrongExceptionMessage(_ThrownFailure):
    kind: ClassVar[str] = "wrong_exception_message"

    expected_description: str = ""
    detail: str = ""


@dataclass(frozen=True)
class WrongExceptionTypeAndMessage(_ThrownFailure):
    kind: ClassVar[str] = "wrong_exception_type_and_message"

    expected_description: str = ""


@dataclass(frozen=True)
class TimeoutFailure(TestResult):
    kind: ClassVar[str] = "timeout"

    timeout: float
    expected_description: str = ""


@dataclass(frozen=True)
class UnexpectedError(_ThrownFailure):
    kind: ClassVar[str] = "unexpected_error"

    original_description: str = ""
