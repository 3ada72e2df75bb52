"""Outcome models and result variants exposed at the package level."""
from .models import Completed, Interrupted, Raised, RawOutcome, TimedOut, Tolerance
from .results import (
    EqualityFailure,
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
)

__all__ = [
    "Completed",
    "EqualityFailure",
    "Interrupted",
    "NoExceptionFailure",
    "PropertyFailure",
    "Raised",
    "RawOutcome",
    "Success",
    "TestResult",
    "TimedOut",
    "TimeoutFailure",
    "Tolerance",
    "UnexpectedError",
    "WrongExceptionMessage",
    "WrongExceptionType",
    "WrongExceptionTypeAndMessage",
    "exception_message",
]
