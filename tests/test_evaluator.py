from __future__ import annotations

import signal
import threading
import time

import pytest

from verdict import cancellation_requested
from verdict.core.evaluator import current_token, evaluate
from verdict.core.models import Completed, Interrupted, Raised, TimedOut


def test_completed_value() -> None:
    assert evaluate(lambda: 2 + 3, 1) == Completed(5)


def test_raised_error_is_captured() -> None:
    error = ValueError("bad")

    def boom() -> None:
        raise error

    outcome = evaluate(boom, 1)
    assert isinstance(outcome, Raised)
    assert outcome.error is error


def test_base_exceptions_are_transported() -> None:
    def leave() -> None:
        raise SystemExit(3)

    outcome = evaluate(leave, 1)
    assert isinstance(outcome, Raised)
    assert isinstance(outcome.error, SystemExit)


def test_timeout_returns_promptly() -> None:
    release = threading.Event()
    start = time.perf_counter()
    outcome = evaluate(lambda: release.wait(5), 0.05)
    elapsed = time.perf_counter() - start
    release.set()
    assert outcome == TimedOut(0.05)
    assert elapsed < 2


def test_late_completion_never_replaces_timeout() -> None:
    release = threading.Event()
    finished = threading.Event()

    def slow() -> str:
        release.wait(5)
        finished.set()
        return "late"

    outcome = evaluate(slow, 0.05)
    release.set()
    assert finished.wait(2)
    assert isinstance(outcome, TimedOut)


def test_timeout_requests_cancellation() -> None:
    observed = threading.Event()

    def cooperative() -> None:
        while not cancellation_requested():
            time.sleep(0.01)
        observed.set()

    outcome = evaluate(cooperative, 0.05)
    assert isinstance(outcome, TimedOut)
    assert observed.wait(2)


def test_cancellation_not_requested_outside_evaluation() -> None:
    assert cancellation_requested() is False
    assert evaluate(cancellation_requested, 1) == Completed(False)


def test_thunk_runs_on_every_evaluation() -> None:
    calls = []

    def counted() -> int:
        calls.append(1)
        return len(calls)

    assert evaluate(counted, 1) == Completed(1)
    assert evaluate(counted, 1) == Completed(2)


def test_none_timeout_waits_for_completion() -> None:
    assert evaluate(lambda: "done", None) == Completed("done")


@pytest.mark.skipif(not hasattr(signal, "pthread_kill"), reason="needs thread-directed signals")
def test_keyboard_interrupt_while_waiting() -> None:
    tokens = []
    release = threading.Event()

    def slow() -> None:
        tokens.append(current_token())
        release.wait(5)

    previous = signal.signal(signal.SIGINT, signal.default_int_handler)
    timer = threading.Timer(
        0.1, signal.pthread_kill, args=(threading.main_thread().ident, signal.SIGINT)
    )
    timer.start()
    try:
        outcome = evaluate(slow, 5)
    finally:
        timer.cancel()
        release.set()
        signal.signal(signal.SIGINT, previous)
    assert isinstance(outcome, Interrupted)
    assert isinstance(outcome.error, KeyboardInterrupt)
    assert tokens[0].cancelled
