"""Bounded evaluation of deferred expressions.

Every test kind funnels through :func:`evaluate`: the expression runs on its
own daemon thread while the caller waits at most ``timeout`` seconds for it.
A timed out evaluation is asked to stop through its
:class:`CancellationToken`; the request is cooperative, so the thread may keep
running, but whatever it produces afterwards is never looked at again.
"""
from __future__ import annotations

import itertools
import threading
from typing import Any, Callable, List, Optional

from .models import Completed, Interrupted, Raised, RawOutcome, TimedOut

Thunk = Callable[[], Any]

_local = threading.local()
_counter = itertools.count(1)


class CancellationToken:
    """Cancellation flag shared between the waiting thread and the evaluation."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


def current_token() -> Optional[CancellationToken]:
    """Token of the evaluation running on the calling thread, if any."""

    return getattr(_local, "token", None)


def cancellation_requested() -> bool:
    """True when the evaluation running on this thread has been cancelled.

    Long running test expressions may poll this to stop early after a timeout.
    """

    token = current_token()
    return token is not None and token.cancelled


def evaluate(thunk: Thunk, timeout: Optional[float]) -> RawOutcome:
    """Run ``thunk`` once, waiting at most ``timeout`` seconds for it.

    Returns :class:`Completed` or :class:`Raised` when the thunk finishes in
    time, :class:`TimedOut` when the wait expires and :class:`Interrupted`
    when the waiting thread receives ``KeyboardInterrupt``.
    """

    token = CancellationToken()
    finished = threading.Event()
    slot: List[RawOutcome] = []

    def _target() -> None:
        _local.token = token
        try:
            value = thunk()
        except BaseException as exc:  # transported to the waiting thread
            slot.append(Raised(exc))
        else:
            slot.append(Completed(value))
        finally:
            finished.set()

    worker = threading.Thread(
        target=_target,
        name=f"verdict-eval-{next(_counter)}",
        daemon=True,
    )
    worker.start()
    try:
        done = finished.wait(timeout)
    except KeyboardInterrupt as exc:
        token.cancel()
        return Interrupted(exc)
    if not done:
        token.cancel()
        return TimedOut(timeout if timeout is not None else 0)
    return slot[0]
