"""Named, re-runnable test cases."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Tuple

import click

from verdict.config import DEFAULT_CONFIG, Config

from .evaluator import Thunk, evaluate
from .matchers import Matcher
from .results import TestResult


@dataclass(frozen=True)
class TestCase:
    """A named deferred expression together with the matcher judging it.

    ``evaluate`` is invoked afresh on every :meth:`run`; nothing is cached.
    ``timeout_override`` replaces the configured default timeout for this
    test only.
    """

    __test__ = False  # Prevent pytest from collecting this as a test class

    name: str
    evaluate: Thunk = field(compare=False, repr=False)
    matcher: Matcher = field(compare=False, repr=False)
    timeout_override: Optional[float] = None
    tags: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Test case name cannot be empty")
        if not callable(self.evaluate):
            raise TypeError(f"Test case '{self.name}' needs a callable to evaluate")
        if self.timeout_override is not None and self.timeout_override <= 0:
            raise ValueError(
                f"Test case '{self.name}' timeout must be positive, got {self.timeout_override!r}"
            )
        object.__setattr__(self, "tags", tuple(str(tag) for tag in self.tags))

    def effective_timeout(self, config: Config = DEFAULT_CONFIG) -> float:
        if self.timeout_override is not None:
            return self.timeout_override
        return config.timeout

    def run(self, config: Config = DEFAULT_CONFIG) -> TestResult:
        """Evaluate the expression once and classify the outcome."""

        logger = config.logger
        _notify(logger.log_start, self.name, config)
        outcome = evaluate(self.evaluate, self.effective_timeout(config))
        result = self.matcher.classify(outcome, config)
        _notify(logger.log_result, result, config)
        _notify(logger.flush)
        return result


def _notify(hook: Callable[..., None], *args: Any) -> None:
    # Logger failures are reported on stderr and never replace the result.
    try:
        hook(*args)
    except Exception as exc:  # user supplied logger
        click.echo(f"Logger error in {hook.__name__}: {exc!r}", err=True)
