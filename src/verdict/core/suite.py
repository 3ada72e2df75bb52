"""Ordered collections of test cases and their results."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple, overload

from verdict.config import DEFAULT_CONFIG, Config

from .results import TestResult
from .testcase import TestCase


class Results(Sequence[TestResult]):
    """Read-only snapshot of the results of one suite, in declaration order."""

    __slots__ = ("_results",)

    def __init__(self, results: Iterable[TestResult] = ()) -> None:
        self._results: Tuple[TestResult, ...] = tuple(results)

    @property
    def passed(self) -> int:
        return sum(1 for result in self._results if result.is_success)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def total(self) -> int:
        return len(self._results)

    @property
    def success_rate(self) -> float:
        if not self._results:
            return 1.0
        return self.passed / self.total

    @property
    def detail(self) -> str:
        """One ``+`` or ``-`` per test."""
        return "".join("+" if result.is_success else "-" for result in self._results)

    @property
    def is_successful(self) -> bool:
        return self.failed == 0

    @overload
    def __getitem__(self, index: int) -> TestResult: ...

    @overload
    def __getitem__(self, index: slice) -> "Results": ...

    def __getitem__(self, index):  # type: ignore[no-untyped-def]
        if isinstance(index, slice):
            return Results(self._results[index])
        return self._results[index]

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[TestResult]:
        return iter(self._results)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Results):
            return NotImplemented
        return self._results == other._results

    def __hash__(self) -> int:
        # Result payloads may hold unhashable values.
        return hash((Results, self.detail))

    def __repr__(self) -> str:
        return (
            f"Results(passed={self.passed}, failed={self.failed}, "
            f"total={self.total}, detail={self.detail!r})"
        )


@dataclass(frozen=True)
class Suite:
    """Named, ordered group of test cases run sequentially."""

    name: str
    tests: Tuple[TestCase, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("Suite name cannot be empty")
        object.__setattr__(self, "tests", tuple(self.tests))

    @classmethod
    def of(cls, name: str, *tests: TestCase) -> "Suite":
        return cls(name=name, tests=tests)

    def run(self, config: Config = DEFAULT_CONFIG) -> Results:
        logger = config.logger
        logger.log_suite_start(self.name, config)
        results = Results(test.run(config) for test in self.tests)
        logger.log_suite_results(results, config)
        logger.flush()
        return results
