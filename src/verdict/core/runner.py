"""Runs several suites in order and summarizes them."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Tuple

from verdict.config import DEFAULT_CONFIG, Config

from .suite import Results, Suite


@dataclass(frozen=True)
class RunReport:
    """Per-suite results in input order plus cross-suite totals."""

    results: Tuple[Results, ...] = ()

    @property
    def suites(self) -> int:
        return len(self.results)

    @property
    def total(self) -> int:
        return sum(results.total for results in self.results)

    @property
    def passed(self) -> int:
        return sum(results.passed for results in self.results)

    @property
    def failed(self) -> int:
        return self.total - self.passed

    @property
    def success_rate(self) -> float:
        total = self.total
        if total == 0:
            return 1.0
        return self.passed / total

    @property
    def is_successful(self) -> bool:
        return self.failed == 0

    def __iter__(self):  # type: ignore[no-untyped-def]
        return iter(self.results)

    def __len__(self) -> int:
        return len(self.results)

    def __getitem__(self, index: int) -> Results:
        return self.results[index]


def run_all(suites: Iterable[Suite], config: Config = DEFAULT_CONFIG) -> RunReport:
    """Run ``suites`` sequentially and log the overall summary."""

    report = RunReport(tuple(suite.run(config) for suite in suites))
    config.logger.log_summary(report, config)
    config.logger.flush()
    return report
