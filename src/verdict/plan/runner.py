"""Executor for YAML test plans."""
from __future__ import annotations

import fnmatch
import time
from typing import Iterable, Sequence, Tuple

from colorama import Fore, Style, init as colorama_init

from verdict.config import Config
from verdict.core.runner import run_all
from verdict.core.suite import Suite
from verdict.core.testcase import TestCase
from verdict.reporting import JsonReporter

from .builder import build_suites
from .models import ExecutionPlan, PlanOptions

DEFAULT_REPORT_PATH = "verdict-report.json"


def run_plan(
    plan: ExecutionPlan,
    options: PlanOptions,
    *,
    report_format: str = "terminal",
    report_path: str | None = None,
    use_color: bool = True,
) -> int:
    """Execute the plan; returns process exit code (0 success, 1 failures)."""

    colorama_init()
    suites = select_suites(build_suites(plan), options)
    if options.list_only:
        _print_listing(suites, use_color=use_color)
        return 0
    if not any(suite.tests for suite in suites):
        print("No tests matched the provided filters.")
        return 1
    config = Config.build(
        timeout=options.timeout or plan.timeout,
        language=options.language or plan.language,
        logging=not options.quiet,
        use_ansi=use_color,
    )
    start = time.perf_counter()
    report = run_all(suites, config)
    duration = time.perf_counter() - start
    if report_format == "json":
        JsonReporter(report_path or DEFAULT_REPORT_PATH).write(suites, report, config, duration)
    elif report_format != "terminal":
        raise ValueError(f"Unknown report format '{report_format}'")
    return 0 if report.is_successful else 1


def select_suites(suites: Iterable[Suite], options: PlanOptions) -> Tuple[Suite, ...]:
    """Apply name and tag filters; suites left without tests are dropped."""

    selected = []
    for suite in suites:
        if options.suites and not _matches(suite.name, options.suites):
            continue
        tests = tuple(test for test in suite.tests if _keep_test(test, options))
        if tests:
            selected.append(Suite(name=suite.name, tests=tests))
    return tuple(selected)


def _keep_test(test: TestCase, options: PlanOptions) -> bool:
    if options.tests and not _matches(test.name, options.tests):
        return False
    if options.tags and not any(_matches(tag, options.tags) for tag in test.tags):
        return False
    if options.skip_tags and any(_matches(tag, options.skip_tags) for tag in test.tags):
        return False
    return True


def _matches(name: str, patterns: Sequence[str]) -> bool:
    return any(fnmatch.fnmatchcase(name, pattern) for pattern in patterns)


def _print_listing(suites: Sequence[Suite], *, use_color: bool = True) -> None:
    suite_color = Fore.CYAN if use_color else ""
    tag_color = Fore.YELLOW if use_color else ""
    reset = Style.RESET_ALL if use_color else ""
    for suite in suites:
        print(f"{suite_color}{suite.name}{reset}")
        for test in suite.tests:
            tags = f" {tag_color}[{', '.join(test.tags)}]{reset}" if test.tags else ""
            print(f"  {test.name}{tags}")
