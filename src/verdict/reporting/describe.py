"""Human readable rendering of results, suite results and run summaries."""
from __future__ import annotations

from typing import TYPE_CHECKING, List

from verdict.core.results import (
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
    format_value,
)

if TYPE_CHECKING:  # pragma: no cover
    from verdict.config import Config
    from verdict.core.runner import RunReport
    from verdict.core.suite import Results

RULE_WIDTH = 40
INDENT = "\n   "


def format_seconds(seconds: float) -> str:
    if float(seconds).is_integer():
        return str(int(seconds))
    return str(seconds)


def suite_header(name: str, config: "Config") -> str:
    return config.msg("suite.for", name)


def describe_result(result: TestResult, config: "Config") -> str:
    """Multi-line description of ``result`` in the configured language."""

    logger = config.logger
    if isinstance(result, Success):
        return INDENT + logger.bold(logger.green(config.msg("passed")))

    lines = [logger.bold(logger.red(config.msg("failed")))]
    if isinstance(result, EqualityFailure):
        expected = format_value(result.format, result.expected)
        lines.append(config.msg("expected", logger.green(expected)))
        lines.append(config.msg("obtained", logger.red(format_value(result.format, result.actual))))
    elif isinstance(result, PropertyFailure):
        lines.append(result.description)
        lines.append(config.msg("obtained", logger.red(format_value(result.format, result.actual))))
    elif isinstance(result, NoExceptionFailure):
        lines.append(config.msg("no.exception.basic", logger.green(result.expected_description)))
        lines.append(config.msg("obtained", logger.red(format_value(result.format, result.actual))))
    elif isinstance(result, WrongExceptionType):
        lines.append(config.msg("wrong.exception.type.basic", logger.red(result.thrown_type)))
        lines.append(config.msg("but.expected", logger.green(result.expected_description)))
    elif isinstance(result, WrongExceptionMessage):
        lines.append(
            config.msg(
                "wrong.exception.message.basic",
                logger.green(result.thrown_type),
                logger.red(_quoted(result.thrown_message)),
            )
        )
        if result.detail:
            lines.append(result.detail)
        lines.append(config.msg("but.expected", logger.green(result.expected_description)))
    elif isinstance(result, WrongExceptionTypeAndMessage):
        lines.append(
            config.msg(
                "wrong.exception.and.message.basic",
                logger.red(result.thrown_type),
                logger.red(_quoted(result.thrown_message)),
            )
        )
        lines.append(config.msg("but.expected", logger.green(result.expected_description)))
    elif isinstance(result, TimeoutFailure):
        lines.append(
            config.msg("timeout", result.expected_description, format_seconds(result.timeout))
        )
    elif isinstance(result, UnexpectedError):
        lines.append(
            config.msg(
                "unexpected.exception",
                result.original_description,
                logger.red(result.thrown_type),
                logger.red(_quoted(result.thrown_message)),
            )
        )
    else:  # pragma: no cover - closed set of variants
        raise TypeError(f"Unknown test result type {type(result).__name__}")
    return INDENT + INDENT.join(lines)


def describe_results(results: "Results", config: "Config") -> str:
    """One line ``Passed: n, Failed: n, Total: n, Detail: ++-`` summary."""

    logger = config.logger
    passed_part = (
        f"{logger.green(config.msg('results.passed'))}: {logger.green(str(results.passed))}"
    )
    failed_part = f"{logger.red(config.msg('results.failed'))}: {logger.red(str(results.failed))}"
    detail = "".join(
        logger.green("+") if result.is_success else logger.red("-") for result in results
    )
    return (
        f"{passed_part}, {failed_part}, "
        f"{config.msg('results.total')}: {results.total}, "
        f"{config.msg('results.detail')}: {detail}"
    )


def describe_summary(report: "RunReport", config: "Config") -> List[str]:
    """Lines of the cross-suite summary block."""

    logger = config.logger
    rule = logger.bold(logger.blue("=" * RULE_WIDTH))
    return [
        rule,
        logger.bold(logger.blue(config.msg("summary.title"))),
        rule,
        config.msg("summary.suites.run", report.suites),
        config.msg("summary.total.tests", report.total),
        f"{config.msg('results.passed').capitalize()}: {logger.green(str(report.passed))}",
        f"{config.msg('results.failed').capitalize()}: {logger.red(str(report.failed))}",
        config.msg("summary.success.rate", report.success_rate * 100),
        rule,
    ]


def _quoted(text: str) -> str:
    return f'"{text}"'
