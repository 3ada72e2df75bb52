"""Console loggers receiving progress notifications from the engine."""
from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from verdict.core.results import TestResult

from .describe import describe_result, describe_results, describe_summary, suite_header

if TYPE_CHECKING:  # pragma: no cover
    from verdict.config import Config
    from verdict.core.runner import RunReport
    from verdict.core.suite import Results


class Logger:
    """Interface for progress output.

    The engine only calls the ``log_*`` hooks and :meth:`flush`; how results
    are rendered, localized and coloured is up to the logger.
    """

    supports_ansi_colors: bool = False

    def red(self, text: str) -> str:
        return self._styled(text, fg="red")

    def green(self, text: str) -> str:
        return self._styled(text, fg="green")

    def blue(self, text: str) -> str:
        return self._styled(text, fg="blue")

    def bold(self, text: str) -> str:
        return self._styled(text, bold=True)

    def underline(self, text: str) -> str:
        return self._styled(text, underline=True)

    def _styled(self, text: str, **styles: object) -> str:
        if not self.supports_ansi_colors:
            return text
        return click.style(text, **styles)  # type: ignore[arg-type]

    def print(self, text: str) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def println(self, text: str = "") -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def flush(self) -> None:  # pragma: no cover - interface
        raise NotImplementedError

    def log_start(self, name: str, config: "Config") -> None:
        self.print(f"{self.bold(' ' + name)}: ")

    def log_result(self, result: TestResult, config: "Config") -> None:
        self.println(describe_result(result, config))
        self.println()

    def log_suite_start(self, name: str, config: "Config") -> None:
        header = suite_header(name, config)
        if self.supports_ansi_colors:
            self.println(self.underline(self.bold(self.blue(header))))
        else:
            self.println(header)
            self.println("=" * len(header))

    def log_suite_results(self, results: "Results", config: "Config") -> None:
        self.println(f"\n{describe_results(results, config)}\n")

    def log_summary(self, report: "RunReport", config: "Config") -> None:
        for line in describe_summary(report, config):
            self.println(line)


class ConsoleLogger(Logger):
    """Plain text logger writing to stdout."""

    supports_ansi_colors = False

    def print(self, text: str) -> None:
        click.echo(text, nl=False)

    def println(self, text: str = "") -> None:
        click.echo(text)

    def flush(self) -> None:
        sys.stdout.flush()


class AnsiConsoleLogger(ConsoleLogger):
    """Console logger that colours its output."""

    supports_ansi_colors = True

    def print(self, text: str) -> None:
        click.echo(text, nl=False, color=True)

    def println(self, text: str = "") -> None:
        click.echo(text, color=True)


class SilentLogger(Logger):
    """Logger that discards everything."""

    supports_ansi_colors = False

    def print(self, text: str) -> None:
        return None

    def println(self, text: str = "") -> None:
        return None

    def flush(self) -> None:
        return None

    def log_start(self, name: str, config: "Config") -> None:
        return None

    def log_result(self, result: TestResult, config: "Config") -> None:
        return None

    def log_suite_start(self, name: str, config: "Config") -> None:
        return None

    def log_suite_results(self, results: "Results", config: "Config") -> None:
        return None

    def log_summary(self, report: "RunReport", config: "Config") -> None:
        return None
