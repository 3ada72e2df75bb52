"""Reporting exports."""
from .describe import describe_result, describe_results, describe_summary, suite_header
from .json_reporter import JsonReporter
from .logger import AnsiConsoleLogger, ConsoleLogger, Logger, SilentLogger
from .schema import JSON_SCHEMA_V1, SCHEMA_VERSION

__all__ = [
    "AnsiConsoleLogger",
    "ConsoleLogger",
    "JSON_SCHEMA_V1",
    "JsonReporter",
    "Logger",
    "SCHEMA_VERSION",
    "SilentLogger",
    "describe_result",
    "describe_results",
    "describe_summary",
    "suite_header",
]
