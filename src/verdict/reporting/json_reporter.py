"""JSON reporter emitting structured run results."""
from __future__ import annotations

import datetime as dt
import json
import pathlib
from typing import TYPE_CHECKING, Any, Dict, List, Sequence

import click
from jsonschema import validate

from verdict.core.results import TestResult

from .describe import INDENT, describe_result
from .schema import JSON_SCHEMA_V1, SCHEMA_VERSION

if TYPE_CHECKING:  # pragma: no cover
    from verdict.config import Config
    from verdict.core.runner import RunReport
    from verdict.core.suite import Suite


class JsonReporter:
    """Writes a run report to a JSON file validated against the schema.

    Messages are rendered without colours in the language of ``config``.
    """

    def __init__(self, path: str) -> None:
        self._path = pathlib.Path(path)

    @property
    def path(self) -> pathlib.Path:
        return self._path

    def build(
        self,
        suites: Sequence["Suite"],
        report: "RunReport",
        config: "Config",
        duration_s: float = 0.0,
    ) -> Dict[str, Any]:
        if len(suites) != len(report.results):
            raise ValueError(
                f"Report holds {len(report.results)} suite result(s) for {len(suites)} suite(s)"
            )
        plain = config.with_logging(False)
        payload = {
            "schema_version": SCHEMA_VERSION,
            "generated_at": dt.datetime.now(dt.timezone.utc).isoformat(timespec="seconds"),
            "language": config.language.value,
            "summary": {
                "suites": report.suites,
                "total": report.total,
                "passed": report.passed,
                "failed": report.failed,
                "success_rate": report.success_rate,
                "duration_s": duration_s,
            },
            "suites": [
                _suite_to_dict(suite, results, plain)
                for suite, results in zip(suites, report.results)
            ],
        }
        validate(instance=payload, schema=JSON_SCHEMA_V1)
        return payload

    def write(
        self,
        suites: Sequence["Suite"],
        report: "RunReport",
        config: "Config",
        duration_s: float = 0.0,
    ) -> Dict[str, Any]:
        payload = self.build(suites, report, config, duration_s)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as exc:  # pragma: no cover - filesystem protection
            raise RuntimeError(f"Failed to write JSON report to {self._path}: {exc}") from exc
        click.echo(f"JSON report written to {self._path}")
        return payload


def _suite_to_dict(suite: "Suite", results: Any, config: "Config") -> Dict[str, Any]:
    tests: List[Dict[str, Any]] = [
        _result_to_dict(test.name, result, config) for test, result in zip(suite.tests, results)
    ]
    return {
        "name": suite.name,
        "passed": results.passed,
        "failed": results.failed,
        "total": results.total,
        "detail": results.detail,
        "tests": tests,
    }


def _result_to_dict(name: str, result: TestResult, config: "Config") -> Dict[str, Any]:
    message = describe_result(result, config).strip().replace(INDENT, "\n")
    record: Dict[str, Any] = {
        "name": name,
        "kind": result.kind,
        "passed": result.is_success,
        "message": message,
    }
    thrown_type = getattr(result, "thrown_type", None)
    if thrown_type is not None:
        record["thrown_type"] = thrown_type
        record["thrown_message"] = getattr(result, "thrown_message")
    return record
