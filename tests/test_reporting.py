from __future__ import annotations

import json

import pytest
from jsonschema import ValidationError, validate

from verdict import Config, Language, Suite, run_all
from verdict.factory import equal, expect_exception
from verdict.reporting import JSON_SCHEMA_V1, SCHEMA_VERSION, JsonReporter


def _raise():
    raise KeyError("missing")


def _suites():
    return (
        Suite.of(
            "Mixed",
            equal("sum", lambda: 2 + 3, 5),
            equal("wrong", lambda: 2 + 3, 6),
            expect_exception("lookup", _raise, ValueError),
        ),
    )


def test_json_reporter_writes_valid_report(tmp_path, silent_config: Config, capsys) -> None:
    suites = _suites()
    report = run_all(suites, silent_config)
    path = tmp_path / "nested" / "report.json"
    JsonReporter(str(path)).write(suites, report, silent_config, duration_s=0.25)
    assert f"JSON report written to {path}" in capsys.readouterr().out
    payload = json.loads(path.read_text(encoding="utf-8"))
    validate(instance=payload, schema=JSON_SCHEMA_V1)
    assert payload["schema_version"] == SCHEMA_VERSION
    assert payload["summary"] == {
        "suites": 1,
        "total": 3,
        "passed": 1,
        "failed": 2,
        "success_rate": pytest.approx(1 / 3),
        "duration_s": 0.25,
    }
    suite = payload["suites"][0]
    assert suite["detail"] == "+--"
    sum_test, wrong, lookup = suite["tests"]
    assert sum_test == {"name": "sum", "kind": "success", "passed": True, "message": "TEST PASSED SUCCESSFULLY!"}
    assert wrong["kind"] == "equality_failure"
    assert wrong["message"] == "TEST FAILED!\n6 was expected\n5 was obtained"
    assert lookup["kind"] == "wrong_exception_type"
    assert lookup["thrown_type"] == "KeyError"
    assert lookup["thrown_message"] == "missing"


def test_json_messages_are_localized_and_uncoloured(silent_config: Config) -> None:
    suites = _suites()
    config = Config(language=Language.FRENCH)
    report = run_all(suites, silent_config)
    payload = JsonReporter("unused.json").build(suites, report, config)
    assert payload["language"] == "fr"
    assert payload["suites"][0]["tests"][0]["message"] == "TEST RÉUSSI AVEC SUCCÈS !"
    assert "\x1b[" not in json.dumps(payload)


def test_json_reporter_rejects_mismatched_report(silent_config: Config) -> None:
    report = run_all(_suites(), silent_config)
    with pytest.raises(ValueError):
        JsonReporter("unused.json").build((), report, silent_config)


def test_schema_rejects_bad_detail() -> None:
    payload = {
        "schema_version": SCHEMA_VERSION,
        "generated_at": "2024-01-01T00:00:00+00:00",
        "summary": {"suites": 0, "total": 0, "passed": 0, "failed": 0, "success_rate": 1.0, "duration_s": 0},
        "suites": [{"name": "x", "passed": 0, "failed": 0, "total": 0, "detail": "abc", "tests": []}],
    }
    with pytest.raises(ValidationError):
        validate(instance=payload, schema=JSON_SCHEMA_V1)
