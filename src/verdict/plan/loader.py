"""YAML loader and validation for test plans."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping, Optional

import yaml
from jsonschema import Draft7Validator

from verdict.config import Language
from verdict.core.models import Tolerance

from .models import MESSAGE_CHECKS, TEST_KINDS, ExecutionPlan, MessageCheck, SuiteConfig, TestConfig

EXCEPTION_KINDS = {"exception", "exception_except", "any_exception_but_not_implemented"}


def load_plan(path: str) -> ExecutionPlan:
    """Load and validate a plan file."""
    plan_path = Path(path).expanduser().resolve()
    if not plan_path.is_file():
        raise FileNotFoundError(f"Plan file not found: {plan_path}")
    raw = yaml.safe_load(plan_path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, Mapping):
        raise ValueError("Plan file must contain a mapping at the top level")
    errors = sorted(_validator.iter_errors(raw), key=lambda e: list(e.path))
    if errors:
        messages = "; ".join(f"{'/'.join(map(str, err.path)) or 'root'}: {err.message}" for err in errors)
        raise ValueError(f"Plan schema validation failed: {messages}")
    description = str(raw.get("description", ""))
    timeout = _parse_timeout(raw.get("timeout"), "timeout")
    language = raw.get("language")
    if language is not None:
        language = Language.parse(language).value
    source = raw.get("source")
    source_path = (plan_path.parent / source).resolve() if source else None
    suites = tuple(_parse_suite(entry) for entry in raw["suites"])
    _validate_unique([suite.name for suite in suites], "suite")
    return ExecutionPlan(
        description=description,
        timeout=timeout,
        language=language,
        source=source_path,
        suites=suites,
        plan_dir=plan_path.parent,
    )


def _require_str(raw: Mapping[str, Any], key: str) -> str:
    value = raw.get(key)
    if not isinstance(value, str):
        raise ValueError(f"Missing required string field '{key}'")
    text = value.strip()
    if not text:
        raise ValueError(f"Field '{key}' cannot be empty")
    return text


def _parse_timeout(raw: Any, where: str) -> Optional[float]:
    if raw is None:
        return None
    value = float(raw)
    if value <= 0:
        raise ValueError(f"{where} must be positive, got {raw!r}")
    return value


def _parse_str_list(raw: Any) -> tuple[str, ...]:
    if raw is None:
        return tuple()
    if isinstance(raw, str):
        return (raw,)
    return tuple(str(item) for item in raw)


def _parse_suite(raw: Mapping[str, Any]) -> SuiteConfig:
    name = _require_str(raw, "name")
    tests = tuple(_parse_test(entry, name) for entry in raw["tests"])
    _validate_unique([test.name for test in tests], f"test in suite '{name}'")
    return SuiteConfig(name=name, tests=tests, tags=_parse_str_list(raw.get("tags")))


def _parse_test(raw: Mapping[str, Any], suite: str) -> TestConfig:
    name = _require_str(raw, "name")
    where = f"Test '{name}' in suite '{suite}'"
    kind = _require_str(raw, "kind")
    if kind not in TEST_KINDS:
        raise ValueError(f"{where}: unknown kind '{kind}'")
    call = _require_str(raw, "call")
    args = raw.get("args") or []
    kwargs = raw.get("kwargs") or {}
    if kind in {"equal", "equal_approx"} and "expected" not in raw:
        raise ValueError(f"{where}: kind '{kind}' requires 'expected'")
    tolerance = None
    if raw.get("tolerance") is not None:
        if kind != "equal_approx":
            raise ValueError(f"{where}: 'tolerance' only applies to kind 'equal_approx'")
        tolerance = Tolerance.from_mapping(raw["tolerance"])
    predicate = raw.get("predicate")
    if kind == "property" and not predicate:
        raise ValueError(f"{where}: kind 'property' requires 'predicate'")
    raises = _parse_str_list(raw.get("raises"))
    if kind == "exception" and not raises:
        raise ValueError(f"{where}: kind 'exception' requires a non-empty 'raises'")
    excluded = raw.get("excluded")
    if kind == "exception_except" and not excluded:
        raise ValueError(f"{where}: kind 'exception_except' requires 'excluded'")
    message = _parse_message_check(raw, where)
    if message is not None and kind not in EXCEPTION_KINDS:
        raise ValueError(f"{where}: message checks only apply to exception kinds")
    return TestConfig(
        name=name,
        kind=kind,
        call=call,
        args=tuple(args),
        kwargs=dict(kwargs),
        expected=raw.get("expected"),
        tolerance=tolerance,
        predicate=str(predicate) if predicate else None,
        help=str(raw["help"]) if raw.get("help") is not None else None,
        raises=raises,
        excluded=str(excluded) if excluded else None,
        message=message,
        timeout=_parse_timeout(raw.get("timeout"), f"{where}: timeout"),
        tags=_parse_str_list(raw.get("tags")),
    )


def _parse_message_check(raw: Mapping[str, Any], where: str) -> Optional[MessageCheck]:
    present = [key for key in MESSAGE_CHECKS if raw.get(key) is not None]
    if not present:
        return None
    if len(present) > 1:
        raise ValueError(f"{where}: only one of {', '.join(present)} may be given")
    key = present[0]
    mode = "exact" if key == "message" else key[len("message_"):]
    return MessageCheck(mode=mode, text=str(raw[key]))


def _validate_unique(names: list[str], what: str) -> None:
    seen: set[str] = set()
    for name in names:
        if name in seen:
            raise ValueError(f"Duplicate {what} name '{name}'")
        seen.add(name)


PLAN_SCHEMA = {
    "type": "object",
    "required": ["suites"],
    "properties": {
        "description": {"type": "string"},
        "timeout": {"type": "number", "exclusiveMinimum": 0},
        "language": {"type": "string"},
        "source": {"type": "string"},
        "suites": {
            "type": "array",
            "minItems": 1,
            "items": {
                "type": "object",
                "required": ["name", "tests"],
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "tags": {"type": "array", "items": {"type": "string"}},
                    "tests": {
                        "type": "array",
                        "items": {
                            "type": "object",
                            "required": ["name", "kind", "call"],
                            "properties": {
                                "name": {"type": "string", "minLength": 1},
                                "kind": {"type": "string", "enum": list(TEST_KINDS)},
                                "call": {"type": "string", "minLength": 1},
                                "args": {"type": "array"},
                                "kwargs": {"type": "object"},
                                "tolerance": {"type": "object"},
                                "predicate": {"type": "string"},
                                "help": {"type": "string"},
                                "raises": {"type": ["string", "array"], "items": {"type": "string"}},
                                "excluded": {"type": "string"},
                                "message": {"type": "string"},
                                "message_contains": {"type": "string"},
                                "message_startswith": {"type": "string"},
                                "message_matches": {"type": "string"},
                                "timeout": {"type": "number", "exclusiveMinimum": 0},
                                "tags": {"type": "array", "items": {"type": "string"}},
                            },
                        },
                    },
                },
            },
        },
    },
}
_validator = Draft7Validator(PLAN_SCHEMA)
