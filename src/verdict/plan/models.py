"""Data models for YAML test plans."""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional, Sequence

from verdict.core.models import Tolerance

TEST_KINDS = (
    "equal",
    "equal_approx",
    "property",
    "assert",
    "refute",
    "exception",
    "exception_except",
    "any_exception_but_not_implemented",
)

MESSAGE_CHECKS = ("message", "message_contains", "message_startswith", "message_matches")


@dataclass(frozen=True)
class MessageCheck:
    """How the message of a raised error is checked.

    ``mode`` is one of ``exact``, ``contains``, ``startswith`` or ``matches``.
    """

    mode: str
    text: str


@dataclass(frozen=True)
class TestConfig:
    __test__ = False  # Prevent pytest from collecting this as a test class

    name: str
    kind: str
    call: str
    args: Sequence[Any] = field(default_factory=tuple)
    kwargs: Mapping[str, Any] = field(default_factory=dict)
    expected: Any = None
    tolerance: Optional[Tolerance] = None
    predicate: Optional[str] = None
    help: Optional[str] = None
    raises: Sequence[str] = field(default_factory=tuple)
    excluded: Optional[str] = None
    message: Optional[MessageCheck] = None
    timeout: Optional[float] = None
    tags: Sequence[str] = field(default_factory=tuple)


@dataclass(frozen=True)
class SuiteConfig:
    name: str
    tests: Sequence[TestConfig]
    tags: Sequence[str] = field(default_factory=tuple)


@dataclass(frozen=True)
class ExecutionPlan:
    description: str
    timeout: Optional[float]
    language: Optional[str]
    source: Optional[Path]
    suites: Sequence[SuiteConfig]
    plan_dir: Path


@dataclass(frozen=True)
class PlanOptions:
    suites: Sequence[str] = field(default_factory=tuple)
    tests: Sequence[str] = field(default_factory=tuple)
    tags: Sequence[str] = field(default_factory=tuple)
    skip_tags: Sequence[str] = field(default_factory=tuple)
    timeout: Optional[float] = None
    language: Optional[str] = None
    list_only: bool = False
    quiet: bool = False
