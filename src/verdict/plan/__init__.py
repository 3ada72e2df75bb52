"""YAML test plan loader, builder and executor."""

from .builder import build_suites, build_test
from .loader import load_plan
from .models import ExecutionPlan, MessageCheck, PlanOptions, SuiteConfig, TestConfig
from .runner import run_plan, select_suites

__all__ = [
    "ExecutionPlan",
    "MessageCheck",
    "PlanOptions",
    "SuiteConfig",
    "TestConfig",
    "build_suites",
    "build_test",
    "load_plan",
    "run_plan",
    "select_suites",
]
