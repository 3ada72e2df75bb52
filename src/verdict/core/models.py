"""Core dataclasses shared across verdict subsystems."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union


@dataclass(frozen=True)
class Tolerance:
    """Numerical tolerance definition for approximate comparisons."""

    absolute: float = 1e-8
    relative: float = 1e-5

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "Tolerance":
        if not data:
            return cls()
        return cls(
            absolute=float(data.get("abs", data.get("absolute", 1e-8))),
            relative=float(data.get("rel", data.get("relative", 1e-5))),
        )


@dataclass(frozen=True)
class Completed:
    """The evaluated expression returned ``value``."""

    value: Any


@dataclass(frozen=True)
class Raised:
    """The evaluated expression raised ``error``."""

    error: BaseException


@dataclass(frozen=True)
class TimedOut:
    """The evaluation did not finish within ``timeout`` seconds."""

    timeout: float


@dataclass(frozen=True)
class Interrupted:
    """The thread waiting for the evaluation was interrupted."""

    error: BaseException


RawOutcome = Union[Completed, Raised, TimedOut, Interrupted]
