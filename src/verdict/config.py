"""Run configuration shared by test cases, suites and the runner."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Optional

from .messages import get_message
from .reporting.logger import AnsiConsoleLogger, ConsoleLogger, Logger, SilentLogger

DEFAULT_TIMEOUT = 3


class Language(Enum):
    """Languages available in the message catalogs."""

    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"

    @classmethod
    def parse(cls, value: "str | Language") -> "Language":
        if isinstance(value, Language):
            return value
        text = str(value).strip().lower()
        for language in cls:
            if text in {language.value, language.name.lower()}:
                return language
        supported = ", ".join(language.value for language in cls)
        raise ValueError(f"Unsupported language '{value}'. Supported: {supported}")


@dataclass(frozen=True)
class Config:
    """Immutable bag of ambient settings for a run.

    ``timeout`` is the default per-test time budget in seconds; ``msg`` turns
    catalog keys into text in the configured language.
    """

    logger: Logger = field(default_factory=AnsiConsoleLogger)
    language: Language = Language.ENGLISH
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if self.timeout is None or self.timeout <= 0:
            raise ValueError(f"Default timeout must be positive, got {self.timeout!r}")

    def msg(self, key: str, *args: Any) -> str:
        pattern = get_message(key, self.language.value)
        if not args:
            return pattern
        try:
            return pattern % args
        except (TypeError, ValueError) as exc:
            return (
                f"ERROR: Formatting error for key '{key}' [{self.language.value}]: {exc}. "
                f"Pattern: '{pattern}', Args: [{', '.join(str(arg) for arg in args)}]"
            )

    def with_timeout(self, timeout: float) -> "Config":
        return replace(self, timeout=timeout)

    def with_language(self, language: "str | Language") -> "Config":
        return replace(self, language=Language.parse(language))

    def with_logging(self, logging: bool, use_ansi: bool = True) -> "Config":
        if not logging:
            return replace(self, logger=SilentLogger())
        if use_ansi:
            return replace(self, logger=AnsiConsoleLogger())
        return replace(self, logger=ConsoleLogger())

    @classmethod
    def build(
        cls,
        *,
        timeout: Optional[float] = None,
        language: "str | Language | None" = None,
        logging: bool = True,
        use_ansi: bool = True,
    ) -> "Config":
        config = cls(timeout=timeout or DEFAULT_TIMEOUT)
        if language is not None:
            config = config.with_language(language)
        return config.with_logging(logging, use_ansi=use_ansi)


DEFAULT_CONFIG = Config()
