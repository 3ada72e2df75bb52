import pytest

from verdict import Config, bootstrap


@pytest.fixture(scope="session", autouse=True)
def setup_verdict_registry() -> None:
    """Bootstrap built-in predicates once for the entire test session."""

    bootstrap()


@pytest.fixture
def silent_config() -> Config:
    """Config that runs tests without printing anything."""

    return Config().with_logging(False)


@pytest.fixture
def plain_config() -> Config:
    """Config printing uncoloured English output."""

    return Config().with_logging(True, use_ansi=False)
