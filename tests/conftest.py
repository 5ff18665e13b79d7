"""Pytest fixtures.

Engines built here read an injected environment list instead of os.environ.
"""

import pytest
import structlog

from envflag_core import EnvSet, new_environment
from envflag_core.defaults import reset_environment

PREFIX = "TEST_"


@pytest.fixture
def make_env():
    """Factory: EnvSet over a fixed list of KEY=VALUE entries."""

    def _make(entries=(), **options) -> EnvSet:
        snapshot = list(entries)
        return new_environment(PREFIX, environ=lambda: snapshot, trace=False, **options)

    return _make


@pytest.fixture(autouse=True)
def clean_ambient_env(monkeypatch):
    """Keep ENVFLAG_* settings from the outer shell out of the tests."""
    for name in ("ENVFLAG_LOG_LEVEL", "ENVFLAG_LOG_FORMAT", "ENVFLAG_DEBUG", "ENVFLAG_DEFAULT_PREFIX"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_default_environment():
    """Drop the global EnvSet between tests."""
    reset_environment()
    yield
    reset_environment()


@pytest.fixture
def reset_structlog():
    """Restore structlog defaults after a test configures logging."""
    yield
    structlog.reset_defaults()
