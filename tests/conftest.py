"""Pytest configuration and fixtures for pkgprobe tests."""

import sys
import tempfile
from pathlib import Path

import pytest

from pkgprobe.core.log import ConsoleSink, setup_logger


@pytest.fixture(autouse=True, scope="session")
def configure_logging():
    """Configure console-only logging for the test session.

    Nothing is sent to logfire.dev.
    """
    test_log_root = Path(tempfile.gettempdir()) / "pkgprobe-tests"
    setup_logger(
        log_root=test_log_root,
        run_name="test",
        console=ConsoleSink(level="debug"),
    )


@pytest.fixture
def mock_argv():
    """Save and restore sys.argv."""
    original = sys.argv.copy()
    sys.argv = ["pkgprobe"]
    yield
    sys.argv = original


@pytest.fixture
def make_state(mock_argv, tmp_path, monkeypatch):
    """Build a State whose only selected profile is ``test``.

    Runs from tmp_path so a developer's ./pkgprobe.yaml is not
    picked up.
    """
    from pkgprobe.core.config import State

    monkeypatch.chdir(tmp_path)

    def _make(profile: dict, **config):
        profile = {"manager": "apt", "query": "openbangla", **profile}
        config.setdefault("log_root", str(tmp_path / "logs"))
        config.setdefault("refresh", {"retries": 0, "retry_delay": 0})
        return State(
            config={"profile": "test", "profiles": {"test": profile}, **config}
        )

    return _make
