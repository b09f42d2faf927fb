"""Shared test fixtures for the lvlog test suite."""

import io
import os
from pathlib import Path

import pytest

from lvlog import logger as _logger_mod
from lvlog import state as _state_mod
from lvlog.backends import new_logger
from lvlog.config import Flags
from lvlog.state import LevelState


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_DIR = PROJECT_ROOT / "src"


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: runs a Python subprocess")


def subprocess_env():
    """Environment for child interpreters that must import lvlog from src/."""
    env = dict(os.environ)
    existing = env.get("PYTHONPATH")
    env["PYTHONPATH"] = str(SRC_DIR) + (os.pathsep + existing if existing else "")
    env.pop("LVLOG_LEVEL", None)
    return env


# ---------------------------------------------------------------------------
# Level state fixtures
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_default_state():
    """Give every test a fresh process-wide LevelState."""
    saved = _state_mod._state
    _state_mod._state = None
    yield
    _state_mod._state = saved


@pytest.fixture(autouse=True)
def exits(monkeypatch):
    """Record fatal() exit statuses instead of ending the test process."""
    statuses = []
    monkeypatch.setattr(_logger_mod, "exit_process", statuses.append)
    return statuses


@pytest.fixture
def state():
    """An isolated LevelState at the default level (INFO)."""
    return LevelState()


# ---------------------------------------------------------------------------
# Logger fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def buf():
    """A StringIO buffer for capturing output."""
    return io.StringIO()


@pytest.fixture
def make_logger(state, buf):
    """Factory for loggers writing to `buf`, following `state`, no prefix."""
    created = []

    def _make(backend="console", **options):
        options.setdefault("stream", buf)
        options.setdefault("namespace", "app")
        if backend in ("console", "color"):
            options.setdefault("flags", Flags.NONE)
        log = new_logger(backend, state=state, **options)
        created.append(log)
        return log

    yield _make
    for log in created:
        log.close()
