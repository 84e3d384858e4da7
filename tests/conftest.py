"""Pytest configuration and shared fixtures."""
import io
import tempfile
import os
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from click.testing import CliRunner

from shipit.core.actions.base import ActionResult, BaseAction
from shipit.core.middleware import MiddlewareRunner
from shipit.themed_console import ThemedConsole


@pytest.fixture
def cli_runner() -> CliRunner:
    """Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def temp_config(monkeypatch):
    """Create temporary user config directory for tests."""
    with tempfile.TemporaryDirectory() as temp_dir:
        config_dir = os.path.join(temp_dir, ".shipit")
        os.makedirs(config_dir, exist_ok=True)
        monkeypatch.setenv("HOME", temp_dir)
        monkeypatch.setenv("SHIPIT_CONFIG_DIR", config_dir)
        monkeypatch.delenv("SHIPIT_SUBSCRIPTION_ID", raising=False)
        monkeypatch.delenv("SHIPIT_LOCATION", raising=False)
        yield config_dir


@pytest.fixture
def project_dir(tmp_path) -> Path:
    """A project with two services and source files to package."""
    (tmp_path / "shipit.ini").write_text(
        "[project]\n"
        "name = todo\n"
        "\n"
        "[service.api]\n"
        "path = src/api\n"
        "host = containerapp\n"
        "\n"
        "[service.web]\n"
        "path = src/web\n"
    )
    for service in ("api", "web"):
        src = tmp_path / "src" / service
        src.mkdir(parents=True)
        (src / "main.py").write_text(f"print('{service}')\n")
    return tmp_path


@pytest.fixture
def console_streams():
    """Console writing to in-memory stdout/stderr buffers."""
    stdout, stderr = io.StringIO(), io.StringIO()
    console = ThemedConsole(theme_name="dark", stdout=stdout, stderr=stderr)
    return console, stdout, stderr


class RecordingAction(BaseAction):
    """Action that records its runs in a shared call log."""

    def __init__(self, name, calls, result=None, error=None):
        self.name = name
        self.calls = calls
        self.result = result or ActionResult(data={"name": name})
        self.error = error
        self.flags = None
        self.args = []

    def run(self, ctx):
        self.calls.append(("run", self.name))
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def calls():
    return []


@pytest.fixture
def recording_action_cls():
    return RecordingAction


@pytest.fixture
def recording_action(calls):
    """Factory for RecordingAction bound to the shared call log."""
    def make(name, **kwargs):
        return RecordingAction(name, calls, **kwargs)
    return make


@pytest.fixture
def runner() -> MiddlewareRunner:
    return MiddlewareRunner()


@pytest.fixture
def mock_account_manager():
    """Account manager with defaults for subscription and location."""
    manager = MagicMock()
    manager.default_subscription.return_value = "sub-123"
    manager.default_location.return_value = "westus"
    return manager
