"""Tests for main CLI entry point."""
import pytest

from shipit.cli import cli
from shipit.environment import LOCATION_KEY, EnvironmentManager


@pytest.fixture
def ready_project(project_dir, temp_config, monkeypatch):
    """Project with a 'dev' environment and account defaults in the environment."""
    EnvironmentManager(project_dir).create("dev")
    monkeypatch.setenv("SHIPIT_SUBSCRIPTION_ID", "sub-123")
    monkeypatch.setenv("SHIPIT_LOCATION", "westus")
    return project_dir


def test_cli_help(cli_runner):
    """
    Test that CLI shows help when run without commands.
    Expected: exit code 0 and "Usage:" text in output.
    """
    # Act - run CLI without arguments
    result = cli_runner.invoke(cli, [])

    # Assert - success code and help in output
    assert result.exit_code == 0
    assert "Usage:" in result.output


def test_cli_version(cli_runner):
    """
    Test that --version command works.
    Expected: exit code 0 and version in output.
    """
    # Act - run with --version
    result = cli_runner.invoke(cli, ["--version"])

    # Assert - success code and version present
    assert result.exit_code == 0
    assert "shipit" in result.output.lower()


def test_cli_unknown_command(cli_runner):
    """
    Test reaction to non-existent command.
    Expected: error code and unknown command message.
    """
    # Act - run with non-existent command
    result = cli_runner.invoke(cli, ["nonexistent"])

    # Assert - error code
    assert result.exit_code != 0


def test_up_help_lists_composed_flags(cli_runner):
    """
    Test the flag surface of 'up'.
    Expected: deploy flags, a single --environment, no --preview.
    """
    # Act
    result = cli_runner.invoke(cli, ["up", "--help"])

    # Assert
    assert result.exit_code == 0
    assert result.output.count("--environment") == 1
    assert "--preview" not in result.output
    assert "--from-package" in result.output
    assert "--no-progress" not in result.output


def test_up_end_to_end(cli_runner, ready_project):
    """
    Test 'up' against a real project.
    Expected: exit code 0, endpoints printed, values stored on the environment.
    """
    # Act
    result = cli_runner.invoke(cli, ["-C", str(ready_project), "--no-prompt", "up", "-e", "dev"])

    # Assert
    assert result.exit_code == 0, result.output
    assert "Deployed endpoints" in result.output
    env = EnvironmentManager(ready_project).get("dev")
    assert env.subscription_id == "sub-123"
    assert env.location == "westus"
    assert env.get("SERVICE_API_ENDPOINT") == "https://api-dev.westus.containerapp.local"


def test_up_deprecated_flags_warn_once(cli_runner, ready_project):
    """
    Test --no-progress and --service through the CLI.
    Expected: each warning printed exactly once, only 'api' deployed.
    """
    # Act
    result = cli_runner.invoke(
        cli,
        ["-C", str(ready_project), "--no-prompt", "up", "--no-progress", "--service", "api"],
    )

    # Assert
    assert result.exit_code == 0, result.output
    assert result.output.count("'--no-progress' flag is deprecated") == 1
    assert result.output.count("'--service' flag is deprecated") == 1
    env = EnvironmentManager(ready_project).get("dev")
    assert env.get("SERVICE_API_ENDPOINT")
    assert env.get("SERVICE_WEB_ENDPOINT") is None


def test_up_fails_without_subscription(cli_runner, project_dir, temp_config):
    """
    Test 'up' with no account defaults and prompting disabled.
    Expected: exit code 1 and an error message; nothing provisioned.
    """
    # Arrange
    EnvironmentManager(project_dir).create("dev")

    # Act
    result = cli_runner.invoke(cli, ["-C", str(project_dir), "--no-prompt", "up"])

    # Assert
    assert result.exit_code == 1
    assert "Error:" in result.output
    assert EnvironmentManager(project_dir).get("dev").get("SHIPIT_RESOURCE_GROUP") is None


def test_up_fails_without_environment(cli_runner, project_dir, temp_config):
    """
    Test 'up' when no environment exists.
    Expected: exit code 1, initialization error reported.
    """
    # Act
    result = cli_runner.invoke(cli, ["-C", str(project_dir), "up"])

    # Assert
    assert result.exit_code == 1
    assert "No environment selected" in " ".join(result.output.split())


def test_standalone_commands_in_sequence(cli_runner, ready_project):
    """
    Test running package, provision and deploy one by one.
    Expected: each exits 0 and deploy finds the provisioned hosts.
    """
    # Arrange
    env = EnvironmentManager(ready_project).get("dev")
    env.set(LOCATION_KEY, "eastus")
    env.save()
    base = ["-C", str(ready_project)]

    # Act
    results = [
        cli_runner.invoke(cli, base + ["package", "api"]),
        cli_runner.invoke(cli, base + ["provision"]),
        cli_runner.invoke(cli, base + ["deploy", "api"]),
    ]

    # Assert
    for result in results:
        assert result.exit_code == 0, result.output
    env = EnvironmentManager(ready_project).get("dev")
    assert env.get("SERVICE_API_ENDPOINT") == "https://api-dev.eastus.containerapp.local"


def test_env_commands(cli_runner, project_dir, temp_config):
    """
    Test env new/select/list.
    Expected: environments created and default switched.
    """
    # Arrange
    base = ["-C", str(project_dir), "env"]

    # Act
    cli_runner.invoke(cli, base + ["new", "dev", "--location", "westus"])
    cli_runner.invoke(cli, base + ["new", "prod"])
    select = cli_runner.invoke(cli, base + ["select", "prod"])
    listing = cli_runner.invoke(cli, base + ["list"])

    # Assert
    assert select.exit_code == 0
    assert "dev" in listing.output and "prod" in listing.output
    assert EnvironmentManager(project_dir).default_name() == "prod"
    assert EnvironmentManager(project_dir).get("dev").location == "westus"


def test_config_commands(cli_runner, temp_config):
    """
    Test config set/get.
    Expected: value written and read back.
    """
    # Act
    set_result = cli_runner.invoke(cli, ["config", "set", "defaults.location", "westus"])
    get_result = cli_runner.invoke(cli, ["config", "get", "defaults.location"])

    # Assert
    assert set_result.exit_code == 0
    assert "westus" in get_result.output


def test_config_show_and_unset(cli_runner, temp_config):
    """
    Test config show/unset.
    Expected: value listed, then removed.
    """
    # Arrange
    cli_runner.invoke(cli, ["config", "set", "ui.theme", "dark"])

    # Act
    shown = cli_runner.invoke(cli, ["config", "show"])
    unset = cli_runner.invoke(cli, ["config", "unset", "ui.theme"])
    after = cli_runner.invoke(cli, ["config", "get", "ui.theme"])

    # Assert
    assert shown.exit_code == 0
    assert "theme = dark" in shown.output
    assert unset.exit_code == 0
    assert "not found" in after.output


def test_up_rejects_preview(cli_runner, ready_project):
    """
    Test 'up --preview'.
    Expected: usage error before anything is packaged.
    """
    # Act
    result = cli_runner.invoke(cli, ["-C", str(ready_project), "--no-prompt", "up", "--preview"])

    # Assert
    assert result.exit_code == 2
    assert "No such option" in result.output
    assert not (ready_project / ".shipit" / "dev" / "dist").exists()
