"""Tests for the dependency container and action initializers."""
import pytest

from shipit.core.container import Container
from shipit.exceptions import ActionInitError, DependencyResolutionError, EnvironmentNotFoundError


def test_singleton_is_built_once():
    """
    Test singleton lifetime.
    Expected: factory called once, same object on every resolve.
    """
    # Arrange
    container = Container()
    built = []
    container.register_singleton("config", lambda c: built.append(1) or object())

    # Act
    first = container.resolve("config")
    second = container.resolve("config")

    # Assert
    assert first is second
    assert built == [1]


def test_transient_is_built_every_time():
    """
    Test transient lifetime.
    Expected: a new object per resolve.
    """
    # Arrange
    container = Container()
    container.register_transient("action", lambda c: object())

    # Act & Assert
    assert container.resolve("action") is not container.resolve("action")


def test_unknown_name_raises():
    """
    Test resolving an unregistered name.
    Expected: DependencyResolutionError naming the dependency.
    """
    # Arrange
    container = Container()

    # Act & Assert
    with pytest.raises(DependencyResolutionError, match="missing"):
        container.resolve("missing")


def test_initializer_resolves_lazily(recording_action):
    """
    Test that creating an initializer does not build anything.
    Expected: factory only called when the initializer is invoked.
    """
    # Arrange
    container = Container()
    built = []

    def factory(c):
        built.append("deploy")
        return recording_action("deploy")

    container.register_transient("deploy_action", factory)

    # Act
    initialize = container.initializer("deploy_action")

    # Assert
    assert built == []
    first = initialize()
    second = initialize()
    assert built == ["deploy", "deploy"]
    assert first is not second


def test_initializer_wraps_dependency_failure():
    """
    Test that a missing dependency surfaces as a construction error.
    Expected: ActionInitError carrying the action name and the cause.
    """
    # Arrange
    container = Container()

    def environment(c):
        raise EnvironmentNotFoundError("No environment selected")

    container.register_singleton("environment", environment)
    container.register_transient("provision_action", lambda c: c.resolve("environment"))

    # Act
    with pytest.raises(ActionInitError) as exc_info:
        container.initializer("provision_action")()

    # Assert
    assert exc_info.value.action_name == "provision_action"
    assert isinstance(exc_info.value.cause, DependencyResolutionError)
    assert exc_info.value.cause.name == "environment"
    assert "No environment selected" in str(exc_info.value)


def test_register_instance_overrides_factory():
    """
    Test replacing a registered factory with a concrete value.
    Expected: the instance is returned.
    """
    # Arrange
    container = Container()
    container.register_transient("args", lambda c: [])

    # Act
    container.register_instance("args", ["api"])

    # Assert
    assert container.resolve("args") == ["api"]
    assert container.is_registered("args")
