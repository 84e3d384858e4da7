"""Exception hierarchy for shipit."""


class ShipitError(Exception):
    """Base error for everything raised by shipit."""


class ConfigError(ShipitError):
    """Invalid or unreadable configuration."""


class DependencyResolutionError(ShipitError):
    """A dependency could not be resolved from the container."""

    def __init__(self, name: str, reason: str = ""):
        self.name = name
        self.reason = reason
        message = f"Unable to resolve '{name}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ActionInitError(ShipitError):
    """An action could not be constructed.

    Raised before the action runs, so callers can tell construction failures
    apart from the action's own execution failures.
    """

    def __init__(self, action_name: str, cause: Exception):
        self.action_name = action_name
        self.cause = cause
        super().__init__(f"Failed to initialize '{action_name}': {cause}")


class PreconditionError(ShipitError):
    """Subscription or location could not be established."""


class EnvironmentNotFoundError(ShipitError):
    """No such environment, or no environment selected."""


class InvalidEnvironmentError(ShipitError):
    """Environment name is invalid or already taken."""


class ServiceNotFoundError(ShipitError):
    """The requested service is not part of the project."""


class ProvisionError(ShipitError):
    """The infrastructure provider failed."""


class ActionCancelledError(ShipitError):
    """The run was cancelled before it completed."""


class DeployError(ShipitError):
    """The deploy arguments do not describe a single, consistent target."""
