"""Core infrastructure for action-based command execution."""

from .container import Container
from .context import RunContext
from .middleware import MiddlewareRunner, Options, SpanRecorder, TelemetryMiddleware, debug_middleware
from .options import DeployFlags, EnvFlag, GlobalOptions, PackageFlags, ProvisionFlags, UpFlags
from .reporter import NullReporter, Reporter

__all__ = [
    "Container",
    "RunContext",
    "MiddlewareRunner",
    "Options",
    "SpanRecorder",
    "TelemetryMiddleware",
    "debug_middleware",
    "DeployFlags",
    "EnvFlag",
    "GlobalOptions",
    "PackageFlags",
    "ProvisionFlags",
    "UpFlags",
    "Reporter",
    "NullReporter",
]
