"""Actions behind the shipit commands."""

from .base import ActionInitializer, ActionResult, BaseAction
from .deploy import DeployAction
from .package import PackageAction
from .provision import ProvisionAction
from .up import UpAction

__all__ = [
    "ActionInitializer",
    "ActionResult",
    "BaseAction",
    "DeployAction",
    "PackageAction",
    "ProvisionAction",
    "UpAction",
]
