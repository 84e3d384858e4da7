"""Account defaults used when an environment has no subscription yet."""

import os
from typing import Optional

from .config import ConfigManager


class AccountManager:
    """Resolve the default subscription and location.

    Environment variables take precedence over the user config.
    """

    def __init__(self, config: ConfigManager):
        self.config = config

    def default_subscription(self) -> Optional[str]:
        return os.environ.get("SHIPIT_SUBSCRIPTION_ID") or self.config.default_subscription

    def default_location(self) -> Optional[str]:
        return os.environ.get("SHIPIT_LOCATION") or self.config.default_location

    def set_default_subscription(self, subscription_id: str) -> None:
        self.config.set("defaults.subscription", subscription_id)

    def set_default_location(self, location: str) -> None:
        self.config.set("defaults.location", location)
