"""Named environments persisted under <project>/.shipit/<name>/.env."""

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional

from dotenv import dotenv_values, set_key, unset_key

from .config import ConfigManager
from .exceptions import EnvironmentNotFoundError, InvalidEnvironmentError

logger = logging.getLogger(__name__)

SUBSCRIPTION_KEY = "SHIPIT_SUBSCRIPTION_ID"
LOCATION_KEY = "SHIPIT_LOCATION"
ENV_NAME_KEY = "SHIPIT_ENV_NAME"

_VALID_NAME = re.compile(r"^[A-Za-z0-9][A-Za-z0-9_-]{0,63}$")


class Environment:
    """A set of key/value pairs belonging to one deployment target."""

    def __init__(self, name: str, path: Path, values: Optional[Dict[str, str]] = None):
        self.name = name
        self.path = Path(path)
        self.values: Dict[str, str] = dict(values or {})
        self._removed: List[str] = []
        self.values.setdefault(ENV_NAME_KEY, name)

    @classmethod
    def load(cls, name: str, path: Path) -> "Environment":
        values = {k: v for k, v in dotenv_values(path).items() if v is not None}
        return cls(name, path, values)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        return self.values.get(key, default)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value
        if key in self._removed:
            self._removed.remove(key)

    def unset(self, key: str) -> None:
        if self.values.pop(key, None) is not None:
            self._removed.append(key)

    @property
    def subscription_id(self) -> Optional[str]:
        return self.values.get(SUBSCRIPTION_KEY) or None

    @property
    def location(self) -> Optional[str]:
        return self.values.get(LOCATION_KEY) or None

    def save(self) -> None:
        """Write values to the .env file."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.touch(exist_ok=True)
        for key in self._removed:
            unset_key(str(self.path), key)
        self._removed = []
        for key, value in self.values.items():
            set_key(str(self.path), key, value)
        logger.debug("saved environment %s to %s", self.name, self.path)


class EnvironmentManager:
    """Create, list and select environments of one project."""

    def __init__(self, project_root: Path):
        self.root = Path(project_root) / ".shipit"
        self._config: Optional[ConfigManager] = None

    @property
    def config(self) -> ConfigManager:
        if self._config is None:
            self._config = ConfigManager(config_dir=self.root)
        return self._config

    def _env_file(self, name: str) -> Path:
        return self.root / name / ".env"

    def exists(self, name: str) -> bool:
        return self._env_file(name).is_file()

    def list(self) -> List[str]:
        if not self.root.is_dir():
            return []
        return sorted(p.parent.name for p in self.root.glob("*/.env"))

    def get(self, name: str) -> Environment:
        if not self.exists(name):
            raise EnvironmentNotFoundError(f"Environment '{name}' does not exist")
        return Environment.load(name, self._env_file(name))

    def create(self, name: str, values: Optional[Dict[str, str]] = None) -> Environment:
        if not _VALID_NAME.match(name):
            raise InvalidEnvironmentError(
                f"Invalid environment name '{name}': use letters, digits, '-' or '_'"
            )
        if self.exists(name):
            raise InvalidEnvironmentError(f"Environment '{name}' already exists")
        env = Environment(name, self._env_file(name), values)
        env.save()
        if not self.default_name():
            self.set_default(name)
        return env

    def default_name(self) -> Optional[str]:
        if not self.root.is_dir():
            return None
        return self.config.get("defaults.environment")

    def set_default(self, name: str) -> None:
        if not self.exists(name):
            raise EnvironmentNotFoundError(f"Environment '{name}' does not exist")
        self.config.set("defaults.environment", name)

    def resolve(self, name: Optional[str] = None) -> Environment:
        """Return the named environment, or the default one."""
        name = name or self.default_name()
        if not name:
            raise EnvironmentNotFoundError(
                "No environment selected. Create one with 'shipit env new <name>' "
                "or pass --environment."
            )
        return self.get(name)
