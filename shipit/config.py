"""User configuration stored in ~/.shipit/config.ini."""

import configparser
import os
from pathlib import Path
from typing import Dict, Optional

from .exceptions import ConfigError


CONFIG_DIR_ENV = "SHIPIT_CONFIG_DIR"


class ConfigManager:
    """Read and write dotted keys (``section.option``) in an INI file."""

    def __init__(self, config_dir: Optional[Path] = None):
        if config_dir is None:
            override = os.environ.get(CONFIG_DIR_ENV)
            config_dir = Path(override) if override else Path.home() / ".shipit"
        self.config_dir = Path(config_dir)
        self.config_dir.mkdir(parents=True, exist_ok=True)
        self.config_file = self.config_dir / "config.ini"
        self._config = self._load()

    def _load(self) -> configparser.ConfigParser:
        config = configparser.ConfigParser()
        if self.config_file.exists():
            try:
                config.read(self.config_file)
            except configparser.Error as e:
                raise ConfigError(f"Invalid config file {self.config_file}: {e}") from e
        return config

    def _save(self) -> None:
        with open(self.config_file, "w") as f:
            self._config.write(f)

    @staticmethod
    def _split(key: str):
        if "." not in key:
            raise ConfigError(f"Config key must be 'section.option', got '{key}'")
        section, option = key.split(".", 1)
        return section, option

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Get a value by dotted key."""
        section, option = self._split(key)
        return self._config.get(section, option, fallback=default)

    def set(self, key: str, value: str) -> None:
        """Set a value by dotted key and persist it."""
        section, option = self._split(key)
        if not self._config.has_section(section):
            self._config.add_section(section)
        self._config.set(section, option, str(value))
        self._save()

    def unset(self, key: str) -> bool:
        """Remove a key. Returns True if it existed."""
        section, option = self._split(key)
        if not self._config.has_section(section):
            return False
        removed = self._config.remove_option(section, option)
        if removed:
            if not self._config.options(section):
                self._config.remove_section(section)
            self._save()
        return removed

    def get_all(self) -> Dict[str, Dict[str, str]]:
        """Return every section as a plain dict."""
        return {section: dict(self._config.items(section)) for section in self._config.sections()}

    def get_config_path(self) -> Path:
        return self.config_file

    @property
    def theme(self) -> str:
        return self.get("ui.theme", "auto")

    @property
    def default_subscription(self) -> Optional[str]:
        return self.get("defaults.subscription")

    @property
    def default_location(self) -> Optional[str]:
        return self.get("defaults.location")
