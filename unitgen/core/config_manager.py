"""Configuration manager for loading unitgen settings."""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union
import yaml

from ..utils.constants import (
    CONFIG_ENV_VAR,
    CONFIG_FILE,
    DEFAULT_GROUP,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PRIVILEGE_COMMAND,
    DEFAULT_USER,
    DEFAULT_WORKDIR,
    SYSTEMD_UNIT_DIR,
)

logger = logging.getLogger(__name__)


class ConfigManager:
    """Manages user settings that provide defaults for unit generation."""

    CONFIG_VERSION = "1.0"

    # Settings that must be strings; the second item tells whether null is allowed
    STRING_SETTINGS = {
        "default_user": False,
        "default_group": False,
        "default_workdir": False,
        "output_dir": False,
        "unit_dir": False,
        "privilege_command": False,
        "log_file": True,
    }

    DEFAULT_SETTINGS = {
        "default_user": DEFAULT_USER,
        "default_group": DEFAULT_GROUP,
        "default_workdir": DEFAULT_WORKDIR,
        "output_dir": str(DEFAULT_OUTPUT_DIR),
        "unit_dir": str(SYSTEMD_UNIT_DIR),
        "privilege_command": DEFAULT_PRIVILEGE_COMMAND,
        "command_timeout": None,
        "log_file": None,
    }

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """Initialize the config manager.

        Args:
            config_file: Path to the YAML config, defaults to $UNITGEN_CONFIG
                or CONFIG_FILE
        """
        self.config_file = Path(config_file or os.environ.get(CONFIG_ENV_VAR) or CONFIG_FILE)
        self.settings: Dict[str, Any] = {}
        self._ensure_default_settings()

    def load_config(self) -> bool:
        """Load configuration from file.

        A missing or broken file is not an error; defaults are used instead.

        Returns:
            True if config loaded successfully, False otherwise
        """
        if not self.config_file.exists():
            logger.info(f"Config file {self.config_file} not found, using defaults")
            self._load_defaults()
            return False

        try:
            with open(self.config_file, 'r') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error(f"YAML parsing error: {e}")
            self._load_defaults()
            return False
        except OSError as e:
            logger.error(f"Failed to read config: {e}")
            self._load_defaults()
            return False

        if not data:
            logger.warning("Empty config file, using defaults")
            self._load_defaults()
            return False

        if not self._validate_config(data):
            logger.error("Invalid config file, using defaults")
            self._load_defaults()
            return False

        self.settings = dict(data.get("settings") or {})
        self._ensure_default_settings()

        logger.info(f"Loaded settings from {self.config_file}")
        return True

    def get_setting(self, key: str, default: Any = None) -> Any:
        """Get a setting value.

        Args:
            key: Setting key
            default: Default value if key not found

        Returns:
            Setting value or default
        """
        return self.settings.get(key, default)

    def _validate_config(self, data) -> bool:
        """Validate configuration data structure.

        Args:
            data: Parsed YAML document

        Returns:
            True if valid, False otherwise
        """
        if not isinstance(data, dict):
            logger.error("Config must be a dictionary")
            return False

        if "version" not in data:
            logger.warning("Config missing version, assuming valid")

        if "settings" in data and data["settings"] is not None and not isinstance(data["settings"], dict):
            logger.error("Settings must be a dictionary")
            return False

        settings = data.get("settings") or {}
        for key, nullable in self.STRING_SETTINGS.items():
            if key not in settings:
                continue
            value = settings[key]
            if value is None and nullable:
                continue
            if not isinstance(value, str):
                logger.error(f"{key} must be a string, got {value!r}")
                return False

        timeout = settings.get("command_timeout")
        if timeout is not None and (isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0):
            logger.error("command_timeout must be a positive number")
            return False

        return True

    def _load_defaults(self):
        """Load default configuration."""
        self.settings = {}
        self._ensure_default_settings()
        logger.info("Loaded default configuration")

    def _ensure_default_settings(self):
        """Ensure all default settings exist."""
        for key, value in self.DEFAULT_SETTINGS.items():
            if key not in self.settings:
                self.settings[key] = value
