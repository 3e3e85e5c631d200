"""
Configuration utility for the parser and command line tool.
"""

import copy
import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

VOID_ELEMENTS = [
    'area', 'base', 'br', 'col', 'embed', 'hr', 'img', 'input',
    'link', 'meta', 'param', 'source', 'track', 'wbr',
]

DEFAULTS: Dict[str, Any] = {
    "parser": {
        "max_depth": 128,
        "raw_text_elements": ["script", "style"],
        "void_elements": VOID_ELEMENTS,
    },
    "logging": {
        "console_level": "WARNING",
        "file": None,
    },
    "network": {
        "timeout": 30,
        "max_retries": 3,
        "user_agent": "html-filter/1.0",
    },
}


class Config:
    """Configuration manager with dotted keys, e.g. ``parser.max_depth``."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Optional JSON file overriding the defaults
        """
        self.config_path = config_path
        self.config: Dict[str, Any] = {}
        self._set_defaults()

        if config_path:
            self.load()

        logger.debug(f"Configuration initialized (config_path: {config_path})")

    def load(self) -> None:
        """
        Load configuration from file, merged over the defaults.

        Raises:
            OSError: If the file cannot be read
            ValueError: If the file is not a JSON object
        """
        with open(self.config_path, 'r', encoding='utf-8') as f:
            loaded = json.load(f)
        if not isinstance(loaded, dict):
            raise ValueError(f"Configuration file {self.config_path} must contain a JSON object")
        _merge(self.config, loaded)
        logger.debug(f"Configuration loaded from {self.config_path}")

    def save(self) -> None:
        """Save configuration to file."""
        if not self.config_path:
            raise ValueError("No configuration path set")
        directory = os.path.dirname(self.config_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.config_path, 'w', encoding='utf-8') as f:
            json.dump(self.config, f, indent=4)
        logger.debug(f"Configuration saved to {self.config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'parser.max_depth')
            default: Default value if key doesn't exist

        Returns:
            Any: Configuration value or default
        """
        parts = key.split('.')
        config = self.config
        for part in parts[:-1]:
            if part not in config or not isinstance(config[part], dict):
                return default
            config = config[part]
        return config.get(parts[-1], default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key (can be nested using dots)
            value: Configuration value
        """
        parts = key.split('.')
        config = self.config
        for part in parts[:-1]:
            if not isinstance(config.get(part), dict):
                config[part] = {}
            config = config[part]
        config[parts[-1]] = value

    def remove(self, key: str) -> bool:
        """
        Remove a configuration value.

        Args:
            key: Configuration key

        Returns:
            bool: True if key was removed
        """
        parts = key.split('.')
        config = self.config
        for part in parts[:-1]:
            if part not in config or not isinstance(config[part], dict):
                return False
            config = config[part]
        if parts[-1] in config:
            del config[parts[-1]]
            return True
        return False

    def get_all(self) -> Dict[str, Any]:
        """
        Get all configuration values.

        Returns:
            Dict[str, Any]: Copy of all configuration values
        """
        return copy.deepcopy(self.config)

    def _set_defaults(self) -> None:
        """Set default configuration values."""
        self.config = copy.deepcopy(DEFAULTS)
        logger.debug("Default configuration set")


def _merge(target: Dict[str, Any], overrides: Dict[str, Any]) -> None:
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(target.get(key), dict):
            _merge(target[key], value)
        else:
            target[key] = value
