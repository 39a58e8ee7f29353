"""
Configuration manager for greeter settings.

Loads settings from YAML files, validates them, and provides
environment variable substitution.
"""

import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from greeter.core import DEFAULT_NAME

logger = logging.getLogger(__name__)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_LOG_LEVEL = "WARNING"

# ${VAR_NAME} or ${VAR_NAME:default}
_ENV_PATTERN = re.compile(r'\$\{([^}:]+)(?::([^}]*))?\}')


@dataclass
class GreeterConfig:
    """Validated greeter configuration."""
    name: str = DEFAULT_NAME
    log_level: str = DEFAULT_LOG_LEVEL

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "name": self.name,
            "log_level": self.log_level,
        }


class ConfigManager:
    """Manages greeter configuration."""

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize configuration manager.

        Args:
            config_path: Path to configuration YAML file (optional)
        """
        self.config_path = config_path

    def load(self, config_path: Optional[Path] = None) -> GreeterConfig:
        """Load and validate configuration from YAML file.

        Without any path the built-in defaults are returned.

        Args:
            config_path: Path to configuration file (overrides init path)

        Returns:
            GreeterConfig with validated settings

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If configuration is invalid or the path is not a file
        """
        path = config_path or self.config_path
        if path is None:
            logger.debug("No configuration file given, using defaults")
            return GreeterConfig()

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")
        if not path.is_file():
            raise ValueError(f"Configuration path is not a file: {path}")

        logger.debug("Loading configuration from %s", path)
        with open(path, 'r') as f:
            config = yaml.safe_load(f)

        # An empty document parses to None
        if config is None:
            config = {}

        config = self._substitute_env_vars(config)
        self._validate_config(config)

        return self._create_greeter_config(config)

    def _substitute_env_vars(self, config: Any) -> Any:
        """Recursively substitute environment variables in configuration.

        Args:
            config: Configuration dictionary or value

        Returns:
            Configuration with substituted values
        """
        if isinstance(config, dict):
            return {
                key: self._substitute_env_vars(value)
                for key, value in config.items()
            }
        elif isinstance(config, list):
            return [self._substitute_env_vars(item) for item in config]
        elif isinstance(config, str):
            return self._substitute_env_var_string(config)
        else:
            return config

    def _substitute_env_var_string(self, value: str) -> str:
        """Substitute ${VAR} and ${VAR:default} references in a string."""

        def replacer(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return _ENV_PATTERN.sub(replacer, value)

    def _validate_config(self, config: Any) -> None:
        """Validate configuration structure and field values.

        Args:
            config: Parsed configuration document

        Raises:
            ValueError: If configuration is invalid
        """
        if not isinstance(config, dict):
            raise ValueError("Configuration must be a mapping")

        unknown = sorted(str(key) for key in config if key not in ("name", "log_level"))
        if unknown:
            raise ValueError(f"Unknown configuration field(s): {', '.join(unknown)}")

        if "name" in config and not isinstance(config["name"], str):
            raise ValueError("Configuration field 'name' must be a string")

        if "log_level" in config:
            level = config["log_level"]
            if not isinstance(level, str) or level.upper() not in LOG_LEVELS:
                raise ValueError(
                    f"Invalid log_level: {level!r} (expected one of {', '.join(LOG_LEVELS)})"
                )

    def _create_greeter_config(self, config: Dict[str, Any]) -> GreeterConfig:
        """Create GreeterConfig from validated configuration."""
        return GreeterConfig(
            name=config.get("name", DEFAULT_NAME),
            log_level=config.get("log_level", DEFAULT_LOG_LEVEL).upper(),
        )

    def save_example_config(self, output_path: Path) -> None:
        """Save an example configuration file.

        Args:
            output_path: Path where to save example config
        """
        example_config = {
            "name": "${GREETER_NAME:" + DEFAULT_NAME + "}",
            "log_level": "INFO",
        }

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w') as f:
            yaml.safe_dump(example_config, f, default_flow_style=False, sort_keys=False)
        logger.info("Example configuration written to %s", output_path)
