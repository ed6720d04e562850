"""Unified configuration management for the application."""
from __future__ import annotations

import copy
import json
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError as PydanticValidationError

from mgmtops.config.schemas import AppConfig
from mgmtops.config.utils.env_expansion import expand_config_env_vars
from mgmtops.infrastructure.exceptions import ConfigurationError
from mgmtops.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)

ENV_PREFIX = "MGMTOPS_"
ENV_NESTING = "__"
DEFAULT_CONFIG_LOCATIONS = (
    "mgmtops.yaml",
    "mgmtops.yml",
    "mgmtops.json",
    "~/.config/mgmtops/config.yaml",
)


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Sources, in increasing precedence:
    - Schema defaults
    - JSON or YAML configuration file
    - MGMTOPS_<SECTION>__<KEY> environment variables

    String values may reference environment variables as $VAR or ${VAR}.
    """

    def __init__(self, config_file: Optional[str] = None, environ: Optional[Dict[str, str]] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._environ = environ if environ is not None else os.environ
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def reload(self) -> AppConfig:
        with self._lock:
            self._app_config = None
        return self.app_config

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value by dotted path, e.g. 'azure.endpoint'."""
        node: Any = self.app_config
        for part in key.split("."):
            if isinstance(node, dict):
                if part not in node:
                    return default
                node = node[part]
            elif hasattr(node, part):
                node = getattr(node, part)
            else:
                return default
        return node

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_data: Dict[str, Any] = {}
        path = self._resolve_config_file()
        if path is not None:
            config_data = self.load_from_file(path)
            logger.debug("Loaded configuration from %s", path)

        config_data = self.apply_environment_overrides(config_data)
        config_data = expand_config_env_vars(config_data)

        try:
            return AppConfig.from_dict(config_data)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}", details=e.errors())

    def _resolve_config_file(self) -> Optional[Path]:
        if self._config_file:
            path = Path(self._config_file).expanduser()
            if not path.exists():
                raise ConfigurationError(f"Configuration file not found: {self._config_file}")
            return path
        for candidate in DEFAULT_CONFIG_LOCATIONS:
            path = Path(candidate).expanduser()
            if path.exists():
                return path
        return None

    @staticmethod
    def load_from_file(path: Path) -> Dict[str, Any]:
        """
        Read a JSON or YAML configuration file.

        Raises:
            ConfigurationError: If the file cannot be parsed
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                if path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to parse configuration file {path}: {str(e)}")
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a mapping")
        return data

    def apply_environment_overrides(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply MGMTOPS_<SECTION>__<KEY> overrides.

        MGMTOPS_AZURE__SUBSCRIPTION_ID=abc sets azure.subscription_id. Values
        stay strings; schema validation coerces them.
        """
        result = copy.deepcopy(config_data)
        for name, raw_value in self._environ.items():
            if not name.startswith(ENV_PREFIX) or ENV_NESTING not in name:
                continue
            path = [part.lower() for part in name[len(ENV_PREFIX):].split(ENV_NESTING)]
            node = result
            for part in path[:-1]:
                child = node.get(part)
                if not isinstance(child, dict):
                    child = {}
                    node[part] = child
                node = child
            node[path[-1]] = raw_value
        return result


_config_manager: Optional[ConfigurationManager] = None
_manager_lock = threading.Lock()


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """Get the process-wide configuration manager."""
    global _config_manager
    with _manager_lock:
        if _config_manager is None or (config_file and config_file != _config_manager._config_file):
            _config_manager = ConfigurationManager(config_file)
        return _config_manager
