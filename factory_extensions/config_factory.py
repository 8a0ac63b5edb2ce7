"""
Configuration Factory - Centralized configuration management for factory-extensions
Provides validated resolver settings loaded from the environment, a dict or YAML.
"""

import os
import logging
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Optional

import yaml


class ConfigError(Exception):
    """Configuration-related errors"""
    pass


LOG_LEVELS = ('debug', 'info', 'warning', 'error', 'critical')
TRUE_VALUES = ('true', '1', 'yes', 'on')


@dataclass
class ResolverConfig:
    """Resolver and dispatcher settings, validated on construction"""

    log_level: str = 'info'
    name_separator: str = '_'
    record_persistence_errors: bool = True  # attach swallowed save() failures to the instance
    allow_factory_replacement: bool = False

    def __post_init__(self):
        if not isinstance(self.log_level, str) or self.log_level.lower() not in LOG_LEVELS:
            raise ConfigError(f"Invalid log_level: {self.log_level}")

        separator = self.name_separator
        if not isinstance(separator, str) or not separator or separator.strip() != separator:
            raise ConfigError(f"Invalid name_separator: {separator!r}")


def _field_names():
    return {f.name for f in fields(ResolverConfig)}


class ConfigurationFactory:
    """
    Singleton holding the process-wide ResolverConfig.

    Settings passed to override_setting() are validated before they are
    applied, and are re-applied on every later load.
    """

    _instance: Optional['ConfigurationFactory'] = None
    _config: Optional[ResolverConfig] = None

    def __new__(cls) -> 'ConfigurationFactory':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        if not hasattr(self, '_initialized'):
            self._logger = logging.getLogger(__name__)
            self._overrides: Dict[str, Any] = {}
            self._initialized = True

    def load_from_environment(self, env_prefix: str = 'FACTORY_EXTENSIONS_') -> ResolverConfig:
        """
        Load configuration from environment variables.

        Args:
            env_prefix: Prefix for environment variables, e.g. FACTORY_EXTENSIONS_LOG_LEVEL

        Returns:
            Loaded ResolverConfig instance
        """
        values: Dict[str, Any] = {}
        for name in _field_names():
            raw = os.environ.get(f"{env_prefix}{name.upper()}")
            if raw is None:
                continue
            if isinstance(getattr(ResolverConfig, name), bool):
                values[name] = raw.lower() in TRUE_VALUES
            else:
                values[name] = raw

        config = self._commit(values)
        self._logger.info(f"Configuration loaded from environment ({len(values)} settings)")
        return config

    def load_from_dict(self, config_dict: Dict[str, Any]) -> ResolverConfig:
        """
        Load configuration from dictionary (useful for testing).

        Raises:
            ConfigError: On unknown keys or invalid values
        """
        unknown = set(config_dict) - _field_names()
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {sorted(unknown)}")

        return self._commit(dict(config_dict))

    def load_from_yaml(self, path: str) -> ResolverConfig:
        """
        Load configuration from a YAML file.

        The file may hold the settings at the root or under a
        ``factory_extensions`` key.

        Raises:
            FileNotFoundError: If the file doesn't exist
            yaml.YAMLError: If YAML parsing fails
            ConfigError: If the document is not a mapping or holds invalid values
        """
        with open(path, 'r', encoding='utf-8') as file:
            data = yaml.safe_load(file) or {}

        if not isinstance(data, dict):
            raise ConfigError(f"YAML root must be a dictionary: {path}")

        section = data.get('factory_extensions', data)
        if not isinstance(section, dict):
            raise ConfigError("'factory_extensions' must be a dictionary")

        config = self.load_from_dict(section)
        self._logger.info(f"Configuration loaded from {path}")
        return config

    def _commit(self, values: Dict[str, Any]) -> ResolverConfig:
        self._config = ResolverConfig(**{**values, **self._overrides})
        return self._config

    def override_setting(self, key: str, value: Any) -> 'ConfigurationFactory':
        """
        Override a single setting on the loaded configuration and on later loads.

        The loaded ResolverConfig is updated in place so services holding it
        see the new value.

        Raises:
            ConfigError: On an unknown key or invalid value; nothing changes
        """
        if key not in _field_names():
            raise ConfigError(f"Unknown configuration key: {key}")

        if self._config is not None:
            replace(self._config, **{key: value})  # raises ConfigError before the live config changes
            setattr(self._config, key, value)
        else:
            ResolverConfig(**{key: value})

        self._overrides[key] = value
        return self

    def get_config(self) -> ResolverConfig:
        """
        Get the current configuration.

        Raises:
            ConfigError: If no configuration has been loaded
        """
        if self._config is None:
            raise ConfigError("Configuration not loaded. Call load_from_environment() or load_from_dict() first.")
        return self._config

    def reset(self) -> 'ConfigurationFactory':
        """Reset the factory (useful for testing)"""
        self._config = None
        self._overrides.clear()
        return self

    def to_dict(self) -> Dict[str, Any]:
        """Convert current configuration to dictionary"""
        return asdict(self.get_config())


def configure_logging(config: ResolverConfig) -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(level=getattr(logging, config.log_level.upper()))


# Global factory instance
_config_factory = ConfigurationFactory()


def get_config() -> ResolverConfig:
    """Get the global resolver configuration"""
    return _config_factory.get_config()


def load_config(env_prefix: str = 'FACTORY_EXTENSIONS_') -> ResolverConfig:
    """Load configuration from environment variables"""
    return _config_factory.load_from_environment(env_prefix)


def load_config_from_dict(config_dict: Dict[str, Any]) -> ResolverConfig:
    """Load configuration from dictionary"""
    return _config_factory.load_from_dict(config_dict)


def load_config_from_yaml(path: str) -> ResolverConfig:
    """Load configuration from a YAML file"""
    return _config_factory.load_from_yaml(path)


def override_config(key: str, value: Any) -> ConfigurationFactory:
    """Override a configuration setting"""
    return _config_factory.override_setting(key, value)


def reset_config() -> ConfigurationFactory:
    """Reset configuration (for testing)"""
    return _config_factory.reset()
