"""
Base Service - Common patterns and utilities for service classes

Provides:
- Consistent logging setup
- Configuration access
- Standard initialization patterns
"""

import logging
from typing import Any, Optional
from abc import ABC, abstractmethod

from factory_extensions.config_factory import get_config, ConfigError, ResolverConfig


class BaseService(ABC):
    """
    Base class for all services providing common functionality.

    Features:
    - Automatic logger setup with service-specific namespace
    - Configuration access with fallback to defaults
    - Consistent initialization patterns
    """

    def __init__(self, config: Optional[ResolverConfig] = None):
        """
        Initialize base service.

        Args:
            config: Explicit configuration; the globally loaded one is used otherwise
        """
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

        if config is None:
            try:
                config = get_config()
            except ConfigError:
                # Config not loaded yet - fall back to defaults
                config = ResolverConfig()
        self._config = config

        self._initialize()

        self._logger.debug(f"{self.__class__.__name__} initialized")

    @abstractmethod
    def _initialize(self) -> None:
        """
        Initialize service-specific components.
        Subclasses must implement this method.
        """
        pass

    @property
    def config(self) -> ResolverConfig:
        return self._config

    def get_config_value(self, key: str, default: Any = None) -> Any:
        """Get a configuration value, or default when the config has no such key."""
        return getattr(self._config, key, default)

    def log_info(self, message: str, **context) -> None:
        """
        Log info message with context.

        Args:
            message: Info message
            **context: Additional context for logging
        """
        log_context = {
            'service': self.__class__.__name__,
            **context
        }
        self._logger.info(message, extra=log_context)

    def log_debug(self, message: str, **context) -> None:
        """
        Log debug message with context.

        Args:
            message: Debug message
            **context: Additional context for logging
        """
        log_context = {
            'service': self.__class__.__name__,
            **context
        }
        self._logger.debug(message, extra=log_context)

    def log_warning(self, message: str, exception: Optional[Exception] = None, **context) -> None:
        """Log warning message with context and an optional exception."""
        log_context = {
            'service': self.__class__.__name__,
            **context
        }
        if exception:
            self._logger.warning(f"{message}: {exception}", extra=log_context)
        else:
            self._logger.warning(message, extra=log_context)
