"""
Configuration Exceptions

Exceptions raised while loading or validating the library configuration.

Version: 1.0.0
"""

from typing import Optional, Any


class ConfigurationError(Exception):
    """
    Base exception for configuration errors.

    Attributes:
        message: Human-readable error description
        source: Configuration file or environment variable involved
        context: Additional context about the error
    """

    def __init__(
        self,
        message: str,
        source: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.source = source
        self.context = context or {}
        if source:
            self.context["source"] = source

    def __str__(self) -> str:
        if self.source:
            return f"{self.message} (source={self.source})"
        return self.message


class ConfigValidationError(ConfigurationError):
    """
    A configuration value failed validation.

    Example:
        >>> raise ConfigValidationError("Unknown path flavour: vms", key="path.flavour")
    """

    def __init__(
        self,
        message: str,
        key: Optional[str] = None,
        source: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        super().__init__(message, source=source, context=ctx)
        self.key = key
