"""
nativefs Exception Hierarchy

Architecture:
    FilesystemError (Base for filesystem operations)
    ├── PathNotFoundError
    ├── AccessDeniedError
    ├── InvalidArgumentError
    ├── NotSupportedError
    └── FilesystemIOError
    ConfigurationError (Base for configuration problems)
    └── ConfigValidationError
"""

from .fs_exceptions import (
    FilesystemError,
    PathNotFoundError,
    AccessDeniedError,
    InvalidArgumentError,
    NotSupportedError,
    FilesystemIOError,
)

from .config_exceptions import (
    ConfigurationError,
    ConfigValidationError,
)

__all__ = [
    # Filesystem exceptions
    "FilesystemError",
    "PathNotFoundError",
    "AccessDeniedError",
    "InvalidArgumentError",
    "NotSupportedError",
    "FilesystemIOError",
    # Configuration exceptions
    "ConfigurationError",
    "ConfigValidationError",
]
