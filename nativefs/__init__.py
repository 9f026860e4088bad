"""
nativefs - Portable Filesystem Paths and Metadata

This package provides a native path value type with POSIX and Windows
grammars, file status resolution, directory iteration and common
filesystem operations, implemented entirely in Python 3.10+ using only
the standard library.
"""

__version__ = "1.0.0"

from .filesystem import *  # noqa: F401,F403
from .filesystem import __all__ as _filesystem_all
from .exceptions import (
    FilesystemError,
    PathNotFoundError,
    AccessDeniedError,
    InvalidArgumentError,
    NotSupportedError,
    FilesystemIOError,
    ConfigurationError,
    ConfigValidationError,
)
from .core import ConfigLoader, get_config, setup_logging
from .logger import Logger, LogLevel, get_logger

__all__ = list(_filesystem_all) + [
    'FilesystemError',
    'PathNotFoundError',
    'AccessDeniedError',
    'InvalidArgumentError',
    'NotSupportedError',
    'FilesystemIOError',
    'ConfigurationError',
    'ConfigValidationError',
    'ConfigLoader',
    'get_config',
    'setup_logging',
    'Logger',
    'LogLevel',
    'get_logger',
]
