"""
nativefs Core Module

Configuration loading and logging setup.
"""

from .config_loader import (
    ConfigLoader,
    Config,
    LoggingConfig,
    PathConfig,
    TempConfig,
    SymlinkConfig,
    get_config,
    setup_logging,
)

__all__ = [
    'ConfigLoader',
    'Config',
    'LoggingConfig',
    'PathConfig',
    'TempConfig',
    'SymlinkConfig',
    'get_config',
    'setup_logging',
]
