"""
nativefs Configuration Loader

Configuration management for the filesystem layer:
- JSON configuration file loading
- Environment variable overrides (NATIVEFS_*)
- Validation of every section
- Dot-notation access and runtime updates

Version: 1.0.0
"""

import json
import os
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, List, Mapping

from nativefs.exceptions import ConfigurationError, ConfigValidationError
from nativefs.logger import Logger, LogLevel


FLAVOURS = ("auto", "posix", "windows")


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console_output: bool = False
    use_colors: bool = True


@dataclass
class PathConfig:
    """Path grammar selection; ``auto`` follows ``os.name``."""
    flavour: str = "auto"


@dataclass
class TempConfig:
    """Temporary directory lookup settings (POSIX backend)."""
    env_vars: List[str] = field(default_factory=lambda: [
        "TMPDIR", "TMP", "TEMP", "TEMPDIR"
    ])
    posix_default: str = "/tmp"


@dataclass
class SymlinkConfig:
    """Symlink resolution settings."""
    max_depth: int = 40


@dataclass
class Config:
    """
    Main configuration container.

    Holds every setting the filesystem layer reads at runtime.
    """
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    path: PathConfig = field(default_factory=PathConfig)
    temp: TempConfig = field(default_factory=TempConfig)
    symlink: SymlinkConfig = field(default_factory=SymlinkConfig)


class ConfigLoader:
    """
    Configuration loader and manager.

    Loads settings from JSON files and the environment, validates them,
    and serves them to the rest of the package.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('nativefs.json')
        >>> config.symlink.max_depth
        40
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
            return cls._instance

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigurationError: If the file cannot be loaded or parsed
            ConfigValidationError: If a value is invalid
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigurationError(
                f"Configuration file not found: {config_path}",
                source=config_path
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in configuration file: {e}",
                source=config_path
            )
        except OSError as e:
            raise ConfigurationError(
                f"Cannot read configuration file: {e}",
                source=config_path
            )

        if not isinstance(data, dict):
            raise ConfigurationError(
                "Configuration root must be a JSON object",
                source=config_path
            )

        config = self._parse_config(data)
        self._validate(config, source=config_path)
        self._config = config
        return self._config

    def load_env(self, environ: Optional[Mapping[str, str]] = None) -> Config:
        """
        Apply NATIVEFS_* environment overrides on top of the current config.

        Recognised variables: NATIVEFS_LOG_LEVEL, NATIVEFS_LOG_FILE,
        NATIVEFS_PATH_FLAVOUR, NATIVEFS_SYMLINK_MAX_DEPTH.
        """
        env = os.environ if environ is None else environ
        config = self._parse_config(self.to_dict())

        if env.get('NATIVEFS_LOG_LEVEL'):
            config.logging.level = env['NATIVEFS_LOG_LEVEL']
        if env.get('NATIVEFS_LOG_FILE'):
            config.logging.log_file = env['NATIVEFS_LOG_FILE']
        if env.get('NATIVEFS_PATH_FLAVOUR'):
            config.path.flavour = env['NATIVEFS_PATH_FLAVOUR']
        if env.get('NATIVEFS_SYMLINK_MAX_DEPTH'):
            raw = env['NATIVEFS_SYMLINK_MAX_DEPTH']
            try:
                config.symlink.max_depth = int(raw)
            except ValueError:
                raise ConfigValidationError(
                    f"Symlink depth must be an integer, got {raw!r}",
                    key="symlink.max_depth",
                    source="NATIVEFS_SYMLINK_MAX_DEPTH"
                )

        self._validate(config, source="environment")
        self._config = config
        return self._config

    def _parse_config(self, data: dict[str, Any]) -> Config:
        """Parse configuration data into Config object."""
        config = Config()

        if 'logging' in data:
            log_data = data['logging']
            config.logging = LoggingConfig(
                level=log_data.get('level', config.logging.level),
                log_file=log_data.get('log_file', config.logging.log_file),
                console_output=log_data.get('console_output', config.logging.console_output),
                use_colors=log_data.get('use_colors', config.logging.use_colors),
            )

        if 'path' in data:
            path_data = data['path']
            config.path = PathConfig(
                flavour=path_data.get('flavour', config.path.flavour),
            )

        if 'temp' in data:
            temp_data = data['temp']
            config.temp = TempConfig(
                env_vars=list(temp_data.get('env_vars', config.temp.env_vars)),
                posix_default=temp_data.get('posix_default', config.temp.posix_default),
            )

        if 'symlink' in data:
            link_data = data['symlink']
            config.symlink = SymlinkConfig(
                max_depth=link_data.get('max_depth', config.symlink.max_depth),
            )

        return config

    @staticmethod
    def _validate(config: Config, source: Optional[str] = None) -> None:
        try:
            LogLevel.from_name(str(config.logging.level))
        except ValueError:
            raise ConfigValidationError(
                f"Unknown log level: {config.logging.level}",
                key="logging.level",
                source=source
            )

        if config.path.flavour not in FLAVOURS:
            raise ConfigValidationError(
                f"Unknown path flavour: {config.path.flavour}",
                key="path.flavour",
                source=source
            )

        if not isinstance(config.symlink.max_depth, int) or config.symlink.max_depth <= 0:
            raise ConfigValidationError(
                f"Symlink depth must be a positive integer, got {config.symlink.max_depth!r}",
                key="symlink.max_depth",
                source=source
            )

        if not config.temp.posix_default:
            raise ConfigValidationError(
                "Temporary directory default must not be empty",
                key="temp.posix_default",
                source=source
            )

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'symlink.max_depth')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        obj: Any = self._config

        for part in key.split('.'):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        The change is validated before it is kept; it is not persisted.
        """
        parts = key.split('.')
        data = self.to_dict()
        section: Any = data

        for part in parts[:-1]:
            if isinstance(section, dict) and part in section:
                section = section[part]
            else:
                raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

        if not isinstance(section, dict) or parts[-1] not in section:
            raise ConfigValidationError(f"Invalid configuration key: {key}", key=key)

        section[parts[-1]] = value
        config = self._parse_config(data)
        self._validate(config)
        self._config = config

    def reset(self) -> None:
        """Restore the built-in defaults."""
        self._config = Config()

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, '__dataclass_fields__'):
                return {
                    k: dataclass_to_dict(v)
                    for k, v in obj.__dict__.items()
                }
            elif isinstance(obj, list):
                return [dataclass_to_dict(item) for item in obj]
            else:
                return obj

        return dataclass_to_dict(self._config)


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    return ConfigLoader().config


def setup_logging(config: Optional[Config] = None) -> None:
    """Initialize the nativefs loggers from the logging section."""
    settings = (config or get_config()).logging
    Logger.initialize(
        level=LogLevel.from_name(settings.level),
        log_file=settings.log_file,
        use_colors=settings.use_colors,
        console=settings.console_output,
    )
