"""
nativefs Logger Module

Logging for the filesystem layer:
- Component-specific loggers under the ``nativefs`` logger namespace
- Structured context data rendered after each message
- Optional console and file output
- In-memory buffer of recent records for inspection and tests

Nothing is attached to the ``nativefs`` logger until
``Logger.initialize`` is called, so importing the library never
changes the host application's logging setup.

Version: 1.0.0
"""

import logging
import sys
import threading
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Optional, Any, List


class LogLevel(IntEnum):
    """Log level enumeration with numeric values for comparison."""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @classmethod
    def from_name(cls, name: str) -> 'LogLevel':
        """Look up a level by its (case-insensitive) name."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {name}") from None


class LogFormatter(logging.Formatter):
    """
    Log formatter for nativefs.

    Output format:
        [2024-01-01 12:00:00.000] DEBUG    [ops] Created directory {path=/tmp/x}
    """

    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors and self._supports_color()

    @staticmethod
    def _supports_color() -> bool:
        """Check if the terminal supports ANSI colors."""
        if not hasattr(sys.stderr, 'isatty'):
            return False
        return sys.stderr.isatty()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime(
            '%Y-%m-%d %H:%M:%S.%f'
        )[:-3]

        level = record.levelname
        if self.use_colors and level in self.COLORS:
            level_display = f"{self.COLORS[level]}{level:8s}{self.RESET}"
        else:
            level_display = f"{level:8s}"

        components = [f"[{timestamp}]", level_display]

        if hasattr(record, 'component'):
            components.append(f"[{record.component}]")

        components.append(str(record.getMessage()))

        if hasattr(record, 'context') and record.context:
            context_str = " ".join(f"{k}={v}" for k, v in record.context.items())
            components.append(f"{{{context_str}}}")

        message = " ".join(components)

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


class LogBufferHandler(logging.Handler):
    """
    Keeps the most recent log records in memory.

    Used by tests and by callers that want to inspect what the
    library did without parsing console output.
    """

    def __init__(self, max_entries: int = 10000):
        super().__init__()
        self.max_entries = max_entries
        self._log_buffer: List[dict[str, Any]] = []
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        log_entry = {
            'timestamp': record.created,
            'level': record.levelname,
            'message': record.getMessage(),
            'component': getattr(record, 'component', None),
            'context': getattr(record, 'context', {}),
        }

        with self._lock:
            self._log_buffer.append(log_entry)
            if len(self._log_buffer) > self.max_entries:
                self._log_buffer = self._log_buffer[-self.max_entries:]

    def get_logs(
        self,
        level: Optional[str] = None,
        component: Optional[str] = None,
        limit: int = 100
    ) -> List[dict[str, Any]]:
        """Retrieve buffered records with optional filtering."""
        with self._lock:
            logs = self._log_buffer.copy()

        if level:
            logs = [l for l in logs if l['level'] == level]

        if component:
            logs = [l for l in logs if l['component'] == component]

        return logs[-limit:]

    def clear(self) -> None:
        with self._lock:
            self._log_buffer.clear()


class Logger:
    """
    Component logger for nativefs.

    One instance exists per component name; all of them forward to
    ``logging.getLogger('nativefs.<component>')``.

    Example:
        >>> log = Logger('ops')
        >>> log.debug("Created directory", context={'path': '/tmp/a'})
    """

    _instances: dict[str, 'Logger'] = {}
    _lock = threading.Lock()
    _initialized = False
    _buffer_handler: Optional[LogBufferHandler] = None
    _handlers: List[logging.Handler] = []

    def __new__(cls, component: str = 'fs') -> 'Logger':
        """Get or create a logger for a component."""
        with cls._lock:
            if component not in cls._instances:
                instance = super().__new__(cls)
                instance._component = component
                instance._logger = logging.getLogger(f'nativefs.{component}')
                cls._instances[component] = instance
            return cls._instances[component]

    @classmethod
    def initialize(
        cls,
        level: int = LogLevel.WARNING,
        log_file: Optional[str] = None,
        use_colors: bool = True,
        console: bool = True
    ) -> None:
        """
        Attach handlers to the ``nativefs`` logger.

        Calling this more than once is a no-op until ``shutdown`` runs.

        Args:
            level: Minimum log level to capture
            log_file: Optional file path for log output
            use_colors: Whether to use ANSI colors in console output
            console: Whether to log to stderr
        """
        with cls._lock:
            if cls._initialized:
                return

            root_logger = logging.getLogger('nativefs')
            root_logger.setLevel(level)

            cls._buffer_handler = LogBufferHandler()
            cls._buffer_handler.setLevel(level)
            cls._handlers = [cls._buffer_handler]

            if console:
                console_handler = logging.StreamHandler(sys.stderr)
                console_handler.setLevel(level)
                console_handler.setFormatter(LogFormatter(use_colors=use_colors))
                cls._handlers.append(console_handler)

            if log_file:
                file_path = Path(log_file)
                file_path.parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.FileHandler(log_file)
                file_handler.setLevel(level)
                file_handler.setFormatter(LogFormatter(use_colors=False))
                cls._handlers.append(file_handler)

            for handler in cls._handlers:
                root_logger.addHandler(handler)

            cls._initialized = True

    @classmethod
    def shutdown(cls) -> None:
        """Detach and close every handler added by ``initialize``."""
        with cls._lock:
            root_logger = logging.getLogger('nativefs')
            for handler in cls._handlers:
                root_logger.removeHandler(handler)
                handler.close()
            cls._handlers = []
            cls._buffer_handler = None
            cls._initialized = False

    @classmethod
    def get_buffered_logs(
        cls,
        level: Optional[str] = None,
        component: Optional[str] = None,
        limit: int = 100
    ) -> List[dict[str, Any]]:
        """Get records from the in-memory buffer."""
        if cls._buffer_handler is None:
            return []
        return cls._buffer_handler.get_logs(level=level, component=component, limit=limit)

    def _log(
        self,
        level: int,
        message: str,
        context: Optional[dict[str, Any]] = None,
        exc_info: Any = None
    ) -> None:
        extra = {
            'component': self._component,
            'context': context or {},
        }
        self._logger.log(level, message, extra=extra, exc_info=exc_info)

    def debug(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a debug message."""
        self._log(LogLevel.DEBUG, message, context)

    def info(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log an info message."""
        self._log(LogLevel.INFO, message, context)

    def warning(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a warning message."""
        self._log(LogLevel.WARNING, message, context)

    def error(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log an error message."""
        self._log(LogLevel.ERROR, message, context)

    def exception(
        self,
        message: str,
        exc: Optional[BaseException] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        """Log an error message with the exception's stack trace."""
        self._log(LogLevel.ERROR, message, context, exc_info=exc or True)


def get_logger(component: str) -> Logger:
    """
    Get a logger for the specified component.

    Args:
        component: Name of the component (e.g., 'path', 'status', 'ops')

    Returns:
        Logger instance for the component
    """
    return Logger(component)
