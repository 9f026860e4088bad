"""
Error Codes and Outcomes

Structured error values for the non-throwing half of the API.

Every fallible operation produces an ``Outcome``: the result value plus
an optional ``ErrorCode``. ``Outcome.error is None`` means the operation
succeeded. The throwing half of the API is a thin ``unwrap`` over it.

Version: 1.0.0
"""

import errno
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, Optional, TypeVar

from nativefs.exceptions import FilesystemError


T = TypeVar('T')


class ErrorKind(Enum):
    """Broad categories of filesystem failures."""
    NOT_FOUND = "not-found"
    ACCESS_DENIED = "access-denied"
    INVALID_ARGUMENT = "invalid-argument"
    NOT_SUPPORTED = "not-supported"
    IO_ERROR = "io-error"


_KIND_BY_ERRNO = {
    errno.ENOENT: ErrorKind.NOT_FOUND,
    errno.EACCES: ErrorKind.ACCESS_DENIED,
    errno.EPERM: ErrorKind.ACCESS_DENIED,
    errno.EINVAL: ErrorKind.INVALID_ARGUMENT,
    errno.ENOSYS: ErrorKind.NOT_SUPPORTED,
    errno.EOPNOTSUPP: ErrorKind.NOT_SUPPORTED,
}
if hasattr(errno, 'ENOTSUP'):
    _KIND_BY_ERRNO[errno.ENOTSUP] = ErrorKind.NOT_SUPPORTED


@dataclass(frozen=True)
class ErrorCode:
    """
    A platform error reported by a filesystem operation.

    Attributes:
        value: errno-style error number
        kind: Category of the failure
        message: Human-readable platform message
        winerror: Native Windows error code, when there is one
    """
    value: int
    kind: ErrorKind
    message: str
    winerror: Optional[int] = None

    @classmethod
    def from_errno(cls, value: int, message: Optional[str] = None) -> 'ErrorCode':
        """Build an error code from an errno number."""
        return cls(
            value=value,
            kind=_KIND_BY_ERRNO.get(value, ErrorKind.IO_ERROR),
            message=message or os.strerror(value),
        )

    @classmethod
    def from_os_error(cls, exc: OSError) -> 'ErrorCode':
        """Convert an ``OSError`` raised by a system call."""
        value = exc.errno if exc.errno is not None else errno.EIO
        return cls(
            value=value,
            kind=_KIND_BY_ERRNO.get(value, ErrorKind.IO_ERROR),
            message=exc.strerror or os.strerror(value),
            winerror=getattr(exc, 'winerror', None),
        )

    @classmethod
    def from_exception(cls, exc: Exception) -> 'ErrorCode':
        """
        Convert an exception raised at the system-call boundary.

        ``ValueError`` (e.g. an embedded NUL in a path) is reported as
        an invalid argument.
        """
        if isinstance(exc, OSError):
            return cls.from_os_error(exc)
        return cls.from_errno(errno.EINVAL, str(exc) or None)

    @property
    def is_not_found(self) -> bool:
        return self.kind is ErrorKind.NOT_FOUND

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class Outcome(Generic[T]):
    """
    Result of a non-throwing filesystem operation.

    ``value`` is always set, even on failure, to the operation's
    documented failure value (``False``, ``-1``, an empty path, ...).
    """
    value: T
    error: Optional[ErrorCode] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> 'Outcome[T]':
        return cls(value)

    @classmethod
    def failure(cls, error: ErrorCode, value: Any = None) -> 'Outcome[Any]':
        return cls(value, error)

    def unwrap(self, operation: str, path1: Any = None, path2: Any = None) -> T:
        """
        Return the value, raising if an error was reported.

        Args:
            operation: Name used as the message prefix (e.g. 'path::mkdir')
            path1: Primary path attached to the exception
            path2: Secondary path attached to the exception

        Raises:
            FilesystemError: The subclass matching the error kind
        """
        if self.error is not None:
            raise FilesystemError.from_error(
                f"{operation} -- {self.error.message}",
                self.error,
                path1=path1,
                path2=path2,
            )
        return self.value
