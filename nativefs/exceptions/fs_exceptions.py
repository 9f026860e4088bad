"""
Filesystem Exceptions

Exceptions raised by the throwing variants of the filesystem operations.
Each one wraps the structured error code produced by the non-throwing
variant together with the path(s) involved.

Version: 1.0.0
"""

from typing import Optional, Any, TYPE_CHECKING

if TYPE_CHECKING:
    from nativefs.filesystem.errors import ErrorCode


class FilesystemError(Exception):
    """
    Base exception for all filesystem-related errors.

    Raised when a filesystem operation fails for a reason other than
    the plain absence of its target.

    Attributes:
        message: Human-readable error description
        path1: Primary path involved in the failed operation
        path2: Secondary path (move, link creation, equivalence)
        error: Structured platform error code, if any
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error

    Example:
        >>> raise FilesystemError("path::mkdir -- Permission denied", path1="/root/x")
    """

    def __init__(
        self,
        message: str,
        path1: Any = None,
        path2: Any = None,
        error: Optional['ErrorCode'] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.path1 = path1
        self.path2 = path2
        self.error = error
        self.error_code = error.value if error is not None else 5000
        self.context = context or {}
        if path1 is not None:
            self.context["path1"] = str(path1)
        if path2 is not None:
            self.context["path2"] = str(path2)

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        paths = []
        if self.path1 is not None:
            paths.append(f"path1={self.path1}")
        if self.path2 is not None:
            paths.append(f"path2={self.path2}")
        if paths:
            base = f"{base} ({', '.join(paths)})"
        return base

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"path1={self.path1!r}, "
            f"path2={self.path2!r}, "
            f"error_code={self.error_code})"
        )

    @classmethod
    def from_error(
        cls,
        message: str,
        error: 'ErrorCode',
        path1: Any = None,
        path2: Any = None
    ) -> 'FilesystemError':
        """
        Build the exception matching the kind of an error code.

        Args:
            message: Human-readable error description
            error: The error code reported by the failed operation
            path1: Primary path
            path2: Secondary path

        Returns:
            An instance of the most specific FilesystemError subclass
        """
        from nativefs.filesystem.errors import ErrorKind

        exc_type = {
            ErrorKind.NOT_FOUND: PathNotFoundError,
            ErrorKind.ACCESS_DENIED: AccessDeniedError,
            ErrorKind.INVALID_ARGUMENT: InvalidArgumentError,
            ErrorKind.NOT_SUPPORTED: NotSupportedError,
        }.get(error.kind, FilesystemIOError)
        return exc_type(message, path1=path1, path2=path2, error=error)


class PathNotFoundError(FilesystemError):
    """
    The path, or one of its parent directories, does not exist.

    Most query operations report absence as a plain result instead;
    this is only raised where absence prevents the operation itself
    (reading the size of a missing file, opening a missing directory).
    """


class AccessDeniedError(FilesystemError):
    """
    The platform refused access to the path.

    Example:
        >>> raise AccessDeniedError("path::remove -- Permission denied", path1="/etc/passwd")
    """


class InvalidArgumentError(FilesystemError):
    """
    The operation was called with arguments it cannot act on.

    Raised for a permission change without an add/remove/replace mode,
    or when reading the target of something that is not a symlink.
    """


class NotSupportedError(FilesystemError):
    """
    The platform lacks the primitive or privilege for the operation.

    Example:
        >>> raise NotSupportedError("create_symlink -- Operation not supported")
    """


class FilesystemIOError(FilesystemError):
    """Generic platform I/O failure wrapping the native error code."""
