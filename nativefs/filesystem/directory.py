"""
Directory Module

Directory entries and the directory iterator.

A ``DirectoryIterator`` is bound to one base directory and walks its
entries (never ``.`` or ``..``) through the platform's enumeration
handle. A default-constructed iterator is the canonical end; any
exhausted iterator compares equal to it.

Example:
    >>> with DirectoryIterator('/etc') as entries:
    ...     for entry in entries:
    ...         print(entry.path, entry.status().type)

Version: 1.0.0
"""

import os
from typing import Optional

from .errors import ErrorCode, ErrorKind, Outcome
from .path import Path, PathSource, as_path
from .resolver import status, symlink_status
from .file_status import FileStatus
from nativefs.exceptions import FilesystemError
from nativefs.logger import get_logger


_logger = get_logger('directory')


class DirectoryEntry:
    """
    A path plus its lazily fetched status.

    Statuses are queried on first access and then cached; call
    ``refresh()`` after the entry changes on disk.
    """

    __slots__ = ('_path', '_status', '_symlink_status')

    def __init__(self, path: PathSource = None):
        self._path = as_path(path).copy()
        self._status: Optional[FileStatus] = None
        self._symlink_status: Optional[FileStatus] = None

    @property
    def path(self) -> Path:
        return self._path

    def assign(self, path: PathSource) -> None:
        self._path = as_path(path).copy()
        self.refresh()

    def refresh(self) -> None:
        """Forget the cached statuses."""
        self._status = None
        self._symlink_status = None

    def try_status(self) -> Outcome[FileStatus]:
        if self._status is not None:
            return Outcome.success(self._status)
        result = status(self._path)
        if result.ok:
            self._status = result.value
        return result

    def status(self) -> FileStatus:
        return self.try_status().unwrap('directory_entry::status', self._path)

    def try_symlink_status(self) -> Outcome[FileStatus]:
        if self._symlink_status is not None:
            return Outcome.success(self._symlink_status)
        result = symlink_status(self._path)
        if result.ok:
            self._symlink_status = result.value
        return result

    def symlink_status(self) -> FileStatus:
        return self.try_symlink_status().unwrap('directory_entry::symlink_status', self._path)

    def __fspath__(self) -> str:
        return self._path.native

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DirectoryEntry):
            return NotImplemented
        return self._path == other._path

    def __lt__(self, other: 'DirectoryEntry') -> bool:
        if not isinstance(other, DirectoryEntry):
            return NotImplemented
        return self._path < other._path

    __hash__ = None

    def __repr__(self) -> str:
        return f"DirectoryEntry({self._path.native!r})"


class DirectoryIterator:
    """
    Forward iterator over the entries of one directory.

    ``DirectoryIterator(path)`` raises ``FilesystemError`` if the
    directory cannot be opened; ``DirectoryIterator.try_open(path)``
    reports the failure in an ``Outcome`` instead. The platform handle is
    closed on exhaustion, on error, on ``close()`` and when a ``with``
    block exits.

    Args:
        path: Directory to enumerate; ``None`` builds the end iterator
        skip_permission_denied: Treat an access-denied failure to open
            the directory as an empty directory
    """

    def __init__(self, path: PathSource = None, skip_permission_denied: bool = False):
        self._base: Optional[Path] = None
        self._handle = None
        self._entry: Optional[DirectoryEntry] = None
        if path is None:
            return
        error = self._open(as_path(path), skip_permission_denied)
        if error is not None:
            raise FilesystemError.from_error(
                f"directory_iterator -- {error.message}", error, path1=path
            )

    @classmethod
    def try_open(
        cls,
        path: PathSource,
        skip_permission_denied: bool = False
    ) -> Outcome['DirectoryIterator']:
        """Open without raising; the value is exhausted on failure."""
        iterator = cls()
        error = iterator._open(as_path(path), skip_permission_denied)
        return Outcome(iterator, error)

    def _open(self, base: Path, skip_permission_denied: bool) -> Optional[ErrorCode]:
        if base.empty():
            return None
        try:
            self._handle = os.scandir(base.native)
        except (OSError, ValueError) as exc:
            error = ErrorCode.from_exception(exc)
            if skip_permission_denied and error.kind is ErrorKind.ACCESS_DENIED:
                _logger.debug("Skipping unreadable directory", context={'path': base.native})
                return None
            return error
        self._base = base.copy()
        return self.increment()

    @property
    def current(self) -> Optional[DirectoryEntry]:
        """The current entry, or ``None`` once exhausted."""
        return self._entry

    @property
    def exhausted(self) -> bool:
        return self._entry is None

    def increment(self) -> Optional[ErrorCode]:
        """
        Move to the next entry.

        Returns:
            The platform error if enumeration failed, else ``None``.
            Either way the iterator is exhausted once nothing is left.
        """
        if self._handle is None:
            return None
        try:
            for dirent in self._handle:
                if dirent.name in ('.', '..'):
                    continue
                self._entry = DirectoryEntry(self._base / dirent.name)
                return None
        except OSError as exc:
            self._entry = None
            self.close()
            return ErrorCode.from_os_error(exc)
        self._entry = None
        self.close()
        return None

    def advance(self) -> 'DirectoryIterator':
        """Move to the next entry, raising on failure."""
        where = self._entry.path if self._entry is not None else self._base
        error = self.increment()
        if error is not None:
            raise FilesystemError.from_error(
                f"directory_iterator::increment -- {error.message}", error, path1=where
            )
        return self

    def close(self) -> None:
        """Release the platform directory handle."""
        handle, self._handle = self._handle, None
        if handle is not None:
            handle.close()

    def __enter__(self) -> 'DirectoryIterator':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __del__(self) -> None:
        if getattr(self, '_handle', None) is not None:
            self.close()

    def __iter__(self) -> 'DirectoryIterator':
        return self

    def __next__(self) -> DirectoryEntry:
        entry = self._entry
        if entry is None:
            raise StopIteration
        self.advance()
        return entry

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DirectoryIterator):
            return NotImplemented
        mine = self._entry.path if self._entry is not None else None
        theirs = other._entry.path if other._entry is not None else None
        return mine == theirs

    __hash__ = None

    def __repr__(self) -> str:
        if self._entry is None:
            return "DirectoryIterator(<end>)"
        return f"DirectoryIterator(at={self._entry.path.native!r})"
