"""
Status Resolver

Maps a path to its ``FileStatus`` (plus link count, modification time
and size) through the platform's non-following stat call.

Resolution rules:
- The non-following query always runs first.
- When it reports a symlink and the caller asked to follow links, the
  link target is read (relative targets are taken from the link's own
  directory) and resolved in turn, up to ``symlink.max_depth`` hops.
- A missing path, or one continuing below a non-directory, is reported
  as ``FileType.NOT_FOUND`` with no error.
- Any other failure is reported as ``FileType.NONE`` with the platform
  error attached.

Version: 1.0.0
"""

import errno
import os

from .backends import native_backend
from .errors import ErrorCode, Outcome
from .path import PathSource, as_path
from .file_status import FileStatus, FileType, Permission, StatusRecord
from nativefs.core.config_loader import get_config
from nativefs.logger import get_logger


_logger = get_logger('status')

NOT_FOUND_RECORD = StatusRecord(FileStatus(FileType.NOT_FOUND, Permission.UNKNOWN))
FAILED_RECORD = StatusRecord(FileStatus(FileType.NONE, Permission.UNKNOWN))


def resolve_status(source: PathSource, follow_symlinks: bool = True) -> Outcome[StatusRecord]:
    """
    Query the status of a path.

    Args:
        source: Path to query
        follow_symlinks: Resolve through symlinks (``status``) or describe
            the link itself (``symlink_status``)

    Returns:
        Outcome holding the status record; ``error`` is only set for
        failures other than absence
    """
    path = as_path(source)
    max_depth = get_config().symlink.max_depth

    for _ in range(max_depth + 1):
        try:
            st = os.lstat(path.native)
        except (OSError, ValueError) as exc:
            error = ErrorCode.from_exception(exc)
            if error.is_not_found or error.value == errno.ENOTDIR:
                return Outcome.success(NOT_FOUND_RECORD)
            _logger.debug(
                "Status query failed",
                context={'path': path.native, 'error': error.message}
            )
            return Outcome.failure(error, FAILED_RECORD)

        status = native_backend().status_from_stat(path, st)
        if not (follow_symlinks and status.type is FileType.SYMLINK):
            return Outcome.success(StatusRecord(
                status=status,
                hard_link_count=st.st_nlink,
                last_write_time=st.st_mtime,
                size=st.st_size,
            ))

        try:
            target = os.readlink(path.native)
        except (OSError, ValueError) as exc:
            return Outcome.failure(ErrorCode.from_exception(exc), FAILED_RECORD)
        path = path.parent_path() / target

    _logger.debug(
        "Symlink chain too long",
        context={'path': as_path(source).native, 'max_depth': max_depth}
    )
    return Outcome.failure(ErrorCode.from_errno(errno.ELOOP), FAILED_RECORD)


def status(source: PathSource) -> Outcome[FileStatus]:
    """Status of the entry a path resolves to, following symlinks."""
    result = resolve_status(source, follow_symlinks=True)
    return Outcome(result.value.status, result.error)


def symlink_status(source: PathSource) -> Outcome[FileStatus]:
    """Status of the entry itself, without following a final symlink."""
    result = resolve_status(source, follow_symlinks=False)
    return Outcome(result.value.status, result.error)
