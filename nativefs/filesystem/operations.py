"""
Filesystem Operations

Free functions acting on the filesystem through paths.

Every fallible operation comes in two forms:
- ``try_<name>(...)`` returns an ``Outcome`` and never raises for a
  filesystem failure;
- ``<name>(...)`` returns the plain value and raises ``FilesystemError``
  (carrying the platform message and the path(s)) when the ``try_``
  form reported an error.

Absence of the target is a normal result, not an error, for
``exists``, ``status``, ``remove`` and ``mkdir``.

Version: 1.0.0
"""

import errno
import os
from datetime import datetime
from typing import Optional

from .backends import native_backend
from .directory import DirectoryIterator
from .errors import ErrorCode, Outcome
from .path import Path, PathSource, as_path
from .resolver import resolve_status, status as _status, symlink_status as _symlink_status
from .file_status import FileStatus, FileType, Permission, PermOptions, SpaceInfo
from nativefs.logger import get_logger


_logger = get_logger('ops')

#: Returned by ``remove_all`` when it refuses to run or a step fails
REMOVE_ALL_FAILED = -1


def _system_failure(exc: Exception, value=None) -> Outcome:
    return Outcome.failure(ErrorCode.from_exception(exc), value)


# Status queries

def try_status(path: PathSource) -> Outcome[FileStatus]:
    return _status(path)


def status(path: PathSource) -> FileStatus:
    """Status of ``path``, following symlinks. Missing paths are NOT_FOUND."""
    return _status(path).unwrap('status', path)


def try_symlink_status(path: PathSource) -> Outcome[FileStatus]:
    return _symlink_status(path)


def symlink_status(path: PathSource) -> FileStatus:
    """Status of ``path`` itself, without following a final symlink."""
    return _symlink_status(path).unwrap('symlink_status', path)


def try_exists(path: PathSource) -> Outcome[bool]:
    result = _status(path)
    return Outcome(result.value.exists, result.error)


def exists(path: PathSource) -> bool:
    return try_exists(path).unwrap('exists', path)


def try_file_type(path: PathSource) -> Outcome[FileType]:
    result = _status(path)
    return Outcome(result.value.type, result.error)


def file_type(path: PathSource) -> FileType:
    return try_file_type(path).unwrap('file_type', path)


def is_directory(path: PathSource) -> bool:
    return status(path).is_directory


def is_file(path: PathSource) -> bool:
    return status(path).is_regular_file


def is_symlink(path: PathSource) -> bool:
    return symlink_status(path).is_symlink


def _existing_record(path: PathSource, follow_symlinks: bool = True):
    """Status record of an entry that has to exist; absence is an error here."""
    result = resolve_status(path, follow_symlinks)
    if result.ok and result.value.status.type is FileType.NOT_FOUND:
        return Outcome.failure(ErrorCode.from_errno(errno.ENOENT), result.value)
    return result


def try_file_size(path: PathSource) -> Outcome[int]:
    result = _existing_record(path)
    if not result.ok:
        return Outcome.failure(result.error, -1)
    return Outcome.success(result.value.size)


def file_size(path: PathSource) -> int:
    return try_file_size(path).unwrap('file_size', path)


def get_size(path: PathSource) -> int:
    """Size in bytes, or 0 when the path does not exist."""
    result = resolve_status(path)
    if result.ok and result.value.status.type is FileType.NOT_FOUND:
        return 0
    return result.unwrap('get_size', path).size


def try_last_write_time(path: PathSource) -> Outcome[Optional[datetime]]:
    result = _existing_record(path)
    if not result.ok:
        return Outcome.failure(result.error, None)
    return Outcome.success(datetime.fromtimestamp(result.value.last_write_time))


def last_write_time(path: PathSource) -> datetime:
    return try_last_write_time(path).unwrap('last_write_time', path)


def try_hard_link_count(path: PathSource) -> Outcome[int]:
    result = _existing_record(path)
    if not result.ok:
        return Outcome.failure(result.error, -1)
    return Outcome.success(result.value.hard_link_count)


def hard_link_count(path: PathSource) -> int:
    return try_hard_link_count(path).unwrap('hard_link_count', path)


# Attributes

def try_permissions(
    path: PathSource,
    perms: Permission,
    options: PermOptions = PermOptions.REPLACE
) -> Outcome[None]:
    """
    Change the permission bits of ``path``.

    Exactly how the bits are combined is chosen by ``options``: one of
    REPLACE, ADD or REMOVE (INVALID_ARGUMENT if none is given), plus
    NOFOLLOW to act on a symlink rather than its target.
    """
    if not options & (PermOptions.REPLACE | PermOptions.ADD | PermOptions.REMOVE):
        return Outcome.failure(ErrorCode.from_errno(errno.EINVAL))

    p = as_path(path)
    follow = not options & PermOptions.NOFOLLOW
    if not options & PermOptions.REPLACE:
        current = _existing_record(p, follow_symlinks=follow)
        if not current.ok:
            return Outcome.failure(current.error)
        current_perms = current.value.status.permissions & Permission.MASK
        if options & PermOptions.ADD:
            perms = current_perms | perms
        else:
            perms = current_perms & ~perms

    try:
        os.chmod(p.native, native_backend().chmod_mode(perms), follow_symlinks=follow)
    except NotImplementedError:
        return Outcome.failure(ErrorCode.from_errno(errno.EOPNOTSUPP))
    except (OSError, ValueError) as exc:
        return _system_failure(exc)
    return Outcome.success(None)


def permissions(
    path: PathSource,
    perms: Permission,
    options: PermOptions = PermOptions.REPLACE
) -> None:
    try_permissions(path, perms, options).unwrap('permissions', path)


def try_read_symlink(path: PathSource) -> Outcome[Path]:
    """Target of a symlink; INVALID_ARGUMENT if ``path`` is not one."""
    p = as_path(path)
    result = _symlink_status(p)
    if not result.ok:
        return Outcome.failure(result.error, type(p)())
    if result.value.type is not FileType.SYMLINK:
        return Outcome.failure(ErrorCode.from_errno(errno.EINVAL), type(p)())
    try:
        return Outcome.success(type(p)(os.readlink(p.native)))
    except (OSError, ValueError) as exc:
        return _system_failure(exc, type(p)())


def read_symlink(path: PathSource) -> Path:
    return try_read_symlink(path).unwrap('read_symlink', path)


def try_resize_file(path: PathSource, size: int) -> Outcome[None]:
    try:
        os.truncate(as_path(path).native, size)
    except (OSError, ValueError) as exc:
        return _system_failure(exc)
    return Outcome.success(None)


def resize_file(path: PathSource, size: int) -> None:
    try_resize_file(path, size).unwrap('resize_file', path)


# Path resolution

def try_to_absolute(path: PathSource) -> Outcome[Path]:
    """
    Absolute form of ``path``.

    Absolute paths are returned unchanged. Others go through the
    platform's canonicalization; on POSIX every component must exist.
    """
    p = as_path(path)
    if p.is_absolute():
        return Outcome.success(p.copy())
    return native_backend().to_absolute(p)


def to_absolute(path: PathSource) -> Path:
    return try_to_absolute(path).unwrap('to_absolute', path)


def try_current_path() -> Outcome[Path]:
    try:
        return Outcome.success(Path(os.getcwd()))
    except OSError as exc:
        return _system_failure(exc, Path())


def current_path() -> Path:
    return try_current_path().unwrap('current_path')


def try_temp_directory_path() -> Outcome[Path]:
    """
    Directory for temporary files.

    On POSIX the first non-empty of TMPDIR, TMP, TEMP and TEMPDIR wins,
    falling back to ``/tmp``; Windows asks the platform.
    """
    return native_backend().temp_directory_path()


def temp_directory_path() -> Path:
    return try_temp_directory_path().unwrap('temp_directory_path')


# Directory creation

def try_mkdir(path: PathSource, perms: Optional[Permission] = None) -> Outcome[bool]:
    """
    Create one directory level.

    Returns ``False`` without an error when something already exists at
    ``path``. When ``perms`` is given the bits are applied after
    creation; otherwise the platform default (honouring the umask) is
    kept.
    """
    p = as_path(path)
    existing = _status(p)
    if existing.ok and existing.value.exists:
        return Outcome.success(False)

    try:
        os.mkdir(p.native, 0o777)
    except (OSError, ValueError) as exc:
        return _system_failure(exc, False)

    if perms is not None:
        applied = try_permissions(p, perms, PermOptions.REPLACE)
        if not applied.ok:
            return Outcome.failure(applied.error, False)

    _logger.debug("Created directory", context={'path': p.native})
    return Outcome.success(True)


def mkdir(path: PathSource, perms: Optional[Permission] = None) -> bool:
    return try_mkdir(path, perms).unwrap('mkdir', path)


def try_mkdirs(path: PathSource) -> Outcome[bool]:
    """
    Create ``path`` and every missing parent.

    Walks the components of ``path`` building a running prefix; each
    prefix that is not the root name or root path is created if absent.
    A prefix occupied by something other than a directory stops the walk
    with ENOTDIR. Existing trees are left untouched.
    """
    p = as_path(path)
    root_name = p.root_name()
    root_path = p.root_path()
    current = type(p)()

    for part in p:
        if part.empty():
            continue
        if p.has_root_name() and part == root_name and current.empty():
            current.assign(part)
            continue
        current /= part
        if current == root_name or current == root_path:
            continue

        existing = _status(current)
        if not existing.ok:
            return Outcome.failure(existing.error, False)
        if not existing.value.exists:
            created = try_mkdir(current)
            if not created.ok:
                return created
        elif not existing.value.is_directory:
            return Outcome.failure(ErrorCode.from_errno(errno.ENOTDIR), False)

    return Outcome.success(True)


def mkdirs(path: PathSource) -> bool:
    return try_mkdirs(path).unwrap('mkdirs', path)


# Moving and removal

def try_move(source: PathSource, destination: PathSource) -> Outcome[None]:
    """
    Rename ``source`` to ``destination``.

    Nothing happens when the two are the same string. The rename is
    atomic and is not retried across devices.
    """
    src = as_path(source)
    dst = as_path(destination)
    if src == dst:
        return Outcome.success(None)
    try:
        os.rename(src.native, dst.native)
    except (OSError, ValueError) as exc:
        return _system_failure(exc)
    _logger.debug("Moved", context={'from': src.native, 'to': dst.native})
    return Outcome.success(None)


def move(source: PathSource, destination: PathSource) -> None:
    try_move(source, destination).unwrap('move', source, destination)


def try_remove(path: PathSource) -> Outcome[bool]:
    """
    Remove one file, symlink or empty directory.

    Returns ``False`` without an error when ``path`` does not exist.
    """
    p = as_path(path)
    existing = _symlink_status(p)
    if not existing.ok:
        return Outcome.failure(existing.error, False)
    if existing.value.type is FileType.NOT_FOUND:
        return Outcome.success(False)

    try:
        if existing.value.is_directory:
            os.rmdir(p.native)
        else:
            os.unlink(p.native)
    except (OSError, ValueError) as exc:
        error = ErrorCode.from_exception(exc)
        if error.is_not_found:
            return Outcome.success(False)
        return Outcome.failure(error, False)

    _logger.debug("Removed", context={'path': p.native})
    return Outcome.success(True)


def remove(path: PathSource) -> bool:
    return try_remove(path).unwrap('remove', path)


def try_remove_all(path: PathSource) -> Outcome[int]:
    """
    Remove ``path`` and, for a directory, everything below it.

    Symlinks are removed, never followed. Returns the number of entries
    removed, the path itself included. ``REMOVE_ALL_FAILED`` is returned
    when a step fails (with the error) and, without an error, when asked
    to remove the literal root ``/``.
    """
    p = as_path(path)
    if p == '/':
        _logger.warning("Refusing to remove the root directory", context={'path': p.native})
        return Outcome.success(REMOVE_ALL_FAILED)

    existing = _symlink_status(p)
    if not existing.ok:
        return Outcome.failure(existing.error, REMOVE_ALL_FAILED)

    count = 0
    if existing.value.is_directory:
        opened = DirectoryIterator.try_open(p)
        if not opened.ok:
            return Outcome.failure(opened.error, REMOVE_ALL_FAILED)
        with opened.value as entries:
            while not entries.exhausted:
                entry = entries.current
                entry_status = entry.try_symlink_status()
                if not entry_status.ok:
                    return Outcome.failure(entry_status.error, REMOVE_ALL_FAILED)

                if entry_status.value.is_directory:
                    removed = try_remove_all(entry.path)
                    if not removed.ok:
                        return removed
                    count += removed.value
                else:
                    removed = try_remove(entry.path)
                    if not removed.ok:
                        return Outcome.failure(removed.error, REMOVE_ALL_FAILED)
                    if removed.value:
                        count += 1

                error = entries.increment()
                if error is not None:
                    return Outcome.failure(error, REMOVE_ALL_FAILED)

    removed = try_remove(p)
    if not removed.ok:
        return Outcome.failure(removed.error, REMOVE_ALL_FAILED)
    if removed.value:
        count += 1
    return Outcome.success(count)


def remove_all(path: PathSource) -> int:
    return try_remove_all(path).unwrap('remove_all', path)


# Links

def try_create_symlink(target: PathSource, link: PathSource) -> Outcome[None]:
    """
    Create ``link`` pointing at ``target``.

    Whether the target is a directory is passed along for platforms that
    need the hint.
    """
    target_path = as_path(target)
    link_path = as_path(link)
    if not hasattr(os, 'symlink'):
        return Outcome.failure(ErrorCode.from_errno(errno.EOPNOTSUPP))

    to_directory = _status(target_path).value.is_directory
    try:
        os.symlink(target_path.native, link_path.native, target_is_directory=to_directory)
    except NotImplementedError:
        return Outcome.failure(ErrorCode.from_errno(errno.EOPNOTSUPP))
    except (OSError, ValueError) as exc:
        return _system_failure(exc)
    _logger.debug(
        "Created symlink",
        context={'target': target_path.native, 'link': link_path.native}
    )
    return Outcome.success(None)


def create_symlink(target: PathSource, link: PathSource) -> None:
    try_create_symlink(target, link).unwrap('create_symlink', target, link)


def try_create_hardlink(target: PathSource, link: PathSource) -> Outcome[None]:
    target_path = as_path(target)
    link_path = as_path(link)
    if not hasattr(os, 'link'):
        return Outcome.failure(ErrorCode.from_errno(errno.EOPNOTSUPP))
    try:
        os.link(target_path.native, link_path.native)
    except NotImplementedError:
        return Outcome.failure(ErrorCode.from_errno(errno.EOPNOTSUPP))
    except (OSError, ValueError) as exc:
        return _system_failure(exc)
    _logger.debug(
        "Created hard link",
        context={'target': target_path.native, 'link': link_path.native}
    )
    return Outcome.success(None)


def create_hardlink(target: PathSource, link: PathSource) -> None:
    try_create_hardlink(target, link).unwrap('create_hardlink', target, link)


# Identity and space

def try_equivalent(path1: PathSource, path2: PathSource) -> Outcome[bool]:
    """
    Whether both paths resolve to the same file.

    Compares device and file index, cross-checked with size and
    modification time. Fails only when neither path can be resolved; if
    just one of them fails the answer is ``False``.
    """
    errors = []
    records = []
    for path in (path1, path2):
        try:
            records.append(os.stat(as_path(path).native))
        except (OSError, ValueError) as exc:
            errors.append(ErrorCode.from_exception(exc))

    if len(errors) == 2:
        return Outcome.failure(errors[0], False)
    if errors:
        return Outcome.success(False)

    st1, st2 = records
    return Outcome.success(
        st1.st_dev == st2.st_dev
        and st1.st_ino == st2.st_ino
        and st1.st_size == st2.st_size
        and st1.st_mtime_ns == st2.st_mtime_ns
    )


def equivalent(path1: PathSource, path2: PathSource) -> bool:
    return try_equivalent(path1, path2).unwrap('equivalent', path1, path2)


def try_space(path: PathSource) -> Outcome[SpaceInfo]:
    """Capacity, free and available bytes; every field is -1 on failure."""
    return native_backend().space(as_path(path))


def space(path: PathSource) -> SpaceInfo:
    return try_space(path).unwrap('space', path)
