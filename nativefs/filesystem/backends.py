"""
Platform Backends

The system-call side of the two platform families.

Path grammar lives in ``flavour.py``; this module holds the I/O
behaviour that differs between POSIX and Windows: how a stat record
becomes a ``FileStatus``, how a relative path is made absolute, where
the temporary directory is, and how volume space is measured. Shared
code calls ``native_backend()`` and never tests the platform itself.

Version: 1.0.0
"""

import errno
import os
import shutil
import stat
import tempfile
from abc import ABC, abstractmethod

from .errors import ErrorCode, Outcome
from .path import Path
from .file_status import FileStatus, FileType, Permission, SpaceInfo
from nativefs.core.config_loader import get_config


class PlatformBackend(ABC):
    """System-call behaviour of one platform family."""

    name: str = ''

    @abstractmethod
    def status_from_stat(self, path: Path, st: os.stat_result) -> FileStatus:
        """Translate a non-following stat record."""

    @abstractmethod
    def to_absolute(self, path: Path) -> Outcome[Path]:
        """Resolve a relative path against the current directory."""

    @abstractmethod
    def temp_directory_path(self) -> Outcome[Path]:
        """Location for temporary files."""

    @abstractmethod
    def space(self, path: Path) -> Outcome[SpaceInfo]:
        """Capacity and free space of the volume holding ``path``."""

    def chmod_mode(self, perms: Permission) -> int:
        """Mode argument for ``os.chmod`` granting ``perms``."""
        return int(perms & Permission.MASK)


_SPACE_FAILED = SpaceInfo(capacity=-1, free=-1, available=-1)


class PosixBackend(PlatformBackend):
    """Backend for POSIX systems (stat/realpath/statvfs)."""

    name = 'posix'

    _type_map = {
        stat.S_IFREG: FileType.REGULAR,
        stat.S_IFDIR: FileType.DIRECTORY,
        stat.S_IFLNK: FileType.SYMLINK,
        stat.S_IFBLK: FileType.BLOCK,
        stat.S_IFCHR: FileType.CHARACTER,
        stat.S_IFIFO: FileType.FIFO,
        stat.S_IFSOCK: FileType.SOCKET,
    }

    def status_from_stat(self, path: Path, st: os.stat_result) -> FileStatus:
        file_type = self._type_map.get(stat.S_IFMT(st.st_mode), FileType.UNKNOWN)
        return FileStatus(file_type, Permission(st.st_mode & 0o7777))

    def to_absolute(self, path: Path) -> Outcome[Path]:
        # realpath(3) semantics: every component has to exist
        if path.empty():
            return Outcome.failure(ErrorCode.from_errno(errno.ENOENT), type(path)())
        try:
            resolved = os.path.realpath(path.native, strict=True)
        except (OSError, ValueError) as exc:
            return Outcome.failure(ErrorCode.from_exception(exc), type(path)())
        return Outcome.success(type(path)(resolved))

    def temp_directory_path(self) -> Outcome[Path]:
        settings = get_config().temp
        for name in settings.env_vars:
            value = os.environ.get(name)
            if value:
                return Outcome.success(Path(value))
        return Outcome.success(Path(settings.posix_default))

    def space(self, path: Path) -> Outcome[SpaceInfo]:
        try:
            sfs = os.statvfs(path.native)
        except (OSError, ValueError) as exc:
            return Outcome.failure(ErrorCode.from_exception(exc), _SPACE_FAILED)
        return Outcome.success(SpaceInfo(
            capacity=sfs.f_blocks * sfs.f_frsize,
            free=sfs.f_bfree * sfs.f_frsize,
            available=sfs.f_bavail * sfs.f_frsize,
        ))


class WindowsBackend(PlatformBackend):
    """Backend for Windows (file attributes, full path names, disk usage)."""

    name = 'windows'

    EXECUTABLE_EXTENSIONS = ('.exe', '.cmd', '.bat', '.com')

    def status_from_stat(self, path: Path, st: os.stat_result) -> FileStatus:
        attributes = getattr(st, 'st_file_attributes', 0)
        if attributes & stat.FILE_ATTRIBUTE_REPARSE_POINT or stat.S_ISLNK(st.st_mode):
            file_type = FileType.SYMLINK
        elif attributes & stat.FILE_ATTRIBUTE_DIRECTORY or stat.S_ISDIR(st.st_mode):
            file_type = FileType.DIRECTORY
        else:
            file_type = FileType.REGULAR

        perms = Permission.OWNER_READ | Permission.GROUP_READ | Permission.OTHERS_READ
        if not attributes & stat.FILE_ATTRIBUTE_READONLY:
            perms |= Permission.OWNER_WRITE | Permission.GROUP_WRITE | Permission.OTHERS_WRITE
        extension = path.extension().native.casefold()
        if extension in self.EXECUTABLE_EXTENSIONS:
            perms |= Permission.OWNER_EXEC | Permission.GROUP_EXEC | Permission.OTHERS_EXEC
        return FileStatus(file_type, perms)

    def to_absolute(self, path: Path) -> Outcome[Path]:
        target = path
        if path.empty():
            try:
                target = Path(os.getcwd()) / ''
            except OSError as exc:
                return Outcome.failure(ErrorCode.from_os_error(exc), type(path)())
        try:
            resolved = os.path.abspath(target.native)
        except (OSError, ValueError) as exc:
            return Outcome.failure(ErrorCode.from_exception(exc), type(path)())
        return Outcome.success(type(path)(resolved))

    def temp_directory_path(self) -> Outcome[Path]:
        try:
            return Outcome.success(Path(tempfile.gettempdir()))
        except OSError as exc:
            return Outcome.failure(ErrorCode.from_os_error(exc), Path())

    def space(self, path: Path) -> Outcome[SpaceInfo]:
        """
        Volume figures from ``shutil.disk_usage``.

        ``free`` and ``available`` are both the bytes available to the
        caller; the volume-wide free count is not exposed on this platform.
        """
        try:
            usage = shutil.disk_usage(path.native)
        except (OSError, ValueError) as exc:
            return Outcome.failure(ErrorCode.from_exception(exc), _SPACE_FAILED)
        return Outcome.success(SpaceInfo(
            capacity=usage.total,
            free=usage.free,
            available=usage.free,
        ))

    def chmod_mode(self, perms: Permission) -> int:
        # Only the owner read/write bits map onto the read-only attribute
        mode = 0
        if perms & Permission.OWNER_READ:
            mode |= stat.S_IREAD
        if perms & Permission.OWNER_WRITE:
            mode |= stat.S_IWRITE
        return mode


posix_backend = PosixBackend()
windows_backend = WindowsBackend()


def native_backend() -> PlatformBackend:
    """Backend for the platform this interpreter runs on."""
    return windows_backend if os.name == 'nt' else posix_backend
