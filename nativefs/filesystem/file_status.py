"""
File Status Module

Metadata types describing what a path refers to: the file type, the
POSIX permission bits, and the records returned by the status resolver
and the space query.

Version: 1.0.0
"""

from dataclasses import dataclass
from enum import Enum, IntFlag
from typing import Optional


class FileType(Enum):
    """
    Types of files.

    ``NONE`` means the status query itself failed; ``NOT_FOUND`` means
    the query succeeded and established that nothing is there.
    """
    NONE = 0
    NOT_FOUND = -1
    REGULAR = 1
    DIRECTORY = 2
    SYMLINK = 3
    BLOCK = 4
    CHARACTER = 5
    FIFO = 6
    SOCKET = 7
    UNKNOWN = 8


class Permission(IntFlag):
    """File permission bits."""
    NONE = 0

    # Owner permissions
    OWNER_READ = 0o400
    OWNER_WRITE = 0o200
    OWNER_EXEC = 0o100
    OWNER_ALL = 0o700

    # Group permissions
    GROUP_READ = 0o040
    GROUP_WRITE = 0o020
    GROUP_EXEC = 0o010
    GROUP_ALL = 0o070

    # Other permissions
    OTHERS_READ = 0o004
    OTHERS_WRITE = 0o002
    OTHERS_EXEC = 0o001
    OTHERS_ALL = 0o007

    ALL = 0o777
    SET_UID = 0o4000
    SET_GID = 0o2000
    STICKY_BIT = 0o1000
    MASK = 0o7777

    # Sentinel for "could not be determined"
    UNKNOWN = 0xFFFF


class PermOptions(IntFlag):
    """How ``permissions()`` combines the requested bits with the current ones."""
    REPLACE = 1
    ADD = 2
    REMOVE = 4
    NOFOLLOW = 8


@dataclass(frozen=True)
class FileStatus:
    """Type and permissions of a filesystem entry."""
    type: FileType = FileType.NONE
    permissions: Permission = Permission.UNKNOWN

    @property
    def known(self) -> bool:
        """Whether the query that produced this status succeeded."""
        return self.type is not FileType.NONE

    @property
    def exists(self) -> bool:
        return self.type not in (FileType.NONE, FileType.NOT_FOUND)

    @property
    def is_regular_file(self) -> bool:
        return self.type is FileType.REGULAR

    @property
    def is_directory(self) -> bool:
        return self.type is FileType.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        return self.type is FileType.SYMLINK

    @property
    def is_other(self) -> bool:
        """Exists, but is none of regular file, directory or symlink."""
        return self.exists and self.type not in (
            FileType.REGULAR, FileType.DIRECTORY, FileType.SYMLINK
        )


@dataclass(frozen=True)
class StatusRecord:
    """
    Everything one status query learns about a path.

    ``hard_link_count``, ``last_write_time`` (seconds since the epoch)
    and ``size`` are only set when the entry exists.
    """
    status: FileStatus
    hard_link_count: Optional[int] = None
    last_write_time: Optional[float] = None
    size: Optional[int] = None


@dataclass(frozen=True)
class SpaceInfo:
    """Capacity and free space, in bytes, of the volume holding a path."""
    capacity: int
    free: int
    available: int
