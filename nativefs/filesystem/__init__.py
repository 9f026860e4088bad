"""
nativefs Filesystem Module

Provides the portable path and metadata layer:
- Path values with decomposition and component iteration
- File status resolution (type, permissions, link count, times)
- Directory enumeration
- Filesystem operations in raising and non-raising forms
"""

from .errors import ErrorKind, ErrorCode, Outcome
from .flavour import PathFlavour, PosixFlavour, WindowsFlavour
from .path import Path, PosixPath, WindowsPath, PathIterator, native_path_type
from .file_status import (
    FileType, Permission, PermOptions, FileStatus, StatusRecord, SpaceInfo
)
from .resolver import resolve_status
from .backends import PlatformBackend, PosixBackend, WindowsBackend, native_backend
from .directory import DirectoryEntry, DirectoryIterator
from .operations import (
    REMOVE_ALL_FAILED,
    status, try_status,
    symlink_status, try_symlink_status,
    exists, try_exists,
    file_type, try_file_type,
    is_directory, is_file, is_symlink,
    file_size, try_file_size,
    get_size,
    last_write_time, try_last_write_time,
    hard_link_count, try_hard_link_count,
    permissions, try_permissions,
    read_symlink, try_read_symlink,
    resize_file, try_resize_file,
    to_absolute, try_to_absolute,
    current_path, try_current_path,
    temp_directory_path, try_temp_directory_path,
    mkdir, try_mkdir,
    mkdirs, try_mkdirs,
    move, try_move,
    remove, try_remove,
    remove_all, try_remove_all,
    create_symlink, try_create_symlink,
    create_hardlink, try_create_hardlink,
    equivalent, try_equivalent,
    space, try_space,
)

__all__ = [
    # Errors
    'ErrorKind',
    'ErrorCode',
    'Outcome',
    # Paths
    'PathFlavour',
    'PosixFlavour',
    'WindowsFlavour',
    'Path',
    'PosixPath',
    'WindowsPath',
    'PathIterator',
    'native_path_type',
    # Status
    'FileType',
    'Permission',
    'PermOptions',
    'FileStatus',
    'StatusRecord',
    'SpaceInfo',
    'resolve_status',
    # Backends
    'PlatformBackend',
    'PosixBackend',
    'WindowsBackend',
    'native_backend',
    # Directories
    'DirectoryEntry',
    'DirectoryIterator',
    # Operations
    'REMOVE_ALL_FAILED',
    'status', 'try_status',
    'symlink_status', 'try_symlink_status',
    'exists', 'try_exists',
    'file_type', 'try_file_type',
    'is_directory', 'is_file', 'is_symlink',
    'file_size', 'try_file_size',
    'get_size',
    'last_write_time', 'try_last_write_time',
    'hard_link_count', 'try_hard_link_count',
    'permissions', 'try_permissions',
    'read_symlink', 'try_read_symlink',
    'resize_file', 'try_resize_file',
    'to_absolute', 'try_to_absolute',
    'current_path', 'try_current_path',
    'temp_directory_path', 'try_temp_directory_path',
    'mkdir', 'try_mkdir',
    'mkdirs', 'try_mkdirs',
    'move', 'try_move',
    'remove', 'try_remove',
    'remove_all', 'try_remove_all',
    'create_symlink', 'try_create_symlink',
    'create_hardlink', 'try_create_hardlink',
    'equivalent', 'try_equivalent',
    'space', 'try_space',
]
