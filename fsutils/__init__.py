"""Filesystem convenience helpers."""
from fsutils.core.exceptions import (
    CrossDeviceError,
    ErrorKind,
    FilesystemError,
    IsADirectoryPathError,
    NotADirectoryPathError,
    PathNotFoundError,
    PermissionDeniedError,
)
from fsutils.file_utils import (
    copy,
    copy_sync,
    delete_file,
    delete_file_quietly,
    delete_file_quietly_sync,
    delete_file_sync,
    list_files,
    list_files_sync,
    mkdirs,
    mkdirs_sync,
    move,
    move_sync,
)
from fsutils.infrastructure.filesystem import default_mode
from fsutils.infrastructure.logging import setup_logging

__version__ = "0.1.0"

__all__ = [
    'CrossDeviceError',
    'ErrorKind',
    'FilesystemError',
    'IsADirectoryPathError',
    'NotADirectoryPathError',
    'PathNotFoundError',
    'PermissionDeniedError',
    'copy',
    'copy_sync',
    'default_mode',
    'delete_file',
    'delete_file_quietly',
    'delete_file_quietly_sync',
    'delete_file_sync',
    'list_files',
    'list_files_sync',
    'mkdirs',
    'mkdirs_sync',
    'move',
    'move_sync',
    'setup_logging',
]
