"""Filesystem operation errors."""
import errno
import os
from enum import Enum
from typing import Optional, Union


class ErrorKind(str, Enum):
    NOT_A_DIRECTORY = "not_a_directory"
    IS_A_DIRECTORY = "is_a_directory"
    NOT_FOUND = "not_found"
    PERMISSION_DENIED = "permission_denied"
    CROSS_DEVICE = "cross_device"
    IO_ERROR = "io_error"


class FilesystemError(Exception):
    """Base class for filesystem operation errors"""

    kind = ErrorKind.IO_ERROR

    def __init__(
        self,
        path: Union[str, os.PathLike],
        message: Optional[str] = None,
        errno: Optional[int] = None,
    ):
        self.path = os.fspath(path)
        self.message = message or f"Filesystem operation failed: {self.path}"
        self.errno = errno
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "path": self.path,
            "message": self.message,
            "errno": self.errno,
        }


class NotADirectoryPathError(FilesystemError):
    """Path (or one of its ancestors) exists but is not a directory"""

    kind = ErrorKind.NOT_A_DIRECTORY


class IsADirectoryPathError(FilesystemError):
    """Path is a directory where a file was expected"""

    kind = ErrorKind.IS_A_DIRECTORY


class PathNotFoundError(FilesystemError):
    """Path does not exist"""

    kind = ErrorKind.NOT_FOUND


class PermissionDeniedError(FilesystemError):
    """Operation not permitted on path"""

    kind = ErrorKind.PERMISSION_DENIED


class CrossDeviceError(FilesystemError):
    """Rename crosses storage devices"""

    kind = ErrorKind.CROSS_DEVICE


_ERRNO_MAP = {
    errno.EEXIST: NotADirectoryPathError,
    errno.ENOTDIR: NotADirectoryPathError,
    errno.EISDIR: IsADirectoryPathError,
    errno.ENOENT: PathNotFoundError,
    errno.EACCES: PermissionDeniedError,
    errno.EPERM: PermissionDeniedError,
    errno.EXDEV: CrossDeviceError,
}


def from_os_error(
    exc: OSError, path: Optional[Union[str, os.PathLike]] = None
) -> FilesystemError:
    """
    Translate an OSError into the matching FilesystemError

    Args:
        exc: Error raised by the operating system
        path: Offending path; defaults to the path recorded on the error

    Returns:
        FilesystemError subclass chosen by errno; the caller raises it
        with ``from exc``
    """
    if path is None:
        path = exc.filename if exc.filename is not None else ""
    error_class = _ERRNO_MAP.get(exc.errno, FilesystemError)
    reason = exc.strerror or str(exc)
    return error_class(path, f"{reason}: {os.fspath(path)}", errno=exc.errno)
