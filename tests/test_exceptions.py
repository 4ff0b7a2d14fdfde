"""Tests for OSError translation"""

import errno
import os

import pytest

from fsutils.core.exceptions import (
    CrossDeviceError,
    ErrorKind,
    FilesystemError,
    IsADirectoryPathError,
    NotADirectoryPathError,
    PathNotFoundError,
    PermissionDeniedError,
    from_os_error,
)


@pytest.mark.parametrize(
    "code, expected_class, expected_kind",
    [
        (errno.EEXIST, NotADirectoryPathError, ErrorKind.NOT_A_DIRECTORY),
        (errno.ENOTDIR, NotADirectoryPathError, ErrorKind.NOT_A_DIRECTORY),
        (errno.EISDIR, IsADirectoryPathError, ErrorKind.IS_A_DIRECTORY),
        (errno.ENOENT, PathNotFoundError, ErrorKind.NOT_FOUND),
        (errno.EACCES, PermissionDeniedError, ErrorKind.PERMISSION_DENIED),
        (errno.EPERM, PermissionDeniedError, ErrorKind.PERMISSION_DENIED),
        (errno.EXDEV, CrossDeviceError, ErrorKind.CROSS_DEVICE),
        (errno.EIO, FilesystemError, ErrorKind.IO_ERROR),
    ],
)
def test_from_os_error_maps_errno(code, expected_class, expected_kind):
    error = from_os_error(OSError(code, os.strerror(code)), "/some/path")

    assert type(error) is expected_class
    assert error.kind == expected_kind
    assert error.errno == code
    assert error.path == "/some/path"
    assert "/some/path" in str(error)


def test_from_os_error_defaults_to_error_filename():
    error = from_os_error(OSError(errno.ENOENT, "No such file", "/from/error"))

    assert error.path == "/from/error"


def test_to_dict():
    error = PathNotFoundError("/missing", "gone", errno=errno.ENOENT)

    assert error.to_dict() == {
        "kind": "not_found",
        "path": "/missing",
        "message": "gone",
        "errno": errno.ENOENT,
    }


def test_default_message_names_path():
    error = FilesystemError("/broken")

    assert error.message == "Filesystem operation failed: /broken"
    assert error.kind == ErrorKind.IO_ERROR
