"""Pytest configuration and fixtures"""

import errno
import os
from pathlib import Path
from unittest.mock import AsyncMock, patch

import pytest
from aiofiles.threadpool.binary import AsyncBufferedIOBase

from fsutils.infrastructure.filesystem import (
    DirectoryCreator,
    FileCopier,
    FileLister,
    FileMover,
    FileRemover,
)


def cross_device_error() -> OSError:
    return OSError(errno.EXDEV, os.strerror(errno.EXDEV))


@pytest.fixture
def directory_creator() -> DirectoryCreator:
    return DirectoryCreator()


@pytest.fixture
def remover() -> FileRemover:
    return FileRemover()


@pytest.fixture
def copier(directory_creator: DirectoryCreator) -> FileCopier:
    """Copier with a tiny chunk size so async copies loop several times"""
    return FileCopier(directory_creator, chunk_size=4)


@pytest.fixture
def mover(
    directory_creator: DirectoryCreator, copier: FileCopier, remover: FileRemover
) -> FileMover:
    return FileMover(directory_creator, copier, remover)


@pytest.fixture
def lister() -> FileLister:
    return FileLister()


@pytest.fixture
def cross_device_rename():
    """Make every rename performed by FileMover fail with EXDEV"""
    with patch.object(
        FileMover, "_rename", AsyncMock(side_effect=cross_device_error())
    ), patch.object(FileMover, "_rename_sync", side_effect=cross_device_error()):
        yield


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Directory layout used by listing and copy tests:

        root/a.txt
        root/b.log
        root/sub/c.txt
        root/sub/deeper/d.txt
        root/skip/e.txt
    """
    root = tmp_path / "root"
    (root / "sub" / "deeper").mkdir(parents=True)
    (root / "skip").mkdir()
    (root / "a.txt").write_text("alpha")
    (root / "b.log").write_text("log line")
    (root / "sub" / "c.txt").write_text("charlie")
    (root / "sub" / "deeper" / "d.txt").write_text("delta")
    (root / "skip" / "e.txt").write_text("echo")
    return root


@pytest.fixture
def failing_async_write():
    """Make every aiofiles binary write fail with ENOSPC"""
    no_space = OSError(errno.ENOSPC, os.strerror(errno.ENOSPC))
    with patch.object(
        AsyncBufferedIOBase, "write", AsyncMock(side_effect=no_space)
    ):
        yield
