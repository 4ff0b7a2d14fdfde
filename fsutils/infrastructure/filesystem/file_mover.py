"""File move module with cross-device fallback."""
import errno
import os
from typing import Optional

import aiofiles.os

from fsutils.core.exceptions import from_os_error
from fsutils.infrastructure.logging import get_logger

from .directory_creator import DirectoryCreator
from .file_copier import FileCopier
from .file_remover import FileRemover
from .paths import PathLike, resolve_path

logger = get_logger(__name__)

# Rename errnos caused by what already sits at the destination
_DESTINATION_ERRNOS = {errno.EEXIST, errno.ENOTEMPTY, errno.EISDIR, errno.ENOTDIR}


def rename_failure_path(error: OSError, source: str, destination: str) -> str:
    """Pick the path a failed rename is reported against."""
    if not os.path.lexists(source):
        return source
    if error.errno in _DESTINATION_ERRNOS:
        return destination
    if error.errno in (errno.EACCES, errno.EPERM) and not os.access(
        os.path.dirname(destination), os.W_OK
    ):
        return destination
    return source


class FileMover:
    """Moves files, copying and deleting when a rename crosses devices."""

    def __init__(
        self,
        directory_creator: Optional[DirectoryCreator] = None,
        copier: Optional[FileCopier] = None,
        remover: Optional[FileRemover] = None,
    ):
        self.directory_creator = directory_creator or DirectoryCreator()
        self.copier = copier or FileCopier(self.directory_creator)
        self.remover = remover or FileRemover()

    async def move(self, source: PathLike, destination: PathLike) -> None:
        """
        Move source to destination.

        Tries an atomic rename first. When source and destination live on
        different devices the content is copied and the source removed
        afterwards; if the copy fails the source is left untouched.

        Raises:
            PathNotFoundError: source does not exist
            PermissionDeniedError: rename, copy or removal not permitted
            FilesystemError: any other I/O failure
        """
        source_path = resolve_path(source)
        dest_path = resolve_path(destination)

        await self.directory_creator.mkdirs(os.path.dirname(dest_path))

        try:
            await self._rename(source_path, dest_path)
            logger.debug("file_moved", source=source_path, destination=dest_path)
            return
        except OSError as e:
            if e.errno != errno.EXDEV:
                raise from_os_error(
                    e, rename_failure_path(e, source_path, dest_path)
                ) from e

        logger.info(
            "cross_device_move_fallback",
            source=source_path,
            destination=dest_path,
        )
        await self.copier.copy(source_path, dest_path)
        if await aiofiles.os.path.isdir(source_path):
            await self.remover.delete_tree(source_path)
        else:
            await self.remover.delete_file(source_path)

        logger.debug("file_moved", source=source_path, destination=dest_path)

    def move_sync(self, source: PathLike, destination: PathLike) -> None:
        """Blocking version of move."""
        source_path = resolve_path(source)
        dest_path = resolve_path(destination)

        self.directory_creator.mkdirs_sync(os.path.dirname(dest_path))

        try:
            self._rename_sync(source_path, dest_path)
            logger.debug("file_moved", source=source_path, destination=dest_path)
            return
        except OSError as e:
            if e.errno != errno.EXDEV:
                raise from_os_error(
                    e, rename_failure_path(e, source_path, dest_path)
                ) from e

        logger.info(
            "cross_device_move_fallback",
            source=source_path,
            destination=dest_path,
        )
        self.copier.copy_sync(source_path, dest_path)
        if os.path.isdir(source_path):
            self.remover.delete_tree_sync(source_path)
        else:
            self.remover.delete_file_sync(source_path)

        logger.debug("file_moved", source=source_path, destination=dest_path)

    async def _rename(self, source: str, destination: str) -> None:
        await aiofiles.os.replace(source, destination)

    def _rename_sync(self, source: str, destination: str) -> None:
        os.replace(source, destination)
