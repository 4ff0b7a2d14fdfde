"""File removal module."""
import os
import shutil

import aiofiles.os
from aiofiles.ospath import wrap

from fsutils.core.exceptions import FilesystemError, from_os_error
from fsutils.infrastructure.logging import get_logger

from .paths import PathLike, resolve_path

logger = get_logger(__name__)

_rmtree = wrap(shutil.rmtree)


class FileRemover:
    """Handles file removal only."""

    async def delete_file(self, path: PathLike) -> None:
        """
        Remove a file.

        Raises:
            PathNotFoundError: file does not exist
            PermissionDeniedError: removal not permitted
            IsADirectoryPathError: path is a directory
            FilesystemError: any other I/O failure
        """
        full_path = resolve_path(path)
        try:
            await aiofiles.os.remove(full_path)
        except OSError as e:
            raise from_os_error(e, full_path) from e

        logger.debug("file_deleted", path=full_path)

    def delete_file_sync(self, path: PathLike) -> None:
        """Blocking version of delete_file."""
        full_path = resolve_path(path)
        try:
            os.remove(full_path)
        except OSError as e:
            raise from_os_error(e, full_path) from e

        logger.debug("file_deleted", path=full_path)

    async def delete_file_quietly(self, path: PathLike) -> None:
        """Remove a file, discarding any failure."""
        try:
            await self.delete_file(path)
        except FilesystemError as e:
            self._log_suppressed(e)

    def delete_file_quietly_sync(self, path: PathLike) -> None:
        """Blocking version of delete_file_quietly."""
        try:
            self.delete_file_sync(path)
        except FilesystemError as e:
            self._log_suppressed(e)

    async def delete_tree(self, path: PathLike) -> None:
        """Remove a directory and everything below it."""
        full_path = resolve_path(path)
        try:
            await _rmtree(full_path)
        except OSError as e:
            raise from_os_error(e, e.filename or full_path) from e

        logger.debug("tree_deleted", path=full_path)

    def delete_tree_sync(self, path: PathLike) -> None:
        """Blocking version of delete_tree."""
        full_path = resolve_path(path)
        try:
            shutil.rmtree(full_path)
        except OSError as e:
            raise from_os_error(e, e.filename or full_path) from e

        logger.debug("tree_deleted", path=full_path)

    def _log_suppressed(self, error: FilesystemError) -> None:
        logger.debug(
            "file_delete_suppressed",
            path=error.path,
            kind=error.kind.value,
            error=error.message,
        )
