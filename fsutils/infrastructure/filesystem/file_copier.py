"""File and directory tree copy module."""
import os
import shutil
import stat
import tempfile
from typing import Optional

import aiofiles
import aiofiles.os
from aiofiles.ospath import wrap

from fsutils.core.config import settings
from fsutils.core.exceptions import FilesystemError, from_os_error
from fsutils.infrastructure.logging import get_logger

from .directory_creator import DirectoryCreator
from .paths import PathLike, resolve_path

logger = get_logger(__name__)

_copystat = wrap(shutil.copystat)

_SPECIAL_FILE_TYPES = {
    stat.S_IFIFO: "named pipe",
    stat.S_IFSOCK: "socket",
    stat.S_IFCHR: "character device",
    stat.S_IFBLK: "block device",
}


class FileCopier:
    """Copies files and directory trees."""

    def __init__(
        self,
        directory_creator: Optional[DirectoryCreator] = None,
        chunk_size: Optional[int] = None,
    ):
        self.directory_creator = directory_creator or DirectoryCreator()
        self.chunk_size = chunk_size or settings.copy_chunk_size

    async def copy(self, source: PathLike, destination: PathLike) -> None:
        """
        Copy a file or directory tree to destination.

        The destination's parent directory is created first. A file is
        written to a temporary sibling and moved into place, so a failed
        copy leaves no partial destination behind. Directories are merged
        into an existing destination. Only regular files and directories
        are copied.

        Raises:
            PathNotFoundError: source does not exist
            PermissionDeniedError: source unreadable or destination unwritable
            FilesystemError: special file in the source, or any other I/O failure
        """
        source_path = resolve_path(source)
        dest_path = resolve_path(destination)

        await self.directory_creator.mkdirs(os.path.dirname(dest_path))

        try:
            mode = (await aiofiles.os.stat(source_path)).st_mode
            if stat.S_ISDIR(mode):
                await self._copy_tree(source_path, dest_path)
            else:
                await self._copy_file(source_path, dest_path, mode)
        except OSError as e:
            raise from_os_error(e, e.filename or source_path) from e

        logger.debug("copy_completed", source=source_path, destination=dest_path)

    def copy_sync(self, source: PathLike, destination: PathLike) -> None:
        """Blocking version of copy."""
        source_path = resolve_path(source)
        dest_path = resolve_path(destination)

        self.directory_creator.mkdirs_sync(os.path.dirname(dest_path))

        try:
            mode = os.stat(source_path).st_mode
            if stat.S_ISDIR(mode):
                shutil.copytree(source_path, dest_path, dirs_exist_ok=True)
            else:
                self._copy_file_sync(source_path, dest_path, mode)
        except shutil.Error as e:
            # args[0] lists (source, destination, reason) per failed entry
            failures = e.args[0] if e.args and isinstance(e.args[0], list) else []
            failed_path = failures[0][0] if failures else source_path
            raise FilesystemError(
                failed_path, f"Failed to copy tree {source_path}: {failed_path}"
            ) from e
        except OSError as e:
            raise from_os_error(e, e.filename or source_path) from e

        logger.debug("copy_completed", source=source_path, destination=dest_path)

    async def _copy_file(self, source: str, destination: str, mode: int) -> None:
        self._check_regular_file(source, mode)

        # Open the source first so a missing source never creates a temp file
        async with aiofiles.open(source, "rb") as src:
            tmp_path = None
            try:
                tmp_path = self._create_temp_file(destination)
                async with aiofiles.open(tmp_path, "wb") as dst:
                    while True:
                        chunk = await src.read(self.chunk_size)
                        if not chunk:
                            break
                        await dst.write(chunk)
                await _copystat(source, tmp_path)
                await aiofiles.os.replace(tmp_path, destination)
            except Exception as e:
                if tmp_path is not None:
                    await self._discard_temp(tmp_path)
                if isinstance(e, OSError):
                    raise from_os_error(
                        e, self._failure_path(e, source, destination)
                    ) from e
                raise

    async def _copy_tree(self, source: str, destination: str) -> None:
        await self.directory_creator.mkdirs(destination)
        for name in await aiofiles.os.listdir(source):
            source_entry = os.path.join(source, name)
            dest_entry = os.path.join(destination, name)
            mode = (await aiofiles.os.stat(source_entry)).st_mode
            if stat.S_ISDIR(mode):
                await self._copy_tree(source_entry, dest_entry)
            else:
                await self._copy_file(source_entry, dest_entry, mode)
        await _copystat(source, destination)

    def _copy_file_sync(self, source: str, destination: str, mode: int) -> None:
        self._check_regular_file(source, mode)

        tmp_path = None
        try:
            tmp_path = self._create_temp_file(destination)
            shutil.copyfile(source, tmp_path)
            shutil.copystat(source, tmp_path)
            os.replace(tmp_path, destination)
        except Exception as e:
            if tmp_path is not None:
                self._discard_temp_sync(tmp_path)
            if isinstance(e, OSError):
                raise from_os_error(
                    e, self._failure_path(e, source, destination)
                ) from e
            raise

    def _check_regular_file(self, path: str, mode: int) -> None:
        if not stat.S_ISREG(mode):
            kind = _SPECIAL_FILE_TYPES.get(stat.S_IFMT(mode), "special file")
            raise FilesystemError(path, f"Cannot copy {kind}: {path}")

    def _failure_path(self, error: OSError, source: str, destination: str) -> str:
        # Never the temporary file
        if error.filename is not None and os.fspath(error.filename) == source:
            return source
        return destination

    def _create_temp_file(self, destination: str) -> str:
        with tempfile.NamedTemporaryFile(
            dir=os.path.dirname(destination),
            prefix=f".{os.path.basename(destination)}.",
            suffix=".tmp",
            delete=False,
        ) as tmp_file:
            return tmp_file.name

    async def _discard_temp(self, tmp_path: str) -> None:
        try:
            await aiofiles.os.remove(tmp_path)
        except FileNotFoundError:
            pass

    def _discard_temp_sync(self, tmp_path: str) -> None:
        try:
            os.remove(tmp_path)
        except FileNotFoundError:
            pass
