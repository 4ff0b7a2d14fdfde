"""Filtered directory listing module."""
import asyncio
import os
import stat
from typing import Callable, List, Optional

import aiofiles.os

from fsutils.infrastructure.logging import get_logger

from .paths import PathLike, resolve_path

logger = get_logger(__name__)

NameFilter = Callable[[str], bool]


class FileLister:
    """Lists regular files in a directory that pass a name filter."""

    async def list_files(
        self,
        directory: PathLike,
        file_filter: NameFilter,
        dir_filter: Optional[NameFilter] = None,
    ) -> List[str]:
        """
        List regular files in directory accepted by file_filter.

        Listing is best effort: an unreadable or missing directory yields
        an empty list and entries that cannot be stat'ed are skipped.
        Result order is not guaranteed.

        Args:
            directory: Directory to read
            file_filter: Called with each regular file name
            dir_filter: When given, subdirectories whose name it accepts are
                listed too and their files returned as "sub/name"

        Returns:
            Matching file names, relative to directory
        """
        return await self._list(resolve_path(directory), "", file_filter, dir_filter)

    def list_files_sync(
        self,
        directory: PathLike,
        file_filter: NameFilter,
        dir_filter: Optional[NameFilter] = None,
    ) -> List[str]:
        """Blocking version of list_files."""
        return self._list_sync(resolve_path(directory), "", file_filter, dir_filter)

    async def _list(
        self,
        directory: str,
        prefix: str,
        file_filter: NameFilter,
        dir_filter: Optional[NameFilter],
    ) -> List[str]:
        try:
            names = await aiofiles.os.listdir(directory)
        except OSError as e:
            logger.debug("directory_list_failed", path=directory, error=str(e))
            return []

        modes = await asyncio.gather(
            *(self._entry_mode(os.path.join(directory, name)) for name in names)
        )

        files, subdirectories = self._partition(names, modes, file_filter, dir_filter)
        results = [prefix + name for name in files]

        nested = await asyncio.gather(
            *(
                self._list(
                    os.path.join(directory, name),
                    f"{prefix}{name}/",
                    file_filter,
                    dir_filter,
                )
                for name in subdirectories
            )
        )
        for entries in nested:
            results.extend(entries)

        return results

    def _list_sync(
        self,
        directory: str,
        prefix: str,
        file_filter: NameFilter,
        dir_filter: Optional[NameFilter],
    ) -> List[str]:
        try:
            names = os.listdir(directory)
        except OSError as e:
            logger.debug("directory_list_failed", path=directory, error=str(e))
            return []

        modes = [self._entry_mode_sync(os.path.join(directory, name)) for name in names]

        files, subdirectories = self._partition(names, modes, file_filter, dir_filter)
        results = [prefix + name for name in files]

        for name in subdirectories:
            results.extend(
                self._list_sync(
                    os.path.join(directory, name),
                    f"{prefix}{name}/",
                    file_filter,
                    dir_filter,
                )
            )

        return results

    def _partition(self, names, modes, file_filter, dir_filter):
        files = []
        subdirectories = []
        for name, mode in zip(names, modes):
            if mode is None:
                continue
            if stat.S_ISREG(mode):
                if file_filter(name):
                    files.append(name)
            elif stat.S_ISDIR(mode) and dir_filter is not None and dir_filter(name):
                subdirectories.append(name)
        return files, subdirectories

    async def _entry_mode(self, path: str) -> Optional[int]:
        try:
            return (await aiofiles.os.stat(path)).st_mode
        except OSError:
            return None

    def _entry_mode_sync(self, path: str) -> Optional[int]:
        try:
            return os.stat(path).st_mode
        except OSError:
            return None
