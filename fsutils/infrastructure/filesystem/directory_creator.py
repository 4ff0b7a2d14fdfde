"""Recursive directory creation module."""
import os
from typing import Optional

import aiofiles.os

from fsutils.core.config import settings
from fsutils.core.exceptions import from_os_error
from fsutils.infrastructure.logging import get_logger

from .paths import PathLike, resolve_path

logger = get_logger(__name__)


PROC_STATUS_PATH = "/proc/self/status"


def current_umask() -> int:
    """
    Read the process umask.

    Linux exposes it in /proc/self/status. Elsewhere the umask is swapped
    out and restored, which briefly sets it to 0 for every thread.
    """
    try:
        with open(PROC_STATUS_PATH) as status:
            for line in status:
                if line.startswith("Umask:"):
                    return int(line.split()[1], 8)
    except (OSError, ValueError, IndexError):
        pass

    mask = os.umask(0)
    os.umask(mask)
    return mask


def default_mode() -> int:
    """Mode used for new directories when the caller passes none."""
    if settings.default_dir_mode is not None:
        return settings.default_dir_mode
    return 0o777 & ~current_umask()


class DirectoryCreator:
    """Creates a directory together with any missing ancestors."""

    def __init__(self, mode: Optional[int] = None):
        self.mode = mode

    def resolve_mode(self, mode: Optional[int] = None) -> int:
        if mode is not None:
            return mode
        if self.mode is not None:
            return self.mode
        return default_mode()

    async def mkdirs(self, path: PathLike, mode: Optional[int] = None) -> None:
        """
        Create directory by pathname, including missing parents.

        Succeeds when the directory already exists.

        Args:
            path: Directory to create
            mode: Permission mask, 0o777 minus the umask if omitted

        Raises:
            NotADirectoryPathError: path or an ancestor is not a directory
            PermissionDeniedError: creation not permitted
            FilesystemError: any other I/O failure
        """
        await self._mkdirs(resolve_path(path), self.resolve_mode(mode))

    def mkdirs_sync(self, path: PathLike, mode: Optional[int] = None) -> None:
        """Blocking version of mkdirs."""
        self._mkdirs_sync(resolve_path(path), self.resolve_mode(mode))

    async def _mkdirs(self, path: str, mode: int) -> None:
        try:
            await aiofiles.os.mkdir(path, mode)
        except FileNotFoundError as e:
            parent = os.path.dirname(path)
            if parent == path:
                raise from_os_error(e, path) from e
            await self._mkdirs(parent, mode)
            await self._mkdirs(path, mode)
            return
        except OSError as e:
            if await aiofiles.os.path.isdir(path):
                return
            raise from_os_error(e, path) from e

        logger.debug("directory_created", path=path, mode=oct(mode))

    def _mkdirs_sync(self, path: str, mode: int) -> None:
        try:
            os.mkdir(path, mode)
        except FileNotFoundError as e:
            parent = os.path.dirname(path)
            if parent == path:
                raise from_os_error(e, path) from e
            self._mkdirs_sync(parent, mode)
            self._mkdirs_sync(path, mode)
            return
        except OSError as e:
            if os.path.isdir(path):
                return
            raise from_os_error(e, path) from e

        logger.debug("directory_created", path=path, mode=oct(mode))
